"""In-memory key-value provider - process-local dict, lost on restart"""

import logging
import threading

from inspiration_list.config import Settings
from inspiration_list.providers.base import KeyValueProvider

logger = logging.getLogger(__name__)


class MemoryKeyValueProvider(KeyValueProvider):
    """Dict-backed provider for local development and tests"""

    def __init__(self, settings: Settings | None = None):
        self._data: dict[str, str] = {}
        self._lock = threading.Lock()
        logger.info("Memory key-value provider initialized")

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._data.get(key)

    def put(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._data.pop(key, None) is not None

    def list_keys(self, prefix: str = "") -> list[str]:
        with self._lock:
            return sorted(k for k in self._data if k.startswith(prefix))

    def get_name(self) -> str:
        return "memory"

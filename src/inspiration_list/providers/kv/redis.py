"""Redis key-value provider - Network-accessible store using Redis"""

import logging
from contextlib import contextmanager

import redis

from inspiration_list.config import Settings
from inspiration_list.errors import ServiceUnavailableError
from inspiration_list.providers.base import KeyValueProvider

logger = logging.getLogger(__name__)


class RedisKeyValueProvider(KeyValueProvider):
    """Redis-based key-value provider.

    Every key is stored under settings.redis_key_prefix so several
    deployments can share one Redis database. The connection is opened
    lazily by redis-py; connection failures surface as
    ServiceUnavailableError on the operation that hit them.
    """

    def __init__(self, settings: Settings):
        self.prefix = settings.redis_key_prefix
        self.client = redis.Redis(
            host=settings.redis_host,
            port=settings.redis_port,
            password=settings.redis_password or None,
            db=settings.redis_db,
            decode_responses=True  # Return strings instead of bytes
        )
        logger.info(f"Redis key-value provider configured: {settings.redis_host}:{settings.redis_port}")

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    @contextmanager
    def _connection_errors(self, operation: str):
        try:
            yield
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.error(f"Redis {operation} failed: {e}")
            raise ServiceUnavailableError("Storage backend is unavailable") from e

    def get(self, key: str) -> str | None:
        with self._connection_errors("get"):
            return self.client.get(self._key(key))

    def put(self, key: str, value: str) -> None:
        with self._connection_errors("set"):
            self.client.set(self._key(key), value)

    def delete(self, key: str) -> bool:
        with self._connection_errors("delete"):
            return self.client.delete(self._key(key)) > 0

    def list_keys(self, prefix: str = "") -> list[str]:
        with self._connection_errors("scan"):
            keys = self.client.scan_iter(match=f"{self.prefix}{prefix}*")
            return sorted(k[len(self.prefix):] for k in keys)

    def ping(self) -> bool:
        try:
            return bool(self.client.ping())
        except redis.RedisError as e:
            logger.warning(f"Redis ping failed: {e}")
            return False

    def get_name(self) -> str:
        return "redis"

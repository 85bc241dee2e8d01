"""Listing index: one JSON list of {id, createdAt} pointers, newest first."""

import json
import logging

from pydantic import ValidationError as PydanticValidationError

from inspiration_list.models import IndexEntry
from inspiration_list.providers.base import KeyValueProvider

logger = logging.getLogger(__name__)

INDEX_KEY = "inspirations:index"
RECORD_KEY_PREFIX = "record:"


def record_key(record_id: str) -> str:
    return f"{RECORD_KEY_PREFIX}{record_id}"


class RecordIndex:
    """Read-modify-write access to the index key.

    There is no locking: two writers racing on the index keep whichever
    write lands last.
    """

    def __init__(self, kv: KeyValueProvider, max_entries: int = 1000):
        self.kv = kv
        self.max_entries = max_entries

    def read(self) -> list[IndexEntry]:
        """Load the index. A corrupt or non-list value reads as empty."""
        raw = self.kv.get(INDEX_KEY)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            logger.warning(f"Index is not valid JSON, treating as empty: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"Index is a {type(data).__name__}, not a list; treating as empty")
            return []

        entries = []
        for item in data:
            try:
                entries.append(IndexEntry.model_validate(item))
            except PydanticValidationError:
                continue

        dropped = len(data) - len(entries)
        if dropped:
            logger.warning(f"Dropped {dropped} malformed index entries")
        return entries

    def write(self, entries: list[IndexEntry]) -> None:
        payload = [entry.to_json_dict() for entry in entries[:self.max_entries]]
        self.kv.put(INDEX_KEY, json.dumps(payload, ensure_ascii=False))

    def prepend(self, entry: IndexEntry) -> list[IndexEntry]:
        """Put entry at the head, evicting the oldest entries past the cap."""
        entries = [entry] + self.read()
        entries = entries[:self.max_entries]
        self.write(entries)
        return entries

    def remove(self, record_id: str) -> bool:
        """Drop every entry for record_id. Returns True if any were present."""
        entries = self.read()
        kept = [e for e in entries if e.id != record_id]
        if len(kept) == len(entries):
            return False
        self.write(kept)
        return True

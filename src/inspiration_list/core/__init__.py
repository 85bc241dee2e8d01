"""Record store and listing index."""

from .index import INDEX_KEY, RECORD_KEY_PREFIX, RecordIndex, record_key
from .store import RecordStore

__all__ = [
    "INDEX_KEY",
    "RECORD_KEY_PREFIX",
    "RecordIndex",
    "RecordStore",
    "record_key",
]

"""SQLite key-value provider - Lightweight durable store in a single file"""

import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path

from inspiration_list.config import Settings
from inspiration_list.errors import ServiceUnavailableError
from inspiration_list.providers.base import KeyValueProvider

logger = logging.getLogger(__name__)


class SQLiteKeyValueProvider(KeyValueProvider):
    """SQLite-based key-value provider"""

    def __init__(self, settings: Settings):
        self.db_path = Path(settings.kv_sqlite_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()
        logger.info(f"SQLite key-value provider initialized: {self.db_path}")

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection with row factory"""
        try:
            conn = sqlite3.connect(str(self.db_path))
        except sqlite3.OperationalError as e:
            logger.error(f"Failed to open SQLite store {self.db_path}: {e}")
            raise ServiceUnavailableError("Storage backend is unavailable") from e
        conn.row_factory = sqlite3.Row
        return conn

    def _init_db(self):
        """Initialize database schema"""
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.commit()

    def get(self, key: str) -> str | None:
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?",
                (key,)
            ).fetchone()
            return row["value"] if row else None

    def put(self, key: str, value: str) -> None:
        now = datetime.now(timezone.utc).isoformat()
        with self._get_connection() as conn:
            conn.execute(
                """
                INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                """,
                (key, value, now)
            )
            conn.commit()

    def delete(self, key: str) -> bool:
        with self._get_connection() as conn:
            cursor = conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            conn.commit()
            return cursor.rowcount > 0

    def list_keys(self, prefix: str = "") -> list[str]:
        # substr() comparison avoids LIKE wildcard escaping for '_' and '%'
        with self._get_connection() as conn:
            cursor = conn.execute(
                "SELECT key FROM kv_store WHERE substr(key, 1, ?) = ? ORDER BY key",
                (len(prefix), prefix)
            )
            return [row["key"] for row in cursor.fetchall()]

    def ping(self) -> bool:
        try:
            with self._get_connection() as conn:
                conn.execute("SELECT 1")
            return True
        except (sqlite3.Error, ServiceUnavailableError):
            return False

    def get_name(self) -> str:
        return "sqlite"

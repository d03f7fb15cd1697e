"""Key-value stores used by the expiring cache."""

import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, Protocol

from ..errors import PersistenceError
from ..logging.config import get_logger


class KeyValueStore(Protocol):
    """String key to string value store with no native expiration."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class InMemoryStore:
    """Dict-backed store; contents live as long as the process."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def keys(self, prefix: Optional[str] = None) -> list[str]:
        keys = list(self._data)
        if prefix is not None:
            keys = [k for k in keys if k.startswith(prefix)]
        return keys

    def __len__(self) -> int:
        return len(self._data)


class SQLiteStore:
    """SQLite-backed store, durable across process restarts."""

    def __init__(self, db_path: str = "catalog_cache.db"):
        self.db_path = Path(db_path)
        self.logger = get_logger("kv.store")
        self._lock = threading.Lock()

        self._init_database()

    def _init_database(self) -> None:
        """Initialize database schema."""
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)
            conn.commit()

    @contextmanager
    def _get_connection(self):
        """Get database connection with proper error handling."""
        conn = None
        try:
            conn = sqlite3.connect(self.db_path, timeout=30.0)
            yield conn
        except sqlite3.Error as e:
            if conn:
                conn.rollback()
            self.logger.error("Database error", db_path=str(self.db_path), error=str(e))
            raise PersistenceError(
                f"Key-value store failure: {e}",
                operation="connect",
                target=str(self.db_path)
            ) from e
        finally:
            if conn:
                conn.close()

    def get(self, key: str) -> Optional[str]:
        """Return the stored string for key, or None."""
        with self._get_connection() as conn:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
            return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        with self._lock:
            with self._get_connection() as conn:
                conn.execute(
                    "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)",
                    (key, value)
                )
                conn.commit()

    def keys(self, prefix: Optional[str] = None) -> list[str]:
        """List stored keys, optionally restricted to a prefix."""
        with self._get_connection() as conn:
            rows = conn.execute("SELECT key FROM kv ORDER BY key").fetchall()

        keys = [row[0] for row in rows]
        if prefix is not None:
            keys = [k for k in keys if k.startswith(prefix)]
        return keys


def create_store(backend: str = "sqlite", db_path: str = "catalog_cache.db") -> KeyValueStore:
    """Build the store named by configuration."""
    if backend == "memory":
        return InMemoryStore()
    if backend == "sqlite":
        return SQLiteStore(db_path)
    raise ValueError(f"Unknown store backend: {backend!r}")

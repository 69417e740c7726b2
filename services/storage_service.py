"""
Key-value storage providers for Recipe Keeper.

The collection stores only need a synchronous get/set over string values.
SQLiteStorage persists them in a single table; InMemoryStorage keeps them in
a dict and backs isolated stores in tests.
"""

import sqlite3
from abc import ABC, abstractmethod
from contextlib import contextmanager
from datetime import datetime
from typing import Dict, List, Optional

from utils import get_config, get_logger
from .exceptions import StorageError

logger = get_logger(__name__)


CREATE_KEY_VALUE_TABLE = """
CREATE TABLE IF NOT EXISTS key_value_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL
)
"""

GET_VALUE = "SELECT value FROM key_value_store WHERE key = ?"

SET_VALUE = """
INSERT INTO key_value_store (key, value, updated_at) VALUES (?, ?, ?)
ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
"""

LIST_KEYS = "SELECT key FROM key_value_store ORDER BY key"


class KeyValueStorage(ABC):
    """Synchronous key-value storage contract used by the collection stores"""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored string, or None if the key is absent"""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store `value` under `key`, replacing any previous value"""

    @abstractmethod
    def keys(self) -> List[str]:
        """All stored keys"""


class InMemoryStorage(KeyValueStorage):
    """Dict-backed storage, one isolated instance per store in tests"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def keys(self) -> List[str]:
        return sorted(self._data)


class SQLiteStorage(KeyValueStorage):
    """
    SQLite-backed storage.
    Opens a short-lived connection per call; in-memory databases keep one
    persistent connection so their contents survive between calls.
    """

    def __init__(self, db_path: str = "recipe_keeper.db"):
        self.db_path = db_path
        self._persistent_conn = None
        if db_path == ":memory:":
            self._persistent_conn = sqlite3.connect(db_path, check_same_thread=False)
        self._initialize_schema()

    def _initialize_schema(self):
        try:
            with self.get_connection() as conn:
                conn.execute(CREATE_KEY_VALUE_TABLE)
                conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to initialize storage at {self.db_path}: {e}") from e

    @contextmanager
    def get_connection(self):
        """Context manager for database connections with proper cleanup"""
        if self._persistent_conn:
            try:
                yield self._persistent_conn
            except Exception as e:
                self._persistent_conn.rollback()
                logger.error(f"Storage error: {e}")
                raise
        else:
            conn = None
            try:
                conn = sqlite3.connect(self.db_path)
                yield conn
            except Exception as e:
                if conn:
                    conn.rollback()
                logger.error(f"Storage error: {e}")
                raise
            finally:
                if conn:
                    conn.close()

    def get(self, key: str) -> Optional[str]:
        try:
            with self.get_connection() as conn:
                row = conn.execute(GET_VALUE, (key,)).fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to read '{key}': {e}", key=key) from e
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        try:
            with self.get_connection() as conn:
                conn.execute(SET_VALUE, (key, value, datetime.now().isoformat()))
                conn.commit()
        except (sqlite3.Error, UnicodeEncodeError) as e:
            raise StorageError(f"Failed to write '{key}': {e}", key=key) from e
        logger.debug(f"Stored {len(value)} characters under '{key}'")

    def keys(self) -> List[str]:
        try:
            with self.get_connection() as conn:
                return [row[0] for row in conn.execute(LIST_KEYS).fetchall()]
        except sqlite3.Error as e:
            raise StorageError(f"Failed to list keys: {e}") from e

    def close(self):
        if self._persistent_conn:
            self._persistent_conn.close()
            self._persistent_conn = None


# Global storage instance
_storage_service: Optional[KeyValueStorage] = None


def get_storage_service() -> KeyValueStorage:
    """Get singleton storage instance for the configured backend"""
    global _storage_service
    if _storage_service is None:
        config = get_config()
        if config.uses_sqlite():
            logger.info(f"Using SQLite storage: {config.database_path}")
            _storage_service = SQLiteStorage(config.database_path)
        else:
            logger.info("Using in-memory storage; collections will not survive a restart")
            _storage_service = InMemoryStorage()
    return _storage_service


def reset_storage_service():
    """Drop the singleton so the next call rebuilds it from config"""
    global _storage_service
    _storage_service = None

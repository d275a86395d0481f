"""
kv_store.py: SQLite-backed durable key/value records.
"""

import sqlite3
from typing import Optional

from .config import get_db_path
from .errors import PersistenceError
from .logger import get_logger

log = get_logger(__name__)


class KeyValueStore:
    """Handles all interaction with the SQLite database."""

    def __init__(self, db_file: Optional[str] = None):
        self.db_file = db_file or get_db_path()
        try:
            self.conn = sqlite3.connect(self.db_file)
            self.setup()
        except sqlite3.Error as e:
            raise PersistenceError(f"Cannot open {self.db_file}: {e}") from e

    def setup(self):
        """Creates the records table if it doesn't exist."""
        self.conn.execute("""
            CREATE TABLE IF NOT EXISTS Records (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """)
        self.conn.commit()

    def get(self, key: str) -> Optional[str]:
        """Fetches the stored value for key, or None when absent."""
        try:
            row = self.conn.execute(
                "SELECT value FROM Records WHERE key=?", (key,)).fetchone()
        except sqlite3.Error as e:
            raise PersistenceError(f"Read of {key!r} failed: {e}") from e
        return row[0] if row else None

    def set(self, key: str, value: str):
        """Replaces the value stored under key in a single transaction."""
        try:
            with self.conn:
                self.conn.execute(
                    "INSERT OR REPLACE INTO Records (key, value) VALUES (?, ?)", (key, value))
        except sqlite3.Error as e:
            raise PersistenceError(f"Write of {key!r} failed: {e}") from e

    def close(self):
        self.conn.close()
        log.debug("Closed %s", self.db_file)

"""
Local persistence for session records.
"""

import sqlite3
from typing import Optional

from ...config import get_settings


class LocalSessionStore:
    """Keyed single-record storage backed by a SQLite file."""

    def __init__(self, db_path: Optional[str] = None):
        if db_path is None:
            db_path = get_settings().local_session_db_path
        self.db_path = db_path
        self._ensure_table()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def _ensure_table(self) -> None:
        """Ensure the session table exists."""
        conn = self._connect()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS local_session (
                    key TEXT PRIMARY KEY,
                    record TEXT NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    def read(self, key: str) -> Optional[str]:
        """Return the raw record stored under ``key``, if any."""
        conn = self._connect()
        try:
            cur = conn.execute(
                "SELECT record FROM local_session WHERE key = ?", (key,)
            )
            row = cur.fetchone()
        finally:
            conn.close()
        return row[0] if row else None

    def write(self, key: str, record: str) -> None:
        """Replace the record stored under ``key``."""
        conn = self._connect()
        try:
            conn.execute(
                "INSERT OR REPLACE INTO local_session (key, record) VALUES (?, ?)",
                (key, record),
            )
            conn.commit()
        finally:
            conn.close()

    def remove(self, key: str) -> None:
        """Delete the record stored under ``key``; missing keys are fine."""
        conn = self._connect()
        try:
            conn.execute("DELETE FROM local_session WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()

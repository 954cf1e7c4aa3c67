"""SQLite persistence for feedback messages and mailing-list subscribers."""
from __future__ import annotations

import logging
import os
import sqlite3
from contextlib import closing
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "mitercruncher.db"

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS feedback (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        message TEXT NOT NULL,
        name TEXT,
        email TEXT,
        created_at TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS subscribers (
        email TEXT PRIMARY KEY,
        created_at TEXT NOT NULL
    )
    """,
)


class SubmissionStore:
    """Thin wrapper opening a short-lived connection per write."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.path))
        for statement in _SCHEMA:
            conn.execute(statement)
        return conn

    def add_feedback(self, message: str, name: Optional[str] = None, email: Optional[str] = None) -> None:
        now = datetime.now(timezone.utc).isoformat()
        with closing(self._connect()) as conn, conn:
            conn.execute(
                "INSERT INTO feedback (message, name, email, created_at) VALUES (?, ?, ?, ?)",
                (message, name, email, now),
            )
        logger.info("Stored feedback (%d chars)", len(message))

    def add_subscriber(self, email: str) -> bool:
        """Insert ``email``; an existing address is left alone. Returns True when newly added."""
        now = datetime.now(timezone.utc).isoformat()
        with closing(self._connect()) as conn, conn:
            cursor = conn.execute(
                "INSERT OR IGNORE INTO subscribers (email, created_at) VALUES (?, ?)",
                (email, now),
            )
            inserted = cursor.rowcount > 0
        logger.info("Subscriber %s %s", email, "added" if inserted else "already present")
        return inserted

    def feedback_messages(self) -> List[str]:
        with closing(self._connect()) as conn:
            rows = conn.execute("SELECT message FROM feedback ORDER BY id").fetchall()
        return [row[0] for row in rows]

    def subscribers(self) -> List[str]:
        with closing(self._connect()) as conn:
            rows = conn.execute("SELECT email FROM subscribers ORDER BY created_at, email").fetchall()
        return [row[0] for row in rows]


_store: Optional[SubmissionStore] = None


def get_store() -> SubmissionStore:
    global _store
    if _store is None:
        _store = SubmissionStore(os.getenv("MITERCRUNCHER_DB", DEFAULT_DB_PATH))
    return _store

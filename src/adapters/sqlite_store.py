"""SQLite storage adapter.

Implements the core RecordStore port using a local SQLite database, which is
handy for running the pipeline without AWS.
"""

from __future__ import annotations

import sqlite3
from typing import Optional

from core.models import Record


class SQLiteRecordStore:
    """Thin SQLite wrapper that satisfies the RecordStore contract."""

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def init_db(self) -> None:
        """Create the submissions table if it does not exist."""

        with self._connect() as conn:
            # submissions is an append-only log. message_id is the primary key,
            # so a repeated id fails the insert instead of overwriting a row.
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS submissions (
                    message_id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    email TEXT NOT NULL,
                    message TEXT NOT NULL,
                    created_at TEXT NOT NULL
                )
                """
            )

    def put(self, record: Record) -> None:
        """Insert the record into the submissions table."""

        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO submissions (
                    message_id,
                    name,
                    email,
                    message,
                    created_at
                ) VALUES (?, ?, ?, ?, ?)
                """,
                (
                    record.message_id,
                    record.name,
                    record.email,
                    record.message,
                    record.created_at,
                ),
            )

    def get(self, message_id: str) -> Optional[Record]:
        """Return a stored record by id, if any."""

        with self._connect() as conn:
            row = conn.execute(
                "SELECT * FROM submissions WHERE message_id = ?",
                (message_id,),
            ).fetchone()
        if row is None:
            return None
        return Record(
            message_id=row["message_id"],
            name=row["name"],
            email=row["email"],
            message=row["message"],
            created_at=row["created_at"],
        )

    def count(self) -> int:
        with self._connect() as conn:
            row = conn.execute("SELECT COUNT(*) AS total FROM submissions").fetchone()
        return int(row["total"])

"""
SQLite persistence for stars.

This module provides ``StarStore``, the handle every request goes
through to reach the database.  A store is created explicitly, opened
once on application startup (which also creates the ``stars`` table
if needed) and closed on shutdown.  It is handed to the service layer
rather than looked up from module state, so tests can run each case
against a fresh in-memory database.

All queries use parameterized statements.  Each public method runs a
single statement and commits it immediately; there are no
transactions spanning several calls.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import List, Optional

from .exceptions import DuplicateStarError, StoreConnectionError

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

SCHEMA = """
CREATE TABLE IF NOT EXISTS stars (
    name TEXT NOT NULL PRIMARY KEY,
    description TEXT NOT NULL DEFAULT '',
    url TEXT NOT NULL DEFAULT ''
)
"""


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    ``:memory:`` and absolute paths are returned unchanged.  Relative
    paths are resolved against the project root.
    """
    if database_url == MEMORY_DATABASE or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


class StarStore:
    """Handle around a single SQLite connection holding the ``stars`` table."""

    def __init__(self, database_url: str) -> None:
        self.database_url = database_url
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("StarStore is not open")
        return self._conn

    def open(self) -> "StarStore":
        """Connect to the database and create the schema if it is absent.

        Raises ``StoreConnectionError`` when the database cannot be
        opened; callers treat this as fatal.
        """
        if self._conn is not None:
            return self
        db_path = get_database_path(self.database_url)
        try:
            # The lifespan may open the store on a different thread from
            # the event loop that serves requests.
            conn = sqlite3.connect(db_path, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            conn.execute(SCHEMA)
            conn.commit()
        except sqlite3.Error as exc:
            raise StoreConnectionError(f"failed to connect database {db_path}: {exc}") from exc
        self._conn = conn
        logger.info("Opened star store at %s", db_path)
        return self

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.info("Closed star store")

    def __enter__(self) -> "StarStore":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def list_stars(self) -> List[sqlite3.Row]:
        """Return every row in insertion order."""
        return self.connection.execute(
            "SELECT name, description, url FROM stars ORDER BY rowid"
        ).fetchall()

    def get_star(self, name: str) -> Optional[sqlite3.Row]:
        """Return the row named ``name`` or ``None`` if there is none."""
        return self.connection.execute(
            "SELECT name, description, url FROM stars WHERE name = ?",
            (name,),
        ).fetchone()

    def insert_star(self, name: str, description: str, url: str) -> None:
        """Insert a new row.

        Raises ``DuplicateStarError`` if ``name`` is already taken; the
        table is left unchanged in that case.
        """
        conn = self.connection
        try:
            conn.execute(
                "INSERT INTO stars (name, description, url) VALUES (?, ?, ?)",
                (name, description, url),
            )
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            raise DuplicateStarError(name) from exc
        conn.commit()

    def update_star(self, name: str, new_name: str, description: str, url: str) -> int:
        """Overwrite the row currently named ``name``.

        An empty ``new_name`` keeps the current name.  Returns the
        number of rows affected, which is 0 when ``name`` is unknown.
        """
        conn = self.connection
        try:
            cursor = conn.execute(
                """
                UPDATE stars
                SET name = COALESCE(NULLIF(?, ''), name), description = ?, url = ?
                WHERE name = ?
                """,
                (new_name, description, url, name),
            )
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            raise DuplicateStarError(new_name) from exc
        conn.commit()
        return cursor.rowcount

    def delete_star(self, name: str) -> int:
        """Delete the row named ``name`` and return the number of rows removed."""
        conn = self.connection
        cursor = conn.execute("DELETE FROM stars WHERE name = ?", (name,))
        conn.commit()
        return cursor.rowcount

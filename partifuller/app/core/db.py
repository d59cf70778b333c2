"""
SQLite database integration and simple migration system.

This module provides the :class:`Database` handle used to obtain
connections, and ``init_db`` which applies migrations on application
start.  The handle is created once in ``create_app`` and passed to the
store explicitly, so tests can point it at a temporary file.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator

logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        -- Uniqueness of (name, email) is enforced here and nowhere else.
        -- AUTOINCREMENT keeps ids monotonic and never reused.
        CREATE TABLE IF NOT EXISTS rsvps (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            timestamp INTEGER NOT NULL DEFAULT (CAST(strftime('%s', 'now') AS INTEGER)),
            attending INTEGER NOT NULL CHECK (attending IN (0, 1)),
            UNIQUE (name, email)
        );
        """,
    ),
]


class Database:
    """Handle on the SQLite file backing the service.

    Every operation opens its own connection and closes it when done,
    so no connection outlives a single store call.
    """

    def __init__(self, path: str) -> None:
        if path == ":memory:":
            raise ValueError("An in-memory database cannot persist RSVPs; use a file path")
        self.path = os.path.abspath(path)

    def connect(self) -> sqlite3.Connection:
        """Create and return a new SQLite connection.

        Rows are returned as ``sqlite3.Row`` so columns can be read by
        name.
        """
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, commit on success and always close the connection."""
        conn = self.connect()
        try:
            yield conn.cursor()
            conn.commit()
        except BaseException:
            conn.rollback()
            raise
        finally:
            conn.close()


def init_db(database: Database) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  Errors propagate: a store that cannot be opened at
    startup is fatal.
    """
    with database.cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying migration %s to %s", version, database.path)
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version

"""
Persistent storage for RSVP records.

``RsvpStore`` wraps the ``rsvps`` table.  The uniqueness of the
(name, email) pair is enforced by the table's UNIQUE constraint, so a
duplicate is detected by the insert itself rather than by a separate
lookup beforehand; two identical submissions racing each other cannot
both succeed.

All queries use parameterized statements.  Driver exceptions are
logged and re-raised as :class:`StoreError` subclasses; their text is
never forwarded to callers as a message.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from partifuller.app.core.db import Database
from partifuller.app.core.exceptions import DuplicateEntry, StorageFailure
from partifuller.app.schemas.rsvp import RsvpRecord

logger = logging.getLogger(__name__)


def _is_unique_violation(exc: sqlite3.IntegrityError) -> bool:
    # sqlite_errorname exists on Python 3.11+; older versions only expose the message.
    errorname = getattr(exc, "sqlite_errorname", None)
    if errorname is not None:
        return errorname == "SQLITE_CONSTRAINT_UNIQUE"
    return "UNIQUE constraint failed" in str(exc)


class RsvpStore:
    """Insert and list RSVP records."""

    def __init__(self, database: Database) -> None:
        self.database = database

    async def insert(self, name: str, email: str, attending: bool) -> RsvpRecord:
        """Insert a new RSVP and return the stored record.

        ``name`` and ``email`` are expected to be normalised already.
        Raises ``DuplicateEntry`` when the pair already exists and
        ``StorageFailure`` on any other database error.
        """
        try:
            with self.database.cursor() as cursor:
                cursor.execute(
                    "INSERT INTO rsvps (name, email, attending) VALUES (?, ?, ?)",
                    (name, email, int(attending)),
                )
                rsvp_id = cursor.lastrowid
                row = cursor.execute(
                    "SELECT * FROM rsvps WHERE id = ?",
                    (rsvp_id,),
                ).fetchone()
        except sqlite3.IntegrityError as exc:
            if _is_unique_violation(exc):
                logger.info("Rejected duplicate RSVP")
                raise DuplicateEntry("name and email already responded") from exc
            logger.exception("Constraint error while inserting RSVP")
            raise StorageFailure("insert failed") from exc
        except sqlite3.Error as exc:
            logger.exception("Database error while inserting RSVP")
            raise StorageFailure("insert failed") from exc
        logger.info("Created RSVP %s", rsvp_id)
        return self._row_to_record(row)

    async def list_all(self) -> List[RsvpRecord]:
        """Return every RSVP in insertion order."""
        try:
            with self.database.cursor() as cursor:
                rows = cursor.execute("SELECT * FROM rsvps ORDER BY id ASC").fetchall()
        except sqlite3.Error as exc:
            logger.exception("Database error while listing RSVPs")
            raise StorageFailure("list failed") from exc
        return [self._row_to_record(row) for row in rows]

    async def get(self, rsvp_id: int) -> Optional[RsvpRecord]:
        """Retrieve a single RSVP by its ID, or ``None``."""
        try:
            with self.database.cursor() as cursor:
                row = cursor.execute(
                    "SELECT * FROM rsvps WHERE id = ?",
                    (rsvp_id,),
                ).fetchone()
        except sqlite3.Error as exc:
            logger.exception("Database error while fetching RSVP %s", rsvp_id)
            raise StorageFailure("get failed") from exc
        if not row:
            return None
        return self._row_to_record(row)

    async def count(self) -> int:
        """Return the number of stored RSVPs."""
        try:
            with self.database.cursor() as cursor:
                row = cursor.execute("SELECT COUNT(*) AS total FROM rsvps").fetchone()
        except sqlite3.Error as exc:
            logger.exception("Database error while counting RSVPs")
            raise StorageFailure("count failed") from exc
        return row["total"]

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> RsvpRecord:
        """Convert a database row to an RsvpRecord schema instance."""
        return RsvpRecord(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            attending=bool(row["attending"]),
            timestamp=row["timestamp"],
        )

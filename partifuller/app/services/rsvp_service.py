"""
Business logic for RSVPs.

``RsvpService.submit`` runs the submit-and-refresh workflow:

1. validate the raw submission (no store access if it fails);
2. insert the normalised record;
3. list every record again and return the fresh list.

If the insert succeeds but the listing fails, the caller gets
``ServiceUnavailable`` rather than a stale or empty list.  Nothing is
retried here; retry policy belongs to the caller.
"""

import logging
from typing import List, Optional

from partifuller.app.core.exceptions import (
    DuplicateEntry,
    InvalidRsvp,
    RsvpConflict,
    RsvpValidationError,
    ServiceUnavailable,
    StorageFailure,
)
from partifuller.app.schemas.rsvp import RsvpRecord, RsvpSubmission
from partifuller.app.services.rsvp_store import RsvpStore
from partifuller.app.services.validator import validate

logger = logging.getLogger(__name__)


class RsvpService:
    """Orchestrates validation, storage and the refreshed listing."""

    def __init__(self, store: RsvpStore) -> None:
        self.store = store

    async def submit(self, raw: RsvpSubmission) -> List[RsvpRecord]:
        """Validate and store ``raw``, then return all RSVPs.

        Raises ``InvalidRsvp``, ``RsvpConflict`` or ``ServiceUnavailable``.
        """
        try:
            rsvp = validate(raw)
        except RsvpValidationError as exc:
            logger.info("Rejected invalid RSVP: %s", exc.message)
            raise InvalidRsvp(exc.message) from exc

        try:
            record = await self.store.insert(rsvp.name, rsvp.email, rsvp.attending)
        except DuplicateEntry as exc:
            raise RsvpConflict() from exc
        except StorageFailure as exc:
            raise ServiceUnavailable() from exc

        try:
            return await self.store.list_all()
        except StorageFailure as exc:
            # The write is committed; only the confirmatory read failed.
            logger.error("RSVP %s stored but the refreshed list could not be loaded", record.id)
            raise ServiceUnavailable() from exc

    async def list_rsvps(self) -> List[RsvpRecord]:
        """Return all RSVPs in insertion order."""
        try:
            return await self.store.list_all()
        except StorageFailure as exc:
            raise ServiceUnavailable() from exc

    async def get_rsvp(self, rsvp_id: int) -> Optional[RsvpRecord]:
        """Return a single RSVP, or ``None`` if no record has that id."""
        try:
            return await self.store.get(rsvp_id)
        except StorageFailure as exc:
            raise ServiceUnavailable() from exc

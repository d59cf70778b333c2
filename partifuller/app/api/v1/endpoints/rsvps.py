"""
RSVP endpoints for API v1.

JSON counterpart of the HTML form: the same :class:`RsvpService` runs
behind both, so validation, uniqueness and ordering are identical.
Errors are returned as ``{"detail": message}`` with 400 for client
errors and 500 for infrastructure failures.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from partifuller.app.api.deps import get_service
from partifuller.app.core.exceptions import InvalidRsvp, RsvpConflict, ServiceUnavailable
from partifuller.app.schemas.rsvp import RsvpRecord, RsvpSubmission
from partifuller.app.services.rsvp_service import RsvpService

router = APIRouter()


@router.get("/", response_model=List[RsvpRecord])
async def list_rsvps(service: RsvpService = Depends(get_service)) -> List[RsvpRecord]:
    """Return all RSVPs in the order they were submitted."""
    try:
        return await service.list_rsvps()
    except ServiceUnavailable as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message) from e


@router.post("/", response_model=List[RsvpRecord], status_code=status.HTTP_201_CREATED)
async def create_rsvp(
    submission: RsvpSubmission,
    service: RsvpService = Depends(get_service),
) -> List[RsvpRecord]:
    """Submit an RSVP and return the refreshed list.

    Returns HTTP 400 if the submission is invalid or the name and email
    pair has already been used.
    """
    try:
        return await service.submit(submission)
    except (InvalidRsvp, RsvpConflict) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except ServiceUnavailable as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message) from e


@router.get("/{rsvp_id}", response_model=RsvpRecord)
async def get_rsvp(rsvp_id: int, service: RsvpService = Depends(get_service)) -> RsvpRecord:
    """Retrieve a single RSVP by ID.

    Returns HTTP 404 if the RSVP is not found.
    """
    try:
        rsvp = await service.get_rsvp(rsvp_id)
    except ServiceUnavailable as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message) from e
    if rsvp is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="RSVP not found")
    return rsvp

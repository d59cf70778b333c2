"""
Pydantic models for RSVP data.

``RsvpSubmission`` holds the raw form or JSON values exactly as the
client sent them; nothing is trimmed or converted at this stage.
``ValidatedRsvp`` is what the validator produces and the only thing the
store accepts.  ``RsvpRecord`` is a persisted row.
"""

from pydantic import BaseModel, Field


class RsvpSubmission(BaseModel):
    """Raw submission before normalisation."""

    name: str = Field("", examples=["Alice"])
    email: str = Field("", examples=["alice@example.com"])
    attending: str = Field("", description="Either 'yes' or 'no'", examples=["yes"])


class ValidatedRsvp(BaseModel):
    """Trimmed, checked submission ready to be stored."""

    name: str
    email: str
    attending: bool

    model_config = {
        "frozen": True,
    }


class RsvpRecord(BaseModel):
    """Schema for reading a stored RSVP."""

    id: int
    name: str
    email: str
    attending: bool
    timestamp: int

    model_config = {
        "from_attributes": True,
    }

"""Normalisation and checks applied to a submission before it is stored."""

from partifuller.app.core.exceptions import EmptyField, InvalidAttendingValue
from partifuller.app.schemas.rsvp import RsvpSubmission, ValidatedRsvp

ATTENDING_VALUES = {"yes": True, "no": False}


def validate(submission: RsvpSubmission) -> ValidatedRsvp:
    """Trim and check a raw submission.

    Trimming happens here, before the uniqueness constraint is applied,
    so ``"Bob "`` and ``"Bob"`` collide in the store.  ``attending`` is
    matched case-sensitively against ``yes`` and ``no``.

    Raises ``EmptyField`` or ``InvalidAttendingValue``.
    """
    name = submission.name.strip()
    if not name:
        raise EmptyField("name")
    email = submission.email.strip()
    if not email:
        raise EmptyField("email")
    try:
        attending = ATTENDING_VALUES[submission.attending]
    except KeyError:
        raise InvalidAttendingValue(submission.attending) from None
    return ValidatedRsvp(name=name, email=email, attending=attending)

"""
Exception types raised across the RSVP service.

Three layers raise their own family of errors:

* the validator raises :class:`RsvpValidationError` subclasses when a
  raw submission is malformed;
* the record store raises :class:`StoreError` subclasses for
  constraint violations and driver failures;
* the RSVP service translates both into :class:`ServiceError`
  subclasses, which are the only errors the HTTP layer has to know.

Service errors carry a ``message`` that is safe to show to a client.
Driver error text never ends up in it.
"""


class RsvpValidationError(Exception):
    """A raw submission could not be normalised."""

    message = "Invalid RSVP."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class EmptyField(RsvpValidationError):
    """A required field was empty after trimming whitespace."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Your {field} must not be empty!")


class InvalidAttendingValue(RsvpValidationError):
    """The ``attending`` value was neither ``yes`` nor ``no``."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__("Please answer 'yes' or 'no' for attending.")


class StoreError(Exception):
    """Base class for record store failures."""


class DuplicateEntry(StoreError):
    """A record with the same name and email already exists."""


class StorageFailure(StoreError):
    """Any other I/O or constraint error raised by the database."""


class RenderError(Exception):
    """The template engine is misconfigured or a template failed to render."""


class ServiceError(Exception):
    """Base class for errors surfaced by :class:`RsvpService`."""

    message = "Something went wrong. Please try again later."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidRsvp(ServiceError):
    """The submission failed validation; nothing was written."""


class RsvpConflict(ServiceError):
    """The (name, email) pair is already taken."""

    message = "Your name and email must be unique!"


class ServiceUnavailable(ServiceError):
    """Storage or rendering infrastructure failed."""

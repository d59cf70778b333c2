import pytest
from pydantic import ValidationError

from partifuller.app.core.exceptions import EmptyField, InvalidAttendingValue
from partifuller.app.schemas.rsvp import RsvpSubmission
from partifuller.app.services.validator import validate


def test_validate_trims_name_and_email():
    rsvp = validate(RsvpSubmission(name="  Bob ", email="\tbob@x.com\n", attending="yes"))

    assert rsvp.name == "Bob"
    assert rsvp.email == "bob@x.com"
    assert rsvp.attending is True


def test_validate_maps_no_to_false():
    rsvp = validate(RsvpSubmission(name="Bob", email="bob@x.com", attending="no"))
    assert rsvp.attending is False


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_validate_rejects_empty_name(name: str):
    with pytest.raises(EmptyField) as excinfo:
        validate(RsvpSubmission(name=name, email="bob@x.com", attending="yes"))
    assert excinfo.value.field == "name"
    assert "name" in excinfo.value.message


def test_validate_rejects_blank_email():
    with pytest.raises(EmptyField) as excinfo:
        validate(RsvpSubmission(name="Bob", email="  ", attending="yes"))
    assert excinfo.value.field == "email"


def test_validate_checks_name_before_email():
    with pytest.raises(EmptyField) as excinfo:
        validate(RsvpSubmission(name="", email="", attending="maybe"))
    assert excinfo.value.field == "name"


@pytest.mark.parametrize("token", ["Y", "", "true", "YES", "Yes", " yes", "1"])
def test_validate_rejects_other_attending_tokens(token: str):
    with pytest.raises(InvalidAttendingValue) as excinfo:
        validate(RsvpSubmission(name="Bob", email="bob@x.com", attending=token))
    assert excinfo.value.value == token


def test_validated_rsvp_is_frozen():
    rsvp = validate(RsvpSubmission(name="Bob", email="bob@x.com", attending="yes"))
    with pytest.raises(ValidationError):
        rsvp.name = "Alice"

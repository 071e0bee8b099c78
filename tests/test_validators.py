# =============================================================================
# tests/test_validators.py - Presence Check Tests
# =============================================================================

import pytest

from user_records_api.app.core.exceptions import ValidationError
from user_records_api.app.schemas.user import UserCreate, UserUpdate
from user_records_api.app.services.validators import (
    validate_create,
    validate_lookup,
    validate_update,
)


class TestValidateCreate:

    def test_complete_candidate_passes(self):
        validate_create(UserCreate(email="a@x.com", firstName="A", lastName="B"))

    @pytest.mark.parametrize(
        "payload, missing",
        [
            ({"firstName": "A", "lastName": "B"}, ["email"]),
            ({"email": "a@x.com", "lastName": "B"}, ["firstName"]),
            ({"email": "a@x.com", "firstName": "A"}, ["lastName"]),
            ({"email": "", "firstName": "", "lastName": ""}, ["email", "firstName", "lastName"]),
            ({}, ["email", "firstName", "lastName"]),
        ],
    )
    def test_reports_every_missing_field(self, payload, missing):
        with pytest.raises(ValidationError) as exc_info:
            validate_create(UserCreate(**payload))
        assert exc_info.value.missing_fields == missing
        assert exc_info.value.status_code == 400

    def test_whitespace_counts_as_present(self):
        validate_create(UserCreate(email=" ", firstName=" ", lastName=" "))


class TestValidateUpdate:

    def test_email_and_one_name_passes(self):
        validate_update(UserUpdate(email="a@x.com", firstName="A"))
        validate_update(UserUpdate(email="a@x.com", lastName="B"))

    def test_missing_email(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_update(UserUpdate(firstName="A"))
        assert exc_info.value.missing_fields == ["email"]

    def test_email_checked_before_names(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_update(UserUpdate())
        assert exc_info.value.missing_fields == ["email"]

    @pytest.mark.parametrize("first, last", [(None, None), ("", ""), ("", None)])
    def test_both_names_empty(self, first, last):
        with pytest.raises(ValidationError) as exc_info:
            validate_update(UserUpdate(email="a@x.com", firstName=first, lastName=last))
        assert exc_info.value.missing_fields == ["firstName|lastName"]


class TestValidateLookup:

    def test_present_email_passes(self):
        validate_lookup("a@x.com")

    @pytest.mark.parametrize("email", [None, ""])
    def test_empty_email(self, email):
        with pytest.raises(ValidationError) as exc_info:
            validate_lookup(email)
        assert exc_info.value.missing_fields == ["email"]

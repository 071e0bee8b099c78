"""Presence checks for each user operation.  Pure functions, no I/O."""

from typing import List, Optional

from ..core.exceptions import ValidationError
from ..schemas.user import UserCreate, UserUpdate


def _is_empty(value: Optional[str]) -> bool:
    return value is None or value == ""


def validate_create(candidate: UserCreate) -> None:
    """Require ``email``, ``firstName`` and ``lastName``.

    All missing fields are reported at once.
    """
    missing: List[str] = []
    if _is_empty(candidate.email):
        missing.append("email")
    if _is_empty(candidate.first_name):
        missing.append("firstName")
    if _is_empty(candidate.last_name):
        missing.append("lastName")
    if missing:
        raise ValidationError(missing)


def validate_update(candidate: UserUpdate) -> None:
    """Require ``email`` and at least one of the two name fields."""
    if _is_empty(candidate.email):
        raise ValidationError(["email"])
    if _is_empty(candidate.first_name) and _is_empty(candidate.last_name):
        raise ValidationError(["firstName|lastName"])


def validate_lookup(email: Optional[str]) -> None:
    if _is_empty(email):
        raise ValidationError(["email"])

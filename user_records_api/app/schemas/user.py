"""
Pydantic models for user data.

Field names are snake_case in Python and camelCase on the wire
(``firstName``, ``lastName``).  The input models make every field
optional so that presence checks are done by
``services.validators`` and reported as a single 400 listing all the
missing fields, rather than by pydantic.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """A persisted user record as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(..., examples=["john@example.com"])
    first_name: str = Field(..., alias="firstName", examples=["John"])
    last_name: str = Field(..., alias="lastName", examples=["Doe"])


class UserCreate(BaseModel):
    """Schema for creating a user.  All three fields are required."""

    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = Field(None, examples=["john@example.com"])
    first_name: Optional[str] = Field(None, alias="firstName", examples=["John"])
    last_name: Optional[str] = Field(None, alias="lastName", examples=["Doe"])


class UserUpdate(BaseModel):
    """Schema for a partial update.

    ``email`` selects the record and cannot itself be changed.  A name
    field that is omitted, ``null`` or ``""`` leaves the stored value
    untouched; at least one of the two must carry a value.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = Field(None, examples=["john@example.com"])
    first_name: Optional[str] = Field(None, alias="firstName", examples=["Johnny"])
    last_name: Optional[str] = Field(None, alias="lastName")

"""
Client schemas for request/response validation.
Covers the client document and its embedded addresses and contact persons.
"""

from pydantic import Field, field_validator

from app.core.config import settings
from app.schemas.base import BaseSchema, Email, TimestampSchema, as_list, blank_to_none


# Addresses

class AddressCreate(BaseSchema):
    """Schema for adding an address to a client."""

    line1: str = Field(..., min_length=1, max_length=255)
    line2: str | None = Field(None, max_length=255)
    line3: str | None = Field(None, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    country: str = Field(default=settings.DEFAULT_COUNTRY, max_length=100)
    pin: int
    gstin: str | None = Field(None, max_length=20)


class AddressUpdate(BaseSchema):
    """Partial address update. Empty values keep the stored ones."""

    line1: str | None = Field(None, max_length=255)
    line2: str | None = Field(None, max_length=255)
    line3: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=100)
    country: str | None = Field(None, max_length=100)
    pin: int | None = None
    gstin: str | None = Field(None, max_length=20)

    @field_validator("*", mode="before")
    @classmethod
    def drop_blank(cls, value):
        return blank_to_none(value)


class AddressResponse(BaseSchema):
    """Embedded address as returned to the caller."""

    id: str
    line1: str
    line2: str | None = None
    line3: str | None = None
    city: str
    state: str
    country: str
    pin: int
    gstin: str | None = None


# Contact persons

class ContactPersonCreate(BaseSchema):
    """Schema for adding a contact person to a client."""

    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    designation: str | None = Field(None, max_length=255)
    contact_numbers: list[int] = Field(..., min_length=1)
    emails: list[Email] = Field(..., min_length=1)

    @field_validator("contact_numbers", "emails", mode="before")
    @classmethod
    def wrap_single_value(cls, value):
        return as_list(value)


class ContactPersonUpdate(BaseSchema):
    """
    Partial contact person update.
    A number or email is appended to the stored list unless already there.
    """

    first_name: str | None = Field(None, max_length=255)
    last_name: str | None = Field(None, max_length=255)
    designation: str | None = Field(None, max_length=255)
    contact_numbers: int | list[int] | None = None
    emails: Email | list[Email] | None = None

    @field_validator("*", mode="before")
    @classmethod
    def drop_blank(cls, value):
        return blank_to_none(value)


class ContactPersonResponse(BaseSchema):
    """Embedded contact person as returned to the caller."""

    id: str
    first_name: str
    last_name: str
    designation: str | None = None
    contact_numbers: list[int]
    emails: list[str]


# Clients

class ClientCreate(BaseSchema):
    """Schema for creating a new client."""

    name: str = Field(..., min_length=1, max_length=255)
    division: str | None = Field(None, max_length=255)
    vertical: str | None = Field(None, max_length=255)
    contact_numbers: list[int] = Field(default_factory=list)
    emails: list[Email] = Field(..., min_length=1)
    logo: str | None = Field(None, max_length=500)

    @field_validator("contact_numbers", "emails", mode="before")
    @classmethod
    def wrap_single_value(cls, value):
        return as_list(value)


class ClientUpdate(BaseSchema):
    """
    Partial client update.
    Scalars replace the stored value when given, numbers and emails
    are appended to the stored lists.
    """

    name: str | None = Field(None, max_length=255)
    division: str | None = Field(None, max_length=255)
    vertical: str | None = Field(None, max_length=255)
    contact_numbers: int | list[int] | None = None
    emails: Email | list[Email] | None = None
    logo: str | None = Field(None, max_length=500)

    @field_validator("*", mode="before")
    @classmethod
    def drop_blank(cls, value):
        return blank_to_none(value)


class ClientResponse(TimestampSchema):
    """Client response schema."""

    id: int
    name: str
    division: str | None
    vertical: str | None
    logo: str | None
    contact_numbers: list[int]
    emails: list[str]
    addresses: list[AddressResponse]
    contact_persons: list[ContactPersonResponse]

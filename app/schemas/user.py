"""
User schemas for request/response validation.
"""

from pydantic import Field, field_validator

from app.schemas.base import BaseSchema, Email, TimestampSchema, as_list, blank_to_none


class UserCreate(BaseSchema):
    """Schema for creating a new user."""

    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: Email
    user_type: list[str] = Field(..., min_length=1)
    password: str = Field(..., min_length=6, description="Minimum 6 characters")
    avatar: str | None = Field(None, max_length=500)

    @field_validator("user_type", mode="before")
    @classmethod
    def wrap_single_value(cls, value):
        return as_list(value)


class UserUpdate(BaseSchema):
    """Partial user update. A user type is appended unless already held."""

    first_name: str | None = Field(None, max_length=255)
    last_name: str | None = Field(None, max_length=255)
    email: Email | None = None
    user_type: str | list[str] | None = None
    password: str | None = Field(None, min_length=6)
    avatar: str | None = Field(None, max_length=500)

    @field_validator("*", mode="before")
    @classmethod
    def drop_blank(cls, value):
        return blank_to_none(value)


class UserDelete(BaseSchema):
    """Body of the user deletion request."""

    id: int


class UserResponse(TimestampSchema):
    """User response schema (public data, never the password)."""

    id: int
    first_name: str
    last_name: str
    email: Email
    user_type: list[str]
    avatar: str | None

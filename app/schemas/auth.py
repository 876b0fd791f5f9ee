"""
Authentication schemas.
"""

from pydantic import Field

from app.schemas.base import BaseSchema, Email


class LoginRequest(BaseSchema):
    """Login request schema."""

    email: Email
    password: str = Field(..., min_length=1)


class Token(BaseSchema):
    """Access token response."""

    access_token: str
    token_type: str = "bearer"

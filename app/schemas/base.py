"""
Base schema configuration and common schemas.
"""

from datetime import datetime
from typing import Annotated, Any
from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.
    Attributes are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        alias_generator=to_camel,
    )


class TimestampSchema(BaseSchema):
    """Schema with timestamp fields."""

    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseSchema):
    """Simple message response."""

    message: str
    success: bool = True


def as_list(value: Any) -> Any:
    """Accept a single value where a list is expected."""
    if value is None or isinstance(value, list):
        return value
    return [value]


def blank_to_none(value: Any) -> Any:
    """Treat an empty or whitespace-only string as an absent value."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def check_email(value: str) -> str:
    """
    Check the shape of an email address.
    The value is kept exactly as sent: no case folding or other
    normalization, so stored lists compare addresses verbatim.
    """
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(str(exc)) from exc
    return value


Email = Annotated[str, AfterValidator(check_email)]

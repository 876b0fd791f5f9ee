"""
Pydantic schemas for request/response validation.
"""

from app.schemas.user import (
    UserCreate,
    UserUpdate,
    UserDelete,
    UserResponse,
)
from app.schemas.client import (
    ClientCreate,
    ClientUpdate,
    ClientResponse,
    AddressCreate,
    AddressUpdate,
    AddressResponse,
    ContactPersonCreate,
    ContactPersonUpdate,
    ContactPersonResponse,
)
from app.schemas.auth import (
    Token,
    LoginRequest,
)

__all__ = [
    # User
    "UserCreate",
    "UserUpdate",
    "UserDelete",
    "UserResponse",
    # Client
    "ClientCreate",
    "ClientUpdate",
    "ClientResponse",
    "AddressCreate",
    "AddressUpdate",
    "AddressResponse",
    "ContactPersonCreate",
    "ContactPersonUpdate",
    "ContactPersonResponse",
    # Auth
    "Token",
    "LoginRequest",
]

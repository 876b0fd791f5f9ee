"""
Database models module.
All SQLAlchemy models are exported from here for easy imports.
"""

from app.models.user import User
from app.models.client import Client


__all__ = [
    "User",
    "Client",
]

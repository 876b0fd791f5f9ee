"""
User model for back-office staff.
"""

from typing import Optional, List
from sqlalchemy import String, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import EntityModel


class User(EntityModel):
    """
    User model representing an agency staff member.

    Attributes:
        first_name: First name
        last_name: Last name
        email: Unique email for authentication
        user_type: Roles of the user (recruiter, admin...)
        hashed_password: Bcrypt hashed password
        avatar: Avatar URL
    """

    __tablename__ = "users"

    first_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    last_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    # Authentication
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    hashed_password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    user_type: Mapped[List[str]] = mapped_column(
        JSON,
        default=list,
        nullable=False,
    )
    avatar: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"

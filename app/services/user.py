"""
User service.
Handles back-office user management.
"""

import logging

from sqlalchemy import select

from app.core.exceptions import ConflictError
from app.core.security import get_password_hash
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate
from app.services.base import BaseService
from app.services.merge import merge_user


logger = logging.getLogger(__name__)


class UserService(BaseService[User]):
    """Service for user operations."""

    model = User
    not_found_detail = "User does not exist"
    conflict_detail = "User already exists"

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email."""
        result = await self.db.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    async def create(self, data: UserCreate) -> User:
        """
        Create a new user with a hashed password.

        Raises:
            ConflictError: If email already exists
        """
        if await self.get_by_email(data.email):
            raise ConflictError(self.conflict_detail)

        user = User(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            user_type=data.user_type,
            hashed_password=get_password_hash(data.password),
            avatar=data.avatar,
        )
        self.db.add(user)
        user = await self.save(user)

        logger.info("User %s created (id=%s)", user.email, user.id)
        return user

    async def update(self, user: User, data: UserUpdate) -> User:
        """
        Merge a partial update into the user.

        Raises:
            ConflictError: If the new email belongs to another user
        """
        values = merge_user(user, data)

        if values["email"] != user.email:
            other = await self.get_by_email(values["email"])
            if other is not None and other.id != user.id:
                raise ConflictError(self.conflict_detail)

        for field, value in values.items():
            setattr(user, field, value)

        if data.password:
            user.hashed_password = get_password_hash(data.password)

        return await self.save(user)

    async def delete(self, user: User) -> None:
        await self.remove(user)
        logger.info("User %s deleted", user.id)

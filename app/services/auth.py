"""
Authentication service.
Handles login and token issuance.
"""

import logging

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.schemas.auth import LoginRequest, Token
from app.core.security import create_user_token, verify_password
from app.services.user import UserService


logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.users = UserService(db)

    def issue_token(self, user: User) -> Token:
        """Issue an access token for the user."""
        return Token(access_token=create_user_token(user.id, user.email))

    async def login(self, data: LoginRequest) -> tuple[User, Token]:
        """
        Authenticate user and generate a token.

        Args:
            data: Login credentials

        Returns:
            Tuple of (user, token)

        Raises:
            HTTPException: If credentials are invalid
        """
        user = await self.users.get_by_email(data.email)

        if not user or not verify_password(data.password, user.hashed_password):
            logger.warning("Failed login for %s", data.email)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid credentials",
            )

        return user, self.issue_token(user)

"""
API Dependencies.
Common dependencies for authentication, database sessions, etc.
"""

import logging
from typing import Annotated
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.security import decode_token
from app.models.user import User
from app.services.user import UserService


# Logger
logger = logging.getLogger(__name__)

# Bearer token security scheme
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Resolve the current user from the JWT access token.

    Args:
        credentials: Bearer JWT credentials
        db: Database session

    Returns:
        The authenticated User

    Raises:
        HTTPException: If the token is invalid or the user does not exist
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if not credentials:
        logger.warning("Access attempt without token")
        raise credentials_exception

    token_data = decode_token(credentials.credentials)

    if token_data is None or token_data.user_id is None:
        logger.warning("Invalid or expired token")
        raise credentials_exception

    user = await UserService(db).get_by_id(token_data.user_id)

    if user is None:
        logger.warning(f"User {token_data.user_id} not found")
        raise credentials_exception

    logger.debug(f"Authenticated user: {user.email}")
    return user


# Type aliases for cleaner route signatures
CurrentUser = Annotated[User, Depends(get_current_user)]
DbSession = Annotated[AsyncSession, Depends(get_db)]

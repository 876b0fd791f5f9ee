"""
Authentication endpoints.
Login and current user.
"""

from fastapi import APIRouter

from app.api.deps import DbSession, CurrentUser
from app.schemas.auth import LoginRequest, Token
from app.schemas.user import UserResponse
from app.services.auth import AuthService


router = APIRouter()


@router.post(
    "",
    response_model=Token,
    summary="Login",
    description="Authenticate with email and password",
)
async def login(
    data: LoginRequest,
    db: DbSession,
) -> Token:
    """Log in and get a JWT access token."""
    service = AuthService(db)
    _, token = await service.login(data)
    return token


@router.get(
    "",
    response_model=UserResponse,
    summary="Current user",
    description="Get the user the token was issued for",
)
async def get_current_user(
    current_user: CurrentUser,
) -> UserResponse:
    """Get the authenticated user profile."""
    return UserResponse.model_validate(current_user)

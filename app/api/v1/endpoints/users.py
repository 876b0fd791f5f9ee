"""
User management endpoints.
Registration, listing, partial update and deletion of back-office users.
"""

from fastapi import APIRouter, status

from app.api.deps import DbSession
from app.schemas.auth import Token
from app.schemas.user import UserCreate, UserUpdate, UserDelete, UserResponse
from app.schemas.base import MessageResponse
from app.services.auth import AuthService
from app.services.user import UserService


router = APIRouter()


@router.post(
    "",
    response_model=Token,
    status_code=status.HTTP_201_CREATED,
    summary="Register user",
    description="Create a user and return an access token for it",
)
async def create_user(
    data: UserCreate,
    db: DbSession,
) -> Token:
    """Register a user."""
    user = await UserService(db).create(data)
    return AuthService(db).issue_token(user)


@router.get(
    "",
    response_model=list[UserResponse],
    summary="List users",
)
async def list_users(
    db: DbSession,
) -> list[UserResponse]:
    users = await UserService(db).get_all()
    return [UserResponse.model_validate(u) for u in users]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user by ID",
)
async def get_user(
    user_id: int,
    db: DbSession,
) -> UserResponse:
    user = await UserService(db).get_or_404(user_id)
    return UserResponse.model_validate(user)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update user by ID",
    description="Replace given fields, append a new user type.",
)
async def update_user(
    user_id: int,
    data: UserUpdate,
    db: DbSession,
) -> UserResponse:
    service = UserService(db)
    user = await service.get_or_404(user_id)
    user = await service.update(user, data)
    return UserResponse.model_validate(user)


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete user by ID",
    description="The user ID is given in the request body",
)
async def delete_user(
    data: UserDelete,
    db: DbSession,
) -> MessageResponse:
    service = UserService(db)
    user = await service.get_or_404(data.id)
    await service.delete(user)
    return MessageResponse(message="User deleted")

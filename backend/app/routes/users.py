"""
CodeMate Backend — User Route Handlers
========================================

What:  Registration, profile editing, and the two user lookups.
Who:   Called by the frontend sign-in flow and the settings page.

Sign-in flow:
    1. Frontend receives (provider, provider_id, name, email...) from the IdP
    2. POST /api/auth/lookup → existing account, or null
    3. On null: POST /api/users to register
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.routes.params import PathId
from app.schemas.common import ErrorResponse
from app.schemas.user import AuthLookup, UserCreate, UserResponse, UserUpdate
from app.services.user_service import user_service

router = APIRouter(prefix="/api", tags=["Users"])


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"description": "Email already registered", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Register a user",
)
async def create_user(
    payload: UserCreate,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    return await user_service.create_user(db, payload)


@router.patch(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={
        404: {"description": "User not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Update a user's profile",
    description=(
        "Partial update: omitted fields are left unchanged. "
        "avatar_url may be cleared by sending null."
    ),
)
async def update_user(
    user_id: PathId,
    payload: UserUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    return await user_service.update_user(db, user_id, payload)


@router.get(
    "/users/{user_id}",
    response_model=Optional[UserResponse],
    summary="Get a user by id",
    description="Returns null when no user has this id.",
)
async def get_user(
    user_id: PathId,
    db: AsyncSession = Depends(get_db_session),
) -> Optional[UserResponse]:
    return await user_service.get_user_by_id(db, user_id)


@router.post(
    "/auth/lookup",
    response_model=Optional[UserResponse],
    summary="Find the account for an identity-provider login",
    description=(
        "Looks the user up by (auth_provider, auth_provider_id). "
        "Returns null when the identity is not registered yet."
    ),
)
async def lookup_user_by_auth(
    payload: AuthLookup,
    db: AsyncSession = Depends(get_db_session),
) -> Optional[UserResponse]:
    return await user_service.get_user_by_auth(db, payload)

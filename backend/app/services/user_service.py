"""
CodeMate Backend — User Service
=================================

What:  Registration, profile updates, and the two user point lookups.
Who:   Called by the users/auth route handlers.

Lookup semantics:
    get_user_by_id / get_user_by_auth return None for "no such user" and only
    raise on unexpected store errors. Sign-in flows call get_user_by_auth first
    and fall back to create_user when it returns None.

Error Handling Strategy:
    Duplicate emails are rejected by the UNIQUE constraint; the resulting
    IntegrityError is logged and re-raised unchanged (main.py maps it to 409).
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import CodeMateError
from app.models.base import utcnow
from app.models.user import User
from app.schemas.user import AuthLookup, UserCreate, UserResponse, UserUpdate
from app.services.crud import apply_partial_update, get_or_raise

logger = logging.getLogger(__name__)


class UserService:
    """Business logic layer for user accounts."""

    async def create_user(self, db: AsyncSession, payload: UserCreate) -> UserResponse:
        """
        Register a new user.

        Returns:
            UserResponse with the store-assigned id; created_at == updated_at.

        Raises:
            IntegrityError: email already registered
        """
        now = utcnow()
        user = User(
            email=payload.email,
            name=payload.name,
            avatar_url=payload.avatar_url,
            auth_provider=payload.auth_provider,
            auth_provider_id=payload.auth_provider_id,
            preferred_coding_language=payload.preferred_coding_language,
            preferred_ai_model=payload.preferred_ai_model,
            created_at=now,
            updated_at=now,
        )
        try:
            db.add(user)
            await db.flush()  # Assigns id; UNIQUE(email) is checked here
        except IntegrityError:
            logger.warning(
                "User creation rejected by the store (provider=%s, provider_id=%s)",
                payload.auth_provider.value,
                payload.auth_provider_id,
            )
            raise
        except Exception as e:
            logger.error("User creation failed: %s", str(e), exc_info=True)
            raise

        logger.info("User %s created via %s", user.id, user.auth_provider.value)
        return UserResponse.model_validate(user)

    async def update_user(
        self, db: AsyncSession, user_id: int, payload: UserUpdate
    ) -> UserResponse:
        """
        Apply a partial profile update.

        Raises:
            NotFoundError: no user with this id
        """
        try:
            user = await get_or_raise(db, User, user_id, "user")
            changes = apply_partial_update(user, payload)
            await db.flush()
        except CodeMateError:
            raise
        except Exception as e:
            logger.error("User update failed for %s: %s", user_id, str(e), exc_info=True)
            raise

        logger.info("User %s updated (fields=%s)", user_id, sorted(changes))
        return UserResponse.model_validate(user)

    async def get_user_by_id(self, db: AsyncSession, user_id: int) -> Optional[UserResponse]:
        try:
            user = await db.get(User, user_id)
        except Exception as e:
            logger.error("User lookup failed for %s: %s", user_id, str(e), exc_info=True)
            raise
        return UserResponse.model_validate(user) if user is not None else None

    async def get_user_by_auth(
        self, db: AsyncSession, payload: AuthLookup
    ) -> Optional[UserResponse]:
        """
        Find the account registered under (auth_provider, auth_provider_id).

        Query plan:
            SELECT * FROM users
            WHERE auth_provider = :provider AND auth_provider_id = :provider_id
            LIMIT 1
            → Uses users_auth_provider_idx
        """
        try:
            result = await db.execute(
                select(User)
                .where(
                    User.auth_provider == payload.auth_provider,
                    User.auth_provider_id == payload.auth_provider_id,
                )
                .limit(1)
            )
            user = result.scalar_one_or_none()
        except Exception as e:
            logger.error(
                "Auth lookup failed for %s/%s: %s",
                payload.auth_provider.value,
                payload.auth_provider_id,
                str(e),
                exc_info=True,
            )
            raise
        return UserResponse.model_validate(user) if user is not None else None


# ── Singleton Instance ────────────────────────────────────────────────────
user_service = UserService()

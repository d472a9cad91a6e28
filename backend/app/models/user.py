"""
CodeMate Backend — User SQLAlchemy Model
==========================================

What:  ORM model representing the `users` table.
Why:   Root of every ownership chain: projects and conversations point back here.
Who:   Used by UserService for CRUD and by the access rules for existence checks.

Table Design Rationale:
    - email UNIQUE: one account per address, enforced by the database so the
      duplicate surfaces as an IntegrityError from the store
    - (auth_provider, auth_provider_id) indexed but NOT unique: the same
      provider id string may legitimately exist under two different providers
    - Deleting a user cascades to projects and conversations via the foreign
      keys declared on those tables
"""

from datetime import datetime

from sqlalchemy import Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.base import TimestampMixin
from app.models.enums import (
    AIModel,
    AuthProvider,
    CodingLanguage,
    ai_model_type,
    auth_provider_type,
    coding_language_type,
)


class User(TimestampMixin, Base):
    """
    A person signed in through Google, Facebook, or email.

    Lifecycle:
        1. Created by UserService.create_user (registration)
        2. Profile fields mutated by UserService.update_user
        3. Looked up by id or by (auth_provider, auth_provider_id) at sign-in
    """

    __tablename__ = "users"

    # ── Primary Key ───────────────────────────────────────────────────────
    # Serial integer allocated by the store
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # ── Identity ──────────────────────────────────────────────────────────
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    avatar_url: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    # ── Authentication ────────────────────────────────────────────────────
    auth_provider: Mapped[AuthProvider] = mapped_column(auth_provider_type(), nullable=False)
    auth_provider_id: Mapped[str] = mapped_column(Text, nullable=False)

    # ── Preferences ───────────────────────────────────────────────────────
    preferred_coding_language: Mapped[CodingLanguage] = mapped_column(
        coding_language_type(), nullable=False
    )
    preferred_ai_model: Mapped[AIModel] = mapped_column(ai_model_type(), nullable=False)

    __table_args__ = (
        Index("users_email_idx", "email"),
        Index("users_auth_provider_idx", "auth_provider", "auth_provider_id"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', provider='{self.auth_provider}')>"

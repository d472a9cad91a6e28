"""
CodeMate Backend — User Request/Response Schemas
==================================================

What:  API contract for registration, profile updates, and sign-in lookup.
Why:   Malformed input (bad email, unknown provider, empty name) is rejected
       by FastAPI with 422 before UserService runs.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.models.enums import AIModel, AuthProvider, CodingLanguage
from app.schemas.common import ensure_url, reject_null


class UserCreate(BaseModel):
    """Body of POST /api/users."""
    email: EmailStr = Field(description="Unique email address")
    name: str = Field(min_length=1, description="Display name")
    avatar_url: Optional[str] = Field(default=None, description="Avatar image URL")
    auth_provider: AuthProvider
    auth_provider_id: str = Field(min_length=1, description="Subject id issued by the provider")
    preferred_coding_language: CodingLanguage
    preferred_ai_model: AIModel

    @field_validator("avatar_url")
    @classmethod
    def validate_avatar_url(cls, v: Optional[str]) -> Optional[str]:
        return ensure_url(v)


class UserUpdate(BaseModel):
    """
    Body of PATCH /api/users/{id}.

    Only profile fields are mutable; email and auth identity are fixed at
    registration. avatar_url may be cleared with an explicit null.
    """
    name: Optional[str] = Field(default=None, min_length=1)
    avatar_url: Optional[str] = None
    preferred_coding_language: Optional[CodingLanguage] = None
    preferred_ai_model: Optional[AIModel] = None

    @field_validator("name", "preferred_coding_language", "preferred_ai_model")
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)

    @field_validator("avatar_url")
    @classmethod
    def validate_avatar_url(cls, v: Optional[str]) -> Optional[str]:
        return ensure_url(v)


class AuthLookup(BaseModel):
    """
    Body of POST /api/auth/lookup.

    The client sends everything it got from the identity provider; only the
    (auth_provider, auth_provider_id) pair is used to find the account. The
    remaining fields are validated so a follow-up registration can reuse them.
    """
    auth_provider: AuthProvider
    auth_provider_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=6)
    avatar_url: Optional[str] = None

    @field_validator("avatar_url")
    @classmethod
    def validate_avatar_url(cls, v: Optional[str]) -> Optional[str]:
        return ensure_url(v)


class UserResponse(BaseModel):
    id: int
    email: str
    name: str
    avatar_url: Optional[str] = None
    auth_provider: AuthProvider
    auth_provider_id: str
    preferred_coding_language: CodingLanguage
    preferred_ai_model: AIModel
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

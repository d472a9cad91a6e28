"""
CodeMate Backend — Conversation Request/Response Schemas
==========================================================
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.models.enums import AIModel
from app.schemas.common import RowId, reject_null


class ConversationCreate(BaseModel):
    """
    Body of POST /api/conversations.

    user_id is the acting user; it must own project_id.
    """
    project_id: RowId
    user_id: RowId
    title: str = Field(min_length=1)
    ai_model: AIModel


class ConversationUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    ai_model: Optional[AIModel] = None

    @field_validator("title", "ai_model")
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)


class ConversationResponse(BaseModel):
    id: int
    project_id: int
    user_id: int
    title: str
    ai_model: AIModel
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

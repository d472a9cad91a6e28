"""
CodeMate Backend — CodeSnippet Request/Response Schemas
=========================================================
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.models.enums import CodingLanguage
from app.schemas.common import RowId, reject_null


class CodeSnippetCreate(BaseModel):
    """
    Body of POST /api/code-snippets.

    message_id, when given, must point at a message of the same conversation.
    """
    conversation_id: RowId
    message_id: Optional[RowId] = None
    title: str = Field(min_length=1)
    code: str = Field(min_length=1)
    language: CodingLanguage
    description: Optional[str] = None


class CodeSnippetUpdate(BaseModel):
    """Body of PATCH /api/code-snippets/{id}. description may be cleared with null."""
    title: Optional[str] = Field(default=None, min_length=1)
    code: Optional[str] = Field(default=None, min_length=1)
    language: Optional[CodingLanguage] = None
    description: Optional[str] = None

    @field_validator("title", "code", "language")
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)


class CodeSnippetResponse(BaseModel):
    id: int
    conversation_id: int
    message_id: Optional[int] = None
    title: str
    code: str
    language: CodingLanguage
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

"""
CodeMate Backend — Project Request/Response Schemas
=====================================================
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.models.enums import CodingLanguage
from app.schemas.common import RowId, reject_null


class ProjectCreate(BaseModel):
    """Body of POST /api/projects."""
    user_id: RowId = Field(description="Owning user")
    name: str = Field(min_length=1)
    description: Optional[str] = None
    coding_language: CodingLanguage


class ProjectUpdate(BaseModel):
    """Body of PATCH /api/projects/{id}. description may be cleared with null."""
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    coding_language: Optional[CodingLanguage] = None

    @field_validator("name", "coding_language")
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)


class ProjectResponse(BaseModel):
    id: int
    user_id: int
    name: str
    description: Optional[str] = None
    coding_language: CodingLanguage
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

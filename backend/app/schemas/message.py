"""
CodeMate Backend — Message Request/Response Schemas
=====================================================

Metadata:
    A free-form JSON object (model parameters, token counts, error states...).
    No schema is enforced on its contents; omitted and null both store NULL.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, Field

from app.models.enums import MessageRole
from app.schemas.common import RowId


class MessageCreate(BaseModel):
    """Body of POST /api/messages. Messages are immutable once created."""
    conversation_id: RowId
    role: MessageRole
    content: str = Field(min_length=1)
    metadata: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Arbitrary JSON object stored alongside the message",
    )


class MessageResponse(BaseModel):
    id: int
    conversation_id: int
    role: MessageRole
    content: str
    # ORM attribute is `metadata_` (Base.metadata is taken); dicts use `metadata`
    metadata: Optional[Dict[str, Any]] = Field(
        default=None,
        validation_alias=AliasChoices("metadata_", "metadata"),
    )
    created_at: datetime

    model_config = {"from_attributes": True}

"""
CodeMate Backend — Message SQLAlchemy Model
=============================================

What:  ORM model representing the `messages` table.
Why:   Stores both user prompts and assistant replies of a conversation.

Immutability:
    Messages are never updated after insert, so there is no updated_at column.

Metadata column:
    The database column is named `metadata`, but that name is reserved on
    declarative classes (Base.metadata is the schema registry), so the Python
    attribute is `metadata_`. Contents are an opaque JSON mapping; a Python
    None is stored as SQL NULL rather than the JSON literal 'null'.
"""

from typing import Any, Dict, Optional

from sqlalchemy import JSON, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.base import CreatedAtMixin
from app.models.enums import MessageRole, message_role_type


class Message(CreatedAtMixin, Base):
    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    conversation_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("conversations.id", ondelete="CASCADE", name="messages_conversation_id_fk"),
        nullable=False,
    )
    role: Mapped[MessageRole] = mapped_column(message_role_type(), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    metadata_: Mapped[Optional[Dict[str, Any]]] = mapped_column(
        "metadata",
        JSON(none_as_null=True),
        nullable=True,
        default=None,
    )

    # created_at index serves the chronological listing
    __table_args__ = (
        Index("messages_conversation_id_idx", "conversation_id"),
        Index("messages_created_at_idx", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Message(id={self.id}, conversation_id={self.conversation_id}, role='{self.role}')>"

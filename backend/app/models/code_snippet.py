"""
CodeMate Backend — CodeSnippet SQLAlchemy Model
=================================================

What:  ORM model representing the `code_snippets` table.
Why:   Code saved from a conversation, optionally pinned to the message it came from.

Cascade:
    conversation_id → conversations.id ON DELETE CASCADE
    message_id      → messages.id      ON DELETE SET NULL
    Removing the source message keeps the snippet but detaches it.

There is no owner column: ownership is derived through the conversation.
"""

from sqlalchemy import ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.base import TimestampMixin
from app.models.enums import CodingLanguage, coding_language_type


class CodeSnippet(TimestampMixin, Base):
    __tablename__ = "code_snippets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    conversation_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("conversations.id", ondelete="CASCADE", name="code_snippets_conversation_id_fk"),
        nullable=False,
    )
    message_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("messages.id", ondelete="SET NULL", name="code_snippets_message_id_fk"),
        nullable=True,
        default=None,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    code: Mapped[str] = mapped_column(Text, nullable=False)
    language: Mapped[CodingLanguage] = mapped_column(coding_language_type(), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    __table_args__ = (
        Index("code_snippets_conversation_id_idx", "conversation_id"),
        Index("code_snippets_message_id_idx", "message_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<CodeSnippet(id={self.id}, conversation_id={self.conversation_id}, "
            f"message_id={self.message_id}, language='{self.language}')>"
        )

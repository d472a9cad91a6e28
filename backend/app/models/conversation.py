"""
CodeMate Backend — Conversation SQLAlchemy Model
==================================================

What:  ORM model representing the `conversations` table.
Why:   One chat session with a specific AI model inside a project.

Ownership:
    user_id duplicates the owning project's user_id. The copy is checked by
    ConversationService at creation time (not by a database constraint) and
    lets snippet deletion verify ownership with a single join.
"""

from sqlalchemy import ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.base import TimestampMixin
from app.models.enums import AIModel, ai_model_type


class Conversation(TimestampMixin, Base):
    __tablename__ = "conversations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE", name="conversations_project_id_fk"),
        nullable=False,
    )
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE", name="conversations_user_id_fk"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    ai_model: Mapped[AIModel] = mapped_column(ai_model_type(), nullable=False)

    __table_args__ = (
        Index("conversations_project_id_idx", "project_id"),
        Index("conversations_user_id_idx", "user_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Conversation(id={self.id}, project_id={self.project_id}, "
            f"ai_model='{self.ai_model}')>"
        )

"""
CodeMate Backend — Project SQLAlchemy Model
=============================================

What:  ORM model representing the `projects` table.
Why:   Groups a user's conversations by topic and coding language.

Cascade:
    projects.user_id → users.id ON DELETE CASCADE
    Deleting a project removes its conversations (and, transitively, their
    messages and code snippets) through the foreign keys on those tables.
"""

from sqlalchemy import ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.base import TimestampMixin
from app.models.enums import CodingLanguage, coding_language_type


class Project(TimestampMixin, Base):
    """A named workspace owned by exactly one user."""

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE", name="projects_user_id_fk"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    coding_language: Mapped[CodingLanguage] = mapped_column(coding_language_type(), nullable=False)

    # Listing is always "projects of user X, most recently touched first"
    __table_args__ = (
        Index("projects_user_id_idx", "user_id"),
    )

    def __repr__(self) -> str:
        return f"<Project(id={self.id}, user_id={self.user_id}, name='{self.name}')>"

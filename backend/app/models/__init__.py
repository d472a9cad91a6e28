"""
ORM models. Importing this package registers every table on Base.metadata,
which Alembic autogenerate and the test fixtures' create_all() rely on.
"""

from app.models.code_snippet import CodeSnippet
from app.models.conversation import Conversation
from app.models.message import Message
from app.models.project import Project
from app.models.user import User

__all__ = ["User", "Project", "Conversation", "Message", "CodeSnippet"]

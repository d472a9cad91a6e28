"""
CodeMate Backend — Referential Integrity Tests
================================================

What:  Verifies the ON DELETE rules declared on the foreign keys.
How:   Counts rows with column-level SELECTs so nothing is served from the
       session's identity map.

    project deleted      → its conversations, messages, snippets are gone
    user deleted         → everything the user owns is gone
    message deleted      → snippets survive with message_id = NULL
"""

import pytest
from sqlalchemy import delete, func, select

from app.models import CodeSnippet, Conversation, Message, Project, User
from app.services.project_service import project_service


async def _count(db, model, *criteria) -> int:
    result = await db.execute(select(func.count()).select_from(model).where(*criteria))
    return result.scalar_one()


class TestProjectCascade:
    """Tests for ON DELETE CASCADE below a project."""

    @pytest.mark.asyncio
    async def test_delete_project_removes_descendants(self, db_session, factory, workspace):
        """Deleting a project should remove its conversations, messages and snippets."""
        user, project = workspace["user"], workspace["project"]
        conversation_id = workspace["conversation"].id
        message = await factory.message(conversation_id)
        await factory.snippet(conversation_id, message_id=message.id)
        await factory.snippet(conversation_id)

        assert await project_service.delete_project(db_session, project.id, user.id) is True

        assert await _count(db_session, Conversation, Conversation.project_id == project.id) == 0
        assert await _count(db_session, Message, Message.conversation_id == conversation_id) == 0
        assert await _count(db_session, CodeSnippet, CodeSnippet.conversation_id == conversation_id) == 0
        assert await _count(db_session, User, User.id == user.id) == 1

    @pytest.mark.asyncio
    async def test_sibling_project_untouched(self, db_session, factory, workspace):
        """Deleting one project should leave the user's other projects intact."""
        user = workspace["user"]
        sibling = await factory.project(user.id, name="sibling")
        sibling_conversation = await factory.conversation(sibling.id, user.id)
        await factory.message(sibling_conversation.id)

        await project_service.delete_project(db_session, workspace["project"].id, user.id)

        assert await _count(db_session, Conversation, Conversation.project_id == sibling.id) == 1
        assert await _count(
            db_session, Message, Message.conversation_id == sibling_conversation.id
        ) == 1


class TestUserCascade:
    """Tests for ON DELETE CASCADE below a user."""

    @pytest.mark.asyncio
    async def test_delete_user_removes_everything_owned(self, db_session, factory, workspace):
        """Deleting a user should remove every row they own."""
        user = workspace["user"]
        conversation_id = workspace["conversation"].id
        await factory.message(conversation_id)
        await factory.snippet(conversation_id)

        await db_session.execute(delete(User).where(User.id == user.id))

        assert await _count(db_session, Project, Project.user_id == user.id) == 0
        assert await _count(db_session, Conversation, Conversation.user_id == user.id) == 0
        assert await _count(db_session, Message, Message.conversation_id == conversation_id) == 0
        assert await _count(db_session, CodeSnippet, CodeSnippet.conversation_id == conversation_id) == 0


class TestMessageSetNull:
    """Tests for ON DELETE SET NULL on snippet.message_id."""

    @pytest.mark.asyncio
    async def test_snippet_survives_message_deletion(self, db_session, factory, workspace):
        """Deleting a message should keep its snippet with message_id cleared."""
        conversation_id = workspace["conversation"].id
        message = await factory.message(conversation_id)
        snippet = await factory.snippet(conversation_id, message_id=message.id)

        await db_session.execute(delete(Message).where(Message.id == message.id))

        result = await db_session.execute(
            select(CodeSnippet.message_id).where(CodeSnippet.id == snippet.id)
        )
        assert result.one() == (None,)

"""
CodeMate Backend — Conversation Service Tests
===============================================

What we test:
    ✅ Create requires an existing user who owns the project
    ✅ A missing project and a foreign project produce the same error
    ✅ Update title / AI model
    ✅ Listing per project, most recently updated first
"""

import pytest

from app.exceptions import NotFoundError
from app.models.enums import AIModel
from app.schemas.conversation import ConversationCreate, ConversationUpdate
from app.services.conversation_service import ConversationService


class TestCreateConversation:
    """Tests for create_conversation and its ownership checks."""

    def setup_method(self):
        self.service = ConversationService()

    @pytest.mark.asyncio
    async def test_create_in_own_project(self, factory):
        """Owner should be able to open a conversation in their project."""
        user = await factory.user()
        project = await factory.project(user.id)

        conversation = await factory.conversation(
            project.id, user.id, title="Refactor reducer", ai_model=AIModel.CLAUDE_SONNET
        )

        assert conversation.project_id == project.id
        assert conversation.user_id == user.id
        assert conversation.title == "Refactor reducer"
        assert conversation.ai_model == AIModel.CLAUDE_SONNET
        assert conversation.created_at == conversation.updated_at

    @pytest.mark.asyncio
    async def test_missing_user(self, db_session, factory):
        """Unknown user should raise NotFoundError for the user."""
        owner = await factory.user()
        project = await factory.project(owner.id)
        payload = ConversationCreate(
            project_id=project.id, user_id=999, title="t", ai_model=AIModel.GPT_4
        )

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.create_conversation(db_session, payload)

        assert exc_info.value.resource == "user"

    @pytest.mark.asyncio
    async def test_foreign_and_missing_project_look_the_same(self, db_session, factory):
        """Another user's project should be indistinguishable from a missing one."""
        owner = await factory.user()
        intruder = await factory.user()
        project = await factory.project(owner.id)

        with pytest.raises(NotFoundError) as foreign:
            await self.service.create_conversation(
                db_session,
                ConversationCreate(
                    project_id=project.id, user_id=intruder.id, title="t", ai_model=AIModel.GPT_4
                ),
            )
        with pytest.raises(NotFoundError) as missing:
            await self.service.create_conversation(
                db_session,
                ConversationCreate(
                    project_id=5555, user_id=intruder.id, title="t", ai_model=AIModel.GPT_4
                ),
            )

        assert foreign.value.resource == missing.value.resource == "project"
        assert foreign.value.message == (
            f"project with ID '{project.id}' was not found "
            f"or does not belong to user '{intruder.id}'"
        )
        assert missing.value.message == (
            "project with ID '5555' was not found "
            f"or does not belong to user '{intruder.id}'"
        )


class TestUpdateConversation:
    """Tests for partial conversation updates."""

    def setup_method(self):
        self.service = ConversationService()

    @pytest.mark.asyncio
    async def test_switch_model(self, db_session, workspace):
        """Switching the AI model should keep the title and bump updated_at."""
        conversation = workspace["conversation"]

        updated = await self.service.update_conversation(
            db_session, conversation.id, ConversationUpdate(ai_model=AIModel.GPT_4)
        )

        assert updated.ai_model == AIModel.GPT_4
        assert updated.title == conversation.title
        assert updated.updated_at > conversation.updated_at

    @pytest.mark.asyncio
    async def test_update_missing_conversation(self, db_session):
        """Updating a missing conversation should raise NotFoundError."""
        with pytest.raises(NotFoundError) as exc_info:
            await self.service.update_conversation(db_session, 8, ConversationUpdate(title="x"))

        assert exc_info.value.resource == "conversation"


class TestListConversations:
    """Tests for get_project_conversations."""

    def setup_method(self):
        self.service = ConversationService()

    @pytest.mark.asyncio
    async def test_most_recently_updated_first(self, db_session, factory, workspace):
        """Conversations should list most recently updated first."""
        user, project = workspace["user"], workspace["project"]
        first = workspace["conversation"]
        second = await factory.conversation(project.id, user.id, title="second")

        listed = await self.service.get_project_conversations(db_session, project.id)
        assert [c.id for c in listed] == [second.id, first.id]

        await self.service.update_conversation(db_session, first.id, ConversationUpdate(title="bumped"))

        listed = await self.service.get_project_conversations(db_session, project.id)
        assert [c.id for c in listed] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_other_projects_excluded(self, db_session, factory, workspace):
        """Only the requested project's conversations should be returned."""
        user = workspace["user"]
        other_project = await factory.project(user.id, name="other")
        await factory.conversation(other_project.id, user.id)

        listed = await self.service.get_project_conversations(db_session, workspace["project"].id)

        assert [c.id for c in listed] == [workspace["conversation"].id]

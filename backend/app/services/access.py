"""
CodeMate Backend — Access-Control Rules
=========================================

What:  Existence and ownership checks run by mutating operations before they
       touch the store.
Why:   Every rule is a read-only lookup; keeping them in one place makes the
       ownership chain (snippet → conversation → user, conversation → project
       → user) explicit instead of scattering joins across services.
How:   Each `require_*` method either returns the referenced row or raises
       NotFoundError / ValidationError. Nothing is cached between calls.

Rule Inventory:
    create project       → require_user
    create conversation  → require_user + require_owned_project
    create message       → require_conversation
    create code snippet  → require_conversation + require_message_in_conversation
    delete code snippet  → snippet_owner_id (join through conversations)
    delete project       → no pre-check; the DELETE itself carries both predicates

Anti-enumeration:
    require_owned_project raises the SAME error whether the project is missing
    or owned by someone else, so a non-owner learns nothing about which project
    ids exist.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError, ValidationError
from app.models.code_snippet import CodeSnippet
from app.models.conversation import Conversation
from app.models.message import Message
from app.models.project import Project
from app.models.user import User

logger = logging.getLogger(__name__)


class AccessRules:
    """Stateless collection of ownership-chain checks."""

    async def require_user(self, db: AsyncSession, user_id: int) -> User:
        user = await db.get(User, user_id)
        if user is None:
            raise NotFoundError(resource="user", resource_id=user_id)
        return user

    async def require_owned_project(
        self, db: AsyncSession, project_id: int, user_id: int
    ) -> Project:
        """
        Return the project only if it exists AND belongs to user_id.

        Query plan:
            SELECT * FROM projects WHERE id = :project_id AND user_id = :user_id
        """
        result = await db.execute(
            select(Project).where(Project.id == project_id, Project.user_id == user_id)
        )
        project = result.scalar_one_or_none()
        if project is None:
            logger.info(
                "Project %s not visible to user %s (missing or not owned)", project_id, user_id
            )
            raise NotFoundError(
                resource="project",
                resource_id=project_id,
                message=(
                    f"project with ID '{project_id}' was not found "
                    f"or does not belong to user '{user_id}'"
                ),
                context={"user_id": user_id},
            )
        return project

    async def require_conversation(self, db: AsyncSession, conversation_id: int) -> Conversation:
        conversation = await db.get(Conversation, conversation_id)
        if conversation is None:
            raise NotFoundError(resource="conversation", resource_id=conversation_id)
        return conversation

    async def require_message_in_conversation(
        self, db: AsyncSession, message_id: int, conversation_id: int
    ) -> Message:
        """
        The message must exist (404) and sit in the given conversation (400).
        """
        message = await db.get(Message, message_id)
        if message is None:
            raise NotFoundError(resource="message", resource_id=message_id)
        if message.conversation_id != conversation_id:
            raise ValidationError(
                message=(
                    f"message {message_id} does not belong to conversation {conversation_id}"
                ),
                field="message_id",
                context={"message_id": message_id, "conversation_id": conversation_id},
            )
        return message

    async def snippet_owner_id(self, db: AsyncSession, snippet_id: int) -> Optional[int]:
        """
        Owner of a snippet, derived through its conversation; None if the snippet is missing.

        Query plan:
            SELECT conversations.user_id FROM code_snippets
            JOIN conversations ON code_snippets.conversation_id = conversations.id
            WHERE code_snippets.id = :snippet_id
        """
        result = await db.execute(
            select(Conversation.user_id)
            .join(CodeSnippet, CodeSnippet.conversation_id == Conversation.id)
            .where(CodeSnippet.id == snippet_id)
        )
        return result.scalar_one_or_none()


access_rules = AccessRules()

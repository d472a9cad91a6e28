"""
CodeMate Backend — Conversation Service
=========================================

What:  Create, update, and list conversations inside a project.
Who:   Called by the conversations route handlers.

Ownership:
    A conversation is only created when the acting user exists and owns the
    target project. The conversation stores a copy of that user id, which
    later lets snippet deletion verify ownership through one join.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import CodeMateError
from app.models.base import utcnow
from app.models.conversation import Conversation
from app.schemas.conversation import (
    ConversationCreate,
    ConversationResponse,
    ConversationUpdate,
)
from app.services.access import access_rules
from app.services.crud import apply_partial_update, get_or_raise

logger = logging.getLogger(__name__)


class ConversationService:
    async def create_conversation(
        self, db: AsyncSession, payload: ConversationCreate
    ) -> ConversationResponse:
        """
        Raises:
            NotFoundError: user missing, or project missing / not owned by the user
        """
        try:
            await access_rules.require_user(db, payload.user_id)
            await access_rules.require_owned_project(db, payload.project_id, payload.user_id)
            now = utcnow()
            conversation = Conversation(
                project_id=payload.project_id,
                user_id=payload.user_id,
                title=payload.title,
                ai_model=payload.ai_model,
                created_at=now,
                updated_at=now,
            )
            db.add(conversation)
            await db.flush()
        except CodeMateError:
            raise
        except Exception as e:
            logger.error(
                "Conversation creation failed for project %s: %s",
                payload.project_id,
                str(e),
                exc_info=True,
            )
            raise

        logger.info(
            "Conversation %s created in project %s (model=%s)",
            conversation.id,
            conversation.project_id,
            conversation.ai_model.value,
        )
        return ConversationResponse.model_validate(conversation)

    async def update_conversation(
        self, db: AsyncSession, conversation_id: int, payload: ConversationUpdate
    ) -> ConversationResponse:
        """Rename a conversation or switch its AI model."""
        try:
            conversation = await get_or_raise(db, Conversation, conversation_id, "conversation")
            changes = apply_partial_update(conversation, payload)
            await db.flush()
        except CodeMateError:
            raise
        except Exception as e:
            logger.error(
                "Conversation update failed for %s: %s", conversation_id, str(e), exc_info=True
            )
            raise

        logger.info("Conversation %s updated (fields=%s)", conversation_id, sorted(changes))
        return ConversationResponse.model_validate(conversation)

    async def get_project_conversations(
        self, db: AsyncSession, project_id: int
    ) -> List[ConversationResponse]:
        """Conversations of a project, most recently updated first."""
        try:
            result = await db.execute(
                select(Conversation)
                .where(Conversation.project_id == project_id)
                .order_by(Conversation.updated_at.desc(), Conversation.id.desc())
            )
            conversations = result.scalars().all()
        except Exception as e:
            logger.error(
                "Listing conversations failed for project %s: %s", project_id, str(e), exc_info=True
            )
            raise
        return [ConversationResponse.model_validate(c) for c in conversations]


conversation_service = ConversationService()

"""
CodeMate Backend — Message Service
====================================

What:  Append messages to a conversation and read them back in order.
Why:   Messages are immutable: there is no update operation, and they are
       only removed when their conversation (or an ancestor) is deleted.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import CodeMateError
from app.models.base import utcnow
from app.models.message import Message
from app.schemas.message import MessageCreate, MessageResponse
from app.services.access import access_rules

logger = logging.getLogger(__name__)


class MessageService:
    async def create_message(self, db: AsyncSession, payload: MessageCreate) -> MessageResponse:
        """
        Store a user prompt or an assistant reply.

        Raises:
            NotFoundError: conversation does not exist
        """
        try:
            await access_rules.require_conversation(db, payload.conversation_id)
            message = Message(
                conversation_id=payload.conversation_id,
                role=payload.role,
                content=payload.content,
                metadata_=payload.metadata,
                created_at=utcnow(),
            )
            db.add(message)
            await db.flush()
        except CodeMateError:
            raise
        except Exception as e:
            logger.error(
                "Message creation failed for conversation %s: %s",
                payload.conversation_id,
                str(e),
                exc_info=True,
            )
            raise

        logger.info(
            "Message %s (%s) added to conversation %s",
            message.id,
            message.role.value,
            message.conversation_id,
        )
        return MessageResponse.model_validate(message)

    async def get_conversation_messages(
        self, db: AsyncSession, conversation_id: int
    ) -> List[MessageResponse]:
        """
        Messages of a conversation in chronological order (oldest first).

        Query plan:
            SELECT * FROM messages WHERE conversation_id = :id
            ORDER BY created_at ASC, id ASC
        """
        try:
            result = await db.execute(
                select(Message)
                .where(Message.conversation_id == conversation_id)
                .order_by(Message.created_at.asc(), Message.id.asc())
            )
            messages = result.scalars().all()
        except Exception as e:
            logger.error(
                "Listing messages failed for conversation %s: %s",
                conversation_id,
                str(e),
                exc_info=True,
            )
            raise
        return [MessageResponse.model_validate(m) for m in messages]


message_service = MessageService()

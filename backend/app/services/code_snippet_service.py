"""
CodeMate Backend — Code Snippet Service
=========================================

What:  Save, edit, list, and delete code snippets of a conversation.
Who:   Called by the code-snippets route handlers (editor panel).

Ownership:
    Snippets carry no owner column. Deletion resolves the owner by joining
    code_snippets → conversations and comparing conversations.user_id with
    the acting user; a missing snippet and a foreign snippet both return
    False.
"""

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import CodeMateError
from app.models.base import utcnow
from app.models.code_snippet import CodeSnippet
from app.schemas.code_snippet import (
    CodeSnippetCreate,
    CodeSnippetResponse,
    CodeSnippetUpdate,
)
from app.services.access import access_rules
from app.services.crud import apply_partial_update, get_or_raise

logger = logging.getLogger(__name__)


class CodeSnippetService:
    async def create_code_snippet(
        self, db: AsyncSession, payload: CodeSnippetCreate
    ) -> CodeSnippetResponse:
        """
        Raises:
            NotFoundError:   conversation or message does not exist
            ValidationError: message belongs to a different conversation
        """
        try:
            await access_rules.require_conversation(db, payload.conversation_id)
            if payload.message_id is not None:
                await access_rules.require_message_in_conversation(
                    db, payload.message_id, payload.conversation_id
                )
            now = utcnow()
            snippet = CodeSnippet(
                conversation_id=payload.conversation_id,
                message_id=payload.message_id,
                title=payload.title,
                code=payload.code,
                language=payload.language,
                description=payload.description,
                created_at=now,
                updated_at=now,
            )
            db.add(snippet)
            await db.flush()
        except CodeMateError:
            raise
        except Exception as e:
            logger.error(
                "Code snippet creation failed for conversation %s: %s",
                payload.conversation_id,
                str(e),
                exc_info=True,
            )
            raise

        logger.info(
            "Code snippet %s saved in conversation %s (message=%s)",
            snippet.id,
            snippet.conversation_id,
            snippet.message_id,
        )
        return CodeSnippetResponse.model_validate(snippet)

    async def update_code_snippet(
        self, db: AsyncSession, snippet_id: int, payload: CodeSnippetUpdate
    ) -> CodeSnippetResponse:
        try:
            snippet = await get_or_raise(db, CodeSnippet, snippet_id, "code snippet")
            changes = apply_partial_update(snippet, payload)
            await db.flush()
        except CodeMateError:
            raise
        except Exception as e:
            logger.error("Code snippet update failed for %s: %s", snippet_id, str(e), exc_info=True)
            raise

        logger.info("Code snippet %s updated (fields=%s)", snippet_id, sorted(changes))
        return CodeSnippetResponse.model_validate(snippet)

    async def get_conversation_code_snippets(
        self, db: AsyncSession, conversation_id: int
    ) -> List[CodeSnippetResponse]:
        """Snippets of a conversation, newest first."""
        try:
            result = await db.execute(
                select(CodeSnippet)
                .where(CodeSnippet.conversation_id == conversation_id)
                .order_by(CodeSnippet.created_at.desc(), CodeSnippet.id.desc())
            )
            snippets = result.scalars().all()
        except Exception as e:
            logger.error(
                "Listing code snippets failed for conversation %s: %s",
                conversation_id,
                str(e),
                exc_info=True,
            )
            raise
        return [CodeSnippetResponse.model_validate(s) for s in snippets]

    async def delete_code_snippet(self, db: AsyncSession, snippet_id: int, user_id: int) -> bool:
        """
        Returns:
            True if the snippet was removed; False if it does not exist or the
            conversation it belongs to is owned by another user.
        """
        try:
            owner_id = await access_rules.snippet_owner_id(db, snippet_id)
            if owner_id is None:
                logger.info("Code snippet %s not deleted: not found", snippet_id)
                return False
            if owner_id != user_id:
                logger.info("Code snippet %s not deleted: user %s is not the owner", snippet_id, user_id)
                return False

            result = await db.execute(delete(CodeSnippet).where(CodeSnippet.id == snippet_id))
        except Exception as e:
            logger.error("Code snippet deletion failed for %s: %s", snippet_id, str(e), exc_info=True)
            raise

        deleted = (result.rowcount or 0) > 0
        if deleted:
            logger.info("Code snippet %s deleted by user %s", snippet_id, user_id)
        return deleted


code_snippet_service = CodeSnippetService()

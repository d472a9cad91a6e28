"""
CodeMate Backend — Message Route Handlers
===========================================

What:  Append to and read a conversation's chat history.
Why:   There are deliberately no PATCH/DELETE routes: messages are immutable.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.routes.params import PathId
from app.schemas.common import ErrorResponse
from app.schemas.message import MessageCreate, MessageResponse
from app.services.message_service import message_service

router = APIRouter(prefix="/api", tags=["Messages"])


@router.post(
    "/messages",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"description": "Conversation not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Add a message to a conversation",
)
async def create_message(
    payload: MessageCreate,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await message_service.create_message(db, payload)


@router.get(
    "/conversations/{conversation_id}/messages",
    response_model=List[MessageResponse],
    summary="Chat history of a conversation",
    description="Oldest message first.",
)
async def list_conversation_messages(
    conversation_id: PathId,
    db: AsyncSession = Depends(get_db_session),
) -> List[MessageResponse]:
    return await message_service.get_conversation_messages(db, conversation_id)

"""
CodeMate Backend — Conversation Route Handlers
================================================
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.routes.params import PathId
from app.schemas.common import ErrorResponse
from app.schemas.conversation import (
    ConversationCreate,
    ConversationResponse,
    ConversationUpdate,
)
from app.services.conversation_service import conversation_service

router = APIRouter(prefix="/api", tags=["Conversations"])


@router.post(
    "/conversations",
    response_model=ConversationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"description": "User not found, or project not found / not owned", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Start a conversation in a project",
)
async def create_conversation(
    payload: ConversationCreate,
    db: AsyncSession = Depends(get_db_session),
) -> ConversationResponse:
    return await conversation_service.create_conversation(db, payload)


@router.patch(
    "/conversations/{conversation_id}",
    response_model=ConversationResponse,
    responses={
        404: {"description": "Conversation not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Rename a conversation or switch its AI model",
)
async def update_conversation(
    conversation_id: PathId,
    payload: ConversationUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> ConversationResponse:
    return await conversation_service.update_conversation(db, conversation_id, payload)


@router.get(
    "/projects/{project_id}/conversations",
    response_model=List[ConversationResponse],
    summary="List a project's conversations",
    description="Most recently updated first.",
)
async def list_project_conversations(
    project_id: PathId,
    db: AsyncSession = Depends(get_db_session),
) -> List[ConversationResponse]:
    return await conversation_service.get_project_conversations(db, project_id)

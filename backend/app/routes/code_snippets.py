"""
CodeMate Backend — Code Snippet Route Handlers
================================================

What:  Snippets saved from assistant replies (or typed in the editor panel).
Who:   Called by the frontend code panel.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.routes.params import ActingUserId, PathId
from app.schemas.code_snippet import (
    CodeSnippetCreate,
    CodeSnippetResponse,
    CodeSnippetUpdate,
)
from app.schemas.common import DeleteResponse, ErrorResponse
from app.services.code_snippet_service import code_snippet_service

router = APIRouter(prefix="/api", tags=["Code Snippets"])


@router.post(
    "/code-snippets",
    response_model=CodeSnippetResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Message belongs to another conversation", "model": ErrorResponse},
        404: {"description": "Conversation or message not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Save a code snippet",
)
async def create_code_snippet(
    payload: CodeSnippetCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CodeSnippetResponse:
    return await code_snippet_service.create_code_snippet(db, payload)


@router.patch(
    "/code-snippets/{snippet_id}",
    response_model=CodeSnippetResponse,
    responses={
        404: {"description": "Code snippet not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Edit a code snippet",
    description="Partial update; description may be cleared by sending null.",
)
async def update_code_snippet(
    snippet_id: PathId,
    payload: CodeSnippetUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> CodeSnippetResponse:
    return await code_snippet_service.update_code_snippet(db, snippet_id, payload)


@router.get(
    "/conversations/{conversation_id}/code-snippets",
    response_model=List[CodeSnippetResponse],
    summary="List a conversation's code snippets",
    description="Newest first.",
)
async def list_conversation_code_snippets(
    conversation_id: PathId,
    db: AsyncSession = Depends(get_db_session),
) -> List[CodeSnippetResponse]:
    return await code_snippet_service.get_conversation_code_snippets(db, conversation_id)


@router.delete(
    "/code-snippets/{snippet_id}",
    response_model=DeleteResponse,
    summary="Delete a code snippet",
    description="Only the owner of the snippet's conversation can delete it.",
)
async def delete_code_snippet(
    snippet_id: PathId,
    user_id: ActingUserId,
    db: AsyncSession = Depends(get_db_session),
) -> DeleteResponse:
    deleted = await code_snippet_service.delete_code_snippet(db, snippet_id, user_id)
    return DeleteResponse(deleted=deleted)

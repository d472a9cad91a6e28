"""
CodeMate Backend — Project Route Handlers
===========================================

What:  Project CRUD for the workspace sidebar.

Deletion:
    DELETE /api/projects/{id}?user_id=N answers {"deleted": false} for a
    missing project and for a project owned by someone else alike; the
    response never reveals which of the two happened.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.routes.params import ActingUserId, PathId
from app.schemas.common import DeleteResponse, ErrorResponse
from app.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from app.services.project_service import project_service

router = APIRouter(prefix="/api", tags=["Projects"])


@router.post(
    "/projects",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"description": "Owning user not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a project",
)
async def create_project(
    payload: ProjectCreate,
    db: AsyncSession = Depends(get_db_session),
) -> ProjectResponse:
    return await project_service.create_project(db, payload)


@router.patch(
    "/projects/{project_id}",
    response_model=ProjectResponse,
    responses={
        404: {"description": "Project not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Update a project",
    description="Partial update of name, description, or coding_language.",
)
async def update_project(
    project_id: PathId,
    payload: ProjectUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> ProjectResponse:
    return await project_service.update_project(db, project_id, payload)


@router.get(
    "/users/{user_id}/projects",
    response_model=List[ProjectResponse],
    summary="List a user's projects",
    description="Most recently updated first. Unknown users get an empty list.",
)
async def list_user_projects(
    user_id: PathId,
    db: AsyncSession = Depends(get_db_session),
) -> List[ProjectResponse]:
    return await project_service.get_user_projects(db, user_id)


@router.delete(
    "/projects/{project_id}",
    response_model=DeleteResponse,
    summary="Delete a project and everything in it",
    description=(
        "Removes the project together with its conversations, messages, and "
        "code snippets. Only the owner can delete."
    ),
)
async def delete_project(
    project_id: PathId,
    user_id: ActingUserId,
    db: AsyncSession = Depends(get_db_session),
) -> DeleteResponse:
    deleted = await project_service.delete_project(db, project_id, user_id)
    return DeleteResponse(deleted=deleted)

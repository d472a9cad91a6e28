"""
CodeMate Backend — Project Service
====================================

What:  Create, update, list, and delete a user's projects.
Who:   Called by the projects route handlers.

Delete semantics:
    delete_project issues a single conditional DELETE carrying both the id
    and the owner predicate, so the ownership check and the removal are one
    atomic statement. Conversations, messages, and code snippets below the
    project are removed by the database's ON DELETE CASCADE rules.
"""

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import CodeMateError
from app.models.base import utcnow
from app.models.project import Project
from app.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from app.services.access import access_rules
from app.services.crud import apply_partial_update, get_or_raise

logger = logging.getLogger(__name__)


class ProjectService:
    """Business logic layer for projects."""

    async def create_project(self, db: AsyncSession, payload: ProjectCreate) -> ProjectResponse:
        """
        Raises:
            NotFoundError: owning user does not exist
        """
        try:
            await access_rules.require_user(db, payload.user_id)
            now = utcnow()
            project = Project(
                user_id=payload.user_id,
                name=payload.name,
                description=payload.description,
                coding_language=payload.coding_language,
                created_at=now,
                updated_at=now,
            )
            db.add(project)
            await db.flush()
        except CodeMateError:
            raise
        except Exception as e:
            logger.error(
                "Project creation failed for user %s: %s", payload.user_id, str(e), exc_info=True
            )
            raise

        logger.info("Project %s created for user %s", project.id, project.user_id)
        return ProjectResponse.model_validate(project)

    async def update_project(
        self, db: AsyncSession, project_id: int, payload: ProjectUpdate
    ) -> ProjectResponse:
        try:
            project = await get_or_raise(db, Project, project_id, "project")
            changes = apply_partial_update(project, payload)
            await db.flush()
        except CodeMateError:
            raise
        except Exception as e:
            logger.error("Project update failed for %s: %s", project_id, str(e), exc_info=True)
            raise

        logger.info("Project %s updated (fields=%s)", project_id, sorted(changes))
        return ProjectResponse.model_validate(project)

    async def get_user_projects(self, db: AsyncSession, user_id: int) -> List[ProjectResponse]:
        """
        Projects of a user, most recently updated first.

        An unknown user simply yields an empty list.
        """
        try:
            result = await db.execute(
                select(Project)
                .where(Project.user_id == user_id)
                .order_by(Project.updated_at.desc(), Project.id.desc())
            )
            projects = result.scalars().all()
        except Exception as e:
            logger.error("Listing projects failed for user %s: %s", user_id, str(e), exc_info=True)
            raise
        return [ProjectResponse.model_validate(project) for project in projects]

    async def delete_project(self, db: AsyncSession, project_id: int, user_id: int) -> bool:
        """
        Delete a project owned by user_id.

        Returns:
            True if a row was removed; False if the project does not exist,
            was already deleted, or belongs to another user.
        """
        try:
            result = await db.execute(
                delete(Project).where(Project.id == project_id, Project.user_id == user_id)
            )
        except Exception as e:
            logger.error("Project deletion failed for %s: %s", project_id, str(e), exc_info=True)
            raise

        deleted = (result.rowcount or 0) > 0
        if deleted:
            logger.info("Project %s deleted by user %s", project_id, user_id)
        else:
            logger.info("Project %s not deleted: no row owned by user %s", project_id, user_id)
        return deleted


project_service = ProjectService()

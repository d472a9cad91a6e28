"""
CodeMate Backend — Project Service Tests
==========================================

What we test:
    ✅ Create requires an existing user
    ✅ Partial update and updated_at advance
    ✅ Listing is per-user, most recently updated first
    ✅ Delete only by the owner; second delete is a no-op
"""

from unittest.mock import MagicMock

import pytest

from app.exceptions import NotFoundError
from app.models.enums import CodingLanguage
from app.schemas.project import ProjectCreate, ProjectUpdate
from app.services.project_service import ProjectService


class TestCreateProject:
    """Tests for create_project."""

    def setup_method(self):
        self.service = ProjectService()

    @pytest.mark.asyncio
    async def test_create_project(self, factory):
        """New project should belong to its user with equal timestamps."""
        user = await factory.user()

        project = await factory.project(user.id, name="cli-tool", description="A small CLI")

        assert project.user_id == user.id
        assert project.name == "cli-tool"
        assert project.description == "A small CLI"
        assert project.created_at == project.updated_at

    @pytest.mark.asyncio
    async def test_create_project_for_missing_user(self, db_session):
        """Unknown user should raise NotFoundError."""
        payload = ProjectCreate(user_id=31337, name="orphan", coding_language=CodingLanguage.GO)

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.create_project(db_session, payload)

        assert exc_info.value.resource == "user"


class TestUpdateProject:
    """Tests for partial project updates."""

    def setup_method(self):
        self.service = ProjectService()

    @pytest.mark.asyncio
    async def test_update_name_keeps_other_fields(self, db_session, factory):
        """Renaming should leave the other fields unchanged."""
        user = await factory.user()
        project = await factory.project(user.id, description="keep me")

        updated = await self.service.update_project(
            db_session, project.id, ProjectUpdate(name="renamed")
        )

        assert updated.name == "renamed"
        assert updated.description == "keep me"
        assert updated.coding_language == project.coding_language
        assert updated.updated_at > project.updated_at

    @pytest.mark.asyncio
    async def test_null_description_clears_it(self, db_session, factory):
        """Explicit null should clear the description."""
        user = await factory.user()
        project = await factory.project(user.id, description="temporary")

        updated = await self.service.update_project(
            db_session, project.id, ProjectUpdate(description=None)
        )

        assert updated.description is None

    @pytest.mark.asyncio
    async def test_update_missing_project(self, db_session):
        """Updating a missing project should raise NotFoundError."""
        with pytest.raises(NotFoundError):
            await self.service.update_project(db_session, 77, ProjectUpdate(name="x"))


class TestListProjects:
    """Tests for get_user_projects."""

    def setup_method(self):
        self.service = ProjectService()

    @pytest.mark.asyncio
    async def test_most_recently_updated_first(self, db_session, factory):
        """Projects should list most recently updated first."""
        user = await factory.user()
        older = await factory.project(user.id, name="older")
        newer = await factory.project(user.id, name="newer")

        listed = await self.service.get_user_projects(db_session, user.id)
        assert [p.id for p in listed] == [newer.id, older.id]

        await self.service.update_project(db_session, older.id, ProjectUpdate(name="touched"))

        listed = await self.service.get_user_projects(db_session, user.id)
        assert [p.id for p in listed] == [older.id, newer.id]

    @pytest.mark.asyncio
    async def test_only_own_projects(self, db_session, factory):
        """Other users' projects should not be listed."""
        alice = await factory.user()
        bob = await factory.user()
        await factory.project(alice.id)
        bobs = await factory.project(bob.id)

        listed = await self.service.get_user_projects(db_session, bob.id)

        assert [p.id for p in listed] == [bobs.id]

    @pytest.mark.asyncio
    async def test_unknown_user_gets_empty_list(self, db_session):
        """Unknown user should get an empty list, not an error."""
        assert await self.service.get_user_projects(db_session, 404) == []


class TestDeleteProject:
    """Tests for owner-only project deletion."""

    def setup_method(self):
        self.service = ProjectService()

    @pytest.mark.asyncio
    async def test_owner_deletes(self, db_session, factory):
        """The owner should be able to delete their project."""
        user = await factory.user()
        project = await factory.project(user.id)

        assert await self.service.delete_project(db_session, project.id, user.id) is True
        assert await self.service.get_user_projects(db_session, user.id) == []

    @pytest.mark.asyncio
    async def test_second_delete_returns_false(self, db_session, factory):
        """Deleting an already deleted project should return False."""
        user = await factory.user()
        project = await factory.project(user.id)

        await self.service.delete_project(db_session, project.id, user.id)

        assert await self.service.delete_project(db_session, project.id, user.id) is False

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, db_session, factory):
        """Another user's delete should return False and keep the project."""
        owner = await factory.user()
        intruder = await factory.user()
        project = await factory.project(owner.id)

        assert await self.service.delete_project(db_session, project.id, intruder.id) is False

        remaining = await self.service.get_user_projects(db_session, owner.id)
        assert [p.id for p in remaining] == [project.id]

    @pytest.mark.asyncio
    async def test_rowcount_zero_means_not_deleted(self, mock_db_session):
        """A DELETE matching no rows should report False."""
        mock_result = MagicMock()
        mock_result.rowcount = 0
        mock_db_session.execute.return_value = mock_result

        assert await self.service.delete_project(mock_db_session, 1, 1) is False
        mock_db_session.execute.assert_awaited_once()

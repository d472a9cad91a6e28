"""
CodeMate Backend — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Each test gets a private in-memory SQLite database (StaticPool keeps
       the single connection alive) with foreign keys enforced, so cascade
       behaviour is exercised for real rather than mocked.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── engine:           in-memory SQLite engine with all tables created
    ├── db_session:       AsyncSession bound to that engine
    ├── factory:          helpers that create rows through the services
    ├── mock_db_session:  AsyncMock session for error-path unit tests
    └── test_client:      HTTPX AsyncClient with get_db_session overridden
"""

import os

# Must run before any `app` import: app.config reads the environment once
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CORS_ORIGINS"] = "http://localhost:3000"

from typing import Any, AsyncGenerator, Dict, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app import models  # noqa: F401
from app.database import Base, build_engine, get_db_session
from app.models.enums import AIModel, AuthProvider, CodingLanguage, MessageRole
from app.schemas.code_snippet import CodeSnippetCreate, CodeSnippetResponse
from app.schemas.conversation import ConversationCreate, ConversationResponse
from app.schemas.message import MessageCreate, MessageResponse
from app.schemas.project import ProjectCreate, ProjectResponse
from app.schemas.user import UserCreate, UserResponse
from app.services.code_snippet_service import code_snippet_service
from app.services.conversation_service import conversation_service
from app.services.message_service import message_service
from app.services.project_service import project_service
from app.services.user_service import user_service


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    test_engine = build_engine("sqlite+aiosqlite://")
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


class Factory:
    """
    Creates rows through the public service methods with sensible defaults.

    Every helper accepts keyword overrides for any field of the matching
    *Create schema.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self._emails = 0

    async def user(self, **overrides: Any) -> UserResponse:
        self._emails += 1
        data: Dict[str, Any] = {
            "email": f"dev{self._emails}@example.com",
            "name": f"Dev {self._emails}",
            "auth_provider": AuthProvider.GOOGLE,
            "auth_provider_id": f"google-sub-{self._emails}",
            "preferred_coding_language": CodingLanguage.PYTHON,
            "preferred_ai_model": AIModel.CLAUDE_SONNET,
        }
        data.update(overrides)
        return await user_service.create_user(self.db, UserCreate(**data))

    async def project(self, user_id: int, **overrides: Any) -> ProjectResponse:
        data: Dict[str, Any] = {
            "user_id": user_id,
            "name": "todo-api",
            "coding_language": CodingLanguage.TYPESCRIPT,
        }
        data.update(overrides)
        return await project_service.create_project(self.db, ProjectCreate(**data))

    async def conversation(
        self, project_id: int, user_id: int, **overrides: Any
    ) -> ConversationResponse:
        data: Dict[str, Any] = {
            "project_id": project_id,
            "user_id": user_id,
            "title": "Fix the login bug",
            "ai_model": AIModel.GEMINI_2_5_FLASH,
        }
        data.update(overrides)
        return await conversation_service.create_conversation(self.db, ConversationCreate(**data))

    async def message(self, conversation_id: int, **overrides: Any) -> MessageResponse:
        data: Dict[str, Any] = {
            "conversation_id": conversation_id,
            "role": MessageRole.USER,
            "content": "Why does my fetch call return 401?",
        }
        data.update(overrides)
        return await message_service.create_message(self.db, MessageCreate(**data))

    async def snippet(
        self, conversation_id: int, message_id: Optional[int] = None, **overrides: Any
    ) -> CodeSnippetResponse:
        data: Dict[str, Any] = {
            "conversation_id": conversation_id,
            "message_id": message_id,
            "title": "Auth header helper",
            "code": "const headers = { Authorization: `Bearer ${token}` };",
            "language": CodingLanguage.JAVASCRIPT,
        }
        data.update(overrides)
        return await code_snippet_service.create_code_snippet(self.db, CodeSnippetCreate(**data))


@pytest.fixture
def factory(db_session: AsyncSession) -> Factory:
    return Factory(db_session)


@pytest_asyncio.fixture
async def workspace(factory: Factory) -> Dict[str, Any]:
    """A user with one project and one conversation in it."""
    user = await factory.user()
    project = await factory.project(user.id)
    conversation = await factory.conversation(project.id, user.id)
    return {"user": user, "project": project, "conversation": conversation}


# ══════════════════════════════════════════════════════════════════════════
# Mocks
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    A mock AsyncSession for testing error propagation without a database.

    Usage:
        mock_db_session.flush.side_effect = IntegrityError(...)
        with pytest.raises(IntegrityError):
            await user_service.create_user(mock_db_session, payload)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient talking to the app in-process.

    Each request gets its own session on the test engine, committed or
    rolled back exactly like get_db_session does in production.
    """
    from app.main import app

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()

"""Pytest configuration and shared fixtures"""

import asyncio

import pytest
import httpx
from datetime import datetime, timezone
from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from workmongolia.core.database import Base, get_db
from workmongolia.main import app
from workmongolia.api.directory import get_user_source, get_company_source
from workmongolia.client.api_client import ApiClient
from workmongolia.client.notifications import Notifier
from workmongolia.client.query_cache import QueryCache
from workmongolia.client.screen import RecruitmentMasterScreen
from workmongolia.fixtures.mock_data import mock_company_source, mock_user_source
from workmongolia.models.base import utcnow
from workmongolia.models.job_option import JobOption
from workmongolia.models.skill import Skill
from workmongolia.services.job_option_service import JobOptionService
from workmongolia.services.skill_service import SkillService
import workmongolia.models  # noqa: F401  registers tables on Base.metadata


# In-memory SQLite shared by every connection of one engine
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_BASE_URL = "http://test"

FROZEN_NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


class RecordingTransport(httpx.AsyncBaseTransport):
    """Forwards to an inner transport and records every request"""

    def __init__(self, inner: httpx.AsyncBaseTransport):
        self.inner = inner
        self.requests: list[tuple[str, str]] = []

    @property
    def writes(self) -> list[tuple[str, str]]:
        return [(method, path) for method, path in self.requests if method != "GET"]

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append((request.method, request.url.path))
        return await self.inner.handle_async_request(request)


class FailingWritesTransport(RecordingTransport):
    """Serves reads normally and rejects every write with a server error"""

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            return await super().handle_async_request(request)
        self.requests.append((request.method, request.url.path))
        return httpx.Response(
            500,
            json={"error": "Internal server error", "details": {}, "request_id": "test"},
            request=request,
        )


class HeldFirstReadTransport(RecordingTransport):
    """Holds back the response to the first GET until ``release`` is set"""

    def __init__(self, inner: httpx.AsyncBaseTransport):
        super().__init__(inner)
        self.fetched = asyncio.Event()
        self.release = asyncio.Event()
        self._held = False

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        response = await super().handle_async_request(request)
        if request.method == "GET" and not self._held:
            self._held = True
            self.fetched.set()
            await self.release.wait()
        return response


@pytest.fixture
def frozen_now() -> datetime:
    return FROZEN_NOW


@pytest.fixture
async def test_engine():
    """Create test database engine and setup schema"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    """Create test session factory"""
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(test_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session"""
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def user_source(frozen_now):
    return mock_user_source(frozen_now)


@pytest.fixture
def company_source(frozen_now):
    return mock_company_source(frozen_now)


@pytest.fixture
def test_app(test_session_factory, user_source, company_source):
    """The FastAPI app wired to the test database and fixture sources"""

    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_user_source] = lambda: user_source
    app.dependency_overrides[get_company_source] = lambda: company_source
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Raw HTTP client talking to the app in-process"""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url=TEST_BASE_URL) as client:
        yield client


@pytest.fixture
def recording_transport(test_app) -> RecordingTransport:
    return RecordingTransport(httpx.ASGITransport(app=test_app))


@pytest.fixture
def failing_transport(test_app) -> FailingWritesTransport:
    return FailingWritesTransport(httpx.ASGITransport(app=test_app))


@pytest.fixture
def held_transport(test_app) -> HeldFirstReadTransport:
    return HeldFirstReadTransport(httpx.ASGITransport(app=test_app))


@pytest.fixture
async def api_client(recording_transport) -> AsyncGenerator[ApiClient, None]:
    async with ApiClient(base_url=TEST_BASE_URL, transport=recording_transport) as client:
        yield client


@pytest.fixture
def screen(api_client) -> RecruitmentMasterScreen:
    return RecruitmentMasterScreen(api_client, QueryCache(), Notifier())


@pytest.fixture
async def held_screen(held_transport) -> AsyncGenerator[RecruitmentMasterScreen, None]:
    async with ApiClient(base_url=TEST_BASE_URL, transport=held_transport) as client:
        yield RecruitmentMasterScreen(client, QueryCache(), Notifier())


@pytest.fixture
def seed_skills(async_client):
    """Create four skills (ids 1-4) through the API"""

    async def _seed(names=("Python", "React", "PostgreSQL", "Docker")):
        created = []
        for name in names:
            response = await async_client.post("/api/v1/admin/skills", json={"name": name})
            assert response.status_code == 201
            created.append(response.json())
        return created

    return _seed


class MockJobOptionRepository:
    """Mock job option repository for testing"""

    def __init__(self):
        self.options = {}
        self.next_id = 1

    async def create(self, option_data):
        option = JobOption(id=self.next_id, created_at=utcnow(), updated_at=utcnow(), **option_data)
        self.options[option.id] = option
        self.next_id += 1
        return option

    async def get_by_id(self, kind, option_id):
        option = self.options.get(option_id)
        return option if option is not None and option.kind == kind else None

    async def get_by_name(self, kind, name):
        for option in self.options.values():
            if option.kind == kind and option.name.lower() == name.lower():
                return option
        return None

    async def list_by_kind(self, kind, active_only=False):
        options = [
            option for option in self.options.values()
            if option.kind == kind and (option.is_active or not active_only)
        ]
        return sorted(options, key=lambda option: (option.order, option.id))

    async def count(self, kind):
        return len([option for option in self.options.values() if option.kind == kind])

    async def update(self, option, updates):
        for key, value in updates.items():
            setattr(option, key, value)
        option.updated_at = utcnow()
        return option

    async def delete(self, kind, option_id):
        if await self.get_by_id(kind, option_id) is None:
            return False
        del self.options[option_id]
        return True


class MockSkillRepository:
    """Mock skill repository for testing"""

    def __init__(self):
        self.skills = {}
        self.next_id = 1

    async def create(self, skill_data):
        skill = Skill(id=self.next_id, created_at=utcnow(), updated_at=utcnow(), **skill_data)
        self.skills[skill.id] = skill
        self.next_id += 1
        return skill

    async def get_by_id(self, skill_id):
        return self.skills.get(skill_id)

    async def get_by_name(self, name):
        for skill in self.skills.values():
            if skill.name.lower() == name.lower():
                return skill
        return None

    async def get_all(self, active_only=False):
        skills = [skill for skill in self.skills.values() if skill.is_active or not active_only]
        return sorted(skills, key=lambda skill: (skill.name, skill.id))

    async def update(self, skill, updates):
        for key, value in updates.items():
            setattr(skill, key, value)
        return skill

    async def delete(self, skill_id):
        return self.skills.pop(skill_id, None) is not None


@pytest.fixture
def make_option_service():
    """Factory for job option services over a fresh mock repository"""
    return lambda: JobOptionService(MockJobOptionRepository())


@pytest.fixture
def option_service(make_option_service) -> JobOptionService:
    return make_option_service()


@pytest.fixture
def skill_service() -> SkillService:
    return SkillService(MockSkillRepository())

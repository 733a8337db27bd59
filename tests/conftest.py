"""Pytest configuration and fixtures for opportunity-hub.

Uses app.main:app for HTTP tests. Repository and API tests run on an
in-memory SQLite database (aiosqlite); tests that need Postgres use the
db_session fixture and are marked requires_db.
"""

import asyncio
from collections.abc import AsyncIterator, Callable, Mapping
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.api.v1.dependencies import get_tag_service, get_tag_service_for_write
from app.application.services.tag_service import TagService
from app.infrastructure.cache.session_cache import SessionCache
from app.infrastructure.persistence import database
from app.infrastructure.persistence import models  # noqa: F401  (registers tables)
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.repositories.tag_repo import TagRepository
from app.main import app
from app.schemas.auth import AuthSession


class FakeSessionProvider:
    """In-memory SessionProvider: counts lookups, optionally blocks on a gate or raises."""

    def __init__(
        self,
        result: AuthSession | None = None,
        error: Exception | None = None,
    ) -> None:
        self.result = result
        self.error = error
        self.gate: asyncio.Event | None = None
        self.calls = 0
        self.seen_headers: list[dict[str, str]] = []

    async def get_session(self, headers: Mapping[str, str]) -> AuthSession | None:
        self.calls += 1
        self.seen_headers.append(dict(headers))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.result


class FakeClock:
    """Manually advanced monotonic clock (seconds)."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def make_auth_session() -> Callable[..., AuthSession]:
    """Build an AuthSession from the auth service's camelCase payload."""

    def _make(user_id: str = "user-1", role: str = "user", **user_extra: Any) -> AuthSession:
        return AuthSession.model_validate(
            {
                "session": {
                    "id": f"sess-{user_id}",
                    "userId": user_id,
                    "expiresAt": "2030-01-01T00:00:00Z",
                    "ipAddress": "10.0.0.1",
                },
                "user": {
                    "id": user_id,
                    "name": "Test User",
                    "email": f"{user_id}@example.com",
                    "role": role,
                    "emailVerified": True,
                    **user_extra,
                },
            }
        )

    return _make


@pytest.fixture
def session_provider() -> FakeSessionProvider:
    """Provider that reports no session until a test sets result or error."""
    return FakeSessionProvider()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def session_cache(session_provider: FakeSessionProvider, clock: FakeClock) -> SessionCache:
    """Session cache with default TTL/capacity over the fake provider and clock."""
    return SessionCache(session_provider, clock=clock)


@pytest.fixture
async def sqlite_session() -> AsyncIterator[AsyncSession]:
    """AsyncSession on a fresh in-memory SQLite database with all tables created."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def tag_repo(sqlite_session: AsyncSession) -> TagRepository:
    return TagRepository(sqlite_session)


@pytest.fixture
async def db_session() -> AsyncIterator[AsyncSession]:
    """Postgres session for requires_db tests. Rolls back after test.

    Skips (pytest.skip) when DATABASE_URL is not configured. Run without DB via:
    pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(
    session_cache: SessionCache, tag_repo: TagRepository
) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI).

    Lifespan does not run under ASGITransport, so the session cache is placed
    on app.state here and tag services are bound to the SQLite session.
    """
    service = TagService(tag_repo)
    app.state.session_cache = session_cache
    app.dependency_overrides[get_tag_service] = lambda: service
    app.dependency_overrides[get_tag_service_for_write] = lambda: service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()

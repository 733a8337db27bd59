"""SQL access for the tags table: declarative Base, lazy async engine, request sessions.

The engine is built on the first get_db / get_db_transactional call, so the
session-only routes (auth, health) run without DATABASE_URL. Schema changes go
through Alembic (migrations/ next to this module).
"""

import logging
from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.core.config import get_settings
from app.domain.exceptions import SqlNotConfiguredException

logger = logging.getLogger(__name__)

# Populated by _ensure_engine(); reset by dispose_engine().
engine: Any = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


def _ensure_engine() -> None:
    """Build the engine once. Postgres URLs get pool sizing; other drivers use their defaults."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return
    settings = get_settings()
    if not settings.database_url:
        return
    engine_kwargs: dict[str, Any] = {"echo": settings.database_echo, "pool_pre_ping": True}
    if settings.database_url.startswith("postgresql"):
        engine_kwargs["pool_size"] = (
            settings.db_pool_size if settings.db_pool_size is not None else 10
        )
        engine_kwargs["max_overflow"] = (
            settings.db_max_overflow if settings.db_max_overflow is not None else 20
        )
        engine_kwargs["pool_recycle"] = 3600
    engine = create_async_engine(settings.database_url, **engine_kwargs)
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def dispose_engine() -> None:
    """Close pooled connections on shutdown. No-op when the engine was never built."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("SQL engine disposed")
    engine = None
    AsyncSessionLocal = None


class Base(DeclarativeBase):
    """Declarative base; Base.metadata is the Alembic autogenerate target."""


def _require_session_factory() -> async_sessionmaker[AsyncSession]:
    _ensure_engine()
    if AsyncSessionLocal is None:
        logger.error(
            "Tag storage unavailable: DATABASE_URL is not set "
            "(postgresql+asyncpg://...); run alembic upgrade head after setting it"
        )
        raise SqlNotConfiguredException()
    return AsyncSessionLocal


async def get_db() -> AsyncIterator[AsyncSession]:
    """Session for tag suggestions. Nothing is committed."""
    session_factory = _require_session_factory()
    async with session_factory() as session:
        yield session


async def get_db_transactional() -> AsyncIterator[AsyncSession]:
    """Session for tag resolution: one transaction per request.

    Tags created by the request commit when the endpoint returns and roll back
    if it raises. Raises SqlNotConfiguredException without DATABASE_URL.
    """
    session_factory = _require_session_factory()
    async with session_factory() as session:
        async with session.begin():
            yield session

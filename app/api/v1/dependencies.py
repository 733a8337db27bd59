"""Request dependencies (composition root): session cache, session, tag service."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services.tag_service import TagService
from app.domain.exceptions import AuthenticationException
from app.infrastructure.cache.session_cache import SessionCache
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories.tag_repo import TagRepository
from app.schemas.auth import AuthSession


def get_session_cache(request: Request) -> SessionCache:
    """Process-wide session cache created in the app lifespan."""
    return request.app.state.session_cache


async def get_optional_session(
    request: Request,
    cache: Annotated[SessionCache, Depends(get_session_cache)],
) -> AuthSession | None:
    """Session for the request credentials (cached), or None when unauthenticated."""
    return await cache.get_session_cached(request.headers)


async def require_session(
    session: Annotated[AuthSession | None, Depends(get_optional_session)],
) -> AuthSession:
    """Session for protected routes; raises AuthenticationException when absent."""
    if session is None or not session.user.id:
        raise AuthenticationException("Unauthorized")
    return session


async def get_tag_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TagService:
    """Tag service for read paths (suggestions)."""
    return TagService(TagRepository(db))


async def get_tag_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> TagService:
    """Tag service for write paths (resolve creates tags; commits with the request)."""
    return TagService(TagRepository(db))

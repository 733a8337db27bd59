"""Auth API: current session and admin check (backed by the session cache)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import get_session_cache
from app.domain.exceptions import SessionProviderException
from app.infrastructure.cache.session_cache import SessionCache
from app.schemas.auth import AuthSession, IsAdminResponse
from app.shared.telemetry.timing import create_api_timer

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/session",
    response_model=AuthSession | None,
    response_model_by_alias=False,
)
async def get_current_session(
    request: Request,
    cache: Annotated[SessionCache, Depends(get_session_cache)],
) -> AuthSession | None:
    """Session for the request credentials, or null when unauthenticated."""
    timer = create_api_timer("GET /auth/session")
    timer.mark("auth_start")
    session = await cache.get_session_cached(request.headers)
    timer.end(status=200, has_session=session is not None)
    return session


@router.get("/is-admin", response_model=IsAdminResponse)
async def is_admin(
    request: Request,
    cache: Annotated[SessionCache, Depends(get_session_cache)],
) -> IsAdminResponse:
    """Whether the session user has the admin role. Any lookup failure answers false."""
    try:
        session = await cache.get_session_cached(request.headers)
    except SessionProviderException as e:
        logger.warning("Admin check failed, answering false: %s", e.message)
        return IsAdminResponse(is_admin=False)
    except Exception:
        logger.exception("Admin check failed unexpectedly, answering false")
        return IsAdminResponse(is_admin=False)
    return IsAdminResponse(is_admin=session is not None and session.user.is_admin)

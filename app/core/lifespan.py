"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py;
no business logic here, only wiring of infrastructure (auth HTTP client,
session cache, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.auth.session_provider import HttpSessionProvider
from app.infrastructure.cache.session_cache import SessionCache
from app.infrastructure.persistence.database import dispose_engine
from app.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: shared HTTP client for the auth service, session provider,
    session cache. Shutdown: cache clear, HTTP client close, SQL engine
    dispose.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    app.state.auth_http_client = httpx.AsyncClient(
        timeout=settings.auth_request_timeout_seconds
    )
    provider = HttpSessionProvider(
        app.state.auth_http_client,
        base_url=settings.auth_base_url,
        session_path=settings.auth_session_path,
    )
    app.state.session_cache = SessionCache(
        provider,
        ttl_ms=settings.session_cache_ttl_ms,
        max_entries=settings.session_cache_max_entries,
    )
    logger.info(
        "Session cache ready (ttl=%sms, max_entries=%s, auth=%s)",
        settings.session_cache_ttl_ms,
        settings.session_cache_max_entries,
        settings.auth_base_url,
    )

    yield

    # ---- Shutdown ----
    app.state.session_cache.clear()
    await app.state.auth_http_client.aclose()
    app.state.auth_http_client = None
    logger.info("Auth HTTP client closed")
    await dispose_engine()

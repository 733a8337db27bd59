"""Session lookup against the external auth service.

HttpSessionProvider forwards the caller's credentials (cookie, bearer token)
to the auth service's get-session endpoint over a shared httpx.AsyncClient.
"No session" is a normal answer (None); anything the service cannot answer
is a SessionProviderException.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import httpx
from pydantic import ValidationError

from app.core.constants import SESSION_FORWARD_HEADERS
from app.domain.exceptions import SessionProviderException
from app.schemas.auth import AuthSession
from app.shared.utils.headers import get_header

logger = logging.getLogger(__name__)

_NO_SESSION_STATUSES = frozenset({401, 403})


class SessionProvider(Protocol):
    """Protocol for the external "get session for these headers" capability."""

    async def get_session(self, headers: Mapping[str, str]) -> AuthSession | None:
        """Return the session for the request credentials, or None when unauthenticated."""
        ...


class HttpSessionProvider:
    """Auth service client for session lookups (GET {base_url}{session_path})."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        session_path: str = "/api/auth/get-session",
    ) -> None:
        """Initialize provider.

        Args:
            http_client: Shared client (owned by the app lifespan, not closed here).
            base_url: Auth service origin, e.g. http://localhost:3000.
            session_path: Path of the get-session endpoint.
        """
        self._http = http_client
        self._url = base_url.rstrip("/") + "/" + session_path.lstrip("/")

    @staticmethod
    def _forward_headers(headers: Mapping[str, str]) -> dict[str, str]:
        """Pick the credential and origin headers the auth service needs."""
        forwarded: dict[str, str] = {"Accept": "application/json"}
        for name in SESSION_FORWARD_HEADERS:
            value = get_header(headers, name)
            if value:
                forwarded[name] = value
        return forwarded

    async def get_session(self, headers: Mapping[str, str]) -> AuthSession | None:
        """Return the session for the request credentials, or None.

        Raises:
            SessionProviderException: Transport error, unexpected status, or
                a payload that is not a session.
        """
        try:
            resp = await self._http.get(self._url, headers=self._forward_headers(headers))
        except httpx.HTTPError as e:
            logger.warning("Session lookup failed: %s", e)
            raise SessionProviderException(f"Auth service unreachable: {e}") from e

        if resp.status_code in _NO_SESSION_STATUSES:
            return None
        if resp.status_code != 200:
            raise SessionProviderException(
                f"Auth service returned {resp.status_code}",
                status_code=resp.status_code,
            )
        if not resp.content.strip():
            return None
        try:
            payload = resp.json()
        except ValueError as e:
            raise SessionProviderException("Auth service returned invalid JSON") from e
        if payload is None:
            return None
        try:
            return AuthSession.model_validate(payload)
        except ValidationError as e:
            raise SessionProviderException(
                "Auth service returned an unexpected session payload"
            ) from e

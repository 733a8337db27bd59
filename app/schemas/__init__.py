"""Pydantic request/response schemas for the API."""

from app.schemas.auth import AuthSession, IsAdminResponse, SessionInfo, SessionUser
from app.schemas.health import HealthResponse
from app.schemas.tag import (
    TagResolveRequest,
    TagResolveResponse,
    TagSuggestionsResponse,
)

__all__ = [
    "AuthSession",
    "HealthResponse",
    "IsAdminResponse",
    "SessionInfo",
    "SessionUser",
    "TagResolveRequest",
    "TagResolveResponse",
    "TagSuggestionsResponse",
]

"""Tag API: name suggestions and resolution of free-text labels to tag ids."""

import re
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.v1.dependencies import (
    get_tag_service,
    get_tag_service_for_write,
    require_session,
)
from app.application.services.tag_service import TagService
from app.core.config import get_settings
from app.schemas.auth import AuthSession
from app.schemas.tag import TagResolveRequest, TagResolveResponse, TagSuggestionsResponse
from app.shared.telemetry.timing import create_api_timer

router = APIRouter()

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_limit(raw: str | None) -> int:
    """Leading integer of raw, clamped to [1, tag_search_max_limit].

    Missing, non-numeric or zero values use the default; trailing junk is
    ignored ("12abc" is 12).
    """
    settings = get_settings()
    match = _LEADING_INT.match(raw or "")
    limit = int(match.group(1)) if match else 0
    if limit == 0:
        limit = settings.tag_search_default_limit
    return min(max(limit, 1), settings.tag_search_max_limit)


@router.get("", response_model=TagSuggestionsResponse)
async def suggest_tags(
    service: Annotated[TagService, Depends(get_tag_service)],
    q: Annotated[str | None, Query(max_length=100)] = None,
    limit: Annotated[str | None, Query()] = None,
) -> TagSuggestionsResponse:
    """Tag names containing q (case-insensitive); first names when q is empty."""
    names = await service.suggest(q, _parse_limit(limit))
    return TagSuggestionsResponse(tags=names)


@router.post("/resolve", response_model=TagResolveResponse)
async def resolve_tags(
    body: TagResolveRequest,
    session: Annotated[AuthSession, Depends(require_session)],
    service: Annotated[TagService, Depends(get_tag_service_for_write)],
) -> TagResolveResponse:
    """Map labels to tag ids, creating tags that do not exist yet (same order as normalized input)."""
    timer = create_api_timer("POST /tags/resolve")
    timer.mark("resolve_start", count=len(body.tags))
    resolved = await service.resolve_tags_from_names(body.tags)
    timer.end(status=200, resolved=len(resolved.tag_ids), user_id=session.user.id)
    return TagResolveResponse(tag_ids=resolved.tag_ids, tag_names=resolved.tag_names)

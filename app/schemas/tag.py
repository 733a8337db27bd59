"""Tag API schemas."""

from pydantic import BaseModel, Field


class TagSuggestionsResponse(BaseModel):
    """Response for GET /tags (name suggestions)."""

    success: bool = True
    tags: list[str] = Field(default_factory=list)


class TagResolveRequest(BaseModel):
    """Request body for POST /tags/resolve. Free-text labels, normalized server-side."""

    tags: list[str] = Field(default_factory=list, max_length=100)


class TagResolveResponse(BaseModel):
    """Parallel lists: tag_ids[i] is the identifier of tag_names[i]."""

    tag_ids: list[str]
    tag_names: list[str]

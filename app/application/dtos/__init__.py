"""Application DTOs (no ORM dependency)."""

from app.application.dtos.tag import ResolvedTags, TagResult

__all__ = [
    "ResolvedTags",
    "TagResult",
]

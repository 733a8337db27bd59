"""Application services: tag normalization and upsert."""

from app.application.services.tag_service import TagService, normalize_tag_names

__all__ = [
    "TagService",
    "normalize_tag_names",
]

"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.tag_repo import TagRepository

__all__ = ["TagRepository"]

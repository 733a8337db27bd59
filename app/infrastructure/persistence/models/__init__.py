"""ORM models. Import here so Base.metadata sees every table (Alembic, tests)."""

from app.infrastructure.persistence.models.tag import Tag

__all__ = ["Tag"]

"""Tag repository. Case-insensitive lookup, conflict-tolerant batch insert, name search."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func, insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.tag import TagResult
from app.infrastructure.persistence.models.tag import Tag
from app.shared.utils.generators import generate_cuid

_UPSERT_INSERTS: dict[str, Any] = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


def _to_result(row: Any) -> TagResult:
    """Map ORM row (or id/name row) to DTO."""
    return TagResult(id=row.id, name=row.name)


class TagRepository:
    """Repository for the shared tags table."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def find_by_names(self, names: list[str]) -> list[TagResult]:
        """Return tags whose lower(name) matches any lowercased name."""
        if not names:
            return []
        lowered = list(dict.fromkeys(name.lower() for name in names))
        result = await self.db.execute(
            select(Tag.id, Tag.name).where(func.lower(Tag.name).in_(lowered))
        )
        return [_to_result(r) for r in result.all()]

    async def insert_names(
        self, names: list[str], ignore_conflicts: bool = True
    ) -> list[TagResult]:
        """Insert names in one statement and return the inserted rows.

        With ignore_conflicts, uses INSERT ... ON CONFLICT DO NOTHING so names
        raced into existence by another transaction are skipped (and absent
        from the result). Without it, a conflict raises IntegrityError.
        """
        if not names:
            return []
        rows = [{"id": generate_cuid(), "name": name} for name in names]
        if ignore_conflicts:
            dialect = self.db.get_bind().dialect.name
            dialect_insert = _UPSERT_INSERTS.get(dialect)
            if dialect_insert is None:
                raise ValueError(f"Conflict-ignoring insert not supported for dialect {dialect!r}")
            stmt = dialect_insert(Tag).values(rows).on_conflict_do_nothing()
        else:
            stmt = insert(Tag).values(rows)
        result = await self.db.execute(stmt.returning(Tag.id, Tag.name))
        return [_to_result(r) for r in result.all()]

    async def search(self, query: str | None, limit: int) -> list[str]:
        """Return up to limit names containing query (case-insensitive, wildcards escaped)."""
        stmt = select(Tag.name)
        if query:
            stmt = stmt.where(Tag.name.icontains(query, autoescape=True))
        result = await self.db.execute(stmt.order_by(Tag.name.asc()).limit(limit))
        return list(result.scalars().all())

"""Tag normalization and upsert: map free-text labels to stable tag identifiers.

Normalization de-duplicates case-sensitively, while the store treats names
case-insensitively. "ai" and "AI" both survive normalization and resolve to
the same identifier; the stored casing is whichever was inserted first.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from app.application.dtos.tag import ResolvedTags, TagResult
from app.application.interfaces.repositories import ITagRepository
from app.domain.exceptions import TagResolutionException

logger = logging.getLogger(__name__)


def normalize_tag_names(raw_names: Iterable[str] | None) -> list[str]:
    """Trim, drop empty entries, and de-duplicate (case-sensitive, first occurrence wins)."""
    if not raw_names:
        return []
    stripped = (name.strip() for name in raw_names)
    return list(dict.fromkeys(name for name in stripped if name))


class _TagIndex:
    """Exact-case and case-insensitive name -> id lookups built from store rows."""

    def __init__(self) -> None:
        self.by_name: dict[str, str] = {}
        self.by_lower: dict[str, str] = {}

    def add(self, rows: Iterable[TagResult]) -> None:
        for row in rows:
            self.by_name[row.name] = row.id
            self.by_lower.setdefault(row.name.lower(), row.id)

    def has(self, name: str) -> bool:
        return name.lower() in self.by_lower

    def get(self, name: str) -> str | None:
        tag_id = self.by_name.get(name)
        if tag_id is None:
            tag_id = self.by_lower.get(name.lower())
        return tag_id


class TagService:
    """Resolves tag names to identifiers, creating missing tags on demand."""

    def __init__(self, repo: ITagRepository) -> None:
        self.repo = repo

    async def resolve_tags_from_names(
        self, raw_names: Iterable[str] | None
    ) -> ResolvedTags:
        """Return identifiers for raw_names, creating tags that do not exist yet.

        Output lists are parallel and follow the normalized input order.
        Empty or None input returns empty lists without touching the store.

        Raises:
            TagResolutionException: If a name has no row even after insert
                and re-fetch (e.g. the row was deleted concurrently).
        """
        names = normalize_tag_names(raw_names)
        if not names:
            return ResolvedTags(tag_ids=[], tag_names=[])

        index = await self._build_index(names)
        tag_ids: list[str] = []
        unresolved: list[str] = []
        for name in names:
            tag_id = index.get(name)
            if tag_id is None:
                unresolved.append(name)
            else:
                tag_ids.append(tag_id)
        if unresolved:
            raise TagResolutionException(unresolved)
        return ResolvedTags(tag_ids=tag_ids, tag_names=names)

    async def upsert_tags_and_get_ids(self, raw_names: Iterable[str] | None) -> list[str]:
        """Return identifiers for raw_names; names that cannot be resolved are skipped."""
        names = normalize_tag_names(raw_names)
        if not names:
            return []
        index = await self._build_index(names)
        return [tag_id for tag_id in (index.get(name) for name in names) if tag_id]

    async def suggest(self, query: str | None, limit: int) -> list[str]:
        """Return up to limit tag names containing query; first names when query is empty."""
        query = (query or "").strip()
        return await self.repo.search(query or None, limit)

    async def _build_index(self, names: list[str]) -> _TagIndex:
        """Look up names, insert the missing ones, and re-fetch rows lost to insert races."""
        index = _TagIndex()
        index.add(await self.repo.find_by_names(names))

        # First-seen casing of each case-insensitive group not yet stored
        missing: dict[str, str] = {}
        for name in names:
            lowered = name.lower()
            if not index.has(name) and lowered not in missing:
                missing[lowered] = name
        if not missing:
            return index

        to_create = list(missing.values())
        created = await self.repo.insert_names(to_create, ignore_conflicts=True)
        index.add(created)
        if created:
            logger.info("Created %d tags: %s", len(created), ", ".join(t.name for t in created))

        raced = [name for name in to_create if not index.has(name)]
        if raced:
            logger.debug("Re-fetching %d tags created concurrently", len(raced))
            index.add(await self.repo.find_by_names(raced))
        return index

"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill.
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.tag import TagResult


class ITagRepository(Protocol):
    """Protocol for the shared tag lookup table."""

    async def find_by_names(self, names: list[str]) -> list[TagResult]:
        """Return tags whose name matches any of names, compared case-insensitively."""

    async def insert_names(
        self, names: list[str], ignore_conflicts: bool = True
    ) -> list[TagResult]:
        """Insert one row per name in a single batch; return the rows actually inserted.

        With ignore_conflicts, names that collide with an existing row (e.g.
        created by a concurrent request) are skipped instead of raising.
        """

    async def search(self, query: str | None, limit: int) -> list[str]:
        """Return up to limit tag names containing query (case-insensitive)."""

"""DTOs for tags (no dependency on ORM)."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TagResult:
    """Tag read-model (result of find, insert)."""

    id: str
    name: str


@dataclass(frozen=True)
class ResolvedTags:
    """Result of resolving free-text labels. tag_ids[i] identifies tag_names[i]."""

    tag_ids: list[str] = field(default_factory=list)
    tag_names: list[str] = field(default_factory=list)

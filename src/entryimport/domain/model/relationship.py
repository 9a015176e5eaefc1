"""Relationship constraints used to filter candidate lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

ENTITY_TYPE_FILTER_KEY: Final[str] = "f.entityType"


@dataclass(frozen=True, slots=True)
class RelationshipOptions:
    """Describes which kind of local entity may fill a relationship.

    ``filter`` is a fixed discovery filter in ``key=value[,operator]`` form,
    for example ``f.entityType=Person,equals``.
    """

    relationship_type: str
    filter: str | None = None
    search_configuration: str | None = None

    @property
    def entity_type(self) -> str | None:
        for key, value in parse_fixed_filter(self.filter):
            if key == ENTITY_TYPE_FILTER_KEY:
                return value.split(",", 1)[0].strip() or None
        return None


def parse_fixed_filter(fixed_filter: str | None) -> list[tuple[str, str]]:
    """Split a fixed filter string into ``(key, value)`` query pairs."""

    if not fixed_filter:
        return []
    pairs: list[tuple[str, str]] = []
    for chunk in fixed_filter.split("&"):
        key, sep, value = chunk.partition("=")
        key = key.strip()
        if not key or not sep:
            continue
        pairs.append((key, value.strip()))
    return pairs

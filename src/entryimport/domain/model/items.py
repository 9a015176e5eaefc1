"""Local objects a user can pick instead of importing an external entry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class ListableObject(Protocol):
    """Anything that can be shown and selected in a candidate list."""

    @property
    def id(self) -> str: ...


@dataclass(frozen=True, slots=True)
class Item:
    """A local entity (item) of the repository."""

    id: str
    name: str
    entity_type: str | None = None
    handle: str | None = None
    owning_collection_id: str | None = None
    source_uri: str | None = None


@dataclass(frozen=True, slots=True)
class Authority:
    """A controlled, reusable reference value."""

    id: str
    value: str
    authority_name: str | None = None


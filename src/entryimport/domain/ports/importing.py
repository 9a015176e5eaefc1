"""Ports for creating local entities from external entries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from entryimport.domain.model import ExternalSourceEntry, Item


@runtime_checkable
class ExternalEntryImporter(Protocol):
    """Callable port creating a new entity in ``collection_id`` from ``entry``."""

    async def __call__(self, entry: ExternalSourceEntry, collection_id: str) -> Item: ...


__all__ = ["ExternalEntryImporter"]

"""Ports for persisting local catalog items."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from entryimport.domain.model import Item


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent aggregate store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class ItemRepository(Repository[Item], Protocol):
    """Persistence contract for local items."""

    def get(self, item_id: str) -> Item | None: ...

    def get_by_source_uri(self, source_uri: str) -> Item | None: ...

    def search(
        self,
        query: str,
        *,
        entity_type: str | None = None,
        offset: int = 0,
        limit: int = 10,
    ) -> tuple[list[Item], int]:
        """Return one page of items whose name contains ``query`` and the total count."""
        ...

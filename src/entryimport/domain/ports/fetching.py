"""Ports for looking up local candidates for an external entry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from entryimport.domain.model import (
        Item,
        PaginatedList,
        PaginatedSearchOptions,
        RelationshipOptions,
        SearchResult,
    )


@runtime_checkable
class CandidateFetcher(Protocol):
    """Callable port returning local entities similar to the search options."""

    async def __call__(
        self,
        relationship: RelationshipOptions,
        search_options: PaginatedSearchOptions,
    ) -> PaginatedList[SearchResult[Item]]: ...


__all__ = ["CandidateFetcher"]

"""Local catalog services: candidate lookup and entry import over a unit of work."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final
from uuid import uuid4

from entryimport.domain.import_workflow.settings import URI_METADATA_FIELD
from entryimport.domain.model import Item, PaginatedList, SearchResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from entryimport.domain.model import (
        ExternalSourceEntry,
        PaginatedSearchOptions,
        RelationshipOptions,
    )
    from entryimport.domain.ports import CatalogUnitOfWork

ENTITY_TYPE_METADATA_FIELD: Final[str] = "dspace.entity.type"

log = getLogger(__name__)


class CatalogError(RuntimeError):
    """Raised when the local catalog rejects an operation."""


class EntryAlreadyImportedError(CatalogError):
    """Raised when an external entry has been imported before."""

    def __init__(self, source_uri: str, existing: Item) -> None:
        super().__init__(f"Entry {source_uri} was already imported as item {existing.id}")
        self.source_uri = source_uri
        self.existing = existing


def _new_item_id() -> str:
    return str(uuid4())


@dataclass(slots=True)
class LocalCatalogCandidateFetcher:
    """Candidate fetcher searching item names in the local catalog."""

    unit_of_work_factory: Callable[[], CatalogUnitOfWork]

    async def __call__(
        self,
        relationship: RelationshipOptions,
        search_options: PaginatedSearchOptions,
    ) -> PaginatedList[SearchResult[Item]]:
        return await asyncio.to_thread(self.search, relationship, search_options)

    def search(
        self,
        relationship: RelationshipOptions,
        search_options: PaginatedSearchOptions,
    ) -> PaginatedList[SearchResult[Item]]:
        pagination = search_options.pagination
        with self.unit_of_work_factory() as uow:
            items, total = uow.repositories.items.search(
                search_options.query,
                entity_type=relationship.entity_type,
                offset=pagination.offset,
                limit=pagination.page_size,
            )
        return PaginatedList(
            page=tuple(SearchResult(indexable_object=item) for item in items),
            total_elements=total,
            current_page=pagination.current_page,
            page_size=pagination.page_size,
        )


@dataclass(slots=True)
class LocalCatalogEntryImporter:
    """Entry importer creating a new catalog item from the external entry."""

    unit_of_work_factory: Callable[[], CatalogUnitOfWork]
    id_factory: Callable[[], str] = field(default=_new_item_id)

    async def __call__(self, entry: ExternalSourceEntry, collection_id: str) -> Item:
        return await asyncio.to_thread(self.import_entry, entry, collection_id)

    def import_entry(self, entry: ExternalSourceEntry, collection_id: str) -> Item:
        source_uri = entry.first_metadata_value(URI_METADATA_FIELD) or entry.self_link
        item = Item(
            id=self.id_factory(),
            name=entry.value,
            entity_type=entry.first_metadata_value(ENTITY_TYPE_METADATA_FIELD),
            owning_collection_id=collection_id,
            source_uri=source_uri,
        )
        with self.unit_of_work_factory() as uow:
            repository = uow.repositories.items
            if source_uri is not None:
                existing = repository.get_by_source_uri(source_uri)
                if existing is not None:
                    raise EntryAlreadyImportedError(source_uri, existing)
            repository.add(item)
            uow.commit()
        log.info("Created item %s from external entry %s", item.id, entry.id)
        return item


def add_catalog_item(
    *,
    unit_of_work_factory: Callable[[], CatalogUnitOfWork],
    name: str,
    collection_id: str | None = None,
    entity_type: str | None = None,
    handle: str | None = None,
) -> Item:
    """Store a new item directly in the local catalog."""

    if not name.strip():
        raise CatalogError("Item name must not be blank")
    item = Item(
        id=_new_item_id(),
        name=name.strip(),
        entity_type=entity_type,
        handle=handle,
        owning_collection_id=collection_id,
    )
    with unit_of_work_factory() as uow:
        uow.repositories.items.add(item)
        uow.commit()
    return item

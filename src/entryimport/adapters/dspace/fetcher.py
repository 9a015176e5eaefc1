"""DSpace-backed candidate lookup and entry import."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from entryimport.config.dspace import get_dspace_config

from .client import DSpaceAPIError, DSpaceClient
from .schema import DSpaceExternalSourceEntry
from .translator import translate_external_source_entry, translate_item, translate_search_response

if TYPE_CHECKING:
    from pathlib import Path

    from entryimport.config.dspace import DSpaceConfig
    from entryimport.domain.model import (
        ExternalSourceEntry,
        Item,
        PaginatedList,
        PaginatedSearchOptions,
        RelationshipOptions,
        SearchResult,
    )

log = getLogger(__name__)


@dataclass(slots=True)
class DSpaceCandidateFetcher:
    """Look up local entities through the DSpace discovery endpoint."""

    client: DSpaceClient

    async def __call__(
        self,
        relationship: RelationshipOptions,
        search_options: PaginatedSearchOptions,
    ) -> PaginatedList[SearchResult[Item]]:
        pagination = search_options.pagination
        response = await self.client.search_objects(
            query=search_options.query,
            configuration=search_options.configuration or relationship.search_configuration,
            fixed_filter=search_options.fixed_filter or relationship.filter,
            dso_type=search_options.dso_type,
            page=pagination.current_page - 1,
            size=pagination.page_size,
        )
        candidates = translate_search_response(response)
        log.debug(
            "DSpace returned %s of %s candidates for %r",
            len(candidates),
            candidates.total_elements,
            search_options.query,
        )
        return candidates


@dataclass(slots=True)
class DSpaceEntryImporter:
    """Create a DSpace item from an external source entry."""

    client: DSpaceClient

    async def __call__(self, entry: ExternalSourceEntry, collection_id: str) -> Item:
        if entry.self_link is None:
            raise DSpaceAPIError(f"External entry {entry.id} has no self link to import from")
        payload = await self.client.import_external_source_entry(
            entry_link=entry.self_link,
            collection_id=collection_id,
        )
        return translate_item(payload)


def build_dspace_adapters(
    config: DSpaceConfig | None = None,
) -> tuple[DSpaceCandidateFetcher, DSpaceEntryImporter]:
    client = DSpaceClient(config=config or get_dspace_config())
    return DSpaceCandidateFetcher(client), DSpaceEntryImporter(client)


def load_external_source_entry(path: Path) -> ExternalSourceEntry:
    """Read an external source entry exported from the DSpace REST API."""

    payload = DSpaceExternalSourceEntry.model_validate_json(path.read_text(encoding="utf-8"))
    return translate_external_source_entry(payload)

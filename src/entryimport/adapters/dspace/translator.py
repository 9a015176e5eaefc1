"""Translate DSpace payloads into domain objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from entryimport.domain.catalog import ENTITY_TYPE_METADATA_FIELD
from entryimport.domain.model import (
    ExternalSourceEntry,
    Item,
    MetadataValue,
    PaginatedList,
    SearchResult,
)

if TYPE_CHECKING:
    from .schema import (
        DSpaceDiscoverResponse,
        DSpaceExternalSourceEntry,
        DSpaceItem,
        DSpaceLinks,
        DSpaceMetadataMap,
    )


def translate_item(payload: DSpaceItem) -> Item:
    entity_type = payload.entity_type
    if entity_type is None:
        values = payload.metadata.get(ENTITY_TYPE_METADATA_FIELD)
        entity_type = values[0].value if values else None
    return Item(
        id=payload.uuid or payload.id,
        name=payload.name,
        entity_type=entity_type,
        handle=payload.handle,
    )


def translate_search_response(
    payload: DSpaceDiscoverResponse,
) -> PaginatedList[SearchResult[Item]]:
    result = payload.embedded.search_result
    page = result.page
    hits = tuple(
        SearchResult(
            indexable_object=translate_item(hit.embedded.indexable_object),
            hit_highlights={
                key: tuple(values) for key, values in (hit.hit_highlights or {}).items()
            },
        )
        for hit in result.embedded.objects
    )
    return PaginatedList(
        page=hits,
        total_elements=page.total_elements,
        # DSpace pages are 0-based
        current_page=page.number + 1,
        page_size=max(page.size, 1),
    )


def translate_external_source_entry(payload: DSpaceExternalSourceEntry) -> ExternalSourceEntry:
    return ExternalSourceEntry(
        id=payload.id,
        value=payload.value,
        display=payload.display,
        external_source=payload.external_source,
        metadata=translate_metadata(payload.metadata),
        self_link=_self_href(payload.links),
    )


def translate_metadata(metadata: DSpaceMetadataMap) -> dict[str, tuple[MetadataValue, ...]]:
    return {
        key: tuple(
            MetadataValue(
                value=value.value,
                language=value.language,
                authority=value.authority,
                confidence=value.confidence,
                place=value.place,
            )
            for value in sorted(values, key=lambda value: value.place)
        )
        for key, values in metadata.items()
    }


def _self_href(links: DSpaceLinks | None) -> str | None:
    if links is None or links.self_link is None:
        return None
    return links.self_link.href

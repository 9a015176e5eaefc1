from __future__ import annotations

import pytest

from entryimport.domain.model import (
    ExternalSourceEntry,
    MetadataValue,
    PaginatedList,
    PaginationOptions,
    RelationshipOptions,
    parse_fixed_filter,
)


def test_first_metadata_follows_key_order() -> None:
    entry = ExternalSourceEntry(
        id="1",
        value="Doe, Jane",
        display="Doe, Jane",
        external_source="orcid",
        metadata={
            "dc.identifier.uri": (MetadataValue(value="https://orcid.org/1"),),
            "dc.identifier.other": (MetadataValue(value="other-1"),),
        },
    )

    assert entry.first_metadata_value("dc.identifier.missing", "dc.identifier.uri") == (
        "https://orcid.org/1"
    )
    assert entry.first_metadata("dc.identifier.missing") is None


def test_entry_metadata_is_read_only() -> None:
    entry = ExternalSourceEntry(id="1", value="v", display="v", external_source="orcid")

    with pytest.raises(TypeError):
        entry.metadata["dc.title"] = (MetadataValue(value="x"),)  # type: ignore[index]


def test_relationship_entity_type_from_filter() -> None:
    relationship = RelationshipOptions(
        relationship_type="isAuthorOfPublication",
        filter="f.entityType=Person,equals&f.has_content=true,equals",
    )

    assert relationship.entity_type == "Person"
    assert RelationshipOptions(relationship_type="x").entity_type is None


def test_parse_fixed_filter_skips_malformed_chunks() -> None:
    assert parse_fixed_filter("f.entityType=Person,equals&broken&=x") == [
        ("f.entityType", "Person,equals")
    ]
    assert parse_fixed_filter(None) == []


def test_pagination_validates_bounds() -> None:
    with pytest.raises(ValueError, match="current_page"):
        PaginationOptions(id="p", current_page=0)
    with pytest.raises(ValueError, match="page_size"):
        PaginationOptions(id="p", page_size=0)

    assert PaginationOptions(id="p", current_page=3, page_size=5).offset == 10


def test_paginated_list_total_pages() -> None:
    assert PaginatedList(page=(), total_elements=11, page_size=5).total_pages == 3
    assert PaginatedList(page=(), total_elements=0).total_pages == 0

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy.exc import IntegrityError

from entryimport.adapters.sqlalchemy import SqlAlchemyItemRepository
from entryimport.domain.model import Item

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


def _seed(repository: SqlAlchemyItemRepository) -> None:
    repository.add(Item(id="p1", name="Doe, Jane", entity_type="Person"))
    repository.add(Item(id="p2", name="Doe, John", entity_type="Person"))
    repository.add(Item(id="o1", name="Doe Industries", entity_type="OrgUnit"))
    repository.add(Item(id="p3", name="Roe, Richard", entity_type="Person"))


def test_add_and_get_round_trip(sqlite_session: Session) -> None:
    repository = SqlAlchemyItemRepository(sqlite_session)
    item = Item(
        id="p1",
        name="Doe, Jane",
        entity_type="Person",
        handle="123456789/1",
        owning_collection_id="people",
        source_uri="https://orcid.org/0000-0002-1825-0097",
    )

    repository.add(item)
    sqlite_session.commit()

    assert repository.get("p1") == item
    assert repository.get_by_source_uri("https://orcid.org/0000-0002-1825-0097") == item
    assert repository.get("missing") is None


def test_search_is_case_insensitive_and_filtered(sqlite_session: Session) -> None:
    repository = SqlAlchemyItemRepository(sqlite_session)
    _seed(repository)

    items, total = repository.search("doe", entity_type="Person")

    assert total == 2
    assert [item.id for item in items] == ["p1", "p2"]


def test_search_pages_results(sqlite_session: Session) -> None:
    repository = SqlAlchemyItemRepository(sqlite_session)
    _seed(repository)

    items, total = repository.search("doe", offset=1, limit=1)

    assert total == 3
    assert [item.name for item in items] == ["Doe, Jane"]


def test_search_treats_wildcards_literally(sqlite_session: Session) -> None:
    repository = SqlAlchemyItemRepository(sqlite_session)
    _seed(repository)
    repository.add(Item(id="x1", name="100% Doe"))

    items, total = repository.search("100%")

    assert total == 1
    assert [item.id for item in items] == ["x1"]


def test_blank_query_lists_everything(sqlite_session: Session) -> None:
    repository = SqlAlchemyItemRepository(sqlite_session)
    _seed(repository)

    _, total = repository.search("  ")

    assert total == 4


def test_source_uri_is_unique(sqlite_session: Session) -> None:
    repository = SqlAlchemyItemRepository(sqlite_session)
    repository.add(Item(id="a", name="A", source_uri="https://example.org/a"))

    with pytest.raises(IntegrityError):
        repository.add(Item(id="b", name="B", source_uri="https://example.org/a"))

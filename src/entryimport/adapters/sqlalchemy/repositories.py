"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import func, insert, select

from entryimport.adapters.sqlalchemy.mappings import item_table
from entryimport.domain.model import Item

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement, Row, Select
    from sqlalchemy.orm import Session


def _like_pattern(query: str) -> str:
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _to_item(row: Row[Any]) -> Item:
    return Item(
        id=row.id,
        name=row.name,
        entity_type=row.entity_type,
        handle=row.handle,
        owning_collection_id=row.owning_collection_id,
        source_uri=row.source_uri,
    )


class SqlAlchemyItemRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Item) -> None:
        self.session.execute(
            insert(item_table).values(
                id=entity.id,
                name=entity.name,
                entity_type=entity.entity_type,
                handle=entity.handle,
                owning_collection_id=entity.owning_collection_id,
                source_uri=entity.source_uri,
            )
        )

    def get(self, item_id: str) -> Item | None:
        row = self.session.execute(
            select(item_table).where(item_table.c.id == item_id)
        ).one_or_none()
        return _to_item(row) if row is not None else None

    def get_by_source_uri(self, source_uri: str) -> Item | None:
        row = self.session.execute(
            select(item_table).where(item_table.c.source_uri == source_uri)
        ).one_or_none()
        return _to_item(row) if row is not None else None

    def search(
        self,
        query: str,
        *,
        entity_type: str | None = None,
        offset: int = 0,
        limit: int = 10,
    ) -> tuple[list[Item], int]:
        conditions: list[ColumnElement[bool]] = []
        terms = query.strip()
        if terms:
            conditions.append(item_table.c.name.ilike(_like_pattern(terms), escape="\\"))
        if entity_type is not None:
            conditions.append(item_table.c.entity_type == entity_type)

        total_stmt = _filtered(select(func.count()).select_from(item_table), conditions)
        total = self.session.execute(total_stmt).scalar_one()

        page_stmt = (
            _filtered(select(item_table), conditions)
            .order_by(item_table.c.name, item_table.c.id)
            .offset(offset)
            .limit(limit)
        )
        rows = self.session.execute(page_stmt).all()
        return [_to_item(row) for row in rows], total


def _filtered[TSelect: Select[Any]](
    stmt: TSelect,
    conditions: list[ColumnElement[bool]],
) -> TSelect:
    if not conditions:
        return stmt
    return stmt.where(*conditions)

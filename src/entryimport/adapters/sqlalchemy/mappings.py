"""SQLAlchemy table metadata for the local catalog."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    Column,
    DateTime,
    Dialect,
    Index,
    MetaData,
    String,
    Table,
    TypeDecorator,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


def _utcnow() -> datetime:
    return datetime.now(UTC)


metadata = MetaData()

item_table = Table(
    "item",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(512), nullable=False),
    Column("entity_type", String(128), nullable=True),
    Column("handle", String(128), nullable=True),
    Column("owning_collection_id", String(64), nullable=True),
    Column("source_uri", String(1024), nullable=True, unique=True),
    Column("created_at", UTCDateTime(), nullable=False, default=_utcnow),
    Index("ix_item_name", "name"),
    Index("ix_item_entity_type", "entity_type"),
)


def create_all_tables(engine: Engine) -> None:
    log.debug("Creating catalog tables on %s", engine.url)
    metadata.create_all(engine)

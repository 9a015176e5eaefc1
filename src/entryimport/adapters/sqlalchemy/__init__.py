"""SQLAlchemy adapter package for the local catalog."""

from __future__ import annotations

from .mappings import create_all_tables, item_table, metadata
from .repositories import SqlAlchemyItemRepository
from .unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    StartupError,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyCatalogUnitOfWork",
    "SqlAlchemyItemRepository",
    "StartupError",
    "create_all_tables",
    "is_started",
    "item_table",
    "metadata",
    "shutdown",
    "startup",
]

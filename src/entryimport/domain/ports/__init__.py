"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import CandidateFetcher
from .importing import ExternalEntryImporter
from .persistence import ItemRepository, Repository
from .selection import SelectionStore
from .unit_of_work import CatalogRepositories, CatalogUnitOfWork

__all__ = [
    "CandidateFetcher",
    "CatalogRepositories",
    "CatalogUnitOfWork",
    "ExternalEntryImporter",
    "ItemRepository",
    "Repository",
    "SelectionStore",
]

"""Resolved actions produced by committing an import workflow.

Each kind of outcome has its own type because each reaches the host through a
different channel: a reused local entity is handed over directly, a new entity
is created by a background import task, and authority imports are recognised
but not wired to any backend yet.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

from entryimport.domain.model import ImportType

if TYPE_CHECKING:
    import asyncio

    from entryimport.domain.model import ExternalSourceEntry, Item, ListableObject


@dataclass(frozen=True, slots=True, kw_only=True)
class LocalEntityImport:
    """The user picked an existing local entity instead of importing."""

    item: ListableObject
    import_type: Literal[ImportType.LOCAL_ENTITY] = ImportType.LOCAL_ENTITY


@dataclass(frozen=True, slots=True, kw_only=True)
class NewEntityImport:
    """A new entity is being created from the external entry."""

    entry: ExternalSourceEntry
    collection_id: str
    task: asyncio.Task[Item] = field(compare=False, repr=False)
    import_type: Literal[ImportType.NEW_ENTITY] = ImportType.NEW_ENTITY


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorityImportNotImplemented:
    """An authority choice was committed; nothing was dispatched."""

    import_type: Literal[ImportType.LOCAL_AUTHORITY, ImportType.NEW_AUTHORITY]
    authority: ListableObject | None = None
    reason: str = "Importing authorities is not implemented"


type ResolvedAction = LocalEntityImport | NewEntityImport | AuthorityImportNotImplemented

"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Literal, TypedDict, Unpack

from entryimport.adapters.dspace import build_dspace_adapters
from entryimport.adapters.selection import InMemorySelectionStore
from entryimport.adapters.sqlalchemy import SqlAlchemyCatalogUnitOfWork, is_started, startup
from entryimport.domain.catalog import (
    LocalCatalogCandidateFetcher,
    LocalCatalogEntryImporter,
    add_catalog_item,
)
from entryimport.domain.import_workflow import ExternalEntryImportWorkflow

if TYPE_CHECKING:
    from collections.abc import Callable

    from entryimport.config.dspace import DSpaceConfig
    from entryimport.domain.import_workflow import NewEntityImport, WorkflowSettings
    from entryimport.domain.model import (
        ExternalSourceEntry,
        Item,
        ListableObject,
        RelationshipOptions,
    )
    from entryimport.domain.ports import CandidateFetcher, ExternalEntryImporter, SelectionStore

type Backend = Literal["local", "dspace"]

log = getLogger(__name__)


class WorkflowCallbacks(TypedDict, total=False):
    on_imported: Callable[[ListableObject], None]
    on_close: Callable[[], None]
    on_import_dispatched: Callable[[NewEntityImport], None]
    on_entity_created: Callable[[Item], None]
    on_import_failed: Callable[[ExternalSourceEntry, BaseException], None]


@dataclass(slots=True)
class ImportAdapters:
    """Backend ports used by one import workflow."""

    fetch_candidates: CandidateFetcher
    import_entry: ExternalEntryImporter


def _ensure_catalog() -> None:
    if not is_started():
        startup()


def build_import_adapters(
    backend: Backend = "local",
    *,
    dspace_config: DSpaceConfig | None = None,
) -> ImportAdapters:
    """Wire candidate lookup and entry import for ``backend``."""

    if backend == "dspace":
        fetcher, importer = build_dspace_adapters(dspace_config)
        return ImportAdapters(fetch_candidates=fetcher, import_entry=importer)
    if backend != "local":
        raise ValueError(f"Unsupported backend: {backend}")

    _ensure_catalog()
    return ImportAdapters(
        fetch_candidates=LocalCatalogCandidateFetcher(SqlAlchemyCatalogUnitOfWork),
        import_entry=LocalCatalogEntryImporter(SqlAlchemyCatalogUnitOfWork),
    )


def create_import_workflow(  # noqa: PLR0913
    entry: ExternalSourceEntry,
    relationship: RelationshipOptions,
    collection_id: str,
    *,
    backend: Backend = "local",
    adapters: ImportAdapters | None = None,
    selection_store: SelectionStore | None = None,
    settings: WorkflowSettings | None = None,
    **callbacks: Unpack[WorkflowCallbacks],
) -> ExternalEntryImportWorkflow:
    """Build an import workflow for ``entry`` using the configured adapters."""

    effective_adapters = adapters or build_import_adapters(backend)
    log.info(
        "Resolving external entry %s (%s) for relationship %s using %s backend",
        entry.id,
        entry.external_source,
        relationship.relationship_type,
        backend if adapters is None else "custom",
    )
    return ExternalEntryImportWorkflow(
        entry,
        relationship,
        collection_id,
        selection_store=selection_store or InMemorySelectionStore(),
        fetch_candidates=effective_adapters.fetch_candidates,
        import_entry=effective_adapters.import_entry,
        settings=settings,
        **callbacks,
    )


def add_local_item(
    *,
    name: str,
    collection_id: str | None = None,
    entity_type: str | None = None,
    handle: str | None = None,
    unit_of_work_factory: Callable[[], SqlAlchemyCatalogUnitOfWork] | None = None,
) -> Item:
    """Add an item to the local catalog so later lookups can offer it."""

    if unit_of_work_factory is None:
        _ensure_catalog()
    item = add_catalog_item(
        unit_of_work_factory=unit_of_work_factory or SqlAlchemyCatalogUnitOfWork,
        name=name,
        collection_id=collection_id,
        entity_type=entity_type,
        handle=handle,
    )
    log.info("Added item %s (%s) to the local catalog", item.id, item.name)
    return item

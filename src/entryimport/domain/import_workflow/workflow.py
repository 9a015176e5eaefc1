"""Workflow resolving one external source entry into a single local action.

The workflow shows the user two candidate lists (local entities and local
authorities) and two "create new" options. It keeps exactly one of those
choices active, writes list selections through to the shared selection store,
and on commit dispatches the matching action before resetting itself and
asking the host to close.
"""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from entryimport.domain.model import (
    CandidateCollection,
    Failed,
    ImportType,
    PaginatedSearchOptions,
    PaginationOptions,
    Ready,
)

from .actions import AuthorityImportNotImplemented, LocalEntityImport, NewEntityImport
from .settings import URI_METADATA_FIELD, WorkflowSettings
from .state import ImportSelection

if TYPE_CHECKING:
    from collections.abc import Callable

    from entryimport.domain.model import (
        ExternalSourceEntry,
        Item,
        ListableObject,
        MetadataValue,
        PaginatedList,
        RelationshipOptions,
        RemoteData,
        SearchResult,
        Subscription,
    )
    from entryimport.domain.ports import (
        CandidateFetcher,
        ExternalEntryImporter,
        SelectionStore,
    )

    from .actions import ResolvedAction

    type LocalCandidates = PaginatedList[SearchResult[Item]]
    type ImportedHandler = Callable[[ListableObject], None]
    type CloseHandler = Callable[[], None]
    type DispatchHandler = Callable[[NewEntityImport], None]
    type CreatedHandler = Callable[[Item], None]
    type ImportFailedHandler = Callable[[ExternalSourceEntry, BaseException], None]

log = getLogger(__name__)


class WorkflowStateError(RuntimeError):
    """Raised when the workflow is driven outside of its lifecycle."""


class ExternalEntryImportWorkflow:
    """Coordinate the exclusive import choice for ``entry``.

    Hosts call ``initialize`` once from inside a running event loop, forward
    user events to the ``select_*``/``deselect_*`` handlers and finish with
    ``commit`` or ``cancel``. Outcomes are reported through the ``on_*``
    callbacks:

    - ``on_imported`` receives a reused local entity.
    - ``on_import_dispatched`` receives the ``NewEntityImport`` whose task
      creates the new entity; ``on_entity_created`` and ``on_import_failed``
      report how that task ended.
    - ``on_close`` fires once per commit or cancel.
    """

    def __init__(  # noqa: PLR0913
        self,
        entry: ExternalSourceEntry,
        relationship: RelationshipOptions,
        collection_id: str,
        *,
        selection_store: SelectionStore,
        fetch_candidates: CandidateFetcher,
        import_entry: ExternalEntryImporter,
        settings: WorkflowSettings | None = None,
        on_imported: ImportedHandler | None = None,
        on_close: CloseHandler | None = None,
        on_import_dispatched: DispatchHandler | None = None,
        on_entity_created: CreatedHandler | None = None,
        on_import_failed: ImportFailedHandler | None = None,
    ) -> None:
        self.entry = entry
        self.relationship = relationship
        self.collection_id = collection_id
        self.settings = settings or WorkflowSettings()
        self.uri: MetadataValue | None = None
        self.search_options: PaginatedSearchOptions | None = None

        self._store = selection_store
        self._fetch_candidates = fetch_candidates
        self._import_entry = import_entry
        self._on_imported = on_imported
        self._on_close = on_close
        self._on_import_dispatched = on_import_dispatched
        self._on_entity_created = on_entity_created
        self._on_import_failed = on_import_failed

        self._selection = ImportSelection()
        self._local_entities: CandidateCollection[LocalCandidates] | None = None
        self._subscription: Subscription | None = None
        self._pending_imports: set[asyncio.Task[Item]] = set()

    @property
    def import_type(self) -> ImportType:
        return self._selection.import_type

    @property
    def selected_entity(self) -> ListableObject | None:
        return self._selection.selected_entity

    @property
    def selected_authority(self) -> ListableObject | None:
        return self._selection.selected_authority

    @property
    def local_entities(self) -> CandidateCollection[LocalCandidates]:
        """Local entities with a name similar to the entry."""

        if self._local_entities is None:
            raise WorkflowStateError("Workflow has not been initialised")
        return self._local_entities

    @property
    def pending_imports(self) -> tuple[asyncio.Task[Item], ...]:
        return tuple(self._pending_imports)

    def initialize(self) -> CandidateCollection[LocalCandidates]:
        """Start the one-off lookup of local entities similar to the entry."""

        if self._local_entities is not None:
            raise WorkflowStateError("Workflow has already been initialised")
        _running_loop("initialise the import workflow")

        self.uri = self.entry.first_metadata(URI_METADATA_FIELD)
        pagination = PaginationOptions(
            id=self.settings.pagination_id,
            page_size=self.settings.page_size,
        )
        self.search_options = PaginatedSearchOptions(query=self.entry.value, pagination=pagination)
        self._local_entities = CandidateCollection.from_awaitable(
            self._fetch_candidates(self.relationship, self.search_options),
            name=f"local-candidates:{self.entry.id}",
        )
        self._subscription = self._local_entities.subscribe(self._log_candidates)
        return self._local_entities

    def close(self) -> None:
        """Release the candidate subscription and ask the host to close."""

        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
        if self._on_close is not None:
            self._on_close()

    def cancel(self) -> None:
        """Drop the current choice without dispatching anything."""

        log.debug("Import of external entry %s cancelled", self.entry.id)
        self._selection.reset()
        self._deselect_all_lists()
        self.close()

    async def wait_for_imports(self) -> None:
        """Wait for dispatched imports; their outcome is reported via callbacks."""

        if self._pending_imports:
            await asyncio.gather(*self._pending_imports, return_exceptions=True)

    def select_entity(self, entity: ListableObject | None) -> None:
        if entity is None:
            log.debug("Ignoring selection of an undefined entity")
            return
        self._selection.select_entity(entity)
        self._write_selection(self.settings.entity_list_id, entity)

    def deselect_entity(self) -> None:
        self._selection.deselect_entity()
        self._store.clear_all((self.settings.entity_list_id,))

    def select_new_entity(self) -> None:
        """Select or deselect the new entity option."""

        if self._selection.toggle_new_entity():
            self._deselect_all_lists()

    def select_authority(self, authority: ListableObject | None) -> None:
        if authority is None:
            log.debug("Ignoring selection of an undefined authority")
            return
        self._selection.select_authority(authority)
        self._write_selection(self.settings.authority_list_id, authority)

    def deselect_authority(self) -> None:
        self._selection.deselect_authority()
        self._store.clear_all((self.settings.authority_list_id,))

    def select_new_authority(self) -> None:
        """Select or deselect the new authority option."""

        if self._selection.toggle_new_authority():
            self._deselect_all_lists()

    def commit(self) -> ResolvedAction | None:
        """Perform the import for the active choice, then reset and close."""

        try:
            return self._dispatch()
        finally:
            self._selection.reset()
            self._deselect_all_lists()
            self.close()

    def _dispatch(self) -> ResolvedAction | None:
        match self._selection.import_type:
            case ImportType.LOCAL_ENTITY:
                return self._import_local_entity()
            case ImportType.NEW_ENTITY:
                return self._import_new_entity()
            case ImportType.LOCAL_AUTHORITY:
                return self._import_local_authority()
            case ImportType.NEW_AUTHORITY:
                return self._import_new_authority()
            case _:
                log.debug("Nothing selected for external entry %s", self.entry.id)
                return None

    def _import_local_entity(self) -> LocalEntityImport | None:
        entity = self._selection.selected_entity
        if entity is None:
            return None
        log.info("Using local entity %s for external entry %s", entity.id, self.entry.id)
        if self._on_imported is not None:
            self._on_imported(entity)
        return LocalEntityImport(item=entity)

    def _import_new_entity(self) -> NewEntityImport:
        loop = _running_loop("import a new entity")
        task = loop.create_task(
            self._import_entry(self.entry, self.collection_id),
            name=f"import-entry:{self.entry.id}",
        )
        self._pending_imports.add(task)
        task.add_done_callback(self._import_finished)
        log.info(
            "Dispatched import of external entry %s into collection %s",
            self.entry.id,
            self.collection_id,
        )
        action = NewEntityImport(entry=self.entry, collection_id=self.collection_id, task=task)
        if self._on_import_dispatched is not None:
            self._on_import_dispatched(action)
        return action

    def _import_local_authority(self) -> AuthorityImportNotImplemented:
        # TODO: wire local authorities once an authority backend port exists
        log.info("Importing local authorities is not implemented; nothing dispatched")
        return AuthorityImportNotImplemented(
            import_type=ImportType.LOCAL_AUTHORITY,
            authority=self._selection.selected_authority,
        )

    def _import_new_authority(self) -> AuthorityImportNotImplemented:
        log.info("Importing new authorities is not implemented; nothing dispatched")
        return AuthorityImportNotImplemented(import_type=ImportType.NEW_AUTHORITY)

    def _import_finished(self, task: asyncio.Task[Item]) -> None:
        self._pending_imports.discard(task)
        if task.cancelled():
            log.warning("Import of external entry %s was cancelled", self.entry.id)
            return
        error = task.exception()
        if error is not None:
            log.warning("Import of external entry %s failed: %s", self.entry.id, error)
            if self._on_import_failed is not None:
                self._on_import_failed(self.entry, error)
            return
        item = task.result()
        log.info("Imported external entry %s as item %s", self.entry.id, item.id)
        if self._on_entity_created is not None:
            self._on_entity_created(item)

    def _write_selection(self, list_id: str, item: ListableObject) -> None:
        # lists are single-select
        self._store.clear_all((list_id,))
        self._store.select(list_id, item)

    def _deselect_all_lists(self) -> None:
        self._store.clear_all(self.settings.list_ids)

    def _log_candidates(self, phase: RemoteData[LocalCandidates]) -> None:
        if isinstance(phase, Ready):
            log.info(
                "Found %s local candidates for %r",
                phase.payload.total_elements,
                self.entry.value,
            )
        elif isinstance(phase, Failed):
            log.warning("Local candidates for %r unavailable: %s", self.entry.value, phase.message)


def _running_loop(action: str) -> asyncio.AbstractEventLoop:
    try:
        return asyncio.get_running_loop()
    except RuntimeError as exc:
        raise WorkflowStateError(f"Cannot {action} outside of a running event loop") from exc

"""Terminal host surface for the import workflow."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from entryimport.app import WorkflowCallbacks
from entryimport.domain.model import Authority, Failed, ImportType, Pending, Ready

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from entryimport.domain.import_workflow import (
        ExternalEntryImportWorkflow,
        NewEntityImport,
        ResolvedAction,
    )
    from entryimport.domain.model import (
        ExternalSourceEntry,
        Item,
        ListableObject,
        PaginatedList,
        RemoteData,
        SearchResult,
    )

    type LineReader = Callable[[str], Awaitable[str]]

log = getLogger(__name__)

HELP = """Commands:
  e N   use local entity number N
  e-    deselect the local entity
  n     toggle importing as a new entity
  a ID  use local authority ID
  a-    deselect the local authority
  na    toggle importing as a new authority
  c     commit the current choice
  q     cancel"""


class CommandError(ValueError):
    """Raised for commands the terminal session cannot interpret."""


class TerminalSession:
    """Render the workflow state as text and translate typed commands into events."""

    def __init__(
        self,
        build_workflow: Callable[[WorkflowCallbacks], ExternalEntryImportWorkflow],
        *,
        output: Callable[[str], None] = print,
    ) -> None:
        self.output = output
        self.candidates: tuple[SearchResult[Item], ...] = ()
        self.closed = False
        self.action: ResolvedAction | None = None
        self.workflow = build_workflow(
            WorkflowCallbacks(
                on_imported=self._report_imported,
                on_close=self._mark_closed,
                on_import_dispatched=self._report_dispatched,
                on_entity_created=self._report_created,
                on_import_failed=self._report_failed,
            )
        )

    def show_candidates(self, phase: RemoteData[PaginatedList[SearchResult[Item]]]) -> None:
        match phase:
            case Pending():
                self.output("Searching for similar local entities...")
            case Failed():
                self.output(f"Local entity lookup failed: {phase.message}")
            case Ready(payload=candidates):
                self.candidates = candidates.page
                if not candidates.page:
                    self.output("No similar local entities found.")
                    return
                self.output(
                    f"Local entities ({len(candidates)} of {candidates.total_elements}):"
                )
                for index, hit in enumerate(candidates.page, start=1):
                    self.output(f"  [{index}] {_describe_item(hit.indexable_object)}")

    def handle(self, line: str) -> None:  # noqa: C901
        command, _, argument = line.strip().partition(" ")
        argument = argument.strip()
        match command:
            case "e":
                self.workflow.select_entity(self._candidate(argument))
            case "e-":
                self.workflow.deselect_entity()
            case "n":
                self.workflow.select_new_entity()
            case "a":
                if not argument:
                    raise CommandError("Usage: a ID")
                self.workflow.select_authority(Authority(id=argument, value=argument))
            case "a-":
                self.workflow.deselect_authority()
            case "na":
                self.workflow.select_new_authority()
            case "c":
                self.action = self.workflow.commit()
                return
            case "q":
                self.workflow.cancel()
                return
            case "" | "?" | "help":
                self.output(HELP)
                return
            case _:
                raise CommandError(f"Unknown command {command!r}, type ? for help")
        self.output(self.describe_choice())

    def describe_choice(self) -> str:
        workflow = self.workflow
        match workflow.import_type:
            case ImportType.LOCAL_ENTITY if workflow.selected_entity is not None:
                return f"Selected: local entity {_describe_listable(workflow.selected_entity)}"
            case ImportType.LOCAL_AUTHORITY if workflow.selected_authority is not None:
                return f"Selected: local authority {workflow.selected_authority.id}"
            case ImportType.NEW_ENTITY:
                return f"Selected: import {workflow.entry.value!r} as a new entity"
            case ImportType.NEW_AUTHORITY:
                return f"Selected: import {workflow.entry.value!r} as a new authority"
            case _:
                return "Nothing selected"

    def _candidate(self, argument: str) -> SearchResult[Item]:
        try:
            index = int(argument)
        except ValueError as exc:
            raise CommandError("Usage: e N (N is a candidate number)") from exc
        if not 1 <= index <= len(self.candidates):
            raise CommandError(f"No local entity number {index}")
        return self.candidates[index - 1]

    def _mark_closed(self) -> None:
        self.closed = True

    def _report_imported(self, item: ListableObject) -> None:
        self.output(f"Using local entity {_describe_listable(item)}")

    def _report_dispatched(self, action: NewEntityImport) -> None:
        self.output(
            f"Importing {action.entry.value!r} into collection {action.collection_id}..."
        )

    def _report_created(self, item: Item) -> None:
        self.output(f"Created item {_describe_item(item)}")

    def _report_failed(self, entry: ExternalSourceEntry, error: BaseException) -> None:
        self.output(f"Import of {entry.value!r} failed: {error}")


async def read_line_from_stdin(prompt: str) -> str:
    return await asyncio.to_thread(input, prompt)


async def run_terminal_session(
    session: TerminalSession,
    *,
    read_line: LineReader = read_line_from_stdin,
) -> ResolvedAction | None:
    """Drive ``session`` until the workflow asks to close, then wait for imports."""

    workflow = session.workflow
    subscription = workflow.initialize().subscribe(session.show_candidates)
    session.output(f"Resolving {workflow.entry.display!r} from {workflow.entry.external_source}")
    if workflow.uri is not None:
        session.output(f"URI: {workflow.uri.value}")
    try:
        while not session.closed:
            try:
                line = await read_line("> ")
            except EOFError:
                workflow.cancel()
                break
            try:
                session.handle(line)
            except CommandError as exc:
                log.debug("Rejected command %r: %s", line, exc)
                session.output(str(exc))
    finally:
        subscription.unsubscribe()

    await workflow.wait_for_imports()
    return session.action


def _describe_item(item: Item) -> str:
    details = [value for value in (item.entity_type, item.handle) if value]
    suffix = f" ({', '.join(details)})" if details else ""
    return f"{item.name}{suffix}"


def _describe_listable(item: ListableObject) -> str:
    indexable = getattr(item, "indexable_object", item)
    name = getattr(indexable, "name", None)
    return f"{name} [{item.id}]" if name else item.id

from __future__ import annotations

from typing import TYPE_CHECKING, Unpack

import pytest

from entryimport.app import ImportAdapters, WorkflowCallbacks, create_import_workflow
from entryimport.domain.catalog import CatalogError
from entryimport.domain.import_workflow import WorkflowSettings
from entryimport.domain.model import ExternalSourceEntry, Item, RelationshipOptions
from entryimport.ui import cli as cli_module
from tests.helpers.dspace import FIXTURES
from tests.helpers.import_workflow import FakeCandidateFetcher, FakeEntryImporter

if TYPE_CHECKING:
    from entryimport.domain.import_workflow import ExternalEntryImportWorkflow
    from entryimport.ui.interactive import TerminalSession


def test_catalog_add_passes_arguments(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_add(**kwargs: object) -> Item:
        captured.update(kwargs)
        return Item(id="item-1", name="Doe, Jane")

    monkeypatch.setattr(cli_module, "add_local_item", fake_add)

    cli_module.main(
        [
            "catalog",
            "add",
            "--name",
            "Doe, Jane",
            "--collection-id",
            "people",
            "--entity-type",
            "Person",
        ]
    )

    assert captured == {
        "name": "Doe, Jane",
        "collection_id": "people",
        "entity_type": "Person",
        "handle": None,
    }


def test_catalog_add_failure_exits_with_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_add(**_: object) -> Item:
        raise CatalogError("Item name must not be blank")

    monkeypatch.setattr(cli_module, "add_local_item", fake_add)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["catalog", "add", "--name", " ", "--collection-id", "people"])

    assert excinfo.value.code == 1


def test_resolve_requires_collection() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["resolve", "--entry-file", "entry.json", "--relationship-type", "x"])

    assert excinfo.value.code == 2


def test_resolve_builds_workflow_from_entry_file(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}
    monkeypatch.setenv("ENTRYIMPORT_PAGE_SIZE", "3")

    def fake_create(
        entry: ExternalSourceEntry,
        relationship: RelationshipOptions,
        collection_id: str,
        *,
        backend: str,
        settings: WorkflowSettings,
        **callbacks: Unpack[WorkflowCallbacks],
    ) -> ExternalEntryImportWorkflow:
        captured.update(
            entry=entry,
            relationship=relationship,
            collection_id=collection_id,
            backend=backend,
            settings=settings,
        )
        return create_import_workflow(
            entry,
            relationship,
            collection_id,
            adapters=ImportAdapters(
                fetch_candidates=FakeCandidateFetcher(),
                import_entry=FakeEntryImporter(),
            ),
            settings=settings,
            **callbacks,
        )

    async def fake_run(session: TerminalSession) -> None:
        session.workflow.initialize()
        session.workflow.cancel()
        captured["closed"] = session.closed

    monkeypatch.setattr(cli_module, "create_import_workflow", fake_create)
    monkeypatch.setattr(cli_module, "run_terminal_session", fake_run)

    cli_module.main(
        [
            "resolve",
            "--entry-file",
            str(FIXTURES / "external_source_entry.json"),
            "--collection-id",
            "people",
            "--relationship-type",
            "isAuthorOfPublication",
            "--filter",
            "f.entityType=Person,equals",
            "--search-configuration",
            "person",
        ]
    )

    entry = captured["entry"]
    relationship = captured["relationship"]
    settings = captured["settings"]
    assert isinstance(entry, ExternalSourceEntry)
    assert entry.value == "Doe, Jane"
    assert isinstance(relationship, RelationshipOptions)
    assert relationship.entity_type == "Person"
    assert relationship.search_configuration == "person"
    assert isinstance(settings, WorkflowSettings)
    assert settings.page_size == 3
    assert captured["collection_id"] == "people"
    assert captured["backend"] == "local"
    assert captured["closed"] is True


def test_resolve_with_missing_entry_file_exits_with_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(
            [
                "resolve",
                "--entry-file",
                "does-not-exist.json",
                "--collection-id",
                "people",
                "--relationship-type",
                "isAuthorOfPublication",
            ]
        )

    assert excinfo.value.code == 1

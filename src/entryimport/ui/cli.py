from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from entryimport.adapters.dspace import load_external_source_entry
from entryimport.app import add_local_item, create_import_workflow
from entryimport.config import configure_logging, get_workflow_settings
from entryimport.domain.model import RelationshipOptions
from entryimport.ui.interactive import TerminalSession, run_terminal_session

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from entryimport.app import WorkflowCallbacks
    from entryimport.domain.import_workflow import ExternalEntryImportWorkflow, ResolvedAction

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Resolve external source entries against the local catalog"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser(
        "resolve",
        help="Choose how to import one external source entry",
    )
    resolve.add_argument(
        "--entry-file",
        type=Path,
        required=True,
        help="JSON file holding the external source entry",
    )
    resolve.add_argument(
        "--collection-id",
        type=str,
        required=True,
        help="Collection receiving newly imported entities",
    )
    resolve.add_argument(
        "--relationship-type",
        type=str,
        required=True,
        help="Relationship type the entry is being linked through",
    )
    resolve.add_argument(
        "--filter",
        type=str,
        help="Fixed discovery filter, e.g. f.entityType=Person,equals",
    )
    resolve.add_argument(
        "--search-configuration",
        type=str,
        help="Discovery configuration used for the local lookup",
    )
    resolve.add_argument(
        "--backend",
        choices=("local", "dspace"),
        default="local",
        help="Where candidates are looked up and entries imported (default: local)",
    )

    catalog = subparsers.add_parser("catalog", help="Local catalog commands")
    catalog_sub = catalog.add_subparsers(dest="catalog_command", required=True)
    catalog_add = catalog_sub.add_parser("add", help="Add an item to the local catalog")
    catalog_add.add_argument(
        "--name",
        type=str,
        required=True,
        help="Display name of the item",
    )
    catalog_add.add_argument(
        "--collection-id",
        type=str,
        required=True,
        help="Collection the item belongs to",
    )
    catalog_add.add_argument(
        "--entity-type",
        type=str,
        help="Optional entity type, e.g. Person",
    )
    catalog_add.add_argument(
        "--handle",
        type=str,
        help="Optional persistent handle",
    )

    return parser.parse_args(list(argv))


async def _resolve(args: argparse.Namespace) -> ResolvedAction | None:
    entry = load_external_source_entry(args.entry_file)
    relationship = RelationshipOptions(
        relationship_type=args.relationship_type,
        filter=args.filter,
        search_configuration=args.search_configuration,
    )
    settings = get_workflow_settings()

    def build_workflow(callbacks: WorkflowCallbacks) -> ExternalEntryImportWorkflow:
        return create_import_workflow(
            entry,
            relationship,
            args.collection_id,
            backend=args.backend,
            settings=settings,
            **callbacks,
        )

    session = TerminalSession(build_workflow)
    return await run_terminal_session(session)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    load_dotenv()
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        if parsed_args.command == "resolve":
            action = asyncio.run(_resolve(parsed_args))
            log.info("Resolved entry with action: %s", action)
        elif parsed_args.command == "catalog" and parsed_args.catalog_command == "add":
            item = add_local_item(
                name=parsed_args.name,
                collection_id=parsed_args.collection_id,
                entity_type=parsed_args.entity_type,
                handle=parsed_args.handle,
            )
            log.info("Created item %s", item.id)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


if __name__ == "__main__":
    signal(SIGINT, sigint_handler)
    main()

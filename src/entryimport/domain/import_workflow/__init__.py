"""Exclusive-choice workflow for importing external source entries."""

from __future__ import annotations

from .actions import (
    AuthorityImportNotImplemented,
    LocalEntityImport,
    NewEntityImport,
    ResolvedAction,
)
from .settings import WorkflowSettings
from .state import ImportSelection
from .workflow import ExternalEntryImportWorkflow, WorkflowStateError

__all__ = [
    "AuthorityImportNotImplemented",
    "ExternalEntryImportWorkflow",
    "ImportSelection",
    "LocalEntityImport",
    "NewEntityImport",
    "ResolvedAction",
    "WorkflowSettings",
    "WorkflowStateError",
]

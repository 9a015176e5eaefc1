"""Environment overrides for the import workflow settings."""

from __future__ import annotations

from entryimport.domain.import_workflow.settings import DEFAULT_PAGE_SIZE, WorkflowSettings

from .env import optional_positive_int


def get_workflow_settings() -> WorkflowSettings:
    page_size = optional_positive_int("ENTRYIMPORT_PAGE_SIZE", DEFAULT_PAGE_SIZE)
    return WorkflowSettings(page_size=page_size)

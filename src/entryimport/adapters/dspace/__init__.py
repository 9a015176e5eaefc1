"""DSpace REST adapter entry points."""

from __future__ import annotations

from .client import DSpaceAPIError, DSpaceClient
from .fetcher import (
    DSpaceCandidateFetcher,
    DSpaceEntryImporter,
    build_dspace_adapters,
    load_external_source_entry,
)

__all__ = [
    "DSpaceAPIError",
    "DSpaceCandidateFetcher",
    "DSpaceClient",
    "DSpaceEntryImporter",
    "build_dspace_adapters",
    "load_external_source_entry",
]

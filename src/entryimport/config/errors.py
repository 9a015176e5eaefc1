"""Errors raised while reading entryimport settings from the environment."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ConfigurationError(RuntimeError):
    """A setting such as ``ENTRYIMPORT_PAGE_SIZE`` holds an unusable value."""


class MissingConfigurationError(ConfigurationError):
    """Required variables, e.g. ``DSPACE_API_URL`` for the DSpace backend, are unset or blank."""

    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(sorted(names))
        super().__init__(f"Missing configuration for: {', '.join(self.names)}")

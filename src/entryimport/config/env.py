"""Readers for environment-backed settings.

Blank values count as unset everywhere, so ``FOO=`` in a ``.env`` file does not
override a default.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import ConfigurationError, MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence


def optional_env_var(name: str) -> str | None:
    """Return the stripped value of ``name``, or ``None`` when unset or blank."""

    raw = os.getenv(name, "").strip()
    return raw or None


def require_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return the raw values of ``names``, naming every missing one in the error."""

    found = {name: os.environ[name] for name in names if optional_env_var(name) is not None}
    missing = set(names) - found.keys()
    if missing:
        raise MissingConfigurationError(missing)
    return found


def require_env_var(name: str) -> str:
    return require_env_vars([name])[name]


def optional_positive_int(name: str, default: int) -> int:
    raw = optional_env_var(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value

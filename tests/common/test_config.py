from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import pytest

from entryimport.config import (
    ConfigurationError,
    MissingConfigurationError,
    configure_logging,
    get_dspace_config,
    get_workflow_settings,
    optional_env_var,
    require_env_var,
    require_env_vars,
)
from entryimport.config.env import optional_positive_int

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name in ("httpx", "httpcore", "hishel"):
        logging.getLogger(name).setLevel(logging.NOTSET)


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_raises_when_any_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_VAR", raising=False)

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_VAR"])

    assert "MISSING_VAR" in str(exc.value)


def test_require_env_vars_names_every_missing_var(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PRESENT_VAR", "value")
    monkeypatch.delenv("MISSING_A", raising=False)
    monkeypatch.setenv("MISSING_B", "")

    with pytest.raises(MissingConfigurationError, match="MISSING_A, MISSING_B") as exc:
        require_env_vars(["PRESENT_VAR", "MISSING_B", "MISSING_A"])

    assert exc.value.names == ("MISSING_A", "MISSING_B")


def test_require_env_var_handles_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    with pytest.raises(MissingConfigurationError):
        require_env_var("EXAMPLE_VAR")


def test_optional_env_var_treats_blank_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "  ")

    assert optional_env_var("EXAMPLE_VAR") is None
    assert os.getenv("EXAMPLE_VAR") == "  "


@pytest.mark.parametrize("raw", ["zero", "0", "-3"])
def test_optional_positive_int_rejects_invalid_values(
    monkeypatch: pytest.MonkeyPatch, raw: str
) -> None:
    monkeypatch.setenv("EXAMPLE_SIZE", raw)

    with pytest.raises(ConfigurationError):
        optional_positive_int("EXAMPLE_SIZE", 5)


def test_workflow_settings_default_page_size(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ENTRYIMPORT_PAGE_SIZE", raising=False)

    settings = get_workflow_settings()

    assert settings.page_size == 5
    assert settings.list_ids == (
        "external-source-import-entity",
        "external-source-import-authority",
    )


def test_workflow_settings_page_size_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENTRYIMPORT_PAGE_SIZE", "20")

    assert get_workflow_settings().page_size == 20


def test_dspace_config_requires_api_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DSPACE_API_URL", raising=False)

    with pytest.raises(MissingConfigurationError):
        get_dspace_config()


def test_dspace_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DSPACE_API_URL", "https://repo.example/server/api")
    monkeypatch.setenv("DSPACE_AUTH_TOKEN", "token-123")

    config = get_dspace_config()

    resilience = config.resilience
    assert resilience.base_url == "https://repo.example/server/api/"
    assert resilience.default_headers is not None
    assert resilience.default_headers["Authorization"] == "Bearer token-123"
    assert resilience.ratelimit is not None
    assert "POST" not in resilience.retry.allowed_methods


def test_dspace_config_without_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DSPACE_API_URL", "https://repo.example/server/api/")
    monkeypatch.delenv("DSPACE_AUTH_TOKEN", raising=False)

    config = get_dspace_config()

    assert config.resilience.default_headers is not None
    assert "Authorization" not in config.resilience.default_headers


def test_dspace_cache_only_keeps_discovery_payloads(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DSPACE_API_URL", "https://repo.example/server/api")

    cache = get_dspace_config().resilience.cache

    assert cache is not None
    assert cache.should_cache is not None
    assert cache.should_cache({"_embedded": {"searchResult": {}}})
    assert not cache.should_cache({"message": "Not Found"})
    assert not cache.should_cache(["_embedded"])


@pytest.mark.usefixtures("restore_root_logger")
def test_configure_logging_reads_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENTRYIMPORT_LOG_LEVEL", "debug")

    configure_logging(force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING


@pytest.mark.usefixtures("restore_root_logger")
def test_configure_logging_ignores_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENTRYIMPORT_LOG_LEVEL", "chatty")

    configure_logging(force=True)

    assert logging.getLogger().level == logging.INFO

"""Application configuration helpers."""

from __future__ import annotations

from .dspace import DSpaceConfig, get_dspace_config
from .env import optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config
from .workflow import get_workflow_settings

__all__ = [
    "CacheConfig",
    "ConfigurationError",
    "DSpaceConfig",
    "DatabaseConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "configure_logging",
    "get_database_config",
    "get_dspace_config",
    "get_storage_config",
    "get_workflow_settings",
    "optional_env_var",
    "require_env_var",
    "require_env_vars",
]

"""Locations of the local catalog database and the HTTP cache."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var

APP_DIR_NAME: Final[str] = "entryimport"
CATALOG_FILENAME: Final[str] = "catalog.db"
HTTP_CACHE_FILENAME: Final[str] = "http_cache.db"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    catalog_filename: str = CATALOG_FILENAME
    http_cache_filename: str = HTTP_CACHE_FILENAME

    def path_for(self, filename: str, *, ensure: bool = True) -> Path:
        """Resolve ``filename`` inside the data directory, creating it unless ``ensure`` is off."""

        data_dir = self.data_dir.expanduser().resolve()
        if ensure:
            data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir / filename

    def catalog_path(self, *, ensure: bool = True) -> Path:
        return self.path_for(self.catalog_filename, ensure=ensure)

    def http_cache_path(self, *, ensure: bool = True) -> Path:
        return self.path_for(self.http_cache_filename, ensure=ensure)

    def catalog_uri(self) -> str:
        return f"sqlite+pysqlite:///{self.catalog_path()}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


def default_data_dir() -> Path:
    base = os.getenv("XDG_DATA_HOME")
    base_path = Path(base) if base else Path.home() / ".local" / "share"
    return base_path / APP_DIR_NAME


def get_storage_config() -> StorageConfig:
    configured = optional_env_var("ENTRYIMPORT_DATA_DIR")
    return StorageConfig(data_dir=Path(configured) if configured else default_data_dir())


def get_database_config(*, storage: StorageConfig | None = None) -> DatabaseConfig:
    uri = optional_env_var("DATABASE_URI")
    if uri is None:
        uri = (storage or get_storage_config()).catalog_uri()
    return DatabaseConfig(uri=uri)

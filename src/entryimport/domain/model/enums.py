"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ImportType(StrEnum):
    """The kind of import the user currently has selected for an external entry."""

    NONE = "None"
    LOCAL_ENTITY = "LocalEntity"
    LOCAL_AUTHORITY = "LocalAuthority"
    NEW_ENTITY = "NewEntity"
    NEW_AUTHORITY = "NewAuthority"


class RemoteDataState(StrEnum):
    PENDING = "pending"
    FAILED = "failed"
    READY = "ready"

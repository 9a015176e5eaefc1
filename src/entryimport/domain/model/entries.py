"""External source entries and their metadata."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class MetadataValue:
    value: str
    language: str | None = None
    authority: str | None = None
    confidence: int = -1
    place: int = 0


def _freeze_metadata(
    metadata: Mapping[str, tuple[MetadataValue, ...]],
) -> Mapping[str, tuple[MetadataValue, ...]]:
    return MappingProxyType({key: tuple(values) for key, values in metadata.items()})


@dataclass(frozen=True, slots=True)
class ExternalSourceEntry:
    """A record discovered in a third-party source, waiting to be resolved locally.

    ``value`` is the free-text label of the record and doubles as the default
    query when looking for similar local entities.
    """

    id: str
    value: str
    display: str
    external_source: str
    metadata: Mapping[str, tuple[MetadataValue, ...]] = field(
        default_factory=dict[str, tuple[MetadataValue, ...]]
    )
    self_link: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", _freeze_metadata(self.metadata))

    def first_metadata(self, *keys: str) -> MetadataValue | None:
        """Return the first value stored under any of ``keys``, in key order."""

        for key in keys:
            values = self.metadata.get(key)
            if values:
                return values[0]
        return None

    def first_metadata_value(self, *keys: str) -> str | None:
        entry = self.first_metadata(*keys)
        return entry.value if entry is not None else None

"""Transaction boundary around the local catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from entryimport.domain.ports.persistence import ItemRepository


@dataclass(slots=True)
class CatalogRepositories:
    """Repositories sharing one catalog transaction."""

    items: ItemRepository


@runtime_checkable
class CatalogUnitOfWork(Protocol):
    """Opened with ``with``; changes persist only after ``commit()``."""

    @property
    def repositories(self) -> CatalogRepositories: ...

    def __enter__(self) -> Self: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...

"""Port for the shared, keyed list-selection store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from entryimport.domain.model import ListableObject


@runtime_checkable
class SelectionStore(Protocol):
    """Registry of selected objects per list id, shared by several list views."""

    def select(self, list_id: str, item: ListableObject) -> None: ...

    def clear_all(self, list_ids: Iterable[str]) -> None: ...

    def selection(self, list_id: str) -> tuple[ListableObject, ...]: ...


__all__ = ["SelectionStore"]

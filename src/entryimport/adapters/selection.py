"""In-memory selection store shared by list views."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from entryimport.domain.model import ListableObject

log = getLogger(__name__)


class InMemorySelectionStore:
    """Keeps the selected objects of every list, keyed by list id.

    Objects are compared by ``id`` so re-selecting an equal object is a no-op.
    """

    def __init__(self) -> None:
        self._selections: dict[str, list[ListableObject]] = {}

    def select(self, list_id: str, item: ListableObject) -> None:
        selected = self._selections.setdefault(list_id, [])
        if any(existing.id == item.id for existing in selected):
            return
        selected.append(item)
        log.debug("Selected %s in list %s", item.id, list_id)

    def deselect(self, list_id: str, item: ListableObject) -> None:
        selected = self._selections.get(list_id)
        if not selected:
            return
        self._selections[list_id] = [existing for existing in selected if existing.id != item.id]

    def clear_all(self, list_ids: Iterable[str]) -> None:
        for list_id in list_ids:
            if self._selections.pop(list_id, None):
                log.debug("Cleared selection of list %s", list_id)

    def selection(self, list_id: str) -> tuple[ListableObject, ...]:
        return tuple(self._selections.get(list_id, ()))

    def is_selected(self, list_id: str, item: ListableObject) -> bool:
        return any(existing.id == item.id for existing in self._selections.get(list_id, ()))


if TYPE_CHECKING:
    from entryimport.domain.ports import SelectionStore

    _store_check: SelectionStore = InMemorySelectionStore()

"""Mutually exclusive import choice for a single external entry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from entryimport.domain.model import ImportType

if TYPE_CHECKING:
    from entryimport.domain.model import ListableObject


@dataclass(slots=True)
class ImportSelection:
    """The one active import choice plus the list entry backing it.

    ``selected_entity`` is only set while ``import_type`` is ``LOCAL_ENTITY`` and
    ``selected_authority`` only while it is ``LOCAL_AUTHORITY``. Every event moves
    ``import_type`` away from whatever was chosen before, so at most one choice
    is ever active.
    """

    import_type: ImportType = ImportType.NONE
    selected_entity: ListableObject | None = None
    selected_authority: ListableObject | None = None

    def select_entity(self, entity: ListableObject | None) -> bool:
        """Choose a local entity; returns ``False`` if ``entity`` is undefined."""

        if entity is None:
            return False
        self.selected_entity = entity
        self.selected_authority = None
        self.import_type = ImportType.LOCAL_ENTITY
        return True

    def deselect_entity(self) -> None:
        self.selected_entity = None
        if self.import_type is ImportType.LOCAL_ENTITY:
            self.import_type = ImportType.NONE

    def toggle_new_entity(self) -> bool:
        """Switch the new-entity option; ``True`` means list selections must be cleared."""

        return self._toggle(ImportType.NEW_ENTITY)

    def select_authority(self, authority: ListableObject | None) -> bool:
        """Choose a local authority; returns ``False`` if ``authority`` is undefined."""

        if authority is None:
            return False
        self.selected_authority = authority
        self.selected_entity = None
        self.import_type = ImportType.LOCAL_AUTHORITY
        return True

    def deselect_authority(self) -> None:
        self.selected_authority = None
        if self.import_type is ImportType.LOCAL_AUTHORITY:
            self.import_type = ImportType.NONE

    def toggle_new_authority(self) -> bool:
        """Switch the new-authority option; ``True`` means list selections must be cleared."""

        return self._toggle(ImportType.NEW_AUTHORITY)

    def reset(self) -> None:
        self.import_type = ImportType.NONE
        self.selected_entity = None
        self.selected_authority = None

    def _toggle(self, import_type: ImportType) -> bool:
        if self.import_type is import_type:
            self.import_type = ImportType.NONE
            return False
        self.import_type = import_type
        self.selected_entity = None
        self.selected_authority = None
        return True

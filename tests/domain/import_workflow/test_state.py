from __future__ import annotations

from itertools import product
from typing import TYPE_CHECKING

import pytest

from entryimport.domain.import_workflow import ImportSelection
from entryimport.domain.model import Authority, ImportType
from tests.helpers.import_workflow import make_candidate

if TYPE_CHECKING:
    from collections.abc import Callable

ENTITY = make_candidate()
AUTHORITY = Authority(id="auth-1", value="Doe, Jane", authority_name="orcid")

EVENTS: dict[str, Callable[[ImportSelection], object]] = {
    "select_entity": lambda selection: selection.select_entity(ENTITY),
    "deselect_entity": lambda selection: selection.deselect_entity(),
    "toggle_new_entity": lambda selection: selection.toggle_new_entity(),
    "select_authority": lambda selection: selection.select_authority(AUTHORITY),
    "deselect_authority": lambda selection: selection.deselect_authority(),
    "toggle_new_authority": lambda selection: selection.toggle_new_authority(),
    "reset": lambda selection: selection.reset(),
}


def _assert_exclusive(selection: ImportSelection) -> None:
    if selection.selected_entity is not None:
        assert selection.import_type is ImportType.LOCAL_ENTITY
    if selection.selected_authority is not None:
        assert selection.import_type is ImportType.LOCAL_AUTHORITY
    assert selection.selected_entity is None or selection.selected_authority is None


def test_selection_starts_empty() -> None:
    selection = ImportSelection()

    assert selection.import_type is ImportType.NONE
    assert selection.selected_entity is None
    assert selection.selected_authority is None


def test_select_entity_activates_local_entity() -> None:
    selection = ImportSelection()

    assert selection.select_entity(ENTITY) is True

    assert selection.import_type is ImportType.LOCAL_ENTITY
    assert selection.selected_entity == ENTITY


def test_select_undefined_entity_is_ignored() -> None:
    selection = ImportSelection()
    selection.toggle_new_entity()

    assert selection.select_entity(None) is False
    assert selection.select_authority(None) is False

    assert selection.import_type is ImportType.NEW_ENTITY


def test_select_authority_replaces_entity() -> None:
    selection = ImportSelection()
    selection.select_entity(ENTITY)

    selection.select_authority(AUTHORITY)

    assert selection.import_type is ImportType.LOCAL_AUTHORITY
    assert selection.selected_authority == AUTHORITY
    assert selection.selected_entity is None


def test_deselect_entity_only_resets_its_own_choice() -> None:
    selection = ImportSelection()
    selection.select_entity(ENTITY)
    selection.deselect_entity()
    assert selection.import_type is ImportType.NONE

    selection.toggle_new_authority()
    selection.deselect_entity()
    assert selection.import_type is ImportType.NEW_AUTHORITY


def test_deselect_authority_from_local_authority() -> None:
    selection = ImportSelection()
    selection.select_authority(AUTHORITY)

    selection.deselect_authority()

    assert selection.import_type is ImportType.NONE
    assert selection.selected_authority is None


@pytest.mark.parametrize(
    ("toggle", "import_type"),
    [
        (ImportSelection.toggle_new_entity, ImportType.NEW_ENTITY),
        (ImportSelection.toggle_new_authority, ImportType.NEW_AUTHORITY),
    ],
)
def test_toggle_switches_option_on_and_off(
    toggle: Callable[[ImportSelection], bool],
    import_type: ImportType,
) -> None:
    selection = ImportSelection()
    selection.select_entity(ENTITY)

    assert toggle(selection) is True
    assert selection.import_type is import_type
    assert selection.selected_entity is None

    assert toggle(selection) is False
    assert selection.import_type is ImportType.NONE


def test_toggle_new_authority_replaces_new_entity() -> None:
    selection = ImportSelection()
    selection.toggle_new_entity()

    assert selection.toggle_new_authority() is True

    assert selection.import_type is ImportType.NEW_AUTHORITY


def test_reset_clears_everything() -> None:
    selection = ImportSelection()
    selection.select_authority(AUTHORITY)

    selection.reset()

    assert selection == ImportSelection()


def test_at_most_one_choice_for_any_event_sequence() -> None:
    for sequence in product(EVENTS, repeat=4):
        selection = ImportSelection()
        for name in sequence:
            EVENTS[name](selection)
            _assert_exclusive(selection)

from __future__ import annotations

from eonje_swim.domain import WorkType
from eonje_swim.ui.interaction import CellRef, GridInteraction, StatusUpdate


def test_click_opens_then_same_click_closes():
    interaction = GridInteraction()
    assert interaction.activate("1", "2025-12-18") == CellRef("1", "2025-12-18")
    assert interaction.is_editing
    assert interaction.activate("1", "2025-12-18") is None
    assert not interaction.is_editing


def test_click_on_other_cell_moves_picker():
    interaction = GridInteraction()
    interaction.activate("1", "2025-12-18")
    assert interaction.activate("2", "2025-12-19") == CellRef("2", "2025-12-19")


def test_locked_cells_do_not_change_state():
    interaction = GridInteraction()
    assert interaction.activate("1", "2025-12-20", locked=True) is None
    interaction.activate("1", "2025-12-18")
    assert interaction.activate("1", "2025-12-20", locked=True) == CellRef("1", "2025-12-18")


def test_choose_emits_update_and_closes():
    interaction = GridInteraction()
    interaction.activate("1", "2025-12-18")
    assert interaction.choose(WorkType.REMOTE) == StatusUpdate("1", "2025-12-18", WorkType.REMOTE)
    assert interaction.active is None
    assert interaction.choose(WorkType.OFFICE) is None


def test_dismiss_closes():
    interaction = GridInteraction()
    interaction.activate("1", "2025-12-18")
    interaction.dismiss()
    assert not interaction.is_editing

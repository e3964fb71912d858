# tests/unit/test_ui/test_filter_panel_builder.py

"""Tests for FilterPanelBuilder control wiring."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from PyQt6.QtCore import Qt

from boardgame_collection.core.game import Difficulty, GameStatus, Genre, Tag
from boardgame_collection.ui.builders.filter_panel_builder import FilterPanelBuilder


def _select(combo, value) -> None:
    index = next(i for i in range(combo.count()) if combo.itemData(i) == value)
    combo.setCurrentIndex(index)


@pytest.fixture
def catalog() -> MagicMock:
    return MagicMock()


@pytest.fixture
def panel(qtbot, catalog):
    builder = FilterPanelBuilder(catalog)
    widget = builder.build()
    qtbot.addWidget(widget)
    builder.set_tags([Tag(name="Short", id=1), Tag(name="Strategy", id=2)])
    yield builder  # keeps ``widget`` referenced for the test's duration


def test_search_text_is_forwarded(panel, catalog):
    panel.search_edit.setText("cat")

    catalog.set_search_term.assert_called_with("cat")


def test_combos_start_with_any(panel):
    for combo in (panel.genre_combo, panel.difficulty_combo, panel.status_combo):
        assert combo.currentIndex() == 0
        assert combo.currentData() is None


def test_combo_selection_sends_enum(panel, catalog):
    _select(panel.genre_combo, Genre.DETECTIVE)
    _select(panel.difficulty_combo, Difficulty.HARD)
    _select(panel.status_combo, GameStatus.WANT_TO_BUY)

    catalog.set_genre.assert_called_with(Genre.DETECTIVE)
    catalog.set_difficulty.assert_called_with(Difficulty.HARD)
    catalog.set_status.assert_called_with(GameStatus.WANT_TO_BUY)


def test_zero_spin_means_no_constraint(panel, catalog):
    panel.min_players_spin.setValue(3)
    catalog.set_min_players.assert_called_with(3)

    panel.min_players_spin.setValue(0)
    catalog.set_min_players.assert_called_with(None)


def test_play_time_spins(panel, catalog):
    panel.min_time_spin.setValue(30)
    panel.max_time_spin.setValue(90)

    catalog.set_min_play_time.assert_called_with(30)
    catalog.set_max_play_time.assert_called_with(90)


def test_checking_tags_sends_names(panel, catalog):
    panel.tag_list.item(1).setCheckState(Qt.CheckState.Checked)

    catalog.set_tags.assert_called_with(["Strategy"])


def test_set_tags_keeps_checked_names(panel):
    panel.tag_list.item(0).setCheckState(Qt.CheckState.Checked)

    panel.set_tags([Tag(name="Party", id=3), Tag(name="Short", id=1)])

    assert panel.tag_list.count() == 2
    assert panel.checked_tag_names() == ["Short"]


def test_refill_drops_removed_tag_from_criteria(panel, catalog):
    panel.tag_list.item(1).setCheckState(Qt.CheckState.Checked)
    catalog.reset_mock()

    panel.set_tags([Tag(name="Short", id=1)])

    assert panel.checked_tag_names() == []
    catalog.set_tags.assert_called_once_with([])


def test_refill_keeping_all_checked_tags_leaves_criteria(panel, catalog):
    panel.tag_list.item(0).setCheckState(Qt.CheckState.Checked)
    catalog.reset_mock()

    panel.set_tags([Tag(name="Short", id=1), Tag(name="Party", id=3)])

    catalog.set_tags.assert_not_called()


def test_reset_clears_controls_with_one_filter_run(panel, catalog):
    panel.search_edit.setText("cat")
    panel.genre_combo.setCurrentIndex(1)
    panel.max_players_spin.setValue(4)
    panel.tag_list.item(0).setCheckState(Qt.CheckState.Checked)
    catalog.reset_mock()

    panel.reset()

    assert panel.search_edit.text() == ""
    assert panel.genre_combo.currentIndex() == 0
    assert panel.max_players_spin.value() == 0
    assert panel.checked_tag_names() == []
    catalog.reset_filters.assert_called_once()
    catalog.set_search_term.assert_not_called()
    catalog.set_tags.assert_not_called()

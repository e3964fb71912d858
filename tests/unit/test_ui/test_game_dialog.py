# tests/unit/test_ui/test_game_dialog.py

"""Tests for GameDialog live validation and form round-trip."""

from __future__ import annotations

from datetime import datetime

import pytest
from PyQt6.QtCore import Qt

from boardgame_collection.core.game import Difficulty, Game, GameSession, GameStatus, GameTag, Genre, Tag
from boardgame_collection.ui.dialogs.game_dialog import GameDialog


@pytest.fixture
def tags() -> list[Tag]:
    return [Tag(name="Short", id=1), Tag(name="Strategy", id=2)]


@pytest.fixture
def new_dialog(qtbot, tags) -> GameDialog:
    dialog = GameDialog(None, tags)
    qtbot.addWidget(dialog)
    return dialog


@pytest.fixture
def existing_game() -> Game:
    game = Game(
        title="Catan",
        genre=Genre.ECONOMIC,
        difficulty=Difficulty.MEDIUM,
        min_players=3,
        max_players=4,
        play_time=90,
        publisher="KOSMOS",
        year_published=1995,
        bgg_rating=7.1,
        personal_rating=9,
        status=GameStatus.FOR_SALE,
        date_added=datetime(2023, 5, 1, 12, 0),
        id=11,
    )
    game.sessions.append(GameSession(game_id=11, session_date=datetime(2024, 1, 1, 20, 0)))
    game.game_tags.append(GameTag(game_id=11, tag_id=2, tag=Tag(name="Strategy", id=2)))
    return game


class TestNewGame:
    def test_empty_title_disables_save(self, new_dialog):
        assert not new_dialog.is_valid()
        assert "title" in new_dialog.errors
        assert not new_dialog.btn_save.isEnabled()

    def test_entering_title_enables_save(self, new_dialog):
        new_dialog.title_edit.setText("Carcassonne")

        assert new_dialog.is_valid()
        assert new_dialog.btn_save.isEnabled()

    def test_player_order_error_shown(self, new_dialog):
        new_dialog.title_edit.setText("Carcassonne")
        new_dialog.min_players_spin.setValue(5)
        new_dialog.max_players_spin.setValue(2)

        assert "players" in new_dialog.errors
        assert not new_dialog.btn_save.isEnabled()
        assert new_dialog._error_labels["players"].text() == new_dialog.errors["players"]

    def test_play_time_below_minimum(self, new_dialog):
        new_dialog.title_edit.setText("Quick")
        new_dialog.play_time_spin.setValue(1)

        assert "play_time" in new_dialog.errors

    def test_zero_bgg_rating_means_none(self, new_dialog):
        new_dialog.title_edit.setText("Unrated")
        new_dialog.bgg_spin.setValue(0.0)

        assert new_dialog.game().bgg_rating is None
        assert "bgg_rating" not in new_dialog.errors

    def test_game_reads_form_values(self, new_dialog):
        new_dialog.title_edit.setText("  Root  ")
        new_dialog.publisher_edit.setText("   ")
        GameDialog._select_data(new_dialog.genre_combo, Genre.CARD)

        game = new_dialog.game()

        assert game.title == "Root"
        assert game.publisher is None
        assert game.genre is Genre.CARD
        assert game.id is None

    def test_selected_tag_ids(self, new_dialog):
        new_dialog.tag_list.item(1).setCheckState(Qt.CheckState.Checked)

        assert new_dialog.selected_tag_ids() == [2]


class TestEditGame:
    def test_form_is_populated(self, qtbot, tags, existing_game):
        dialog = GameDialog(None, tags, existing_game)
        qtbot.addWidget(dialog)

        assert dialog.title_edit.text() == "Catan"
        assert dialog.genre_combo.currentData() is Genre.ECONOMIC
        assert dialog.status_combo.currentData() is GameStatus.FOR_SALE
        assert dialog.year_spin.value() == 1995
        assert dialog.selected_tag_ids() == [2]
        assert dialog.is_valid()

    def test_edit_keeps_identity_and_history(self, qtbot, tags, existing_game):
        dialog = GameDialog(None, tags, existing_game)
        qtbot.addWidget(dialog)
        dialog.rating_spin.setValue(7)

        edited = dialog.game()

        assert edited.id == 11
        assert edited.personal_rating == 7
        assert edited.date_added == datetime(2023, 5, 1, 12, 0)
        assert len(edited.sessions) == 1
        # The original is not modified
        assert existing_game.personal_rating == 9

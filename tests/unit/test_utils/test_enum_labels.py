# tests/unit/test_utils/test_enum_labels.py

"""Tests for localized enum labels."""

from __future__ import annotations

from enum import Enum

import pytest

from boardgame_collection.core.game import Difficulty, GameStatus, Genre
from boardgame_collection.utils.enum_labels import label_for, labeled_members
from boardgame_collection.utils.i18n import init_i18n


class _Other(Enum):
    THING = "thing"


class TestLabelFor:
    def test_english_labels(self) -> None:
        assert label_for(GameStatus.WANT_TO_BUY) == "Want to buy"
        assert label_for(Genre.CARD) == "Card"

    def test_russian_labels(self) -> None:
        init_i18n("ru")
        assert label_for(Genre.STRATEGY) == "Стратегия"
        assert label_for(Difficulty.EASY) == "Простая"
        assert label_for(GameStatus.FOR_SALE) == "Продается"

    @pytest.mark.parametrize("member", [*Genre, *Difficulty, *GameStatus])
    def test_every_member_has_a_label(self, member) -> None:
        assert not label_for(member).startswith("[")

    def test_none_and_unknown_enums(self) -> None:
        assert label_for(None) == ""
        assert label_for(_Other.THING) == "thing"


def test_labeled_members_in_declaration_order() -> None:
    pairs = labeled_members(Difficulty)
    assert [member for _, member in pairs] == [Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD]
    assert [label for label, _ in pairs] == ["Easy", "Medium", "Hard"]

# tests/unit/test_services/test_statistics_service.py

"""Tests for the collection statistics functions."""

from __future__ import annotations

import pytest

from boardgame_collection.core.game import BASE_GAME_COST, GameSession, GameStatus, Genre
from boardgame_collection.services.statistics_service import (
    CollectionStatistics,
    average_session_rating,
    collection_statistics,
    cost_per_session,
    count_by_genre,
    count_by_status,
    total_count,
    total_sessions_count,
    unplayed_games,
)


class TestCounts:
    def test_total_count(self, sample_games) -> None:
        assert total_count(sample_games) == 5
        assert total_count([]) == 0

    def test_count_by_status_has_no_zero_entries(self, sample_games) -> None:
        counts = count_by_status(sample_games)
        assert counts == {
            GameStatus.IN_COLLECTION: 2,
            GameStatus.WANT_TO_BUY: 2,
            GameStatus.FOR_SALE: 1,
        }
        assert count_by_status(sample_games[:2]) == {GameStatus.IN_COLLECTION: 2}

    def test_count_by_genre_in_first_occurrence_order(self, sample_games) -> None:
        counts = count_by_genre(sample_games)
        assert list(counts) == [Genre.STRATEGY, Genre.ECONOMIC, Genre.DETECTIVE, Genre.FAMILY]
        assert counts[Genre.STRATEGY] == 2
        assert Genre.CARD not in counts

    def test_counts_sum_to_total(self, sample_games) -> None:
        assert sum(count_by_status(sample_games).values()) == total_count(sample_games)
        assert sum(count_by_genre(sample_games).values()) == total_count(sample_games)

    def test_empty_collection(self) -> None:
        assert count_by_status([]) == {}
        assert count_by_genre([]) == {}
        assert unplayed_games([]) == []


class TestSessions:
    def test_unplayed_games(self, sample_games) -> None:
        assert [g.title for g in unplayed_games(sample_games)] == ["Carcassonne", "Time Stories", "Dexterity"]

    def test_average_session_rating(self) -> None:
        sessions = [GameSession(game_id=1, session_rating=r) for r in (9, 8, 10)]
        assert average_session_rating(sessions) == pytest.approx(9.0)

    def test_average_of_no_sessions_is_zero(self) -> None:
        assert average_session_rating([]) == 0.0

    def test_total_sessions_count(self, sample_games) -> None:
        assert total_sessions_count(sample_games[0]) == 2
        assert total_sessions_count(sample_games[2]) == 0

    @pytest.mark.parametrize("count, expected", [(0, 0.0), (1, BASE_GAME_COST), (4, BASE_GAME_COST / 4)])
    def test_cost_per_session(self, count, expected) -> None:
        assert cost_per_session(count) == pytest.approx(expected)


class TestCollectionStatistics:
    def test_snapshot(self, sample_games) -> None:
        stats = collection_statistics(sample_games)
        assert stats.total_games == 5
        assert stats.unplayed_games == 3
        assert stats.by_status[GameStatus.WANT_TO_BUY] == 2
        assert stats.by_genre[Genre.FAMILY] == 1

    def test_empty_snapshot_equals_default(self) -> None:
        assert collection_statistics([]) == CollectionStatistics()

    def test_accepts_iterators(self, sample_games) -> None:
        assert collection_statistics(iter(sample_games)).total_games == 5

# tests/unit/test_services/test_recommendation_service.py

"""Tests for recommendation selection."""

from __future__ import annotations

import pytest

from boardgame_collection.core.game import Game, GameSession, Genre
from boardgame_collection.services.recommendation_service import (
    RESULT_LIMIT,
    SEED_LIMIT,
    RecommendationService,
    recommended_games,
)


def _game(title: str, genre: Genre, rating: int, played: bool = False) -> Game:
    game = Game(title=title, genre=genre, personal_rating=rating)
    if played:
        game.sessions.append(GameSession(game_id=None))
    return game


@pytest.fixture
def service() -> RecommendationService:
    return RecommendationService()


class TestSeeds:
    def test_seed_capped_and_sorted(self, service) -> None:
        games = [
            _game("A", Genre.STRATEGY, 8),
            _game("B", Genre.CARD, 10),
            _game("C", Genre.FAMILY, 9),
            _game("D", Genre.ECONOMIC, 8),
        ]
        seeds = service.seed_games(games)
        assert len(seeds) == SEED_LIMIT
        assert [g.title for g in seeds] == ["B", "C", "A"]

    def test_preferred_genres_distinct_in_seed_order(self, service) -> None:
        seeds = [_game("X", Genre.CARD, 9), _game("Y", Genre.CARD, 9), _game("Z", Genre.FAMILY, 8)]
        assert service.preferred_genres(seeds) == [Genre.CARD, Genre.FAMILY]


class TestRecommend:
    def test_restricted_to_seed_genres_and_rating(self, service) -> None:
        games = [
            _game("S1", Genre.STRATEGY, 10),
            _game("S2", Genre.STRATEGY, 9),
            _game("C1", Genre.CARD, 8),
            _game("S3", Genre.STRATEGY, 7),
            _game("C2", Genre.CARD, 7),
            _game("S4", Genre.STRATEGY, 6),
            _game("F1", Genre.FAMILY, 7),
            _game("C3", Genre.CARD, 7),
        ]
        result = service.recommend(games)

        assert len(result) == RESULT_LIMIT
        assert {g.genre for g in result} <= {Genre.STRATEGY, Genre.CARD}
        assert all(g.personal_rating >= 7 for g in result)
        # Stable: equal ratings keep input order
        assert [g.title for g in result] == ["S1", "S2", "C1", "S3", "C2"]

    def test_seed_games_can_be_recommended(self, service) -> None:
        games = [_game("Only", Genre.CARD, 9)]
        assert service.recommend(games) == games

    def test_fallback_to_unplayed_when_no_seed(self, service) -> None:
        games = [
            _game("P1", Genre.CARD, 7, played=True),
            *[_game(f"U{i}", Genre.FAMILY, 5) for i in range(7)],
        ]
        result = service.recommend(games)
        assert [g.title for g in result] == ["U0", "U1", "U2", "U3", "U4"]

    def test_no_fallback_when_seed_exists_but_few_results(self, service) -> None:
        games = [_game("Top", Genre.CARD, 8), _game("Fresh", Genre.FAMILY, 3)]
        assert [g.title for g in service.recommend(games)] == ["Top"]

    def test_empty_collection(self, service) -> None:
        assert service.recommend([]) == []

    def test_module_shortcut(self) -> None:
        games = [_game("Only", Genre.CARD, 9)]
        assert recommended_games(games) == games

"""Recommendation selection: seed by top rating, expand by genre affinity.

1. Seed: up to SEED_LIMIT games with personal_rating >= SEED_MIN_RATING,
   highest rated first (ties keep input order).
2. Expand: up to RESULT_LIMIT games whose genre appears among the seeds and
   whose personal_rating >= RESULT_MIN_RATING, highest rated first. Seed games
   may appear again.
3. If the seed set is empty, fall back to the first RESULT_LIMIT unplayed
   games in input order. The fallback depends only on the seed set being
   empty, not on how many results the expansion yields.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from boardgame_collection.core.game import Game, Genre

logger = logging.getLogger("boardgamecoll.recommendations")

__all__ = [
    "RESULT_LIMIT",
    "RESULT_MIN_RATING",
    "SEED_LIMIT",
    "SEED_MIN_RATING",
    "RecommendationService",
    "recommended_games",
]

SEED_MIN_RATING = 8
SEED_LIMIT = 3
RESULT_MIN_RATING = 7
RESULT_LIMIT = 5


def _by_rating_desc(games: Iterable[Game]) -> list[Game]:
    # sorted() is stable, so equal ratings keep input order
    return sorted(games, key=lambda g: -g.personal_rating)


class RecommendationService:
    """Picks games to suggest for the next game night."""

    def seed_games(self, games: list[Game]) -> list[Game]:
        """Top-rated games that define the preferred genres."""
        top_rated = [g for g in games if g.personal_rating >= SEED_MIN_RATING]
        return _by_rating_desc(top_rated)[:SEED_LIMIT]

    def preferred_genres(self, seeds: list[Game]) -> list[Genre]:
        """Distinct seed genres in seed order."""
        genres: list[Genre] = []
        for game in seeds:
            if game.genre not in genres:
                genres.append(game.genre)
        return genres

    def recommend(self, games: Iterable[Game]) -> list[Game]:
        """Returns up to RESULT_LIMIT recommended games.

        Args:
            games: The full collection.

        Returns:
            The recommendation list; empty only when there are neither
            top-rated nor unplayed games.
        """
        games = list(games)
        seeds = self.seed_games(games)

        if not seeds:
            fallback = [g for g in games if g.is_unplayed][:RESULT_LIMIT]
            logger.debug("No game rated >= %d, suggesting %d unplayed games", SEED_MIN_RATING, len(fallback))
            return fallback

        genres = set(self.preferred_genres(seeds))
        candidates = [g for g in games if g.genre in genres and g.personal_rating >= RESULT_MIN_RATING]
        result = _by_rating_desc(candidates)[:RESULT_LIMIT]
        logger.debug("Recommended %d games from %d seed genres", len(result), len(genres))
        return result


def recommended_games(games: Iterable[Game]) -> list[Game]:
    """Module-level shortcut for ``RecommendationService().recommend``."""
    return RecommendationService().recommend(games)

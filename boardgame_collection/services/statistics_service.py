"""Aggregate statistics over a game collection.

All functions are pure reads: they never modify the games or sessions they
receive and never raise for empty input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

from boardgame_collection.core.game import BASE_GAME_COST, GameStatus, Genre

if TYPE_CHECKING:
    from boardgame_collection.core.game import Game, GameSession

__all__ = [
    "CollectionStatistics",
    "average_session_rating",
    "collection_statistics",
    "cost_per_session",
    "count_by_genre",
    "count_by_status",
    "total_count",
    "total_sessions_count",
    "unplayed_games",
]


@dataclass(frozen=True)
class CollectionStatistics:
    """Snapshot of the figures shown next to a game list.

    Attributes:
        total_games: Number of games in the list.
        by_status: Status -> count, only statuses that occur.
        by_genre: Genre -> count, only genres that occur.
        unplayed_games: Number of games without any session.
    """

    total_games: int = 0
    by_status: dict[GameStatus, int] = field(default_factory=dict)
    by_genre: dict[Genre, int] = field(default_factory=dict)
    unplayed_games: int = 0


def total_count(games: Iterable[Game]) -> int:
    return sum(1 for _ in games)


def count_by_status(games: Iterable[Game]) -> dict[GameStatus, int]:
    """Counts games per status, in order of first occurrence.

    Statuses with no games are absent from the result (no zero entries).
    """
    counts: dict[GameStatus, int] = {}
    for game in games:
        counts[game.status] = counts.get(game.status, 0) + 1
    return counts


def count_by_genre(games: Iterable[Game]) -> dict[Genre, int]:
    """Counts games per genre, in order of first occurrence."""
    counts: dict[Genre, int] = {}
    for game in games:
        counts[game.genre] = counts.get(game.genre, 0) + 1
    return counts


def unplayed_games(games: Iterable[Game]) -> list[Game]:
    """Games without a recorded session, in input order."""
    return [game for game in games if game.is_unplayed]


def average_session_rating(sessions: Iterable[GameSession]) -> float:
    """Arithmetic mean of session ratings; 0.0 for an empty list."""
    ratings = [session.session_rating for session in sessions]
    if not ratings:
        return 0.0
    return sum(ratings) / len(ratings)


def total_sessions_count(game: Game) -> int:
    return len(game.sessions)


def cost_per_session(session_count: int) -> float:
    """Notional cost of one game night.

    Args:
        session_count: Number of sessions played.

    Returns:
        BASE_GAME_COST / session_count, or 0.0 when nothing was played.
    """
    return BASE_GAME_COST / session_count if session_count > 0 else 0.0


def collection_statistics(games: Iterable[Game]) -> CollectionStatistics:
    """Computes all list-level figures for *games*."""
    games = list(games)
    return CollectionStatistics(
        total_games=len(games),
        by_status=count_by_status(games),
        by_genre=count_by_genre(games),
        unplayed_games=len(unplayed_games(games)),
    )

"""Row conversion between SQLite and the catalog dataclasses.

Enum members are stored by value, timestamps as ISO-8601 strings.
"""

from __future__ import annotations

import sqlite3
from datetime import datetime

from boardgame_collection.core.game import Difficulty, Game, GameSession, GameStatus, Genre, Tag

__all__ = [
    "format_timestamp",
    "game_params",
    "parse_timestamp",
    "row_to_game",
    "row_to_session",
    "row_to_tag",
]


def format_timestamp(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse a stored ISO timestamp.

    Args:
        value: Column value, possibly NULL.

    Returns:
        The datetime, or None for NULL.
    """
    if value is None:
        return None
    return datetime.fromisoformat(value)


def row_to_game(row: sqlite3.Row) -> Game:
    """Build a Game from a ``games`` row, without sessions or tags."""
    return Game(
        id=row["id"],
        title=row["title"],
        genre=Genre(row["genre"]),
        difficulty=Difficulty(row["difficulty"]),
        min_players=row["min_players"],
        max_players=row["max_players"],
        play_time=row["play_time"],
        publisher=row["publisher"],
        year_published=row["year_published"],
        bgg_rating=row["bgg_rating"],
        personal_rating=row["personal_rating"],
        status=GameStatus(row["status"]),
        date_added=parse_timestamp(row["date_added"]) or datetime.now(),
        last_played=parse_timestamp(row["last_played"]),
    )


def row_to_session(row: sqlite3.Row) -> GameSession:
    return GameSession(
        id=row["id"],
        game_id=row["game_id"],
        session_date=parse_timestamp(row["session_date"]) or datetime.now(),
        players_count=row["players_count"],
        results=row["results"] or "",
        session_rating=row["session_rating"],
    )


def row_to_tag(row: sqlite3.Row) -> Tag:
    return Tag(id=row["id"], name=row["name"])


def game_params(game: Game) -> tuple:
    """Column values for INSERT/UPDATE, in ``games`` column order (without id)."""
    return (
        game.title,
        game.genre.value,
        game.difficulty.value,
        game.min_players,
        game.max_players,
        game.play_time,
        game.publisher,
        game.year_published,
        game.bgg_rating,
        game.personal_rating,
        game.status.value,
        format_timestamp(game.date_added),
        format_timestamp(game.last_played),
    )

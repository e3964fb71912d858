"""Sample catalog inserted into an empty database on first start."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from boardgame_collection.core.game import Difficulty, Game, GameSession, GameStatus, GameTag, Genre, Tag
from boardgame_collection.utils.i18n import t

if TYPE_CHECKING:
    from boardgame_collection.core.db import Database

logger = logging.getLogger("boardgamecoll.database")

__all__ = ["SAMPLE_TAGS", "sample_games", "seed_sample_data"]

SAMPLE_TAGS = (
    "Стратегия",
    "Вечеринка",
    "Для детей",
    "Короткие",
    "Детектив",
    "Экономическая",
    "Кооперативная",
    "Карточная",
    "Семейная",
)

S, D, C, E, K, F = Genre.STRATEGY, Genre.DETECTIVE, Genre.COOPERATIVE, Genre.ECONOMIC, Genre.CARD, Genre.FAMILY
EASY, MEDIUM, HARD = Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD
OWNED, WISH, SALE = GameStatus.IN_COLLECTION, GameStatus.WANT_TO_BUY, GameStatus.FOR_SALE

# title, genre, difficulty, min/max players, play time, publisher, year, bgg, personal, status, days ago, tags
_GAMES = (
    ("Катан", S, MEDIUM, 3, 4, 90, "KOSMOS", 1995, 8.3, 9, OWNED, 30, ("Стратегия", "Вечеринка")),
    ("Монополия", E, EASY, 2, 8, 180, "Hasbro", 1935, 4.5, 6, OWNED, 45, ("Экономическая", "Семейная")),
    ("Каркассон", S, EASY, 2, 5, 45, "Hans im Glück", 2000, 7.4, 8, WISH, 10, ("Стратегия", "Короткие")),
    ("7 чудес", S, MEDIUM, 3, 7, 30, "Repos Production", 2010, 7.9, 9, OWNED, 0, ("Стратегия", "Экономическая")),
    ("Клаустрафобия", C, MEDIUM, 2, 6, 60, "Edge Entertainment", 2008, 7.3, 8, OWNED, 0, ("Кооперативная", "Детектив")),
    ("Тайм стори", D, HARD, 2, 5, 90, "Space Cowboys", 2013, 7.8, 10, WISH, 5, ("Детектив", "Кооперативная")),
    ("Свинтус", K, EASY, 2, 8, 15, "Gaga Games", 2009, 6.5, 7, OWNED, 15, ("Карточная", "Вечеринка")),
    ("Декстерити", F, EASY, 2, 4, 30, "Мосигра", 2016, 7.1, 8, SALE, 7, ("Семейная", "Короткие")),
    ("Городской квест", F, EASY, 3, 6, 45, "Простые правила", 2018, 6.8, 7, OWNED, 12, ("Семейная", "Детектив")),
    ("Экспансия", E, HARD, 2, 4, 120, "Feuerland Spiele", 2015, 8.2, 9, OWNED, 18, ("Экономическая", "Стратегия")),
    ("Город монстров", F, EASY, 2, 6, 30, "Город игр", 2012, 6.9, 7, OWNED, 22, ("Семейная", "Вечеринка")),
    ("Шакал", S, MEDIUM, 2, 4, 60, "Мосигра", 2007, 7.5, 9, OWNED, 28, ("Стратегия", "Семейная")),
    ("Манчкин", K, EASY, 3, 6, 90, "Игромания", 2001, 7.2, 8, OWNED, 35, ("Карточная", "Вечеринка")),
    ("Дикари", S, MEDIUM, 2, 6, 75, "Москва-Сити", 2016, 7.6, 8, WISH, 3, ("Стратегия", "Экономическая")),
    (
        "Городской квест: Хроники Нью-Йорка",
        D,
        HARD,
        1,
        6,
        150,
        "Правильные игры",
        2019,
        8.1,
        10,
        WISH,
        1,
        ("Детектив", "Семейная"),
    ),
)

# game index, days ago, players, result, rating
_SESSIONS = (
    (0, 5, 4, "Победил Алексей", 9),
    (0, 10, 3, "Победила Мария", 8),
    (1, 15, 4, "Победил Иван", 6),
    (3, 8, 5, "Победил Петр", 9),
    (4, 2, 4, "Победили монстры", 10),
    (6, 3, 5, "Самый ловкий - Сергей", 8),
    (8, 20, 4, "Завершено за 45 минут", 7),
    (11, 4, 3, "Приключения пиратов", 9),
    (12, 12, 5, "Уровень 10 достигнут", 8),
)


def sample_games(now: datetime | None = None) -> list[Game]:
    """Build the sample games (unsaved) with their sessions and tag joins.

    Args:
        now: Reference time for the relative dates; defaults to the current time.
    """
    now = now or datetime.now()
    games: list[Game] = []
    for (title, genre, difficulty, lo, hi, minutes, publisher, year, bgg, rating, status, days, tags) in _GAMES:
        games.append(
            Game(
                title=title,
                genre=genre,
                difficulty=difficulty,
                min_players=lo,
                max_players=hi,
                play_time=minutes,
                publisher=publisher,
                year_published=year,
                bgg_rating=bgg,
                personal_rating=rating,
                status=status,
                date_added=now - timedelta(days=days),
                game_tags=[GameTag(game_id=None, tag_id=None, tag=Tag(name=name)) for name in tags],
            )
        )

    for index, days, players, result, rating in _SESSIONS:
        game = games[index]
        played = now - timedelta(days=days)
        game.sessions.append(
            GameSession(game_id=None, session_date=played, players_count=players, results=result, session_rating=rating)
        )
        if game.last_played is None or played > game.last_played:
            game.last_played = played

    return games


def seed_sample_data(db: Database) -> int:
    """Insert the sample tags and games if the catalog is empty.

    Args:
        db: Open database.

    Returns:
        Number of games inserted (0 when the catalog already had games).
    """
    if db.get_game_count() > 0:
        return 0

    for name in SAMPLE_TAGS:
        db.add_tag(name)
    games = sample_games()
    for game in games:
        db.add_game(game)

    logger.info(t("logs.db.seeded", games=len(games), tags=len(SAMPLE_TAGS)))
    return len(games)

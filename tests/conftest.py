# tests/conftest.py
import os
import tempfile
from datetime import datetime, timedelta
from pathlib import Path

# Ensure Qt can run headless (CI runners have no display server)
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
# Keep the global config away from the user's real data directory
os.environ["BOARDGAMES_DATA_DIR"] = tempfile.mkdtemp(prefix="boardgames-test-")
os.environ["BOARDGAMES_LANGUAGE"] = "en"

import pytest
from PyQt6.QtWidgets import QApplication
from pytestqt.qtbot import QtBot

from boardgame_collection.core.game import Difficulty, Game, GameSession, GameStatus, GameTag, Genre, Tag
from boardgame_collection.utils.i18n import init_i18n


@pytest.fixture(scope="session")
def qapp():
    """QApplication instance for all Qt tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def qtbot(qapp, request):
    """Provide qtbot fixture with automatic cleanup."""
    bot = QtBot(request)
    yield bot
    if hasattr(bot, "cleanup"):
        bot.cleanup()


@pytest.fixture(autouse=True)
def english_locale():
    """Every test starts with the English catalog."""
    init_i18n("en")
    yield
    init_i18n("en")


@pytest.fixture
def temp_db_path(tmp_path) -> Path:
    """Temporary SQLite database file path."""
    return tmp_path / "test_catalog.db"


@pytest.fixture
def database(temp_db_path):
    """Fresh Database on a temp file (schema loaded from SQL)."""
    from boardgame_collection.core.db import Database

    db = Database(temp_db_path)
    yield db
    db.close()


def make_game(
    title: str = "Test Game",
    genre: Genre = Genre.STRATEGY,
    difficulty: Difficulty = Difficulty.EASY,
    min_players: int = 2,
    max_players: int = 4,
    play_time: int = 60,
    publisher: str | None = "Test Publisher",
    personal_rating: int = 5,
    status: GameStatus = GameStatus.IN_COLLECTION,
    tags: list[str] | None = None,
    sessions: int = 0,
    game_id: int | None = None,
) -> Game:
    """Helper to create a Game with sensible defaults.

    ``tags`` become resolved GameTag joins (tag ids follow list order) and
    ``sessions`` adds that many recorded plays.
    """
    game = Game(
        title=title,
        genre=genre,
        difficulty=difficulty,
        min_players=min_players,
        max_players=max_players,
        play_time=play_time,
        publisher=publisher,
        personal_rating=personal_rating,
        status=status,
        id=game_id,
    )
    for index, name in enumerate(tags or [], start=1):
        game.game_tags.append(GameTag(game_id=game_id, tag_id=index, tag=Tag(name=name, id=index)))
    base = datetime(2024, 1, 1, 20, 0)
    for n in range(sessions):
        game.sessions.append(GameSession(game_id=game_id, session_date=base + timedelta(days=n), session_rating=7))
    return game


@pytest.fixture
def game_factory():
    """The make_game helper as a fixture."""
    return make_game


@pytest.fixture
def sample_games() -> list[Game]:
    """A small mixed collection used across engine tests."""
    return [
        make_game("Catan", Genre.STRATEGY, Difficulty.MEDIUM, 3, 4, 90, "KOSMOS", 9, tags=["Strategy"], sessions=2, game_id=1),
        make_game("Monopoly", Genre.ECONOMIC, Difficulty.EASY, 2, 8, 180, "Hasbro", 6, sessions=1, game_id=2),
        make_game(
            "Carcassonne",
            Genre.STRATEGY,
            Difficulty.EASY,
            2,
            5,
            45,
            "Hans im Glück",
            8,
            GameStatus.WANT_TO_BUY,
            tags=["Short"],
            game_id=3,
        ),
        make_game("Time Stories", Genre.DETECTIVE, Difficulty.HARD, 2, 5, 90, None, 10, GameStatus.WANT_TO_BUY, game_id=4),
        make_game("Dexterity", Genre.FAMILY, Difficulty.EASY, 2, 4, 30, "Mosigra", 8, GameStatus.FOR_SALE, game_id=5),
    ]

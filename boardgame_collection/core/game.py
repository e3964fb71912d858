"""Catalog dataclasses: Game, GameSession, Tag and the GameTag join.

Game is the central record shared by the repository, the filter engine and
the UI. Enum members are persisted by their string value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

__all__ = [
    "BASE_GAME_COST",
    "Difficulty",
    "Game",
    "GameSession",
    "GameStatus",
    "GameTag",
    "Genre",
    "Tag",
]

# Notional purchase price used by Game.cost_per_session
BASE_GAME_COST: float = 500.0


class Genre(Enum):
    """Primary genre of a game."""

    STRATEGY = "Strategy"
    DETECTIVE = "Detective"
    COOPERATIVE = "Cooperative"
    ECONOMIC = "Economic"
    CARD = "Card"
    FAMILY = "Family"


class Difficulty(Enum):
    """Rules complexity."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class GameStatus(Enum):
    """Ownership status.

    Attributes:
        IN_COLLECTION: Owned and on the shelf.
        WANT_TO_BUY: On the wishlist.
        FOR_SALE: Owned but listed for sale.
    """

    IN_COLLECTION = "InCollection"
    WANT_TO_BUY = "WantToBuy"
    FOR_SALE = "ForSale"


@dataclass
class Tag:
    """User-defined label; ``name`` is the key used by the tag filter."""

    name: str
    id: int | None = None


@dataclass
class GameTag:
    """Association between one game and one tag.

    ``tag`` holds the resolved Tag when the repository loaded it. It may be
    None for a dangling join, which every tag lookup skips.
    """

    game_id: int | None
    tag_id: int | None
    tag: Tag | None = None


@dataclass
class GameSession:
    """One recorded play of a game."""

    game_id: int | None
    session_date: datetime = field(default_factory=datetime.now)
    players_count: int = 1
    results: str = ""
    session_rating: int = 5
    id: int | None = None


@dataclass
class Game:
    """A single board game in the catalog.

    ``id`` is assigned by the repository on insert. ``sessions`` and
    ``game_tags`` are populated by the repository when games are loaded.
    """

    title: str
    genre: Genre = Genre.STRATEGY
    difficulty: Difficulty = Difficulty.EASY
    min_players: int = 1
    max_players: int = 4
    play_time: int = 30
    publisher: str | None = None
    year_published: int = 2000
    bgg_rating: float | None = None
    personal_rating: int = 5
    status: GameStatus = GameStatus.IN_COLLECTION
    date_added: datetime = field(default_factory=datetime.now)
    last_played: datetime | None = None
    id: int | None = None

    sessions: list[GameSession] = field(default_factory=list)
    game_tags: list[GameTag] = field(default_factory=list)

    @property
    def tags(self) -> list[Tag]:
        """Resolved tags, skipping dangling joins."""
        return [gt.tag for gt in self.game_tags if gt.tag is not None]

    @property
    def tag_names(self) -> list[str]:
        return [tag.name for tag in self.tags if tag.name is not None]

    @property
    def tag_ids(self) -> list[int]:
        return [gt.tag_id for gt in self.game_tags if gt.tag_id is not None]

    @property
    def is_unplayed(self) -> bool:
        """True when no session has been recorded."""
        return not self.sessions

    @property
    def cost_per_session(self) -> float:
        """Notional cost of one game night: BASE_GAME_COST / sessions, 0 if none."""
        count = len(self.sessions)
        return BASE_GAME_COST / count if count > 0 else 0.0

    def set_tags(self, tags: list[Tag]) -> None:
        """Replace the tag associations with joins to *tags*."""
        self.game_tags = [GameTag(game_id=self.id, tag_id=tag.id, tag=tag) for tag in tags]

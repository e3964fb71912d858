"""Game filter engine for the Board Game Collection.

Provides FilterCriteria (frozen dataclass) and FilterService, which narrows a
game list by free-text search, genre, difficulty, player range, play time,
status and tags. The service is stateless: the same (games, criteria) pair
always produces the same result, and input order is preserved.

The predicate here is the reference for ``Database.get_games_by_filters``;
both use :func:`fold_text` for case-insensitive comparison.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable, TypeVar

from boardgame_collection.core.game import Difficulty, GameStatus, Genre
from boardgame_collection.utils.text_utils import fold_text

if TYPE_CHECKING:
    from boardgame_collection.core.game import Game

logger = logging.getLogger("boardgamecoll.filter_service")

__all__ = ["FilterCriteria", "FilterService", "filter_games", "fold_text"]

_E = TypeVar("_E", bound=Enum)

SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


def _coerce_int(value: Any, round_up: bool) -> int | None:
    """Integer bound for a numeric filter value, or None.

    Fractions round toward the stricter side (*round_up* for lower bounds)
    so the predicate keeps the same games. Results are clamped to SQLite's
    INTEGER range; every stored count and duration lies far inside it.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, numbers.Real) and not isinstance(value, numbers.Integral):
            if math.isnan(value):
                return None
            if math.isinf(value):
                return SQLITE_INT_MAX if value > 0 else SQLITE_INT_MIN
            result = math.ceil(value) if round_up else math.floor(value)
        else:
            result = int(value)
    except (TypeError, ValueError):
        logger.debug("Ignoring non-numeric filter value: %r", value)
        return None
    return max(SQLITE_INT_MIN, min(SQLITE_INT_MAX, result))


def _coerce_enum(enum_cls: type[_E], value: Any) -> _E | None:
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        logger.debug("Ignoring unknown %s filter value: %r", enum_cls.__name__, value)
        return None


def _coerce_tags(value: Any) -> frozenset[str]:
    if not value:
        return frozenset()
    if isinstance(value, str):
        return frozenset({value})
    try:
        return frozenset(name for name in value if isinstance(name, str) and name)
    except TypeError:
        logger.debug("Ignoring non-iterable tag filter: %r", value)
        return frozenset()


@dataclass(frozen=True)
class FilterCriteria:
    """Immutable set of optional filter predicates.

    A field left at its default imposes no constraint. Values of the wrong
    type are dropped on construction (treated as absent) instead of raising.

    Attributes:
        search_term: Substring of title, publisher or any tag name.
        genre: Exact genre.
        difficulty: Exact difficulty.
        min_players: Keep games whose max_players >= this.
        max_players: Keep games whose min_players <= this.
        min_play_time: Inclusive lower bound on play time.
        max_play_time: Inclusive upper bound on play time.
        status: Exact ownership status.
        tags: Keep games having at least one of these tag names.
    """

    search_term: str | None = None
    genre: Genre | None = None
    difficulty: Difficulty | None = None
    min_players: int | None = None
    max_players: int | None = None
    min_play_time: int | None = None
    max_play_time: int | None = None
    status: GameStatus | None = None
    tags: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        term = self.search_term if isinstance(self.search_term, str) else None
        object.__setattr__(self, "search_term", term)
        object.__setattr__(self, "genre", _coerce_enum(Genre, self.genre))
        object.__setattr__(self, "difficulty", _coerce_enum(Difficulty, self.difficulty))
        object.__setattr__(self, "status", _coerce_enum(GameStatus, self.status))
        for name in ("min_players", "min_play_time"):
            object.__setattr__(self, name, _coerce_int(getattr(self, name), round_up=True))
        for name in ("max_players", "max_play_time"):
            object.__setattr__(self, name, _coerce_int(getattr(self, name), round_up=False))
        object.__setattr__(self, "tags", _coerce_tags(self.tags))

    @property
    def normalized_search_term(self) -> str | None:
        """Trimmed, folded search term, or None when blank."""
        if self.search_term is None:
            return None
        stripped = self.search_term.strip()
        return fold_text(stripped) if stripped else None

    def with_changes(self, **changes: Any) -> FilterCriteria:
        """Returns a copy with the given fields replaced."""
        return replace(self, **changes)

    def has_active_filters(self) -> bool:
        """True if at least one field constrains the result."""
        for f in fields(self):
            if f.name == "search_term":
                if self.normalized_search_term is not None:
                    return True
            elif f.name == "tags":
                if self.tags:
                    return True
            elif getattr(self, f.name) is not None:
                return True
        return False


class FilterService:
    """Applies FilterCriteria to game lists.

    All active criteria combine with AND; the tag criterion is OR within its
    set. Games with no sessions, no tags, a null publisher or dangling tag
    joins are handled without errors.
    """

    def apply(self, games: Iterable[Game], criteria: FilterCriteria | None = None) -> list[Game]:
        """Returns the games matching every active criterion, in input order.

        Args:
            games: The input game list (not modified).
            criteria: Filter predicates; None means no filtering.

        Returns:
            A new list containing only the matching games.
        """
        games = list(games)
        if criteria is None or not criteria.has_active_filters():
            return games

        result = [game for game in games if self.matches(game, criteria)]
        logger.debug("Filter kept %d of %d games", len(result), len(games))
        return result

    def matches(self, game: Game, criteria: FilterCriteria) -> bool:
        """Checks one game against all active criteria."""
        return (
            self._passes_search(game, criteria.normalized_search_term)
            and self._passes_exact(game.genre, criteria.genre)
            and self._passes_exact(game.difficulty, criteria.difficulty)
            and self._passes_player_range(game, criteria.min_players, criteria.max_players)
            and self._passes_play_time(game, criteria.min_play_time, criteria.max_play_time)
            and self._passes_exact(game.status, criteria.status)
            and self._passes_tags(game, criteria.tags)
        )

    @staticmethod
    def _passes_search(game: Game, term: str | None) -> bool:
        """Substring match on title, publisher or any resolved tag name.

        Args:
            game: The game to check.
            term: Already trimmed and folded search term, or None.

        Returns:
            True if no term is given or any of the fields contains it.
        """
        if term is None:
            return True

        title = fold_text(game.title)
        if title is not None and term in title:
            return True

        publisher = fold_text(game.publisher)
        if publisher is not None and term in publisher:
            return True

        for tag in game.tags:
            name = fold_text(tag.name)
            if name is not None and term in name:
                return True
        return False

    @staticmethod
    def _passes_exact(value: Enum, wanted: Enum | None) -> bool:
        return wanted is None or value == wanted

    @staticmethod
    def _passes_player_range(game: Game, min_players: int | None, max_players: int | None) -> bool:
        """Checks whether the game's player range fits the requested one.

        ``min_players`` keeps games that can seat at least that many;
        ``max_players`` keeps games that do not require more than that many.
        """
        if min_players is not None and game.max_players < min_players:
            return False
        if max_players is not None and game.min_players > max_players:
            return False
        return True

    @staticmethod
    def _passes_play_time(game: Game, min_play_time: int | None, max_play_time: int | None) -> bool:
        if min_play_time is not None and game.play_time < min_play_time:
            return False
        if max_play_time is not None and game.play_time > max_play_time:
            return False
        return True

    @staticmethod
    def _passes_tags(game: Game, tag_names: frozenset[str]) -> bool:
        """Checks the tag criterion (OR logic, exact tag names).

        If no tags are requested, all games pass.
        """
        if not tag_names:
            return True
        return any(tag.name in tag_names for tag in game.tags)


_default_service = FilterService()


def filter_games(games: Iterable[Game], criteria: FilterCriteria | None = None) -> list[Game]:
    """Module-level shortcut for ``FilterService().apply``."""
    return _default_service.apply(games, criteria)

"""Field validation for the data-entry forms.

Each validator returns a mapping of field name to a localized message; an
empty mapping means the record may be persisted. The filter engine never
validates; these checks run before an add or update reaches the repository.
"""

from __future__ import annotations

from boardgame_collection.core.game import Game, GameSession
from boardgame_collection.utils.i18n import t

__all__ = [
    "MAX_PLAYERS_LIMIT",
    "MAX_TAG_NAME_LENGTH",
    "MAX_TITLE_LENGTH",
    "ValidationError",
    "validate_game",
    "validate_player_count",
    "validate_session",
    "validate_tag_name",
    "validate_title",
]

MAX_TITLE_LENGTH = 100
MAX_TAG_NAME_LENGTH = 50
MIN_PLAYERS_LIMIT = 1
MAX_PLAYERS_LIMIT = 20
MIN_PLAY_TIME = 5
MAX_PLAY_TIME = 600
MIN_YEAR = 1900
MAX_YEAR = 2100
MIN_RATING = 1
MAX_RATING = 10


class ValidationError(ValueError):
    """Raised when a record with invalid fields is about to be persisted.

    Attributes:
        errors: Field name -> localized message.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__("; ".join(f"{name}: {msg}" for name, msg in self.errors.items()))


def _in_range(value: float | None, low: float, high: float) -> bool:
    return value is not None and low <= value <= high


def validate_title(title: str | None) -> str | None:
    """Message for an invalid title, or None."""
    if title is None or not title.strip():
        return t("validation.title_required")
    if len(title) > MAX_TITLE_LENGTH:
        return t("validation.title_too_long", max=MAX_TITLE_LENGTH)
    return None


def validate_player_count(min_players: int | None, max_players: int | None) -> str | None:
    """Message for an invalid player range, or None.

    Checks each bound first, then their ordering.
    """
    if not _in_range(min_players, MIN_PLAYERS_LIMIT, MAX_PLAYERS_LIMIT):
        return t("validation.min_players_range", low=MIN_PLAYERS_LIMIT, high=MAX_PLAYERS_LIMIT)
    if not _in_range(max_players, MIN_PLAYERS_LIMIT, MAX_PLAYERS_LIMIT):
        return t("validation.max_players_range", low=MIN_PLAYERS_LIMIT, high=MAX_PLAYERS_LIMIT)
    if min_players > max_players:
        return t("validation.players_order")
    return None


def validate_game(game: Game) -> dict[str, str]:
    """Validates every editable field of *game*.

    Args:
        game: The game about to be added or updated.

    Returns:
        Field name -> message for each invalid field. The player-range
        message is reported under ``"players"``.
    """
    errors: dict[str, str] = {}

    title_error = validate_title(game.title)
    if title_error:
        errors["title"] = title_error

    players_error = validate_player_count(game.min_players, game.max_players)
    if players_error:
        errors["players"] = players_error

    if not _in_range(game.play_time, MIN_PLAY_TIME, MAX_PLAY_TIME):
        errors["play_time"] = t("validation.play_time_range", low=MIN_PLAY_TIME, high=MAX_PLAY_TIME)

    if not _in_range(game.year_published, MIN_YEAR, MAX_YEAR):
        errors["year_published"] = t("validation.year_range", low=MIN_YEAR, high=MAX_YEAR)

    # BGG rating is optional
    if game.bgg_rating is not None and not _in_range(game.bgg_rating, MIN_RATING, MAX_RATING):
        errors["bgg_rating"] = t("validation.bgg_rating_range", low=MIN_RATING, high=MAX_RATING)

    if not _in_range(game.personal_rating, MIN_RATING, MAX_RATING):
        errors["personal_rating"] = t("validation.personal_rating_range", low=MIN_RATING, high=MAX_RATING)

    return errors


def validate_session(session: GameSession) -> dict[str, str]:
    """Validates a play session before it is recorded."""
    errors: dict[str, str] = {}
    if session.players_count is None or session.players_count < MIN_PLAYERS_LIMIT:
        errors["players_count"] = t("validation.session_players", low=MIN_PLAYERS_LIMIT)
    if not _in_range(session.session_rating, MIN_RATING, MAX_RATING):
        errors["session_rating"] = t("validation.session_rating_range", low=MIN_RATING, high=MAX_RATING)
    return errors


def validate_tag_name(name: str | None) -> str | None:
    """Message for an invalid tag name, or None."""
    if name is None or not name.strip():
        return t("validation.tag_required")
    if len(name.strip()) > MAX_TAG_NAME_LENGTH:
        return t("validation.tag_too_long", max=MAX_TAG_NAME_LENGTH)
    return None

"""Catalog state shared by the main window and its dialogs.

CatalogService owns the loaded collection, the current FilterCriteria and the
list currently on display. Every criteria change re-runs the filter at once
and publishes the new list together with its statistics.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import replace
from typing import TYPE_CHECKING, Any, Callable, Iterable, TypeVar

from PyQt6.QtCore import QObject, pyqtSignal

from boardgame_collection.core.game import GameTag
from boardgame_collection.core.validation import ValidationError, validate_game, validate_session, validate_tag_name
from boardgame_collection.services.filter_service import FilterCriteria, FilterService
from boardgame_collection.services.recommendation_service import RecommendationService
from boardgame_collection.services.statistics_service import CollectionStatistics, collection_statistics
from boardgame_collection.utils.i18n import t

if TYPE_CHECKING:
    from boardgame_collection.core.game import Difficulty, Game, GameSession, GameStatus, Genre, Tag
    from boardgame_collection.core.repository import GameRepository

logger = logging.getLogger("boardgamecoll.catalog_service")

__all__ = ["CatalogService"]

_T = TypeVar("_T")


class CatalogService(QObject):
    """Loads games from a repository and keeps the filtered view current.

    Repository and validation failures never propagate to the caller: they
    are logged, stored in ``error_message`` and emitted through
    ``error_occurred``, and the list on display stays as it was.

    Attributes:
        repository: The storage backend.
        criteria: Current filter criteria.
        games: Full collection as last loaded.
        tags: All known tags as last loaded.
        displayed_games: The list currently published to the view.
        statistics: Figures for ``displayed_games``.
        error_message: Last error, or empty.
        info_message: Last informational notice, or empty.

    Signals:
        games_changed: Emitted with the new displayed list.
        statistics_changed: Emitted with the matching CollectionStatistics.
        error_occurred: Emitted with a localized error message.
    """

    games_changed = pyqtSignal(list)
    statistics_changed = pyqtSignal(object)
    error_occurred = pyqtSignal(str)

    def __init__(self, repository: GameRepository, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.repository = repository
        self.criteria = FilterCriteria()
        self.games: list[Game] = []
        self.tags: list[Tag] = []
        self.displayed_games: list[Game] = []
        self.statistics = CollectionStatistics()
        self.error_message = ""
        self.info_message = ""
        self.showing_recommendations = False

        self._filter = FilterService()
        self._recommender = RecommendationService()

    # Loading

    def refresh(self) -> bool:
        """Reload games and tags, then re-apply the current criteria.

        Returns:
            True if the reload succeeded.
        """

        def load() -> tuple[list[Game], list[Tag]]:
            return self.repository.get_all_games(), self.repository.get_all_tags()

        loaded = self._guarded(load, "ui.errors.load_failed")
        if loaded is None:
            return False

        self.games, self.tags = loaded
        logger.info(t("logs.catalog.loaded", games=len(self.games), tags=len(self.tags)))
        self._apply_filter()
        return True

    # Criteria

    def set_criteria(self, criteria: FilterCriteria) -> None:
        """Replace all criteria at once and re-run the filter."""
        self.criteria = criteria
        self._apply_filter()

    def set_search_term(self, term: str | None) -> None:
        self._update_criteria(search_term=term)

    def set_genre(self, genre: Genre | None) -> None:
        self._update_criteria(genre=genre)

    def set_difficulty(self, difficulty: Difficulty | None) -> None:
        self._update_criteria(difficulty=difficulty)

    def set_min_players(self, value: int | None) -> None:
        self._update_criteria(min_players=value)

    def set_max_players(self, value: int | None) -> None:
        self._update_criteria(max_players=value)

    def set_min_play_time(self, value: int | None) -> None:
        self._update_criteria(min_play_time=value)

    def set_max_play_time(self, value: int | None) -> None:
        self._update_criteria(max_play_time=value)

    def set_status(self, status: GameStatus | None) -> None:
        self._update_criteria(status=status)

    def set_tags(self, tag_names: Iterable[str]) -> None:
        self._update_criteria(tags=frozenset(tag_names))

    def reset_filters(self) -> None:
        """Clear every criterion and show the whole collection."""
        self.criteria = FilterCriteria()
        self._apply_filter()

    def show_recommendations(self) -> list[Game]:
        """Publish recommendations drawn from the full collection.

        Returns:
            The recommended games (possibly empty).
        """
        recommended = self._recommender.recommend(self.games)
        self.showing_recommendations = True
        self.info_message = "" if recommended else t("ui.info.no_recommendations")
        self._publish(recommended)
        return recommended

    # Mutations

    def add_game(self, game: Game, tag_ids: Iterable[int] = ()) -> int | None:
        """Validate and store a new game with its tags, then reload.

        Args:
            game: The unsaved game.
            tag_ids: Tags to attach.

        Returns:
            The new game id, or None if validation or storage failed.
        """
        known = set(game.tag_ids)
        extra = [GameTag(game_id=None, tag_id=tag_id) for tag_id in dict.fromkeys(tag_ids) if tag_id not in known]
        # The repository stores the game and its tag joins in one transaction
        to_store = replace(game, game_tags=[*game.game_tags, *extra])

        def store() -> int:
            self._validate(validate_game(game))
            game_id = self.repository.add_game(to_store)
            game.id = game_id
            return game_id

        game_id = self._guarded(store, "ui.errors.save_failed")
        if game_id is not None:
            logger.info(t("logs.catalog.game_added", title=game.title, id=game_id))
            self.refresh()
        return game_id

    def update_game(self, game: Game, tag_ids: Iterable[int] = ()) -> bool:
        """Validate and store changes to an existing game, then reload."""
        tag_ids = list(tag_ids)

        def store() -> bool:
            self._validate(validate_game(game))
            self.repository.update_game(game, tag_ids)
            return True

        if self._guarded(store, "ui.errors.save_failed") is None:
            return False
        logger.info(t("logs.catalog.game_updated", title=game.title, id=game.id))
        self.refresh()
        return True

    def delete_game(self, game_id: int) -> bool:
        """Delete a game with its sessions and tag joins, then reload."""

        def remove() -> bool:
            self.repository.delete_game(game_id)
            return True

        if self._guarded(remove, "ui.errors.delete_failed") is None:
            return False
        logger.info(t("logs.catalog.game_deleted", id=game_id))
        self.refresh()
        return True

    def record_session(self, session: GameSession) -> int | None:
        """Validate and store a play session, then reload.

        Returns:
            The new session id, or None on failure (including an unknown game).
        """

        def store() -> int | None:
            self._validate(validate_session(session))
            return self.repository.add_game_session(session)

        session_id = self._guarded(store, "ui.errors.session_failed")
        if session_id is None:
            if not self.error_message:
                self._report(t("ui.errors.game_not_found", id=session.game_id))
            return None
        logger.info(t("logs.catalog.session_recorded", id=session.game_id))
        self.refresh()
        return session_id

    def add_tag(self, name: str) -> int | None:
        """Create a tag by name and reload."""

        def store() -> int:
            error = validate_tag_name(name)
            if error:
                raise ValidationError({"name": error})
            return self.repository.add_tag(name)

        tag_id = self._guarded(store, "ui.errors.save_failed")
        if tag_id is not None:
            self.refresh()
        return tag_id

    # Internals

    def _update_criteria(self, **changes: Any) -> None:
        self.criteria = self.criteria.with_changes(**changes)
        self._apply_filter()

    def _apply_filter(self) -> None:
        self.showing_recommendations = False
        self.info_message = ""
        self._publish(self._filter.apply(self.games, self.criteria))

    def _publish(self, games: list[Game]) -> None:
        self.displayed_games = games
        self.statistics = collection_statistics(games)
        self.games_changed.emit(games)
        self.statistics_changed.emit(self.statistics)

    @staticmethod
    def _validate(errors: dict[str, str]) -> None:
        if errors:
            raise ValidationError(errors)

    def _guarded(self, action: Callable[[], _T], error_key: str) -> _T | None:
        """Run a repository action, turning storage and validation errors into reports.

        Args:
            action: The callable to run.
            error_key: i18n key of the message prefix for storage errors.

        Returns:
            The action's result, or None if it failed.
        """
        self.error_message = ""
        try:
            return action()
        except ValidationError as e:
            logger.warning(t("logs.catalog.validation_failed", errors=str(e)))
            self._report("\n".join(e.errors.values()))
        except sqlite3.Error as e:
            logger.error(t("logs.catalog.repository_error", error=str(e)))
            self._report(t(error_key, error=str(e)))
        return None

    def _report(self, message: str) -> None:
        self.error_message = message
        self.error_occurred.emit(message)

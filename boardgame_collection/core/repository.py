"""Storage contract used by the catalog service."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Iterable, Protocol

from boardgame_collection.core.game import Game, GameSession, Tag

if TYPE_CHECKING:
    from boardgame_collection.services.filter_service import FilterCriteria

__all__ = ["GameRepository"]


class GameRepository(Protocol):
    """Persistence-agnostic contract for the game catalog.

    Implemented by :class:`boardgame_collection.core.db.Database`.
    """

    def get_all_games(self) -> list[Game]: ...

    def get_game_by_id(self, game_id: int) -> Game | None: ...

    def add_game(self, game: Game) -> int: ...

    def update_game(self, game: Game, tag_ids: Iterable[int] | None = None) -> None: ...

    def delete_game(self, game_id: int) -> None: ...

    def add_game_session(self, session: GameSession) -> int | None: ...

    def update_game_tags(self, game_id: int, tag_ids: Iterable[int]) -> None: ...

    def get_games_by_filters(self, criteria: FilterCriteria | None = None) -> list[Game]: ...

    def get_all_tags(self) -> list[Tag]: ...

    def add_tag(self, name: str) -> int: ...

    def delete_tag(self, tag_id: int) -> None: ...

    def get_sessions(self, game_id: int) -> list[GameSession]: ...

    def get_total_sessions_count(self, game_id: int) -> int: ...

    def get_game_count(self) -> int: ...

    def update_game_last_played(self, game_id: int, date: datetime) -> None: ...

    def get_unplayed_games(self) -> list[Game]: ...

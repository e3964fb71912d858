"""Play session queries."""

from __future__ import annotations

import logging
import sqlite3

from boardgame_collection.core.db.models import format_timestamp, row_to_session
from boardgame_collection.core.game import GameSession
from boardgame_collection.utils.i18n import t

logger = logging.getLogger("boardgamecoll.database")

__all__ = ["SessionQueryMixin"]


class SessionQueryMixin:
    """Mixin providing session queries.

    Requires ConnectionBase attributes: conn. Uses GameQueryMixin._insert_session.
    """

    conn: sqlite3.Connection

    def add_game_session(self, session: GameSession) -> int | None:
        """Record a play session and set the game's last_played to its date.

        Args:
            session: The session; ``game_id`` must refer to a stored game.

        Returns:
            The new session id, or None when the game does not exist.
        """
        exists = self.conn.execute("SELECT 1 FROM games WHERE id = ?", (session.game_id,)).fetchone()
        if exists is None:
            logger.warning(t("logs.db.session_unknown_game", game_id=session.game_id))
            return None

        with self.conn:
            session_id = self._insert_session(session)
            self.conn.execute(
                "UPDATE games SET last_played = ? WHERE id = ?",
                (format_timestamp(session.session_date), session.game_id),
            )
        return session_id

    def get_sessions(self, game_id: int) -> list[GameSession]:
        """Sessions of one game, oldest first."""
        rows = self.conn.execute(
            "SELECT * FROM game_sessions WHERE game_id = ? ORDER BY session_date, id",
            (game_id,),
        ).fetchall()
        return [row_to_session(row) for row in rows]

    def get_total_sessions_count(self, game_id: int) -> int:
        return self.conn.execute("SELECT COUNT(*) FROM game_sessions WHERE game_id = ?", (game_id,)).fetchone()[0]

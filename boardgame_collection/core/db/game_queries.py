"""Single-game CRUD operations.

Handles insert, update, get and delete for games, and attaches the related
sessions and tags when games are loaded.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime
from typing import Iterable

from boardgame_collection.core.db.models import (
    format_timestamp,
    game_params,
    row_to_game,
    row_to_session,
    row_to_tag,
)
from boardgame_collection.core.game import Game, GameSession, GameTag

logger = logging.getLogger("boardgamecoll.database")

__all__ = ["GameQueryMixin"]

_GAME_COLUMNS = (
    "title, genre, difficulty, min_players, max_players, play_time, publisher, "
    "year_published, bgg_rating, personal_rating, status, date_added, last_played"
)


class GameQueryMixin:
    """Mixin providing game CRUD operations.

    Requires ConnectionBase attributes: conn.
    """

    conn: sqlite3.Connection

    def get_all_games(self) -> list[Game]:
        """Get every game with sessions and tags resolved, ordered by id."""
        rows = self.conn.execute("SELECT * FROM games ORDER BY id").fetchall()
        return self._load_related([row_to_game(row) for row in rows])

    def get_game_by_id(self, game_id: int) -> Game | None:
        """Get one game with sessions and tags, or None if unknown."""
        row = self.conn.execute("SELECT * FROM games WHERE id = ?", (game_id,)).fetchone()
        if row is None:
            return None
        return self._load_related([row_to_game(row)])[0]

    def get_game_count(self) -> int:
        return self.conn.execute("SELECT COUNT(*) FROM games").fetchone()[0]

    def get_unplayed_games(self) -> list[Game]:
        """Games without any recorded session, ordered by id."""
        rows = self.conn.execute(
            """
            SELECT * FROM games g
            WHERE NOT EXISTS (SELECT 1 FROM game_sessions s WHERE s.game_id = g.id)
            ORDER BY g.id
            """
        ).fetchall()
        return self._load_related([row_to_game(row) for row in rows])

    def add_game(self, game: Game) -> int:
        """Insert a new game together with the sessions and tag joins it carries.

        Tag joins are stored by tag_id; a join whose tag has a name but no id
        creates (or reuses) the tag by name.

        Args:
            game: The game to store. Its ``id`` is set to the new row id.

        Returns:
            The id of the inserted game.
        """
        # One transaction: a failing session or tag insert leaves no game row
        with self.conn:
            cursor = self.conn.execute(
                f"INSERT INTO games ({_GAME_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                game_params(game),
            )
            game_id = cursor.lastrowid

            for session in game.sessions:
                session.game_id = game_id
                self._insert_session(session)

            tag_ids = []
            for game_tag in game.game_tags:
                tag_id = game_tag.tag_id
                if tag_id is None and game_tag.tag is not None and game_tag.tag.name:
                    tag_id = self._get_or_create_tag_id(game_tag.tag.name)
                if tag_id is not None:
                    game_tag.game_id = game_id
                    game_tag.tag_id = tag_id
                    tag_ids.append(tag_id)
            self._insert_game_tags(game_id, tag_ids)

        game.id = game_id
        logger.debug("Added game %d (%s)", game_id, game.title)
        return game_id

    def update_game(self, game: Game, tag_ids: Iterable[int] | None = None) -> None:
        """Overwrite the stored scalar fields of *game*.

        Sessions are not touched. Unknown ids are ignored.

        Args:
            game: The game to store.
            tag_ids: When given, the tag set is replaced in the same
                transaction; None leaves the tags as they are.
        """
        if game.id is None:
            logger.debug("update_game called for unsaved game %r", game.title)
            return
        assignments = ", ".join(f"{col.strip()} = ?" for col in _GAME_COLUMNS.split(","))
        with self.conn:
            cursor = self.conn.execute(
                f"UPDATE games SET {assignments} WHERE id = ?",
                (*game_params(game), game.id),
            )
            if cursor.rowcount == 0:
                logger.debug("update_game: no game with id %d", game.id)
                return
            if tag_ids is not None:
                self._replace_game_tags(game.id, tag_ids)

    def delete_game(self, game_id: int) -> None:
        """Delete a game; its sessions and tag joins go with it."""
        cursor = self.conn.execute("DELETE FROM games WHERE id = ?", (game_id,))
        self.conn.commit()
        if cursor.rowcount:
            logger.debug("Deleted game %d", game_id)

    def update_game_last_played(self, game_id: int, date: datetime) -> None:
        self.conn.execute(
            "UPDATE games SET last_played = ? WHERE id = ?",
            (format_timestamp(date), game_id),
        )
        self.conn.commit()

    def _load_related(self, games: list[Game]) -> list[Game]:
        """Attach sessions and resolved tags to *games* in two batch queries."""
        if not games:
            return games
        by_id = {game.id: game for game in games}
        placeholders = ",".join("?" * len(by_id))
        ids = tuple(by_id)

        session_rows = self.conn.execute(
            f"SELECT * FROM game_sessions WHERE game_id IN ({placeholders}) ORDER BY session_date, id",
            ids,
        ).fetchall()
        for row in session_rows:
            by_id[row["game_id"]].sessions.append(row_to_session(row))

        tag_rows = self.conn.execute(
            f"""
            SELECT gt.game_id, t.id, t.name
            FROM game_tags gt JOIN tags t ON t.id = gt.tag_id
            WHERE gt.game_id IN ({placeholders})
            ORDER BY gt.game_id, t.name
            """,
            ids,
        ).fetchall()
        for row in tag_rows:
            tag = row_to_tag(row)
            by_id[row["game_id"]].game_tags.append(GameTag(game_id=row["game_id"], tag_id=tag.id, tag=tag))

        return games

    # Helpers shared with the session and tag mixins; they do not commit.

    def _insert_session(self, session: GameSession) -> int:
        cursor = self.conn.execute(
            """
            INSERT INTO game_sessions (game_id, session_date, players_count, results, session_rating)
            VALUES (?, ?, ?, ?, ?)
            """,
            (
                session.game_id,
                format_timestamp(session.session_date),
                session.players_count,
                session.results,
                session.session_rating,
            ),
        )
        session.id = cursor.lastrowid
        return session.id

    def _insert_game_tags(self, game_id: int, tag_ids: Iterable[int]) -> None:
        self.conn.executemany(
            "INSERT OR IGNORE INTO game_tags (game_id, tag_id) VALUES (?, ?)",
            [(game_id, tag_id) for tag_id in tag_ids],
        )

    def _replace_game_tags(self, game_id: int, tag_ids: Iterable[int]) -> list[int]:
        unique_ids = list(dict.fromkeys(tag_ids))
        self.conn.execute("DELETE FROM game_tags WHERE game_id = ?", (game_id,))
        self._insert_game_tags(game_id, unique_ids)
        return unique_ids

    def _get_or_create_tag_id(self, name: str) -> int:
        self.conn.execute("INSERT OR IGNORE INTO tags (name) VALUES (?)", (name,))
        return self.conn.execute("SELECT id FROM tags WHERE name = ?", (name,)).fetchone()[0]

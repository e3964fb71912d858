"""Tag definition and game-tag association queries."""

from __future__ import annotations

import logging
import sqlite3
from typing import Iterable

from boardgame_collection.core.db.models import row_to_tag
from boardgame_collection.core.game import Tag

logger = logging.getLogger("boardgamecoll.database")

__all__ = ["TagQueryMixin"]


class TagQueryMixin:
    """Mixin providing tag queries.

    Requires ConnectionBase attributes: conn. Uses GameQueryMixin helpers
    _replace_game_tags and _get_or_create_tag_id.
    """

    conn: sqlite3.Connection

    def get_all_tags(self) -> list[Tag]:
        """All tags, sorted by name."""
        rows = self.conn.execute("SELECT id, name FROM tags ORDER BY name").fetchall()
        return [row_to_tag(row) for row in rows]

    def add_tag(self, name: str) -> int:
        """Create a tag, or return the id of the existing tag with that name.

        Args:
            name: Tag name; surrounding whitespace is stripped.

        Returns:
            The tag id.
        """
        tag_id = self._get_or_create_tag_id(name.strip())
        self.conn.commit()
        return tag_id

    def delete_tag(self, tag_id: int) -> None:
        """Delete a tag and every game association using it."""
        self.conn.execute("DELETE FROM tags WHERE id = ?", (tag_id,))
        self.conn.commit()

    def update_game_tags(self, game_id: int, tag_ids: Iterable[int]) -> None:
        """Replace the whole tag set of a game.

        Args:
            game_id: The game to retag.
            tag_ids: The new tag ids; duplicates are collapsed.

        Raises:
            sqlite3.IntegrityError: If a tag id is unknown. The previous tag
                set is kept.
        """
        with self.conn:
            unique_ids = self._replace_game_tags(game_id, tag_ids)
        logger.debug("Game %d now has tags %s", game_id, unique_ids)

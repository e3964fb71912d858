"""Filtered game lookup executed in SQL.

Applies the same predicate as FilterService, so both paths return the same
games for the same criteria. Case folding uses the Python ``fold`` function
registered on the connection, which handles Cyrillic text the same way the
in-memory engine does (SQLite's own LOWER() only folds ASCII).
"""

from __future__ import annotations

import logging
import sqlite3
from typing import TYPE_CHECKING, Any

from boardgame_collection.core.db.connection import FOLD_FUNCTION
from boardgame_collection.core.db.models import row_to_game
from boardgame_collection.core.game import Game

if TYPE_CHECKING:
    from boardgame_collection.services.filter_service import FilterCriteria

logger = logging.getLogger("boardgamecoll.database")

__all__ = ["FilterQueryMixin", "build_filter_clause"]


def build_filter_clause(criteria: FilterCriteria | None) -> tuple[str, list[Any]]:
    """Translate criteria into a WHERE clause over ``games g``.

    Args:
        criteria: Filter predicates; None or an empty criteria yields no clause.

    Returns:
        Tuple of (where_sql, params). ``where_sql`` is empty when nothing
        constrains the result, otherwise it starts with ``WHERE``.
    """
    if criteria is None:
        return "", []

    clauses: list[str] = []
    params: list[Any] = []

    term = criteria.normalized_search_term
    if term is not None:
        clauses.append(
            f"""(
                instr({FOLD_FUNCTION}(g.title), ?) > 0
                OR (g.publisher IS NOT NULL AND instr({FOLD_FUNCTION}(g.publisher), ?) > 0)
                OR EXISTS (
                    SELECT 1 FROM game_tags gt JOIN tags t ON t.id = gt.tag_id
                    WHERE gt.game_id = g.id AND instr({FOLD_FUNCTION}(t.name), ?) > 0
                )
            )"""
        )
        params.extend([term, term, term])

    for column, value in (
        ("genre", criteria.genre),
        ("difficulty", criteria.difficulty),
        ("status", criteria.status),
    ):
        if value is not None:
            clauses.append(f"g.{column} = ?")
            params.append(value.value)

    if criteria.min_players is not None:
        clauses.append("g.max_players >= ?")
        params.append(criteria.min_players)
    if criteria.max_players is not None:
        clauses.append("g.min_players <= ?")
        params.append(criteria.max_players)
    if criteria.min_play_time is not None:
        clauses.append("g.play_time >= ?")
        params.append(criteria.min_play_time)
    if criteria.max_play_time is not None:
        clauses.append("g.play_time <= ?")
        params.append(criteria.max_play_time)

    if criteria.tags:
        names = sorted(criteria.tags)
        placeholders = ",".join("?" * len(names))
        clauses.append(
            f"""EXISTS (
                SELECT 1 FROM game_tags gt JOIN tags t ON t.id = gt.tag_id
                WHERE gt.game_id = g.id AND t.name IN ({placeholders})
            )"""
        )
        params.extend(names)

    if not clauses:
        return "", []
    return "WHERE " + " AND ".join(clauses), params


class FilterQueryMixin:
    """Mixin providing the filtered game query.

    Requires ConnectionBase attributes: conn. Uses GameQueryMixin._load_related.
    """

    conn: sqlite3.Connection

    def get_games_by_filters(self, criteria: FilterCriteria | None = None) -> list[Game]:
        """Games matching every active criterion, ordered by id.

        Args:
            criteria: Filter predicates; None returns all games.

        Returns:
            Matching games with sessions and tags resolved.
        """
        where_sql, params = build_filter_clause(criteria)
        rows = self.conn.execute(f"SELECT g.* FROM games g {where_sql} ORDER BY g.id", params).fetchall()
        games = self._load_related([row_to_game(row) for row in rows])
        logger.debug("SQL filter returned %d games", len(games))
        return games

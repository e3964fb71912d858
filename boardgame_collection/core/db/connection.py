"""Database connection management.

Handles SQLite connection setup, PRAGMA configuration, the Python text
folding function used by the filter query, and the context manager protocol.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Any

from boardgame_collection.utils.text_utils import fold_text

logger = logging.getLogger("boardgamecoll.database")

__all__ = ["ConnectionBase", "FOLD_FUNCTION"]

# Name under which fold_text is callable from SQL
FOLD_FUNCTION = "fold"


class ConnectionBase:
    """Base class providing SQLite connection setup and lifecycle.

    Enables foreign keys (cascading deletes rely on them) and WAL mode for
    file databases. Calls _ensure_schema(), which is provided by SchemaMixin
    via multiple inheritance.
    """

    SCHEMA_VERSION = 1

    conn: sqlite3.Connection
    db_path: Path | None

    def __init__(self, db_path: Path | None) -> None:
        """Open (or create) the catalog database.

        Args:
            db_path: Path to the SQLite file, or None for an in-memory database.
        """
        self.db_path = db_path
        if db_path is not None:
            db_path.parent.mkdir(parents=True, exist_ok=True)
            target = str(db_path)
        else:
            target = ":memory:"

        self.conn = sqlite3.connect(target)
        self.conn.row_factory = sqlite3.Row
        self.conn.create_function(FOLD_FUNCTION, 1, fold_text, deterministic=True)
        self.conn.execute("PRAGMA foreign_keys = ON")
        if db_path is not None:
            self.conn.execute("PRAGMA journal_mode = WAL")

        logger.debug("Opened database %s", target)
        self._ensure_schema()

    def commit(self) -> None:
        """Commit current transaction."""
        self.conn.commit()

    def close(self) -> None:
        """Close database connection."""
        self.conn.close()

    def __enter__(self) -> ConnectionBase:
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.commit()
        self.close()

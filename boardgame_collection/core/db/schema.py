"""Database schema creation.

Creates the catalog tables from schema.sql on first open and records the
schema version.
"""

from __future__ import annotations

import logging
import sqlite3
import time
from pathlib import Path

from boardgame_collection.utils.i18n import t

logger = logging.getLogger("boardgamecoll.database")

__all__ = ["SchemaMixin"]


class SchemaMixin:
    """Mixin providing schema creation.

    Requires ConnectionBase attributes: conn, SCHEMA_VERSION.
    """

    def _ensure_schema(self) -> None:
        """Create the schema if the database is new."""
        current_version = self._get_schema_version()

        if current_version == 0:
            self._create_schema()
            self._set_schema_version(self.SCHEMA_VERSION)
        elif current_version > self.SCHEMA_VERSION:
            logger.warning(t("logs.db.schema_newer", found=current_version, expected=self.SCHEMA_VERSION))

    def _get_schema_version(self) -> int:
        """Get current database schema version (0 for a fresh file)."""
        try:
            cursor = self.conn.execute("SELECT MAX(version) FROM schema_version")
            result = cursor.fetchone()
            return result[0] if result[0] is not None else 0
        except sqlite3.OperationalError:
            return 0

    def _set_schema_version(self, version: int) -> None:
        self.conn.execute(
            """
            INSERT OR REPLACE INTO schema_version (version, applied_at, description)
            VALUES (?, ?, ?)
            """,
            (version, int(time.time()), t("logs.db.schema_created")),
        )
        self.conn.commit()

    def _create_schema(self) -> None:
        """Create initial database schema from SQL file."""
        schema_path = Path(__file__).parent / "schema.sql"
        try:
            schema_sql = schema_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.error(t("logs.db.schema_not_found", path=str(schema_path)))
            raise

        try:
            self.conn.executescript(schema_sql)
            self.conn.commit()
            logger.info(t("logs.db.schema_created"))
        except sqlite3.Error as e:
            logger.error(t("logs.db.schema_error", error=str(e)))
            raise

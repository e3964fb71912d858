"""SQLite persistence for the catalog.

All mixins compose into the Database class via multiple inheritance.
ConnectionBase.__init__ opens the connection, then SchemaMixin._ensure_schema()
creates the schema on a fresh file.
"""

from __future__ import annotations

from boardgame_collection.core.db.connection import ConnectionBase
from boardgame_collection.core.db.filter_queries import FilterQueryMixin
from boardgame_collection.core.db.game_queries import GameQueryMixin
from boardgame_collection.core.db.schema import SchemaMixin
from boardgame_collection.core.db.seed import seed_sample_data
from boardgame_collection.core.db.session_queries import SessionQueryMixin
from boardgame_collection.core.db.tag_queries import TagQueryMixin

__all__ = ["Database", "seed_sample_data"]


class Database(
    SchemaMixin,
    GameQueryMixin,
    SessionQueryMixin,
    TagQueryMixin,
    FilterQueryMixin,
    ConnectionBase,
):
    """SQLite-backed game repository.

    Inherits connection management from ConnectionBase, schema handling from
    SchemaMixin, and the query methods from the remaining mixins.
    """

    pass

"""
Main application window for the Board Game Collection.

Hosts the filter panel, the game table and the status bar, and routes the
toolbar actions to the CatalogService and the dialogs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QHeaderView,
    QMainWindow,
    QSplitter,
    QTableWidget,
    QTableWidgetItem,
    QToolBar,
)

from boardgame_collection.ui.builders.filter_panel_builder import FilterPanelBuilder
from boardgame_collection.ui.builders.statusbar_builder import StatusbarBuilder
from boardgame_collection.ui.builders.toolbar_builder import ToolbarBuilder
from boardgame_collection.ui.dialogs.game_dialog import GameDialog
from boardgame_collection.ui.dialogs.session_dialog import SessionDialog
from boardgame_collection.ui.dialogs.statistics_dialog import StatisticsDialog
from boardgame_collection.ui.widgets.ui_helper import UIHelper
from boardgame_collection.utils.enum_labels import label_for
from boardgame_collection.utils.i18n import t
from boardgame_collection.version import __app_name__, __version__

if TYPE_CHECKING:
    from boardgame_collection.core.game import Game
    from boardgame_collection.services.catalog_service import CatalogService
    from boardgame_collection.services.statistics_service import CollectionStatistics

logger = logging.getLogger("boardgamecoll.main_window")

__all__ = ["MainWindow"]

COLUMN_KEYS = (
    "title",
    "genre",
    "difficulty",
    "players",
    "play_time",
    "publisher",
    "year",
    "bgg_rating",
    "personal_rating",
    "status",
    "tags",
    "last_played",
)


def game_row(game: Game) -> list[str]:
    """Display texts for one table row, in COLUMN_KEYS order."""
    return [
        game.title,
        label_for(game.genre),
        label_for(game.difficulty),
        f"{game.min_players}–{game.max_players}",
        str(game.play_time),
        game.publisher or "",
        str(game.year_published),
        f"{game.bgg_rating:.1f}" if game.bgg_rating is not None else "",
        str(game.personal_rating),
        label_for(game.status),
        ", ".join(game.tag_names),
        game.last_played.strftime("%d.%m.%Y") if game.last_played else t("ui.table.never_played"),
    ]


class MainWindow(QMainWindow):
    """Primary application window.

    Attributes:
        catalog: The catalog service driving the displayed list.
        filter_panel: Builder owning the filter controls.
        toolbar_builder: Builder owning the toolbar actions.
        statusbar_builder: Builder owning the statistics label.
        table: The game table.
    """

    def __init__(self, catalog: CatalogService) -> None:
        super().__init__()
        self.catalog = catalog
        self.setWindowTitle(f"{__app_name__} {__version__}")
        self.resize(1280, 760)

        self.toolbar_builder = ToolbarBuilder(self)
        self.filter_panel = FilterPanelBuilder(catalog)
        self.statusbar_builder = StatusbarBuilder()

        self._create_ui()

        catalog.games_changed.connect(self.populate_table)
        catalog.statistics_changed.connect(self._on_statistics_changed)
        catalog.error_occurred.connect(self._on_error)

    def _create_ui(self) -> None:
        toolbar = QToolBar(t("ui.toolbar.title"))
        toolbar.setMovable(False)
        self.addToolBar(toolbar)
        self.toolbar_builder.build(toolbar)

        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.addWidget(self.filter_panel.build())

        self.table = QTableWidget(0, len(COLUMN_KEYS))
        self.table.setHorizontalHeaderLabels([t(f"ui.table.{key}") for key in COLUMN_KEYS])
        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.itemSelectionChanged.connect(self._on_selection_changed)
        self.table.doubleClicked.connect(lambda _index: self.edit_selected_game())
        splitter.addWidget(self.table)
        splitter.setStretchFactor(1, 1)
        splitter.setSizes([280, 1000])

        self.setCentralWidget(splitter)
        self.statusbar_builder.build(self.statusBar())

    # Table

    def populate_table(self, games: list[Game]) -> None:
        """Shows *games* in the table, keeping the selection when possible."""
        selected_id = self.selected_game_id()
        self.table.setSortingEnabled(False)
        self.table.setRowCount(len(games))
        for row, game in enumerate(games):
            for col, text in enumerate(game_row(game)):
                item = QTableWidgetItem(text)
                if col == 0:
                    item.setData(Qt.ItemDataRole.UserRole, game.id)
                self.table.setItem(row, col, item)
            if game.id == selected_id:
                self.table.selectRow(row)
        self._on_selection_changed()

    def selected_game_id(self) -> int | None:
        rows = self.table.selectionModel().selectedRows() if self.table.selectionModel() else []
        if not rows:
            return None
        item = self.table.item(rows[0].row(), 0)
        return item.data(Qt.ItemDataRole.UserRole) if item else None

    def selected_game(self) -> Game | None:
        game_id = self.selected_game_id()
        if game_id is None:
            return None
        return next((g for g in self.catalog.games if g.id == game_id), None)

    def _on_selection_changed(self) -> None:
        self.toolbar_builder.update_selection_state(self.selected_game_id() is not None)

    def _on_statistics_changed(self, stats: CollectionStatistics) -> None:
        self.statusbar_builder.update(stats)
        if self.catalog.info_message:
            self.statusBar().showMessage(self.catalog.info_message, 5000)

    def _on_error(self, message: str) -> None:
        logger.debug("Showing error: %s", message)
        UIHelper.show_error(self, message)

    # Actions

    def refresh_data(self) -> None:
        if self.catalog.refresh():
            self.filter_panel.set_tags(self.catalog.tags)
            self.statusBar().showMessage(t("ui.main_window.status_loaded", count=len(self.catalog.games)), 3000)

    def add_game(self) -> None:
        dialog = GameDialog(self, self.catalog.tags)
        if dialog.exec():
            if self.catalog.add_game(dialog.game(), dialog.selected_tag_ids()) is not None:
                self.filter_panel.set_tags(self.catalog.tags)

    def edit_selected_game(self) -> None:
        game = self.selected_game()
        if game is None:
            return
        dialog = GameDialog(self, self.catalog.tags, game)
        if dialog.exec():
            self.catalog.update_game(dialog.game(), dialog.selected_tag_ids())

    def delete_selected_game(self) -> None:
        game = self.selected_game()
        if game is None:
            return
        if UIHelper.confirm(self, t("ui.dialogs.confirm_delete", title=game.title)):
            self.catalog.delete_game(game.id)

    def open_sessions(self) -> None:
        game = self.selected_game()
        if game is None:
            return
        SessionDialog(self, self.catalog, game).exec()

    def show_recommendations(self) -> None:
        if not self.catalog.show_recommendations():
            UIHelper.show_info(self, self.catalog.info_message)

    def reset_filters(self) -> None:
        self.filter_panel.reset()

    def show_statistics(self) -> None:
        StatisticsDialog(self, self.catalog.games).exec()

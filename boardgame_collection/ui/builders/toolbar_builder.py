"""
Builder for the main application toolbar.

Creates the catalog actions and keeps references to the ones whose enabled
state depends on the current selection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QToolBar

from boardgame_collection.utils.i18n import t

if TYPE_CHECKING:
    from boardgame_collection.ui.main_window import MainWindow

__all__ = ["ToolbarBuilder"]


class ToolbarBuilder:
    """Constructs the main QToolBar.

    Attributes:
        main_window: Back-reference to the owning MainWindow instance.
        selection_actions: Actions that need a selected game.
    """

    def __init__(self, main_window: MainWindow) -> None:
        self.main_window = main_window
        self.selection_actions: list[QAction] = []

    def build(self, toolbar: QToolBar) -> None:
        """Populates *toolbar* with the catalog actions.

        Args:
            toolbar: The QToolBar to fill.
        """
        mw = self.main_window
        toolbar.clear()
        toolbar.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextOnly)
        self.selection_actions = []

        mw.action_add = self._action(toolbar, "ui.toolbar.add", mw.add_game, QKeySequence.StandardKey.New)
        mw.action_edit = self._action(toolbar, "ui.toolbar.edit", mw.edit_selected_game, selection=True)
        mw.action_delete = self._action(
            toolbar, "ui.toolbar.delete", mw.delete_selected_game, QKeySequence.StandardKey.Delete, selection=True
        )
        toolbar.addSeparator()
        mw.action_session = self._action(toolbar, "ui.toolbar.record_session", mw.open_sessions, selection=True)
        mw.action_history = self._action(toolbar, "ui.toolbar.history", mw.open_sessions, selection=True)
        toolbar.addSeparator()
        mw.action_refresh = self._action(toolbar, "ui.toolbar.refresh", mw.refresh_data, QKeySequence.StandardKey.Refresh)
        mw.action_recommend = self._action(toolbar, "ui.toolbar.recommendations", mw.show_recommendations)
        mw.action_reset = self._action(toolbar, "ui.toolbar.reset_filters", mw.reset_filters)
        mw.action_stats = self._action(toolbar, "ui.toolbar.statistics", mw.show_statistics)

    def _action(
        self,
        toolbar: QToolBar,
        text_key: str,
        slot,
        shortcut: QKeySequence.StandardKey | None = None,
        selection: bool = False,
    ) -> QAction:
        action = QAction(t(text_key), self.main_window)
        action.setToolTip(t(f"{text_key}_tooltip"))
        if shortcut is not None:
            action.setShortcut(QKeySequence(shortcut))
        action.triggered.connect(slot)
        toolbar.addAction(action)
        if selection:
            action.setEnabled(False)
            self.selection_actions.append(action)
        return action

    def update_selection_state(self, has_selection: bool) -> None:
        """Enables or disables the actions that operate on the selected game."""
        for action in self.selection_actions:
            action.setEnabled(has_selection)

"""Play history of one game, with a form to record a new session."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QDateTime, Qt
from PyQt6.QtWidgets import (
    QDateTimeEdit,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from boardgame_collection.core.game import GameSession
from boardgame_collection.core.validation import validate_session
from boardgame_collection.services.statistics_service import average_session_rating, cost_per_session
from boardgame_collection.ui.widgets.base_dialog import BaseDialog
from boardgame_collection.utils.i18n import t

if TYPE_CHECKING:
    from boardgame_collection.core.game import Game
    from boardgame_collection.services.catalog_service import CatalogService

__all__ = ["SessionDialog"]

DATE_FORMAT = "%d.%m.%Y %H:%M"


class SessionDialog(BaseDialog):
    """Shows a game's sessions, their average rating and cost per session.

    Recording goes through the CatalogService so the main list refreshes too.

    Attributes:
        catalog: Service used to record sessions and reload history.
        game: The game whose history is shown.
        sessions: Sessions currently listed, oldest first.
    """

    def __init__(self, parent: QWidget | None, catalog: CatalogService, game: Game) -> None:
        self.catalog = catalog
        self.game = game
        self.sessions: list[GameSession] = sorted(game.sessions, key=lambda s: s.session_date)
        super().__init__(
            parent,
            title_text=t("ui.session_dialog.title", game=game.title),
            min_width=620,
            buttons="close",
        )
        self._refresh_view()

    def _build_content(self, layout: QVBoxLayout) -> None:
        self.table = QTableWidget(0, 4)
        self.table.setHorizontalHeaderLabels(
            [
                t("ui.session_dialog.col_date"),
                t("ui.session_dialog.col_players"),
                t("ui.session_dialog.col_results"),
                t("ui.session_dialog.col_rating"),
            ]
        )
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.Stretch)
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.table.verticalHeader().setVisible(False)
        layout.addWidget(self.table)

        summary = QHBoxLayout()
        self.count_label = QLabel()
        self.average_label = QLabel()
        self.cost_label = QLabel()
        for label in (self.count_label, self.average_label, self.cost_label):
            summary.addWidget(label)
        summary.addStretch()
        layout.addLayout(summary)

        group = QGroupBox(t("ui.session_dialog.new_session"))
        form = QFormLayout(group)

        self.date_edit = QDateTimeEdit(QDateTime.currentDateTime())
        self.date_edit.setCalendarPopup(True)
        form.addRow(t("ui.session_dialog.col_date"), self.date_edit)

        self.players_spin = QSpinBox()
        self.players_spin.setRange(0, 99)
        self.players_spin.setValue(max(self.game.min_players, 1))
        form.addRow(t("ui.session_dialog.col_players"), self.players_spin)

        self.results_edit = QLineEdit()
        form.addRow(t("ui.session_dialog.col_results"), self.results_edit)

        self.rating_spin = QSpinBox()
        self.rating_spin.setRange(0, 99)
        self.rating_spin.setValue(5)
        form.addRow(t("ui.session_dialog.col_rating"), self.rating_spin)

        self.form_error = QLabel()
        self.form_error.setStyleSheet("color: #d9534f;")
        self.form_error.setWordWrap(True)
        self.form_error.setVisible(False)
        form.addRow(self.form_error)

        self.btn_record = QPushButton(t("ui.session_dialog.record"))
        self.btn_record.clicked.connect(self._on_record)
        form.addRow(self.btn_record)

        layout.addWidget(group)

    def _refresh_view(self) -> None:
        self.table.setRowCount(len(self.sessions))
        for row, session in enumerate(self.sessions):
            values = (
                session.session_date.strftime(DATE_FORMAT),
                str(session.players_count),
                session.results,
                str(session.session_rating),
            )
            for col, text in enumerate(values):
                item = QTableWidgetItem(text)
                if col != 2:
                    item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
                self.table.setItem(row, col, item)

        count = len(self.sessions)
        self.count_label.setText(t("ui.session_dialog.count", count=count))
        self.average_label.setText(
            t("ui.session_dialog.average", rating=f"{average_session_rating(self.sessions):.1f}")
        )
        self.cost_label.setText(t("ui.session_dialog.cost", cost=f"{cost_per_session(count):.2f}"))

    def new_session(self) -> GameSession:
        """Builds a session from the form values."""
        return GameSession(
            game_id=self.game.id,
            session_date=self.date_edit.dateTime().toPyDateTime().replace(microsecond=0),
            players_count=self.players_spin.value(),
            results=self.results_edit.text().strip(),
            session_rating=self.rating_spin.value(),
        )

    def _on_record(self) -> None:
        session = self.new_session()
        errors = validate_session(session)
        if errors:
            self._show_form_error("\n".join(errors.values()))
            return

        if self.catalog.record_session(session) is None:
            self._show_form_error(self.catalog.error_message)
            return

        self._show_form_error("")
        self.results_edit.clear()
        self.sessions = self.catalog.repository.get_sessions(self.game.id)
        self._refresh_view()

    def _show_form_error(self, message: str) -> None:
        self.form_error.setText(message)
        self.form_error.setVisible(bool(message))

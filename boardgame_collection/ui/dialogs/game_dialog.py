"""Add/edit dialog for a single game.

Every edit re-validates the whole form; per-field messages appear under the
offending input and Save stays disabled until the form is valid.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QComboBox,
    QDoubleSpinBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from boardgame_collection.core.game import Difficulty, Game, GameStatus, Genre, Tag
from boardgame_collection.core.validation import MAX_TITLE_LENGTH, validate_game
from boardgame_collection.ui.widgets.base_dialog import BaseDialog
from boardgame_collection.utils.enum_labels import labeled_members
from boardgame_collection.utils.i18n import t

__all__ = ["GameDialog"]

_ERROR_STYLE = "color: #d9534f; font-size: 10px;"


class GameDialog(BaseDialog):
    """Form for creating a game or editing an existing one.

    Attributes:
        original: The game being edited, or None when adding.
        available_tags: Tags offered in the checklist.
    """

    def __init__(self, parent: QWidget | None, available_tags: list[Tag], game: Game | None = None) -> None:
        """Initializes the game dialog.

        Args:
            parent: Parent widget.
            available_tags: All known tags.
            game: Game to edit; None opens an empty form for a new game.
        """
        self.original = game
        self.available_tags = available_tags
        self._error_labels: dict[str, QLabel] = {}
        self.errors: dict[str, str] = {}
        super().__init__(
            parent,
            title_key="ui.game_dialog.edit_title" if game else "ui.game_dialog.add_title",
            min_width=520,
            buttons="custom",
        )
        self._populate(game)
        self._revalidate()

    def _build_content(self, layout: QVBoxLayout) -> None:
        form = QFormLayout()

        self.title_edit = QLineEdit()
        self.title_edit.setMaxLength(MAX_TITLE_LENGTH + 1)
        self._add_row(form, "ui.game_dialog.title", self.title_edit, "title")

        self.genre_combo = self._enum_combo(Genre)
        form.addRow(t("ui.game_dialog.genre"), self.genre_combo)
        self.difficulty_combo = self._enum_combo(Difficulty)
        form.addRow(t("ui.game_dialog.difficulty"), self.difficulty_combo)
        self.status_combo = self._enum_combo(GameStatus)
        form.addRow(t("ui.game_dialog.status"), self.status_combo)

        players = QWidget()
        players_layout = QHBoxLayout(players)
        players_layout.setContentsMargins(0, 0, 0, 0)
        self.min_players_spin = QSpinBox()
        self.min_players_spin.setRange(0, 99)
        self.max_players_spin = QSpinBox()
        self.max_players_spin.setRange(0, 99)
        players_layout.addWidget(self.min_players_spin)
        players_layout.addWidget(QLabel("–"))
        players_layout.addWidget(self.max_players_spin)
        self._add_row(form, "ui.game_dialog.players", players, "players")

        self.play_time_spin = QSpinBox()
        self.play_time_spin.setRange(0, 9999)
        self.play_time_spin.setSuffix(t("ui.common.minutes_suffix"))
        self._add_row(form, "ui.game_dialog.play_time", self.play_time_spin, "play_time")

        self.publisher_edit = QLineEdit()
        form.addRow(t("ui.game_dialog.publisher"), self.publisher_edit)

        self.year_spin = QSpinBox()
        self.year_spin.setRange(0, 9999)
        self._add_row(form, "ui.game_dialog.year", self.year_spin, "year_published")

        # 0.0 stands for "no rating"
        self.bgg_spin = QDoubleSpinBox()
        self.bgg_spin.setRange(0.0, 99.0)
        self.bgg_spin.setDecimals(1)
        self.bgg_spin.setSingleStep(0.1)
        self.bgg_spin.setSpecialValueText(t("ui.common.none"))
        self._add_row(form, "ui.game_dialog.bgg_rating", self.bgg_spin, "bgg_rating")

        self.rating_spin = QSpinBox()
        self.rating_spin.setRange(0, 99)
        self._add_row(form, "ui.game_dialog.personal_rating", self.rating_spin, "personal_rating")

        layout.addLayout(form)

        layout.addWidget(QLabel(t("ui.game_dialog.tags")))
        self.tag_list = QListWidget()
        for tag in self.available_tags:
            item = QListWidgetItem(tag.name)
            item.setData(Qt.ItemDataRole.UserRole, tag.id)
            item.setFlags(item.flags() | Qt.ItemFlag.ItemIsUserCheckable)
            item.setCheckState(Qt.CheckState.Unchecked)
            self.tag_list.addItem(item)
        layout.addWidget(self.tag_list)

        btn_layout = QHBoxLayout()
        btn_layout.addStretch()
        self.btn_cancel = QPushButton(t("common.cancel"))
        self.btn_cancel.clicked.connect(self.reject)
        btn_layout.addWidget(self.btn_cancel)
        self.btn_save = QPushButton(t("common.save"))
        self.btn_save.setDefault(True)
        self.btn_save.clicked.connect(self.accept)
        btn_layout.addWidget(self.btn_save)
        layout.addLayout(btn_layout)

        self.title_edit.textChanged.connect(self._revalidate)
        self.publisher_edit.textChanged.connect(self._revalidate)
        for spin in (
            self.min_players_spin,
            self.max_players_spin,
            self.play_time_spin,
            self.year_spin,
            self.bgg_spin,
            self.rating_spin,
        ):
            spin.valueChanged.connect(self._revalidate)

    def _add_row(self, form: QFormLayout, label_key: str, field: QWidget, error_field: str) -> None:
        """Adds a form row with an error label underneath the input."""
        container = QWidget()
        column = QVBoxLayout(container)
        column.setContentsMargins(0, 0, 0, 0)
        column.setSpacing(2)
        column.addWidget(field)
        error_label = QLabel()
        error_label.setStyleSheet(_ERROR_STYLE)
        error_label.setVisible(False)
        column.addWidget(error_label)
        self._error_labels[error_field] = error_label
        form.addRow(t(label_key), container)

    @staticmethod
    def _enum_combo(enum_cls: type) -> QComboBox:
        combo = QComboBox()
        for label, member in labeled_members(enum_cls):
            combo.addItem(label, member)
        return combo

    @staticmethod
    def _select_data(combo: QComboBox, value: object) -> None:
        # Enum members are stored as Python objects, so compare in Python
        for index in range(combo.count()):
            if combo.itemData(index) == value:
                combo.setCurrentIndex(index)
                return

    def _populate(self, game: Game | None) -> None:
        source = game or Game(title="")
        self.title_edit.setText(source.title)
        self._select_data(self.genre_combo, source.genre)
        self._select_data(self.difficulty_combo, source.difficulty)
        self._select_data(self.status_combo, source.status)
        self.min_players_spin.setValue(source.min_players)
        self.max_players_spin.setValue(source.max_players)
        self.play_time_spin.setValue(source.play_time)
        self.publisher_edit.setText(source.publisher or "")
        self.year_spin.setValue(source.year_published if game else datetime.now().year)
        self.bgg_spin.setValue(source.bgg_rating or 0.0)
        self.rating_spin.setValue(source.personal_rating)

        selected = set(source.tag_ids)
        for row in range(self.tag_list.count()):
            item = self.tag_list.item(row)
            if item.data(Qt.ItemDataRole.UserRole) in selected:
                item.setCheckState(Qt.CheckState.Checked)

    def _revalidate(self) -> None:
        """Re-runs validation and updates the error labels and Save button."""
        self.errors = validate_game(self.game())
        for field_name, label in self._error_labels.items():
            message = self.errors.get(field_name, "")
            label.setText(message)
            label.setVisible(bool(message))
        self.btn_save.setEnabled(not self.errors)

    def is_valid(self) -> bool:
        return not self.errors

    def game(self) -> Game:
        """Builds a Game from the current form values.

        When editing, identity, dates, sessions and tag joins are carried over
        from the original game.
        """
        publisher = self.publisher_edit.text().strip() or None
        bgg = round(self.bgg_spin.value(), 1) or None
        fields = dict(
            title=self.title_edit.text().strip(),
            genre=self.genre_combo.currentData(),
            difficulty=self.difficulty_combo.currentData(),
            status=self.status_combo.currentData(),
            min_players=self.min_players_spin.value(),
            max_players=self.max_players_spin.value(),
            play_time=self.play_time_spin.value(),
            publisher=publisher,
            year_published=self.year_spin.value(),
            bgg_rating=bgg,
            personal_rating=self.rating_spin.value(),
        )
        if self.original is not None:
            return replace(self.original, **fields)
        return Game(**fields)

    def selected_tag_ids(self) -> list[int]:
        """Ids of the checked tags, in list order."""
        ids = []
        for row in range(self.tag_list.count()):
            item = self.tag_list.item(row)
            if item.checkState() == Qt.CheckState.Checked:
                ids.append(item.data(Qt.ItemDataRole.UserRole))
        return ids

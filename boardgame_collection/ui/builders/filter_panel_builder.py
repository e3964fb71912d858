"""
Builder for the filter panel on the left of the main window.

Each control writes straight into the CatalogService, which re-runs the
filter immediately. Combo boxes offer an "any" entry and spin boxes treat 0
as "any".
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, Iterable

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QGroupBox,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from boardgame_collection.core.game import Difficulty, GameStatus, Genre
from boardgame_collection.utils.enum_labels import labeled_members
from boardgame_collection.utils.i18n import t

if TYPE_CHECKING:
    from boardgame_collection.core.game import Tag
    from boardgame_collection.services.catalog_service import CatalogService

__all__ = ["FilterPanelBuilder", "spin_value"]


def spin_value(spin: QSpinBox) -> int | None:
    """Spin box value, with 0 meaning no constraint."""
    value = spin.value()
    return value if value > 0 else None


class FilterPanelBuilder:
    """Constructs the filter controls and binds them to a CatalogService.

    Attributes:
        catalog: Service receiving every criteria change.
    """

    def __init__(self, catalog: CatalogService) -> None:
        self.catalog = catalog

    def build(self) -> QWidget:
        """Creates the panel widget.

        Returns:
            A group box holding all filter controls.
        """
        panel = QGroupBox(t("ui.filters.title"))
        layout = QVBoxLayout(panel)
        form = QFormLayout()

        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText(t("ui.filters.search_placeholder"))
        self.search_edit.setClearButtonEnabled(True)
        self.search_edit.textChanged.connect(self.catalog.set_search_term)
        form.addRow(t("ui.filters.search"), self.search_edit)

        self.genre_combo = self._enum_combo(Genre, self.catalog.set_genre)
        form.addRow(t("ui.filters.genre"), self.genre_combo)
        self.difficulty_combo = self._enum_combo(Difficulty, self.catalog.set_difficulty)
        form.addRow(t("ui.filters.difficulty"), self.difficulty_combo)
        self.status_combo = self._enum_combo(GameStatus, self.catalog.set_status)
        form.addRow(t("ui.filters.status"), self.status_combo)

        self.min_players_spin = self._any_spin(20, self.catalog.set_min_players)
        form.addRow(t("ui.filters.min_players"), self.min_players_spin)
        self.max_players_spin = self._any_spin(20, self.catalog.set_max_players)
        form.addRow(t("ui.filters.max_players"), self.max_players_spin)
        self.min_time_spin = self._any_spin(600, self.catalog.set_min_play_time, step=5)
        form.addRow(t("ui.filters.min_play_time"), self.min_time_spin)
        self.max_time_spin = self._any_spin(600, self.catalog.set_max_play_time, step=5)
        form.addRow(t("ui.filters.max_play_time"), self.max_time_spin)

        layout.addLayout(form)

        layout.addWidget(QLabel(t("ui.filters.tags")))
        self.tag_list = QListWidget()
        self.tag_list.itemChanged.connect(self._on_tags_changed)
        layout.addWidget(self.tag_list, 1)

        self.reset_btn = QPushButton(t("ui.filters.reset"))
        self.reset_btn.clicked.connect(self.reset)
        layout.addWidget(self.reset_btn)

        return panel

    def _enum_combo(self, enum_cls: type[Enum], setter: Callable[[Enum | None], None]) -> QComboBox:
        combo = QComboBox()
        combo.addItem(t("ui.filters.any"), None)
        for label, member in labeled_members(enum_cls):
            combo.addItem(label, member)
        combo.currentIndexChanged.connect(lambda _index: setter(combo.currentData()))
        return combo

    @staticmethod
    def _any_spin(maximum: int, setter: Callable[[int | None], None], step: int = 1) -> QSpinBox:
        spin = QSpinBox()
        spin.setRange(0, maximum)
        spin.setSingleStep(step)
        spin.setSpecialValueText(t("ui.filters.any"))
        spin.valueChanged.connect(lambda _value: setter(spin_value(spin)))
        return spin

    def set_tags(self, tags: Iterable[Tag]) -> None:
        """Refills the tag checklist, keeping the names that were checked.

        Checked names missing from the new list are dropped from the
        catalog criteria too, so the filter never selects an invisible tag.
        """
        checked = set(self.checked_tag_names())
        self.tag_list.blockSignals(True)
        self.tag_list.clear()
        for tag in tags:
            item = QListWidgetItem(tag.name)
            item.setFlags(item.flags() | Qt.ItemFlag.ItemIsUserCheckable)
            item.setCheckState(Qt.CheckState.Checked if tag.name in checked else Qt.CheckState.Unchecked)
            self.tag_list.addItem(item)
        self.tag_list.blockSignals(False)

        kept = self.checked_tag_names()
        if set(kept) != checked:
            self.catalog.set_tags(kept)

    def checked_tag_names(self) -> list[str]:
        names = []
        for row in range(self.tag_list.count()):
            item = self.tag_list.item(row)
            if item.checkState() == Qt.CheckState.Checked:
                names.append(item.text())
        return names

    def _on_tags_changed(self, _item: QListWidgetItem) -> None:
        self.catalog.set_tags(self.checked_tag_names())

    def _controls(self) -> list[QWidget]:
        return [
            self.search_edit,
            self.genre_combo,
            self.difficulty_combo,
            self.status_combo,
            self.min_players_spin,
            self.max_players_spin,
            self.min_time_spin,
            self.max_time_spin,
            self.tag_list,
        ]

    def reset(self) -> None:
        """Clears every control, then resets the criteria with a single filter run."""
        controls = self._controls()
        for widget in controls:
            widget.blockSignals(True)
        try:
            self.search_edit.clear()
            for combo in (self.genre_combo, self.difficulty_combo, self.status_combo):
                combo.setCurrentIndex(0)
            for spin in (self.min_players_spin, self.max_players_spin, self.min_time_spin, self.max_time_spin):
                spin.setValue(0)
            for row in range(self.tag_list.count()):
                self.tag_list.item(row).setCheckState(Qt.CheckState.Unchecked)
        finally:
            for widget in controls:
                widget.blockSignals(False)
        self.catalog.reset_filters()

"""Statistics dialog with overview, status and genre tabs."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QScrollArea, QTabWidget, QVBoxLayout, QWidget

from boardgame_collection.services.statistics_service import collection_statistics, total_sessions_count
from boardgame_collection.ui.widgets.base_dialog import BaseDialog
from boardgame_collection.utils.enum_labels import label_for
from boardgame_collection.utils.i18n import t

if TYPE_CHECKING:
    from boardgame_collection.core.game import Game

__all__ = ["StatisticsDialog"]


class StatisticsDialog(BaseDialog):
    """Collection figures in three tab views.

    Attributes:
        games: The games the figures are computed from.
    """

    def __init__(self, parent: QWidget | None, games: list[Game]) -> None:
        """Initializes the StatisticsDialog.

        Args:
            parent: Parent widget.
            games: Games to summarize (usually the full collection).
        """
        self.games = list(games)
        self.stats = collection_statistics(self.games)
        super().__init__(parent, title_key="ui.stats.title", min_width=560, show_title_label=False, buttons="close")

    def _build_content(self, layout: QVBoxLayout) -> None:
        self.tabs = QTabWidget()
        self.tabs.addTab(self._build_overview_tab(), t("ui.stats.tab_overview"))
        self.tabs.addTab(self._build_bar_list(self.stats.by_status), t("ui.stats.tab_status"))
        self.tabs.addTab(self._build_bar_list(self.stats.by_genre), t("ui.stats.tab_genre"))
        layout.addWidget(self.tabs)

    def _build_overview_tab(self) -> QWidget:
        widget = QWidget()
        layout = QVBoxLayout(widget)

        total_sessions = sum(total_sessions_count(g) for g in self.games)
        rated = [g.personal_rating for g in self.games]
        avg_rating = sum(rated) / len(rated) if rated else 0.0

        rows = [
            (t("ui.stats.total_games"), str(self.stats.total_games)),
            (t("ui.stats.unplayed_games"), str(self.stats.unplayed_games)),
            (t("ui.stats.total_sessions"), str(total_sessions)),
            (t("ui.stats.avg_personal_rating"), f"{avg_rating:.1f}"),
        ]

        for label_text, value_text in rows:
            row = QHBoxLayout()
            row.addWidget(QLabel(f"<b>{label_text}:</b>"))
            row.addStretch()
            value = QLabel(value_text)
            value.setAlignment(Qt.AlignmentFlag.AlignRight)
            row.addWidget(value)
            layout.addLayout(row)

        layout.addStretch()
        return widget

    @staticmethod
    def _build_bar_list(counts: dict[Enum, int]) -> QWidget:
        """Builds a scrollable list of labeled bars, largest count first.

        Args:
            counts: Enum member -> count.

        Returns:
            A scroll area widget with the bar list.
        """
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        inner = QWidget()
        layout = QVBoxLayout(inner)

        if not counts:
            no_data = QLabel(t("ui.stats.no_data"))
            no_data.setAlignment(Qt.AlignmentFlag.AlignCenter)
            layout.addWidget(no_data)
            layout.addStretch()
            scroll.setWidget(inner)
            return scroll

        max_count = max(counts.values())
        for member, count in sorted(counts.items(), key=lambda item: -item[1]):
            row = QHBoxLayout()
            label = QLabel(label_for(member))
            label.setFixedWidth(150)

            bar = QLabel()
            bar.setFixedSize(int(count / max_count * 200), 16)
            bar.setStyleSheet("background-color: #4a90d9; border-radius: 3px;")

            count_label = QLabel(str(count))
            count_label.setFixedWidth(40)
            count_label.setAlignment(Qt.AlignmentFlag.AlignRight)

            row.addWidget(label)
            row.addWidget(bar)
            row.addStretch()
            row.addWidget(count_label)
            layout.addLayout(row)

        layout.addStretch()
        scroll.setWidget(inner)
        return scroll

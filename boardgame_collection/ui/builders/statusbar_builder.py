"""
Builder for the main application status bar.

The status bar holds one permanent label with the figures of the list on
display: total, unplayed and the count for each status that occurs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtWidgets import QLabel, QStatusBar

from boardgame_collection.utils.enum_labels import label_for
from boardgame_collection.utils.i18n import t

if TYPE_CHECKING:
    from boardgame_collection.services.statistics_service import CollectionStatistics

__all__ = ["StatusbarBuilder", "format_statistics"]


def format_statistics(stats: CollectionStatistics) -> str:
    """Status-bar text for a statistics snapshot."""
    parts = [
        t("ui.status.total", count=stats.total_games),
        t("ui.status.unplayed", count=stats.unplayed_games),
    ]
    parts.extend(f"{label_for(status)}: {count}" for status, count in stats.by_status.items())
    return " | ".join(parts)


class StatusbarBuilder:
    """Constructs the status bar and updates its statistics label.

    Attributes:
        stats_label: Permanent label for collection statistics.
    """

    def __init__(self) -> None:
        self.stats_label: QLabel = QLabel("")

    def build(self, statusbar: QStatusBar) -> None:
        self.stats_label = QLabel("")
        self.stats_label.setStyleSheet("padding: 0 10px;")
        # stretch=1 so showMessage() text goes to the right
        statusbar.addPermanentWidget(self.stats_label, 1)
        statusbar.showMessage(t("ui.main_window.status_ready"))

    def update(self, stats: CollectionStatistics) -> None:
        self.stats_label.setText(format_statistics(stats))

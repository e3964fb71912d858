"""
Static helpers for standardized message boxes.

Centralizes QMessageBox logic so titles, icons and button labels are
consistent and localized across the application.
"""

from __future__ import annotations

from PyQt6.QtWidgets import QMessageBox, QWidget

from boardgame_collection.utils.i18n import t
from boardgame_collection.version import __app_name__

__all__ = ["UIHelper"]


class UIHelper:
    """A static helper class for common UI dialog interactions."""

    @staticmethod
    def _show_message(parent: QWidget | None, message: str, title: str, icon: QMessageBox.Icon) -> None:
        msg = QMessageBox(parent)
        msg.setWindowTitle(title)
        msg.setText(message)
        msg.setIcon(icon)
        msg.addButton(t("common.ok"), QMessageBox.ButtonRole.AcceptRole)
        msg.exec()

    @staticmethod
    def show_error(parent: QWidget | None, message: str, title: str | None = None) -> None:
        """Displays a critical error message box.

        Args:
            parent: The parent widget for the dialog.
            message: The error message to display.
            title: Window title. Defaults to common 'Error'.
        """
        UIHelper._show_message(parent, message, title or t("common.error"), QMessageBox.Icon.Critical)

    @staticmethod
    def show_info(parent: QWidget | None, message: str, title: str | None = None) -> None:
        UIHelper._show_message(parent, message, title or t("common.info"), QMessageBox.Icon.Information)

    @staticmethod
    def confirm(parent: QWidget | None, question: str, title: str | None = None) -> bool:
        """Displays a Yes/No confirmation dialog with localized button texts.

        Uses addButton() instead of StandardButtons because Qt6 does not
        translate StandardButton labels without .qm translation files.

        Args:
            parent: The parent widget for the dialog.
            question: The question to ask the user.
            title: Window title. Defaults to the app name.

        Returns:
            True if the user clicked Yes.
        """
        msg = QMessageBox(parent)
        msg.setWindowTitle(title or __app_name__)
        msg.setText(question)
        msg.setIcon(QMessageBox.Icon.Question)

        yes_btn = msg.addButton(t("common.yes"), QMessageBox.ButtonRole.YesRole)
        no_btn = msg.addButton(t("common.no"), QMessageBox.ButtonRole.NoRole)
        msg.setDefaultButton(no_btn)

        msg.exec()
        return msg.clickedButton() == yes_btn

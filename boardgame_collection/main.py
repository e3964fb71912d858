#!/usr/bin/env python3
"""Board Game Collection - Main Entry Point (PyQt6 Version)."""

from __future__ import annotations

import sys
import traceback

from PyQt6.QtWidgets import QApplication, QMessageBox

from boardgame_collection.config import config
from boardgame_collection.core.db import Database, seed_sample_data
from boardgame_collection.core.logging import logger, setup_logging
from boardgame_collection.services.catalog_service import CatalogService
from boardgame_collection.ui.main_window import MainWindow
from boardgame_collection.utils.i18n import init_i18n, t
from boardgame_collection.version import __app_name__, __version__

__all__ = ["main", "open_database"]


def open_database() -> Database:
    """Open the catalog database and seed it on first start if enabled."""
    db = Database(config.DB_PATH)
    if config.SEED_SAMPLE_DATA:
        seeded = seed_sample_data(db)
        if seeded:
            logger.info(t("logs.main.seeded", count=seeded))
    return db


def _show_startup_error(error: Exception) -> None:
    msg = QMessageBox()
    msg.setIcon(QMessageBox.Icon.Critical)
    msg.setWindowTitle(t("common.error"))
    msg.setText(t("ui.errors.startup_failed", error=str(error)))
    msg.addButton(t("common.exit"), QMessageBox.ButtonRole.AcceptRole)
    msg.exec()


def main() -> None:
    """Main application execution flow."""
    # 1. Initialize language (BEFORE creating UI elements)
    init_i18n(config.UI_LANGUAGE)

    # 2. Setup logging
    setup_logging(config.LOG_LEVEL, config.LOG_FILE)

    # 3. Create QApplication
    app = QApplication(sys.argv)
    app.setApplicationName(__app_name__)
    app.setApplicationVersion(__version__)

    logger.info("=" * 60)
    logger.info("%s %s", __app_name__, __version__)
    logger.info("=" * 60)
    logger.info(t("logs.main.data_dir", path=str(config.DATA_DIR)))

    # 4. Open storage, build the window and load the catalog
    try:
        db = open_database()
        catalog = CatalogService(db)
        window = MainWindow(catalog)
        window.refresh_data()
        window.show()
    except Exception as e:
        logger.critical(t("logs.main.startup_failed", error=str(e)))
        traceback.print_exc()
        _show_startup_error(e)
        sys.exit(1)

    exit_code = app.exec()
    db.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()

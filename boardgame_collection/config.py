"""
Configuration - data directory, database location and UI settings.

Values come from three layers, later ones winning:
defaults below, the user's settings.json inside the data directory,
then the environment (``.env`` supported via python-dotenv).
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger("boardgamecoll.config")


__all__ = ["Config", "config"]

ENV_DATA_DIR = "BOARDGAMES_DATA_DIR"
ENV_LANGUAGE = "BOARDGAMES_LANGUAGE"
ENV_LOG_LEVEL = "BOARDGAMES_LOG_LEVEL"


@dataclass
class Config:
    """
    Central configuration handling for the application.
    Manages paths, UI language, logging and first-run seeding.
    """

    DATA_DIR: Path | None = None
    DB_FILE: str = "boardgames.db"
    LOG_FILE_NAME: str = "boardgames.log"

    # Default values
    UI_LANGUAGE: str = "en"
    LOG_LEVEL: str = "INFO"
    SEED_SAMPLE_DATA: bool = True

    def __post_init__(self):
        """Resolve the data directory, apply env overrides and load settings."""
        load_dotenv()

        if self.DATA_DIR is None:
            env_dir = os.getenv(ENV_DATA_DIR)
            self.DATA_DIR = Path(env_dir) if env_dir else Path.home() / ".boardgame_collection"
        self.DATA_DIR.mkdir(parents=True, exist_ok=True)

        self._load_settings()

        env_language = os.getenv(ENV_LANGUAGE)
        if env_language:
            self.UI_LANGUAGE = env_language
        env_level = os.getenv(ENV_LOG_LEVEL)
        if env_level:
            self.LOG_LEVEL = env_level

    @property
    def SETTINGS_FILE(self) -> Path:
        return self.DATA_DIR / "settings.json"

    @property
    def DB_PATH(self) -> Path:
        """Full path of the SQLite catalog file."""
        return self.DATA_DIR / self.DB_FILE

    @property
    def LOG_FILE(self) -> Path:
        return self.DATA_DIR / self.LOG_FILE_NAME

    def _load_settings(self) -> None:
        """Load settings from JSON file."""
        if not self.SETTINGS_FILE.exists():
            return

        try:
            with open(self.SETTINGS_FILE, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Could not read settings file %s: %s", self.SETTINGS_FILE, e)
            return

        self.UI_LANGUAGE = data.get("ui_language", self.UI_LANGUAGE)
        self.LOG_LEVEL = data.get("log_level", self.LOG_LEVEL)
        self.SEED_SAMPLE_DATA = bool(data.get("seed_sample_data", self.SEED_SAMPLE_DATA))
        self.DB_FILE = data.get("db_file", self.DB_FILE)

    def save(self) -> None:
        """Save current configuration to JSON file."""
        data = {
            "ui_language": self.UI_LANGUAGE,
            "log_level": self.LOG_LEVEL,
            "seed_sample_data": self.SEED_SAMPLE_DATA,
            "db_file": self.DB_FILE,
        }

        try:
            with open(self.SETTINGS_FILE, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.error("Could not write settings file %s: %s", self.SETTINGS_FILE, e)


# Global instance
config = Config()

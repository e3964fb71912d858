"""
Internationalization (i18n) for UI text, enum labels and log messages.

Translation files are plain JSON:
1. Language-agnostic files in resources/i18n/*.json (log messages)
2. Locale files in resources/i18n/{locale}/*.json (UI text, enum labels)

English is always loaded as the fallback, so a key missing from the active
locale still resolves.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

__all__ = ["I18n", "available_locales", "get_language", "init_i18n", "t"]

logger = logging.getLogger("boardgamecoll.i18n")

FALLBACK_LOCALE = "en"


class I18n:
    """Translation catalog for one locale.

    Attributes:
        locale: Active locale code (``"en"``, ``"ru"``).
        translations: Merged key tree (shared + English + locale).
    """

    def __init__(self, locale: str = FALLBACK_LOCALE, i18n_root: Path | None = None) -> None:
        """Load the catalog for *locale*.

        Args:
            locale: Locale directory name under resources/i18n/.
            i18n_root: Override for the translation root (tests).
        """
        if i18n_root is None:
            from boardgame_collection.utils.paths import get_resources_dir

            i18n_root = get_resources_dir() / "i18n"

        self.i18n_root = i18n_root
        self.locale = locale
        self.translations: dict[str, Any] = {}
        self._load_translations()

    def _load_translations(self) -> None:
        """Merge shared, English and target-locale files, in that order."""
        fallback = self._deep_merge(
            self._load_json_directory(self.i18n_root),
            self._load_json_directory(self.i18n_root / FALLBACK_LOCALE),
        )

        if self.locale == FALLBACK_LOCALE:
            self.translations = fallback
            return

        locale_dir = self.i18n_root / self.locale
        if not locale_dir.is_dir():
            logger.warning("Unknown locale '%s', using '%s'", self.locale, FALLBACK_LOCALE)
            self.locale = FALLBACK_LOCALE
            self.translations = fallback
            return

        self.translations = self._deep_merge(fallback, self._load_json_directory(locale_dir))

    @staticmethod
    def _load_json_directory(directory: Path) -> dict[str, Any]:
        """Loads and merges every ``*.json`` file directly inside *directory*."""
        merged: dict[str, Any] = {}
        if not directory.exists():
            return merged
        for file_path in sorted(directory.glob("*.json")):
            try:
                with open(file_path, "r", encoding="utf-8") as f:
                    merged = I18n._deep_merge(merged, json.load(f))
            except (OSError, json.JSONDecodeError) as e:
                logger.error("Error loading i18n file %s: %s", file_path.name, e)
        return merged

    @staticmethod
    def _deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
        """Returns a new dict with *update* merged recursively over *base*."""
        result = base.copy()
        for key, value in update.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = I18n._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def has_key(self, key: str) -> bool:
        """Whether *key* resolves to a string in this catalog."""
        return isinstance(self._lookup(key), str)

    def _lookup(self, key: str) -> Any:
        value: Any = self.translations
        for part in key.split("."):
            if not isinstance(value, dict):
                return None
            value = value.get(part)
        return value

    def t(self, key: str, **kwargs: Any) -> str:
        """Retrieve a translated string by dot-notation key.

        Args:
            key: Dot-separated key path (e.g. 'ui.filters.title').
            **kwargs: Format arguments for string interpolation.

        Returns:
            Translated string, or '[key]' if not found.
        """
        value = self._lookup(key)
        if not isinstance(value, str):
            return f"[{key}]"

        if kwargs:
            try:
                return value.format(**kwargs)
            except (ValueError, KeyError, IndexError):
                return value

        return value


_i18n_instance: I18n | None = None


def available_locales() -> list[str]:
    """Locale codes that have a translation directory, sorted."""
    from boardgame_collection.utils.paths import get_resources_dir

    root = get_resources_dir() / "i18n"
    return sorted(p.name for p in root.iterdir() if p.is_dir())


def init_i18n(locale: str = FALLBACK_LOCALE) -> I18n:
    """Initialize the global i18n instance.

    Args:
        locale: The locale code to use.

    Returns:
        The initialized I18n instance.
    """
    global _i18n_instance
    _i18n_instance = I18n(locale)
    return _i18n_instance


def get_language() -> str:
    """Return the locale code of the global i18n instance."""
    if _i18n_instance is None:
        init_i18n()
    return _i18n_instance.locale


def t(key: str, **kwargs: Any) -> str:
    """Retrieve a translated string using the global i18n instance.

    Args:
        key: Dot-separated key path.
        **kwargs: Format arguments for string interpolation.

    Returns:
        Translated string, or '[key]' if not found.
    """
    if _i18n_instance is None:
        init_i18n()
    return _i18n_instance.t(key, **kwargs)

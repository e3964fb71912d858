"""Application-wide logging setup.

Every module logs through a child of the ``boardgamecoll`` logger
(``boardgamecoll.database``, ``boardgamecoll.filter_service`` ...), so a
single call to :func:`setup_logging` at startup controls all output.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

__all__ = ["LOGGER_NAME", "logger", "resolve_level", "setup_logging"]

LOGGER_NAME = "boardgamecoll"

logger = logging.getLogger(LOGGER_NAME)


def resolve_level(level: int | str) -> int:
    """Turn a settings value such as ``"debug"`` or ``20`` into a logging level.

    Unknown names fall back to INFO.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: int | str = logging.INFO,
    log_file: Path | None = None,
) -> None:
    """Attach console (and optionally file) handlers to the application logger.

    Calling it again only adjusts the level; handlers are added once.

    Args:
        level: Level as int or name (``"INFO"``, ``"debug"``).
        log_file: Optional log file; always receives DEBUG and above.
    """
    numeric_level = resolve_level(level)
    logger.setLevel(logging.DEBUG if log_file is not None else numeric_level)

    if logger.handlers:
        for handler in logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(numeric_level)
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

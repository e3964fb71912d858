"""Text normalization shared by the in-memory filter and the SQLite store."""

from __future__ import annotations

__all__ = ["fold_text"]


def fold_text(value: str | None) -> str | None:
    """Case-folds text for comparison. None stays None.

    Registered on the SQLite connection as well, so in-store and in-memory
    filtering fold non-ASCII text (Cyrillic titles) identically; SQLite's
    built-in LOWER() only handles ASCII.
    """
    return value.lower() if value is not None else None

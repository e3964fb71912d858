"""Resource directory lookup.

Resources (translations) ship inside the package so the same lookup works
from a source checkout and from an installed wheel.
"""

from __future__ import annotations

import sys
from pathlib import Path

__all__ = ["get_resources_dir"]

_resources_dir: Path | None = None


def get_resources_dir() -> Path:
    """Get the path to the resources directory.

    Checks, in order:
    1. ``boardgame_collection/resources/`` next to this package.
    2. ``resources/`` under ``sys.prefix`` (frozen/bundled builds).

    Returns:
        Path to the resources directory.

    Raises:
        FileNotFoundError: If no candidate exists.
    """
    global _resources_dir
    if _resources_dir is not None:
        return _resources_dir

    candidates = (
        Path(__file__).resolve().parent.parent / "resources",
        Path(sys.prefix) / "resources",
    )
    for candidate in candidates:
        if candidate.is_dir():
            _resources_dir = candidate
            return _resources_dir

    raise FileNotFoundError(
        "Could not locate resources directory. Searched: " + ", ".join(str(c) for c in candidates)
    )

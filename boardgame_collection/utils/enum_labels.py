"""Localized display labels for the catalog enums.

Labels live in the ``enums`` i18n namespace, keyed by enum class and member
value, e.g. ``enums.genre.Strategy``.
"""

from __future__ import annotations

from enum import Enum

from boardgame_collection.core.game import Difficulty, GameStatus, Genre
from boardgame_collection.utils.i18n import t

__all__ = ["ENUM_NAMESPACES", "label_for", "labeled_members"]

ENUM_NAMESPACES: dict[type[Enum], str] = {
    Genre: "genre",
    Difficulty: "difficulty",
    GameStatus: "status",
}


def label_for(member: Enum | None) -> str:
    """Localized label of an enum member.

    Args:
        member: A Genre, Difficulty or GameStatus member, or None.

    Returns:
        The label, the raw value for enums without a namespace, or an empty
        string for None.
    """
    if member is None:
        return ""
    namespace = ENUM_NAMESPACES.get(type(member))
    if namespace is None:
        return str(member.value)
    return t(f"enums.{namespace}.{member.value}")


def labeled_members(enum_cls: type[Enum]) -> list[tuple[str, Enum]]:
    """(label, member) pairs in declaration order, for combo boxes."""
    return [(label_for(member), member) for member in enum_cls]

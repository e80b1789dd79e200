"""Item id matching and naming helpers.

Item ids coming from players, config files and containers do not agree on
case or namespace prefix, so every comparison goes through `ids_match`:

    ids_match("Hytale:Gold_Bar", "gold_bar")  # True
    ids_match("GOLD_BAR", "gold_bar")         # True
"""

from __future__ import annotations


def strip_namespace(item_id: str) -> str:
    """Drop everything up to and including the last ':'."""
    _, sep, tail = item_id.rpartition(":")
    return tail if sep else item_id


def normalize_item_id(item_id: str) -> str:
    """Canonical lookup key: namespace stripped, lower-cased."""
    return strip_namespace(item_id).lower()


def ids_match(left: str | None, right: str | None) -> bool:
    """Compare two item ids with the three-tier tolerant match.

    Tiers, first hit wins: exact equality, case-insensitive equality, then
    case-insensitive equality after stripping any namespace prefix.

    Args:
        left: First item id.
        right: Second item id.

    Returns:
        True if the ids refer to the same item. None never matches.
    """
    if left is None or right is None:
        return False
    if left == right:
        return True
    if left.lower() == right.lower():
        return True
    return normalize_item_id(left) == normalize_item_id(right)


def display_name(item_id: str | None) -> str:
    """Human-readable name: "hytale:oak_log" -> "Oak Log".

    Only the first letter of each word is changed; the rest keep their case.
    """
    if not item_id:
        return "Unknown"
    words = strip_namespace(item_id).split("_")
    return " ".join(word[:1].upper() + word[1:] for word in words)

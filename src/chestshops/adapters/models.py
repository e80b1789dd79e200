"""Data models for adapters.

Types exchanged with the UI gateway and claim integrations.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SurfaceKind(Enum):
    """Which interface a shop interaction opened."""

    NATIVE = "native"  # host's own container UI
    CONFIG = "config"  # owner/admin management page
    TRADE = "trade"  # customer buy/sell page


class MessageColor(Enum):
    """Chat colours used for player feedback."""

    WHITE = "#FFFFFF"
    GREEN = "#55FF55"
    RED = "#FF5555"
    GOLD = "#FFAA00"
    YELLOW = "#FFFF55"
    GRAY = "#AAAAAA"


@dataclass(frozen=True, slots=True)
class Message:
    """A chat line sent to one player.

    Attributes:
        text: Plain text content.
        color: Display colour.
        bold: Render in bold.
    """

    text: str
    color: MessageColor = MessageColor.WHITE
    bold: bool = False

    @classmethod
    def error(cls, text: str) -> Message:
        return cls(text, MessageColor.RED)

    @classmethod
    def success(cls, text: str) -> Message:
        return cls(text, MessageColor.GREEN)

    @classmethod
    def info(cls, text: str) -> Message:
        return cls(text, MessageColor.GOLD)

"""Surface payloads and view models.

Client events arrive as small JSON objects keyed by PascalCase names:

    {"Action": "buy:5", "ShiftHeld": true}
    {"Action": "currency:2"}

Views are immutable snapshots of what a page shows; the UI gateway renders
them however the host requires.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from chestshops.adapters.models import SurfaceKind


class _EventData(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    action: str = Field(default="", alias="Action")


class TradeEventData(_EventData):
    """Trade surface event: "buy:<qty>" or "sell:<qty>" plus shift state."""

    shift_held: bool = Field(default=False, alias="ShiftHeld")

    def parse(self, shift_multiplier: int = 10) -> tuple[str, int]:
        """Split the action into verb and effective quantity.

        A missing or non-numeric quantity counts as 1. Holding shift
        multiplies the quantity.

        Args:
            shift_multiplier: Factor applied when shift is held.

        Returns:
            (verb, quantity), e.g. ("buy", 50) for "buy:5" with shift.
        """
        verb, sep, raw = self.action.partition(":")
        quantity = 1
        if sep:
            try:
                quantity = int(raw)
            except ValueError:
                quantity = 1
        if self.shift_held:
            quantity *= shift_multiplier
        return verb, quantity


class ConfigEventData(_EventData):
    """Config surface event, e.g. "save" or "currency:1"."""


@dataclass(frozen=True, slots=True)
class TradeView:
    title: str
    item_name: str
    stock_text: str
    buy_text: str
    sell_text: str
    can_buy: bool
    can_sell: bool
    message: str = ""


@dataclass(frozen=True, slots=True)
class CurrencyButton:
    index: int
    label: str
    selected: bool


@dataclass(frozen=True, slots=True)
class ConfigView:
    title: str
    item_text: str
    currencies: tuple[CurrencyButton, ...]
    hand_text: str
    buy_price: int
    sell_price: int
    remove_text: str
    message: str = ""


__all__ = [
    "ConfigEventData",
    "ConfigView",
    "CurrencyButton",
    "SurfaceKind",
    "TradeEventData",
    "TradeView",
]

"""Interactive shop pages: owner configuration and customer trading."""

from chestshops.surfaces.config import ConfigPage
from chestshops.surfaces.models import (
    ConfigEventData,
    ConfigView,
    CurrencyButton,
    SurfaceKind,
    TradeEventData,
    TradeView,
)
from chestshops.surfaces.trade import TradePage

__all__ = [
    # Pages
    "ConfigPage",
    "TradePage",
    # Models
    "ConfigEventData",
    "ConfigView",
    "CurrencyButton",
    "SurfaceKind",
    "TradeEventData",
    "TradeView",
]

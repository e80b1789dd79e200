"""Event systems registered by the shop plugin."""

from chestshops.systems.interact import can_manage, resolve_shop_use
from chestshops.systems.protection import protect_shop_blocks, protect_shop_surroundings

SHOP_SYSTEMS = (resolve_shop_use, protect_shop_blocks, protect_shop_surroundings)

__all__ = [
    "SHOP_SYSTEMS",
    "can_manage",
    "protect_shop_blocks",
    "protect_shop_surroundings",
    "resolve_shop_use",
]

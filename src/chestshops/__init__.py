"""chestshops: player-run chest shops for block worlds.

Usage:
    from chestshops import BlockPos, ChestShopsPlugin, World

    world = World("overworld")
    plugin = ChestShopsPlugin(world)
    plugin.setup()

    owner = world.spawn_player(owner_id, "Ava")
    world.place_block(owner, BlockPos(0, 64, 0), "Furniture_Chest")
    plugin.use_license(owner, BlockPos(0, 64, 0))   # chest becomes a shop
    world.use_block(customer, BlockPos(0, 64, 0))   # opens the trade surface
"""

__version__ = "0.1.0"

# Core primitives
from chestshops.core import (
    BlockPos,
    Container,
    EntityId,
    Failure,
    FailureReason,
    ItemStack,
    Listing,
    Shop,
    Success,
    buy,
    component,
    sell,
    system,
)

# Configuration
from chestshops.config import ShopSettings, load_settings

# Plugin
from chestshops.plugin import ChestShopsPlugin

# Storage
from chestshops.storage import LocalStorage, ShopRecord, Storage

# World
from chestshops.world import World

__all__ = [
    # Version
    "__version__",
    # Core
    "BlockPos",
    "Container",
    "EntityId",
    "ItemStack",
    "Listing",
    "Shop",
    "component",
    "system",
    # Transactions
    "Failure",
    "FailureReason",
    "Success",
    "buy",
    "sell",
    # Config
    "ShopSettings",
    "load_settings",
    # Storage
    "LocalStorage",
    "ShopRecord",
    "Storage",
    # World
    "ChestShopsPlugin",
    "World",
]

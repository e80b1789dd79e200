"""World coordinator and its stateful services."""

from chestshops.world.admin import AdminModeRegistry
from chestshops.world.display import DisplayManager, display_item_for
from chestshops.world.executor import WorldExecutor
from chestshops.world.lifecycle import NotAContainerError, create_shop, remove_shop
from chestshops.world.world import World

__all__ = [
    "AdminModeRegistry",
    "NotAContainerError",
    "DisplayManager",
    "World",
    "WorldExecutor",
    "create_shop",
    "display_item_for",
    "remove_shop",
]

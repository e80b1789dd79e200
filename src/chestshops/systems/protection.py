"""Physical protection of shop blocks.

A shop cannot be broken or damaged directly, and no block may be broken,
damaged or placed in the 26 cells around it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chestshops.adapters.models import Message
from chestshops.core.events import (
    BlockEvent,
    BreakBlockEvent,
    DamageBlockEvent,
    PlaceBlockEvent,
)
from chestshops.core.system import system

if TYPE_CHECKING:
    from chestshops.world.world import World

SHOP_BREAK_MESSAGE = "Shop chests cannot be broken! Use the shop menu to remove."
NEAR_BREAK_MESSAGE = "Cannot break blocks near a shop chest!"
NEAR_PLACE_MESSAGE = "Cannot place blocks near a shop chest!"


@system(BreakBlockEvent, DamageBlockEvent)
def protect_shop_blocks(world: World, event: BlockEvent) -> None:
    if world.shop_at(event.target) is not None:
        event.cancel()
        world.send_message(event.player, Message.error(SHOP_BREAK_MESSAGE))
    elif world.shop_nearby(event.target):
        event.cancel()
        world.send_message(event.player, Message.error(NEAR_BREAK_MESSAGE))


@system(PlaceBlockEvent)
def protect_shop_surroundings(world: World, event: PlaceBlockEvent) -> None:
    if world.shop_nearby(event.target):
        event.cancel()
        world.send_message(event.player, Message.error(NEAR_PLACE_MESSAGE))

"""Shop license item: turns a single chest into a shop.

Usage:
    outcome = use_license(world, player, target=BlockPos(4, 64, 9))
    if outcome is LicenseOutcome.CREATED:
        ...
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from chestshops.adapters.models import Message
from chestshops.core.block import ContainerBlock, ShopBlock, is_chest_type
from chestshops.core.identity import BlockPos, EntityId
from chestshops.core.items import ids_match
from chestshops.world.lifecycle import create_shop

if TYPE_CHECKING:
    from chestshops.world.world import World

logger = logging.getLogger(__name__)


class LicenseOutcome(Enum):
    """Result of using a license, with the chat line the player receives."""

    NO_TARGET = "You must be looking at a chest!"
    NOT_HOLDING_LICENSE = "You must hold a shop license!"
    ALREADY_SHOP = "This is already a shop!"
    NOT_A_CONTAINER = "This block is not a container!"
    DOUBLE_CHEST = "Cannot create a shop from a double chest! Use a single chest."
    CLAIMED = "You cannot create a shop here - this land is claimed by another party!"
    CREATED = "Shop created successfully! Right-click to manage."

    @property
    def message(self) -> str:
        return self.value


def is_double_chest(world: World, pos: BlockPos) -> bool:
    """Any horizontal neighbour is itself a chest-type block."""
    for neighbor in pos.horizontal_neighbors():
        state = world.block_at(neighbor)
        if state is not None and is_chest_type(state.block_type):
            return True
    return False


def _holds_license(world: World, player: EntityId) -> bool:
    inventory = world.inventory_of(player)
    if inventory is None:
        return False
    held = inventory.held_item()
    return held is not None and ids_match(held.item_id, world.settings.license_item_id)


def _consume_license(world: World, player: EntityId) -> None:
    inventory = world.inventory_of(player)
    if inventory is None:
        return
    held = inventory.held_item()
    if held is None:
        return
    slot = inventory.held_slot
    inventory.container[slot] = held.with_quantity(held.quantity - 1) if held.quantity > 1 else None


def use_license(world: World, player: EntityId, target: BlockPos | None) -> LicenseOutcome:
    """Apply the license in the player's hand to the targeted block.

    Checks run in order: target present, license in hand, not already a
    shop, is a container, is not a double chest, claim allows it. On
    success the container is transplanted into a new shop and one license
    is consumed.

    Args:
        world: World the player is in.
        player: Player entity using the item.
        target: Block the player is looking at, if any.

    Returns:
        The outcome; its message has already been sent to the player.
    """
    outcome = _check(world, player, target)
    player_id = world.player_uuid(player)
    if outcome is LicenseOutcome.CREATED and target is not None and player_id is not None:
        create_shop(world, target, player_id, world.player_name(player))
        _consume_license(world, player)
        world.send_message(player, Message.success(outcome.message))
        return outcome

    world.send_message(player, Message.error(outcome.message))
    if outcome is LicenseOutcome.CLAIMED and target is not None:
        owner = world.claims.claim_owner_name(world.name, target.x, target.z)
        if owner:
            world.send_message(player, Message.info(f"This area is claimed by: {owner}"))
    return outcome


def _check(world: World, player: EntityId, target: BlockPos | None) -> LicenseOutcome:
    if target is None:
        return LicenseOutcome.NO_TARGET
    if not _holds_license(world, player):
        return LicenseOutcome.NOT_HOLDING_LICENSE

    match world.block_at(target):
        case ShopBlock():
            return LicenseOutcome.ALREADY_SHOP
        case ContainerBlock():
            pass
        case _:
            return LicenseOutcome.NOT_A_CONTAINER

    if is_double_chest(world, target):
        return LicenseOutcome.DOUBLE_CHEST

    player_id = world.player_uuid(player)
    if player_id is None or not world.claims.can_create_shop(
        player_id, world.name, target.x, target.z
    ):
        logger.info("Shop creation at %s denied by claims", target)
        return LicenseOutcome.CLAIMED
    return LicenseOutcome.CREATED

"""Shop creation and removal.

Both directions move the chest's Container object itself between block
states, so no item is ever copied, dropped or lost.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from chestshops.core.block import ContainerBlock, ShopBlock
from chestshops.core.container import Container
from chestshops.core.identity import BlockPos
from chestshops.core.shop import Shop

if TYPE_CHECKING:
    from chestshops.world.world import World

logger = logging.getLogger(__name__)


class NotAContainerError(ValueError):
    """Raised when a shop is created on a block that is not a plain container."""

    pass


def create_shop(world: World, pos: BlockPos, owner_id: UUID, owner_name: str) -> Shop:
    """Convert the container block at `pos` into a shop.

    The Shop and its block state are built complete around the chest's
    container before the block cell is replaced.

    Args:
        world: World holding the block.
        pos: Position of a ContainerBlock.
        owner_id: UUID of the new owner.
        owner_name: Owner's display name at creation time.

    Returns:
        The new shop.

    Raises:
        NotAContainerError: If there is no plain container block at `pos`.
    """
    match world.block_at(pos):
        case ContainerBlock(block_type=block_type, container=container):
            pass
        case other:
            raise NotAContainerError(f"No container block at {pos}: {other!r}")

    shop = Shop(owner_id=owner_id, owner_name=owner_name or "Unknown", inventory=container)
    shop.mark_dirty()
    world.set_block(pos, ShopBlock(block_type, shop))
    logger.info("Shop created at %s by %s (%s)", pos, owner_name, owner_id)
    return shop


def remove_shop(world: World, pos: BlockPos) -> Container | None:
    """Turn the shop at `pos` back into a plain container block.

    Despawns the display entity and keeps every item in place. Never raises.

    Returns:
        The preserved container, or None if there was no shop or the
        conversion failed.
    """
    state = world.block_at(pos)
    if not isinstance(state, ShopBlock):
        return None

    try:
        world.display.remove(state.shop)
        container = state.shop.inventory
        world.set_block(pos, ContainerBlock(state.block_type, container))
    except Exception:
        logger.exception("Failed to remove shop at %s", pos)
        return None

    logger.info("Shop removed at %s, %d stacks preserved", pos, len(list(container.stacks())))
    return container

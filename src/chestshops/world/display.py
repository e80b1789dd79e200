"""Floating display entities above shops.

Each shop may own one display entity showing the traded item. The shop
stores the entity's UUID; entity handles are not stable across restarts.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from chestshops.components import (
    EntityUUID,
    Intangible,
    ItemDisplay,
    PreventPickup,
    Transform,
)
from chestshops.core.container import first_item_id
from chestshops.core.identity import BlockPos, EntityId
from chestshops.core.shop import Shop

if TYPE_CHECKING:
    from chestshops.world.world import World

logger = logging.getLogger(__name__)


def display_item_for(shop: Shop) -> str | None:
    """Item a shop should show: configured listing, slot-0 item, or chest content."""
    listing = shop.first_configured_listing()
    if listing is not None:
        return listing.item_id
    listing = shop.get_listing(0)
    if listing is not None and listing.item_id:
        return listing.item_id
    return first_item_id(shop.inventory)


class DisplayManager:
    """Spawns, replaces and removes shop display entities in one world."""

    def __init__(self, world: World) -> None:
        self._world = world

    def find(self, display_id: UUID) -> EntityId | None:
        """Entity carrying the given display UUID, if it still exists."""
        for entity, (tag,) in self._world.query(EntityUUID):
            if tag.uuid == display_id:
                return entity
        return None

    def create_or_update(self, shop: Shop, pos: BlockPos) -> EntityId | None:
        """Replace the shop's display entity with a fresh one.

        Args:
            shop: Shop to decorate; its display reference is updated.
            pos: Position of the shop block.

        Returns:
            The new entity, or None when there is nothing to show or the
            spawn failed.
        """
        self.remove(shop)
        item_id = display_item_for(shop)
        if not item_id:
            logger.debug("No display item for shop at %s", pos)
            return None

        x, y, z = pos.center()
        display_id = uuid4()
        try:
            entity = self._world.spawn(
                ItemDisplay(item_id),
                Transform(x, y + self._world.settings.display_height_offset, z),
                PreventPickup(),
                Intangible(),
                EntityUUID(display_id),
            )
        except Exception:
            logger.warning("Failed to spawn display for shop at %s", pos, exc_info=True)
            return None

        shop.display_entity_id = display_id
        shop.mark_dirty()
        return entity

    def remove(self, shop: Shop) -> bool:
        """Despawn the shop's display entity and clear the reference.

        The reference is cleared even when the entity is already gone or
        the despawn fails.

        Returns:
            True if an entity was despawned.
        """
        display_id = shop.display_entity_id
        if display_id is None:
            return False

        removed = False
        try:
            entity = self.find(display_id)
            if entity is not None:
                self._world.destroy(entity)
                removed = True
        except Exception:
            logger.warning("Failed to despawn display %s", display_id, exc_info=True)

        shop.display_entity_id = None
        shop.mark_dirty()
        return removed

    def nearest_floating(
        self, x: float, y: float, z: float, radius: float
    ) -> tuple[EntityId, float] | None:
        """Closest non-pickupable entity within `radius`, with its distance."""
        best: tuple[EntityId, float] | None = None
        for entity, (transform, _) in self._world.query(Transform, PreventPickup):
            distance = transform.distance_to(x, y, z)
            if distance <= radius and (best is None or distance < best[1]):
                best = (entity, distance)
        return best

    def cleanup_nearest(self, x: float, y: float, z: float, radius: float) -> float | None:
        """Despawn the closest non-pickupable entity within `radius`.

        Returns:
            Distance of the removed entity, or None if none was in range.
        """
        found = self.nearest_floating(x, y, z, radius)
        if found is None:
            return None
        entity, distance = found
        self._world.destroy(entity)
        logger.info("Removed floating entity %s at distance %.1f", entity, distance)
        return distance

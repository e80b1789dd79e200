"""Shop use resolution.

Decides what a right-click on a shop opens:

    manager crouching  -> native container screen (event released)
    manager            -> config surface
    anyone else        -> trade surface

A manager is the owner, or a player holding the admin permission who has
switched admin mode on. Runs first and even on cancelled events, so a
land-claim plugin that cancels the click cannot lock customers out.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chestshops.adapters.models import SurfaceKind
from chestshops.core.events import UseBlockEvent
from chestshops.core.identity import EntityId
from chestshops.core.shop import Shop
from chestshops.core.system import system
from chestshops.surfaces import ConfigPage, TradePage

if TYPE_CHECKING:
    from chestshops.world.world import World

logger = logging.getLogger(__name__)


def can_manage(world: World, player: EntityId, shop: Shop) -> bool:
    """Owner, or admin permission with admin mode enabled."""
    player_id = world.player_uuid(player)
    if player_id is None:
        return False
    is_admin = world.has_permission(
        player, world.settings.admin_permission
    ) and world.admin.is_enabled(player_id)
    return shop.can_modify(player_id, is_admin)


@system.first(UseBlockEvent)
def resolve_shop_use(world: World, event: UseBlockEvent) -> None:
    shop = world.shop_at(event.target)
    if shop is None:
        return

    if world.player_uuid(event.player) is None:
        logger.debug("Shop use at %s by non-player %s", event.target, event.player)
        return

    if event.cancelled:
        logger.debug("Reversing cancellation of shop use at %s", event.target)
        event.uncancel()

    manager = can_manage(world, event.player, shop)
    if manager and world.is_crouching(event.player):
        event.surface = SurfaceKind.NATIVE
        return

    event.cancel()
    page = ConfigPage if manager else TradePage
    surface = page(world, event.target, event.player)
    event.surface = surface.kind
    world.ui.open_surface(surface)
    logger.debug("Opened %s surface at %s", surface.kind.value, event.target)

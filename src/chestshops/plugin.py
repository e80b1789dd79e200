"""Plugin bootstrap.

Wires the shop systems into a world and exposes the host-facing hooks.

Usage:
    plugin = ChestShopsPlugin(world)
    plugin.setup()
    ...
    plugin.on_player_disconnect(player_id)
    plugin.shutdown()
"""

from __future__ import annotations

import logging
from uuid import UUID

from chestshops.commands import ShopCommand
from chestshops.core.identity import BlockPos, EntityId
from chestshops.interactions import LicenseOutcome, use_license
from chestshops.systems import SHOP_SYSTEMS
from chestshops.world.world import World

logger = logging.getLogger(__name__)


class ChestShopsPlugin:
    """Shop feature set for one world.

    Args:
        world: World to install into. Its claim checker is resolved at
            construction, never probed again.
    """

    def __init__(self, world: World) -> None:
        self.world = world
        self.command = ShopCommand(world)
        self._installed = False

    def setup(self) -> None:
        """Register the shop systems. Idempotent."""
        if self._installed:
            return
        self.world.register_systems(*SHOP_SYSTEMS)
        self._installed = True
        logger.info(
            "Shops enabled in %s (claims: %s, license: %s)",
            self.world.name,
            type(self.world.claims).__name__,
            self.world.settings.license_item_id,
        )

    def use_license(self, player: EntityId, target: BlockPos | None) -> LicenseOutcome:
        return use_license(self.world, player, target)

    def on_player_disconnect(self, player_id: UUID) -> None:
        self.world.admin.on_disconnect(player_id)

    def shutdown(self) -> None:
        self.world.close()
        logger.info("Shops disabled in %s", self.world.name)

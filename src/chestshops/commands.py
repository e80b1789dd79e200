"""Shop admin commands.

    /shop            help
    /shop admin      toggle admin mode
    /shop cleanup    remove the nearest floating display item

Command handlers may run off the world thread; every world access goes
through `World.execute`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chestshops.adapters.models import Message, MessageColor
from chestshops.components import Transform
from chestshops.core.identity import EntityId

if TYPE_CHECKING:
    from chestshops.world.world import World

logger = logging.getLogger(__name__)

HELP_LINES = (
    "Shop Commands:",
    "  /shop admin - Toggle admin mode",
    "  /shop cleanup - Remove the nearest floating display item",
)
NO_PERMISSION = "You don't have permission to use this command."


class ShopCommand:
    """Root `/shop` command bound to one world."""

    name = "shop"

    def __init__(self, world: World) -> None:
        self.world = world

    def execute(self, player: EntityId, args: list[str]) -> list[Message]:
        """Run a subcommand for a player and send its replies.

        Args:
            player: Player entity issuing the command.
            args: Arguments after the command name.

        Returns:
            The messages sent to the player.
        """
        match args:
            case ["admin", *_]:
                replies = self.world.execute(self._admin, player)
            case ["cleanup", *_]:
                replies = self.world.execute(self._cleanup, player)
            case _:
                replies = [Message(line) for line in HELP_LINES]

        for reply in replies:
            self.world.execute(self.world.send_message, player, reply)
        return replies

    def _is_admin(self, player: EntityId) -> bool:
        return self.world.has_permission(player, self.world.settings.admin_permission)

    def _admin(self, player: EntityId) -> list[Message]:
        player_id = self.world.player_uuid(player)
        if player_id is None:
            return [Message.error("This command can only be used by players!")]
        if not self._is_admin(player):
            return [Message.error(NO_PERMISSION)]

        if self.world.admin.toggle(player_id):
            text = "Admin mode ENABLED - You can now manage any shop"
            return [Message(text, MessageColor.GREEN, bold=True)]
        text = "Admin mode DISABLED - You now interact as a customer"
        return [Message(text, MessageColor.GOLD, bold=True)]

    def _cleanup(self, player: EntityId) -> list[Message]:
        if self.world.player_uuid(player) is None:
            return [Message.error("This command can only be used by players!")]
        if not self._is_admin(player):
            return [Message.error(NO_PERMISSION)]
        position = self.world.get(player, Transform)
        if position is None:
            return [Message.error("Could not get your position!")]

        radius = self.world.settings.cleanup_radius
        distance = self.world.display.cleanup_nearest(position.x, position.y, position.z, radius)
        if distance is None:
            text = f"No floating items found within {radius:g} blocks"
            return [Message(text, MessageColor.YELLOW)]
        return [Message.success(f"Removed floating item {distance:.1f} blocks away")]

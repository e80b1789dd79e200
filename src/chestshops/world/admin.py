"""Admin-mode registry.

Admins do not manage other players' shops by default; they opt in per
session. The flag lives in memory only and is cleared on disconnect.
"""

from __future__ import annotations

import logging
from uuid import UUID

logger = logging.getLogger(__name__)


class AdminModeRegistry:
    """Set of players with admin mode enabled."""

    def __init__(self) -> None:
        self._enabled: set[UUID] = set()

    def toggle(self, player_id: UUID) -> bool:
        """Flip admin mode for a player.

        Returns:
            The new state: True if admin mode is now on.
        """
        if player_id in self._enabled:
            self._enabled.discard(player_id)
            enabled = False
        else:
            self._enabled.add(player_id)
            enabled = True
        logger.info("Admin mode %s for %s", "enabled" if enabled else "disabled", player_id)
        return enabled

    def is_enabled(self, player_id: UUID) -> bool:
        return player_id in self._enabled

    def enable(self, player_id: UUID) -> None:
        self._enabled.add(player_id)

    def disable(self, player_id: UUID) -> None:
        self._enabled.discard(player_id)

    def on_disconnect(self, player_id: UUID) -> None:
        """Forget the player's admin mode, whatever it was."""
        self._enabled.discard(player_id)

    def __len__(self) -> int:
        return len(self._enabled)

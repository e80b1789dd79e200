"""Adapter protocols for external integrations.

Defines the narrow interfaces the shop core uses to talk to the host:
land-claim checks and player-facing UI.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable
from uuid import UUID

from chestshops.adapters.models import Message, SurfaceKind
from chestshops.core.identity import BlockPos


@runtime_checkable
class ClaimChecker(Protocol):
    """Land-claim integration.

    Implementations answer whether a player may turn a chest into a shop at
    a location. The shop core treats any exception as "allowed".
    """

    def can_create_shop(self, player_id: UUID, dimension: str, x: int, z: int) -> bool:
        """Whether `player_id` may create a shop at column (x, z).

        Args:
            player_id: Player attempting the creation.
            dimension: World name.
            x: Block x coordinate.
            z: Block z coordinate.

        Returns:
            True if allowed.
        """
        ...

    def claim_owner_name(self, dimension: str, x: int, z: int) -> str | None:
        """Display name of whoever claims column (x, z), if anyone."""
        ...


@runtime_checkable
class Surface(Protocol):
    """An interactive page bound to one player and one shop position."""

    kind: SurfaceKind
    player_id: UUID
    pos: BlockPos

    def view(self) -> Any:
        """Current view model to render."""
        ...

    def handle(self, data: Any) -> Any:
        """Process one UI event payload."""
        ...


@runtime_checkable
class UIGateway(Protocol):
    """Player-facing UI: surfaces, native container screens and chat."""

    def open_surface(self, surface: Surface) -> None:
        """Show a surface to its player, replacing any open one."""
        ...

    def refresh(self, surface: Surface) -> None:
        """Re-render a surface after its state changed."""
        ...

    def close_surface(self, player_id: UUID) -> None:
        """Close whatever surface the player has open."""
        ...

    def open_container(self, player_id: UUID, pos: BlockPos) -> None:
        """Show the host's native container screen for the block at `pos`."""
        ...

    def send_message(self, player_id: UUID, message: Message) -> None:
        """Send one chat line."""
        ...

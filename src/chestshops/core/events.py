"""Block interaction events.

Events carry a mutable `cancelled` flag. Systems run in priority order and
may cancel or un-cancel; the world acts on the final state after dispatch.

Usage:
    event = UseBlockEvent(player=entity, target=BlockPos(0, 64, 0))
    world.dispatch(event)
    if not event.cancelled:
        ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chestshops.core.identity import BlockPos, EntityId

if TYPE_CHECKING:
    from chestshops.adapters.models import SurfaceKind


@dataclass(slots=True)
class BlockEvent:
    """Base class: a player acting on one block cell."""

    player: EntityId
    target: BlockPos
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True

    def uncancel(self) -> None:
        self.cancelled = False


@dataclass(slots=True)
class UseBlockEvent(BlockEvent):
    """Player right-clicks a block. `surface` records what the shop system opened."""

    surface: SurfaceKind | None = None


@dataclass(slots=True)
class BreakBlockEvent(BlockEvent):
    pass


@dataclass(slots=True)
class DamageBlockEvent(BlockEvent):
    """Player hits a block without necessarily breaking it."""


@dataclass(slots=True)
class PlaceBlockEvent(BlockEvent):
    block_type: str = ""

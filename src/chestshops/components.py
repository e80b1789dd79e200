"""Entity components used by the shop systems.

Players carry PlayerInfo, Permissions, MovementState, PlayerInventory and
Transform. Floating shop displays carry ItemDisplay, Transform,
PreventPickup, Intangible and EntityUUID. Broken containers spill their
contents as DroppedItem entities.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from uuid import UUID

from chestshops.core.component import component
from chestshops.core.container import Container
from chestshops.core.items import ItemStack


@component
@dataclass(slots=True)
class PlayerInfo:
    uuid: UUID
    name: str


@component
@dataclass(slots=True)
class Permissions:
    nodes: frozenset[str] = frozenset()

    def has(self, node: str) -> bool:
        return node in self.nodes


@component
@dataclass(slots=True)
class MovementState:
    crouching: bool = False


@component
@dataclass(slots=True)
class PlayerInventory:
    """Player's slotted inventory plus which slot is in hand."""

    container: Container
    held_slot: int = 0

    def held_item(self) -> ItemStack | None:
        return self.container[self.held_slot]


@component
@dataclass(slots=True)
class Transform:
    x: float
    y: float
    z: float

    def distance_to(self, x: float, y: float, z: float) -> float:
        return math.dist((self.x, self.y, self.z), (x, y, z))


@component
@dataclass(slots=True)
class EntityUUID:
    uuid: UUID


@component
@dataclass(slots=True)
class ItemDisplay:
    """Item rendered by a floating display entity."""

    item_id: str
    despawn_after_s: float = 24 * 60 * 60


@component
@dataclass(slots=True)
class PreventPickup:
    pass


@component
@dataclass(slots=True)
class Intangible:
    pass


@component
@dataclass(slots=True)
class DroppedItem:
    stack: ItemStack
    tags: dict[str, str] = field(default_factory=dict)

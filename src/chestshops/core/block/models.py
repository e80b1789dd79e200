"""Block states as tagged variants.

A block cell holds exactly one of these. Callers dispatch with `match`:

    match world.block_at(pos):
        case ShopBlock(shop=shop):
            ...
        case ContainerBlock(container=container):
            ...
        case SolidBlock() | None:
            ...
"""

from __future__ import annotations

from dataclasses import dataclass

from chestshops.core.container import Container
from chestshops.core.shop import Shop


@dataclass(slots=True)
class SolidBlock:
    """Plain block with no state beyond its type."""

    block_type: str


@dataclass(slots=True)
class ContainerBlock:
    """Chest-like block holding items."""

    block_type: str
    container: Container


@dataclass(slots=True)
class ShopBlock:
    """Chest converted into a shop. The shop owns the container."""

    block_type: str
    shop: Shop

    @property
    def container(self) -> Container:
        return self.shop.inventory


type BlockState = SolidBlock | ContainerBlock | ShopBlock


def can_destroy(state: BlockState | None) -> bool:
    """Whether direct breaking may remove this block."""
    match state:
        case ShopBlock(shop=shop):
            return shop.can_destroy()
        case _:
            return True


def is_chest_type(block_type: str) -> bool:
    return "chest" in block_type.lower()

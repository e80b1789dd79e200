"""Storage protocol for swappable backends.

One backend holds both halves of world state: block cells (chests, shops,
plain blocks) keyed by position, and entity components (players, floating
displays, dropped items).

Usage:
    storage = LocalStorage()
    world = World(storage=storage)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol, TypeVar

from chestshops.core.block import BlockState
from chestshops.core.identity import BlockPos, EntityId

T = TypeVar("T")


class Storage(Protocol):
    """Abstract storage interface. Implementations handle actual data."""

    # Entities

    def create_entity(self) -> EntityId:
        """Allocate new entity."""
        ...

    def destroy_entity(self, entity: EntityId) -> None:
        """Remove entity and all its components."""
        ...

    def entity_exists(self, entity: EntityId) -> bool:
        """Check if entity is alive."""
        ...

    def all_entities(self) -> Iterator[EntityId]:
        """Iterate all living entities."""
        ...

    def get_component(
        self, entity: EntityId, component_type: type[T], copy: bool = True
    ) -> T | None:
        """Get component from entity."""
        ...

    def set_component(self, entity: EntityId, component: Any) -> None:
        """Set/update component on entity."""
        ...

    def remove_component(self, entity: EntityId, component_type: type) -> bool:
        """Remove component from entity. Returns True if existed."""
        ...

    def has_component(self, entity: EntityId, component_type: type) -> bool:
        """Check if entity has component."""
        ...

    def query(
        self, *component_types: type, copy: bool = True
    ) -> Iterator[tuple[EntityId, tuple[Any, ...]]]:
        """Find entities having all component types."""
        ...

    # Blocks

    def get_block(self, pos: BlockPos) -> BlockState | None:
        """Block state at a position, None for air."""
        ...

    def set_block(self, pos: BlockPos, state: BlockState) -> None:
        """Store a block state, replacing whatever was there."""
        ...

    def remove_block(self, pos: BlockPos) -> BlockState | None:
        """Clear a position. Returns the previous state."""
        ...

    def blocks(self) -> Iterator[tuple[BlockPos, BlockState]]:
        """Iterate every non-air cell."""
        ...

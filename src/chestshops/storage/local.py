"""Local in-memory storage implementation.

Dict-based storage for a single world process and for tests.

Usage:
    storage = LocalStorage()
    world = World(storage=storage)
"""

from __future__ import annotations

import copy as cp
from collections.abc import Iterator
from typing import Any, TypeVar, cast

from chestshops.core.block import BlockState
from chestshops.core.identity import BlockPos, EntityId
from chestshops.core.types import Copy
from chestshops.storage.allocator import EntityAllocator

T = TypeVar("T")


class LocalStorage:
    """In-memory storage using nested dicts.

    Structure:
        _components[entity][component_type] = component_instance
        _blocks[pos] = block_state
    """

    def __init__(self) -> None:
        self._allocator = EntityAllocator()
        self._components: dict[EntityId, dict[type, Any]] = {}
        self._blocks: dict[BlockPos, BlockState] = {}

    def create_entity(self) -> EntityId:
        """Create a new entity with no components."""
        entity = self._allocator.allocate()
        self._components[entity] = {}
        return entity

    def destroy_entity(self, entity: EntityId) -> None:
        """Destroy an entity and its components. Unknown entities are ignored."""
        if entity in self._components:
            del self._components[entity]
            self._allocator.deallocate(entity)

    def entity_exists(self, entity: EntityId) -> bool:
        return entity in self._components and self._allocator.is_alive(entity)

    def all_entities(self) -> Iterator[EntityId]:
        for entity in list(self._components):
            if self._allocator.is_alive(entity):
                yield entity

    def get_component(
        self, entity: EntityId, component_type: type[T], copy: bool = True
    ) -> Copy[T] | T | None:
        """Get a component from an entity.

        Args:
            entity: Entity to query.
            component_type: Type of component to retrieve.
            copy: Return a deep copy (default) instead of the live instance.

        Returns:
            Component instance or None if not present.
        """
        component = self._components.get(entity, {}).get(component_type)
        if component is None:
            return None
        return cp.deepcopy(component) if copy else cast(T, component)

    def set_component(self, entity: EntityId, component: Any) -> None:
        """Set or replace a component on a live entity.

        Raises:
            KeyError: If the entity does not exist.
        """
        if not self.entity_exists(entity):
            raise KeyError(f"Entity {entity} does not exist")
        self._components[entity][type(component)] = component

    def remove_component(self, entity: EntityId, component_type: type) -> bool:
        components = self._components.get(entity)
        if components is None or component_type not in components:
            return False
        del components[component_type]
        return True

    def has_component(self, entity: EntityId, component_type: type) -> bool:
        return component_type in self._components.get(entity, {})

    def get_component_types(self, entity: EntityId) -> frozenset[type]:
        return frozenset(self._components.get(entity, {}))

    def query(
        self,
        *component_types: type,
        copy: bool = True,
    ) -> Iterator[tuple[EntityId, tuple[Any, ...]]]:
        """Find entities with all specified components.

        O(n) scan over entities. Iterates over a snapshot of the entity list,
        so callers may destroy entities while consuming results.

        Args:
            *component_types: Component types to query for.
            copy: Whether to return copies of components (default True).

        Yields:
            Tuples of (entity, (component1, component2, ...)) for each match.
        """
        for entity, components in list(self._components.items()):
            if not self._allocator.is_alive(entity):
                continue
            if not all(t in components for t in component_types):
                continue
            found = tuple(components[t] for t in component_types)
            yield entity, (cp.deepcopy(found) if copy else found)

    def get_block(self, pos: BlockPos) -> BlockState | None:
        return self._blocks.get(pos)

    def set_block(self, pos: BlockPos, state: BlockState) -> None:
        self._blocks[pos] = state

    def remove_block(self, pos: BlockPos) -> BlockState | None:
        return self._blocks.pop(pos, None)

    def blocks(self) -> Iterator[tuple[BlockPos, BlockState]]:
        yield from list(self._blocks.items())

"""Entity allocation service."""

from __future__ import annotations

from chestshops.core.identity import EntityId


class EntityAllocator:
    """Hands out entity IDs, recycling freed indices with a bumped generation.

    A recycled index never compares equal to the handle it replaced, so a
    stale display-entity reference cannot despawn an unrelated entity.
    """

    def __init__(self) -> None:
        self._next_index = 1
        self._free_list: list[int] = []
        self._generations: dict[int, int] = {}

    def allocate(self) -> EntityId:
        """Reuse the most recently freed index if any, else take a new one."""
        if self._free_list:
            index = self._free_list.pop()
            return EntityId(index=index, generation=self._generations[index])

        index = self._next_index
        self._next_index += 1
        self._generations[index] = 0
        return EntityId(index=index, generation=0)

    def deallocate(self, entity: EntityId) -> None:
        """Free an entity's index for reuse.

        Raises:
            ValueError: If the handle is stale or was never allocated.
        """
        if not self.is_alive(entity):
            raise ValueError(f"Cannot deallocate dead or unknown entity {entity}")
        self._generations[entity.index] = entity.generation + 1
        self._free_list.append(entity.index)

    def is_alive(self, entity: EntityId) -> bool:
        """Handle generation matches the live generation for its index."""
        if entity.index in self._free_list:
            return False
        return self._generations.get(entity.index, -1) == entity.generation

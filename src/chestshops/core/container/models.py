"""Fixed-capacity slotted container.

Usage:
    chest = Container(capacity=18)
    chest[0] = ItemStack("Ingredient_Bar_Iron", 10)
    for slot, stack in chest.stacks():
        ...
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from chestshops.core.items import ItemCatalog, ItemStack, StackSizeCatalog


class Container:
    """Ordered array of optional item stacks bound to a catalog.

    Every occupied slot holds between 1 and `max_stack(item_id)` items.
    Assignments that would break this raise ValueError.

    Args:
        capacity: Number of slots, fixed for the container's lifetime.
        catalog: Stacking limits; defaults to a 64-per-slot catalog.
        slots: Optional initial contents, padded with empty slots.
    """

    __slots__ = ("_catalog", "_slots")

    def __init__(
        self,
        capacity: int,
        catalog: ItemCatalog | None = None,
        slots: Iterable[ItemStack | None] | None = None,
    ) -> None:
        if capacity < 1:
            raise ValueError(f"Container capacity must be >= 1, got {capacity}")
        self._catalog: ItemCatalog = catalog or StackSizeCatalog()
        self._slots: list[ItemStack | None] = [None] * capacity
        for index, stack in enumerate(slots or ()):
            self[index] = stack

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def catalog(self) -> ItemCatalog:
        return self._catalog

    def max_stack(self, item_id: str) -> int:
        return self._catalog.max_stack(item_id)

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[ItemStack | None]:
        return iter(self._slots)

    def __getitem__(self, slot: int) -> ItemStack | None:
        self._check_slot(slot)
        return self._slots[slot]

    def __setitem__(self, slot: int, stack: ItemStack | None) -> None:
        self._check_slot(slot)
        if stack is not None:
            limit = self.max_stack(stack.item_id)
            if stack.quantity > limit:
                raise ValueError(
                    f"{stack.quantity}x {stack.item_id} exceeds max stack {limit} in slot {slot}"
                )
        self._slots[slot] = stack

    def __repr__(self) -> str:
        filled = sum(1 for stack in self._slots if stack is not None)
        return f"Container(capacity={self.capacity}, filled={filled})"

    def _check_slot(self, slot: int) -> None:
        if not 0 <= slot < len(self._slots):
            raise IndexError(f"Slot {slot} out of range for capacity {len(self._slots)}")

    def stacks(self) -> Iterator[tuple[int, ItemStack]]:
        """Iterate occupied slots as (slot, stack) pairs."""
        for slot, stack in enumerate(self._slots):
            if stack is not None:
                yield slot, stack

    def is_empty(self) -> bool:
        return all(stack is None for stack in self._slots)

    def clear(self) -> list[ItemStack]:
        """Empty every slot and return what was removed."""
        removed = [stack for stack in self._slots if stack is not None]
        self._slots = [None] * len(self._slots)
        return removed

    def snapshot(self) -> list[ItemStack | None]:
        """Shallow copy of the slot list; stacks are immutable."""
        return list(self._slots)

    def restore(self, slots: list[ItemStack | None]) -> None:
        """Put back a list previously returned by `snapshot()`.

        Raises:
            ValueError: If the list length differs from the capacity.
        """
        if len(slots) != len(self._slots):
            raise ValueError(
                f"Snapshot has {len(slots)} slots, container has {len(self._slots)}"
            )
        self._slots = list(slots)

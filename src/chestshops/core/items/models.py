"""Item stack and catalog models.

Usage:
    catalog = StackSizeCatalog(overrides={"Tool_Pickaxe_Iron": 1})
    stack = ItemStack("Ingredient_Bar_Iron", quantity=12)
    half = stack.with_quantity(6)
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from chestshops.core.items.matching import ids_match, normalize_item_id

DEFAULT_MAX_STACK = 64


@dataclass(frozen=True, slots=True)
class ItemStack:
    """Immutable stack of identical items.

    Durability and metadata travel with the stack through splits and
    transfers; only `quantity` differs between the parts.
    """

    item_id: str
    quantity: int = 1
    durability: float | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.item_id:
            raise ValueError("ItemStack requires a non-empty item_id")
        if self.quantity < 1:
            raise ValueError(f"ItemStack quantity must be >= 1, got {self.quantity}")

    def with_quantity(self, quantity: int) -> ItemStack:
        """Copy of this stack with a different quantity, all else preserved."""
        return dataclasses.replace(self, quantity=quantity)

    def is_stackable_with(self, other: ItemStack) -> bool:
        """Whether two stacks may share a slot."""
        return (
            ids_match(self.item_id, other.item_id)
            and self.durability == other.durability
            and self.metadata == other.metadata
        )


@runtime_checkable
class ItemCatalog(Protocol):
    """Source of per-item stacking limits."""

    def max_stack(self, item_id: str) -> int:
        """Maximum quantity a single slot may hold for this item."""
        ...


@dataclass(slots=True)
class StackSizeCatalog:
    """Catalog with a shared default and per-item overrides.

    Override keys are matched tolerantly, so "hytale:tool_pickaxe" covers
    "Tool_Pickaxe" as well.
    """

    default: int = DEFAULT_MAX_STACK
    overrides: dict[str, int] = field(default_factory=dict)
    _normalized: dict[str, int] = field(init=False, repr=False, default_factory=dict)

    def __post_init__(self) -> None:
        if self.default < 1:
            raise ValueError(f"default max stack must be >= 1, got {self.default}")
        for item_id, size in self.overrides.items():
            if size < 1:
                raise ValueError(f"max stack for {item_id} must be >= 1, got {size}")
            self._normalized[normalize_item_id(item_id)] = size

    def max_stack(self, item_id: str) -> int:
        exact = self.overrides.get(item_id)
        if exact is not None:
            return exact
        return self._normalized.get(normalize_item_id(item_id), self.default)

"""Slotted containers and their stack-aware primitives."""

from chestshops.core.container.models import Container
from chestshops.core.container.operations import (
    add_items,
    add_stack,
    available_space,
    count,
    first_item_id,
    remove_items,
    transfer,
)

__all__ = [
    "Container",
    "add_items",
    "add_stack",
    "available_space",
    "count",
    "first_item_id",
    "remove_items",
    "transfer",
]

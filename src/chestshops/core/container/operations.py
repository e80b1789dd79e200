"""Stack-aware container primitives.

Pure functions over `Container`. Mutators either apply in full or leave
every container they touch exactly as they found it.

Usage:
    if available_space(buyer, "Ingredient_Bar_Iron") >= 5:
        transfer(chest, buyer, "Ingredient_Bar_Iron", 5)
"""

from __future__ import annotations

from chestshops.core.container.models import Container
from chestshops.core.items import ItemStack, ids_match


def count(container: Container, item_id: str) -> int:
    """Total quantity of `item_id` across all slots (tolerant match)."""
    return sum(
        stack.quantity for _, stack in container.stacks() if ids_match(stack.item_id, item_id)
    )


def available_space(container: Container, item_id: str) -> int:
    """How many more units of `item_id` the container can absorb.

    Empty slots contribute a full stack. Occupied matching slots contribute
    the headroom to their max stack, but only for items that stack at all.

    Args:
        container: Container to inspect.
        item_id: Item the caller wants to insert.

    Returns:
        Upper bound on a subsequent successful insert of plain stacks.
    """
    limit = container.max_stack(item_id)
    space = 0
    for stack in container:
        if stack is None:
            space += limit
        elif limit > 1 and ids_match(stack.item_id, item_id):
            space += max(0, limit - stack.quantity)
    return space


def first_item_id(container: Container) -> str | None:
    """Item id in the lowest occupied slot, or None for an empty container."""
    for _, stack in container.stacks():
        return stack.item_id
    return None


def add_stack(container: Container, stack: ItemStack) -> int:
    """Insert a stack, merging into compatible slots first.

    Not atomic on its own: whatever fits is inserted.

    Returns:
        The quantity that did not fit.
    """
    limit = container.max_stack(stack.item_id)
    remaining = stack.quantity

    if limit > 1:
        for slot, existing in container.stacks():
            if remaining == 0:
                break
            if not existing.is_stackable_with(stack) or existing.quantity >= limit:
                continue
            moved = min(limit - existing.quantity, remaining)
            container[slot] = existing.with_quantity(existing.quantity + moved)
            remaining -= moved

    for slot in range(container.capacity):
        if remaining == 0:
            break
        if container[slot] is None:
            placed = min(limit, remaining)
            container[slot] = stack.with_quantity(placed)
            remaining -= placed

    return remaining


def _take(container: Container, item_id: str, quantity: int) -> list[ItemStack]:
    """Remove exactly `quantity` units, splitting the last stack if needed.

    Caller guarantees the container holds enough.
    """
    taken: list[ItemStack] = []
    remaining = quantity
    for slot, stack in list(container.stacks()):
        if remaining == 0:
            break
        if not ids_match(stack.item_id, item_id):
            continue
        if stack.quantity <= remaining:
            container[slot] = None
            taken.append(stack)
            remaining -= stack.quantity
        else:
            container[slot] = stack.with_quantity(stack.quantity - remaining)
            taken.append(stack.with_quantity(remaining))
            remaining = 0
    return taken


def remove_items(container: Container, item_id: str, quantity: int) -> bool:
    """Remove `quantity` units of `item_id`, or nothing at all.

    Returns:
        True on success; False (container untouched) when quantity <= 0 or
        the container holds fewer units.
    """
    if quantity <= 0 or count(container, item_id) < quantity:
        return False
    _take(container, item_id, quantity)
    return True


def add_items(container: Container, item_id: str, quantity: int) -> bool:
    """Insert `quantity` plain units of `item_id`, or nothing at all.

    Returns:
        True on success; False (container untouched) when quantity <= 0 or
        there is not enough space.
    """
    if quantity <= 0 or available_space(container, item_id) < quantity:
        return False
    before = container.snapshot()
    if add_stack(container, ItemStack(item_id, quantity)) > 0:
        container.restore(before)
        return False
    return True


def transfer(source: Container, dest: Container, item_id: str, quantity: int) -> bool:
    """Move `quantity` units from source to dest, preserving stack attributes.

    All-or-nothing: on any shortfall both containers are restored to their
    previous slot contents.

    Args:
        source: Container to take from.
        dest: Container to insert into.
        item_id: Item to move (tolerant match).
        quantity: Exact number of units.

    Returns:
        True if every unit moved, False otherwise.
    """
    if quantity <= 0 or count(source, item_id) < quantity:
        return False

    source_before = source.snapshot()
    dest_before = dest.snapshot()
    for stack in _take(source, item_id, quantity):
        if add_stack(dest, stack) > 0:
            source.restore(source_before)
            dest.restore(dest_before)
            return False
    return True

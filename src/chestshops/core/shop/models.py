"""Shop and listing models.

A Shop owns the transplanted chest container, its listings (one per slot;
only slot 0 is used today), the floating display reference and the earnings
ledger. A Listing is an immutable value: edits produce a new Listing that
is stored back with `Shop.set_listing`.

Usage:
    shop = Shop(owner_id=uuid4(), owner_name="Ava", inventory=chest)
    listing = shop.get_or_create_listing(0).with_changes(
        item_id="Ingredient_Bar_Iron",
        currency_item_id="Ingredient_Bar_Copper",
        buy_price=2,
    )
    shop.set_listing(listing)
"""

from __future__ import annotations

import dataclasses
import time
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from chestshops.core.container import Container, count


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True, slots=True)
class Listing:
    """Trade configuration for one shop slot.

    `buy_price` is what a customer pays per unit when buying from the shop;
    `sell_price` is what the shop pays per unit when buying from a customer.
    A price of 0 disables that direction.
    """

    slot: int = 0
    item_id: str | None = None
    currency_item_id: str | None = None
    buy_price: int = 0
    sell_price: int = 0

    def __post_init__(self) -> None:
        if self.buy_price < 0 or self.sell_price < 0:
            raise ValueError(
                f"Listing prices must be >= 0, got buy={self.buy_price} sell={self.sell_price}"
            )

    def with_changes(self, **changes: Any) -> Listing:
        """New listing for the same slot with the given fields replaced.

        Raises:
            ValueError: If `slot` is among the changes.
        """
        if "slot" in changes:
            raise ValueError("A listing's slot cannot change")
        return dataclasses.replace(self, **changes)

    def has_currency(self) -> bool:
        return bool(self.currency_item_id)

    def is_configured(self) -> bool:
        """Item and currency set, and at least one direction enabled."""
        return (
            bool(self.item_id)
            and self.has_currency()
            and (self.buy_price > 0 or self.sell_price > 0)
        )

    def can_buy_from(self) -> bool:
        """Customers may buy from the shop."""
        return self.buy_price > 0 and self.has_currency()

    def can_sell_to(self) -> bool:
        """Customers may sell to the shop."""
        return self.sell_price > 0 and self.has_currency()


@dataclass(slots=True)
class Shop:
    """Player-owned shop state attached to a chest block."""

    owner_id: UUID
    owner_name: str
    inventory: Container
    shop_name: str | None = None
    listings: list[Listing] = field(default_factory=list)
    display_entity_id: UUID | None = None
    created_at: int = field(default_factory=_now_ms)
    total_earnings: int = 0
    dirty: bool = False

    def __post_init__(self) -> None:
        slots = [listing.slot for listing in self.listings]
        if len(slots) != len(set(slots)):
            raise ValueError(f"Duplicate listing slots: {sorted(slots)}")

    @property
    def display_name(self) -> str:
        if self.shop_name:
            return self.shop_name
        return f"{self.owner_name}'s Shop"

    def is_owner(self, player_id: UUID) -> bool:
        return player_id == self.owner_id

    def can_modify(self, player_id: UUID, is_admin: bool = False) -> bool:
        """Owner, or an admin acting in admin mode."""
        return self.is_owner(player_id) or is_admin

    def can_destroy(self) -> bool:
        """Shops are never broken directly; removal goes through the config surface."""
        return False

    def get_listing(self, slot: int = 0) -> Listing | None:
        for listing in self.listings:
            if listing.slot == slot:
                return listing
        return None

    def get_or_create_listing(self, slot: int = 0) -> Listing:
        """Existing listing for `slot`, or a fresh empty one stored on the shop."""
        listing = self.get_listing(slot)
        if listing is None:
            listing = Listing(slot=slot)
            self.listings.append(listing)
            self.mark_dirty()
        return listing

    def set_listing(self, listing: Listing) -> None:
        """Store a listing, replacing any existing one for the same slot."""
        for index, existing in enumerate(self.listings):
            if existing.slot == listing.slot:
                self.listings[index] = listing
                break
        else:
            self.listings.append(listing)
        self.mark_dirty()

    def remove_listing(self, slot: int) -> bool:
        before = len(self.listings)
        self.listings = [listing for listing in self.listings if listing.slot != slot]
        removed = len(self.listings) != before
        if removed:
            self.mark_dirty()
        return removed

    def is_ready(self) -> bool:
        """At least one listing is fully configured."""
        return any(listing.is_configured() for listing in self.listings)

    def first_configured_listing(self) -> Listing | None:
        for listing in self.listings:
            if listing.is_configured():
                return listing
        return None

    def stock(self, item_id: str | None) -> int:
        if not item_id:
            return 0
        return count(self.inventory, item_id)

    def add_earnings(self, amount: int) -> None:
        self.total_earnings += amount
        self.mark_dirty()

    def mark_dirty(self) -> None:
        self.dirty = True

    def mark_saved(self) -> None:
        self.dirty = False

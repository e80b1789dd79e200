"""Persisted shop record.

Pydantic models for the on-disk shape of a shop block's state. Field
aliases carry the persisted PascalCase keys; Python code uses snake_case.

Structural problems (missing owner, slots outside the container, repeated
slots) fail validation. Stack limits depend on the item catalog, so they
are only checked when the record is turned back into a Shop.

Usage:
    record = ShopRecord.from_shop(shop)
    payload = record.model_dump(by_alias=True, mode="json")
    restored = ShopRecord.model_validate(payload).to_shop(catalog)
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from chestshops.core.container import Container
from chestshops.core.items import ItemCatalog, ItemStack
from chestshops.core.shop import Listing, Shop


class ShopRecordError(ValueError):
    """Raised when a valid record does not fit the item catalog it is loaded with."""

    pass


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SlotRecord(_Record):
    slot: int = Field(alias="Slot", ge=0)
    item_id: str = Field(alias="ItemId", min_length=1)
    quantity: int = Field(alias="Quantity", ge=1)
    durability: float | None = Field(default=None, alias="Durability")
    metadata: dict[str, Any] = Field(default_factory=dict, alias="Metadata")


class ContainerRecord(_Record):
    capacity: int = Field(alias="Capacity", ge=1)
    slots: list[SlotRecord] = Field(default_factory=list, alias="Slots")

    @model_validator(mode="after")
    def check_slots_fit(self) -> ContainerRecord:
        seen: set[int] = set()
        for entry in self.slots:
            if entry.slot >= self.capacity:
                raise ValueError(f"Slot {entry.slot} is outside capacity {self.capacity}")
            if entry.slot in seen:
                raise ValueError(f"Slot {entry.slot} appears more than once")
            seen.add(entry.slot)
        return self

    @classmethod
    def from_container(cls, container: Container) -> ContainerRecord:
        return cls(
            capacity=container.capacity,
            slots=[
                SlotRecord(
                    slot=slot,
                    item_id=stack.item_id,
                    quantity=stack.quantity,
                    durability=stack.durability,
                    metadata=dict(stack.metadata),
                )
                for slot, stack in container.stacks()
            ],
        )

    def to_container(self, catalog: ItemCatalog | None = None) -> Container:
        """Rebuild the container under `catalog`'s stacking limits.

        Raises:
            ShopRecordError: If a stored stack exceeds the catalog's max stack.
        """
        container = Container(self.capacity, catalog)
        for entry in self.slots:
            stack = ItemStack(
                entry.item_id,
                entry.quantity,
                durability=entry.durability,
                metadata=dict(entry.metadata),
            )
            try:
                container[entry.slot] = stack
            except ValueError as e:
                raise ShopRecordError(str(e)) from e
        return container


class ListingRecord(_Record):
    slot: int = Field(default=0, alias="Slot", ge=0)
    item_id: str | None = Field(default=None, alias="ItemId")
    currency_item_id: str | None = Field(default=None, alias="CurrencyItemId")
    buy_price: int = Field(default=0, alias="BuyPrice", ge=0)
    sell_price: int = Field(default=0, alias="SellPrice", ge=0)

    @classmethod
    def from_listing(cls, listing: Listing) -> ListingRecord:
        return cls(
            slot=listing.slot,
            item_id=listing.item_id,
            currency_item_id=listing.currency_item_id,
            buy_price=listing.buy_price,
            sell_price=listing.sell_price,
        )

    def to_listing(self) -> Listing:
        return Listing(
            slot=self.slot,
            item_id=self.item_id,
            currency_item_id=self.currency_item_id,
            buy_price=self.buy_price,
            sell_price=self.sell_price,
        )


class ShopRecord(_Record):
    """Complete persisted state of one shop block.

    `Custom` marks the block state as plugin-owned for the host's loader and
    is always true.
    """

    custom: bool = Field(default=True, alias="Custom")
    item_container: ContainerRecord = Field(alias="ItemContainer")
    owner_uuid: UUID = Field(alias="OwnerUUID")
    owner_name: str = Field(default="Unknown", alias="OwnerName")
    shop_name: str | None = Field(default=None, alias="ShopName")
    listings: list[ListingRecord] = Field(default_factory=list, alias="Listings")
    display_entity_uuid: UUID | None = Field(default=None, alias="DisplayEntityUUID")
    created_at: int = Field(default=0, alias="CreatedAt")
    total_earnings: int = Field(default=0, alias="TotalEarnings")

    @field_validator("listings")
    @classmethod
    def check_listing_slots_unique(cls, v: list[ListingRecord]) -> list[ListingRecord]:
        slots = [entry.slot for entry in v]
        if len(slots) != len(set(slots)):
            raise ValueError(f"Duplicate listing slots: {sorted(slots)}")
        return v

    @classmethod
    def from_shop(cls, shop: Shop) -> ShopRecord:
        return cls(
            item_container=ContainerRecord.from_container(shop.inventory),
            owner_uuid=shop.owner_id,
            owner_name=shop.owner_name,
            shop_name=shop.shop_name,
            listings=[ListingRecord.from_listing(listing) for listing in shop.listings],
            display_entity_uuid=shop.display_entity_id,
            created_at=shop.created_at,
            total_earnings=shop.total_earnings,
        )

    def to_shop(self, catalog: ItemCatalog | None = None) -> Shop:
        """Rebuild a clean (not dirty) Shop from this record.

        Raises:
            ShopRecordError: If a stored stack exceeds the catalog's max stack.
        """
        return Shop(
            owner_id=self.owner_uuid,
            owner_name=self.owner_name,
            inventory=self.item_container.to_container(catalog),
            shop_name=self.shop_name,
            listings=[entry.to_listing() for entry in self.listings],
            display_entity_id=self.display_entity_uuid,
            created_at=self.created_at,
            total_earnings=self.total_earnings,
        )


def encode_shop(shop: Shop) -> dict[str, Any]:
    """JSON-ready dict with persisted key names."""
    return ShopRecord.from_shop(shop).model_dump(by_alias=True, mode="json")


def decode_shop(data: dict[str, Any], catalog: ItemCatalog | None = None) -> Shop:
    """Inverse of `encode_shop`.

    Raises:
        pydantic.ValidationError: If the payload is malformed.
        ShopRecordError: If a stored stack exceeds the catalog's max stack.
    """
    return ShopRecord.model_validate(data).to_shop(catalog)

"""Storage backends and the persisted shop record."""

from chestshops.storage.allocator import EntityAllocator
from chestshops.storage.codec import (
    ContainerRecord,
    ListingRecord,
    ShopRecord,
    ShopRecordError,
    SlotRecord,
    decode_shop,
    encode_shop,
)
from chestshops.storage.local import LocalStorage
from chestshops.storage.protocol import Storage

__all__ = [
    # Backends
    "EntityAllocator",
    "LocalStorage",
    "Storage",
    # Persisted records
    "ContainerRecord",
    "ListingRecord",
    "ShopRecord",
    "ShopRecordError",
    "SlotRecord",
    "decode_shop",
    "encode_shop",
]

"""Core functionalities: stateless models and primitives.

Architecture Note:
    core/ holds pure data models and functions over them (items,
    containers, shops, transactions, events, system descriptors). Stateful
    services live in world/, storage/ and scheduling/.
"""

from chestshops.core.block import (
    BlockState,
    ContainerBlock,
    ShopBlock,
    SolidBlock,
    can_destroy,
)
from chestshops.core.component import component
from chestshops.core.container import (
    Container,
    add_items,
    available_space,
    count,
    remove_items,
    transfer,
)
from chestshops.core.events import (
    BlockEvent,
    BreakBlockEvent,
    DamageBlockEvent,
    PlaceBlockEvent,
    UseBlockEvent,
)
from chestshops.core.identity import BlockPos, EntityId
from chestshops.core.items import (
    ItemCatalog,
    ItemStack,
    StackSizeCatalog,
    display_name,
    ids_match,
)
from chestshops.core.shop import Listing, Shop
from chestshops.core.system import Priority, SystemDescriptor, system
from chestshops.core.transaction import (
    Failure,
    FailureReason,
    Success,
    TransactionResult,
    buy,
    sell,
)
from chestshops.core.types import Copy

__all__ = [
    # Types
    "Copy",
    # Identity
    "BlockPos",
    "EntityId",
    # Component
    "component",
    # Items and containers
    "Container",
    "ItemCatalog",
    "ItemStack",
    "StackSizeCatalog",
    "add_items",
    "available_space",
    "count",
    "display_name",
    "ids_match",
    "remove_items",
    "transfer",
    # Shops and blocks
    "BlockState",
    "ContainerBlock",
    "Listing",
    "Shop",
    "ShopBlock",
    "SolidBlock",
    "can_destroy",
    # Transactions
    "Failure",
    "FailureReason",
    "Success",
    "TransactionResult",
    "buy",
    "sell",
    # Events and systems
    "BlockEvent",
    "BreakBlockEvent",
    "DamageBlockEvent",
    "PlaceBlockEvent",
    "Priority",
    "SystemDescriptor",
    "UseBlockEvent",
    "system",
]

"""Block state variants."""

from chestshops.core.block.models import (
    BlockState,
    ContainerBlock,
    ShopBlock,
    SolidBlock,
    can_destroy,
    is_chest_type,
)

__all__ = [
    "BlockState",
    "ContainerBlock",
    "ShopBlock",
    "SolidBlock",
    "can_destroy",
    "is_chest_type",
]

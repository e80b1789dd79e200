"""Item stacks, stacking limits and tolerant id matching."""

from chestshops.core.items.matching import (
    display_name,
    ids_match,
    normalize_item_id,
    strip_namespace,
)
from chestshops.core.items.models import (
    DEFAULT_MAX_STACK,
    ItemCatalog,
    ItemStack,
    StackSizeCatalog,
)

__all__ = [
    # Models
    "DEFAULT_MAX_STACK",
    "ItemCatalog",
    "ItemStack",
    "StackSizeCatalog",
    # Matching
    "display_name",
    "ids_match",
    "normalize_item_id",
    "strip_namespace",
]

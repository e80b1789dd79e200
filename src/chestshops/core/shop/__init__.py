"""Shop and listing models."""

from chestshops.core.shop.models import Listing, Shop

__all__ = ["Listing", "Shop"]

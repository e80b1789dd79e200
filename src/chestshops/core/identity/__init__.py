"""Entity and block identity."""

from chestshops.core.identity.models import BlockPos, EntityId

__all__ = ["BlockPos", "EntityId"]

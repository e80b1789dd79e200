"""Event systems: decorator and descriptors."""

from chestshops.core.system.core import system
from chestshops.core.system.models import Priority, SystemDescriptor

__all__ = ["Priority", "SystemDescriptor", "system"]

"""Event dispatch."""

from chestshops.scheduling.dispatcher import EventDispatcher
from chestshops.scheduling.models import DispatcherConfig, DispatchPlan

__all__ = [
    "DispatchPlan",
    "DispatcherConfig",
    "EventDispatcher",
]

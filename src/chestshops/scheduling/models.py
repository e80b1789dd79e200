"""Dispatcher models and configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chestshops.core.system import SystemDescriptor


@dataclass(frozen=True, slots=True)
class DispatcherConfig:
    """Configuration for EventDispatcher."""

    isolate_failures: bool = True
    """Log and skip a system that raises instead of propagating. Default on."""


@dataclass
class DispatchPlan:
    """Systems subscribed to one event type, in execution order.

    Order is ascending priority, ties broken by registration order.
    """

    event_type: type
    systems: list[SystemDescriptor] = field(default_factory=list)

    def names(self) -> list[str]:
        return [descriptor.name for descriptor in self.systems]

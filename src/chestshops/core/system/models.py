"""System models: descriptors and dispatch priorities."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from chestshops.core.events import BlockEvent


class Priority(IntEnum):
    """Dispatch order. Lower values run first."""

    FIRST = -1000
    EARLY = -100
    NORMAL = 0
    LATE = 100
    LAST = 1000


@dataclass(frozen=True)
class SystemDescriptor:
    """Metadata about a registered event system."""

    name: str
    run: Callable[..., Any]
    events: tuple[type[BlockEvent], ...]
    priority: int = Priority.NORMAL
    process_cancelled: bool = False

    def handles(self, event: BlockEvent) -> bool:
        """Event type matches one this system subscribed to."""
        return isinstance(event, self.events)

    def accepts(self, event: BlockEvent) -> bool:
        """Whether the system should run for this event right now.

        Cancelled events are skipped unless the system opted in with
        `process_cancelled`.
        """
        if not self.handles(event):
            return False
        return self.process_cancelled or not event.cancelled

"""System decorator.

Usage:
    # Runs only on events nobody cancelled
    @system(BreakBlockEvent, DamageBlockEvent)
    def protect_shops(world: World, event: BlockEvent) -> None:
        ...

    # Runs before everyone else, even on cancelled events
    @system.first(UseBlockEvent)
    def resolve_shop_use(world: World, event: UseBlockEvent) -> None:
        ...
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from chestshops.core.events import BlockEvent
from chestshops.core.system.models import Priority, SystemDescriptor


class _SystemDecorator:
    """System decorator factory. Used as @system(...) or @system.first(...)."""

    def __call__(
        self,
        *events: type[BlockEvent],
        priority: int = Priority.NORMAL,
        process_cancelled: bool = False,
    ) -> Callable[[Callable[..., Any]], SystemDescriptor]:
        """Subscribe a function to one or more event types.

        Args:
            *events: Event classes the system handles; subclasses match too.
            priority: Dispatch order, lower first. See Priority.
            process_cancelled: Also run when an earlier system cancelled.

        Returns:
            Decorator turning the function into a SystemDescriptor.

        Raises:
            ValueError: If no event type is given.
        """
        if not events:
            raise ValueError("A system must subscribe to at least one event type")

        def decorator(fn: Callable[..., Any]) -> SystemDescriptor:
            return SystemDescriptor(
                name=fn.__name__,
                run=fn,
                events=tuple(events),
                priority=priority,
                process_cancelled=process_cancelled,
            )

        return decorator

    def first(self, *events: type[BlockEvent]) -> Callable[[Callable[..., Any]], SystemDescriptor]:
        """Earliest priority, processing cancelled events.

        For systems that must see an event before any other plugin's
        decision sticks, and may reverse that decision.
        """
        return self(*events, priority=Priority.FIRST, process_cancelled=True)


system = _SystemDecorator()

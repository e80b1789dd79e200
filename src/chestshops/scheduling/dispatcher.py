"""Priority-ordered event dispatcher.

Usage:
    dispatcher = EventDispatcher()
    dispatcher.register_system(resolve_shop_use)
    dispatcher.register_system(protect_shop_blocks)
    event = dispatcher.dispatch(world, UseBlockEvent(player, pos))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from chestshops.core.events import BlockEvent
from chestshops.core.system import SystemDescriptor
from chestshops.scheduling.models import DispatcherConfig, DispatchPlan

if TYPE_CHECKING:
    from chestshops.world.world import World

logger = logging.getLogger(__name__)

EventT = TypeVar("EventT", bound=BlockEvent)


class EventDispatcher:
    """Runs subscribed systems for each event in priority order.

    Each system sees the event's `cancelled` flag as left by the systems
    before it. Systems that did not opt into cancelled events are skipped
    while the flag is set.

    Args:
        config: Dispatcher configuration (failure isolation).
    """

    def __init__(self, config: DispatcherConfig | None = None) -> None:
        self._config = config or DispatcherConfig()
        self._systems: list[SystemDescriptor] = []
        self._plans: dict[type, DispatchPlan] = {}

    @property
    def systems(self) -> tuple[SystemDescriptor, ...]:
        return tuple(self._systems)

    def register_system(self, descriptor: SystemDescriptor) -> None:
        """Register a system. Invalidates cached dispatch plans."""
        self._systems.append(descriptor)
        self._plans.clear()

    def build_plan(self, event_type: type) -> DispatchPlan:
        """Ordered list of systems that subscribe to `event_type`."""
        subscribed = [
            descriptor
            for descriptor in self._systems
            if any(issubclass(event_type, handled) for handled in descriptor.events)
        ]
        # sorted() is stable, so registration order breaks priority ties
        subscribed.sort(key=lambda descriptor: descriptor.priority)
        return DispatchPlan(event_type=event_type, systems=subscribed)

    def dispatch(self, world: World, event: EventT) -> EventT:
        """Run every accepting system against the event.

        Args:
            world: World passed to each system.
            event: Event to process; mutated in place.

        Returns:
            The same event, with its final cancelled state.

        Raises:
            Exception: Whatever a system raised, when failure isolation is off.
        """
        plan = self._plans.get(type(event))
        if plan is None:
            plan = self.build_plan(type(event))
            self._plans[type(event)] = plan

        for descriptor in plan.systems:
            if not descriptor.accepts(event):
                continue
            try:
                descriptor.run(world, event)
            except Exception:
                if not self._config.isolate_failures:
                    raise
                logger.exception(
                    "System %s failed on %s at %s",
                    descriptor.name,
                    type(event).__name__,
                    event.target,
                )
        return event

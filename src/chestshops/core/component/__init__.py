"""Component decorator."""

from chestshops.core.component.core import component, is_component

__all__ = [
    "component",
    "is_component",
]

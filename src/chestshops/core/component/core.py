"""Component decorator.

Usage:
    @component
    @dataclass(slots=True)
    class Transform:
        x: float
        y: float
        z: float
"""

from __future__ import annotations

from dataclasses import is_dataclass
from typing import Any

_component_types: set[type] = set()


def _is_pydantic(cls: type) -> bool:
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def component(cls: type | None = None) -> Any:
    """Mark a dataclass or Pydantic model as a component type.

    Works bare (`@component`) or called (`@component()`). Apply it after
    `@dataclass`.

    Args:
        cls: The class to mark, or None when called with parentheses.

    Returns:
        The decorated class, or a decorator when called with parentheses.

    Raises:
        TypeError: If the class is neither a dataclass nor a Pydantic model.
    """

    def decorator(c: type) -> type:
        if not (is_dataclass(c) or _is_pydantic(c)):
            raise TypeError(
                f"Component {c.__name__} must be a dataclass or Pydantic model. "
                f"Did you forget @dataclass decorator?"
            )
        _component_types.add(c)
        return c

    if cls is None:
        return decorator
    return decorator(cls)


def is_component(obj: Any) -> bool:
    """Check whether an instance's type was decorated with @component."""
    return type(obj) in _component_types

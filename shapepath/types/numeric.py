"""Numeric boundary for path coordinates.

Coordinates are stored opaquely. The only capability required from a numeric
backend is lifting a Python literal into its own value type.
"""

from typing import Any, Protocol, TypeVar

Num = TypeVar("Num")

# A coordinate pair as accepted by the builder methods
Point = tuple[Any, Any]


class Lift(Protocol):
    """Callable that turns a literal into a backend numeric value."""

    def __call__(self, value: float, /) -> Any: ...


def const_of(value: float) -> float:
    """Lift a literal into the default (float) numeric type."""
    return float(value)

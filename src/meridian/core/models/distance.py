"""
Distance values for shortest-path results.

A distance is either a finite weight (any real number type the caller uses)
or the ``INFINITY`` singleton. ``INFINITY`` absorbs addition and compares
greater than every finite value, so an unreachable leg can never produce a
finite-looking total.
"""

from decimal import Decimal
from numbers import Real
from typing import Any, Union


class _Infinity:
    """Positive-infinity sentinel for unreachable distances."""

    _instance = None

    __slots__ = ()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "INFINITY"

    def __str__(self) -> str:
        return "∞"

    def __reduce__(self):
        return (_Infinity, ())

    def __hash__(self) -> int:
        return hash(float("inf"))

    def __eq__(self, other: Any) -> bool:
        return other is self

    def __ne__(self, other: Any) -> bool:
        return other is not self

    def __lt__(self, other: Any) -> bool:
        return False

    def __le__(self, other: Any) -> bool:
        return other is self

    def __gt__(self, other: Any) -> bool:
        return other is not self

    def __ge__(self, other: Any) -> bool:
        return True

    def __add__(self, other: Any) -> "_Infinity":
        return self

    __radd__ = __add__


INFINITY = _Infinity()

# Type alias for finite weights and distances
Weight = Union[int, float, Decimal, Real]
Distance = Union[Weight, _Infinity]


def is_infinite(value: Any) -> bool:
    """Return True if value is the INFINITY sentinel."""
    return value is INFINITY


def is_finite(value: Any) -> bool:
    """Return True if value is a finite distance."""
    return value is not INFINITY


def add_distance(distance: Distance, weight: Weight) -> Distance:
    """Add a weight to a distance, keeping INFINITY absorbing."""
    if distance is INFINITY:
        return INFINITY
    return distance + weight


def is_better_cost(new_cost: Distance, old_cost: Distance) -> bool:
    """Return True if new_cost strictly improves on old_cost.

    Comparison is exact; ties never count as improvements, so the first
    path found among equal-cost alternatives is kept.
    """
    if new_cost is INFINITY:
        return False
    if old_cost is INFINITY:
        return True
    return new_cost < old_cost

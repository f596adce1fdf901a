"""
Core domain models package for the shortest-path engine.

This package provides the fundamental value types: directed weighted edges
and distances with an absorbing infinity sentinel.
"""

from .distance import (
    INFINITY,
    Distance,
    Weight,
    add_distance,
    is_better_cost,
    is_finite,
    is_infinite,
)
from .edge import Edge, validate_weight

__all__ = [
    # Distance values
    "INFINITY",
    "Distance",
    "Weight",
    "add_distance",
    "is_better_cost",
    "is_finite",
    "is_infinite",
    # Edge models
    "Edge",
    "validate_weight",
]

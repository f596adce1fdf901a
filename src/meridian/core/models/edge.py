"""
Edge model for weighted graphs.

This module defines the immutable directed edge stored in a ``WeightedGraph``
adjacency list together with the weight validation applied on insertion.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from numbers import Real
from typing import Hashable

from .distance import Weight


def validate_weight(weight: Weight) -> Weight:
    """
    Check that a weight is a finite real number.

    Args:
        weight: Candidate edge weight

    Returns:
        The weight, unchanged

    Raises:
        TypeError: If the weight is not a real number (booleans included)
        ValueError: If the weight is NaN or infinite
    """
    if isinstance(weight, bool) or not isinstance(weight, (Real, Decimal)):
        raise TypeError(f"Edge weight must be numeric, got {type(weight).__name__}")
    if isinstance(weight, Decimal):
        if not weight.is_finite():
            raise ValueError("Edge weight must be finite number")
    elif math.isnan(weight) or math.isinf(weight):
        raise ValueError("Edge weight must be finite number")
    return weight


@dataclass(frozen=True)
class Edge:
    """
    Directed weighted edge.

    Attributes:
        source: Vertex the edge leaves
        destination: Vertex the edge enters
        weight: Finite real weight, possibly negative
    """

    source: Hashable
    destination: Hashable
    weight: Weight

    def __post_init__(self):
        """Validate edge after initialization."""
        validate_weight(self.weight)

    @property
    def is_self_loop(self) -> bool:
        """True if the edge starts and ends at the same vertex."""
        return self.source == self.destination

    def reversed(self) -> "Edge":
        """Return the mirrored edge with the same weight."""
        return Edge(self.destination, self.source, self.weight)

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination} (weight: {self.weight})"

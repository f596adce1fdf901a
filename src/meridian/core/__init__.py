"""Core graph functionality."""

from .exceptions import (
    ConfigurationError,
    EmptyQueueError,
    GraphOperationError,
    NegativeCycleError,
    NegativeWeightError,
    NodeNotFoundError,
    ResourceNotFoundError,
    ValidationError,
)
from .models import INFINITY, Edge, is_finite, is_infinite
from .graph import WeightedGraph

__all__ = [
    "ConfigurationError",
    "Edge",
    "EmptyQueueError",
    "GraphOperationError",
    "INFINITY",
    "NegativeCycleError",
    "NegativeWeightError",
    "NodeNotFoundError",
    "ResourceNotFoundError",
    "ValidationError",
    "WeightedGraph",
    "is_finite",
    "is_infinite",
]

"""
Utility functions for shortest-path operations.
"""

import os
import time
import logging
from contextlib import contextmanager
from typing import Dict, Generator, Hashable, List, Optional, Sequence

import psutil

from ..exceptions import NegativeWeightError, NodeNotFoundError
from ..graph import WeightedGraph
from ..models import Weight
from .models import PathValidationError, PerformanceMetrics

logger = logging.getLogger(__name__)


def reconstruct_path(
    predecessors: Dict[Hashable, Optional[Hashable]],
    source: Hashable,
    destination: Hashable,
) -> List[Hashable]:
    """
    Walk a predecessor table back from destination to source.

    Args:
        predecessors: Vertex -> vertex it was last improved from (None if none)
        source: Vertex the path must start at
        destination: Vertex the path must end at

    Returns:
        Vertices from source to destination, or an empty list when the chain
        ends at None without meeting the source

    Raises:
        PathValidationError: If the chain revisits a vertex
    """
    path = [destination]
    seen = {destination}
    current = destination
    while current != source:
        current = predecessors.get(current)
        if current is None:
            return []
        if current in seen:
            raise PathValidationError(f"Predecessor chain loops back at vertex {current}")
        seen.add(current)
        path.append(current)
    path.reverse()
    return path


def path_weight(graph: WeightedGraph, path: Sequence[Hashable]) -> Weight:
    """
    Sum the cheapest edge weight between each consecutive pair of a path.

    Raises:
        PathValidationError: If two consecutive vertices are not connected
    """
    total: Weight = 0
    for source, destination in zip(path, path[1:]):
        weight = graph.edge_weight(source, destination)
        if weight is None:
            raise PathValidationError(f"Edge from {source} to {destination} not found in graph")
        total += weight
    return total


def validate_vertex(graph: WeightedGraph, vertex: Hashable, role: str = "Source") -> None:
    """Raise NodeNotFoundError if the vertex is not in the graph."""
    if not graph.has_vertex(vertex):
        raise NodeNotFoundError(f"{role} vertex '{vertex}' not found")


def check_non_negative_weights(graph: WeightedGraph) -> None:
    """
    Reject graphs that contain a negative edge weight.

    Raises:
        NegativeWeightError: On the first negative edge found
    """
    for edge in graph.edges():
        if edge.weight < 0:
            raise NegativeWeightError(
                f"Negative weight {edge.weight} found on edge "
                f"{edge.source} -> {edge.destination}"
            )


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


class MemoryManager:
    """Peak resident-memory tracking for graph algorithms."""

    def __init__(self, check_interval: float = 0.1):
        """Initialize memory manager."""
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = time.time()
        self._check_interval = check_interval

    def check_memory(self, force: bool = False) -> None:
        """Sample memory usage, at most once per check interval unless forced."""
        current_time = time.time()
        if not force and current_time - self._last_check < self._check_interval:
            return
        self._last_check = current_time
        self._peak_memory = max(self._peak_memory, get_memory_usage())

    @property
    def peak_memory(self) -> int:
        """Peak memory usage in bytes."""
        return self._peak_memory

    @property
    def peak_memory_mb(self) -> float:
        """Peak memory usage in MB."""
        return self._peak_memory / 1024 / 1024


class _NullMemoryManager:
    """Stand-in used when memory tracking is off."""

    peak_memory = None

    def check_memory(self, force: bool = False) -> None:
        pass


@contextmanager
def search_context(
    operation: str, track_memory: bool = False
) -> Generator[tuple, None, None]:
    """
    Context manager yielding ``(metrics, memory_manager)`` for one run.

    End time and peak memory are recorded when the block exits, whether it
    returns or raises.
    """
    metrics = PerformanceMetrics(operation=operation, start_time=time.time())
    memory_manager = MemoryManager() if track_memory else _NullMemoryManager()
    try:
        yield metrics, memory_manager
    finally:
        memory_manager.check_memory(force=True)
        metrics.end_time = time.time()
        metrics.max_memory_used = memory_manager.peak_memory
        logger.debug(
            "%s finished in %.3fms (explored=%d, relaxed=%d)",
            operation,
            metrics.duration,
            metrics.nodes_explored,
            metrics.edges_relaxed,
        )

"""
Data models for shortest-path computation.

This module provides the result structures returned by the algorithms:
- ShortestPaths: Single-source distance and predecessor tables
- DistanceMatrix: All-pairs distances with path recovery
- NegativeCycleDetected: Result state for graphs with a negative cycle
- PerformanceMetrics: Container for algorithm performance metrics
- PathValidationError: Exception for broken paths and predecessor chains

Negative cycles are reported as values so callers have to branch on them
before trusting any distance:

Example:
    >>> result = bellman_ford(graph, "A")
    >>> if isinstance(result, NegativeCycleDetected):
    ...     print(f"cycle through {result.cycle}")
    ... else:
    ...     distances, predecessors = result
"""

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterator, List, Optional, Tuple, Union

from ..exceptions import NegativeCycleError, NodeNotFoundError
from ..models import INFINITY, Distance, is_finite

# Constants
INFINITY_SYMBOL = "∞"
MATRIX_CELL_WIDTH = 3


class PathValidationError(Exception):
    """
    Raised when a path or predecessor chain fails validation checks.

    This exception indicates issues such as:
    - A predecessor table whose chain loops back on itself
    - Consecutive path vertices without a connecting edge
    - A next-hop chain that never reaches its destination
    """

    pass


@dataclass
class PerformanceMetrics:
    """
    Container for shortest-path performance metrics.

    Attributes:
        operation: Name of the algorithm run
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        nodes_explored: Number of vertices finalized or scanned
        edges_relaxed: Number of successful relaxations
        max_memory_used: Peak resident memory during the run (bytes), if tracked

    Example:
        >>> metrics = PerformanceMetrics(operation="dijkstra", start_time=time())
        >>> # ... run algorithm ...
        >>> metrics.end_time = time()
        >>> print(f"Operation took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    nodes_explored: int = 0
    edges_relaxed: int = 0
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """Operation duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """Convert metrics to dictionary format."""
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "nodes_explored": self.nodes_explored,
            "edges_relaxed": self.edges_relaxed,
            "max_memory_used": self.max_memory_used,
        }


@dataclass
class ShortestPaths:
    """
    Single-source shortest-path tree.

    Unpacks as ``(distances, predecessors)``. Both tables cover every vertex
    of the graph: unreached vertices map to ``INFINITY`` and ``None``.

    Attributes:
        source: Source vertex of the run
        distances: Best total weight per vertex
        predecessors: Vertex each vertex was last improved from
        metrics: Performance metrics of the run
    """

    source: Hashable
    distances: Dict[Hashable, Distance]
    predecessors: Dict[Hashable, Optional[Hashable]]
    metrics: Optional[PerformanceMetrics] = field(default=None, compare=False)

    def __iter__(self) -> Iterator:
        yield self.distances
        yield self.predecessors

    def distance_to(self, vertex: Hashable) -> Distance:
        """Get the distance to a vertex."""
        try:
            return self.distances[vertex]
        except KeyError:
            raise NodeNotFoundError(f"Vertex '{vertex}' not found in the result") from None

    def is_reachable(self, vertex: Hashable) -> bool:
        """Check if the vertex is reachable from the source."""
        return is_finite(self.distance_to(vertex))

    def path_to(self, vertex: Hashable) -> List[Hashable]:
        """Reconstruct the path from the source; empty if unreachable."""
        from .utils import reconstruct_path

        self.distance_to(vertex)
        return reconstruct_path(self.predecessors, self.source, vertex)

    def unwrap(self) -> "ShortestPaths":
        """Return self; mirrors ``NegativeCycleDetected.unwrap``."""
        return self

    @property
    def has_negative_cycle(self) -> bool:
        return False


@dataclass(frozen=True)
class NegativeCycleDetected:
    """
    Result state for a graph containing a negative-weight cycle.

    Attributes:
        algorithm: Name of the algorithm that detected the cycle
        cycle: For Bellman-Ford, the cycle vertices in traversal order.
            For Floyd-Warshall, every vertex with a negative closed walk.
        source: Source vertex of a single-source run, None for all-pairs
        metrics: Performance metrics of the run
    """

    algorithm: str
    cycle: Tuple[Hashable, ...]
    source: Optional[Hashable] = None
    metrics: Optional[PerformanceMetrics] = field(default=None, compare=False)

    @property
    def has_negative_cycle(self) -> bool:
        return True

    def unwrap(self):
        """Raise ``NegativeCycleError`` for callers that prefer exceptions."""
        raise NegativeCycleError(
            f"Negative cycle detected by {self.algorithm}: {list(self.cycle)}", self.cycle
        )

    def __str__(self) -> str:
        return f"Negative cycle detected ({self.algorithm}): {' -> '.join(map(str, self.cycle))}"


class DistanceMatrix:
    """
    All-pairs shortest distances.

    Rows and columns follow the graph's vertex order. Cells are addressed by
    vertex, either ``matrix.distance(u, v)`` or ``matrix[u, v]``.

    Attributes:
        vertices: Vertices in row/column order
        metrics: Performance metrics of the run
    """

    def __init__(
        self,
        vertices: List[Hashable],
        dist: List[List[Distance]],
        successors: List[List[Optional[int]]],
        metrics: Optional[PerformanceMetrics] = None,
    ):
        self.vertices = list(vertices)
        self.metrics = metrics
        self._dist = dist
        self._next = successors
        self._position: Dict[Hashable, int] = {v: i for i, v in enumerate(self.vertices)}

    def _index(self, vertex: Hashable) -> int:
        try:
            return self._position[vertex]
        except KeyError:
            raise NodeNotFoundError(f"Vertex '{vertex}' not found in the matrix") from None

    def distance(self, source: Hashable, destination: Hashable) -> Distance:
        """Get the shortest distance from source to destination."""
        return self._dist[self._index(source)][self._index(destination)]

    def __getitem__(self, pair: Tuple[Hashable, Hashable]) -> Distance:
        source, destination = pair
        return self.distance(source, destination)

    def row(self, source: Hashable) -> Dict[Hashable, Distance]:
        """Get the distances from source to every vertex."""
        values = self._dist[self._index(source)]
        return dict(zip(self.vertices, values))

    def to_list(self) -> List[List[Distance]]:
        """Copy the matrix as nested lists."""
        return [list(row) for row in self._dist]

    def path(self, source: Hashable, destination: Hashable) -> List[Hashable]:
        """
        Reconstruct a shortest path from the successor matrix.

        Returns:
            Vertex sequence from source to destination, empty if unreachable

        Raises:
            PathValidationError: If the successor chain does not terminate
        """
        i, j = self._index(source), self._index(destination)
        if i == j:
            return [source]
        if self._next[i][j] is None:
            return []

        path = [source]
        current = i
        while current != j:
            current = self._next[current][j]
            if current is None or len(path) > len(self.vertices):
                raise PathValidationError(
                    f"Successor chain from {source} to {destination} is broken"
                )
            path.append(self.vertices[current])
        return path

    def format(self, cell_width: int = MATRIX_CELL_WIDTH) -> str:
        """Render the matrix as a text table with ``∞`` for unreachable cells."""
        labels = [str(v) for v in self.vertices]
        width = max([cell_width] + [len(label) for label in labels])
        for row in self._dist:
            width = max([width] + [len(str(value)) for value in row if value is not INFINITY])

        lines = [" " * (width + 2) + " ".join(label.rjust(width) for label in labels)]
        for label, row in zip(labels, self._dist):
            cells = [
                INFINITY_SYMBOL.rjust(width) if value is INFINITY else str(value).rjust(width)
                for value in row
            ]
            lines.append(f"{label.rjust(width)}: " + " ".join(cells))
        return "\n".join(lines)

    def unwrap(self) -> "DistanceMatrix":
        """Return self; mirrors ``NegativeCycleDetected.unwrap``."""
        return self

    @property
    def has_negative_cycle(self) -> bool:
        return False

    def __len__(self) -> int:
        return len(self.vertices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DistanceMatrix):
            return NotImplemented
        return self.vertices == other.vertices and self._dist == other._dist

    def __repr__(self) -> str:
        return f"DistanceMatrix(vertices={self.vertices!r})"

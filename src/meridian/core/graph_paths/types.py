"""Type definitions for shortest-path computation."""

from enum import Enum
from typing import Callable, Dict, Hashable, List, Optional

from ..models import Distance, Weight


class PathType(Enum):
    """Enumeration of shortest-path algorithms."""

    DIJKSTRA = "dijkstra"  # Non-negative weights only
    BELLMAN_FORD = "bellman_ford"  # Supports negative weights, detects cycles
    FLOYD_WARSHALL = "floyd_warshall"  # All pairs, detects cycles
    A_STAR = "a_star"  # Single pair, non-negative weights, needs a heuristic


# Type alias for vertex identifiers
Vertex = Hashable

# Type alias for best-known distance per vertex
DistanceTable = Dict[Vertex, Distance]

# Type alias for the vertex each vertex was last improved from
PredecessorTable = Dict[Vertex, Optional[Vertex]]

# Type alias for A* heuristics: estimated remaining cost to the goal
Heuristic = Callable[[Vertex], Weight]

# Type alias for a reconstructed path
VertexPath = List[Vertex]


def zero_heuristic(vertex: Vertex) -> int:
    """Heuristic that always estimates zero; A* then behaves like Dijkstra."""
    return 0

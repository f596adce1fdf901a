"""
Weighted graph data structure with an adjacency list representation.

This module provides the ``WeightedGraph`` class consumed by every shortest-path
algorithm. The graph stores directed edges; undirected connections are modelled
by inserting the mirrored edge at insertion time, so after construction the
graph has no notion of "undirected".

Vertices are kept in insertion order, and so are the outgoing edges of each
vertex. Algorithms that relax "every edge in a fixed order" rely on this.

The graph performs no internal locking. It must not be mutated while an
algorithm runs on it; use ``copy()`` to hand a query an isolated snapshot.
"""

from typing import Dict, Hashable, Iterable, Iterator, List, Optional, Tuple

from .exceptions import NodeNotFoundError
from .models import Edge, Weight

# Default directedness for new graphs
DEFAULT_DIRECTED = True


class WeightedGraph:
    """
    Graph with numeric edge weights.

    Multi-edges between the same pair and self-loops are accepted without
    error; algorithms relax every stored edge and keep the strictly best one.

    Attributes:
        directed (bool): Default directedness used by ``add_edge``
        _adjacency (Dict[Hashable, List[Edge]]): Outgoing edges per vertex
        _edge_count (int): Number of stored directed edges
    """

    def __init__(self, directed: bool = DEFAULT_DIRECTED):
        """
        Initialize an empty graph.

        Args:
            directed (bool): Whether ``add_edge`` inserts only the forward edge
                by default. Individual calls may override this.
        """
        self.directed = directed
        self._adjacency: Dict[Hashable, List[Edge]] = {}
        self._edge_count = 0

    def add_vertex(self, vertex: Hashable) -> None:
        """Add a vertex. Adding a known vertex is a no-op."""
        if vertex not in self._adjacency:
            self._adjacency[vertex] = []

    def add_edge(
        self,
        source: Hashable,
        destination: Hashable,
        weight: Weight,
        directed: Optional[bool] = None,
    ) -> None:
        """
        Add a weighted edge, registering unknown endpoints.

        Args:
            source: Vertex the edge leaves
            destination: Vertex the edge enters
            weight: Finite real weight
            directed: Overrides the graph default; False also stores the
                mirrored edge ``destination -> source``

        Raises:
            TypeError: If the weight is not numeric
            ValueError: If the weight is NaN or infinite
        """
        edge = Edge(source, destination, weight)
        if directed is None:
            directed = self.directed

        self.add_vertex(source)
        self.add_vertex(destination)
        self._adjacency[source].append(edge)
        self._edge_count += 1

        if not directed:
            self._adjacency[destination].append(edge.reversed())
            self._edge_count += 1

    def add_edges(self, edges: Iterable[Tuple[Hashable, Hashable, Weight]]) -> None:
        """Add several ``(source, destination, weight)`` triples."""
        for source, destination, weight in edges:
            self.add_edge(source, destination, weight)

    def vertices(self) -> Iterator[Hashable]:
        """Iterate over vertices in insertion order."""
        return iter(self._adjacency)

    def neighbors(self, vertex: Hashable) -> Iterator[Tuple[Hashable, Weight]]:
        """
        Iterate over ``(destination, weight)`` pairs leaving a vertex.

        Raises:
            NodeNotFoundError: If the vertex is not in the graph
        """
        return iter([(edge.destination, edge.weight) for edge in self.out_edges(vertex)])

    def out_edges(self, vertex: Hashable) -> List[Edge]:
        """Get the outgoing edges of a vertex."""
        try:
            return list(self._adjacency[vertex])
        except KeyError:
            raise NodeNotFoundError(f"Vertex '{vertex}' not found in the graph") from None

    def edges(self) -> Iterator[Edge]:
        """Iterate over every stored directed edge, grouped by source vertex."""
        for edges in self._adjacency.values():
            yield from edges

    def edge_weight(self, source: Hashable, destination: Hashable) -> Optional[Weight]:
        """Get the cheapest weight among edges source -> destination, if any."""
        weights = [
            edge.weight for edge in self.out_edges(source) if edge.destination == destination
        ]
        return min(weights) if weights else None

    def has_vertex(self, vertex: Hashable) -> bool:
        """Check if a vertex exists in the graph."""
        return vertex in self._adjacency

    def has_edge(self, source: Hashable, destination: Hashable) -> bool:
        """Check if at least one edge source -> destination exists."""
        return any(edge.destination == destination for edge in self._adjacency.get(source, ()))

    def has_negative_weights(self) -> bool:
        """Check if any edge carries a negative weight."""
        return any(edge.weight < 0 for edge in self.edges())

    def min_edge_weight(self) -> Optional[Weight]:
        """Get the smallest edge weight, or None for an edgeless graph."""
        return min((edge.weight for edge in self.edges()), default=None)

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        """Number of stored directed edges (mirrored edges count twice)."""
        return self._edge_count

    def copy(self) -> "WeightedGraph":
        """Return an independent copy sharing only immutable edges."""
        clone = WeightedGraph(directed=self.directed)
        clone._adjacency = {vertex: list(edges) for vertex, edges in self._adjacency.items()}
        clone._edge_count = self._edge_count
        return clone

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[Hashable, Hashable, Weight]],
        directed: bool = DEFAULT_DIRECTED,
    ) -> "WeightedGraph":
        """Create a graph from ``(source, destination, weight)`` triples."""
        graph = cls(directed=directed)
        graph.add_edges(edges)
        return graph

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return (
            f"WeightedGraph(directed={self.directed}, vertices={self.vertex_count}, "
            f"edges={self.edge_count})"
        )

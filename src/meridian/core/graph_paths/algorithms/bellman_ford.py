"""
Bellman-Ford algorithm for single-source shortest paths with negative weights.

Every edge is relaxed in the graph's insertion order, up to ``|V| - 1`` passes.
A further pass that still improves a distance proves a negative cycle reachable
from the source; the cycle itself is recovered from the predecessor chain.
"""

import logging
from typing import Dict, Hashable, List, Optional, Union

from ...graph import WeightedGraph
from ...models import INFINITY, Distance, Edge, add_distance, is_better_cost
from ..base import PathFinder
from ..models import NegativeCycleDetected, ShortestPaths
from ..utils import search_context

logger = logging.getLogger(__name__)

BellmanFordResult = Union[ShortestPaths, NegativeCycleDetected]


class BellmanFordFinder(PathFinder[BellmanFordResult]):
    """Single-source shortest paths tolerant of negative weights."""

    operation = "bellman_ford"

    def run(self, source: Hashable) -> BellmanFordResult:
        """
        Compute distances and predecessors from source, or report a negative cycle.

        Args:
            source: Vertex to start from

        Returns:
            ShortestPaths, or NegativeCycleDetected when a negative cycle is
            reachable from source

        Raises:
            NodeNotFoundError: If source is not in the graph
        """
        self.validate_source(source)

        with search_context(self.operation, self.track_memory) as (metrics, memory_manager):
            logger.debug("Starting Bellman-Ford algorithm from %s", source)

            vertices = list(self.graph.vertices())
            edges = list(self.graph.edges())
            distances: Dict[Hashable, Distance] = {v: INFINITY for v in vertices}
            predecessors: Dict[Hashable, Optional[Hashable]] = {v: None for v in vertices}
            distances[source] = 0

            for iteration in range(len(vertices) - 1):
                memory_manager.check_memory()
                metrics.nodes_explored += len(vertices)
                updated = False

                for edge in edges:
                    if self._relax(edge, distances, predecessors):
                        metrics.edges_relaxed += 1
                        updated = True
                        logger.debug(
                            "Iteration %d: Updated distance to %s: %s",
                            iteration + 1,
                            edge.destination,
                            distances[edge.destination],
                        )

                if not updated:
                    logger.debug("No updates in iteration %d, terminating early", iteration + 1)
                    break

            if self._relax_all(edges, distances, predecessors):
                cycle = self._extract_cycle(edges, distances, predecessors)
                logger.debug("Negative cycle detected: %s", cycle)
                return NegativeCycleDetected(
                    algorithm=self.operation,
                    cycle=tuple(cycle),
                    source=source,
                    metrics=metrics,
                )

        return ShortestPaths(source, distances, predecessors, metrics)

    @classmethod
    def _relax_all(
        cls,
        edges: List[Edge],
        distances: Dict[Hashable, Distance],
        predecessors: Dict[Hashable, Optional[Hashable]],
    ) -> bool:
        """Relax every edge once; return True if any distance improved."""
        updated = False
        for edge in edges:
            if cls._relax(edge, distances, predecessors):
                updated = True
        return updated

    @staticmethod
    def _relax(
        edge: Edge,
        distances: Dict[Hashable, Distance],
        predecessors: Dict[Hashable, Optional[Hashable]],
    ) -> bool:
        """Relax one edge; return True if it strictly improved a distance."""
        new_dist = add_distance(distances[edge.source], edge.weight)
        if is_better_cost(new_dist, distances[edge.destination]):
            distances[edge.destination] = new_dist
            predecessors[edge.destination] = edge.source
            return True
        return False

    @classmethod
    def _extract_cycle(
        cls,
        edges: List[Edge],
        distances: Dict[Hashable, Distance],
        predecessors: Dict[Hashable, Optional[Hashable]],
    ) -> List[Hashable]:
        """
        Recover a negative cycle from the predecessor graph.

        Any cycle in the predecessor graph has negative weight. While a negative
        cycle is reachable, distances keep falling, so one has to appear after
        finitely many further passes.
        """
        cycle = cls._find_predecessor_cycle(predecessors)
        while not cycle:
            cls._relax_all(edges, distances, predecessors)
            cycle = cls._find_predecessor_cycle(predecessors)
        return cycle

    @staticmethod
    def _find_predecessor_cycle(
        predecessors: Dict[Hashable, Optional[Hashable]],
    ) -> List[Hashable]:
        """Return a cycle of the predecessor graph in traversal order, or []."""
        done = set()
        for start in predecessors:
            walk: List[Hashable] = []
            on_walk = set()
            vertex = start
            while vertex is not None and vertex not in done:
                if vertex in on_walk:
                    cycle = walk[walk.index(vertex) :]
                    cycle.reverse()
                    return cycle
                on_walk.add(vertex)
                walk.append(vertex)
                vertex = predecessors[vertex]
            done.update(walk)
        return []


def bellman_ford(
    graph: WeightedGraph, source: Hashable, track_memory: bool = False
) -> BellmanFordResult:
    """Run the Bellman-Ford algorithm from source; see ``BellmanFordFinder.run``."""
    return BellmanFordFinder(graph, track_memory=track_memory).run(source)

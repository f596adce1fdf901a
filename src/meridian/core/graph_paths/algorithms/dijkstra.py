"""
Dijkstra's algorithm for single-source shortest paths with non-negative weights.
"""

import logging
from typing import Dict, Hashable, Optional, Set

from ...graph import WeightedGraph
from ...models import INFINITY, Distance, add_distance, is_better_cost
from ..base import PathFinder
from ..models import ShortestPaths
from ..priority_queue import MinPriorityQueue
from ..utils import check_non_negative_weights, search_context

logger = logging.getLogger(__name__)


class DijkstraFinder(PathFinder[ShortestPaths]):
    """Single-source shortest paths on graphs without negative weights."""

    operation = "dijkstra"

    def run(self, source: Hashable) -> ShortestPaths:
        """
        Compute distances and predecessors from source to every vertex.

        Args:
            source: Vertex to start from

        Returns:
            ShortestPaths covering every vertex of the graph

        Raises:
            NodeNotFoundError: If source is not in the graph
            NegativeWeightError: If any edge weight is negative
        """
        self.validate_source(source)
        check_non_negative_weights(self.graph)

        with search_context(self.operation, self.track_memory) as (metrics, memory_manager):
            logger.debug("Starting Dijkstra's algorithm from %s", source)

            distances: Dict[Hashable, Distance] = {v: INFINITY for v in self.graph.vertices()}
            predecessors: Dict[Hashable, Optional[Hashable]] = {
                v: None for v in self.graph.vertices()
            }
            distances[source] = 0
            finalized: Set[Hashable] = set()

            pq = MinPriorityQueue()
            pq.insert(source, 0)

            while pq:
                memory_manager.check_memory()
                current, current_dist = pq.extract_min()
                if current in finalized:
                    continue
                finalized.add(current)
                metrics.nodes_explored += 1

                logger.debug("Processing vertex %s (distance: %s)", current, current_dist)

                for neighbor, weight in self.graph.neighbors(current):
                    new_dist = add_distance(distances[current], weight)
                    if is_better_cost(new_dist, distances[neighbor]):
                        distances[neighbor] = new_dist
                        predecessors[neighbor] = current
                        pq.add_or_update(neighbor, new_dist)
                        metrics.edges_relaxed += 1
                        logger.debug("  Updated distance to %s: %s", neighbor, new_dist)

        return ShortestPaths(source, distances, predecessors, metrics)


def dijkstra(graph: WeightedGraph, source: Hashable, track_memory: bool = False) -> ShortestPaths:
    """Run Dijkstra's algorithm from source; see ``DijkstraFinder.run``."""
    return DijkstraFinder(graph, track_memory=track_memory).run(source)

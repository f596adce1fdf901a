"""
Floyd-Warshall algorithm for all-pairs shortest paths.

Dynamic programming over intermediate vertices in O(V³) time and O(V²) space.
A successor matrix is maintained alongside the distances so any shortest path
can be recovered from the result.
"""

import logging
from typing import Hashable, List, Optional, Union

from ...graph import WeightedGraph
from ...models import INFINITY, Distance, is_better_cost
from ..base import PathFinder
from ..models import DistanceMatrix, NegativeCycleDetected
from ..utils import search_context

logger = logging.getLogger(__name__)

FloydWarshallResult = Union[DistanceMatrix, NegativeCycleDetected]


class FloydWarshallFinder(PathFinder[FloydWarshallResult]):
    """All-pairs shortest paths tolerant of negative weights."""

    operation = "floyd_warshall"

    def run(self) -> FloydWarshallResult:
        """
        Compute the shortest distance between every ordered pair of vertices.

        Returns:
            DistanceMatrix, or NegativeCycleDetected listing every vertex whose
            distance to itself became negative
        """
        with search_context(self.operation, self.track_memory) as (metrics, memory_manager):
            vertices = list(self.graph.vertices())
            n = len(vertices)
            position = {vertex: i for i, vertex in enumerate(vertices)}

            dist: List[List[Distance]] = [
                [0 if i == j else INFINITY for j in range(n)] for i in range(n)
            ]
            successors: List[List[Optional[int]]] = [
                [i if i == j else None for j in range(n)] for i in range(n)
            ]

            # Cheapest direct edge per ordered pair
            for edge in self.graph.edges():
                i, j = position[edge.source], position[edge.destination]
                if is_better_cost(edge.weight, dist[i][j]):
                    dist[i][j] = edge.weight
                    successors[i][j] = j

            logger.debug("Starting Floyd-Warshall algorithm over %d vertices", n)

            for k in range(n):
                memory_manager.check_memory()
                metrics.nodes_explored += 1
                row_k = dist[k]
                for i in range(n):
                    d_ik = dist[i][k]
                    if d_ik is INFINITY:
                        continue
                    row_i = dist[i]
                    for j in range(n):
                        d_kj = row_k[j]
                        if d_kj is INFINITY:
                            continue
                        candidate = d_ik + d_kj
                        if is_better_cost(candidate, row_i[j]):
                            row_i[j] = candidate
                            successors[i][j] = successors[i][k]
                            metrics.edges_relaxed += 1

                if logger.isEnabledFor(logging.DEBUG):
                    partial = DistanceMatrix(vertices, dist, successors)
                    logger.debug(
                        "After considering vertex %s as intermediate:\n%s",
                        vertices[k],
                        partial.format(),
                    )

            negative = [vertices[i] for i in range(n) if is_better_cost(dist[i][i], 0)]
            if negative:
                logger.debug("Negative cycle detected through %s", negative)
                return NegativeCycleDetected(
                    algorithm=self.operation,
                    cycle=tuple(negative),
                    metrics=metrics,
                )

        return DistanceMatrix(vertices, dist, successors, metrics)


def floyd_warshall(graph: WeightedGraph, track_memory: bool = False) -> FloydWarshallResult:
    """Run the Floyd-Warshall algorithm; see ``FloydWarshallFinder.run``."""
    return FloydWarshallFinder(graph, track_memory=track_memory).run()

"""
A* search for a single shortest path guided by a heuristic.

The open set is a ``MinPriorityQueue`` ordered by ``f = g + h``; finalized
vertices go to a closed set and are never reopened.

The heuristic must be admissible (never overestimate the remaining cost) for
the returned path to be optimal. This is a caller obligation: admissibility
is a global property of the graph and is not checked. With an admissible but
inconsistent heuristic a closed vertex is not revisited, so optimality also
requires consistency (``h(u) <= w(u, v) + h(v)`` for every edge).
"""

import logging
from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional, Set

from ...graph import WeightedGraph
from ...models import Distance, add_distance, is_better_cost
from ..base import PathFinder
from ..models import PerformanceMetrics
from ..priority_queue import MinPriorityQueue
from ..types import Heuristic
from ..utils import check_non_negative_weights, reconstruct_path, search_context

logger = logging.getLogger(__name__)


@dataclass
class AStarResult:
    """
    Outcome of the most recent A* run.

    Attributes:
        path: Vertices from start to goal, or None if the goal is unreachable
        cost: Total weight of the path, or None if there is no path
        metrics: Performance metrics of the run
    """

    path: Optional[List[Hashable]]
    cost: Optional[Distance]
    metrics: PerformanceMetrics


class AStarFinder(PathFinder[Optional[List[Hashable]]]):
    """Heuristic-guided single-pair shortest path."""

    operation = "a_star"

    def __init__(self, graph: WeightedGraph, track_memory: bool = False):
        """Initialize finder with graph."""
        super().__init__(graph, track_memory=track_memory)
        self.last_result: Optional[AStarResult] = None

    def run(
        self, start: Hashable, goal: Hashable, heuristic: Heuristic
    ) -> Optional[List[Hashable]]:
        """
        Find a shortest path from start to goal.

        Args:
            start: Vertex to start from
            goal: Vertex to reach
            heuristic: Estimated remaining cost from a vertex to goal

        Returns:
            Vertices from start to goal, or None if goal is unreachable

        Raises:
            NodeNotFoundError: If start or goal is not in the graph
            NegativeWeightError: If any edge weight is negative
        """
        self.validate_nodes(start, goal)
        check_non_negative_weights(self.graph)

        with search_context(self.operation, self.track_memory) as (metrics, memory_manager):
            logger.debug("Starting A* algorithm from %s to %s", start, goal)

            g_score: Dict[Hashable, Distance] = {start: 0}
            came_from: Dict[Hashable, Optional[Hashable]] = {start: None}
            closed: Set[Hashable] = set()

            open_set = MinPriorityQueue()
            open_set.insert(start, add_distance(heuristic(start), 0))

            path: Optional[List[Hashable]] = None
            while open_set:
                memory_manager.check_memory()
                current, f_score = open_set.extract_min()

                if current == goal:
                    path = reconstruct_path(came_from, start, goal)
                    break

                closed.add(current)
                metrics.nodes_explored += 1
                logger.debug("Processing vertex %s (f-score: %s)", current, f_score)

                for neighbor, weight in self.graph.neighbors(current):
                    if neighbor in closed:
                        continue
                    tentative_g = add_distance(g_score[current], weight)
                    if neighbor in g_score and not is_better_cost(
                        tentative_g, g_score[neighbor]
                    ):
                        continue

                    g_score[neighbor] = tentative_g
                    came_from[neighbor] = current
                    f = add_distance(heuristic(neighbor), tentative_g)
                    open_set.add_or_update(neighbor, f)
                    metrics.edges_relaxed += 1
                    logger.debug("  Updated neighbor %s: g=%s, f=%s", neighbor, tentative_g, f)

        cost = g_score[goal] if path is not None else None
        self.last_result = AStarResult(path=path, cost=cost, metrics=metrics)
        if path is None:
            logger.debug("No path from %s to %s", start, goal)
        return path


def a_star(
    graph: WeightedGraph,
    start: Hashable,
    goal: Hashable,
    heuristic: Heuristic,
    track_memory: bool = False,
) -> Optional[List[Hashable]]:
    """Run A* from start to goal; see ``AStarFinder.run``."""
    return AStarFinder(graph, track_memory=track_memory).run(start, goal, heuristic)

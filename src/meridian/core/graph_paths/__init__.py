"""Shortest-path computation over weighted graphs."""

from typing import Any, Hashable, Optional, Union

from ..exceptions import ConfigurationError
from ..graph import WeightedGraph
from .algorithms import (
    AStarFinder,
    AStarResult,
    BellmanFordFinder,
    DijkstraFinder,
    FloydWarshallFinder,
    a_star,
    bellman_ford,
    dijkstra,
    floyd_warshall,
)
from .base import PathFinder
from .models import (
    DistanceMatrix,
    NegativeCycleDetected,
    PathValidationError,
    PerformanceMetrics,
    ShortestPaths,
)
from .priority_queue import MinPriorityQueue
from .types import (
    DistanceTable,
    Heuristic,
    PathType,
    PredecessorTable,
    Vertex,
    zero_heuristic,
)
from .utils import path_weight, reconstruct_path

__all__ = [
    "AStarFinder",
    "AStarResult",
    "BellmanFordFinder",
    "DijkstraFinder",
    "DistanceMatrix",
    "DistanceTable",
    "FloydWarshallFinder",
    "Heuristic",
    "MinPriorityQueue",
    "NegativeCycleDetected",
    "PathFinder",
    "PathFinding",
    "PathType",
    "PathValidationError",
    "PerformanceMetrics",
    "PredecessorTable",
    "ShortestPaths",
    "Vertex",
    "a_star",
    "bellman_ford",
    "dijkstra",
    "floyd_warshall",
    "path_weight",
    "reconstruct_path",
    "zero_heuristic",
]


class PathFinding:
    """Static interface dispatching on ``PathType``."""

    @staticmethod
    def _coerce_path_type(path_type: Union[PathType, str]) -> PathType:
        """Accept a PathType or its value, e.g. ``"bellman_ford"``."""
        if isinstance(path_type, PathType):
            return path_type
        try:
            return PathType(str(path_type).replace("-", "_").lower())
        except ValueError:
            choices = ", ".join(p.value for p in PathType)
            raise ConfigurationError(
                f"Unknown algorithm '{path_type}'; expected one of: {choices}"
            ) from None

    @classmethod
    def shortest_paths(
        cls,
        graph: WeightedGraph,
        source: Hashable,
        path_type: Union[PathType, str] = PathType.DIJKSTRA,
        **kwargs: Any,
    ) -> Union[ShortestPaths, NegativeCycleDetected]:
        """Run a single-source algorithm from source."""
        path_type = cls._coerce_path_type(path_type)
        if path_type == PathType.DIJKSTRA:
            return dijkstra(graph, source, **kwargs)
        if path_type == PathType.BELLMAN_FORD:
            return bellman_ford(graph, source, **kwargs)
        raise ConfigurationError(f"{path_type.value} is not a single-source algorithm")

    @classmethod
    def all_pairs(
        cls, graph: WeightedGraph, **kwargs: Any
    ) -> Union[DistanceMatrix, NegativeCycleDetected]:
        """Run Floyd-Warshall over every pair of vertices."""
        return floyd_warshall(graph, **kwargs)

    @classmethod
    def find_path(
        cls,
        graph: WeightedGraph,
        start: Hashable,
        goal: Hashable,
        path_type: Union[PathType, str] = PathType.DIJKSTRA,
        heuristic: Optional[Heuristic] = None,
        **kwargs: Any,
    ) -> Optional[list]:
        """
        Find one shortest path from start to goal with any algorithm.

        Returns:
            Vertex list, or None when goal is unreachable

        Raises:
            NegativeCycleError: If the chosen algorithm reports a negative cycle
            ConfigurationError: If a heuristic is given to an algorithm without one
        """
        path_type = cls._coerce_path_type(path_type)
        if heuristic is not None and path_type != PathType.A_STAR:
            raise ConfigurationError(f"{path_type.value} does not take a heuristic")

        if path_type == PathType.A_STAR:
            return a_star(graph, start, goal, heuristic or zero_heuristic, **kwargs)
        if path_type == PathType.FLOYD_WARSHALL:
            matrix = floyd_warshall(graph, **kwargs).unwrap()
            return matrix.path(start, goal) or None

        result = cls.shortest_paths(graph, start, path_type, **kwargs).unwrap()
        return result.path_to(goal) or None

from abc import ABC, abstractmethod
from typing import Any, Hashable

from ..graph import WeightedGraph
from .utils import validate_vertex


class PathFinder[T](ABC):
    """Abstract base class for shortest-path algorithms.

    A finder wraps one graph. Each ``run`` builds fresh result tables, so the
    same finder may be run repeatedly; the graph must not change meanwhile.
    """

    #: Name used for metrics and logging
    operation = "shortest_path"

    def __init__(self, graph: WeightedGraph, track_memory: bool = False):
        """Initialize finder with graph."""
        self.graph = graph
        self.track_memory = track_memory

    @abstractmethod
    def run(self, *args: Any, **kwargs: Any) -> T:
        """Run the algorithm."""
        pass

    def validate_source(self, source: Hashable) -> None:
        """Validate that the source vertex exists in graph."""
        validate_vertex(self.graph, source, "Source")

    def validate_nodes(self, start: Hashable, goal: Hashable) -> None:
        """Validate that both endpoints exist in graph."""
        validate_vertex(self.graph, start, "Start")
        validate_vertex(self.graph, goal, "Goal")

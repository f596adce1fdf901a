"""
Tests for Dijkstra's algorithm.
"""

import pytest

from meridian.core.exceptions import NegativeWeightError, NodeNotFoundError
from meridian.core.graph import WeightedGraph
from meridian.core.graph_paths import ShortestPaths, dijkstra
from meridian.core.graph_paths.algorithms import DijkstraFinder
from meridian.core.models import INFINITY


def test_diamond_distances_and_path(diamond_graph):
    """Test that the cheaper two-hop route through C wins."""
    result = dijkstra(diamond_graph, "A")
    assert isinstance(result, ShortestPaths)
    assert result.distances == {"A": 0, "B": 3, "C": 1, "D": 4}
    assert result.predecessors == {"A": None, "B": "C", "C": "A", "D": "B"}
    assert result.path_to("D") == ["A", "C", "B", "D"]


def test_result_unpacks_into_tables(diamond_graph):
    """Test tuple-style unpacking of the result."""
    distances, predecessors = dijkstra(diamond_graph, "A")
    assert distances["D"] == 4
    assert predecessors["D"] == "B"


def test_unreachable_vertex(disconnected_graph):
    """Test that unreachable vertices stay at INFINITY with no predecessor."""
    result = dijkstra(disconnected_graph, "A")
    assert result.distances == {"A": 0, "B": INFINITY}
    assert result.predecessors["B"] is None
    assert not result.is_reachable("B")
    assert result.path_to("B") == []


def test_source_path_is_single_vertex(diamond_graph):
    """Test the trivial path from the source to itself."""
    assert dijkstra(diamond_graph, "A").path_to("A") == ["A"]


def test_undirected_graph(undirected_graph):
    """Test distances over mirrored edges."""
    result = dijkstra(undirected_graph, 0)
    assert result.distances == {0: 0, 1: 3, 2: 1, 3: 4, 4: 7}
    assert result.path_to(4) == [0, 2, 1, 3, 4]


def test_every_vertex_finalized_once(diamond_graph):
    """Test that stale queue entries never finalize a vertex twice."""
    result = dijkstra(diamond_graph, "A")
    assert result.metrics.nodes_explored == 4
    assert result.metrics.edges_relaxed == 4
    assert result.metrics.end_time >= result.metrics.start_time


def test_negative_weight_is_rejected(negative_weight_graph):
    """Test precondition check on edge weights."""
    with pytest.raises(NegativeWeightError, match="Negative weight -1"):
        dijkstra(negative_weight_graph, 0)


def test_unknown_source(diamond_graph):
    """Test that a missing source vertex is reported."""
    with pytest.raises(NodeNotFoundError, match="Source vertex 'Z' not found"):
        dijkstra(diamond_graph, "Z")


def test_repeated_runs_are_identical(diamond_graph):
    """Test that a finder can be reused without leaking state between runs."""
    finder = DijkstraFinder(diamond_graph)
    first = finder.run("A")
    second = finder.run("A")
    assert first == second
    assert finder.run("C").distances == {"A": INFINITY, "B": 2, "C": 0, "D": 3}


def test_zero_weight_edges():
    """Test that zero weights are accepted and ties keep the first path."""
    graph = WeightedGraph.from_edges([("S", "A", 0), ("S", "B", 0), ("A", "T", 1), ("B", "T", 1)])
    result = dijkstra(graph, "S")
    assert result.distance_to("T") == 1
    assert result.path_to("T") == ["S", "A", "T"]


def test_float_weights():
    """Test floating-point weights."""
    graph = WeightedGraph.from_edges([("A", "B", 0.5), ("B", "C", 0.25), ("A", "C", 1.0)])
    assert dijkstra(graph, "A").distance_to("C") == pytest.approx(0.75)


def test_memory_tracking(diamond_graph):
    """Test that peak memory is recorded when requested."""
    result = dijkstra(diamond_graph, "A", track_memory=True)
    assert result.metrics.max_memory_used > 0
    assert dijkstra(diamond_graph, "A").metrics.max_memory_used is None


def test_distance_to_unknown_vertex(diamond_graph):
    """Test result lookup on a vertex outside the graph."""
    result = dijkstra(diamond_graph, "A")
    with pytest.raises(NodeNotFoundError):
        result.distance_to("Z")

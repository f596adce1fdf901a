"""
Tests for the PathFinding interface and cross-algorithm properties.

The property tests run every algorithm on seeded random graphs and check
that they agree with each other.
"""

import pytest

from meridian.core.exceptions import ConfigurationError, NegativeCycleError
from meridian.core.graph_paths import (
    DistanceMatrix,
    NegativeCycleDetected,
    PathFinding,
    PathType,
    ShortestPaths,
    a_star,
    bellman_ford,
    dijkstra,
    floyd_warshall,
    path_weight,
    zero_heuristic,
)
from meridian.core.models import INFINITY, add_distance

SEEDS = range(12)


@pytest.mark.parametrize("seed", SEEDS)
def test_dijkstra_agrees_with_bellman_ford(random_graph_factory, seed):
    """Test both single-source algorithms on non-negative weights."""
    graph = random_graph_factory(seed)
    for source in graph.vertices():
        assert dijkstra(graph, source).distances == bellman_ford(graph, source).distances


@pytest.mark.parametrize("seed", SEEDS)
def test_floyd_warshall_agrees_with_bellman_ford(random_graph_factory, seed):
    """Test every matrix row against a single-source run, negative weights included."""
    graph = random_graph_factory(seed, low=-2, high=10)
    matrix = floyd_warshall(graph)
    rows = {source: bellman_ford(graph, source) for source in graph.vertices()}

    if isinstance(matrix, NegativeCycleDetected):
        assert any(isinstance(row, NegativeCycleDetected) for row in rows.values())
        return

    for source, row in rows.items():
        assert isinstance(row, ShortestPaths)
        assert matrix.row(source) == row.distances


@pytest.mark.parametrize("seed", SEEDS)
def test_triangle_inequality(random_graph_factory, seed):
    """Test that no edge can improve a final distance."""
    graph = random_graph_factory(seed)
    for source in graph.vertices():
        distances = dijkstra(graph, source).distances
        for edge in graph.edges():
            through_edge = add_distance(distances[edge.source], edge.weight)
            assert not through_edge < distances[edge.destination]


@pytest.mark.parametrize("seed", SEEDS)
def test_paths_cost_their_distance(random_graph_factory, seed):
    """Test reconstructed paths from every algorithm against the distances."""
    graph = random_graph_factory(seed)
    matrix = floyd_warshall(graph)
    for source in graph.vertices():
        result = dijkstra(graph, source)
        for target in graph.vertices():
            distance = result.distance_to(target)
            if distance is INFINITY:
                assert result.path_to(target) == []
                assert matrix.path(source, target) == []
                assert a_star(graph, source, target, zero_heuristic) is None
                continue
            assert path_weight(graph, result.path_to(target)) == distance
            assert path_weight(graph, matrix.path(source, target)) == distance
            assert path_weight(graph, a_star(graph, source, target, zero_heuristic)) == distance


def test_isolated_vertex_is_unreachable(random_graph_factory):
    """Test that the factory's last vertex stays isolated."""
    graph = random_graph_factory(3, vertices=5, density=1.0)
    result = dijkstra(graph, 0)
    assert result.distance_to(4) is INFINITY
    assert list(graph.neighbors(4)) == []


class TestPathFinding:
    """Tests for the PathType-dispatching interface."""

    def test_shortest_paths_dispatch(self, diamond_graph):
        """Test single-source dispatch by enum and by name."""
        by_enum = PathFinding.shortest_paths(diamond_graph, "A", PathType.BELLMAN_FORD)
        by_name = PathFinding.shortest_paths(diamond_graph, "A", "bellman-ford")
        assert by_enum == by_name
        assert by_enum.metrics.operation == "bellman_ford"
        assert PathFinding.shortest_paths(diamond_graph, "A").metrics.operation == "dijkstra"

    def test_shortest_paths_rejects_all_pairs_types(self, diamond_graph):
        """Test that only single-source algorithms are accepted."""
        with pytest.raises(ConfigurationError, match="not a single-source algorithm"):
            PathFinding.shortest_paths(diamond_graph, "A", PathType.FLOYD_WARSHALL)

    def test_unknown_algorithm(self, diamond_graph):
        """Test that unknown algorithm names are a configuration error."""
        with pytest.raises(ConfigurationError, match="Unknown algorithm 'spfa'"):
            PathFinding.shortest_paths(diamond_graph, "A", "spfa")

    def test_all_pairs(self, diamond_graph):
        """Test the all-pairs entry point."""
        matrix = PathFinding.all_pairs(diamond_graph)
        assert isinstance(matrix, DistanceMatrix)
        assert matrix["A", "D"] == 4

    @pytest.mark.parametrize("path_type", list(PathType))
    def test_find_path_with_every_algorithm(self, diamond_graph, path_type):
        """Test that every algorithm finds the same single path."""
        assert PathFinding.find_path(diamond_graph, "A", "D", path_type) == ["A", "C", "B", "D"]
        assert PathFinding.find_path(diamond_graph, "D", "A", path_type) is None

    def test_find_path_heuristic_only_for_a_star(self, diamond_graph):
        """Test that a heuristic with a non-A* algorithm is refused."""
        with pytest.raises(ConfigurationError, match="does not take a heuristic"):
            PathFinding.find_path(
                diamond_graph, "A", "D", PathType.DIJKSTRA, heuristic=zero_heuristic
            )
        path = PathFinding.find_path(
            diamond_graph, "A", "D", PathType.A_STAR, heuristic=lambda v: 0
        )
        assert path == ["A", "C", "B", "D"]

    def test_find_path_raises_on_negative_cycle(self, negative_cycle_graph):
        """Test that find_path surfaces negative cycles as exceptions."""
        with pytest.raises(NegativeCycleError):
            PathFinding.find_path(negative_cycle_graph, "A", "C", PathType.BELLMAN_FORD)
        with pytest.raises(NegativeCycleError):
            PathFinding.find_path(negative_cycle_graph, "A", "C", PathType.FLOYD_WARSHALL)


@pytest.mark.parametrize("seed", SEEDS[:4])
def test_reruns_are_identical(random_graph_factory, seed):
    """Test that repeated runs on an unchanged graph give identical tables."""
    graph = random_graph_factory(seed, low=-1, high=6)
    assert floyd_warshall(graph) == floyd_warshall(graph)
    for source in graph.vertices():
        assert bellman_ford(graph, source) == bellman_ford(graph, source)

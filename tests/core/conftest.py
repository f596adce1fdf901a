"""Shared test fixtures."""

import random
from typing import Callable

import pytest

from meridian.core.graph import WeightedGraph


@pytest.fixture
def diamond_graph() -> WeightedGraph:
    """
    Fixture providing the directed graph:

        A --4--> B --1--> D
        |        ^
        1        2
        v        |
        C -------+
    """
    return WeightedGraph.from_edges([("A", "B", 4), ("A", "C", 1), ("C", "B", 2), ("B", "D", 1)])


@pytest.fixture
def negative_cycle_graph() -> WeightedGraph:
    """Fixture providing A -> B -> C -> A with total weight -1."""
    return WeightedGraph.from_edges([("A", "B", 1), ("B", "C", -3), ("C", "A", 1)])


@pytest.fixture
def disconnected_graph() -> WeightedGraph:
    """Fixture providing two vertices and no edges."""
    graph = WeightedGraph()
    graph.add_vertex("A")
    graph.add_vertex("B")
    return graph


@pytest.fixture
def negative_weight_graph() -> WeightedGraph:
    """Fixture providing a directed graph with negative edges but no negative cycle."""
    return WeightedGraph.from_edges(
        [(0, 1, -1), (0, 2, 4), (1, 2, 3), (1, 3, 2), (3, 2, 5), (3, 1, 1)]
    )


@pytest.fixture
def undirected_graph() -> WeightedGraph:
    """Fixture providing a small undirected road network."""
    graph = WeightedGraph(directed=False)
    graph.add_edges([(0, 1, 4), (0, 2, 1), (1, 3, 1), (2, 1, 2), (2, 3, 5), (3, 4, 3)])
    return graph


@pytest.fixture
def random_graph_factory() -> Callable[..., WeightedGraph]:
    """
    Fixture providing a seeded random graph builder.

    Edges are drawn with probability ``density``; weights are integers in
    ``[low, high]``. The last vertex never gets an edge, so some pairs stay
    unreachable.
    """

    def build(
        seed: int,
        vertices: int = 8,
        density: float = 0.3,
        low: int = 0,
        high: int = 10,
    ) -> WeightedGraph:
        rng = random.Random(seed)
        graph = WeightedGraph()
        for v in range(vertices):
            graph.add_vertex(v)
        for u in range(vertices - 1):
            for v in range(vertices - 1):
                if rng.random() < density:
                    graph.add_edge(u, v, rng.randint(low, high))
        return graph

    return build

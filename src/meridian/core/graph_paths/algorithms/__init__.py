"""Shortest-path algorithm implementations."""

from .a_star import AStarFinder, AStarResult, a_star
from .bellman_ford import BellmanFordFinder, bellman_ford
from .dijkstra import DijkstraFinder, dijkstra
from .floyd_warshall import FloydWarshallFinder, floyd_warshall

__all__ = [
    "AStarFinder",
    "AStarResult",
    "BellmanFordFinder",
    "DijkstraFinder",
    "FloydWarshallFinder",
    "a_star",
    "bellman_ford",
    "dijkstra",
    "floyd_warshall",
]

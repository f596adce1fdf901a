"""
Meridian - Weighted Graph Shortest-Path Engine

This package computes minimum-cost distances and reconstructible paths over
graphs with numeric edge weights. It includes:

- A weighted graph model with directed and mirrored (undirected) edges
- A binary-heap priority queue with decrease-key
- Dijkstra, Bellman-Ford, Floyd-Warshall and A* algorithms
- Path reconstruction from predecessor tables
- A small command line interface over JSON graph documents

For more information, please see the documentation.
"""

__version__ = "0.1.0"
__author__ = "Meridian Team"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("Meridian requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.graph import WeightedGraph
from .core.models import INFINITY, Edge
from .core.graph_paths import (
    DistanceMatrix,
    NegativeCycleDetected,
    ShortestPaths,
    a_star,
    bellman_ford,
    dijkstra,
    floyd_warshall,
    reconstruct_path,
)

__all__ = [
    "INFINITY",
    "DistanceMatrix",
    "Edge",
    "NegativeCycleDetected",
    "ShortestPaths",
    "WeightedGraph",
    "a_star",
    "bellman_ford",
    "dijkstra",
    "floyd_warshall",
    "reconstruct_path",
]

"""Command Line Interface for the shortest-path engine.

This module loads a graph document and runs one algorithm over it. It only
calls the public operations of ``meridian.core.graph_paths``.

The CLI supports the following commands:
    - dijkstra: Single-source distances, non-negative weights
    - bellman-ford: Single-source distances, negative weights allowed
    - floyd-warshall: All-pairs distance matrix
    - a-star: One path between two vertices, optionally with a heuristic table

Graph input can be provided either as a direct JSON string or as a file path
prefixed with '@' (see ``meridian.core.serialization`` for the format).

Example Usage:
    python -m meridian cli dijkstra @graph.json --source A
    python -m meridian cli bellman-ford @graph.json --source 0 --target 3
    python -m meridian cli a-star @graph.json --start A --goal D --heuristic '{"A": 3}'
    python -m meridian cli floyd-warshall '{"edges": [{"source": 0, "destination": 1, "weight": 2}]}'
"""

import argparse
import logging
import sys
from typing import Hashable, List, Optional, Sequence

from meridian.core.exceptions import (
    ConfigurationError,
    GraphOperationError,
    ResourceNotFoundError,
    ValidationError,
)
from meridian.core.graph import WeightedGraph
from meridian.core.graph_paths import (
    AStarFinder,
    NegativeCycleDetected,
    PathFinding,
    PathType,
    PerformanceMetrics,
    floyd_warshall,
)
from meridian.core.serialization import load_graph, parse_json_input

logger = logging.getLogger("meridian.cli")

EXIT_OK = 0
EXIT_NEGATIVE_CYCLE = 1
EXIT_ERROR = 2


def resolve_vertex(graph: WeightedGraph, raw: str) -> Hashable:
    """Map a command-line vertex name onto a vertex of the graph.

    Graph documents may use integer vertices, while arguments are always
    strings; "3" resolves to 3 when only the integer is present.

    Raises:
        ResourceNotFoundError: If neither form is in the graph.
    """
    if graph.has_vertex(raw):
        return raw
    try:
        number = int(raw)
    except ValueError:
        number = None
    if number is not None and graph.has_vertex(number):
        return number
    raise ResourceNotFoundError(f"Vertex '{raw}' not found in the graph")


def format_path(path: Sequence[Hashable]) -> str:
    """Render a path as ``A -> B -> C`` (``-`` when empty)."""
    return " -> ".join(str(v) for v in path) if path else "-"


def build_heuristic(graph: WeightedGraph, raw_table: Optional[str]):
    """Build a heuristic from a JSON object of vertex -> estimate.

    Vertices missing from the table estimate zero.
    """
    if raw_table is None:
        return lambda vertex: 0

    table = parse_json_input(raw_table)
    if not isinstance(table, dict):
        raise ConfigurationError("Heuristic must be a JSON object of vertex -> estimate")

    estimates = {}
    for raw, value in table.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigurationError(f"Heuristic estimate for '{raw}' must be numeric")
        estimates[resolve_vertex(graph, raw)] = value
    return lambda vertex: estimates.get(vertex, 0)


def print_metrics(metrics: Optional[PerformanceMetrics]) -> None:
    """Print a metrics summary line."""
    if metrics is None:
        return
    data = metrics.to_dict()
    print(
        f"\n[{data['operation']}] {data['duration_ms']:.3f}ms, "
        f"{data['nodes_explored']} vertices explored, {data['edges_relaxed']} relaxations"
    )
    if data["max_memory_used"] is not None:
        print(f"Peak memory: {data['max_memory_used'] / 1024 / 1024:.1f}MB")


def print_negative_cycle(result: NegativeCycleDetected) -> int:
    """Report a negative cycle and return the matching exit status."""
    print(str(result))
    logger.warning("Negative cycle detected by %s", result.algorithm)
    return EXIT_NEGATIVE_CYCLE


def run_single_source(args: argparse.Namespace, graph: WeightedGraph) -> int:
    """Handle the dijkstra and bellman-ford commands."""
    path_type = PathType.DIJKSTRA if args.command == "dijkstra" else PathType.BELLMAN_FORD
    source = resolve_vertex(graph, args.source)
    result = PathFinding.shortest_paths(graph, source, path_type, track_memory=args.metrics)

    if isinstance(result, NegativeCycleDetected):
        return print_negative_cycle(result)

    targets: List[Hashable]
    if args.target is not None:
        targets = [resolve_vertex(graph, args.target)]
    else:
        targets = [v for v in graph.vertices() if v != source]

    print(f"Shortest distances from vertex {source}:")
    for vertex in targets:
        print(
            f"To vertex {vertex}: distance = {result.distance_to(vertex)}, "
            f"path = {format_path(result.path_to(vertex))}"
        )
    logger.info("%s from %s finished", path_type.value, source)

    if args.metrics:
        print_metrics(result.metrics)
    return EXIT_OK


def run_all_pairs(args: argparse.Namespace, graph: WeightedGraph) -> int:
    """Handle the floyd-warshall command."""
    result = floyd_warshall(graph, track_memory=args.metrics)
    if isinstance(result, NegativeCycleDetected):
        return print_negative_cycle(result)

    print("All-pairs shortest distances:")
    print(result.format())
    if args.metrics:
        print_metrics(result.metrics)
    return EXIT_OK


def run_a_star(args: argparse.Namespace, graph: WeightedGraph) -> int:
    """Handle the a-star command."""
    start = resolve_vertex(graph, args.start)
    goal = resolve_vertex(graph, args.goal)
    heuristic = build_heuristic(graph, args.heuristic)

    finder = AStarFinder(graph, track_memory=args.metrics)
    path = finder.run(start, goal, heuristic)
    if path is None:
        print(f"No path from {start} to {goal}")
    else:
        print(f"Path: {format_path(path)} (cost: {finder.last_result.cost})")

    if args.metrics:
        print_metrics(finder.last_result.metrics)
    return EXIT_OK


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(description="Weighted graph shortest paths")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log intermediate algorithm steps"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    def add_common(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("graph", help="JSON string or @filename containing the graph")
        sub.add_argument(
            "--metrics", action="store_true", help="Print timing and memory metrics"
        )

    for name, help_text in (
        ("dijkstra", "Single-source shortest paths (non-negative weights)"),
        ("bellman-ford", "Single-source shortest paths (negative weights allowed)"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        add_common(sub)
        sub.add_argument("--source", required=True, help="Source vertex")
        sub.add_argument("--target", help="Only report this vertex")

    floyd = subparsers.add_parser("floyd-warshall", help="All-pairs shortest distances")
    add_common(floyd)

    astar = subparsers.add_parser("a-star", help="Heuristic single-pair shortest path")
    add_common(astar)
    astar.add_argument("--start", required=True, help="Start vertex")
    astar.add_argument("--goal", required=True, help="Goal vertex")
    astar.add_argument(
        "--heuristic",
        help="JSON object (or @filename) mapping vertex -> estimated cost to the goal",
    )

    return parser


def configure_logging(args: argparse.Namespace) -> None:
    """Configure root logging from command-line options."""
    level = logging.DEBUG if args.verbose else getattr(logging, args.log_level)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        Process exit status: 0 on success, 1 on a negative cycle, 2 on error.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    configure_logging(args)

    handlers = {
        "dijkstra": run_single_source,
        "bellman-ford": run_single_source,
        "floyd-warshall": run_all_pairs,
        "a-star": run_a_star,
    }

    try:
        graph = load_graph(args.graph)
        return handlers[args.command](args, graph)
    except (
        ConfigurationError,
        GraphOperationError,
        ResourceNotFoundError,
        ValidationError,
        ValueError,
    ) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())

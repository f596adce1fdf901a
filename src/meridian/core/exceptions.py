"""
Custom exceptions for the shortest-path engine.

This module defines the hierarchy of custom exceptions used throughout the engine
to handle error conditions in a structured and meaningful way. Each exception
type corresponds to a specific category of errors that may occur while building
graphs or running shortest-path algorithms.

Detected negative cycles are returned as result objects, not raised.
``NegativeCycleError`` only exists for callers that opt in to exceptions through ``unwrap()``.
"""


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This exception is raised when input data fails to meet the required validation
    criteria, such as schema validation of a graph document.

    Examples:
        * Graph document missing the ``edges`` list
        * Edge entry without a numeric weight
        * Unknown keys in a graph document
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when an algorithm cannot run on the given graph
    because one of its preconditions does not hold.

    Examples:
        * Negative edge weight passed to Dijkstra or A*
        * Negative cycle surfaced through ``unwrap()``
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class NegativeWeightError(GraphOperationError):
    """Raised when negative weights are detected in a graph that forbids them."""


class NegativeCycleError(GraphOperationError):
    """
    Raised when a caller unwraps a negative-cycle result.

    Attributes:
        cycle: Vertices involved in the detected cycle
    """

    def __init__(self, message: str, cycle=()):
        super().__init__(message)
        self.cycle = tuple(cycle)


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown algorithm name
        * Heuristic option used with an algorithm that takes none
        * Conflicting command-line options
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    This exception is raised when attempting to access or operate on a
    resource that does not exist in the graph.
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested vertex is not found.

    Examples:
        * Source vertex missing from the graph
        * Neighbor lookup for an unknown vertex
        * A* goal that was never added
    """


class EmptyQueueError(IndexError):
    """
    Raised when extracting from an empty priority queue.

    Inside the algorithms this can only happen through a broken loop
    condition, so it is never caught there.
    """

"""Graph document loading and dumping.

A graph document is a JSON object::

    {
        "directed": true,
        "vertices": ["A", "B"],
        "edges": [
            {"source": "A", "destination": "B", "weight": 4},
            {"source": "B", "destination": "A", "weight": 1, "directed": false}
        ]
    }

``vertices`` is optional and only needed for isolated vertices. Documents are
checked against ``GRAPH_SCHEMA`` with jsonschema before any edge is built.
"""

import json
import os
from typing import Any, Dict, List

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .exceptions import ValidationError
from .graph import DEFAULT_DIRECTED, WeightedGraph

_VERTEX_SCHEMA: Dict[str, Any] = {"type": ["string", "integer"]}

GRAPH_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "directed": {"type": "boolean"},
        "vertices": {"type": "array", "items": _VERTEX_SCHEMA},
        "edges": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "source": _VERTEX_SCHEMA,
                    "destination": _VERTEX_SCHEMA,
                    "weight": {"type": "number"},
                    "directed": {"type": "boolean"},
                },
                "required": ["source", "destination", "weight"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["edges"],
    "additionalProperties": False,
}


def validate_graph_document(data: Any) -> None:
    """
    Validate a graph document against ``GRAPH_SCHEMA``.

    Raises:
        ValidationError: If the document does not match the schema
    """
    try:
        json_validate(instance=data, schema=GRAPH_SCHEMA)
    except JsonSchemaError as e:
        location = "/".join(str(part) for part in e.absolute_path) or "<root>"
        raise ValidationError(f"Invalid graph document at {location}: {e.message}") from e


def graph_from_dict(data: Dict[str, Any]) -> WeightedGraph:
    """Build a WeightedGraph from a validated graph document."""
    validate_graph_document(data)
    graph = WeightedGraph(directed=data.get("directed", DEFAULT_DIRECTED))
    for vertex in data.get("vertices", []):
        graph.add_vertex(vertex)
    for edge in data["edges"]:
        try:
            graph.add_edge(
                edge["source"], edge["destination"], edge["weight"], edge.get("directed")
            )
        except (TypeError, ValueError) as e:
            raise ValidationError(
                f"Invalid edge {edge['source']} -> {edge['destination']}: {e}"
            ) from e
    return graph


def graph_to_dict(graph: WeightedGraph) -> Dict[str, Any]:
    """
    Convert a graph into a document.

    Mirrored edges are written out as two directed edges, so the document
    round-trips to an equivalent graph.
    """
    edges: List[Dict[str, Any]] = [
        {"source": e.source, "destination": e.destination, "weight": e.weight, "directed": True}
        for e in graph.edges()
    ]
    return {
        "directed": graph.directed,
        "vertices": list(graph.vertices()),
        "edges": edges,
    }


def parse_json_input(json_str: str) -> Any:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.
            Relative file paths are resolved against the current directory.

    Returns:
        Parsed JSON data.

    Raises:
        ValueError: If the JSON is invalid or the specified file is not found.
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)
        if not os.path.exists(file_path):
            raise ValueError(f"File not found: {file_path}")
        with open(file_path, "r", encoding="utf-8") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {file_path}: {e}")

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON input: {e}")


def load_graph(json_str: str) -> WeightedGraph:
    """Load a graph from a JSON string or ``@path``."""
    return graph_from_dict(parse_json_input(json_str))

"""
Tests for graph document loading.
"""

import json

import pytest

from meridian.core.exceptions import ValidationError
from meridian.core.serialization import (
    graph_from_dict,
    graph_to_dict,
    load_graph,
    parse_json_input,
    validate_graph_document,
)


@pytest.fixture
def graph_document():
    """Fixture providing a small graph document with an isolated vertex."""
    return {
        "directed": True,
        "vertices": ["A", "B", "C", "Z"],
        "edges": [
            {"source": "A", "destination": "B", "weight": 4},
            {"source": "A", "destination": "C", "weight": 1},
            {"source": "C", "destination": "B", "weight": 2.5, "directed": False},
        ],
    }


def test_graph_from_dict(graph_document):
    """Test building a graph from a document."""
    graph = graph_from_dict(graph_document)
    assert list(graph.vertices()) == ["A", "B", "C", "Z"]
    assert graph.edge_count == 4
    assert graph.edge_weight("B", "C") == 2.5
    assert list(graph.neighbors("Z")) == []


def test_minimal_document_defaults_to_directed():
    """Test that only the edge list is required."""
    graph = graph_from_dict({"edges": [{"source": 0, "destination": 1, "weight": -2}]})
    assert graph.directed
    assert not graph.has_edge(1, 0)


def test_undirected_document():
    """Test the document-level directedness flag."""
    graph = graph_from_dict(
        {"directed": False, "edges": [{"source": "A", "destination": "B", "weight": 1}]}
    )
    assert graph.has_edge("B", "A")


def test_document_round_trip(graph_document):
    """Test that dumping and reloading keeps every edge."""
    graph = graph_from_dict(graph_document)
    reloaded = graph_from_dict(json.loads(json.dumps(graph_to_dict(graph))))
    assert list(reloaded.edges()) == list(graph.edges())
    assert list(reloaded.vertices()) == list(graph.vertices())


@pytest.mark.parametrize(
    "document, location",
    [
        ({}, "<root>"),
        ({"edges": [{"source": "A", "destination": "B"}]}, "edges/0"),
        ({"edges": [{"source": "A", "destination": "B", "weight": "4"}]}, "edges/0/weight"),
        ({"edges": [{"source": "A", "destination": "B", "weight": True}]}, "edges/0/weight"),
        ({"edges": [{"source": 1.5, "destination": "B", "weight": 1}]}, "edges/0/source"),
        ({"edges": [], "colour": "red"}, "<root>"),
    ],
)
def test_invalid_documents(document, location):
    """Test schema validation failures and their reported location."""
    with pytest.raises(ValidationError, match=f"Invalid graph document at {location}"):
        validate_graph_document(document)


def test_parse_json_input_from_file(tmp_path, graph_document):
    """Test loading a graph from an @file argument."""
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(graph_document), encoding="utf-8")
    graph = load_graph(f"@{path}")
    assert graph.vertex_count == 4


def test_parse_json_input_errors(tmp_path):
    """Test missing files and malformed JSON."""
    with pytest.raises(ValueError, match="File not found"):
        parse_json_input(f"@{tmp_path / 'missing.json'}")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid JSON in"):
        parse_json_input(f"@{broken}")

    with pytest.raises(ValueError, match="Invalid JSON input"):
        parse_json_input("[1, 2")

"""
Graph document loading.

Builds a WeightedGraph from a JSON document of nodes and edges. The document
format is a small interchange format for tests and tooling; map data parsing
itself happens elsewhere.

Example document::

    {
        "nodes": [
            {"id": 1, "lat": 47.65, "lon": -122.30, "name": "Red Square"},
            {"id": 2, "lat": 47.66, "lon": -122.31}
        ],
        "edges": [
            {"from": 1, "to": 2, "name": "NE 45th St"}
        ]
    }

Edges default to bidirectional and to the great-circle distance as weight.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .core.exceptions import ValidationError
from .core.graph import WeightedGraph
from .core.models import Node

logger = logging.getLogger(__name__)

GRAPH_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "nodes": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "id": {"type": "integer"},
                    "lat": {"type": "number", "minimum": -90, "maximum": 90},
                    "lon": {"type": "number", "minimum": -180, "maximum": 180},
                    "name": {"type": ["string", "null"]},
                },
                "required": ["id", "lat", "lon"],
            },
        },
        "edges": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "from": {"type": "integer"},
                    "to": {"type": "integer"},
                    "weight": {"type": "number", "minimum": 0},
                    "name": {"type": "string"},
                    "bidirectional": {"type": "boolean"},
                },
                "required": ["from", "to"],
            },
        },
    },
    "required": ["nodes"],
}


def load_graph(document: Mapping[str, Any]) -> WeightedGraph:
    """
    Build a graph from a parsed graph document.

    Args:
        document: Mapping with ``nodes`` and optional ``edges``

    Returns:
        WeightedGraph holding the document's nodes and edges

    Raises:
        ValidationError: If the document does not match the graph schema or
            holds non-finite coordinates or weights
    """
    try:
        json_validate(instance=document, schema=GRAPH_SCHEMA)
    except JsonSchemaError as e:
        raise ValidationError(f"Invalid graph document: {e.message}") from e

    graph = WeightedGraph()
    # Non-finite numbers pass the schema bounds; the models reject them
    try:
        for record in document["nodes"]:
            graph.add_node(Node(record["id"], record["lat"], record["lon"], record.get("name")))

        for record in document.get("edges", []):
            name = record.get("name", "")
            weight = record.get("weight")
            graph.add_weighted_edge(record["from"], record["to"], name, weight)
            if record.get("bidirectional", True):
                graph.add_weighted_edge(record["to"], record["from"], name, weight)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid graph document: {e}") from e

    logger.info("Loaded graph with %d nodes and %d edges", len(graph), graph.edge_count())
    return graph


def load_graph_file(path: Union[str, Path]) -> WeightedGraph:
    """
    Load a graph document from a JSON file.

    Raises:
        ValidationError: If the file is not valid JSON or not a graph document
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in {path}: {e}") from e
    return load_graph(document)

"""Shared test fixtures."""

from typing import Callable, Dict, Iterable, Optional, Tuple

import pytest

from roadnet.core.graph import WeightedGraph
from roadnet.core.models import Node, WeightedEdge

GraphFactory = Callable[..., WeightedGraph]


def build_graph(
    edges: Iterable[Tuple[int, int, float]],
    coordinates: Optional[Dict[int, Tuple[float, float]]] = None,
    isolated: Iterable[int] = (),
) -> WeightedGraph:
    """
    Build a graph of undirected weighted segments.

    Nodes without coordinates sit at (0, 0), which makes the great-circle
    heuristic zero and keeps any non-negative weights admissible.
    """
    coordinates = coordinates or {}
    edges = list(edges)
    node_ids = {u for u, _, _ in edges} | {v for _, v, _ in edges} | set(isolated)
    graph = WeightedGraph()
    for node_id in sorted(node_ids):
        lat, lon = coordinates.get(node_id, (0.0, 0.0))
        graph.add_node(Node(node_id, lat, lon))
    for u, v, weight in edges:
        graph.add_edge(WeightedEdge(u, v, weight, "road"))
        graph.add_edge(WeightedEdge(v, u, weight, "road"))
    return graph


@pytest.fixture
def make_graph() -> GraphFactory:
    """Fixture providing the undirected graph builder."""
    return build_graph


@pytest.fixture
def seattle_nodes() -> Dict[int, Tuple[float, float]]:
    """A handful of real coordinates around the University District."""
    return {
        53121434: (47.6553, -122.3035),
        345817295: (47.6615, -122.3130),
        53085377: (47.6588, -122.3174),
        53149410: (47.6502, -122.3077),
        53172891: (47.6635, -122.2995),
    }

"""
Shared fixtures for Contraction Hierarchies tests.
"""

import random
from typing import Dict, List, Tuple

import pytest

from roadnet.core.models import great_circle_distance

# Path A - B - C - D - E, numbered so that C wins priority ties
A, B, C, D, E = 4, 2, 1, 3, 5


@pytest.fixture
def path_edges() -> List[Tuple[int, int, float]]:
    """Unit-weight path A-B-C-D-E."""
    return [(A, B, 1.0), (B, C, 1.0), (C, D, 1.0), (D, E, 1.0)]


@pytest.fixture
def path_graph(make_graph, path_edges):
    """Create the unit-weight path graph."""
    return make_graph(path_edges)


@pytest.fixture
def triangle_graph(make_graph):
    """Triangle 1-2-3 where 1-3 is longer than going through 2."""
    return make_graph([(1, 2, 1.0), (2, 3, 2.0), (1, 3, 5.0)])


def random_road_network(
    seed: int, node_count: int = 30, extra_edges: int = 25
) -> Tuple[List[Tuple[int, int, float]], Dict[int, Tuple[float, float]]]:
    """
    Generate a connected road-like network with geographic weights.

    Weights are the great-circle distance scaled by a random detour factor of
    at least 1, so the great-circle heuristic stays admissible.
    """
    rng = random.Random(seed)
    coordinates = {
        1000 + i: (47.60 + rng.random() * 0.1, -122.40 + rng.random() * 0.1)
        for i in range(node_count)
    }
    ids = sorted(coordinates)

    def weight(u: int, v: int) -> float:
        return great_circle_distance(*coordinates[u], *coordinates[v]) * rng.uniform(1.0, 1.6)

    edges = []
    # Random spanning tree keeps the network connected
    for i in range(1, node_count):
        u, v = ids[i], ids[rng.randrange(i)]
        edges.append((u, v, weight(u, v)))
    for _ in range(extra_edges):
        u, v = rng.sample(ids, 2)
        edges.append((u, v, weight(u, v)))
    return edges, coordinates


@pytest.fixture
def road_network():
    """Fixture providing the random network generator."""
    return random_road_network

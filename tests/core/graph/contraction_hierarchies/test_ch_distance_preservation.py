"""
Tests that the finished hierarchy preserves shortest-path distances.

Distances in the original network are compared against a bidirectional search
that only ever moves to nodes contracted in a later round.
"""

import heapq
import math
import random
from typing import Callable, Dict, Iterable

import pytest

from roadnet.core.graph.contraction_hierarchies import ContractionHierarchies
from roadnet.core.models import WeightedEdge


def dijkstra(source: int, edges_of: Callable[[int], Iterable[WeightedEdge]]) -> Dict[int, float]:
    """Settle every node reachable from source."""
    dist = {source: 0.0}
    heap = [(0.0, source)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        for edge in edges_of(node):
            candidate = d + edge.weight
            if candidate < dist.get(edge.to_node, math.inf):
                dist[edge.to_node] = candidate
                heapq.heappush(heap, (candidate, edge.to_node))
    return dist


def upward_distance(ch: ContractionHierarchies, source: int, target: int) -> float:
    forward = dijkstra(source, ch.upward_neighbors)
    backward = dijkstra(target, ch.upward_neighbors)
    meeting = set(forward) & set(backward)
    return min((forward[n] + backward[n] for n in meeting), default=math.inf)


@pytest.mark.timeout(30)
@pytest.mark.parametrize("seed", [2, 17, 23, 31])
def test_upward_search_matches_dijkstra(make_graph, road_network, seed):
    """Test distances between random pairs of a random road network."""
    edges, coordinates = road_network(seed)
    original = make_graph(edges, coordinates)
    graph = make_graph(edges, coordinates)
    ch = ContractionHierarchies(graph)
    ch.preprocess()

    rng = random.Random(seed)
    ids = sorted(coordinates)
    for _ in range(40):
        source, target = rng.sample(ids, 2)
        expected = dijkstra(source, original.neighbors)[target]
        assert upward_distance(ch, source, target) == pytest.approx(expected)


@pytest.mark.timeout(30)
def test_all_pairs_on_dense_network(make_graph, road_network):
    """Test every pair of a small network with many cycles."""
    edges, coordinates = road_network(8, node_count=15, extra_edges=40)
    original = make_graph(edges, coordinates)
    graph = make_graph(edges, coordinates)
    ch = ContractionHierarchies(graph)
    ch.preprocess()

    for source in coordinates:
        expected = dijkstra(source, original.neighbors)
        for target in coordinates:
            if target != source:
                assert upward_distance(ch, source, target) == pytest.approx(expected[target])


@pytest.mark.timeout(5)
def test_path_distances(path_graph, path_edges, make_graph):
    """Test every pair of the unit path."""
    original = make_graph(path_edges)
    ch = ContractionHierarchies(path_graph)
    ch.preprocess()

    for source in original.vertices():
        expected = dijkstra(source, original.neighbors)
        for target in original.vertices() - {source}:
            assert upward_distance(ch, source, target) == expected[target]


@pytest.mark.timeout(10)
def test_unpacked_shortcuts_are_road_paths(make_graph, road_network):
    """Test that each shortcut unpacks to a connected road path of equal weight."""
    edges, coordinates = road_network(19)
    original = make_graph(edges, coordinates)
    graph = make_graph(edges, coordinates)
    ch = ContractionHierarchies(graph)
    state = ch.preprocess()
    road_edges = set(original.edges())

    assert state.shortcuts
    for shortcut in state.shortcuts:
        path = ch.unpack_edge(shortcut.edge)

        assert len(path) >= 2
        assert all(edge in road_edges for edge in path)
        assert path[0].from_node == shortcut.source
        assert path[-1].to_node == shortcut.target
        for first, second in zip(path, path[1:]):
            assert first.to_node == second.from_node
        assert sum(e.weight for e in path) == pytest.approx(shortcut.weight)

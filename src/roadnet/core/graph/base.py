"""
Core road network graph with adjacency list representation.

This module provides the WeightedGraph class that stores the road network as a
directed multigraph keyed by integer node identifiers. Each node keeps a list of
its outgoing weighted edges; parallel edges and self-loops are kept as separate
records, since original road edges and shortcut edges between the same pair of
nodes must coexist.

The implementation is pure, focusing only on graph operations. Contraction
state lives on the nodes themselves and is driven by the contraction hierarchy
preprocessor.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from ..exceptions import NodeNotFoundError
from ..models.edge import WeightedEdge
from ..models.node import Node


@dataclass
class WeightedGraph:
    """
    Directed weighted graph over road network nodes.

    Attributes:
        _nodes (Dict[int, Node]): All nodes by ID
        _adjacency (Dict[int, List[WeightedEdge]]): Outgoing edges per node
        _edge_count (int): Total number of edge records
    """

    _nodes: Dict[int, Node] = field(default_factory=dict)
    _adjacency: Dict[int, List[WeightedEdge]] = field(default_factory=dict)
    _edge_count: int = 0

    def add_node(self, node: Node) -> None:
        """
        Add a node to the graph if its ID is not present yet.

        Args:
            node (Node): The node to add
        """
        if node.id not in self._nodes:
            self._nodes[node.id] = node
            self._adjacency[node.id] = []

    def add_edge(self, edge: WeightedEdge) -> None:
        """
        Append a directed edge to its source node's adjacency.

        Edges whose endpoints are not both in the graph are ignored, so bulk
        loading can pass edges that reference filtered-out nodes.

        Args:
            edge (WeightedEdge): The edge to add
        """
        if edge.from_node in self._nodes and edge.to_node in self._nodes:
            self._adjacency[edge.from_node].append(edge)
            self._edge_count += 1

    def add_weighted_edge(
        self, from_node: int, to_node: int, name: str = "", weight: Optional[float] = None
    ) -> None:
        """
        Add a directed edge, using the great-circle distance as weight when none is given.

        Args:
            from_node (int): Source node ID
            to_node (int): Target node ID
            name (str): Road name or edge label
            weight (Optional[float]): Explicit weight
        """
        if from_node not in self._nodes or to_node not in self._nodes:
            return
        if weight is None:
            weight = self.estimated_distance(from_node, to_node)
        self.add_edge(WeightedEdge(from_node, to_node, weight, name))

    def add_edges_batch(self, edges: Iterable[WeightedEdge]) -> None:
        """
        Add multiple edges to the graph.

        Args:
            edges (Iterable[WeightedEdge]): Edges to add
        """
        for edge in edges:
            self.add_edge(edge)

    def node(self, node_id: int) -> Node:
        """
        Get the node with the given ID.

        Raises:
            NodeNotFoundError: If no such node exists
        """
        node = self._nodes.get(node_id)
        if node is None:
            raise NodeNotFoundError(f"Location not found for id: {node_id}")
        return node

    def location(self, node_id: int) -> Tuple[float, float]:
        """
        Get the (lat, lon) coordinates of a node.

        Raises:
            NodeNotFoundError: If no such node exists
        """
        node = self.node(node_id)
        return node.lat, node.lon

    def neighbors(self, node_id: int) -> List[WeightedEdge]:
        """
        Get a copy of the outgoing edges of a node.

        Args:
            node_id (int): The node to get edges for

        Returns:
            List[WeightedEdge]: Outgoing edges; mutating it does not alter the graph

        Raises:
            NodeNotFoundError: If no such node exists
        """
        edges = self._adjacency.get(node_id)
        if edges is None:
            raise NodeNotFoundError(f"Location not found for id: {node_id}")
        return list(edges)

    def neighboring_nodes(self, node_id: int) -> List[Node]:
        """Get the target node of every outgoing edge, one entry per edge."""
        return [self._nodes[edge.to_node] for edge in self.neighbors(node_id)]

    def estimated_distance(self, source: int, goal: int) -> float:
        """
        Great-circle distance between two nodes.

        Used as weight for road edges and as the admissible heuristic of
        goal-directed searches.
        """
        return self.node(source).distance_to(self.node(goal))

    def is_navigable(self, node: Node) -> bool:
        """Check if a node has at least one outgoing edge."""
        return bool(self._adjacency.get(node.id))

    def navigable_nodes(self) -> List[Node]:
        """Get all navigable nodes ordered by ID."""
        return [self._nodes[node_id] for node_id in sorted(self._nodes) if self._adjacency[node_id]]

    def vertices(self) -> Set[int]:
        """
        Get all node IDs in the graph.

        Returns:
            Set[int]: A copy; altering it does not alter the graph
        """
        return set(self._nodes)

    def has_node(self, node_id: int) -> bool:
        return node_id in self._nodes

    def edges(self) -> Iterator[WeightedEdge]:
        """
        Get all edges in the graph.

        Returns:
            Iterator[WeightedEdge]: Iterator over all edge records
        """
        for edges in self._adjacency.values():
            yield from edges

    def edge_count(self) -> int:
        return self._edge_count

    def __len__(self) -> int:
        return len(self._nodes)

    @classmethod
    def from_records(
        cls, nodes: Iterable[Node], edges: Iterable[WeightedEdge] = ()
    ) -> "WeightedGraph":
        """
        Create a new graph from nodes and edges.

        Args:
            nodes (Iterable[Node]): Nodes to add
            edges (Iterable[WeightedEdge]): Edges to add after all nodes

        Returns:
            WeightedGraph: New graph instance
        """
        graph = cls()
        for node in nodes:
            graph.add_node(node)
        graph.add_edges_batch(edges)
        return graph

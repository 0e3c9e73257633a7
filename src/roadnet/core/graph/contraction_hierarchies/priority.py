"""
Node priority calculation for Contraction Hierarchies.

The priority ranks how attractive a node is to contract in the current round.
It only reads the graph and the contraction marks, so priorities of all nodes
of a round can be computed concurrently.
"""

import logging
from typing import List, TYPE_CHECKING

from roadnet.core.models import Node, WeightedEdge
from .models import Priority
from .shortcuts import ShortcutSet

if TYPE_CHECKING:
    from roadnet.core.graph import WeightedGraph

logger = logging.getLogger(__name__)

DEFAULT_EDGE_QUOTIENT_FACTOR = 3.0


class PriorityEngine:
    """Computes per-round node priorities over a graph."""

    def __init__(
        self, graph: "WeightedGraph", edge_quotient_factor: float = DEFAULT_EDGE_QUOTIENT_FACTOR
    ):
        self.graph = graph
        self.edge_quotient_factor = edge_quotient_factor

    def num_contracted(self, neighbors: List[WeightedEdge]) -> int:
        """Count the edges that lead to contracted nodes."""
        return sum(1 for edge in neighbors if self.graph.node(edge.to_node).is_contracted)

    def compute(self, node: Node) -> Priority:
        """
        Calculate the priority of a node.

        With uncontracted neighbors the priority is
        ``edge_quotient_factor * shortcuts / uncontracted neighbors + depth`` and
        the shortcut set is kept on the result; otherwise it is the depth alone.

        Args:
            node: Uncontracted node to score

        Returns:
            Priority for the current round
        """
        neighbors = self.graph.neighbors(node.id)
        num_true_neighbors = len(neighbors) - self.num_contracted(neighbors)
        if num_true_neighbors > 0:
            shortcuts = ShortcutSet.from_neighbors(self.graph, node.id, neighbors)
            edge_quotient = len(shortcuts) / num_true_neighbors
            value = self.edge_quotient_factor * edge_quotient + node.depth
        else:
            shortcuts = None
            value = float(node.depth)

        logger.debug(
            "Node %s priority: neighbors=%d, uncontracted=%d, shortcuts=%s, depth=%d, value=%f",
            node.id,
            len(neighbors),
            num_true_neighbors,
            len(shortcuts) if shortcuts is not None else "-",
            node.depth,
            value,
        )
        return Priority(node_id=node.id, value=value, shortcuts=shortcuts)

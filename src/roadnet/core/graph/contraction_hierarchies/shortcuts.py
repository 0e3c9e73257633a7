"""
Shortcut computation for Contraction Hierarchies.

Contracting a node removes it from every later search, so each shortest path
running through it must be preserved by a shortcut between two of its
remaining neighbors, unless a witness path already covers it.
"""

import logging
from typing import Iterator, List, Sequence, TYPE_CHECKING

from roadnet.core.models import WeightedEdge
from .models import Shortcut
from .witness import shortcut_required

if TYPE_CHECKING:
    from roadnet.core.graph import WeightedGraph

logger = logging.getLogger(__name__)


class ShortcutSet:
    """
    The shortcuts needed to contract one node.

    Every unordered pair of outgoing edges leading to uncontracted neighbors is
    tested once; the scheduler later inserts each kept shortcut in both
    directions.

    Attributes:
        node_id: Node whose contraction the shortcuts replace
        shortcuts: Required shortcuts in pair enumeration order
    """

    def __init__(self, node_id: int, shortcuts: List[Shortcut]):
        self.node_id = node_id
        self.shortcuts = shortcuts

    @classmethod
    def for_node(cls, graph: "WeightedGraph", node_id: int) -> "ShortcutSet":
        """Compute the shortcut set of a node from its current outgoing edges."""
        return cls.from_neighbors(graph, node_id, graph.neighbors(node_id))

    @classmethod
    def from_neighbors(
        cls, graph: "WeightedGraph", node_id: int, neighbors: Sequence[WeightedEdge]
    ) -> "ShortcutSet":
        """
        Compute the shortcut set from a snapshot of a node's outgoing edges.

        Args:
            graph: Graph as of the start of the current round
            node_id: Node being considered for contraction
            neighbors: Outgoing edges of the node

        Returns:
            ShortcutSet holding the required shortcuts
        """
        candidates = [
            edge
            for edge in neighbors
            if edge.to_node != node_id and not graph.node(edge.to_node).is_contracted
        ]
        result = []
        for i, src_edge in enumerate(candidates):
            for dest_edge in candidates[i + 1 :]:
                shortcut = Shortcut.create(src_edge, dest_edge)
                if shortcut_required(graph, shortcut):
                    result.append(shortcut)
        logger.debug(
            "Node %s: %d of %d candidate shortcuts required",
            node_id,
            len(result),
            len(candidates) * (len(candidates) - 1) // 2,
        )
        return cls(node_id, result)

    def __iter__(self) -> Iterator[Shortcut]:
        return iter(self.shortcuts)

    def __len__(self) -> int:
        return len(self.shortcuts)

    def __repr__(self) -> str:
        return f"ShortcutSet(node_id={self.node_id}, size={len(self.shortcuts)})"

"""
Data models for Contraction Hierarchies algorithm.

This module defines the core data structures used by the Contraction Hierarchies
implementation, including shortcuts, node priorities and algorithm state.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, TYPE_CHECKING

from roadnet.core.models import SHORTCUT_LABEL, WeightedEdge

if TYPE_CHECKING:
    from .shortcuts import ShortcutSet


@dataclass(frozen=True)
class Shortcut:
    """
    Represents a shortcut edge in the contraction hierarchy.

    A shortcut collapses ``src --lower_edge--> via --upper_edge--> dest`` into
    a single ``src --edge--> dest``.

    Attributes:
        edge: The shortcut edge itself
        via_node: Node that was contracted to create this shortcut
        lower_edge: First edge in the shortcut path (src -> via)
        upper_edge: Second edge in the shortcut path (via -> dest)
    """

    edge: WeightedEdge
    via_node: int
    lower_edge: WeightedEdge
    upper_edge: WeightedEdge

    @classmethod
    def create(cls, src_edge: WeightedEdge, dest_edge: WeightedEdge) -> "Shortcut":
        """
        Create the shortcut between the targets of two outgoing edges of one node.

        Args:
            src_edge: Edge from the contracted node to the shortcut source
            dest_edge: Edge from the contracted node to the shortcut target

        Returns:
            New Shortcut instance
        """
        lower_edge = src_edge.flip()
        edge = WeightedEdge(
            src_edge.to_node,
            dest_edge.to_node,
            src_edge.weight + dest_edge.weight,
            SHORTCUT_LABEL,
            shortcut=True,
        )
        return cls(
            edge=edge,
            via_node=src_edge.from_node,
            lower_edge=lower_edge,
            upper_edge=dest_edge,
        )

    @property
    def source(self) -> int:
        return self.edge.from_node

    @property
    def target(self) -> int:
        return self.edge.to_node

    @property
    def weight(self) -> float:
        return self.edge.weight

    def flip(self) -> "Shortcut":
        """Return the reverse shortcut, ``dest -> via -> src``."""
        return Shortcut(
            edge=self.edge.flip(),
            via_node=self.via_node,
            lower_edge=self.upper_edge.flip(),
            upper_edge=self.lower_edge.flip(),
        )


@dataclass(frozen=True)
class Priority:
    """
    Contraction priority of a node for one round.

    Attributes:
        node_id: Node the priority belongs to
        value: ``edge_quotient_factor * edge quotient + depth``
        shortcuts: Shortcuts computed on the way, None when the node had no
            uncontracted neighbors
    """

    node_id: int
    value: float
    shortcuts: Optional["ShortcutSet"] = None

    def beats(self, other: "Priority") -> bool:
        """Higher value wins; on equal values the lower node ID wins."""
        if self.value != other.value:
            return self.value > other.value
        return self.node_id < other.node_id


@dataclass(frozen=True)
class RoundSummary:
    """Statistics of one contraction round."""

    round: int
    uncontracted: int
    contracted: int
    shortcuts_added: int
    elapsed: float


@dataclass
class ContractionState:
    """
    State maintained by the Contraction Hierarchies algorithm.

    Attributes:
        node_order: Map of node ID to the round it was contracted in
        shortcuts: Every committed shortcut, forward and reverse
        rounds: Per-round summaries in execution order
    """

    node_order: Dict[int, int] = field(default_factory=dict)
    shortcuts: List[Shortcut] = field(default_factory=list)
    rounds: List[RoundSummary] = field(default_factory=list)
    _by_edge: Dict[WeightedEdge, Shortcut] = field(default_factory=dict, repr=False)

    def add_shortcut(self, shortcut: Shortcut) -> None:
        self.shortcuts.append(shortcut)
        self._by_edge.setdefault(shortcut.edge, shortcut)

    def get_shortcut(self, edge: WeightedEdge) -> Optional[Shortcut]:
        """
        Get the shortcut a graph edge was created from.

        Args:
            edge: Edge found in the graph

        Returns:
            Shortcut if the edge is a committed shortcut, None otherwise
        """
        return self._by_edge.get(edge)

    def set_node_order(self, node: int, order: int) -> None:
        self.node_order[node] = order

    @property
    def round_count(self) -> int:
        return len(self.rounds)

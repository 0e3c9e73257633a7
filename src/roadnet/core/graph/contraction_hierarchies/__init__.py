"""
Contraction Hierarchies implementation.

This module provides the main interface for building a contraction hierarchy
over a road network graph. The finished graph (road edges plus shortcuts) and
the per-node contraction order and depth are what a bidirectional upward
search consumes to answer shortest-path queries.
"""

from typing import List, Optional, TYPE_CHECKING

from roadnet.config import ContractionConfig
from roadnet.core.exceptions import ContractionError, GraphOperationError
from roadnet.core.graph.traversal.utils import PerformanceMonitor
from roadnet.core.models import WeightedEdge
from .models import ContractionState, Priority, RoundSummary, Shortcut
from .preprocessor import ContractionPreprocessor
from .priority import PriorityEngine
from .shortcuts import ShortcutSet
from .utils import unpack_edge, validate_shortcuts
from .witness import shortcut_required

if TYPE_CHECKING:
    from roadnet.core.graph import WeightedGraph

__all__ = [
    "ContractionHierarchies",
    "ContractionPreprocessor",
    "ContractionState",
    "Priority",
    "PriorityEngine",
    "RoundSummary",
    "Shortcut",
    "ShortcutSet",
    "shortcut_required",
    "unpack_edge",
    "validate_shortcuts",
]


class ContractionHierarchies:
    """
    Contraction Hierarchies construction.

    This class wraps the round-based preprocessor and exposes the finished
    hierarchy to downstream consumers.
    """

    def __init__(self, graph: "WeightedGraph", config: Optional[ContractionConfig] = None):
        """
        Initialize Contraction Hierarchies.

        Args:
            graph: Graph to build hierarchy on
            config: Preprocessing configuration
        """
        self.graph: "WeightedGraph" = graph
        self.config = config or ContractionConfig()
        self.monitor = PerformanceMonitor()
        self._state: Optional[ContractionState] = None

    @property
    def state(self) -> ContractionState:
        """Get current algorithm state."""
        self._require_preprocessed()
        return self._state

    def _require_preprocessed(self) -> None:
        if self._state is None:
            raise GraphOperationError("Graph must be preprocessed before accessing state.")

    @property
    def is_preprocessed(self) -> bool:
        return self._state is not None

    def preprocess(self) -> ContractionState:
        """
        Build the contraction hierarchy, mutating the graph in place.

        Raises:
            ContractionError: If the graph was already contracted
        """
        if self._state is not None or any(
            n.is_contracted for n in self.graph.navigable_nodes()
        ):
            raise ContractionError("Graph has already been contracted")
        preprocessor = ContractionPreprocessor(self.graph, self.config, self.monitor)
        state = preprocessor.preprocess()
        if self.config.validate_shortcuts and not validate_shortcuts(state, self.graph):
            raise ContractionError("Shortcut validation failed after preprocessing")
        self._state = state
        return state

    def contraction_order(self, node_id: int) -> Optional[int]:
        """Round the node was contracted in, None for nodes that never were."""
        self._require_preprocessed()
        return self.graph.node(node_id).contraction_order

    def depth(self, node_id: int) -> int:
        self._require_preprocessed()
        return self.graph.node(node_id).depth

    def upward_neighbors(self, node_id: int) -> List[WeightedEdge]:
        """
        Get the outgoing edges that lead to a node contracted in a later round.

        Args:
            node_id: Contracted node

        Returns:
            Edges usable by an upward search from the node
        """
        order = self.contraction_order(node_id)
        if order is None:
            return []
        result = []
        for edge in self.graph.neighbors(node_id):
            target = self.graph.node(edge.to_node).contraction_order
            if target is not None and target > order:
                result.append(edge)
        return result

    def unpack_edge(self, edge: WeightedEdge) -> List[WeightedEdge]:
        """Expand an edge of the finished graph into road edges."""
        return unpack_edge(edge, self.state)

    def validate(self) -> bool:
        """Check shortcut consistency of the finished hierarchy."""
        return validate_shortcuts(self.state, self.graph)

    def get_performance_stats(self):
        """Phase timing statistics of the last preprocessing run."""
        return self.monitor.get_statistics()

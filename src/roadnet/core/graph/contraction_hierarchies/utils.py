"""
Utility functions for Contraction Hierarchies algorithm.

This module provides helper functions for expanding shortcut edges back into
road edges and for checking the consistency of a finished hierarchy.
"""

import logging
from collections import Counter
from typing import List, TYPE_CHECKING

from roadnet.core.exceptions import GraphOperationError
from roadnet.core.graph.traversal.utils import EPSILON
from roadnet.core.models import WeightedEdge
from .models import ContractionState

if TYPE_CHECKING:
    from roadnet.core.graph import WeightedGraph

logger = logging.getLogger(__name__)


def unpack_edge(edge: WeightedEdge, state: ContractionState) -> List[WeightedEdge]:
    """
    Recursively unpack a shortcut into original road edges.

    Args:
        edge: Edge taken from the finished graph
        state: State the shortcut was recorded in

    Returns:
        The road edges the edge stands for, in travel order

    Raises:
        GraphOperationError: If a shortcut edge is not known to the state
    """
    if not edge.is_shortcut:
        return [edge]

    unpacked: List[WeightedEdge] = []
    pending = [edge]
    while pending:
        current = pending.pop()
        if not current.is_shortcut:
            unpacked.append(current)
            continue
        shortcut = state.get_shortcut(current)
        if shortcut is None:
            raise GraphOperationError(
                f"Failed to unpack shortcut {current.from_node}->{current.to_node}: "
                "no matching shortcut recorded"
            )
        # Stack order: lower edge is expanded first
        pending.append(shortcut.upper_edge)
        pending.append(shortcut.lower_edge)
    return unpacked


def validate_shortcuts(state: ContractionState, graph: "WeightedGraph") -> bool:
    """
    Validate shortcut consistency.

    Checks that each shortcut weighs the sum of its two component edges, joins
    them through its via node, is present in the graph and has its reverse
    recorded with the same weight.

    Args:
        state: Finished contraction state
        graph: Graph the shortcuts were inserted into

    Returns:
        True if shortcuts are valid, False otherwise
    """
    recorded = Counter(s.edge for s in state.shortcuts)
    in_graph = Counter(e for e in graph.edges() if e.is_shortcut)

    for shortcut in state.shortcuts:
        edge = shortcut.edge
        lower, upper = shortcut.lower_edge, shortcut.upper_edge

        if (
            lower.from_node != edge.from_node
            or upper.to_node != edge.to_node
            or lower.to_node != shortcut.via_node
            or upper.from_node != shortcut.via_node
        ):
            logger.error(
                "Invalid shortcut %s->%s: components do not meet at via node %s",
                edge.from_node,
                edge.to_node,
                shortcut.via_node,
            )
            return False

        if abs(edge.weight - (lower.weight + upper.weight)) > EPSILON:
            logger.error(
                "Invalid shortcut %s->%s: weight mismatch %s != %s",
                edge.from_node,
                edge.to_node,
                edge.weight,
                lower.weight + upper.weight,
            )
            return False

        if recorded[edge.flip()] != recorded[edge]:
            logger.error(
                "Invalid shortcut %s->%s: reverse shortcut missing",
                edge.from_node,
                edge.to_node,
            )
            return False

        if in_graph[edge] < recorded[edge]:
            logger.error(
                "Invalid shortcut %s->%s: not present in graph", edge.from_node, edge.to_node
            )
            return False

    return True

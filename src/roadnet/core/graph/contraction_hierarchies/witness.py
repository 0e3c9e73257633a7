"""
Witness search for Contraction Hierarchies.

A witness is a path between the two endpoints of a candidate shortcut that is
no longer than the shortcut itself and does not pass through the node being
contracted. When a witness exists the shortcut is unnecessary.
"""

import logging
from typing import Dict, TYPE_CHECKING

from roadnet.core.graph.traversal.utils import PriorityQueue
from .models import Shortcut

if TYPE_CHECKING:
    from roadnet.core.graph import WeightedGraph

logger = logging.getLogger(__name__)

INFINITY = float("inf")


def shortcut_required(graph: "WeightedGraph", shortcut: Shortcut) -> bool:
    """
    Determine if a shortcut is necessary using a goal-directed witness search.

    Runs A* from the shortcut source towards its target with the great-circle
    distance as heuristic, over uncontracted nodes only. The contracted node and
    the two edges the shortcut replaces are skipped. The search stops as soon as
    the target is the cheapest frontier node, or the cheapest frontier node is
    already farther from the source than the shortcut is long.

    Args:
        graph: Graph as of the start of the current round
        shortcut: Candidate shortcut

    Returns:
        True if no path of length <= shortcut weight exists, False otherwise
    """
    start, end = shortcut.source, shortcut.target
    limit = shortcut.weight

    dist_to: Dict[int, float] = {start: 0.0}
    pq = PriorityQueue()
    pq.add_or_update(start, graph.estimated_distance(start, end))

    while not pq.empty():
        _, smallest = pq.peek()
        if smallest == end or limit < dist_to[smallest]:
            break
        pq.pop()
        for edge in graph.neighbors(smallest):
            w = edge.to_node
            if w == shortcut.via_node or graph.node(w).is_contracted:
                continue
            if edge == shortcut.lower_edge or edge == shortcut.upper_edge:
                continue
            this_distance = dist_to[smallest] + edge.weight
            if this_distance < dist_to.get(w, INFINITY):
                dist_to[w] = this_distance
                pq.add_or_update(w, this_distance + graph.estimated_distance(w, end))

    required = limit < dist_to.get(end, INFINITY)
    logger.debug(
        "Shortcut %s->%s via %s (%.3f): witness distance %.3f, required=%s",
        start,
        end,
        shortcut.via_node,
        limit,
        dist_to.get(end, INFINITY),
        required,
    )
    return required

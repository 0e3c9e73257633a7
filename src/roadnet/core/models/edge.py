"""
Edge models for the road network system.

Edges are directed and weighted. An undirected road segment is stored as two
opposite directed edges, and shortcut edges synthesized during contraction use
the same model with the ``shortcut`` flag set and the ``SHORTCUT_LABEL`` name.
"""

from dataclasses import dataclass

from .base import validate_weight

SHORTCUT_LABEL = "Shortcut"


@dataclass(frozen=True)
class WeightedEdge:
    """
    Directed weighted edge between two node identifiers.

    Edges compare by value: two records with the same endpoints, weight, name and kind
    are equal, although the graph keeps both when both are added.

    Attributes:
        from_node (int): Source node ID
        to_node (int): Target node ID
        weight (float): Non-negative traversal cost
        name (str): Road name, or ``SHORTCUT_LABEL`` for synthesized edges
        shortcut (bool): True only for edges synthesized during contraction
    """

    from_node: int
    to_node: int
    weight: float
    name: str = ""
    shortcut: bool = False

    def __post_init__(self):
        """Validate edge after initialization."""
        validate_weight(self.weight)

    @property
    def is_shortcut(self) -> bool:
        return self.shortcut

    def flip(self) -> "WeightedEdge":
        """Return the same edge pointing the other way."""
        return WeightedEdge(self.to_node, self.from_node, self.weight, self.name, self.shortcut)

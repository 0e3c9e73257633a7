"""
Core domain models package for the road network system.

This package provides the fundamental data structures that represent nodes
and weighted edges of the road network.
"""

from .base import validate_coordinate, validate_weight
from .edge import SHORTCUT_LABEL, WeightedEdge
from .node import EARTH_RADIUS_M, Node, compute_depth, great_circle_distance

__all__ = [
    # Base utilities
    "validate_coordinate",
    "validate_weight",
    # Node models
    "Node",
    "EARTH_RADIUS_M",
    "compute_depth",
    "great_circle_distance",
    # Edge models
    "WeightedEdge",
    "SHORTCUT_LABEL",
]

"""
Roadnet - road network graphs and contraction hierarchy construction.

This package provides:

- A weighted directed road network graph with great-circle distances
- Round-based, parallel contraction hierarchy preprocessing
- Configuration, graph document loading and a small command line interface
"""

__version__ = "0.1.0"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("roadnet requires Python 3.9 or higher")

# Import commonly used components for easier access
from .config import ContractionConfig
from .core.graph import WeightedGraph
from .core.graph.contraction_hierarchies import ContractionHierarchies
from .core.models import Node, WeightedEdge

__all__ = [
    "ContractionConfig",
    "ContractionHierarchies",
    "Node",
    "WeightedEdge",
    "WeightedGraph",
]

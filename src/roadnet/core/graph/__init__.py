"""
Graph module for the road network system.

This module provides the weighted road network graph and the contraction
hierarchy construction built on top of it.
"""

from .base import WeightedGraph

__all__ = ["WeightedGraph"]

"""
Search support shared by graph algorithms.
"""

from .utils import EPSILON, MemoryManager, PerformanceMonitor, PriorityQueue, get_memory_usage

__all__ = [
    "EPSILON",
    "MemoryManager",
    "PerformanceMonitor",
    "PriorityQueue",
    "get_memory_usage",
]

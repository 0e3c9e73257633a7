"""
Shared helpers for graph searches and hierarchy preprocessing.

``PriorityQueue`` backs the witness search, ``PerformanceMonitor`` collects
per-phase timings of a contraction run and ``MemoryManager`` guards a run
against unbounded memory growth.
"""

import gc
import logging
import os
import statistics
import threading
import time
from collections import defaultdict
from contextlib import contextmanager
from heapq import heappop, heappush
from typing import Dict, Generator, Hashable, List, Optional, Tuple

import psutil  # type: ignore # Missing stubs

logger = logging.getLogger(__name__)

EPSILON = 1e-10  # Tolerance for comparing summed edge weights

_BYTES_PER_MB = 1024 * 1024


class PriorityQueue:
    """
    Binary heap keyed by priority, lowest first, supporting decrease-key.

    Re-adding an item pushes a fresh heap entry; entries that no longer match
    the item's latest priority are dropped lazily when they reach the top.
    Equal priorities come out in insertion order.
    """

    def __init__(self):
        self._heap: List[Tuple[float, int, Hashable]] = []
        self._current: Dict[Hashable, Tuple[float, int]] = {}
        self._sequence = 0

    def add_or_update(self, item: Hashable, priority: float) -> None:
        self._current[item] = (priority, self._sequence)
        heappush(self._heap, (priority, self._sequence, item))
        self._sequence += 1

    def _drop_outdated(self) -> None:
        heap = self._heap
        while heap and self._current.get(heap[0][2]) != heap[0][:2]:
            heappop(heap)

    def pop(self) -> Optional[Tuple[float, Hashable]]:
        """Remove the lowest-priority item, returning ``(priority, item)``."""
        self._drop_outdated()
        if not self._heap:
            return None
        priority, _, item = heappop(self._heap)
        del self._current[item]
        return priority, item

    def peek(self) -> Optional[Tuple[float, Hashable]]:
        self._drop_outdated()
        if not self._heap:
            return None
        priority, _, item = self._heap[0]
        return priority, item

    def empty(self) -> bool:
        return not self._current

    def __contains__(self, item: Hashable) -> bool:
        return item in self._current

    def __len__(self) -> int:
        return len(self._current)


class PerformanceMonitor:
    """Thread-safe collector of named durations."""

    def __init__(self):
        self.metrics: Dict[str, List[float]] = defaultdict(list)
        self._lock = threading.Lock()

    def record_metric(self, name: str, value: float) -> None:
        with self._lock:
            self.metrics[name].append(value)

    @contextmanager
    def measure(self, name: str) -> Generator[None, None, None]:
        """Time the enclosed block and record it under ``name``."""
        started = time.perf_counter()
        try:
            yield
        finally:
            self.record_metric(name, time.perf_counter() - started)

    def get_statistics(self) -> Dict[str, Dict[str, float]]:
        """
        Summarize every recorded metric.

        Returns:
            Mapping of metric name to its avg, min, max, std, total and count
        """
        with self._lock:
            snapshot = {name: list(values) for name, values in self.metrics.items() if values}
        return {
            name: {
                "avg": statistics.mean(values),
                "min": min(values),
                "max": max(values),
                "std": statistics.stdev(values) if len(values) > 1 else 0,
                "total": sum(values),
                "count": len(values),
            }
            for name, values in snapshot.items()
        }


class MemoryManager:
    """
    Limit on process memory growth during a long-running computation.

    The baseline is the resident set size when the manager is created, so the
    limit applies to what the computation itself allocates.
    """

    def __init__(self, max_memory_mb: Optional[float] = None):
        gc.collect()
        self.max_memory = max_memory_mb * _BYTES_PER_MB if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory

    def _growth(self) -> int:
        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)
        return current - self.start_memory

    def check_memory(self) -> None:
        """
        Compare memory growth against the limit.

        Raises:
            MemoryError: If growth is over the limit even after garbage collection
        """
        growth = self._growth()
        if not self.max_memory:
            return

        if growth > self.max_memory:
            gc.collect()
            gc.collect()  # cyclic garbage freed by the first pass
            growth = self._growth()
            if growth > self.max_memory:
                raise MemoryError(
                    f"Memory growth {growth / _BYTES_PER_MB:.1f}MB exceeds "
                    f"limit of {self.max_memory / _BYTES_PER_MB:.1f}MB"
                )
        elif growth > 0.8 * self.max_memory:
            logger.warning(
                "Memory growth %.1fMB is above 80%% of the %.1fMB limit",
                growth / _BYTES_PER_MB,
                self.max_memory / _BYTES_PER_MB,
            )

    @property
    def peak_memory_mb(self) -> float:
        return self._peak_memory / _BYTES_PER_MB


def get_memory_usage() -> int:
    """Resident set size of this process in bytes."""
    return int(psutil.Process(os.getpid()).memory_info().rss)

"""
Tests for search utilities.
"""

import pytest

from roadnet.core.graph.traversal import utils
from roadnet.core.graph.traversal.utils import MemoryManager, PerformanceMonitor, PriorityQueue


def test_priority_queue_orders_by_priority():
    """Test pop order and peek."""
    pq = PriorityQueue()
    pq.add_or_update(3, 3.0)
    pq.add_or_update(1, 1.0)
    pq.add_or_update(2, 2.0)

    assert len(pq) == 3
    assert pq.peek() == (1.0, 1)
    assert [pq.pop()[1] for _ in range(3)] == [1, 2, 3]
    assert pq.empty()
    assert pq.pop() is None
    assert pq.peek() is None


def test_priority_queue_change_priority():
    """Test that updating an item replaces its previous priority."""
    pq = PriorityQueue()
    pq.add_or_update("a", 5.0)
    pq.add_or_update("b", 3.0)
    pq.add_or_update("a", 1.0)

    assert len(pq) == 2
    assert "a" in pq
    assert pq.pop() == (1.0, "a")
    assert "a" not in pq
    assert pq.pop() == (3.0, "b")
    assert pq.empty()


def test_priority_queue_ties_keep_insertion_order():
    """Test deterministic tie-breaking."""
    pq = PriorityQueue()
    for item in (5, 4, 6):
        pq.add_or_update(item, 1.0)
    assert [pq.pop()[1] for _ in range(3)] == [5, 4, 6]


def test_performance_monitor_statistics():
    """Test metric summaries."""
    monitor = PerformanceMonitor()
    monitor.record_metric("round", 1.0)
    monitor.record_metric("round", 3.0)
    with monitor.measure("block"):
        pass

    stats = monitor.get_statistics()
    assert stats["round"]["avg"] == 2.0
    assert stats["round"]["min"] == 1.0
    assert stats["round"]["max"] == 3.0
    assert stats["round"]["total"] == 4.0
    assert stats["round"]["count"] == 2
    assert stats["block"]["count"] == 1
    assert stats["block"]["std"] == 0


def test_memory_manager_without_limit():
    """Test that no limit never raises."""
    manager = MemoryManager()
    manager.check_memory()
    assert manager.peak_memory_mb > 0


def test_memory_manager_limit_exceeded(monkeypatch):
    """Test that growth beyond the limit raises MemoryError."""
    usage = iter([100 * 1024 * 1024, 300 * 1024 * 1024, 300 * 1024 * 1024])
    monkeypatch.setattr(utils, "get_memory_usage", lambda: next(usage))
    manager = MemoryManager(max_memory_mb=50.0)

    with pytest.raises(MemoryError, match="exceeds limit"):
        manager.check_memory()

"""
Preprocessing implementation for Contraction Hierarchies.

This module drives hierarchy construction in rounds. Each round scores every
uncontracted node, selects the nodes that are locally highest priority within
their 2-hop neighborhood, inserts their shortcuts and marks them contracted.

Within a round all per-node work only reads the graph as it was at the start of
the round, so it is spread over a thread pool; the graph and the contraction
marks are mutated afterwards, in a single-threaded commit step.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from typing import Callable, Dict, Generator, List, Optional, Sequence, TypeVar, TYPE_CHECKING

from roadnet.config import ContractionConfig
from roadnet.core.exceptions import ContractionError
from roadnet.core.graph.traversal.utils import MemoryManager, PerformanceMonitor
from roadnet.core.models import Node, compute_depth
from .models import ContractionState, Priority, RoundSummary
from .priority import PriorityEngine
from .shortcuts import ShortcutSet

if TYPE_CHECKING:
    from roadnet.core.graph import WeightedGraph

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class ContractionPreprocessor:
    """
    Round-based contraction scheduler.

    Features:
    - Per-round priority calculation
    - Independent node set selection
    - Shortcut insertion in both directions
    - Progress logging and phase timing
    """

    def __init__(
        self,
        graph: "WeightedGraph",
        config: Optional[ContractionConfig] = None,
        monitor: Optional[PerformanceMonitor] = None,
    ):
        """
        Initialize preprocessor.

        Args:
            graph: Graph to preprocess
            config: Preprocessing configuration
            monitor: Collector for phase timings
        """
        self.graph = graph
        self.config = config or ContractionConfig()
        self.monitor = monitor or PerformanceMonitor()
        self.priority_engine = PriorityEngine(graph, self.config.edge_quotient_factor)

    @contextmanager
    def _executor(self) -> Generator[Optional[ThreadPoolExecutor], None, None]:
        if not self.config.parallel:
            yield None
            return
        with ThreadPoolExecutor(
            max_workers=self.config.max_workers, thread_name_prefix="contraction"
        ) as executor:
            yield executor

    @staticmethod
    def _map(
        executor: Optional[ThreadPoolExecutor], func: Callable[[T], R], items: Sequence[T]
    ) -> List[R]:
        if executor is None:
            return [func(item) for item in items]
        return list(executor.map(func, items))

    def preprocess(self) -> ContractionState:
        """
        Contract every navigable node of the graph.

        Returns:
            ContractionState with node orders, shortcuts and round summaries

        Raises:
            ContractionError: If a round selects no node to contract
            MemoryError: If the configured memory limit is exceeded
        """
        start_time = time.perf_counter()
        state = ContractionState()
        memory = MemoryManager(self.config.max_memory_mb)

        uncontracted = [n for n in self.graph.navigable_nodes() if not n.is_contracted]
        if not uncontracted:
            logger.warning("Graph has no navigable nodes to contract")
        logger.info("Starting preprocessing of %d navigable nodes", len(uncontracted))

        order = 0
        with self._executor() as executor:
            while uncontracted:
                round_start = time.perf_counter()

                with self.monitor.measure("priority"):
                    computed = self._map(executor, self.priority_engine.compute, uncontracted)
                    priorities = {p.node_id: p for p in computed}

                with self.monitor.measure("independent_set"):
                    flags = self._map(
                        executor, lambda n: self.is_independent(n, priorities), uncontracted
                    )
                    independent = [n for n, flag in zip(uncontracted, flags) if flag]
                if not independent:
                    raise ContractionError(
                        f"Round {order} selected no node out of {len(uncontracted)}"
                    )

                with self.monitor.measure("shortcuts"):
                    shortcut_sets = self._map(
                        executor, lambda n: self._shortcuts_for(n, priorities[n.id]), independent
                    )

                with self.monitor.measure("commit"):
                    added = self._commit(order, independent, shortcut_sets, state)

                summary = RoundSummary(
                    round=order,
                    uncontracted=len(uncontracted),
                    contracted=len(independent),
                    shortcuts_added=added,
                    elapsed=time.perf_counter() - round_start,
                )
                state.rounds.append(summary)
                logger.info(
                    "Round %d: contracted %d of %d nodes, added %d shortcuts in %.3fs",
                    summary.round,
                    summary.contracted,
                    summary.uncontracted,
                    summary.shortcuts_added,
                    summary.elapsed,
                )

                uncontracted = [n for n in uncontracted if not n.is_contracted]
                memory.check_memory()
                order += 1

        logger.info(
            "Contraction hierarchies generated in %.1fs (%d rounds, %d shortcut edges)",
            time.perf_counter() - start_time,
            state.round_count,
            len(state.shortcuts),
        )
        return state

    def is_independent(self, node: Node, priorities: Dict[int, Priority]) -> bool:
        """
        Check if a node beats every uncontracted node within two hops.

        Args:
            node: Uncontracted node
            priorities: Priorities of all nodes taking part in the round

        Returns:
            True if the node may be contracted this round
        """
        mine = priorities[node.id]
        for neighbor in self.graph.neighboring_nodes(node.id):
            if neighbor.id != node.id and self._beaten_by(mine, neighbor, priorities):
                return False
            for next_neighbor in self.graph.neighboring_nodes(neighbor.id):
                if next_neighbor.id != node.id and self._beaten_by(
                    mine, next_neighbor, priorities
                ):
                    return False
        return True

    @staticmethod
    def _beaten_by(mine: Priority, other: Node, priorities: Dict[int, Priority]) -> bool:
        if other.is_contracted:
            return False
        # Nodes without outgoing edges never take part in contraction
        theirs = priorities.get(other.id)
        return theirs is not None and not mine.beats(theirs)

    def _shortcuts_for(self, node: Node, priority: Priority) -> ShortcutSet:
        if priority.shortcuts is not None:
            return priority.shortcuts
        return ShortcutSet.for_node(self.graph, node.id)

    def _commit(
        self,
        order: int,
        independent: List[Node],
        shortcut_sets: List[ShortcutSet],
        state: ContractionState,
    ) -> int:
        """Insert the round's shortcuts, then mark its nodes contracted."""
        added = 0
        for shortcut_set in shortcut_sets:
            for shortcut in shortcut_set:
                reverse = shortcut.flip()
                self.graph.add_edge(shortcut.edge)
                self.graph.add_edge(reverse.edge)
                state.add_shortcut(shortcut)
                state.add_shortcut(reverse)
                added += 2

        depths = {
            n.id: compute_depth(m for m in self.graph.neighboring_nodes(n.id) if m.id != n.id)
            for n in independent
        }
        for node in independent:
            node.set_contraction_order(order)
            node.depth = depths[node.id]
            state.set_node_order(node.id, order)
        return added

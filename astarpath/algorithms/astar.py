"""A* shortest-path search over caller-defined graphs."""

from __future__ import annotations

import logging
from typing import Optional, Set

from astarpath.algorithms.pqueue import PriorityQueue, QueueItem
from astarpath.config import SEARCH_CONFIG, SearchConfig
from astarpath.logging import get_logger
from astarpath.path import Path
from astarpath.types import CostFunc, Graph, HeuristicFunc, NodeT

logger = get_logger(__name__)


def find_path(
    graph: Graph[NodeT],
    start: NodeT,
    dest: NodeT,
    cost_fn: CostFunc,
    heuristic_fn: HeuristicFunc,
    config: Optional[SearchConfig] = None,
) -> Optional[Path[NodeT]]:
    """
    Find the lowest-cost path from ``start`` to ``dest`` using A*.

    Candidate paths are ordered by ``cost so far + heuristic_fn(node, dest)``.
    Nodes are closed on first extraction; later candidates ending at a closed
    node are discarded when popped rather than removed from the queue when
    superseded. Successors are pushed without checking whether they were seen
    before.

    Preconditions (not validated):
      - ``cost_fn`` is non-negative and deterministic within the call.
      - ``heuristic_fn`` never overestimates the remaining cost; otherwise the
        returned path may be sub-optimal.
      - Either ``dest`` is reachable or the reachable part of the graph is
        finite; otherwise the search does not terminate.

    Among candidates of equal priority the one pushed first is expanded first,
    so repeated calls with identical inputs return identical paths.

    Args:
        graph: Object providing ``neighbors(node)``.
        start: Node the path starts at.
        dest: Node the path must reach.
        cost_fn: Cost of moving between two adjacent nodes.
        heuristic_fn: Estimated remaining cost from a node to ``dest``.
        config: Logging tunables; defaults to ``SEARCH_CONFIG``.

    Returns:
        The optimal ``Path`` including both endpoints (``Path([start])`` when
        ``start == dest``), or None if ``dest`` is unreachable.
    """
    if config is None:
        config = SEARCH_CONFIG
    debug = logger.isEnabledFor(logging.DEBUG)

    closed: Set[NodeT] = set()
    pq = PriorityQueue()
    pq.push(QueueItem(Path((start,))))

    expanded = 0
    pushed = 1
    stale = 0

    if debug:
        logger.debug("A* search started: %r -> %r", start, dest)

    while pq:
        item = pq.pop()
        path: Path[NodeT] = item.value
        node = path.dst_node

        if node in closed:
            stale += 1
            continue

        if node == dest:
            if debug:
                logger.debug(
                    "Path found: %d nodes, cost=%s "
                    "(expanded=%d, pushed=%d, stale=%d)",
                    len(path),
                    item.cost,
                    expanded,
                    pushed,
                    stale,
                )
            return path

        closed.add(node)
        expanded += 1
        if debug and config.should_log_progress(expanded):
            logger.debug(
                "A* progress: expanded=%d, frontier=%d, best priority=%s",
                expanded,
                len(pq),
                item.priority,
            )

        for neighbor in graph.neighbors(node):
            cost = item.cost + cost_fn(node, neighbor)
            pq.push(
                QueueItem(
                    path.extend(neighbor),
                    priority=cost + heuristic_fn(neighbor, dest),
                    cost=cost,
                )
            )
            pushed += 1

    if debug:
        logger.debug(
            "No path from %r to %r (expanded=%d, pushed=%d, stale=%d)",
            start,
            dest,
            expanded,
            pushed,
            stale,
        )
    return None

"""astarpath: A* shortest-path search over caller-defined graphs.

The caller supplies the graph as any object with a ``neighbors(node)`` method,
plus a cost function and a heuristic. The library owns only the search loop
and its priority queue.

Primary API:
    find_path() - Lowest-cost path between two nodes, or None
    Path - Immutable node sequence with a ``cost(cost_fn)`` helper
    Graph - Protocol describing the neighbour capability

Example:
    import math
    from astarpath import find_path

    class Points:
        def __init__(self, links):
            self.links = links

        def neighbors(self, node):
            return self.links.get(node, [])

    def dist(p, q):
        return math.hypot(q[0] - p[0], q[1] - p[1])

    g = Points({(0, 0): [(1, 1)], (1, 1): [(2, 0)]})
    path = find_path(g, (0, 0), (2, 0), dist, dist)
    total = path.cost(dist)
"""

from __future__ import annotations

from astarpath import logging
from astarpath._version import __version__
from astarpath.algorithms.astar import find_path
from astarpath.algorithms.pqueue import PriorityQueue, QueueItem
from astarpath.config import SEARCH_CONFIG, SearchConfig
from astarpath.path import Path
from astarpath.types import Cost, CostFunc, Graph, HeuristicFunc

__all__ = [
    # Version
    "__version__",
    # Search
    "find_path",
    "Path",
    # Types
    "Graph",
    "Cost",
    "CostFunc",
    "HeuristicFunc",
    # Data structures
    "PriorityQueue",
    "QueueItem",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Utilities
    "logging",
]

"""Global pytest configuration and shared sample graphs.

Graphs here are caller-side scaffolding: small adjacency structures and a
character maze, each exposing only ``neighbors(node)``.
"""

from __future__ import annotations

import math
from typing import Dict, List, Tuple

import pytest

Point = Tuple[int, int]


class AdjacencyGraph:
    """Undirected adjacency list keyed by node."""

    def __init__(self) -> None:
        self.adj: Dict[object, List[object]] = {}

    def link(self, a, b) -> "AdjacencyGraph":
        """Add a bidirectional edge between ``a`` and ``b``."""
        self.adj.setdefault(a, []).append(b)
        self.adj.setdefault(b, []).append(a)
        return self

    def arc(self, a, b) -> "AdjacencyGraph":
        """Add a directed edge from ``a`` to ``b``."""
        self.adj.setdefault(a, []).append(b)
        self.adj.setdefault(b, [])
        return self

    def neighbors(self, node) -> List[object]:
        return self.adj.get(node, [])


class FloorPlan:
    """Character grid where ' ' is open floor and '#' is wall.

    Nodes are (x, y) tuples; movement is 4-directional.
    """

    OFFSETS = ((0, -1), (1, 0), (0, 1), (-1, 0))  # N, E, S, W

    def __init__(self, rows: List[str]) -> None:
        self.rows = list(rows)

    def is_free_at(self, p: Point) -> bool:
        x, y = p
        return 0 <= y < len(self.rows) and 0 <= x < len(self.rows[y]) and (
            self.rows[y][x] == " "
        )

    def neighbors(self, p: Point) -> List[Point]:
        candidates = [(p[0] + dx, p[1] + dy) for dx, dy in self.OFFSETS]
        return [q for q in candidates if self.is_free_at(q)]

    def render(self, path) -> List[str]:
        """Return the rows with every node of ``path`` marked by '.'."""
        rows = [list(row) for row in self.rows]
        for x, y in path:
            rows[y][x] = "."
        return ["".join(row) for row in rows]


def euclidean(p: Point, q: Point) -> float:
    return math.sqrt((q[0] - p[0]) ** 2 + (q[1] - p[1]) ** 2)


def zero_heuristic(node, dest) -> float:
    return 0.0


@pytest.fixture
def points():
    # E is deliberately left unlinked
    return {"A": (2, 3), "B": (1, 7), "C": (1, 6), "D": (5, 6), "E": (9, 9)}


@pytest.fixture
def point_graph(points):
    #      4.123
    #   B─────────┐
    #   │         │ 4.123
    #   A         D
    #   │         │ 4.0
    #   C─────────┘
    #      3.162
    p = points
    return AdjacencyGraph().link(p["A"], p["B"]).link(p["A"], p["C"]).link(
        p["B"], p["D"]
    ).link(p["C"], p["D"])


@pytest.fixture
def maze_rows():
    return [
        "###############",
        "#   # #     # #",
        "# ### ### ### #",
        "#   # # #   # #",
        "### # # # ### #",
        "# # #         #",
        "# # ### ### ###",
        "#   # # # #   #",
        "### # # # # ###",
        "# #       # # #",
        "# # ######### #",
        "#         #   #",
        "# ### # # ### #",
        "#   # # #     #",
        "###############",
    ]


@pytest.fixture
def maze(maze_rows):
    return FloorPlan(maze_rows)


@pytest.fixture
def square():
    # Two equal-cost routes from A to D:
    #   A──►B──►D
    #   │       ▲
    #   └──►C───┘
    return AdjacencyGraph().arc("A", "B").arc("A", "C").arc("B", "D").arc("C", "D")


@pytest.fixture
def unit_cost():
    return lambda a, b: 1.0


@pytest.fixture
def dist():
    return euclidean


@pytest.fixture
def no_heuristic():
    return zero_heuristic


@pytest.fixture
def make_graph():
    return AdjacencyGraph

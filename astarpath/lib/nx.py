"""NetworkX integration.

Exposes an existing NetworkX graph to ``find_path`` without copying it.

Example:
    >>> import networkx as nx
    >>> from astarpath import find_path
    >>> from astarpath.lib.nx import NxGraph, edge_cost
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=2.0)
    >>> G.add_edge("B", "C", weight=1.0)
    >>>
    >>> path = find_path(NxGraph(G), "A", "C", edge_cost(G), lambda n, d: 0.0)
    >>> list(path)
    ['A', 'B', 'C']
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Hashable, Iterator, Union

from astarpath.types import CostFunc

if TYPE_CHECKING:
    import networkx as nx

    NxGraphType = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraphType = Any


class NxGraph:
    """Neighbour view over a NetworkX graph.

    Directed graphs yield successors; undirected graphs yield all adjacent
    nodes. The wrapped graph is read, never modified.

    Attributes:
        graph: The wrapped NetworkX graph.
    """

    def __init__(self, graph: NxGraphType) -> None:
        self.graph = graph

    def neighbors(self, node: Hashable) -> Iterator[Hashable]:
        """Return an iterator over the nodes adjacent to ``node``.

        Raises:
            KeyError: If ``node`` is not in the graph.
        """
        if node not in self.graph:
            raise KeyError(f"Node '{node}' is not in the graph.")
        if self.graph.is_directed():
            return self.graph.successors(node)
        return self.graph.neighbors(node)


def edge_cost(
    graph: NxGraphType, attr: str = "weight", default: float = 1.0
) -> CostFunc:
    """Build a cost function that reads an edge attribute.

    For multigraphs the cheapest of the parallel edges is used.

    Args:
        graph: NetworkX graph the cost function reads from.
        attr: Edge attribute holding the cost.
        default: Cost for edges that lack ``attr``.

    Returns:
        Function ``(u, v) -> float``. It raises ``KeyError`` when ``v`` is
        not adjacent to ``u``.
    """
    multigraph = graph.is_multigraph()

    def _cost(u: Hashable, v: Hashable) -> float:
        try:
            data = graph[u][v]
        except KeyError:
            raise KeyError(f"No edge from '{u}' to '{v}' in the graph.") from None
        if multigraph:
            return min(float(d.get(attr, default)) for d in data.values())
        return float(data.get(attr, default))

    return _cost


__all__ = ["NxGraph", "edge_cost"]

"""Type aliases and protocols shared by the search components."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Protocol, TypeVar, Union

#: Represents a numeric cost (e.g. distance, latency, etc.).
Cost = Union[int, float]

#: Node identity. Anything hashable with meaningful equality.
NodeT = TypeVar("NodeT", bound=Hashable)

#: Cost of moving from the first node to the adjacent second node.
CostFunc = Callable[[NodeT, NodeT], Cost]

#: Estimated remaining cost from a node (first argument) to the destination.
HeuristicFunc = Callable[[NodeT, NodeT], Cost]


class Graph(Protocol[NodeT]):
    """Minimal graph capability required by the search.

    Any object with a compatible ``neighbors`` method satisfies this protocol;
    the storage behind it (adjacency dict, grid, generated on the fly) is
    irrelevant to the algorithm.
    """

    def neighbors(self, node: NodeT) -> Iterable[NodeT]:
        """Return the nodes reachable from ``node`` by a single edge."""
        ...

"""Immutable representation of a walk through a graph.

A ``Path`` is an ordered, non-empty tuple of nodes. Extending a path returns
a new ``Path`` and leaves the original untouched, so any number of candidate
continuations of the same prefix may coexist.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Tuple, overload

from astarpath.types import CostFunc, NodeT


@dataclass(frozen=True)
class Path(Generic[NodeT]):
    """Represents a single path in a graph.

    Attributes:
        nodes: Nodes in traversal order, start node first.
    """

    nodes: Tuple[NodeT, ...]

    def __init__(self, nodes: Iterable[NodeT]) -> None:
        nodes = tuple(nodes)
        if not nodes:
            raise ValueError("A path must contain at least one node.")
        object.__setattr__(self, "nodes", nodes)

    @overload
    def __getitem__(self, idx: int) -> NodeT: ...

    @overload
    def __getitem__(self, idx: slice) -> Tuple[NodeT, ...]: ...

    def __getitem__(self, idx):
        """Return the node (or tuple of nodes for a slice) at ``idx``."""
        return self.nodes[idx]

    def __iter__(self) -> Iterator[NodeT]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        return f"Path({list(self.nodes)!r})"

    @property
    def src_node(self) -> NodeT:
        """Return the first node in the path (the source node)."""
        return self.nodes[0]

    @property
    def dst_node(self) -> NodeT:
        """Return the last node in the path (the frontier node)."""
        return self.nodes[-1]

    def extend(self, node: NodeT) -> Path[NodeT]:
        """Return a new path with ``node`` appended.

        Args:
            node: Node to append after the current last node.

        Returns:
            A new ``Path``; this path is not modified.
        """
        return Path(self.nodes + (node,))

    def cost(self, cost_fn: CostFunc) -> float:
        """Calculate the total cost of the path.

        Applies ``cost_fn`` to each consecutive pair of nodes and sums the
        results left to right. A single-node path costs 0.

        Args:
            cost_fn: Function returning the cost of moving between two
                adjacent nodes.

        Returns:
            The summed cost as a float.
        """
        total = 0.0
        for a, b in zip(self.nodes, self.nodes[1:]):
            total += cost_fn(a, b)
        return total

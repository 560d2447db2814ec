"""Neighbour-enumeration capability consumed by the extension algorithms.

The algorithms never touch a concrete graph type. They only need, for a given
vertex, its outgoing and incoming neighbours. ``networkx.DiGraph`` and
``networkx.MultiDiGraph`` satisfy the protocol as-is; on a multigraph parallel
edges collapse into a single neighbour.

Enumeration order must be stable for the duration of an extension call. The
graph must not be mutated while a call is in progress.
"""

from __future__ import annotations

from typing import Hashable, Iterable, Protocol, runtime_checkable

from dbgpath.types.base import Direction


@runtime_checkable
class NeighborGraph(Protocol):
    """Any graph exposing directed neighbour enumeration."""

    def successors(self, n: Hashable) -> Iterable[Hashable]:
        """Iterate over vertices reachable from ``n`` by one outgoing edge."""
        ...

    def predecessors(self, n: Hashable) -> Iterable[Hashable]:
        """Iterate over vertices with an edge into ``n``."""
        ...


def neighbors(
    graph: NeighborGraph, vertex: Hashable, direction: Direction
) -> Iterable[Hashable]:
    """Return the neighbours of ``vertex`` in ``direction``.

    Args:
        graph: Graph providing ``successors`` and ``predecessors``.
        vertex: Vertex whose neighbours are requested.
        direction: FORWARD for outgoing edges, REVERSE for incoming edges.

    Returns:
        An iterable of neighbour vertices in the graph's enumeration order.
    """
    if direction == Direction.FORWARD:
        return graph.successors(vertex)
    assert direction == Direction.REVERSE
    return graph.predecessors(vertex)

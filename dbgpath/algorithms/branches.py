"""Branch classification with tip trimming.

A neighbour counts as a *true branch* when the walk it starts is longer than
``trim_len`` steps. Shorter branches are treated as sequencing noise and
ignored when deciding whether a vertex is a dead end, a branching point, or
has a unique continuation.
"""

from __future__ import annotations

from itertools import chain
from typing import Hashable, List, Optional

from dbgpath.algorithms.lookahead import look_ahead
from dbgpath.graph.capability import NeighborGraph, neighbors
from dbgpath.types.base import Direction
from dbgpath.types.dto import SingleExtension

_MISSING = object()


def true_branches(
    vertex: Hashable,
    direction: Direction,
    graph: NeighborGraph,
    trim_len: int = 0,
) -> List[Hashable]:
    """Return neighbour vertices that begin branches longer than ``trim_len``.

    Args:
        vertex: Root vertex.
        direction: Direction for neighbours (FORWARD or REVERSE).
        graph: Graph providing neighbour enumeration.
        trim_len: Ignore branches less than or equal to this length.

    Returns:
        Neighbours whose branch survives trimming, in enumeration order.
    """
    return [
        neighbor
        for neighbor in neighbors(graph, vertex, direction)
        if look_ahead(neighbor, direction, trim_len, graph)
    ]


def get_neighbor(
    vertex: Hashable,
    direction: Direction,
    graph: NeighborGraph,
    trim_len: int = 0,
) -> SingleExtension:
    """Return the unique neighbour of ``vertex`` in ``direction``, if any.

    A vertex with a single neighbour is always EXTENDED, whatever that
    neighbour's branch length: one physical edge is never trimmed. With two
    or more neighbours only true branches are counted, stopping as soon as a
    second one is found.

    Args:
        vertex: The subject vertex.
        direction: FORWARD for successors, REVERSE for predecessors.
        graph: Graph providing neighbour enumeration.
        trim_len: Ignore branches shorter than or equal to this length.

    Returns:
        SingleExtension with DEAD_END, BRANCHING_POINT, or EXTENDED and the
        unique neighbour.
    """
    candidates = iter(neighbors(graph, vertex, direction))

    first = next(candidates, _MISSING)
    if first is _MISSING:
        return SingleExtension.dead_end()

    second = next(candidates, _MISSING)
    if second is _MISSING:
        return SingleExtension.extended(first)

    branch_count = 0
    branch_root: Optional[Hashable] = None
    for neighbor in chain((first, second), candidates):
        if look_ahead(neighbor, direction, trim_len, graph):
            branch_count += 1
            if branch_count >= 2:
                return SingleExtension.branching_point()
            branch_root = neighbor

    if branch_count == 0:
        return SingleExtension.dead_end()
    return SingleExtension.extended(branch_root)


def get_successor(
    vertex: Hashable, graph: NeighborGraph, trim_len: int = 0
) -> SingleExtension:
    """Return the outgoing neighbour of ``vertex`` if it is unique.

    See ``get_neighbor`` for the trimming rules.
    """
    return get_neighbor(vertex, Direction.FORWARD, graph, trim_len)


def get_predecessor(
    vertex: Hashable, graph: NeighborGraph, trim_len: int = 0
) -> SingleExtension:
    """Return the incoming neighbour of ``vertex`` if it is unique.

    See ``get_neighbor`` for the trimming rules.
    """
    return get_neighbor(vertex, Direction.REVERSE, graph, trim_len)

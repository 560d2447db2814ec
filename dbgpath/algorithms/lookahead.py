"""Bounded-depth reachability probing.

``look_ahead`` answers whether a branch starting at a vertex is long enough to
count as a true branch rather than a short spurious tip.
"""

from __future__ import annotations

from typing import Hashable, Iterator, List, Set

from dbgpath.graph.capability import NeighborGraph, neighbors
from dbgpath.types.base import Direction


def look_ahead(
    vertex: Hashable,
    direction: Direction,
    depth_limit: int,
    graph: NeighborGraph,
) -> bool:
    """Return True if a walk of ``depth_limit`` steps extends from ``vertex``.

    Performs a depth-first search in ``direction``. The start vertex sits at
    depth 0, so a True result means a walk of at least ``depth_limit + 1``
    vertices exists. Each vertex is entered at most once per search; the
    seen-set is local to this call and is not unwound on backtrack, which
    bounds the work on cyclic graphs.

    Args:
        vertex: Starting vertex for the traversal.
        direction: FORWARD to follow outgoing edges, REVERSE for incoming.
        depth_limit: Number of steps to probe for. Zero is always satisfied.
        graph: Graph providing neighbour enumeration.

    Returns:
        True if at least one walk reaches ``depth_limit``, False otherwise.

    Raises:
        ValueError: If ``depth_limit`` is negative.
    """
    if depth_limit < 0:
        raise ValueError(f"depth_limit must be >= 0, got {depth_limit}")
    if depth_limit == 0:
        return True

    seen: Set[Hashable] = {vertex}
    # stack[i] iterates the neighbours found at depth i + 1
    stack: List[Iterator[Hashable]] = [iter(neighbors(graph, vertex, direction))]

    while stack:
        depth = len(stack)
        for neighbor in stack[-1]:
            if neighbor in seen:
                continue
            seen.add(neighbor)
            if depth == depth_limit:
                return True
            stack.append(iter(neighbors(graph, neighbor, direction)))
            break
        else:
            # backtrack
            stack.pop()

    return False

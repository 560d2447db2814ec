"""Single-step extension and the iterative path walker.

``extend_path`` grows a path one vertex at a time while its active endpoint
has a unique continuation, and reports why it stopped: a dead end, a
branching point, a cycle, or the caller's length limit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Deque, Hashable, Optional, Set, Union

from dbgpath.algorithms.branches import get_neighbor
from dbgpath.graph.capability import NeighborGraph
from dbgpath.logging import get_logger
from dbgpath.types.base import Direction, PathExtensionResult, SingleExtensionResult
from dbgpath.types.dto import SingleExtension

if TYPE_CHECKING:
    from dbgpath.model.path import Path

    PathLike = Union[Path, Deque[Hashable]]

logger = get_logger(__name__)


def get_single_vertex_extension(
    vertex: Hashable,
    direction: Direction,
    graph: NeighborGraph,
    trim_len: int = 0,
) -> SingleExtension:
    """Return the single vertex extension of ``vertex`` if it is unique.

    A vertex that merges two or more true branches from the opposite
    direction is reported as a BRANCHING_POINT and is not passed through.
    Otherwise the classification of the target direction is returned as-is.
    Only BRANCHING_POINT from the opposite side matters; a vertex with no
    edges behind it can still be extended.

    Args:
        vertex: The subject vertex.
        direction: Direction of extension (FORWARD or REVERSE).
        graph: Graph providing neighbour enumeration.
        trim_len: Ignore branches shorter than or equal to this length.

    Returns:
        SingleExtension carrying the next vertex when the result is EXTENDED.
    """
    behind = get_neighbor(vertex, direction.opposite, graph, trim_len)
    if behind.result == SingleExtensionResult.BRANCHING_POINT:
        return SingleExtension.branching_point()

    return get_neighbor(vertex, direction, graph, trim_len)


def extend_path_by_single_vertex(
    path: "PathLike",
    direction: Direction,
    graph: NeighborGraph,
    trim_len: int = 0,
) -> SingleExtensionResult:
    """Append/prepend the unique next/previous vertex to ``path``, if any.

    Args:
        path: Path to extend; modified only when the result is EXTENDED.
        direction: FORWARD extends the back, REVERSE extends the front.
        graph: Graph providing neighbour enumeration.
        trim_len: Ignore branches shorter than or equal to this length.

    Returns:
        DEAD_END, BRANCHING_POINT, or EXTENDED.
    """
    vertex = path[-1] if direction == Direction.FORWARD else path[0]
    step = get_single_vertex_extension(vertex, direction, graph, trim_len)
    if step.result == SingleExtensionResult.EXTENDED:
        if direction == Direction.FORWARD:
            path.append(step.vertex)
        else:
            assert direction == Direction.REVERSE
            path.appendleft(step.vertex)
    return step.result


def extend_path(
    path: "PathLike",
    direction: Direction,
    graph: NeighborGraph,
    visited: Optional[Set[Hashable]] = None,
    trim_len: int = 0,
    max_len: Optional[int] = None,
) -> PathExtensionResult:
    """Extend a path up to the next branching point in the graph.

    Args:
        path: Non-empty path to extend (modified by this function).
        direction: Direction to extend the path (FORWARD or REVERSE).
        graph: Graph in which to perform the extension.
        visited: Previously visited vertices, used to detect cycles. Must
            contain every vertex of ``path``; it is updated in place. When
            None, a fresh set is seeded from ``path``.
        trim_len: Ignore branches less than or equal to this length when
            detecting branching points.
        max_len: Stop once the path holds this many vertices. None means
            unbounded.

    Returns:
        PathExtensionResult describing whether the path grew and why the walk
        stopped. When a cycle is found the repeated vertex is not left in the
        path.
    """
    assert len(path) > 0, "cannot extend an empty path"
    if visited is None:
        visited = set(path)
    else:
        assert visited.issuperset(path), "visited set must contain the path"

    orig_len = len(path)

    if max_len is not None and orig_len >= max_len:
        logger.debug(f"Path of length {orig_len} already at max_len={max_len}")
        return PathExtensionResult.LENGTH_LIMIT

    step = SingleExtensionResult.EXTENDED
    detected_cycle = False

    while (
        step == SingleExtensionResult.EXTENDED
        and not detected_cycle
        and (max_len is None or len(path) < max_len)
    ):
        step = extend_path_by_single_vertex(path, direction, graph, trim_len)
        if step == SingleExtensionResult.EXTENDED:
            added = path[-1] if direction == Direction.FORWARD else path[0]
            if added in visited:
                detected_cycle = True
            else:
                visited.add(added)

    # the last vertex added is a repeat, so remove it
    if detected_cycle:
        if direction == Direction.FORWARD:
            path.pop()
        else:
            assert direction == Direction.REVERSE
            path.popleft()

    result = _classify_walk(
        grew=len(path) > orig_len,
        detected_cycle=detected_cycle,
        step=step,
    )
    logger.debug(
        f"Extended path {direction.name} by {len(path) - orig_len} vertices: {result.name}"
    )
    return result


def _classify_walk(
    grew: bool, detected_cycle: bool, step: SingleExtensionResult
) -> PathExtensionResult:
    """Map the final walk state to a PathExtensionResult."""
    if detected_cycle:
        return (
            PathExtensionResult.EXTENDED_TO_CYCLE
            if grew
            else PathExtensionResult.CYCLE
        )
    if step == SingleExtensionResult.DEAD_END:
        return (
            PathExtensionResult.EXTENDED_TO_DEAD_END
            if grew
            else PathExtensionResult.DEAD_END
        )
    if step == SingleExtensionResult.BRANCHING_POINT:
        return (
            PathExtensionResult.EXTENDED_TO_BRANCHING_POINT
            if grew
            else PathExtensionResult.BRANCHING_POINT
        )
    # the last step succeeded, so the walk stopped at max_len
    assert step == SingleExtensionResult.EXTENDED
    return (
        PathExtensionResult.EXTENDED_TO_LENGTH_LIMIT
        if grew
        else PathExtensionResult.LENGTH_LIMIT
    )

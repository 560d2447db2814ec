"""Grow a single seed vertex into a maximal unambiguous path."""

from __future__ import annotations

from typing import Hashable, Optional

from dbgpath.algorithms.extend import extend_path
from dbgpath.graph.capability import NeighborGraph
from dbgpath.logging import get_logger
from dbgpath.model.path import Path
from dbgpath.types.base import Direction
from dbgpath.types.dto import UnitigResult

logger = get_logger(__name__)


def build_unitig(
    seed: Hashable,
    graph: NeighborGraph,
    trim_len: int = 0,
    max_len: Optional[int] = None,
) -> UnitigResult:
    """Extend ``seed`` forward and then in reverse with a shared visited set.

    Sharing the visited set means a reverse walk that runs into a vertex
    already collected by the forward walk stops with a cycle instead of
    wrapping around.

    Args:
        seed: Vertex to start from.
        graph: Graph providing neighbour enumeration.
        trim_len: Ignore branches shorter than or equal to this length.
        max_len: Cap on the total number of vertices in the result.

    Returns:
        UnitigResult with the path in forward order and both walk outcomes.
    """
    path = Path([seed])
    visited = {seed}

    forward = extend_path(
        path, Direction.FORWARD, graph, visited, trim_len=trim_len, max_len=max_len
    )
    reverse = extend_path(
        path, Direction.REVERSE, graph, visited, trim_len=trim_len, max_len=max_len
    )
    logger.debug(
        f"Unitig from {seed!r}: {len(path)} vertices "
        f"(forward={forward.name}, reverse={reverse.name})"
    )
    return UnitigResult(
        seed=seed, path=path.nodes_seq, forward=forward, reverse=reverse
    )

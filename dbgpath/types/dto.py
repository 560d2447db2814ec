"""Immutable result containers returned by the extension algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional, Tuple

from dbgpath.types.base import Direction, PathExtensionResult, SingleExtensionResult

#: Vertex identity supplied by the graph; only hashing and equality are used.
Vertex = Hashable


@dataclass(frozen=True)
class SingleExtension:
    """Classification of one vertex's neighbourhood in one direction.

    Attributes:
        result: DEAD_END, BRANCHING_POINT or EXTENDED.
        vertex: The unique next vertex when ``result`` is EXTENDED, else None.
    """

    result: SingleExtensionResult
    vertex: Optional[Vertex] = None

    @classmethod
    def dead_end(cls) -> "SingleExtension":
        return cls(SingleExtensionResult.DEAD_END)

    @classmethod
    def branching_point(cls) -> "SingleExtension":
        return cls(SingleExtensionResult.BRANCHING_POINT)

    @classmethod
    def extended(cls, vertex: Vertex) -> "SingleExtension":
        return cls(SingleExtensionResult.EXTENDED, vertex)

    @property
    def is_extended(self) -> bool:
        return self.result == SingleExtensionResult.EXTENDED


@dataclass(frozen=True)
class UnitigResult:
    """Result of growing a single seed vertex in both directions.

    Attributes:
        seed: The starting vertex.
        path: Vertices of the maximal unambiguous path, in forward order.
        forward: Outcome of the forward walk.
        reverse: Outcome of the reverse walk.
    """

    seed: Vertex
    path: Tuple[Vertex, ...]
    forward: PathExtensionResult
    reverse: PathExtensionResult

    def __len__(self) -> int:
        return len(self.path)

    def result_for(self, direction: Direction) -> PathExtensionResult:
        """Return the walk outcome recorded for ``direction``."""
        return self.forward if direction == Direction.FORWARD else self.reverse

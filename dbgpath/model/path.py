"""Double-ended vertex path used by the extension engine.

``Path`` wraps a ``collections.deque`` so that vertices can be appended at
either end in constant time. It exposes the small deque surface the
extension algorithms rely on (``append``/``appendleft``/``pop``/``popleft``,
indexing, ``len``) so a plain ``deque`` may be used interchangeably.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, Hashable, Iterator, Tuple


@dataclass(eq=False, repr=False)
class Path:
    """An ordered walk of vertices that can grow at both ends.

    Attributes:
        vertices: The underlying deque, front to back in forward order. Any
            other iterable is copied into a new deque; a deque is adopted as is.
    """

    vertices: Deque[Hashable] = field(default_factory=deque)

    def __post_init__(self) -> None:
        if not isinstance(self.vertices, deque):
            self.vertices = deque(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.vertices)

    def __getitem__(self, idx: int) -> Hashable:
        return self.vertices[idx]

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.vertices

    def __eq__(self, other: Any) -> bool:
        """Compare vertex sequences with another Path or any sequence."""
        if isinstance(other, Path):
            return list(self.vertices) == list(other.vertices)
        if isinstance(other, (list, tuple, deque)):
            return list(self.vertices) == list(other)
        return NotImplemented

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Path({list(self.vertices)!r})"

    #
    # Deque surface
    #
    def append(self, vertex: Hashable) -> None:
        self.vertices.append(vertex)

    def appendleft(self, vertex: Hashable) -> None:
        self.vertices.appendleft(vertex)

    def pop(self) -> Hashable:
        return self.vertices.pop()

    def popleft(self) -> Hashable:
        return self.vertices.popleft()

    #
    # Convenience accessors
    #
    @property
    def front(self) -> Hashable:
        """First vertex of the path.

        Raises:
            IndexError: If the path is empty.
        """
        return self.vertices[0]

    @property
    def back(self) -> Hashable:
        """Last vertex of the path.

        Raises:
            IndexError: If the path is empty.
        """
        return self.vertices[-1]

    @property
    def src_node(self) -> Hashable:
        """Alias for ``front``."""
        return self.front

    @property
    def dst_node(self) -> Hashable:
        """Alias for ``back``."""
        return self.back

    @property
    def nodes_seq(self) -> Tuple[Hashable, ...]:
        """Vertices in forward order as an immutable tuple."""
        return tuple(self.vertices)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly representation of the path."""
        return {"nodes": list(self.vertices), "length": len(self.vertices)}

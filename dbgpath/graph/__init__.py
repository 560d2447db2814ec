"""Graph capability used by the extension engine.

This package defines the `NeighborGraph` protocol and the `neighbors` helper
that dispatches on `Direction`. Concrete graphs live outside the engine; see
`dbgpath.io` for loaders that build ``networkx.DiGraph`` instances.
"""

from dbgpath.graph.capability import NeighborGraph, neighbors

__all__ = ["NeighborGraph", "neighbors"]

"""dbgpath: unambiguous path extension for directed graphs.

dbgpath decides, from local topology alone, whether a path can be extended
one or more steps and why the extension stops: a dead end, a branching
point, a cycle, or a length limit. Short spurious branches ("tips") shorter
than a trimming threshold are ignored when deciding what counts as a branch,
which makes the engine suitable for de Bruijn-style assembly graphs.

Primary API:
    extend_path() - Walk a path until a terminating condition
    build_unitig() - Grow a seed vertex in both directions
    get_successor(), get_predecessor() - Classify a vertex's neighbourhood
    true_branches(), look_ahead() - Inspect branch roots and branch depth

Example:
    import networkx as nx
    from dbgpath import Direction, Path, extend_path

    g = nx.DiGraph([("A", "B"), ("B", "C"), ("C", "D")])
    path = Path(["A"])
    result = extend_path(path, Direction.FORWARD, g)
    # result == PathExtensionResult.EXTENDED_TO_DEAD_END
    # list(path) == ["A", "B", "C", "D"]
"""

from __future__ import annotations

from dbgpath import cli, logging
from dbgpath._version import __version__
from dbgpath.algorithms import (
    build_unitig,
    extend_path,
    extend_path_by_single_vertex,
    get_neighbor,
    get_predecessor,
    get_single_vertex_extension,
    get_successor,
    look_ahead,
    true_branches,
)
from dbgpath.config import ExtensionConfig
from dbgpath.graph import NeighborGraph
from dbgpath.io import edgelist_to_graph, graph_from_dict, load_graph
from dbgpath.model.path import Path
from dbgpath.types import (
    Direction,
    PathExtensionResult,
    SingleExtension,
    SingleExtensionResult,
    UnitigResult,
    path_extended,
)

__all__ = [
    # Version
    "__version__",
    # Algorithms
    "look_ahead",
    "true_branches",
    "get_neighbor",
    "get_successor",
    "get_predecessor",
    "get_single_vertex_extension",
    "extend_path_by_single_vertex",
    "extend_path",
    "build_unitig",
    # Model
    "Path",
    "NeighborGraph",
    # Types
    "Direction",
    "SingleExtensionResult",
    "PathExtensionResult",
    "SingleExtension",
    "UnitigResult",
    "path_extended",
    # Configuration
    "ExtensionConfig",
    # Loaders
    "edgelist_to_graph",
    "graph_from_dict",
    "load_graph",
    # Utilities
    "cli",
    "logging",
]

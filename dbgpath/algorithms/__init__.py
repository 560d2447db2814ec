"""Path extension algorithms.

Modules, leaf-first:
- ``lookahead``: bounded-depth reachability probe.
- ``branches``: neighbour classification with tip trimming.
- ``extend``: single-step extension and the iterative path walker.
- ``unitig``: bidirectional walk from a single seed.
"""

from dbgpath.algorithms.branches import (
    get_neighbor,
    get_predecessor,
    get_successor,
    true_branches,
)
from dbgpath.algorithms.extend import (
    extend_path,
    extend_path_by_single_vertex,
    get_single_vertex_extension,
)
from dbgpath.algorithms.lookahead import look_ahead
from dbgpath.algorithms.unitig import build_unitig

__all__ = [
    "look_ahead",
    "true_branches",
    "get_neighbor",
    "get_successor",
    "get_predecessor",
    "get_single_vertex_extension",
    "extend_path_by_single_vertex",
    "extend_path",
    "build_unitig",
]

from collections import deque

import networkx as nx
import pytest

from dbgpath.algorithms.extend import (
    extend_path,
    extend_path_by_single_vertex,
    get_single_vertex_extension,
)
from dbgpath.model.path import Path
from dbgpath.types.base import Direction, PathExtensionResult, SingleExtensionResult
from dbgpath.types.dto import SingleExtension


class _UntouchableGraph:
    """Graph that fails the test if it is ever queried."""

    def successors(self, n):
        raise AssertionError("graph must not be consulted")

    def predecessors(self, n):
        raise AssertionError("graph must not be consulted")


#
# get_single_vertex_extension
#
def test_single_vertex_extension_forward(chain):
    assert get_single_vertex_extension("B", Direction.FORWARD, chain) == (
        SingleExtension.extended("C")
    )


def test_single_vertex_extension_reverse(chain):
    assert get_single_vertex_extension("B", Direction.REVERSE, chain) == (
        SingleExtension.extended("A")
    )


def test_single_vertex_extension_refuses_merge_point(merge):
    # C has two incoming branches, so it is not passed through forwards
    step = get_single_vertex_extension("C", Direction.FORWARD, merge, trim_len=0)
    assert step == SingleExtension.branching_point()


def test_single_vertex_extension_merge_tip_trimmed(merge):
    step = get_single_vertex_extension("C", Direction.FORWARD, merge, trim_len=1)
    assert step == SingleExtension.extended("D")


def test_single_vertex_extension_refuses_fork_in_reverse(fork):
    # A forks forwards, so a reverse walk may not pass through it
    assert get_single_vertex_extension("A", Direction.REVERSE, fork).result == (
        SingleExtensionResult.BRANCHING_POINT
    )


def test_vertex_without_predecessors_still_extends(chain):
    # only a BRANCHING_POINT behind the vertex blocks extension
    assert get_single_vertex_extension("A", Direction.FORWARD, chain) == (
        SingleExtension.extended("B")
    )


def test_single_vertex_extension_target_branching(fork):
    assert get_single_vertex_extension("A", Direction.FORWARD, fork).result == (
        SingleExtensionResult.BRANCHING_POINT
    )


#
# extend_path_by_single_vertex
#
def test_extend_by_single_vertex_appends_forward(chain):
    path = Path(["A", "B"])
    assert extend_path_by_single_vertex(path, Direction.FORWARD, chain) == (
        SingleExtensionResult.EXTENDED
    )
    assert path == ["A", "B", "C"]


def test_extend_by_single_vertex_prepends_reverse(chain):
    path = Path(["C", "D"])
    assert extend_path_by_single_vertex(path, Direction.REVERSE, chain) == (
        SingleExtensionResult.EXTENDED
    )
    assert path == ["B", "C", "D"]


def test_extend_by_single_vertex_leaves_path_on_failure(fork, chain):
    path = Path(["A"])
    assert extend_path_by_single_vertex(path, Direction.FORWARD, fork) == (
        SingleExtensionResult.BRANCHING_POINT
    )
    assert path == ["A"]

    path = Path(["D"])
    assert extend_path_by_single_vertex(path, Direction.FORWARD, chain) == (
        SingleExtensionResult.DEAD_END
    )
    assert path == ["D"]


#
# extend_path: scenarios
#
def test_extend_linear_chain_to_dead_end(chain):
    path = Path(["A"])
    result = extend_path(path, Direction.FORWARD, chain)
    assert result == PathExtensionResult.EXTENDED_TO_DEAD_END
    assert path == ["A", "B", "C", "D"]


def test_extend_linear_chain_in_reverse(chain):
    path = Path(["D"])
    result = extend_path(path, Direction.REVERSE, chain)
    assert result == PathExtensionResult.EXTENDED_TO_DEAD_END
    assert path == ["A", "B", "C", "D"]


def test_extend_fork_is_branching_point(fork):
    path = Path(["A"])
    assert extend_path(path, Direction.FORWARD, fork) == (
        PathExtensionResult.BRANCHING_POINT
    )
    assert path == ["A"]


def test_extend_fork_of_tips_is_dead_end(fork):
    path = Path(["A"])
    assert extend_path(path, Direction.FORWARD, fork, trim_len=5) == (
        PathExtensionResult.DEAD_END
    )
    assert path == ["A"]


def test_extend_triangle_to_cycle(triangle):
    path = Path(["A"])
    assert extend_path(path, Direction.FORWARD, triangle) == (
        PathExtensionResult.EXTENDED_TO_CYCLE
    )
    assert path == ["A", "B", "C"]


def test_extend_dead_end_without_growth(chain):
    path = Path(["D"])
    assert extend_path(path, Direction.FORWARD, chain) == PathExtensionResult.DEAD_END
    assert path == ["D"]


def test_extend_to_branching_point(tipped_chain):
    path = Path(["A"])
    assert extend_path(path, Direction.FORWARD, tipped_chain) == (
        PathExtensionResult.EXTENDED_TO_BRANCHING_POINT
    )
    assert path == ["A", "B"]


def test_extend_through_trimmed_tip(tipped_chain):
    path = Path(["A"])
    assert extend_path(path, Direction.FORWARD, tipped_chain, trim_len=1) == (
        PathExtensionResult.EXTENDED_TO_DEAD_END
    )
    assert path == ["A", "B", "C", "D", "E"]


def test_extend_stops_after_reaching_merge_point(merge):
    path = Path(["A"])
    assert extend_path(path, Direction.FORWARD, merge) == (
        PathExtensionResult.EXTENDED_TO_BRANCHING_POINT
    )
    assert path == ["A", "B", "C"]


def test_extend_through_merge_with_tip_trimmed(merge):
    path = Path(["A"])
    assert extend_path(path, Direction.FORWARD, merge, trim_len=1) == (
        PathExtensionResult.EXTENDED_TO_DEAD_END
    )
    assert path == ["A", "B", "C", "D"]


def test_extend_bubble_stops_at_both_sides(bubble):
    path = Path(["B1"])
    assert extend_path(path, Direction.FORWARD, bubble) == (
        PathExtensionResult.EXTENDED_TO_BRANCHING_POINT
    )
    assert path == ["B1", "B2", "D"]
    assert extend_path(path, Direction.REVERSE, bubble) == (
        PathExtensionResult.EXTENDED_TO_BRANCHING_POINT
    )
    assert path == ["A", "B1", "B2", "D"]


#
# extend_path: cycles
#
def test_extend_self_loop_is_cycle():
    g = nx.DiGraph([("A", "A")])
    path = Path(["A"])
    assert extend_path(path, Direction.FORWARD, g) == PathExtensionResult.CYCLE
    assert path == ["A"]


def test_extend_cycle_closed_by_first_step(triangle):
    path = Path(["A", "B", "C"])
    assert extend_path(path, Direction.FORWARD, triangle) == PathExtensionResult.CYCLE
    assert path == ["A", "B", "C"]


@pytest.mark.parametrize("direction", [Direction.FORWARD, Direction.REVERSE])
def test_extend_ring_never_repeats_vertices(ring, direction):
    path = Path([0])
    result = extend_path(path, direction, ring)
    assert result == PathExtensionResult.EXTENDED_TO_CYCLE
    assert len(path) == 6
    assert len(set(path)) == len(path)


def test_extend_uses_caller_visited_set(chain):
    visited = {"A", "C"}
    path = Path(["A"])
    assert extend_path(path, Direction.FORWARD, chain, visited) == (
        PathExtensionResult.EXTENDED_TO_CYCLE
    )
    assert path == ["A", "B"]
    assert visited == {"A", "B", "C"}


def test_extend_visited_set_grows_with_path(chain):
    visited = {"B"}
    path = Path(["B"])
    extend_path(path, Direction.FORWARD, chain, visited)
    assert visited == {"B", "C", "D"}
    assert visited.issuperset(path)


#
# extend_path: length limits
#
def test_extend_path_at_limit_does_not_touch_graph():
    path = Path(["A", "B"])
    result = extend_path(path, Direction.FORWARD, _UntouchableGraph(), max_len=2)
    assert result == PathExtensionResult.LENGTH_LIMIT
    assert path == ["A", "B"]


def test_extend_path_over_limit_does_not_touch_graph():
    path = Path(["A", "B", "C"])
    result = extend_path(path, Direction.REVERSE, _UntouchableGraph(), max_len=1)
    assert result == PathExtensionResult.LENGTH_LIMIT
    assert path == ["A", "B", "C"]


def test_extend_to_length_limit(chain):
    path = Path(["A"])
    assert extend_path(path, Direction.FORWARD, chain, max_len=3) == (
        PathExtensionResult.EXTENDED_TO_LENGTH_LIMIT
    )
    assert path == ["A", "B", "C"]


def test_extend_dead_end_exactly_at_limit(chain):
    # the walk reaches the limit before it can see D is a dead end
    path = Path(["A"])
    assert extend_path(path, Direction.FORWARD, chain, max_len=4) == (
        PathExtensionResult.EXTENDED_TO_LENGTH_LIMIT
    )
    assert path == ["A", "B", "C", "D"]


def test_extend_unbounded_ring_is_bounded_by_cycle(ring):
    path = Path([3])
    extend_path(path, Direction.FORWARD, ring, max_len=None)
    assert len(path) <= 1 + 6


#
# extend_path: containers and preconditions
#
def test_extend_accepts_plain_deque(chain):
    path = deque(["B"])
    assert extend_path(path, Direction.REVERSE, chain) == (
        PathExtensionResult.EXTENDED_TO_DEAD_END
    )
    assert list(path) == ["A", "B"]


def test_extend_empty_path_is_rejected(chain):
    with pytest.raises(AssertionError):
        extend_path(Path(), Direction.FORWARD, chain)


def test_extend_rejects_visited_missing_path_vertices(chain):
    with pytest.raises(AssertionError):
        extend_path(Path(["A", "B"]), Direction.FORWARD, chain, visited={"A"})


def test_extend_path_logs_outcome(chain, caplog):
    with caplog.at_level("DEBUG", logger="dbgpath"):
        extend_path(Path(["A"]), Direction.FORWARD, chain)
    assert "EXTENDED_TO_DEAD_END" in caplog.text

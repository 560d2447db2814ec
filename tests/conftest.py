"""Global pytest configuration and shared sample graphs.

Every fixture returns a fresh ``networkx.DiGraph``. Edge insertion order
fixes neighbour enumeration order, which some tests rely on.
"""

from __future__ import annotations

import networkx as nx
import pytest


@pytest.fixture
def chain():
    #  A───►B───►C───►D
    return nx.DiGraph([("A", "B"), ("B", "C"), ("C", "D")])


@pytest.fixture
def fork():
    #      ┌───►B
    #  A───┤
    #      └───►C
    return nx.DiGraph([("A", "B"), ("A", "C")])


@pytest.fixture
def triangle():
    #  A───►B───►C
    #  ▲         │
    #  └─────────┘
    return nx.DiGraph([("A", "B"), ("B", "C"), ("C", "A")])


@pytest.fixture
def tipped_chain():
    #  A───►B───►C───►D───►E
    #       │
    #       └───►T          (one-vertex tip)
    return nx.DiGraph([("A", "B"), ("B", "C"), ("B", "T"), ("C", "D"), ("D", "E")])


@pytest.fixture
def merge():
    #  A───►B───►C───►D
    #            ▲
    #       X────┘          (one-vertex tip into C)
    return nx.DiGraph([("A", "B"), ("B", "C"), ("X", "C"), ("C", "D")])


@pytest.fixture
def ring():
    #  0───►1───►2───►3───►4───►5───►0
    g = nx.DiGraph()
    nx.add_cycle(g, range(6))
    return g


@pytest.fixture
def bubble():
    #       ┌───►B1───►B2───┐
    #  A────┤               ├───►D───►E
    #       └───►C1───►C2───┘
    return nx.DiGraph(
        [
            ("A", "B1"),
            ("A", "C1"),
            ("B1", "B2"),
            ("C1", "C2"),
            ("B2", "D"),
            ("C2", "D"),
            ("D", "E"),
        ]
    )

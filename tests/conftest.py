"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from graph_engine import Graph


def build_graph(vertex_count: int, edges: list[tuple[int, int, int]]) -> Graph:
    """Create a graph and insert edges in the given order."""
    graph = Graph(vertex_count)
    for u, v, w in edges:
        graph.add_edge(u, v, w)
    return graph


@pytest.fixture
def make_graph():
    """Factory fixture: make_graph(n, [(u, v, w), ...])."""
    return build_graph


@pytest.fixture
def path_graph() -> Graph:
    """0 - 1 - 2 - 3 with unit weights."""
    return build_graph(4, [(0, 1, 1), (1, 2, 1), (2, 3, 1)])


@pytest.fixture
def mst_graph() -> Graph:
    """Four vertices whose minimum spanning tree weighs 4 (0-1, 1-2, 2-3)."""
    return build_graph(4, [(0, 1, 1), (1, 2, 2), (0, 2, 4), (2, 3, 1)])


@pytest.fixture
def detour_graph() -> Graph:
    """Direct edge 0-1 costs 4, the detour 0-2-1 costs 2."""
    return build_graph(3, [(0, 1, 4), (0, 2, 1), (2, 1, 1)])


@pytest.fixture
def branching_graph() -> Graph:
    """Two branches from 0: 0-1-3 and 0-2-4, edges added in that order."""
    return build_graph(5, [(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 4, 1)])


@pytest.fixture
def triangle_graph() -> Graph:
    """Triangle 0-1-2 whose DFS pushes vertex 2 twice."""
    return build_graph(3, [(0, 1, 1), (1, 2, 1), (0, 2, 1)])


@pytest.fixture
def disconnected_graph() -> Graph:
    """Components {0, 1, 2} and {3, 4}."""
    return build_graph(5, [(0, 1, 2), (1, 2, 3), (3, 4, 1)])

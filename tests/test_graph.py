"""
Unit tests for Graph topology: edge insertion, validation and views.
"""

import numpy as np
import pytest

from graph_engine import Graph
from graph_engine.config import MAX_EDGE_WEIGHT, MAX_VERTICES
from graph_engine.exceptions import (
    InvalidGraphSizeError,
    InvalidVertexError,
    InvalidWeightError,
)


class TestConstruction:
    """Test graph creation."""

    def test_starts_empty(self):
        """A new graph has no edges and a zero matrix."""
        graph = Graph(3)
        assert graph.vertex_count == 3
        assert graph.edge_count == 0
        assert not graph.adjacency_matrix().any()
        assert graph.neighbors(0) == []

    @pytest.mark.parametrize("size", [0, -1, MAX_VERTICES + 1, 2.5, True, "4"])
    def test_invalid_size_rejected(self, size):
        """Sizes outside [1, MAX_VERTICES] or non-integers raise."""
        with pytest.raises(InvalidGraphSizeError):
            Graph(size)

    def test_invalid_size_is_value_error(self):
        with pytest.raises(ValueError):
            Graph(0)


class TestAddEdge:
    """Test undirected edge insertion."""

    @pytest.mark.parametrize("u,v", [(0, 1), (1, 3), (3, 0), (2, 2)])
    def test_symmetric(self, u, v):
        """Both endpoints list each other with the same weight."""
        graph = Graph(4)
        graph.add_edge(u, v, 7)
        assert (v, 7) in graph.neighbors(u)
        assert (u, 7) in graph.neighbors(v)
        assert graph.adjacency_matrix()[u, v] == 7
        assert graph.adjacency_matrix()[v, u] == 7

    def test_newest_neighbor_first(self):
        """Neighbours are listed most recently added first."""
        graph = Graph(4)
        graph.add_edge(0, 1, 1)
        graph.add_edge(0, 2, 2)
        graph.add_edge(0, 3, 3)
        assert graph.neighbors(0) == [(3, 3), (2, 2), (1, 1)]

    def test_reinsert_updates_weight_in_place(self):
        """A repeated pair changes the weight without adding a record."""
        graph = Graph(3)
        graph.add_edge(0, 1, 1)
        graph.add_edge(0, 2, 1)
        graph.add_edge(1, 0, 7)
        assert graph.neighbors(0) == [(2, 1), (1, 7)]
        assert graph.neighbors(1) == [(0, 7)]
        assert graph.weight(0, 1) == 7
        assert graph.edge_count == 2

    def test_chain_and_matrix_agree(self, mst_graph):
        """Every chain record matches its matrix cell."""
        matrix = mst_graph.adjacency_matrix()
        for u in range(mst_graph.vertex_count):
            for v, w in mst_graph.neighbors(u):
                assert matrix[u, v] == w

    def test_self_loop_recorded_once(self):
        graph = Graph(2)
        graph.add_edge(1, 1, 3)
        assert graph.neighbors(1) == [(1, 3)]
        assert graph.edge_count == 1

    def test_default_weight(self):
        """Weight defaults to 1."""
        graph = Graph(2)
        graph.add_edge(0, 1)
        assert graph.weight(0, 1) == 1

    def test_numpy_integers_accepted(self):
        graph = Graph(3)
        graph.add_edge(np.int64(0), np.int32(2), np.int64(5))
        assert graph.neighbors(2) == [(0, 5)]
        assert isinstance(graph.neighbors(2)[0][0], int)

    @pytest.mark.parametrize("u,v", [(-1, 0), (0, 4), (4, 4), (0, None), (1.0, 2)])
    def test_invalid_vertex_raises(self, u, v):
        """Out-of-range vertices are reported, not ignored."""
        graph = Graph(4)
        with pytest.raises(InvalidVertexError):
            graph.add_edge(u, v, 1)
        assert graph.edge_count == 0
        assert not graph.adjacency_matrix().any()

    def test_invalid_vertex_is_index_error(self):
        with pytest.raises(IndexError):
            Graph(2).add_edge(0, 2, 1)

    @pytest.mark.parametrize("weight", [-1, 1.5, "3", True, None])
    def test_invalid_weight_raises(self, weight):
        """Weights must be non-negative integers."""
        graph = Graph(2)
        with pytest.raises(InvalidWeightError):
            graph.add_edge(0, 1, weight)
        assert graph.neighbors(0) == []

    def test_weight_above_limit_rejected(self):
        """Weights past MAX_EDGE_WEIGHT raise; the limit itself is accepted."""
        graph = Graph(2)
        with pytest.raises(InvalidWeightError):
            graph.add_edge(0, 1, MAX_EDGE_WEIGHT + 1)
        graph.add_edge(0, 1, MAX_EDGE_WEIGHT)
        assert graph.weight(0, 1) == MAX_EDGE_WEIGHT

    def test_huge_weight_leaves_graph_unchanged(self):
        """A weight too large for the matrix is rejected before any write."""
        graph = Graph(2)
        with pytest.raises(ValueError):
            graph.add_edge(0, 1, 2**63)
        assert graph.neighbors(0) == []
        assert graph.neighbors(1) == []
        assert graph.edge_count == 0
        assert not graph.adjacency_matrix().any()

    def test_rejected_reweight_keeps_old_weight(self):
        graph = Graph(2)
        graph.add_edge(0, 1, 4)
        with pytest.raises(InvalidWeightError):
            graph.add_edge(0, 1, MAX_EDGE_WEIGHT + 1)
        assert graph.neighbors(0) == [(1, 4)]
        assert graph.adjacency_matrix()[1, 0] == 4

    def test_zero_weight_allowed(self):
        graph = Graph(2)
        graph.add_edge(0, 1, 0)
        assert graph.has_edge(0, 1)
        assert graph.weight(0, 1) == 0


class TestViews:
    """Test read-only views of the topology."""

    def test_edges_listed_once(self, mst_graph):
        """edges() reports each undirected edge a single time."""
        assert sorted(mst_graph.edges()) == [(0, 1, 1), (0, 2, 4), (1, 2, 2), (2, 3, 1)]
        assert mst_graph.edge_count == 4

    def test_weight_missing_edge_is_none(self, path_graph):
        assert path_graph.weight(0, 3) is None
        assert not path_graph.has_edge(0, 3)

    def test_matrix_is_a_copy(self, path_graph):
        """Mutating the returned matrix leaves the graph untouched."""
        matrix = path_graph.adjacency_matrix()
        matrix[0, 1] = 99
        assert path_graph.weight(0, 1) == 1

    def test_adjacency_list_head(self, path_graph):
        head = path_graph.adjacency_list(1).head()
        assert head.destination == 2
        assert head.next.destination == 0

    def test_connectivity(self, path_graph, disconnected_graph):
        assert path_graph.is_connected()
        assert not disconnected_graph.is_connected(0)
        assert disconnected_graph.reachable_from(3) == {3, 4}

    def test_repr(self, path_graph):
        assert repr(path_graph) == "Graph(vertices=4, edges=3)"

"""Tests for graph utility functions."""

import numpy as np
import pytest

from algolab.diagnostics import assert_valid_walk, is_valid_walk
from algolab.graphs import INFINITY, Graph, adjacency_matrix, path_weight, reconstruct_path


class TestReconstructPath:
    """Tests for reconstruct_path function."""

    def test_reconstruct_path_simple(self):
        """Test path reconstruction from a predecessor list."""
        predecessor = [None, 0, 1, 2]
        assert reconstruct_path(predecessor, 3) == [0, 1, 2, 3]

    def test_reconstruct_path_root(self):
        """Test reconstruction ending at the search root."""
        assert reconstruct_path([None, 0], 0) == [0]

    def test_reconstruct_path_branch(self):
        """Test reconstruction through a branching predecessor tree."""
        predecessor = [None, 0, 0, 2, 2]
        assert reconstruct_path(predecessor, 4) == [0, 2, 4]


class TestPathWeight:
    """Tests for path_weight function."""

    def test_path_weight_sum(self, weighted_graph):
        """Test summing weights along a path."""
        assert path_weight(weighted_graph, [0, 2, 4, 5]) == 3
        assert path_weight(weighted_graph, [0, 1, 5]) == 20

    def test_path_weight_trivial(self, weighted_graph):
        """Test paths with fewer than two vertices."""
        assert path_weight(weighted_graph, []) == 0
        assert path_weight(weighted_graph, [3]) == 0

    def test_path_weight_broken(self, weighted_graph):
        """Test a path with a missing edge."""
        assert path_weight(weighted_graph, [0, 5]) == INFINITY


class TestAdjacencyMatrix:
    """Tests for adjacency_matrix function."""

    def test_adjacency_matrix(self):
        """Test the dense weight matrix."""
        G = Graph(3)
        G.add_edge(0, 1, 4)
        G.add_edge(0, 1, 2)
        G.add_edge(2, 0, 7)

        matrix = adjacency_matrix(G)

        assert matrix.dtype == np.float64
        assert matrix[0, 1] == 2.0
        assert matrix[2, 0] == 7.0
        assert np.isinf(matrix[1, 0])
        assert np.isinf(matrix[0, 0])
        assert np.count_nonzero(np.isfinite(matrix)) == 2


class TestWalkValidation:
    """Tests for walk validators in diagnostics."""

    def test_valid_walk(self, unit_graph):
        """Test recognized walks."""
        assert is_valid_walk(unit_graph, [0, 2, 4, 5])
        assert is_valid_walk(unit_graph, [])
        assert is_valid_walk(unit_graph, [1])

    def test_invalid_walk(self, unit_graph):
        """Test rejected walks."""
        assert not is_valid_walk(unit_graph, [0, 5])
        assert not is_valid_walk(unit_graph, [0, 9])

    def test_assert_valid_walk_messages(self, unit_graph):
        """Test error messages name the problem."""
        with pytest.raises(ValueError, match="No edge 0 -> 5"):
            assert_valid_walk(unit_graph, [0, 5])
        with pytest.raises(ValueError, match="Vertex 9"):
            assert_valid_walk(unit_graph, [0, 9])

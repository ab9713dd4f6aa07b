"""Tests for the Edge value type."""

import dataclasses

import pytest

from tinygraph import Edge


class TestEdge:
    """Tests for Edge equality, hashing and helpers."""

    def test_unordered_equality(self):
        """Test that endpoint order does not matter."""
        assert Edge("A", "B", 1) == Edge("B", "A", 1)
        assert hash(Edge("A", "B")) == hash(Edge("B", "A"))

    def test_weight_not_part_of_identity(self):
        """Test that edges with different weights compare equal."""
        assert Edge("A", "B", 1) == Edge("A", "B", 9)
        assert len({Edge("A", "B", 1), Edge("B", "A", 9)}) == 1

    def test_different_pairs_differ(self):
        """Test that different endpoint pairs are different edges."""
        assert Edge("A", "B") != Edge("A", "C")
        assert Edge("A", "B") != ("A", "B")

    def test_immutable(self):
        """Test that edges cannot be modified in place."""
        edge = Edge("A", "B", 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            edge.weight = 4

    def test_other_endpoint(self):
        """Test other() on both endpoints and on a stranger."""
        edge = Edge(15, 38, 10)
        assert edge.other(15) == 38
        assert edge.other(38) == 15
        with pytest.raises(ValueError):
            edge.other(6)

    def test_endpoints_and_membership(self):
        """Test endpoints and has_endpoint."""
        edge = Edge(15, 38, 10)
        assert edge.endpoints == (15, 38)
        assert edge.has_endpoint(38)
        assert not edge.has_endpoint(6)

    def test_str(self):
        """Test the compact text form."""
        assert str(Edge(15, 38, 10)) == "(15, 38, 10)"
        assert str(Edge("A", "B")) == "('A', 'B', 0)"

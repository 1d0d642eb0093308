"""Tests for domain models to verify they work correctly."""

import numpy as np
import pytest

from kochflake.domain import Boundary, ShadeBucket, ShadeBuckets, Vertex, expected_length


def square() -> Boundary:
    """Axis-aligned 10x10 square, clockwise on screen."""
    return Boundary.from_vertices(
        [
            Vertex(0.0, 0.0, 5.0, 5.0),
            Vertex(10.0, 0.0, 5.0, 5.0),
            Vertex(10.0, 10.0, 5.0, 5.0),
            Vertex(0.0, 10.0, 5.0, 5.0),
        ]
    )


class TestVertex:
    """Tests for Vertex class."""

    def test_vertex_creation(self) -> None:
        """Test basic vertex creation."""
        v = Vertex(100.0, 200.0, 400.0, 400.0)
        assert v.x == 100.0
        assert v.y == 200.0
        assert v.centre() == (400.0, 400.0)

    def test_vertex_to_tuple(self) -> None:
        """Test vertex to tuple conversion."""
        assert Vertex(1.5, 2.5, 0.0, 0.0).to_tuple() == (1.5, 2.5)

    def test_vertex_serialization(self) -> None:
        """Test vertex serialization and deserialization."""
        v1 = Vertex(1.0, 2.0, 3.0, 4.0)
        assert Vertex.from_dict(v1.to_dict()) == v1

    def test_vertex_immutable(self) -> None:
        """Test that vertex is immutable."""
        v = Vertex(1.0, 2.0, 3.0, 4.0)
        with pytest.raises(AttributeError):
            v.x = 300.0  # type: ignore


class TestBoundary:
    """Tests for Boundary class."""

    def test_boundary_from_vertices(self) -> None:
        """Test building a boundary from vertex objects."""
        boundary = square()
        assert len(boundary) == 4
        assert boundary.level == 0
        assert boundary[2] == Vertex(10.0, 10.0, 5.0, 5.0)

    def test_iteration_matches_indexing(self) -> None:
        """Test that iterating yields the same vertices as indexing."""
        boundary = square()
        assert list(boundary) == [boundary[i] for i in range(4)]
        assert boundary.to_vertices() == list(boundary)

    def test_empty_boundary_rejected(self) -> None:
        """Test that a boundary can never be empty."""
        with pytest.raises(ValueError):
            Boundary(x=[], y=[], centre_x=[], centre_y=[])

    def test_mismatched_lengths_rejected(self) -> None:
        """Test that coordinate arrays must line up."""
        with pytest.raises(ValueError):
            Boundary(x=[0.0, 1.0], y=[0.0], centre_x=[0.0, 0.0], centre_y=[0.0, 0.0])

    def test_arrays_are_read_only(self) -> None:
        """Test that a boundary cannot be modified in place."""
        boundary = square()
        with pytest.raises(ValueError):
            boundary.x[0] = 99.0

    def test_boundary_copies_input(self) -> None:
        """Test that the caller's arrays are not aliased."""
        xs = np.array([0.0, 1.0, 2.0])
        boundary = Boundary(x=xs, y=[0.0, 1.0, 0.0], centre_x=[1.0] * 3, centre_y=[0.5] * 3)
        xs[0] = 42.0
        assert boundary.x[0] == 0.0

    def test_points(self) -> None:
        """Test coordinate matrix."""
        points = square().points()
        assert points.shape == (4, 2)
        assert points[1].tolist() == [10.0, 0.0]

    def test_edge_lengths_include_closing_edge(self) -> None:
        """Test that the last vertex connects back to the first."""
        lengths = square().edge_lengths()
        assert lengths.tolist() == [10.0, 10.0, 10.0, 10.0]

    def test_signed_area(self) -> None:
        """Test shoelace area and its sign."""
        boundary = square()
        assert boundary.signed_area() == pytest.approx(100.0)

        reversed_boundary = Boundary.from_vertices(reversed(boundary.to_vertices()))
        assert reversed_boundary.signed_area() == pytest.approx(-100.0)

    def test_bounding_box(self) -> None:
        """Test bounding box calculation."""
        assert square().bounding_box() == (0.0, 0.0, 10.0, 10.0)

    def test_expected_length(self) -> None:
        """Test vertex count formula per level."""
        assert [expected_length(k) for k in range(4)] == [3, 12, 48, 192]


class TestShadeBuckets:
    """Tests for ShadeBucket and ShadeBuckets classes."""

    def test_bucket_points(self) -> None:
        """Test conversion of pixel arrays to tuples."""
        bucket = ShadeBucket(level=3, pixels=np.array([[1, 2], [3, 4]]))
        assert len(bucket) == 2
        assert bucket.to_points() == [(1, 2), (3, 4)]
        assert not bucket.is_empty()

    def test_covered_skips_background_and_empty(self) -> None:
        """Test that only non-empty buckets above level 0 are covered."""
        empty = np.empty((0, 2), dtype=np.intp)
        buckets = ShadeBuckets(
            buckets=(
                ShadeBucket(0, np.array([[0, 0], [0, 1]])),
                ShadeBucket(1, empty),
                ShadeBucket(2, np.array([[1, 1]])),
            ),
            display_size=2,
        )
        assert [b.level for b in buckets.covered()] == [2]
        assert buckets.total_pixels() == 3
        assert buckets[2].level == 2

    def test_iteration_in_level_order(self) -> None:
        """Test that iterating yields ShadeBucket objects by level."""
        empty = np.empty((0, 2), dtype=np.intp)
        buckets = ShadeBuckets(
            buckets=tuple(ShadeBucket(level, empty) for level in range(4)),
            display_size=0,
        )
        items = list(buckets)
        assert all(isinstance(b, ShadeBucket) for b in items)
        assert [b.level for b in items] == [0, 1, 2, 3]

"""Tests for snowflake generation."""

import math

import numpy as np
import pytest

from kochflake.core.generator import generate_levels, initialize, refine
from kochflake.domain import Boundary, Vertex, expected_length
from kochflake.exceptions import DegenerateEdgeError, GeometryError


@pytest.fixture
def triangle() -> Boundary:
    """The default 800x800 display triangle."""
    return initialize((400.0, 400.0), 300.0)


class TestInitialize:
    """Tests for the initial triangle."""

    def test_three_vertices(self, triangle: Boundary) -> None:
        """Test vertex count and level."""
        assert len(triangle) == 3
        assert triangle.level == 0

    def test_vertex_positions(self, triangle: Boundary) -> None:
        """Test top, bottom-left and bottom-right coordinates."""
        half_side = 150.0 * math.sqrt(3)
        expected = [(400.0, 100.0), (400.0 - half_side, 550.0), (400.0 + half_side, 550.0)]
        for vertex, (x, y) in zip(triangle, expected):
            assert vertex.x == pytest.approx(x, abs=1e-6)
            assert vertex.y == pytest.approx(y, abs=1e-6)

    def test_all_vertices_on_circumcircle(self, triangle: Boundary) -> None:
        """Test that every vertex lies radius away from the centre."""
        distances = np.hypot(triangle.x - 400.0, triangle.y - 400.0)
        np.testing.assert_allclose(distances, 300.0)

    def test_equilateral(self, triangle: Boundary) -> None:
        """Test that all three sides are equal."""
        np.testing.assert_allclose(triangle.edge_lengths(), 300.0 * math.sqrt(3))

    def test_centres_are_triangle_centre(self, triangle: Boundary) -> None:
        """Test that every vertex carries the triangle centre."""
        assert all(v.centre() == (400.0, 400.0) for v in triangle)

    @pytest.mark.parametrize("radius", [0.0, -1.0, float("nan"), float("inf")])
    def test_invalid_radius(self, radius: float) -> None:
        """Test that a non-positive or non-finite radius is rejected."""
        with pytest.raises(GeometryError):
            initialize((0.0, 0.0), radius)

    @pytest.mark.parametrize(
        "center",
        [(float("nan"), 400.0), (400.0, float("nan")), (float("inf"), 0.0), (0.0, float("-inf"))],
    )
    def test_invalid_center(self, center: tuple[float, float]) -> None:
        """Test that a non-finite centre fails before any vertex is built."""
        with pytest.raises(GeometryError, match="centre must be finite"):
            initialize(center, 300.0)


class TestRefine:
    """Tests for one refinement step."""

    def test_one_refinement_has_twelve_vertices(self, triangle: Boundary) -> None:
        """Test the concrete first refinement."""
        refined = refine(triangle)
        assert len(refined) == 12
        assert refined.level == 1

    def test_original_vertices_kept_in_place(self, triangle: Boundary) -> None:
        """Test that every fourth vertex is an unchanged original."""
        refined = refine(triangle)
        for i, vertex in enumerate(triangle):
            assert refined[4 * i] == vertex

    def test_thirds_along_each_edge(self, triangle: Boundary) -> None:
        """Test P1 and P3 placement."""
        refined = refine(triangle)
        for i in range(3):
            start = triangle[i]
            end = triangle[(i + 1) % 3]
            p1 = refined[4 * i + 1]
            p3 = refined[4 * i + 3]
            assert p1.x == pytest.approx(start.x + (end.x - start.x) / 3)
            assert p1.y == pytest.approx(start.y + (end.y - start.y) / 3)
            assert p3.x == pytest.approx(start.x + 2 * (end.x - start.x) / 3)
            assert p3.y == pytest.approx(start.y + 2 * (end.y - start.y) / 3)

    def test_tip_height_from_base_midpoint(self, triangle: Boundary) -> None:
        """Test that each tip sits one equilateral height off its base."""
        refined = refine(refine(triangle))
        for i in range(0, len(refined), 4):
            p1, tip, p3 = refined[i + 1], refined[i + 2], refined[i + 3]
            side = math.hypot(p1.x - p3.x, p1.y - p3.y)
            height = math.sqrt(side**2 - (side / 2) ** 2)
            mx, my = (p1.x + p3.x) / 2, (p1.y + p3.y) / 2
            assert math.hypot(tip.x - mx, tip.y - my) == pytest.approx(height)

    def test_tips_point_outward(self, triangle: Boundary) -> None:
        """Test that every tip is farther from its edge's centre than the alternative."""
        previous = refine(triangle)
        refined = refine(previous)
        for i in range(len(previous)):
            cx, cy = previous[i].centre()
            p1, tip, p3 = refined[4 * i + 1], refined[4 * i + 2], refined[4 * i + 3]
            mx, my = (p1.x + p3.x) / 2, (p1.y + p3.y) / 2
            alt_x, alt_y = 2 * mx - tip.x, 2 * my - tip.y
            assert math.hypot(tip.x - cx, tip.y - cy) > math.hypot(alt_x - cx, alt_y - cy)

    def test_first_refinement_is_hexagram(self, triangle: Boundary) -> None:
        """Test that first-level tips land on the circumcircle."""
        refined = refine(triangle)
        tips = refined.points()[2::4]
        np.testing.assert_allclose(np.hypot(tips[:, 0] - 400.0, tips[:, 1] - 400.0), 300.0)

    def test_centre_bookkeeping(self, triangle: Boundary) -> None:
        """Test that P1 and tip carry the base midpoint and P3 the old centre."""
        refined = refine(triangle)
        for i in range(3):
            p1, tip, p3 = refined[4 * i + 1], refined[4 * i + 2], refined[4 * i + 3]
            midpoint = ((p1.x + p3.x) / 2, (p1.y + p3.y) / 2)
            assert p1.centre() == pytest.approx(midpoint)
            assert tip.centre() == pytest.approx(midpoint)
            assert p3.centre() == triangle[i].centre()

    def test_deterministic_and_input_untouched(self, triangle: Boundary) -> None:
        """Test that refining twice gives identical output and leaves input alone."""
        before = triangle.points().copy()
        first = refine(triangle)
        second = refine(triangle)
        np.testing.assert_array_equal(first.points(), second.points())
        np.testing.assert_array_equal(first.centre_x, second.centre_x)
        np.testing.assert_array_equal(triangle.points(), before)
        assert first is not second
        assert not np.shares_memory(first.x, triangle.x)

    def test_vertical_edge(self) -> None:
        """Test that a vertical edge bumps sideways without NaN."""
        boundary = Boundary.from_vertices(
            [
                Vertex(0.0, 0.0, 4.5, 4.5),
                Vertex(0.0, 9.0, 4.5, 4.5),
                Vertex(9.0, 9.0, 4.5, 4.5),
                Vertex(9.0, 0.0, 4.5, 4.5),
            ]
        )
        refined = refine(boundary)
        assert np.isfinite(refined.x).all() and np.isfinite(refined.y).all()

        tip = refined[2]
        assert tip.x == pytest.approx(-1.5 * math.sqrt(3))
        assert tip.y == pytest.approx(4.5)

    def test_zero_length_edge(self) -> None:
        """Test that duplicate consecutive vertices fail fast."""
        boundary = Boundary.from_vertices(
            [
                Vertex(1.0, 1.0, 0.0, 0.0),
                Vertex(5.0, 1.0, 0.0, 0.0),
                Vertex(5.0, 1.0, 0.0, 0.0),
            ]
        )
        with pytest.raises(DegenerateEdgeError) as exc_info:
            refine(boundary)
        assert exc_info.value.edge_index == 1
        assert "zero-length" in str(exc_info.value)

    def test_non_finite_coordinates(self) -> None:
        """Test that NaN input is reported instead of propagated."""
        boundary = Boundary.from_vertices(
            [
                Vertex(float("nan"), 0.0, 0.0, 0.0),
                Vertex(1.0, 1.0, 0.0, 0.0),
                Vertex(2.0, 0.0, 0.0, 0.0),
            ]
        )
        with pytest.raises(DegenerateEdgeError) as exc_info:
            refine(boundary)
        assert exc_info.value.edge_index == 0


class TestGenerateLevels:
    """Tests for the level iterator."""

    def test_level_lengths(self) -> None:
        """Test 3 * 4**k vertices at level k."""
        boundaries = list(generate_levels((0.0, 0.0), 10.0, 6))
        assert [b.level for b in boundaries] == list(range(6))
        assert [len(b) for b in boundaries] == [expected_length(k) for k in range(6)]

    def test_single_level_is_triangle(self) -> None:
        """Test that one level yields only the triangle."""
        (boundary,) = generate_levels((5.0, 5.0), 2.0, 1)
        assert len(boundary) == 3

    def test_zero_levels_rejected(self) -> None:
        """Test that at least one level is required."""
        with pytest.raises(GeometryError):
            list(generate_levels((0.0, 0.0), 1.0, 0))

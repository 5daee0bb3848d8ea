"""
Unit tests for core geometry module.
"""

import numpy as np
import pytest

from polyring.config import EPS
from polyring.core.geometry import (
    as_point,
    as_points,
    signed_area,
    twice_signed_area,
    point_on_segment,
    ring_contains,
    distance_to_segment,
    douglas_peucker,
    rotate_points,
    interior_angles,
)


SQUARE = np.array([[0, 0], [10, 0], [10, 10], [0, 10]])
L_SHAPE = np.array([[0, 0], [2, 0], [2, 1], [1, 1], [1, 2], [0, 2]])


class TestAsPoints:
    """Tests for as_points() and as_point()."""

    def test_rounds_floats(self):
        """Float input should be rounded to integers."""
        result = as_points([[0.4, 1.6], [-2.6, 3.0]])
        assert result.dtype == np.int64
        np.testing.assert_array_equal(result, [[0, 2], [-3, 3]])

    def test_empty(self):
        """None and empty input should give an empty (0, 2) array."""
        assert as_points(None).shape == (0, 2)
        assert as_points([]).shape == (0, 2)

    def test_copies_input(self):
        """Integer input should be copied, not aliased."""
        source = np.array([[1, 2], [3, 4]])
        result = as_points(source)
        result[0, 0] = 99
        assert source[0, 0] == 1

    def test_wrong_shape(self):
        """Wrong input shape should raise ValueError."""
        with pytest.raises(ValueError):
            as_points([[1, 2, 3]])
        with pytest.raises(ValueError):
            as_point([1, 2, 3])


class TestSignedArea:
    """Tests for signed_area() function."""

    def test_unit_square(self):
        """CCW unit square should have area 1."""
        square = np.array([[0, 0], [1, 0], [1, 1], [0, 1]])
        assert abs(signed_area(square) - 1.0) < EPS

    def test_clockwise_negative(self):
        """CW square should have negative area."""
        square = np.array([[0, 0], [0, 1], [1, 1], [1, 0]])
        assert abs(signed_area(square) + 1.0) < EPS

    def test_triangle(self):
        """Triangle with base 2 and height 2 should have area 2."""
        triangle = np.array([[0, 0], [2, 0], [1, 2]])
        assert abs(signed_area(triangle) - 2.0) < EPS

    def test_degenerate_polygon(self):
        """Ring with < 3 vertices should have area 0."""
        assert signed_area(np.array([[0, 0], [1, 1]])) == 0.0
        assert signed_area(np.array([[0, 0]])) == 0.0
        assert signed_area(np.zeros((0, 2), dtype=np.int64)) == 0.0

    def test_large_coordinates(self):
        """Coordinates near the int64 product limit should not overflow."""
        big = 4_000_000_000
        square = np.array([[0, 0], [big, 0], [big, big], [0, big]])
        assert signed_area(square) == pytest.approx(float(big) * float(big))

    def test_small_ring_at_large_offset(self):
        """A unit triangle far from the origin keeps its exact half area."""
        o = 300_000_000
        triangle = np.array([[o, o], [o + 1, o], [o, o + 1]], dtype=np.int64)
        assert signed_area(triangle) == 0.5
        assert twice_signed_area(triangle.tolist()) == 1
        assert signed_area(triangle[::-1]) == -0.5


class TestPointOnSegment:
    """Tests for point_on_segment() function."""

    def test_on_segment(self):
        assert point_on_segment((5, 0), (0, 0), (10, 0))
        assert point_on_segment((0, 0), (0, 0), (10, 0))

    def test_collinear_outside(self):
        """Collinear point beyond the end is not on the segment."""
        assert not point_on_segment((11, 0), (0, 0), (10, 0))

    def test_off_line(self):
        assert not point_on_segment((5, 1), (0, 0), (10, 0))


class TestRingContains:
    """Tests for ring_contains() function."""

    def test_simple_containment(self):
        """Basic containment test."""
        assert ring_contains(SQUARE, (5, 5))
        assert not ring_contains(SQUARE, (15, 5))

    def test_boundary_is_inside(self):
        """Points on an edge or vertex are inside."""
        assert ring_contains(SQUARE, (5, 0))
        assert ring_contains(SQUARE, (10, 10))
        assert ring_contains(SQUARE, (0, 7))

    def test_ray_through_horizontal_edge(self):
        """A ray running along a horizontal edge does not count it."""
        assert not ring_contains(SQUARE, (-5, 10))
        assert not ring_contains(SQUARE, (-5, 0))

    def test_ray_through_vertex(self):
        """A ray passing exactly through a vertex counts one crossing."""
        diamond = np.array([[10, 0], [20, 10], [10, 20], [0, 10]])
        assert ring_contains(diamond, (5, 10))
        assert not ring_contains(diamond, (-5, 10))

    def test_concave_polygon(self):
        """Test containment in concave polygon (L-shape)."""
        l_shape = L_SHAPE * 10
        assert ring_contains(l_shape, (5, 5))
        assert ring_contains(l_shape, (5, 15))
        assert not ring_contains(l_shape, (15, 15))

    def test_orientation_independent(self):
        """Reversing the ring does not change the answer."""
        l_shape = L_SHAPE * 10
        for point in [(5, 5), (5, 15), (15, 15), (25, 5)]:
            assert ring_contains(l_shape, point) == ring_contains(l_shape[::-1], point)

    def test_degenerate(self):
        """Rings with < 3 vertices contain nothing."""
        assert not ring_contains(np.array([[0, 0], [10, 10]]), (5, 5))


class TestDistanceToSegment:
    """Tests for distance_to_segment() function."""

    def test_perpendicular(self):
        dists = distance_to_segment(np.array([[5, 5]]), np.array([0, 0]), np.array([10, 0]))
        assert dists[0] == pytest.approx(5.0)

    def test_beyond_end(self):
        """Distance beyond the end is measured to the end point."""
        dists = distance_to_segment(np.array([[15, 0]]), np.array([0, 0]), np.array([10, 0]))
        assert dists[0] == pytest.approx(5.0)

    def test_degenerate_segment(self):
        """A zero-length segment measures distance to its point."""
        dists = distance_to_segment(np.array([[3, 4]]), np.array([0, 0]), np.array([0, 0]))
        assert dists[0] == pytest.approx(5.0)


class TestDouglasPeucker:
    """Tests for douglas_peucker() function."""

    def test_zero_tolerance_drops_collinear(self):
        """With tolerance 0 only points on their chord are removed."""
        points = np.array([[0, 0], [5, 0], [10, 0]])
        np.testing.assert_array_equal(douglas_peucker(points, 0), [[0, 0], [10, 0]])

    def test_keeps_deviating_point(self):
        points = np.array([[0, 0], [5, 1], [10, 0]])
        np.testing.assert_array_equal(douglas_peucker(points, 0.5), points)
        np.testing.assert_array_equal(douglas_peucker(points, 2), [[0, 0], [10, 0]])

    def test_short_input(self):
        """Fewer than 3 points are returned unchanged."""
        points = np.array([[0, 0], [5, 1]])
        np.testing.assert_array_equal(douglas_peucker(points, 10), points)

    def test_negative_tolerance(self):
        with pytest.raises(ValueError):
            douglas_peucker(SQUARE, -1)


class TestRotatePoints:
    """Tests for rotate_points() function."""

    def test_quarter_turn(self):
        rotated = rotate_points(np.array([[10, 0], [0, 10]]), np.pi / 2)
        np.testing.assert_array_equal(rotated, [[0, 10], [-10, 0]])

    def test_about_center(self):
        rotated = rotate_points(np.array([[20, 10]]), np.pi, center=(10, 10))
        np.testing.assert_array_equal(rotated, [[0, 10]])

    def test_input_untouched(self):
        points = np.array([[10, 0]])
        rotate_points(points, 1.0)
        np.testing.assert_array_equal(points, [[10, 0]])


class TestInteriorAngles:
    """Tests for interior_angles() function."""

    def test_square(self):
        """Every corner of a CCW square is a right angle."""
        np.testing.assert_array_almost_equal(interior_angles(SQUARE), [np.pi / 2] * 4)

    def test_reflex_vertex(self):
        """The notch of a CCW L-shape is reflex."""
        angles = interior_angles(L_SHAPE)
        assert angles[3] == pytest.approx(3 * np.pi / 2)
        assert np.all(np.delete(angles, 3) < np.pi)

    def test_collinear_vertex(self):
        """A vertex in the middle of an edge has angle pi."""
        ring = np.array([[0, 0], [5, 0], [10, 0], [10, 10], [0, 10]])
        assert interior_angles(ring)[1] == pytest.approx(np.pi)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

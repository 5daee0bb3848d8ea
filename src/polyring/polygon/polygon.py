"""
Closed integer ring used by the slicing pipeline.

A Polygon stores its vertices once; the edge from the last stored point
back to the first is implicit. Orientation is never stored, it is read
from the sign of the shoelace area of the current point order.
"""

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from ..config import DEFAULTS
from ..core.geometry import (
    as_point,
    as_points,
    douglas_peucker,
    interior_angles,
    ring_contains,
    rotate_points,
    signed_area,
    twice_signed_area,
)
from ..core.primitives import BoundingBox, Line, Polyline


log = logging.getLogger("polyring.polygon")


class Polygon:
    """
    Closed ring of integer points.

    Parameters
    ----------
    points : array-like, optional
        Vertices of shape (N, 2), without a closing duplicate. Values are
        rounded to integers. Point count is not checked; see ``is_valid``.

    Attributes
    ----------
    points : np.ndarray
        Vertex storage of shape (N, 2), dtype int64. Mutable in place.
    """

    def __init__(self, points=None):
        self.points = as_points(points)

    @classmethod
    def from_polyline(cls, polyline: Polyline) -> "Polygon":
        """Close an open path, dropping its last point if it repeats the first."""
        points = polyline.points
        if len(points) > 1 and np.array_equal(points[0], points[-1]):
            points = points[:-1]
        return cls(points)

    def copy(self) -> "Polygon":
        return Polygon(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> np.ndarray:
        return self.points[index]

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.points)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return np.array_equal(self.points, other.points)

    def __repr__(self) -> str:
        return f"Polygon({self.points.tolist()!r})"

    def first_point(self) -> np.ndarray:
        return self.points[0].copy()

    def last_point(self) -> np.ndarray:
        # The ring ends where it started
        return self.points[0].copy()

    def lines(self) -> List[Line]:
        """Edges of the ring, including the closing edge."""
        n = len(self.points)
        if n < 2:
            return []
        return [
            Line.from_arrays(self.points[i], self.points[(i + 1) % n])
            for i in range(n)
        ]

    def length(self) -> float:
        """Perimeter, including the closing edge."""
        if len(self.points) < 2:
            return 0.0
        deltas = np.roll(self.points, -1, axis=0).astype(np.float64) - self.points
        return float(np.sum(np.linalg.norm(deltas, axis=1)))

    # ── orientation & area ─────────────────────────────────────────

    def area(self) -> float:
        """Signed area; positive for counter-clockwise rings."""
        return signed_area(self.points)

    def is_counter_clockwise(self) -> bool:
        return self.area() > 0

    def is_clockwise(self) -> bool:
        return self.area() < 0

    def reverse(self) -> None:
        self.points = self.points[::-1].copy()

    def make_counter_clockwise(self) -> bool:
        """Reverse the ring if it is clockwise. Returns True if reversed."""
        if self.is_clockwise():
            self.reverse()
            return True
        return False

    def make_clockwise(self) -> bool:
        """Reverse the ring if it is counter-clockwise. Returns True if reversed."""
        if self.is_counter_clockwise():
            self.reverse()
            return True
        return False

    def is_valid(self) -> bool:
        return len(self.points) >= 3

    def centroid(self) -> np.ndarray:
        """
        Area-weighted centroid, rounded to integer coordinates.

        Moments are summed exactly as Python ints relative to the first
        vertex. Rings with zero area fall back to the mean of their
        vertices; an empty ring gives (0, 0).
        """
        if len(self.points) == 0:
            return np.zeros(2, dtype=self.points.dtype)

        ox, oy = self.points[0].tolist()
        ring = [(x - ox, y - oy) for x, y in self.points.tolist()]
        twice_area = twice_signed_area(ring) if len(ring) >= 3 else 0
        if twice_area == 0:
            return np.rint(self.points.astype(np.float64).mean(axis=0)).astype(self.points.dtype)

        sx = sy = 0
        xj, yj = ring[-1]
        for xi, yi in ring:
            factor = xj * yi - xi * yj
            sx += (xj + xi) * factor
            sy += (yj + yi) * factor
            xj, yj = xi, yi
        cx = ox + sx / (3 * twice_area)
        cy = oy + sy / (3 * twice_area)
        return np.rint([cx, cy]).astype(self.points.dtype)

    # ── containment ────────────────────────────────────────────────

    def contains(self, point: Sequence[int]) -> bool:
        """
        Does the unoriented ring contain ``point``?

        Counts crossings of a horizontal ray towards +X. Points on the
        boundary count as inside. Rings with fewer than 3 points contain
        nothing.
        """
        return ring_contains(self.points, as_point(point))

    # ── splitting ──────────────────────────────────────────────────

    def split_at_vertex(self, point: Sequence[int]) -> Polyline:
        """
        Open the ring at the stored vertex equal to ``point``.

        Raises
        ------
        ValueError
            If ``point`` is not one of the stored vertices.
        """
        point = as_point(point)
        matches = np.flatnonzero(np.all(self.points == point, axis=1))
        if len(matches) == 0:
            raise ValueError(f"Point {point.tolist()} is not a vertex of the polygon")
        return self.split_at_index(int(matches[0]))

    def split_at_index(self, index: int) -> Polyline:
        """
        Open the ring at vertex ``index``; that vertex starts and ends the path.

        Raises
        ------
        ValueError
            If ``index`` is outside [0, len(points)).
        """
        n = len(self.points)
        if not 0 <= index < n:
            raise ValueError(f"Split index {index} out of range for {n} points")
        return Polyline(np.concatenate([self.points[index:], self.points[:index + 1]]))

    def split_at_first_point(self) -> Polyline:
        return self.split_at_index(0)

    def to_polyline(self) -> Polyline:
        return self.split_at_first_point()

    # ── simplification & resampling ────────────────────────────────

    def simplify(self, tolerance: Optional[float] = None) -> List["Polygon"]:
        """
        Reduce the vertex count within ``tolerance``.

        The ring is closed, decimated with Douglas-Peucker and reopened.
        Decimation may make the ring self-intersect; such a ring is split
        into simple rings that follow this ring's orientation.

        Parameters
        ----------
        tolerance : float, optional
            Maximum deviation from the original boundary, >= 0. Defaults to
            ``DEFAULTS.simplify_tolerance``.

        Returns
        -------
        list of Polygon
            Zero or more simple rings.
        """
        if tolerance is None:
            tolerance = DEFAULTS.simplify_tolerance
        if tolerance < 0:
            raise ValueError(f"tolerance must be >= 0, got {tolerance}")
        if len(self.points) == 0:
            return []

        closed = np.vstack([self.points, self.points[:1]])
        decimated = douglas_peucker(closed, tolerance)[:-1]
        if len(decimated) < 3:
            log.debug("Simplification collapsed a %d-point ring", len(self.points))
            return []

        # adapter imports this module
        from ..polygon_set.adapter import make_simple

        return make_simple(Polygon(decimated))

    def simplify_into(self, tolerance: Optional[float], polygons: List["Polygon"]) -> None:
        """Append the result of ``simplify`` to an existing collection."""
        polygons.extend(self.simplify(tolerance))

    def equally_spaced_points(self, distance: Optional[float] = None) -> np.ndarray:
        """
        Resample the boundary every ``distance`` along the perimeter.

        Sampling starts at the first stored point. A final sample that lands
        back on the first point is not repeated. A perimeter shorter than
        ``distance`` gives just the first point. ``distance`` defaults to
        ``DEFAULTS.resample_distance``.

        Returns
        -------
        np.ndarray
            Samples of shape (M, 2).
        """
        if distance is None:
            distance = DEFAULTS.resample_distance
        if len(self.points) == 0:
            if distance <= 0:
                raise ValueError(f"distance must be > 0, got {distance}")
            return self.points.copy()

        samples = self.split_at_first_point().equally_spaced_points(distance)
        if len(samples) > 1 and np.array_equal(samples[0], samples[-1]):
            samples = samples[:-1]
        return samples

    # ── vertex classification ──────────────────────────────────────

    def concave_points(self, angle: float = np.pi) -> np.ndarray:
        """
        Vertices whose interior angle is at least ``angle``.

        Angles are measured as if the ring were counter-clockwise.
        """
        if len(self.points) < 3:
            return self.points[:0].copy()
        return self.points[interior_angles(self.points) >= angle]

    def convex_points(self, angle: float = np.pi) -> np.ndarray:
        """
        Vertices whose interior angle is at most ``2*pi - angle``.

        Angles are measured as if the ring were counter-clockwise.
        """
        if len(self.points) < 3:
            return self.points[:0].copy()
        return self.points[interior_angles(self.points) <= 2 * np.pi - angle]

    def triangulate_convex(self) -> List["Polygon"]:
        """
        Fan-triangulate from the first vertex.

        Only counter-clockwise triangles are kept, which makes this exact for
        convex CCW rings.
        """
        triangles = []
        for i in range(1, len(self.points) - 1):
            triangle = Polygon(self.points[[0, i, i + 1]])
            if triangle.is_counter_clockwise():
                triangles.append(triangle)
        return triangles

    # ── transforms ─────────────────────────────────────────────────

    def translate(self, dx: int, dy: int) -> None:
        self.points = self.points + np.array([dx, dy], dtype=self.points.dtype)

    def rotate(self, angle: float, center: Tuple[float, float] = (0.0, 0.0)) -> None:
        self.points = rotate_points(self.points, angle, center)

    def bounding_box(self) -> BoundingBox:
        return BoundingBox.from_points(self.points)

    # ── serialization ──────────────────────────────────────────────

    def wkt(self) -> str:
        """Well-known text, with the first vertex repeated to close the ring."""
        if len(self.points) == 0:
            return "POLYGON(())"
        closed = self.points.tolist() + [self.points[0].tolist()]
        return "POLYGON((" + ",".join(f"{x} {y}" for x, y in closed) + "))"


Polygons = List[Polygon]

"""
Open-path primitives shared with the rest of the slicing pipeline.

- Line: a single directed segment between two integer points
- Polyline: an open point sequence, the result of splitting a ring
- BoundingBox: axis-aligned extents of a point set
"""

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .geometry import COORD_DTYPE, as_points


IntPoint = Tuple[int, int]


@dataclass(frozen=True)
class Line:
    """
    Directed segment from ``a`` to ``b``.

    Attributes
    ----------
    a : tuple of int
        Start point.
    b : tuple of int
        End point.
    """
    a: IntPoint
    b: IntPoint

    @classmethod
    def from_arrays(cls, a: np.ndarray, b: np.ndarray) -> "Line":
        return cls((int(a[0]), int(a[1])), (int(b[0]), int(b[1])))

    def length(self) -> float:
        return float(np.hypot(self.b[0] - self.a[0], self.b[1] - self.a[1]))

    def reversed(self) -> "Line":
        return Line(self.b, self.a)

    def point_at(self, distance: float) -> np.ndarray:
        """
        Point at ``distance`` from ``a`` along the segment, rounded.

        Distances beyond the segment extrapolate along its direction.
        """
        length = self.length()
        start = np.asarray(self.a, dtype=np.float64)
        if length == 0:
            return start.astype(COORD_DTYPE)
        direction = (np.asarray(self.b, dtype=np.float64) - start) / length
        return np.rint(start + direction * distance).astype(COORD_DTYPE)


class Polyline:
    """
    Open sequence of integer points.

    Unlike a ring, the last point does not connect back to the first.
    """

    def __init__(self, points=None):
        self.points = as_points(points)

    def __len__(self) -> int:
        return len(self.points)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Polyline):
            return NotImplemented
        return np.array_equal(self.points, other.points)

    def __repr__(self) -> str:
        return f"Polyline({self.points.tolist()!r})"

    def first_point(self) -> np.ndarray:
        return self.points[0].copy()

    def last_point(self) -> np.ndarray:
        return self.points[-1].copy()

    def is_closed(self) -> bool:
        return len(self.points) > 1 and np.array_equal(self.points[0], self.points[-1])

    def lines(self) -> List[Line]:
        return [Line.from_arrays(a, b) for a, b in zip(self.points[:-1], self.points[1:])]

    def length(self) -> float:
        if len(self.points) < 2:
            return 0.0
        deltas = np.diff(self.points.astype(np.float64), axis=0)
        return float(np.sum(np.linalg.norm(deltas, axis=1)))

    def equally_spaced_points(self, distance: float) -> np.ndarray:
        """
        Sample the path every ``distance`` along its length.

        The first point is always emitted. A sample is placed each time the
        accumulated length reaches ``distance``; the remainder of the path
        shorter than ``distance`` produces no sample.

        Parameters
        ----------
        distance : float
            Spacing between consecutive samples, > 0.

        Returns
        -------
        np.ndarray
            Samples of shape (M, 2), rounded to integer coordinates.
        """
        if distance <= 0:
            raise ValueError(f"distance must be > 0, got {distance}")
        if len(self.points) == 0:
            return self.points.copy()

        coords = self.points.astype(np.float64)
        samples = [coords[0]]
        accumulated = 0.0
        prev = coords[0]
        i = 1
        while i < len(coords):
            cur = coords[i]
            segment = float(np.linalg.norm(cur - prev))
            accumulated += segment
            if accumulated < distance:
                prev = cur
                i += 1
                continue
            if accumulated == distance:
                samples.append(cur)
                accumulated = 0.0
                prev = cur
                i += 1
                continue
            # Place a sample inside this segment and keep walking it
            take = segment - (accumulated - distance)
            sample = prev + (cur - prev) * (take / segment)
            samples.append(sample)
            prev = sample
            accumulated = 0.0

        return np.rint(np.array(samples)).astype(COORD_DTYPE)


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned extents of a point set.

    An undefined box (``defined=False``) is the extents of nothing; its
    corners are both (0, 0).
    """
    min: IntPoint = (0, 0)
    max: IntPoint = (0, 0)
    defined: bool = False

    @classmethod
    def from_points(cls, points) -> "BoundingBox":
        points = as_points(points)
        if len(points) == 0:
            return cls()
        lo = points.min(axis=0)
        hi = points.max(axis=0)
        return cls((int(lo[0]), int(lo[1])), (int(hi[0]), int(hi[1])), True)

    def merge(self, other: "BoundingBox") -> "BoundingBox":
        if not other.defined:
            return self
        if not self.defined:
            return other
        return BoundingBox(
            (min(self.min[0], other.min[0]), min(self.min[1], other.min[1])),
            (max(self.max[0], other.max[0]), max(self.max[1], other.max[1])),
            True,
        )

    def size(self) -> IntPoint:
        return (self.max[0] - self.min[0], self.max[1] - self.min[1])

    def center(self) -> Tuple[float, float]:
        return ((self.min[0] + self.max[0]) / 2.0, (self.min[1] + self.max[1]) / 2.0)

    def contains(self, point) -> bool:
        if not self.defined:
            return False
        return (self.min[0] <= point[0] <= self.max[0] and
                self.min[1] <= point[1] <= self.max[1])

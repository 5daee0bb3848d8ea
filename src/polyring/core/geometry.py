"""
Core geometry kernels for integer point rings.

Contains utility functions for:
- Coercing array-likes into integer point arrays
- Signed area (shoelace)
- Exact point/segment and point-in-ring tests
- Douglas-Peucker decimation
- Rotation and interior angles

Rings are numpy arrays of shape (N, 2) and dtype int64 whose last point
implicitly connects back to the first.
"""

from typing import Sequence, Tuple

import numpy as np

from ..config import EPS


COORD_DTYPE = np.int64


def as_points(points) -> np.ndarray:
    """
    Convert an array-like of 2D points into an integer point array.

    Parameters
    ----------
    points : array-like
        Sequence of (x, y) pairs. Values are rounded to the nearest integer.

    Returns
    -------
    np.ndarray
        Array of shape (N, 2) and dtype int64.
    """
    if points is None:
        return np.zeros((0, 2), dtype=COORD_DTYPE)

    arr = np.asarray(points)
    if arr.size == 0:
        return np.zeros((0, 2), dtype=COORD_DTYPE)

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected points of shape (N, 2), got {arr.shape}")

    if np.issubdtype(arr.dtype, np.integer):
        return arr.astype(COORD_DTYPE, copy=True)
    return np.rint(arr).astype(COORD_DTYPE)


def as_point(point) -> np.ndarray:
    """Convert a single (x, y) pair into an int64 array of shape (2,)."""
    arr = np.asarray(point)
    if arr.shape != (2,):
        raise ValueError(f"Expected a point of shape (2,), got {arr.shape}")
    if np.issubdtype(arr.dtype, np.integer):
        return arr.astype(COORD_DTYPE, copy=True)
    return np.rint(arr).astype(COORD_DTYPE)


def signed_area(points: np.ndarray) -> float:
    """
    Compute the signed area of a ring using the shoelace formula.

    Cross products are summed as Python ints, so the result is exact up to
    the final division however far the ring sits from the origin.

    Parameters
    ----------
    points : np.ndarray
        Ring vertices of shape (N, 2).

    Returns
    -------
    float
        Positive for counter-clockwise rings, negative for clockwise ones,
        0.0 for rings with fewer than 3 points.
    """
    if len(points) < 3:
        return 0.0
    return twice_signed_area(points.tolist()) / 2


def twice_signed_area(ring: Sequence[Sequence[int]]) -> int:
    """Exact shoelace sum over a ring given as a list of [x, y] ints."""
    total = 0
    xj, yj = ring[-1]
    for xi, yi in ring:
        total += xj * yi - xi * yj
        xj, yj = xi, yi
    return total


def cross(o: Sequence[int], a: Sequence[int], b: Sequence[int]) -> int:
    """Z component of (a - o) x (b - o), exact for Python ints."""
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def point_on_segment(
    p: Sequence[int],
    a: Sequence[int],
    b: Sequence[int]
) -> bool:
    """Check whether p lies on the closed segment a-b (exact arithmetic)."""
    if cross(a, b, p) != 0:
        return False
    return (min(a[0], b[0]) <= p[0] <= max(a[0], b[0]) and
            min(a[1], b[1]) <= p[1] <= max(a[1], b[1]))


def ring_contains(points: np.ndarray, point: Sequence[int]) -> bool:
    """
    Crossing-number test for an unoriented ring.

    A horizontal ray is cast from ``point`` towards increasing X and every
    edge it crosses flips the result. Edges with both ends on the same
    side of the ray (horizontal edges included) never count. A point on an
    edge or vertex is reported as inside.

    Parameters
    ----------
    points : np.ndarray
        Ring vertices of shape (N, 2).
    point : sequence of int
        Query point (x, y).

    Returns
    -------
    bool
        True if the point is inside or on the boundary.
    """
    n = len(points)
    if n < 3:
        return False

    px, py = int(point[0]), int(point[1])
    ring = points.tolist()

    inside = False
    xj, yj = ring[-1]
    for xi, yi in ring:
        if point_on_segment((px, py), (xj, yj), (xi, yi)):
            return True
        if (yi > py) != (yj > py):
            # px < x-coordinate of the crossing, without dividing
            lhs = (px - xi) * (yj - yi)
            rhs = (py - yi) * (xj - xi)
            if (lhs < rhs) if yj > yi else (lhs > rhs):
                inside = not inside
        xj, yj = xi, yi

    return inside


def distance_to_segment(
    points: np.ndarray,
    a: np.ndarray,
    b: np.ndarray
) -> np.ndarray:
    """
    Distance from each point to the closed segment a-b.

    Parameters
    ----------
    points : np.ndarray
        Points of shape (N, 2).
    a, b : np.ndarray
        Segment end points of shape (2,).

    Returns
    -------
    np.ndarray
        Distances of shape (N,).
    """
    points = np.asarray(points, dtype=np.float64)
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    ab = b - a
    denom = float(ab @ ab)
    if denom < EPS:
        return np.linalg.norm(points - a, axis=1)

    t = np.clip(((points - a) @ ab) / denom, 0.0, 1.0)
    projected = a + t[:, None] * ab
    return np.linalg.norm(points - projected, axis=1)


def douglas_peucker(points: np.ndarray, tolerance: float) -> np.ndarray:
    """
    Decimate an open point sequence with the Douglas-Peucker algorithm.

    End points are always kept. An interior point survives only when its
    distance to the current chord is strictly greater than ``tolerance``,
    so a tolerance of 0 removes exactly the points that lie on their chord.

    Parameters
    ----------
    points : np.ndarray
        Open sequence of shape (N, 2).
    tolerance : float
        Maximum allowed deviation, >= 0.

    Returns
    -------
    np.ndarray
        Kept points of shape (M, 2), M <= N, in input order.
    """
    if tolerance < 0:
        raise ValueError(f"tolerance must be >= 0, got {tolerance}")

    n = len(points)
    if n < 3:
        return points.copy()

    coords = points.astype(np.float64)
    keep = np.zeros(n, dtype=bool)
    keep[0] = keep[-1] = True

    stack = [(0, n - 1)]
    while stack:
        first, last = stack.pop()
        if last - first < 2:
            continue

        dists = distance_to_segment(coords[first + 1:last], coords[first], coords[last])
        idx = int(np.argmax(dists))
        if dists[idx] > tolerance:
            split = first + 1 + idx
            keep[split] = True
            stack.append((split, last))
            stack.append((first, split))

    return points[keep]


def rotate_points(
    points: np.ndarray,
    angle: float,
    center: Tuple[float, float] = (0.0, 0.0)
) -> np.ndarray:
    """
    Rotate points counter-clockwise by ``angle`` radians about ``center``.

    Results are rounded back to integer coordinates.
    """
    if len(points) == 0:
        return points.copy()

    c, s = np.cos(angle), np.sin(angle)
    cx, cy = float(center[0]), float(center[1])
    dx = points[:, 0].astype(np.float64) - cx
    dy = points[:, 1].astype(np.float64) - cy

    rotated = np.column_stack([cx + c * dx - s * dy, cy + s * dx + c * dy])
    return np.rint(rotated).astype(COORD_DTYPE)


def interior_angles(points: np.ndarray) -> np.ndarray:
    """
    Interior angle at every vertex of a counter-clockwise ring.

    The angle is measured counter-clockwise from the outgoing edge to the
    reversed incoming edge, in [0, 2*pi). Convex vertices of a CCW ring are
    below pi, reflex vertices above it.

    Parameters
    ----------
    points : np.ndarray
        Ring vertices of shape (N, 2), N >= 3.

    Returns
    -------
    np.ndarray
        Angles of shape (N,).
    """
    coords = points.astype(np.float64)
    to_next = np.roll(coords, -1, axis=0) - coords
    to_prev = np.roll(coords, 1, axis=0) - coords

    z = to_next[:, 0] * to_prev[:, 1] - to_next[:, 1] * to_prev[:, 0]
    dot = np.sum(to_next * to_prev, axis=1)
    return np.mod(np.arctan2(z, dot), 2 * np.pi)

"""
Free functions over polygons and polygon collections.

Contains helpers for:
- Bounding-box extents, optionally under rotation
- Cleanup before handing rings to a boolean engine (sticks, degenerate
  rings, small rings)
- Appending, rotating and converting collections
"""

import logging
from typing import List, Optional, Union

import numpy as np

from ..config import DEFAULTS
from ..core.geometry import rotate_points
from ..core.primitives import BoundingBox, Line, Polyline
from .polygon import Polygon, Polygons


log = logging.getLogger("polyring.collection")

PolygonOrPolygons = Union[Polygon, Polygons]


def _as_list(obj: PolygonOrPolygons) -> Polygons:
    if isinstance(obj, Polygon):
        return [obj]
    return obj


# ── extents ────────────────────────────────────────────────────────


def get_extents(obj: PolygonOrPolygons) -> BoundingBox:
    """
    Axis-aligned bounding box of every vertex.

    Parameters
    ----------
    obj : Polygon or list of Polygon
        Rings to measure.

    Returns
    -------
    BoundingBox
        ``BoundingBox()`` (undefined, corners at the origin) when there are
        no vertices at all.
    """
    bbox = BoundingBox()
    for polygon in _as_list(obj):
        bbox = bbox.merge(BoundingBox.from_points(polygon.points))
    return bbox


def get_extents_rotated(obj: PolygonOrPolygons, angle: float) -> BoundingBox:
    """
    Bounding box of the vertices after rotating them by ``angle`` about the origin.

    The rings themselves are not modified.
    """
    bbox = BoundingBox()
    for polygon in _as_list(obj):
        bbox = bbox.merge(BoundingBox.from_points(rotate_points(polygon.points, angle)))
    return bbox


# ── cleanup ────────────────────────────────────────────────────────


def _strip_sticks(ring: list) -> bool:
    """Remove zero-length edges and out-and-back spurs from ``ring`` in place."""
    modified = False
    changed = True
    while changed and len(ring) >= 2:
        changed = False
        n = len(ring)
        for i in range(n):
            nxt = ring[(i + 1) % n]
            if ring[i] == nxt:
                del ring[i]
                changed = True
                break
            if n >= 3 and ring[i - 1] == nxt:
                # ring[i] is the tip of a spur; drop it and the return point
                for idx in sorted({i, (i + 1) % n}, reverse=True):
                    del ring[idx]
                changed = True
                break
        modified = modified or changed
    return modified


def remove_sticks(obj: PolygonOrPolygons) -> bool:
    """
    Remove zero-area sticks from a ring or from every ring of a collection.

    A stick is a vertex whose neighbours coincide, i.e. the boundary runs out
    to it and straight back. Removing one can expose another, so each ring
    is cleaned until nothing changes. Zero-length edges are collapsed too.
    Given a collection, rings left with fewer than 3 points are removed
    from it; a single ring is only cleaned in place.

    Returns
    -------
    bool
        True if any ring was modified or removed.
    """
    modified = False
    for polygon in _as_list(obj):
        ring = [tuple(p) for p in polygon.points.tolist()]
        before = len(ring)
        if _strip_sticks(ring):
            log.debug("Removed %d stick points from a %d-point ring", before - len(ring), before)
            polygon.points = np.array(ring, dtype=polygon.points.dtype).reshape(-1, 2)
            modified = True
    if not isinstance(obj, Polygon) and remove_degenerate(obj):
        modified = True
    return modified


def remove_degenerate(polygons: Polygons) -> bool:
    """
    Drop every ring with fewer than 3 points, in place.

    Returns
    -------
    bool
        True if anything was removed.
    """
    kept = [p for p in polygons if p.is_valid()]
    removed = len(polygons) - len(kept)
    if removed:
        log.debug("Removed %d degenerate polygons", removed)
        polygons[:] = kept
    return removed > 0


def remove_small(polygons: Polygons, min_area: Optional[float] = None) -> bool:
    """
    Drop every ring whose absolute area is below ``min_area``, in place.

    Parameters
    ----------
    polygons : list of Polygon
        Collection to filter.
    min_area : float, optional
        Threshold in squared integer units. Defaults to
        ``DEFAULTS.min_area``.

    Returns
    -------
    bool
        True if anything was removed.
    """
    if min_area is None:
        min_area = DEFAULTS.min_area

    kept = [p for p in polygons if abs(p.area()) >= min_area]
    removed = len(polygons) - len(kept)
    if removed:
        log.debug("Removed %d polygons smaller than %g", removed, min_area)
        polygons[:] = kept
    return removed > 0


# ── collection helpers ─────────────────────────────────────────────


def polygons_append(dst: Polygons, src: Polygons) -> Polygons:
    """Append ``src`` to ``dst`` and return ``dst``."""
    dst.extend(src)
    return dst


def polygons_rotate(polygons: Polygons, angle: float) -> Polygons:
    """Rotate every ring about the origin, in place."""
    for polygon in polygons:
        polygon.rotate(angle)
    return polygons


def to_lines(obj: PolygonOrPolygons) -> List[Line]:
    """Edges of every ring, closing edges included."""
    lines = []
    for polygon in _as_list(obj):
        lines.extend(polygon.lines())
    return lines


def to_polylines(polygons: Polygons) -> List[Polyline]:
    """Open paths that repeat each ring's first point at the end."""
    return [
        Polyline(np.vstack([p.points, p.points[:1]])) if len(p) else Polyline()
        for p in polygons
    ]


def total_area(polygons: Polygons) -> float:
    """Sum of signed areas; holes stored clockwise subtract."""
    return float(sum(p.area() for p in polygons))

"""
Polygon-set adapter for boolean algebra engines.

Exposes the minimal structural contract a generic polygon-set engine needs
from ``Polygon`` and ``Polygons``:
- Vertex iteration without a closing duplicate
- Reconstruction from a point sequence that may repeat its first point
- Winding reported as unknown, so the engine infers orientation itself
- Flat collection iteration with no ordering or cleanliness guarantees

The bridge functions at the bottom connect this contract to shapely, which
is the engine used for repair, union, intersection, difference and offset.
Regions are built with the nonzero winding rule by default; ``to_shapely``
also offers the even-odd rule used by ``Polygon.contains``.
"""

import logging
from enum import Enum
from typing import Iterable, Iterator, List

import numpy as np
from shapely.geometry import GeometryCollection, LineString, MultiPolygon
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry.polygon import orient
from shapely.ops import polygonize, unary_union
from shapely.validation import make_valid

from ..core.geometry import as_points
from ..polygon.polygon import Polygon, Polygons


log = logging.getLogger("polyring.polygon_set")


class Winding(Enum):
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"
    UNKNOWN = "unknown"


# ── single polygon traits ──────────────────────────────────────────


def iter_points(polygon: Polygon) -> Iterator[np.ndarray]:
    """Stored vertices in order, without repeating the first one."""
    return iter(polygon.points)


def size(polygon: Polygon) -> int:
    return len(polygon.points)


def winding(polygon: Polygon) -> Winding:
    """Always ``Winding.UNKNOWN``; orientation is left to the engine."""
    return Winding.UNKNOWN


def set_points(polygon: Polygon, points: Iterable) -> Polygon:
    """
    Replace the vertices of ``polygon`` from an engine point sequence.

    Engines close their rings themselves, so a trailing point equal to the
    first one is dropped.

    Parameters
    ----------
    polygon : Polygon
        Target, modified in place.
    points : iterable of (x, y)
        New vertices, possibly closed.

    Returns
    -------
    Polygon
        The same ``polygon`` instance.
    """
    pts = as_points(list(points))
    if len(pts) > 1 and np.array_equal(pts[0], pts[-1]):
        pts = pts[:-1]
    polygon.points = pts
    return polygon


# ── polygon set traits ─────────────────────────────────────────────


def iter_polygons(polygons: Polygons) -> Iterator[Polygon]:
    return iter(polygons)


def set_polygons(polygons: Polygons, items: Iterable[Polygon]) -> Polygons:
    """Replace the members of ``polygons`` in place and return it."""
    polygons[:] = list(items)
    return polygons


def is_clean(polygons: Polygons) -> bool:
    """Collections are never assumed free of overlaps or degenerate rings."""
    return False


def is_sorted(polygons: Polygons) -> bool:
    """Collections are never assumed sorted."""
    return False


# ── shapely bridge ─────────────────────────────────────────────────


def _polygonal_parts(geom) -> List[ShapelyPolygon]:
    if geom.is_empty:
        return []
    if isinstance(geom, ShapelyPolygon):
        return [geom]
    if isinstance(geom, (MultiPolygon, GeometryCollection)):
        parts = []
        for part in geom.geoms:
            parts.extend(_polygonal_parts(part))
        return parts
    # Points and lines carry no area
    return []


def ring_to_shapely(polygon: Polygon) -> ShapelyPolygon:
    """Shapely polygon for a single ring; empty if the ring has < 3 points."""
    if size(polygon) < 3:
        return ShapelyPolygon()
    return ShapelyPolygon([tuple(p) for p in iter_points(polygon)])


def _member_shape(polygon: Polygon):
    shape = ring_to_shapely(polygon)
    if not shape.is_empty and not shape.is_valid:
        shape = MultiPolygon(_polygonal_parts(make_valid(shape)))
    return shape


def winding_number(polygon: Polygon, x: float, y: float) -> int:
    """
    How many times the ring winds counter-clockwise around (x, y).

    Clockwise turns count negative. The result is meaningful only for
    points off the boundary.
    """
    ring = polygon.points.tolist()
    if len(ring) < 3:
        return 0

    wn = 0
    xj, yj = ring[-1]
    for xi, yi in ring:
        side = (xi - xj) * (y - yj) - (x - xj) * (yi - yj)
        if yj <= y < yi and side > 0:
            wn += 1
        elif yi <= y < yj and side < 0:
            wn -= 1
        xj, yj = xi, yi
    return wn


def to_shapely(polygons, fill_rule: str = "nonzero"):
    """
    Build a shapely region from a polygon or a collection of polygons.

    Parameters
    ----------
    polygons : Polygon or list of Polygon
        Region rings.
    fill_rule : str
        "nonzero" fills every point the rings wind around a nonzero number
        of times. Overlapping solids merge, and an island inside an
        opposite-wound hole is kept.
        "evenodd" ignores orientation and toggles coverage per ring, with
        self-intersecting rings repaired by ``make_valid`` first.

    Returns
    -------
    shapely Polygon or MultiPolygon
        Possibly empty.
    """
    if isinstance(polygons, Polygon):
        polygons = [polygons]
    members = [p for p in iter_polygons(polygons) if size(p) >= 3]

    if fill_rule == "evenodd":
        region = ShapelyPolygon()
        for polygon in members:
            shape = _member_shape(polygon)
            if not shape.is_empty:
                region = region.symmetric_difference(shape)
        return region

    if fill_rule != "nonzero":
        raise ValueError(f"fill_rule must be 'nonzero' or 'evenodd', got {fill_rule!r}")

    # Node every boundary against every other, then classify each face by
    # the total winding number at a point strictly inside it
    boundaries = [
        LineString([tuple(p) for p in polygon.points] + [tuple(polygon.points[0])])
        for polygon in members
    ]
    if not boundaries:
        return ShapelyPolygon()

    filled = []
    for face in polygonize(unary_union(boundaries)):
        inside = face.representative_point()
        if sum(winding_number(p, inside.x, inside.y) for p in members) != 0:
            filled.append(face)

    if not filled:
        return ShapelyPolygon()
    return unary_union(filled)


def from_shapely(geom) -> Polygons:
    """
    Convert a shapely geometry into rings.

    Each polygonal part contributes its exterior (counter-clockwise) followed
    by its holes (clockwise). Coordinates are rounded to integers and rings
    that end up with fewer than 3 points are skipped.

    Parameters
    ----------
    geom : shapely geometry
        Polygon, MultiPolygon or GeometryCollection. Non-polygonal members
        are ignored.

    Returns
    -------
    list of Polygon
    """
    result = []
    for part in _polygonal_parts(geom):
        part = orient(part, sign=1.0)
        for ring in [part.exterior, *part.interiors]:
            polygon = set_points(Polygon(), ring.coords)
            if polygon.is_valid():
                result.append(polygon)
    return result


def make_simple(polygon: Polygon) -> Polygons:
    """
    Split a possibly self-intersecting ring into simple rings.

    A ring that is already simple is returned untouched. Otherwise the
    repaired outlines follow the input's orientation and holes get the
    opposite one.
    """
    shape = ring_to_shapely(polygon)
    if shape.is_empty:
        return []
    if shape.is_valid:
        return [polygon]

    repaired = from_shapely(make_valid(shape))
    log.debug("Split self-intersecting %d-point ring into %d rings",
              size(polygon), len(repaired))

    if polygon.is_clockwise():
        for ring in repaired:
            ring.reverse()
    return repaired


def union_(subject: Polygons, clip: Polygons = ()) -> Polygons:
    """Union of all rings in ``subject`` and ``clip``."""
    region = to_shapely(subject)
    if clip:
        region = region.union(to_shapely(clip))
    return from_shapely(region)


def intersection(subject: Polygons, clip: Polygons) -> Polygons:
    return from_shapely(to_shapely(subject).intersection(to_shapely(clip)))


def diff(subject: Polygons, clip: Polygons) -> Polygons:
    return from_shapely(to_shapely(subject).difference(to_shapely(clip)))


def offset(
    polygons: Polygons,
    delta: float,
    join_style: str = "mitre",
    mitre_limit: float = 3.0
) -> Polygons:
    """
    Grow (``delta`` > 0) or shrink (``delta`` < 0) a region.

    Parameters
    ----------
    polygons : list of Polygon
        Region rings.
    delta : float
        Offset distance in integer units.
    join_style : str
        One of "round", "mitre", "bevel".
    mitre_limit : float
        Mitre ratio limit for sharp corners.
    """
    region = to_shapely(polygons)
    if region.is_empty:
        return []
    return from_shapely(region.buffer(delta, join_style=join_style, mitre_limit=mitre_limit))

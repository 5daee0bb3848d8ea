"""
Polyring - Closed integer polygons for slicing pipelines.

This package provides the closed-ring primitive used between mesh slicing
and path planning:
- Signed area, orientation tests and normalization
- Point containment independent of orientation
- Douglas-Peucker simplification and equal-spacing resampling
- Splitting rings into open paths and bounding-box extents
- Cleanup of sticks, degenerate and small rings
- An adapter to polygon-set boolean engines (shapely)

Main Types
----------
Polygon : Closed ring of integer points
Polyline : Open path produced by splitting a ring
BoundingBox : Axis-aligned extents

Example
-------
>>> from polyring import Polygon, get_extents
>>> square = Polygon([[0, 0], [10, 0], [10, 10], [0, 10]])
>>> square.area()
100.0
>>> square.contains((5, 5))
True
"""

from .config import EPS, SCALING_FACTOR, DEFAULTS, GeometryDefaults, scale_, unscale
from .core.primitives import Line, Polyline, BoundingBox
from .polygon.polygon import Polygon, Polygons
from .polygon.collection import (
    get_extents,
    get_extents_rotated,
    remove_sticks,
    remove_degenerate,
    remove_small,
    polygons_append,
    polygons_rotate,
    to_lines,
    to_polylines,
    total_area,
)
from .polygon_set.adapter import Winding, to_shapely, from_shapely, union_, intersection, diff, offset
from .visualization.plotting import plot_polygons

__all__ = [
    # Configuration
    'EPS',
    'SCALING_FACTOR',
    'DEFAULTS',
    'GeometryDefaults',
    'scale_',
    'unscale',
    # Primitives
    'Line',
    'Polyline',
    'BoundingBox',
    # Polygon
    'Polygon',
    'Polygons',
    # Collections
    'get_extents',
    'get_extents_rotated',
    'remove_sticks',
    'remove_degenerate',
    'remove_small',
    'polygons_append',
    'polygons_rotate',
    'to_lines',
    'to_polylines',
    'total_area',
    # Boolean engine adapter
    'Winding',
    'to_shapely',
    'from_shapely',
    'union_',
    'intersection',
    'diff',
    'offset',
    # Visualization
    'plot_polygons',
]

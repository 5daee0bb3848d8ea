"""
Closed polygon type and collection helpers.
"""

from .polygon import Polygon, Polygons
from .collection import (
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

__all__ = [
    'Polygon',
    'Polygons',
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
]

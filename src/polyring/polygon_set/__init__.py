"""
Adapter between polygons and polygon-set boolean engines.
"""

from .adapter import (
    Winding,
    iter_points,
    size,
    winding,
    set_points,
    iter_polygons,
    set_polygons,
    is_clean,
    is_sorted,
    ring_to_shapely,
    winding_number,
    to_shapely,
    from_shapely,
    make_simple,
    union_,
    intersection,
    diff,
    offset,
)

__all__ = [
    'Winding',
    'iter_points',
    'size',
    'winding',
    'set_points',
    'iter_polygons',
    'set_polygons',
    'is_clean',
    'is_sorted',
    'ring_to_shapely',
    'winding_number',
    'to_shapely',
    'from_shapely',
    'make_simple',
    'union_',
    'intersection',
    'diff',
    'offset',
]

"""
Core geometry kernels and open-path primitives.
"""

from .geometry import (
    as_point,
    as_points,
    signed_area,
    twice_signed_area,
    ring_contains,
    point_on_segment,
    distance_to_segment,
    douglas_peucker,
    rotate_points,
    interior_angles,
)
from .primitives import Line, Polyline, BoundingBox

__all__ = [
    'as_point',
    'as_points',
    'signed_area',
    'twice_signed_area',
    'ring_contains',
    'point_on_segment',
    'distance_to_segment',
    'douglas_peucker',
    'rotate_points',
    'interior_angles',
    'Line',
    'Polyline',
    'BoundingBox',
]

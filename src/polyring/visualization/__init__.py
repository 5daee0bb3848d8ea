"""
Visualization utilities.
"""

from .plotting import plot_polygons

__all__ = ['plot_polygons']

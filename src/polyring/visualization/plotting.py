"""
Visualization utilities for polygon collections.

Draws rings with their vertices, orientation and an optional statistics box.
Meant for debugging slices, not for production output.
"""

from typing import Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt

from ..polygon.collection import get_extents, total_area
from ..polygon.polygon import Polygons


def plot_polygons(
    polygons: Polygons,
    ax: Optional[plt.Axes] = None,
    points: Optional[Sequence] = None,
    title: str = "Polygons",
    show_stats: bool = True
) -> plt.Axes:
    """
    Visualize rings in 2D.

    Counter-clockwise rings are drawn in green, clockwise rings (holes) in
    red, and degenerate rings in grey.

    Parameters
    ----------
    polygons : list of Polygon
        Rings to draw.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    points : array-like, optional
        Query points of shape (N, 2) to scatter, colored by whether any
        ring contains them.
    title : str
        Plot title.
    show_stats : bool
        Whether to show collection statistics.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    for polygon in polygons:
        if not polygon.is_valid():
            color = 'grey'
        elif polygon.is_counter_clockwise():
            color = 'green'
        else:
            color = 'red'

        pts = polygon.points
        if len(pts) == 0:
            continue
        closed = np.vstack([pts, pts[:1]])
        ax.plot(closed[:, 0], closed[:, 1], '-', color=color, linewidth=2, zorder=3)
        ax.fill(pts[:, 0], pts[:, 1], alpha=0.15, color=color, zorder=1)
        ax.scatter(pts[:, 0], pts[:, 1], c='black', s=20, marker='s', zorder=4)
        # First vertex marks where the ring starts
        ax.scatter(pts[:1, 0], pts[:1, 1], c=color, s=80, marker='o', zorder=5)

    if points is not None:
        points = np.atleast_2d(points)
        inside_mask = np.array([
            any(p.contains(pt) for p in polygons) for pt in points
        ], dtype=bool)
        ax.scatter(
            points[inside_mask, 0], points[inside_mask, 1],
            c='steelblue', alpha=0.6, s=20, label='Inside', zorder=2
        )
        ax.scatter(
            points[~inside_mask, 0], points[~inside_mask, 1],
            c='coral', alpha=0.6, s=20, label='Outside', zorder=2
        )
        ax.legend(loc='upper right')

    if show_stats:
        bbox = get_extents(polygons)
        width, height = bbox.size()
        stats_text = (
            f"Polygons: {len(polygons)}\n"
            f"Vertices: {sum(len(p) for p in polygons)}\n"
            f"Area: {total_area(polygons):.0f}\n"
            f"Extents: {width} x {height}"
        )
        ax.text(
            0.02, 0.98, stats_text,
            transform=ax.transAxes,
            verticalalignment='top',
            fontfamily='monospace',
            fontsize=9,
            bbox=dict(boxstyle='round', facecolor='white', alpha=0.8)
        )

    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_title(title)
    ax.set_aspect('equal', adjustable='box')
    ax.grid(True, alpha=0.3)

    return ax

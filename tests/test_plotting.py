"""
Smoke tests for the visualization helpers.
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

from polyring import Polygon, plot_polygons


class TestPlotPolygons:
    """Tests for plot_polygons()."""

    def test_returns_axes(self):
        outer = Polygon([[0, 0], [100, 0], [100, 100], [0, 100]])
        hole = Polygon([[20, 20], [20, 30], [30, 30], [30, 20]])
        ax = plot_polygons([outer, hole, Polygon([[0, 0], [5, 5]])])

        assert ax.get_title() == "Polygons"
        assert len(ax.lines) == 3
        plt.close(ax.figure)

    def test_with_points_on_given_axes(self):
        fig, ax = plt.subplots()
        square = Polygon([[0, 0], [10, 0], [10, 10], [0, 10]])
        points = np.array([[5, 5], [20, 20]])

        result = plot_polygons([square], ax=ax, points=points, title="Slice", show_stats=False)

        assert result is ax
        assert ax.get_title() == "Slice"
        assert ax.get_legend() is not None
        plt.close(fig)

    def test_empty_collection(self):
        ax = plot_polygons([])
        assert len(ax.lines) == 0
        plt.close(ax.figure)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

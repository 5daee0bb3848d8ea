"""Shared numeric defaults for ring geometry.

Coordinates are stored as scaled integers. ``SCALING_FACTOR`` converts an
unscaled length (mm) into integer units, so one unit is one nanometre.
The defaults below are expressed in integer units.
"""

from dataclasses import dataclass


# Numerical tolerance for floating point comparisons
EPS = 1e-10

SCALING_FACTOR = 1e-6


def scale_(value: float) -> float:
    """Convert an unscaled length into integer coordinate units."""
    return value / SCALING_FACTOR


def unscale(value: float) -> float:
    """Convert integer coordinate units back into an unscaled length."""
    return value * SCALING_FACTOR


@dataclass(frozen=True)
class GeometryDefaults:
    """Default parameters for the cleanup and resampling helpers.

    All distances are in scaled integer units.
    """

    simplify_tolerance: float = scale_(0.0125)
    """Douglas-Peucker tolerance used when none is given."""

    resample_distance: float = scale_(1.0)
    """Spacing used by ``equally_spaced_points`` when none is given."""

    min_area: float = scale_(0.05) * scale_(0.05)
    """Rings with a smaller absolute area are dropped by ``remove_small``."""

    @property
    def min_area_mm2(self) -> float:
        return unscale(unscale(self.min_area))


DEFAULTS = GeometryDefaults()

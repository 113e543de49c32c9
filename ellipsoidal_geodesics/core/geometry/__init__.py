"""Angle helpers, compensated summation and geodesic circles."""

from .accumulator import Accumulator
from .angles import ang_diff, ang_normalize, atan2d, lat_fix, sincosd
from .circle import geodesic_circle_points

__all__ = [
    "Accumulator",
    "ang_diff",
    "ang_normalize",
    "atan2d",
    "lat_fix",
    "sincosd",
    "geodesic_circle_points",
]

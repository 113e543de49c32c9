"""Data models: ellipsoid, points and solver options."""

from .options import SolverOptions
from .point import GeoPoint
from .ellipsoid import Ellipsoid, WGS84

__all__ = [
    "SolverOptions",
    "GeoPoint",
    "Ellipsoid",
    "WGS84",
]

"""
Core module for ellipsoidal geodesics.

Pure Python implementations of the geodesic solvers and the polygon
accumulator, usable without any I/O layer.
"""

from .errors import InvalidParameterError, FixtureFormatError

from .models import SolverOptions, GeoPoint, Ellipsoid, WGS84

from .results import Output, DirectResult, InverseResult, PolygonResult

from .geometry import Accumulator, geodesic_circle_points

from .solver import GeodesicLine, solve_direct, solve_inverse

from .polygon import PolygonArea

__all__ = [
    # Errors
    "InvalidParameterError",
    "FixtureFormatError",

    # Models
    "SolverOptions",
    "GeoPoint",
    "Ellipsoid",
    "WGS84",

    # Results
    "Output",
    "DirectResult",
    "InverseResult",
    "PolygonResult",

    # Geometry
    "Accumulator",
    "geodesic_circle_points",

    # Solvers
    "GeodesicLine",
    "solve_direct",
    "solve_inverse",

    # Polygons
    "PolygonArea",
]

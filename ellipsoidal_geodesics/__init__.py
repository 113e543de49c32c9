"""
Ellipsoidal Geodesics

Shortest paths, distances and polygon areas on an ellipsoid of revolution,
accurate to round-off for any pair of points.

Conventions:
- Angles: degrees at the public boundary, radians internally
- Azimuth: North = 0, clockwise positive
- Latitude: [-90, 90]; longitudes are reduced to (-180, 180] on output
- Distance and area: units of the equatorial radius (meters, m^2 for WGS84)
"""

__version__ = "1.0.0"

from .core.models import Ellipsoid, WGS84, SolverOptions, GeoPoint
from .core.results import Output, DirectResult, InverseResult, PolygonResult
from .core.errors import InvalidParameterError, FixtureFormatError
from .core.geometry import Accumulator, geodesic_circle_points
from .core.solver import GeodesicLine, solve_direct, solve_inverse
from .core.polygon import PolygonArea
from .core.logging_config import configure_logging

__all__ = [
    # Version
    "__version__",

    # Models
    "Ellipsoid",
    "WGS84",
    "SolverOptions",
    "GeoPoint",

    # Results
    "Output",
    "DirectResult",
    "InverseResult",
    "PolygonResult",

    # Errors
    "InvalidParameterError",
    "FixtureFormatError",

    # Algorithms
    "Accumulator",
    "GeodesicLine",
    "PolygonArea",
    "solve_direct",
    "solve_inverse",
    "geodesic_circle_points",

    # Logging
    "configure_logging",
]

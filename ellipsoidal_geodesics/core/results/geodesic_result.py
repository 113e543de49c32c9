"""
Result classes for geodesic computations.

This module defines the output data structures of the direct and inverse
solvers and of the polygon accumulator, plus the flags used to select
which outputs a solver computes.
"""

import math
from dataclasses import dataclass
from enum import IntFlag
from typing import Any, Dict, Optional


class Output(IntFlag):
    """
    Output quantities a solver can be asked to compute.

    Quantities that are not requested are returned as None and the series
    terms that only feed them are skipped.
    """
    NONE = 0
    LATITUDE = 1
    LONGITUDE = 2
    AZIMUTH = 4
    DISTANCE = 8
    AREA = 16
    LONG_UNROLL = 32

    STANDARD = LATITUDE | LONGITUDE | AZIMUTH | DISTANCE
    ALL = STANDARD | AREA


def _json_safe_value(value: Any) -> Any:
    """Convert non-JSON-safe floats (nan/inf) to None."""
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
    return value


@dataclass(frozen=True)
class DirectResult:
    """
    Solution of the direct geodesic problem.

    Attributes:
        lat1: Latitude of the start point (degrees)
        lon1: Longitude of the start point (degrees)
        azi1: Azimuth at the start point (degrees)
        s12: Distance from point 1 to point 2 (meters)
        lat2: Latitude of the end point (degrees), None if not requested
        lon2: Longitude of the end point (degrees), None if not requested
        azi2: Forward azimuth at the end point (degrees), None if not requested
        a12: Arc length on the auxiliary sphere (degrees)
        area: Area between the geodesic and the equator (m^2), None if not requested
    """

    lat1: float
    lon1: float
    azi1: float
    s12: float
    lat2: Optional[float] = None
    lon2: Optional[float] = None
    azi2: Optional[float] = None
    a12: Optional[float] = None
    area: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize result to dictionary."""
        return {
            "lat1": self.lat1,
            "lon1": self.lon1,
            "azi1": self.azi1,
            "s12": _json_safe_value(self.s12),
            "lat2": _json_safe_value(self.lat2),
            "lon2": _json_safe_value(self.lon2),
            "azi2": _json_safe_value(self.azi2),
            "a12": _json_safe_value(self.a12),
            "area": _json_safe_value(self.area),
        }


@dataclass(frozen=True)
class InverseResult:
    """
    Solution of the inverse geodesic problem.

    Attributes:
        lat1, lon1: First point (degrees)
        lat2, lon2: Second point (degrees)
        s12: Distance between the points (meters), None if not requested
        azi1: Azimuth at point 1 (degrees), None if not requested
        azi2: Forward azimuth at point 2 (degrees), None if not requested
        a12: Arc length on the auxiliary sphere (degrees)
        area: Area between the geodesic and the equator (m^2), None if not requested
    """

    lat1: float
    lon1: float
    lat2: float
    lon2: float
    s12: Optional[float] = None
    azi1: Optional[float] = None
    azi2: Optional[float] = None
    a12: Optional[float] = None
    area: Optional[float] = None

    @property
    def is_degenerate(self) -> bool:
        """True for coincident points, where the azimuths are conventional."""
        return self.a12 == 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize result to dictionary."""
        return {
            "lat1": self.lat1,
            "lon1": self.lon1,
            "lat2": self.lat2,
            "lon2": self.lon2,
            "s12": _json_safe_value(self.s12),
            "azi1": _json_safe_value(self.azi1),
            "azi2": _json_safe_value(self.azi2),
            "a12": _json_safe_value(self.a12),
            "area": _json_safe_value(self.area),
        }


@dataclass(frozen=True)
class PolygonResult:
    """
    Perimeter and area accumulated by a PolygonArea.

    Attributes:
        num: Number of vertices added so far
        perimeter: Perimeter of the polygon or length of the polyline (meters)
        area: Area of the polygon (m^2), None for a polyline
    """

    num: int
    perimeter: float
    area: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize result to dictionary."""
        return {
            "num": self.num,
            "perimeter": _json_safe_value(self.perimeter),
            "area": _json_safe_value(self.area),
        }

"""
Ellipsoid of revolution for geodesic computations.

Conventions:
- Lengths: same unit as the equatorial radius (meters for WGS84)
- Flattening: f = (a - b) / a; f = 0 is a sphere, f < 0 a prolate ellipsoid
- Angles: degrees at the public boundary

An Ellipsoid is immutable. All derived constants, including the series
coefficient tables in the third flattening, are computed once at
construction and shared by every computation on it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from ..errors import InvalidParameterError
from ..geometry.angles import EPSILON, sq
from ..logging_config import get_logger
from ..polygon.polygon_area import PolygonArea
from ..results.geodesic_result import DirectResult, InverseResult, Output
from ..solver.direct import GeodesicLine, solve_direct
from ..solver.inverse import solve_inverse
from ..solver.series import a3_coefficients, c3_coefficients, c4_coefficients
from .options import SolverOptions


logger = get_logger(__name__)

_TOL2 = math.sqrt(EPSILON)


@dataclass(frozen=True)
class Ellipsoid:
    """
    Ellipsoid of revolution defined by equatorial radius and flattening.

    Attributes:
        a: Equatorial radius (> 0)
        f: Flattening (< 1)
        options: Iteration budget of the inverse solver

    Derived attributes (read-only):
        b: Polar semi-axis a (1 - f)
        f1: 1 - f
        e2: First eccentricity squared f (2 - f)
        ep2: Second eccentricity squared e2 / (1 - f)^2
        n: Third flattening f / (2 - f)
        c2: Authalic radius squared
    """

    a: float
    f: float
    options: SolverOptions = field(default_factory=SolverOptions, compare=False)

    b: float = field(init=False, repr=False)
    f1: float = field(init=False, repr=False)
    e2: float = field(init=False, repr=False)
    ep2: float = field(init=False, repr=False)
    n: float = field(init=False, repr=False)
    c2: float = field(init=False, repr=False)
    etol2: float = field(init=False, repr=False, compare=False)
    a3x: Tuple[float, ...] = field(init=False, repr=False, compare=False)
    c3x: Tuple[float, ...] = field(init=False, repr=False, compare=False)
    c4x: Tuple[float, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Validate the defining parameters and compute derived constants."""
        try:
            a = float(self.a)
            f = float(self.f)
        except (TypeError, ValueError) as exc:
            raise InvalidParameterError(f"Ellipsoid parameters must be numbers: {exc}") from exc

        if not (math.isfinite(a) and a > 0):
            raise InvalidParameterError(f"Equatorial radius must be positive and finite, got {self.a}")
        if not math.isfinite(f):
            raise InvalidParameterError(f"Flattening must be finite, got {self.f}")
        if not f < 1:
            raise InvalidParameterError(f"Flattening must be less than 1, got {self.f}")

        f1 = 1 - f
        e2 = f * (2 - f)
        b = a * f1
        if not (math.isfinite(b) and b > 0):
            raise InvalidParameterError(f"Polar semi-axis must be positive and finite, got {b}")
        n = f / (2 - f)

        if e2 == 0:
            authalic = 1.0
        elif e2 > 0:
            authalic = math.atanh(math.sqrt(e2)) / math.sqrt(abs(e2))
        else:
            authalic = math.atan(math.sqrt(-e2)) / math.sqrt(abs(e2))

        values = {
            "a": a,
            "f": f,
            "b": b,
            "f1": f1,
            "e2": e2,
            "ep2": e2 / sq(f1),
            "n": n,
            "c2": (sq(a) + sq(b) * authalic) / 2,
            # Threshold below which the short-line initial guess is accurate
            # enough to skip Newton's method.
            "etol2": 0.1 * _TOL2 / math.sqrt(max(0.001, abs(f)) * min(1.0, 1 - f / 2) / 2),
            "a3x": a3_coefficients(n),
            "c3x": c3_coefficients(n),
            "c4x": c4_coefficients(n),
        }
        for name, value in values.items():
            object.__setattr__(self, name, value)

        logger.debug("Ellipsoid initialized: a=%r f=%r n=%r", a, f, n)

    @property
    def area(self) -> float:
        """Total surface area of the ellipsoid."""
        return 4 * math.pi * self.c2

    @property
    def is_sphere(self) -> bool:
        """True if the flattening is zero."""
        return self.f == 0

    @property
    def is_prolate(self) -> bool:
        """True if the polar axis is the longer one."""
        return self.f < 0

    def direct(
        self,
        lat1: float,
        lon1: float,
        azi1: float,
        s12: float,
        outputs: Output = Output.STANDARD,
    ) -> DirectResult:
        """Solve the direct problem; see solve_direct."""
        return solve_direct(self, lat1, lon1, azi1, s12, outputs)

    def inverse(
        self,
        lat1: float,
        lon1: float,
        lat2: float,
        lon2: float,
        outputs: Output = Output.STANDARD,
    ) -> InverseResult:
        """Solve the inverse problem; see solve_inverse."""
        return solve_inverse(self, lat1, lon1, lat2, lon2, outputs)

    def line(
        self,
        lat1: float,
        lon1: float,
        azi1: float,
        outputs: Output = Output.ALL,
    ) -> GeodesicLine:
        """Geodesic line from a point and azimuth, for repeated positions."""
        return GeodesicLine(self, lat1, lon1, azi1, outputs)

    def polygon(self, polyline: bool = False) -> PolygonArea:
        """New PolygonArea bound to this ellipsoid."""
        return PolygonArea(self, polyline)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the defining parameters to a dictionary."""
        return {
            "a": self.a,
            "f": self.f,
            "options": self.options.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Ellipsoid':
        """Create an Ellipsoid from a dictionary with "a" and "f"."""
        options = data.get("options")
        return cls(
            a=data["a"],
            f=data["f"],
            options=SolverOptions.from_dict(options) if options else SolverOptions(),
        )

    def __repr__(self) -> str:
        return f"Ellipsoid(a={self.a!r}, f={self.f!r})"


# WGS84 conforming ellipsoid
WGS84 = Ellipsoid(6378137.0, 1 / 298.257223563)

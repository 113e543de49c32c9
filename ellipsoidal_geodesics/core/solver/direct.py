"""ellipsoidal_geodesics.core.solver.direct

Direct geodesic problem: start point, azimuth and distance -> end point.

The solution is non-iterative. The start point and azimuth are mapped to
the auxiliary sphere once (GeodesicLine); each requested distance is then
converted to a spherical arc length with the reverted distance series,
advanced on the sphere, and mapped back with the longitude and area
series.

Conventions:
  - Angles in degrees, azimuth clockwise from north
  - Negative distances move along the reciprocal azimuth
  - At a pole, azi1 is taken as if the point were at latitude 90 - eps on
    meridian lon1
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, List

from ..geometry.angles import (
    TINY,
    ang_normalize,
    ang_round,
    atan2d,
    lat_fix,
    norm,
    sincosd,
    sq,
)
from ..results.geodesic_result import DirectResult, Output
from .series import (
    a1m1f,
    a3f,
    c1f,
    c1pf,
    c3f,
    c4f,
    eps_from_k2,
    sin_cos_series,
)

if TYPE_CHECKING:
    from ..models.ellipsoid import Ellipsoid


class GeodesicLine:
    """A geodesic through a given point with a given azimuth.

    Everything that depends only on the start point and azimuth is computed
    here once, so that positions along the line are cheap to evaluate.

    Args:
        ellipsoid: The ellipsoid the line lives on
        lat1: Latitude of the start point (degrees)
        lon1: Longitude of the start point (degrees)
        azi1: Azimuth at the start point (degrees)
        capabilities: Outputs that positions along this line may request
    """

    def __init__(
        self,
        ellipsoid: "Ellipsoid",
        lat1: float,
        lon1: float,
        azi1: float,
        capabilities: Output = Output.ALL,
    ):
        self.ellipsoid = ellipsoid
        self.capabilities = capabilities | Output.LATITUDE | Output.AZIMUTH | Output.DISTANCE
        self.lat1 = lat_fix(lat1)
        self.lon1 = lon1
        self.azi1 = ang_normalize(azi1)
        self.salp1, self.calp1 = sincosd(ang_round(azi1))

        f1 = ellipsoid.f1
        sbet1, cbet1 = sincosd(ang_round(self.lat1))
        sbet1 *= f1
        # Ensure cbet1 = +epsilon at poles
        sbet1, cbet1 = norm(sbet1, cbet1)
        cbet1 = max(TINY, cbet1)

        # alpha0: azimuth where the geodesic crosses the equator
        self._salp0 = self.salp1 * cbet1
        self._calp0 = math.hypot(self.calp1, self.salp1 * sbet1)

        # sigma1: arc length from the northward equator crossing
        # omega1: spherical longitude from the same crossing
        self._ssig1 = sbet1
        self._somg1 = self._salp0 * sbet1
        self._csig1 = self._comg1 = (
            cbet1 * self.calp1 if sbet1 != 0 or self.calp1 != 0 else 1.0
        )
        self._ssig1, self._csig1 = norm(self._ssig1, self._csig1)

        self._k2 = sq(self._calp0) * ellipsoid.ep2
        eps = eps_from_k2(self._k2)

        self._A1m1 = a1m1f(eps)
        self._C1a: List[float] = c1f(eps)
        self._B11 = sin_cos_series(True, self._ssig1, self._csig1, self._C1a)
        s = math.sin(self._B11)
        c = math.cos(self._B11)
        # tau1 = sigma1 + B11
        self._stau1 = self._ssig1 * c + self._csig1 * s
        self._ctau1 = self._csig1 * c - self._ssig1 * s
        self._C1pa: List[float] = c1pf(eps)

        if self.capabilities & Output.LONGITUDE:
            self._C3a: List[float] = c3f(ellipsoid.c3x, eps)
            self._A3c = -ellipsoid.f * self._salp0 * a3f(ellipsoid.a3x, eps)
            self._B31 = sin_cos_series(True, self._ssig1, self._csig1, self._C3a)

        if self.capabilities & Output.AREA:
            self._C4a: List[float] = c4f(ellipsoid.c4x, eps)
            self._A4 = sq(ellipsoid.a) * self._calp0 * self._salp0 * ellipsoid.e2
            self._B41 = sin_cos_series(False, self._ssig1, self._csig1, self._C4a)

    def position(self, s12: float, outputs: Output = Output.STANDARD) -> DirectResult:
        """Point at distance s12 along the line.

        Args:
            s12: Distance from the start point (meters, may be negative)
            outputs: Quantities to compute; LONG_UNROLL reports lon2 as
                lon1 plus the signed longitude travelled instead of
                reducing it to (-180, 180]

        Returns:
            DirectResult with unrequested fields set to None
        """
        ellipsoid = self.ellipsoid
        outputs = Output(outputs & (self.capabilities | Output.LONG_UNROLL))
        b = ellipsoid.b

        tau12 = s12 / (b * (1 + self._A1m1))
        s = math.sin(tau12)
        c = math.cos(tau12)
        # tau2 = tau1 + tau12
        B12 = -sin_cos_series(
            True,
            self._stau1 * c + self._ctau1 * s,
            self._ctau1 * c - self._stau1 * s,
            self._C1pa,
        )
        sig12 = tau12 - (B12 - self._B11)
        ssig12 = math.sin(sig12)
        csig12 = math.cos(sig12)
        if abs(ellipsoid.f) > 0.01:
            # The reverted series loses accuracy for large flattening; one
            # Newton step on s(sigma) restores it.
            ssig2 = self._ssig1 * csig12 + self._csig1 * ssig12
            csig2 = self._csig1 * csig12 - self._ssig1 * ssig12
            B12 = sin_cos_series(True, ssig2, csig2, self._C1a)
            serr = (1 + self._A1m1) * (sig12 + (B12 - self._B11)) - s12 / b
            sig12 = sig12 - serr / math.sqrt(1 + self._k2 * sq(ssig2))
            ssig12 = math.sin(sig12)
            csig12 = math.cos(sig12)

        # sigma2 = sigma1 + sigma12
        ssig2 = self._ssig1 * csig12 + self._csig1 * ssig12
        csig2 = self._csig1 * csig12 - self._ssig1 * ssig12
        sbet2 = self._calp0 * ssig2
        cbet2 = math.hypot(self._salp0, self._calp0 * csig2)
        if cbet2 == 0:
            # The end point is a pole; keep the azimuth defined.
            cbet2 = csig2 = TINY
        salp2 = self._salp0
        calp2 = self._calp0 * csig2

        lat2 = lon2 = azi2 = area = None
        if outputs & Output.LONGITUDE:
            somg2 = self._salp0 * ssig2
            comg2 = csig2
            E = math.copysign(1, self._salp0)
            if outputs & Output.LONG_UNROLL:
                omg12 = E * (
                    sig12
                    - (math.atan2(ssig2, csig2) - math.atan2(self._ssig1, self._csig1))
                    + (math.atan2(E * somg2, comg2) - math.atan2(E * self._somg1, self._comg1))
                )
            else:
                omg12 = math.atan2(
                    somg2 * self._comg1 - comg2 * self._somg1,
                    comg2 * self._comg1 + somg2 * self._somg1,
                )
            lam12 = omg12 + self._A3c * (
                sig12 + (sin_cos_series(True, ssig2, csig2, self._C3a) - self._B31)
            )
            lon12 = math.degrees(lam12)
            if outputs & Output.LONG_UNROLL:
                lon2 = self.lon1 + lon12
            else:
                lon2 = ang_normalize(ang_normalize(self.lon1) + ang_normalize(lon12))

        if outputs & Output.LATITUDE:
            lat2 = atan2d(sbet2, ellipsoid.f1 * cbet2)

        if outputs & Output.AZIMUTH:
            azi2 = atan2d(salp2, calp2)

        if outputs & Output.AREA:
            B42 = sin_cos_series(False, ssig2, csig2, self._C4a)
            if self._calp0 == 0 or self._salp0 == 0:
                # alp12 = alp2 - alp1, used in atan2 so no need to normalize
                salp12 = salp2 * self.calp1 - calp2 * self.salp1
                calp12 = calp2 * self.calp1 + salp2 * self.salp1
            else:
                # tan(alp) = tan(alp0) * sec(sig), so the difference of the
                # azimuths follows from sig1 and sig12 without cancellation.
                if csig12 <= 0:
                    salp12 = self._csig1 * (1 - csig12) + ssig12 * self._ssig1
                else:
                    salp12 = ssig12 * (self._csig1 * ssig12 / (1 + csig12) + self._ssig1)
                salp12 = self._calp0 * self._salp0 * salp12
                calp12 = sq(self._salp0) + sq(self._calp0) * self._csig1 * csig2
            area = ellipsoid.c2 * math.atan2(salp12, calp12) + self._A4 * (B42 - self._B41)

        return DirectResult(
            lat1=self.lat1,
            lon1=self.lon1,
            azi1=self.azi1,
            s12=s12,
            lat2=lat2,
            lon2=lon2,
            azi2=azi2,
            a12=math.degrees(sig12),
            area=area,
        )

    def __repr__(self) -> str:
        return f"GeodesicLine(lat1={self.lat1!r}, lon1={self.lon1!r}, azi1={self.azi1!r})"


def solve_direct(
    ellipsoid: "Ellipsoid",
    lat1: float,
    lon1: float,
    azi1: float,
    s12: float,
    outputs: Output = Output.STANDARD,
) -> DirectResult:
    """Solve the direct geodesic problem.

    Args:
        ellipsoid: Ellipsoid to compute on
        lat1: Latitude of point 1 in [-90, 90] (degrees)
        lon1: Longitude of point 1 (degrees)
        azi1: Azimuth at point 1 (degrees)
        s12: Distance from point 1 to point 2 (meters); negative is allowed
        outputs: Quantities to compute (see Output)

    Returns:
        DirectResult; lon2 and azi2 lie in (-180, 180] unless LONG_UNROLL
        is requested.
    """
    line = GeodesicLine(ellipsoid, lat1, lon1, azi1, Output(int(outputs) & ~int(Output.LONG_UNROLL)))
    return line.position(s12, outputs)

"""ellipsoidal_geodesics.core.geometry.angles

Angle and arithmetic helpers shared by the geodesic solvers.

Conventions:
  - Angles: degrees at the public boundary, radians inside the series
  - Azimuth: North = 0, clockwise positive
  - Normalized angles lie in (-180, 180]

Implementation detail:
  - Trigonometric functions of degrees reduce the argument exactly to
    [-45, 45] before converting to radians, so that sincosd(90) gives
    exactly (1, 0).
"""

from __future__ import annotations

import math
from typing import Tuple


TINY = math.sqrt(2.0 ** -1022)
EPSILON = 2.0 ** -52
DIGITS = 53


def sq(x: float) -> float:
    """Square of x."""
    return x * x


def cbrt(x: float) -> float:
    """Real cube root of x."""
    y = math.pow(abs(x), 1 / 3.0)
    return y if x >= 0 else -y


def norm(x: float, y: float) -> Tuple[float, float]:
    """Scale (x, y) to a unit vector."""
    r = math.hypot(x, y)
    return x / r, y / r


def error_free_sum(u: float, v: float) -> Tuple[float, float]:
    """Two-sum: return (s, t) with s = round(u + v) and s + t = u + v exactly."""
    s = u + v
    up = s - v
    vpp = s - up
    up -= u
    vpp -= v
    t = -(up + vpp)
    return s, t


def polyval(n: int, p, s: int, x: float) -> float:
    """Evaluate the polynomial of degree n with coefficients p[s:s+n+1].

    Coefficients are ordered from the highest power down.
    """
    y = float(0 if n < 0 else p[s])
    while n > 0:
        n -= 1
        s += 1
        y = y * x + p[s]
    return y


def ang_round(x: float) -> float:
    """Round tiny angles so that small differences are exact.

    Values smaller than 1/16 are rounded to a multiple of 2^-57, which keeps
    the solvers symmetric for points very close to the equator or a meridian.
    """
    z = 1 / 16.0
    y = abs(x)
    w = z - y
    if w > 0:
        y = z - w
    return math.copysign(y, x)


def remainder(x: float, y: float) -> float:
    """Remainder of x/y in [-y/2, y/2)."""
    z = math.fmod(x, y) if math.isfinite(x) else math.nan
    # fmod(-0.0, y) may lose the sign on some platforms.
    z = x if x == 0 else z
    if z < -y / 2:
        return z + y
    if z < y / 2:
        return z
    return z - y


def ang_normalize(x: float) -> float:
    """Normalize an angle in degrees to (-180, 180]."""
    y = remainder(x, 360.0)
    return 180.0 if y == -180 else y


def lat_fix(x: float) -> float:
    """Return NaN for latitudes outside [-90, 90]."""
    return math.nan if abs(x) > 90 else x


def ang_diff(x: float, y: float) -> Tuple[float, float]:
    """Exact difference y - x of two angles, reduced to (-180, 180].

    Returns (d, e) with d + e the exact difference.
    """
    d, t = error_free_sum(ang_normalize(-x), ang_normalize(y))
    d = ang_normalize(d)
    return error_free_sum(-180.0 if d == 180 and t > 0 else d, t)


def sincosd(x: float) -> Tuple[float, float]:
    """Sine and cosine of an angle in degrees."""
    r = math.fmod(x, 360.0) if math.isfinite(x) else math.nan
    q = 0 if math.isnan(r) else int(round(r / 90))
    r -= 90 * q
    r = math.radians(r)
    s = math.sin(r)
    c = math.cos(r)
    q = q % 4
    if q == 1:
        s, c = c, -s
    elif q == 2:
        s, c = -s, -c
    elif q == 3:
        s, c = -c, s
    # Drop the sign of -0.0 except for sin(-0.0).
    if x != 0:
        s += 0.0
        c += 0.0
    return s, c


def atan2d(y: float, x: float) -> float:
    """atan2 in degrees, exact for multiples of 90 degrees."""
    if abs(y) > abs(x):
        q = 2
        x, y = y, x
    else:
        q = 0
    if x < 0:
        q += 1
        x = -x
    ang = math.degrees(math.atan2(y, x))
    if q == 1:
        ang = (180 if y >= 0 else -180) - ang
    elif q == 2:
        ang = 90 - ang
    elif q == 3:
        ang = -90 + ang
    return ang


def reverse_azimuth(azi: float) -> float:
    """Azimuth pointing the opposite way, normalized to (-180, 180]."""
    return ang_normalize(azi + 180.0)

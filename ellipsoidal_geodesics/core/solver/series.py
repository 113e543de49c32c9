"""ellipsoidal_geodesics.core.solver.series

Series expansions that map the auxiliary sphere onto the ellipsoid.

A geodesic on the ellipsoid is followed on an auxiliary sphere where the
latitude is replaced by the reduced latitude beta, the distance by the
spherical arc length sigma and the longitude by the spherical longitude
omega. The exact relations between the two are integrals that are expanded
here to sixth order in

  - eps = (sqrt(1 + k^2) - 1) / (sqrt(1 + k^2) + 1),  k^2 = e'^2 cos^2(alpha0)
  - n   = f / (2 - f)   (third flattening)

which is enough for full double precision when |f| <= 0.01 and still very
accurate for |f| of a few percent.

Quantities:
  - A1, C1:  distance      s / b = A1 (sigma + sum C1[l] sin(2 l sigma))
  - C1':     inverse of the distance series (sigma from tau = s / (b A1))
  - A2, C2:  reduced length integral (used by the Newton Jacobian)
  - A3, C3:  longitude     lambda = omega - f sin(alpha0) A3 (sigma + ...)
  - C4:      area between the geodesic and the equator

Coefficient lists store, for each term, the numerator polynomial from the
highest power down followed by the denominator.

Reference: C. F. F. Karney, "Algorithms for geodesics", J. Geodesy 87,
43-55 (2013).
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from ..geometry.angles import polyval, sq


ORDER = 6
NA1 = ORDER
NC1 = ORDER
NC1P = ORDER
NA2 = ORDER
NC2 = ORDER
NA3 = ORDER
NA3X = NA3
NC3 = ORDER
NC3X = (NC3 * (NC3 - 1)) // 2
NC4 = ORDER
NC4X = (NC4 * (NC4 + 1)) // 2


# ---------------------------------------------------------------------------
# Distance and reduced-length series (functions of eps only)
# ---------------------------------------------------------------------------

_A1M1_COEFF = (1, 4, 64, 0, 256)

_C1_COEFF = (
    -1, 6, -16, 32,
    -9, 64, -128, 2048,
    9, -16, 768,
    3, -5, 512,
    -7, 1280,
    -7, 2048,
)

_C1P_COEFF = (
    205, -432, 768, 1536,
    4005, -4736, 3840, 12288,
    -225, 116, 384,
    -7173, 2695, 7680,
    3467, 7680,
    38081, 61440,
)

_A2M1_COEFF = (-11, -28, -192, 0, 256)

_C2_COEFF = (
    1, 2, 16, 32,
    35, 64, 384, 2048,
    15, 80, 768,
    7, 35, 512,
    63, 1280,
    77, 2048,
)


def a1m1f(eps: float) -> float:
    """A1 - 1, the scale between distance and arc length."""
    m = NA1 // 2
    t = polyval(m, _A1M1_COEFF, 0, sq(eps)) / _A1M1_COEFF[m + 1]
    return (t + eps) / (1 - eps)


def _sine_coefficients(coeff: Sequence[int], eps: float, count: int) -> List[float]:
    """Evaluate the triangular table of sine-series coefficients.

    Index 0 of the returned list is unused so that c[l] multiplies
    sin(2 l sigma).
    """
    c = [0.0] * (count + 1)
    eps2 = sq(eps)
    d = eps
    o = 0
    for l in range(1, count + 1):
        m = (count - l) // 2
        c[l] = d * polyval(m, coeff, o, eps2) / coeff[o + m + 1]
        o += m + 2
        d *= eps
    return c


def c1f(eps: float) -> List[float]:
    """Coefficients C1[l] of the distance series."""
    return _sine_coefficients(_C1_COEFF, eps, NC1)


def c1pf(eps: float) -> List[float]:
    """Coefficients C1'[l] of the reverted distance series."""
    return _sine_coefficients(_C1P_COEFF, eps, NC1P)


def a2m1f(eps: float) -> float:
    """A2 - 1 for the reduced length integral."""
    m = NA2 // 2
    t = polyval(m, _A2M1_COEFF, 0, sq(eps)) / _A2M1_COEFF[m + 1]
    return (t - eps) / (1 + eps)


def c2f(eps: float) -> List[float]:
    """Coefficients C2[l] of the reduced length integral."""
    return _sine_coefficients(_C2_COEFF, eps, NC2)


# ---------------------------------------------------------------------------
# Longitude and area series (polynomials in n, evaluated once per ellipsoid)
# ---------------------------------------------------------------------------

_A3_COEFF = (
    -3, 128,
    -2, -3, 64,
    -1, -3, -1, 16,
    3, -1, -2, 8,
    1, -1, 2,
    1, 1,
)

_C3_COEFF = (
    3, 128,
    2, 5, 128,
    -1, 3, 3, 64,
    -1, 0, 1, 8,
    -1, 1, 4,
    5, 256,
    1, 3, 128,
    -3, -2, 3, 64,
    1, -3, 2, 32,
    7, 512,
    -10, 9, 384,
    5, -9, 5, 192,
    7, 512,
    -14, 7, 512,
    21, 2560,
)

_C4_COEFF = (
    97, 15015,
    1088, 156, 45045,
    -224, -4784, 1573, 45045,
    -10656, 14144, -4576, -858, 45045,
    64, 624, -4576, 6864, -3003, 15015,
    100, 208, 572, 3432, -12012, 30030, 45045,
    1, 9009,
    -2944, 468, 135135,
    5792, 1040, -1287, 135135,
    5952, -11648, 9152, -2574, 135135,
    -64, -624, 4576, -6864, 3003, 135135,
    8, 10725,
    1856, -936, 225225,
    -8448, 4992, -1144, 225225,
    -1440, 4160, -4576, 1716, 225225,
    -136, 63063,
    1024, -208, 105105,
    3584, -3328, 1144, 315315,
    -128, 135135,
    -2560, 832, 405405,
    128, 99099,
)


def a3_coefficients(n: float) -> Tuple[float, ...]:
    """Coefficients of A3 as a polynomial in eps, for third flattening n."""
    a3x = []
    o = 0
    for j in range(NA3 - 1, -1, -1):
        m = min(NA3 - j - 1, j)
        a3x.append(polyval(m, _A3_COEFF, o, n) / _A3_COEFF[o + m + 1])
        o += m + 2
    return tuple(a3x)


def c3_coefficients(n: float) -> Tuple[float, ...]:
    """Coefficients of C3[l] as polynomials in eps, for third flattening n."""
    c3x = []
    o = 0
    for l in range(1, NC3):
        for j in range(NC3 - 1, l - 1, -1):
            m = min(NC3 - j - 1, j)
            c3x.append(polyval(m, _C3_COEFF, o, n) / _C3_COEFF[o + m + 1])
            o += m + 2
    return tuple(c3x)


def c4_coefficients(n: float) -> Tuple[float, ...]:
    """Coefficients of C4[l] as polynomials in eps, for third flattening n."""
    c4x = []
    o = 0
    for l in range(NC4):
        for j in range(NC4 - 1, l - 1, -1):
            m = NC4 - j - 1
            c4x.append(polyval(m, _C4_COEFF, o, n) / _C4_COEFF[o + m + 1])
            o += m + 2
    return tuple(c4x)


def a3f(a3x: Sequence[float], eps: float) -> float:
    """A3 evaluated from the per-ellipsoid table."""
    return polyval(NA3 - 1, a3x, 0, eps)


def c3f(c3x: Sequence[float], eps: float) -> List[float]:
    """C3[l] evaluated from the per-ellipsoid table (index 0 unused)."""
    c = [0.0] * NC3
    mult = 1.0
    o = 0
    for l in range(1, NC3):
        m = NC3 - l - 1
        mult *= eps
        c[l] = mult * polyval(m, c3x, o, eps)
        o += m + 1
    return c


def c4f(c4x: Sequence[float], eps: float) -> List[float]:
    """C4[l] evaluated from the per-ellipsoid table (cosine series, from 0)."""
    c = [0.0] * NC4
    mult = 1.0
    o = 0
    for l in range(NC4):
        m = NC4 - l - 1
        c[l] = mult * polyval(m, c4x, o, eps)
        o += m + 1
        mult *= eps
    return c


# ---------------------------------------------------------------------------
# Series evaluation
# ---------------------------------------------------------------------------

def eps_from_k2(k2: float) -> float:
    """Expansion parameter eps for k^2 = e'^2 cos^2(alpha0)."""
    return k2 / (2 * (1 + math.sqrt(1 + k2)) + k2)


def sin_cos_series(sinp: bool, sinx: float, cosx: float, c: Sequence[float]) -> float:
    """Clenshaw summation of a trigonometric series.

    sinp=True:  sum(c[l] * sin(2 l x), l = 1 .. len(c) - 1)
    sinp=False: sum(c[l] * cos((2 l + 1) x), l = 0 .. len(c) - 1)
    """
    k = len(c)
    n = k - (1 if sinp else 0)
    ar = 2 * (cosx - sinx) * (cosx + sinx)
    y1 = 0.0
    if n & 1:
        k -= 1
        y0 = c[k]
    else:
        y0 = 0.0
    n = n // 2
    while n:
        n -= 1
        k -= 1
        y1 = ar * y0 - y1 + c[k]
        k -= 1
        y0 = ar * y1 - y0 + c[k]
    return 2 * sinx * cosx * y0 if sinp else cosx * (y0 - y1)


def lengths(
    ep2: float,
    eps: float,
    sig12: float,
    ssig1: float,
    csig1: float,
    dn1: float,
    ssig2: float,
    csig2: float,
    dn2: float,
    cbet1: float,
    cbet2: float,
    want_distance: bool = True,
    want_reduced_length: bool = False,
    want_scale: bool = False,
) -> Tuple[float, float, float, float, float]:
    """Distance, reduced length and geodesic scales along a segment.

    All lengths are in units of the polar semi-axis b.

    Returns:
        (s12b, m12b, m0, M12, M21); entries not requested are NaN.
    """
    nan = float("nan")
    s12b = m12b = m0 = M12 = M21 = nan
    need_j = want_reduced_length or want_scale

    A1 = A2 = m0x = 0.0
    C1a: List[float] = []
    C2a: List[float] = []
    if want_distance or need_j:
        A1 = a1m1f(eps)
        C1a = c1f(eps)
        if need_j:
            A2 = a2m1f(eps)
            C2a = c2f(eps)
            m0x = A1 - A2
            A2 = 1 + A2
        A1 = 1 + A1

    J12 = 0.0
    if want_distance:
        B1 = (sin_cos_series(True, ssig2, csig2, C1a) -
              sin_cos_series(True, ssig1, csig1, C1a))
        s12b = A1 * (sig12 + B1)
        if need_j:
            B2 = (sin_cos_series(True, ssig2, csig2, C2a) -
                  sin_cos_series(True, ssig1, csig1, C2a))
            J12 = m0x * sig12 + (A1 * B1 - A2 * B2)
    elif need_j:
        # Combine the two series into one to save a Clenshaw evaluation.
        for l in range(1, NC2 + 1):
            C2a[l] = A1 * C1a[l] - A2 * C2a[l]
        J12 = m0x * sig12 + (sin_cos_series(True, ssig2, csig2, C2a) -
                             sin_cos_series(True, ssig1, csig1, C2a))

    if want_reduced_length:
        m0 = m0x
        # Missing a factor of b.
        m12b = (dn2 * (csig1 * ssig2) - dn1 * (ssig1 * csig2) -
                csig1 * csig2 * J12)
    if want_scale:
        csig12 = csig1 * csig2 + ssig1 * ssig2
        t = ep2 * (cbet1 - cbet2) * (cbet1 + cbet2) / (dn1 + dn2)
        M12 = csig12 + (t * ssig2 - csig2 * J12) * ssig1 / dn1
        M21 = csig12 - (t * ssig1 - csig1 * J12) * ssig2 / dn2
    return s12b, m12b, m0, M12, M21

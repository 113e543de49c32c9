"""ellipsoidal_geodesics.core.solver.inverse

Inverse geodesic problem: two points -> distance and azimuths.

Outline:
  1. Reduce the problem by symmetry so that lat1 <= 0, |lat1| >= |lat2|
     and lon12 >= 0.
  2. Meridians, the equator and short lines have direct solutions.
  3. Otherwise find alpha1 such that the longitude difference of the
     geodesic, lambda12(alpha1), matches the target. The initial guess
     comes from the spherical solution (or, for nearly antipodal points,
     from the astroid equation). Newton's method is applied with the
     analytic derivative dlambda12/dalpha1 obtained from the reduced
     length. A bracket [alpha1a, alpha1b] of the root is kept throughout
     and bisection takes over when a Newton step leaves it or once the
     Newton budget is spent.
  4. Distance, azimuths and the area integral come from the same series
     used by the direct solver.

Reference: C. F. F. Karney, "Algorithms for geodesics", J. Geodesy 87,
43-55 (2013).
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Tuple

from ..geometry.angles import (
    EPSILON,
    TINY,
    ang_diff,
    ang_round,
    atan2d,
    cbrt,
    lat_fix,
    norm,
    sincosd,
    sq,
)
from ..logging_config import get_logger
from ..results.geodesic_result import InverseResult, Output
from .series import (
    a3f,
    c3f,
    c4f,
    eps_from_k2,
    lengths,
    sin_cos_series,
)

if TYPE_CHECKING:
    from ..models.ellipsoid import Ellipsoid


logger = get_logger(__name__)

TOL0 = EPSILON
# 100 * TOL0 misses the nearly antipodal case
# 52.784459512564 0 -52.784459512563990912 179.634407464943777557
TOL1 = 200 * TOL0
TOL2 = math.sqrt(TOL0)
# Smallest bisection bracket
TOLB = TOL0 * TOL2
XTHRESH = 1000 * TOL2


def astroid(x: float, y: float) -> float:
    """Solve k^4 + 2 k^3 - (x^2 + y^2 - 1) k^2 - 2 y^2 k - y^2 = 0 for k.

    Returns the positive root, which gives the initial azimuth for nearly
    antipodal points.
    """
    p = sq(x)
    q = sq(y)
    r = (p + q - 1) / 6
    if q == 0 and r <= 0:
        # y = 0 with |x| <= 1; the caller handles this limit.
        return 0.0

    # Equations for s and t are scaled by r^3 and r so that r = 0 is safe.
    S = p * q / 4
    r2 = sq(r)
    r3 = r * r2
    # Discriminant of the quadratic for T3; zero on p^(1/3) + q^(1/3) = 1
    disc = S * (S + 2 * r3)
    u = r
    if disc >= 0:
        T3 = S + r3
        # Sign of the root chosen to maximize |T3|
        T3 += -math.sqrt(disc) if T3 < 0 else math.sqrt(disc)
        T = cbrt(T3)
        # T = 0 implies r2 / T -> 0
        u += T + (r2 / T if T != 0 else 0)
    else:
        # Complex T, real u
        ang = math.atan2(math.sqrt(-disc), -(S + r3))
        u += 2 * r * math.cos(ang / 3)
    v = math.sqrt(sq(u) + q)
    # u + v without cancellation; uv > 0 in both branches
    uv = q / (v - u) if u < 0 else u + v
    w = (uv - q) / (2 * v)
    return uv / (math.sqrt(uv + sq(w)) + w)


def _inverse_start(
    ellipsoid: "Ellipsoid",
    sbet1: float,
    cbet1: float,
    dn1: float,
    sbet2: float,
    cbet2: float,
    dn2: float,
    lam12: float,
    slam12: float,
    clam12: float,
) -> Tuple[float, float, float, float, float, float]:
    """Initial guess for alpha1.

    Returns:
        (sig12, salp1, calp1, salp2, calp2, dnm). sig12 >= 0 means the short
        line solution is already accurate and sig12, alpha2 are final;
        sig12 = -1 means alpha1 is only a starting point for Newton.
    """
    f = ellipsoid.f
    n = ellipsoid.n
    nan = math.nan
    sig12 = -1.0
    salp2 = calp2 = dnm = nan

    # bet12 = bet2 - bet1 in [0, pi); bet12a = bet2 + bet1 in (-pi, 0]
    sbet12 = sbet2 * cbet1 - cbet2 * sbet1
    cbet12 = cbet2 * cbet1 + sbet2 * sbet1
    sbet12a = sbet2 * cbet1 + cbet2 * sbet1

    shortline = cbet12 >= 0 and sbet12 < 0.5 and cbet2 * lam12 < 0.5
    if shortline:
        sbetm2 = sq(sbet1 + sbet2)
        # sin^2 of the mean reduced latitude
        sbetm2 /= sbetm2 + sq(cbet1 + cbet2)
        dnm = math.sqrt(1 + ellipsoid.ep2 * sbetm2)
        omg12 = lam12 / (ellipsoid.f1 * dnm)
        somg12 = math.sin(omg12)
        comg12 = math.cos(omg12)
    else:
        somg12 = slam12
        comg12 = clam12

    salp1 = cbet2 * somg12
    if comg12 >= 0:
        calp1 = sbet12 + cbet2 * sbet1 * sq(somg12) / (1 + comg12)
    else:
        calp1 = sbet12a - cbet2 * sbet1 * sq(somg12) / (1 - comg12)

    ssig12 = math.hypot(salp1, calp1)
    csig12 = sbet1 * sbet2 + cbet1 * cbet2 * comg12

    if shortline and ssig12 < ellipsoid.etol2:
        salp2 = cbet1 * somg12
        if comg12 >= 0:
            calp2 = sbet12 - cbet1 * sbet2 * (sq(somg12) / (1 + comg12))
        else:
            calp2 = sbet12 - cbet1 * sbet2 * (1 - comg12)
        salp2, calp2 = norm(salp2, calp2)
        sig12 = math.atan2(ssig12, csig12)
    elif not (abs(n) < 0.1 and csig12 < 0 and ssig12 < 6 * abs(n) * math.pi * sq(cbet1)):
        # Spherical estimate is good enough (NaN inputs also land here)
        pass
    else:
        # Nearly antipodal. Scale to x, y with the antipode at the origin
        # and the singular point at (-1, 0).
        lam12x = math.atan2(-slam12, -clam12)
        if f >= 0:
            # x = dlong, y = dlat
            k2 = sq(sbet1) * ellipsoid.ep2
            eps = eps_from_k2(k2)
            lamscale = f * cbet1 * a3f(ellipsoid.a3x, eps) * math.pi
            betscale = lamscale * cbet1
            x = lam12x / lamscale
            y = sbet12a / betscale
        else:
            # x = dlat, y = dlong
            cbet12a = cbet2 * cbet1 - sbet2 * sbet1
            bet12a = math.atan2(sbet12a, cbet12a)
            _, m12b, m0, _, _ = lengths(
                ellipsoid.ep2, n, math.pi + bet12a,
                sbet1, -cbet1, dn1, sbet2, cbet2, dn2, cbet1, cbet2,
                want_distance=False, want_reduced_length=True,
            )
            x = -1 + m12b / (cbet1 * cbet2 * m0 * math.pi)
            betscale = sbet12a / x if x < -0.01 else -f * sq(cbet1) * math.pi
            lamscale = betscale / cbet1
            y = lam12x / lamscale

        if y > -TOL1 and x > -1 - XTHRESH:
            # Strip near the cut
            if f >= 0:
                salp1 = min(1.0, -x)
                calp1 = -math.sqrt(1 - sq(salp1))
            else:
                calp1 = max(0.0 if x > -TOL1 else -1.0, x)
                salp1 = math.sqrt(1 - sq(calp1))
        else:
            k = astroid(x, y)
            if f >= 0:
                omg12a = lamscale * (-x * k / (1 + k))
            else:
                omg12a = lamscale * (-y * (1 + k) / k)
            somg12 = math.sin(omg12a)
            comg12 = -math.cos(omg12a)
            salp1 = cbet2 * somg12
            calp1 = sbet12a - cbet2 * sbet1 * sq(somg12) / (1 - comg12)

    # Written so that NaN passes through
    if not (salp1 <= 0):
        salp1, calp1 = norm(salp1, calp1)
    else:
        salp1 = 1.0
        calp1 = 0.0
    return sig12, salp1, calp1, salp2, calp2, dnm


def _lambda12(
    ellipsoid: "Ellipsoid",
    sbet1: float,
    cbet1: float,
    dn1: float,
    sbet2: float,
    cbet2: float,
    dn2: float,
    salp1: float,
    calp1: float,
    slam120: float,
    clam120: float,
    diffp: bool,
):
    """Longitude residual lambda12(alpha1) - lambda12_target and its derivative.

    Returns:
        (lam12, salp2, calp2, sig12, ssig1, csig1, ssig2, csig2, eps,
        domg12, dlam12); dlam12 is NaN unless diffp.
    """
    if sbet1 == 0 and calp1 == 0:
        # Equatorial line, handled by the caller
        calp1 = -TINY

    # sin(alp1) * cos(bet1) = sin(alp0)
    salp0 = salp1 * cbet1
    calp0 = math.hypot(calp1, salp1 * sbet1)  # calp0 > 0

    # tan(bet1) = tan(sig1) * cos(alp1), tan(omg1) = sin(alp0) * tan(sig1)
    ssig1 = sbet1
    somg1 = salp0 * sbet1
    csig1 = comg1 = calp1 * cbet1
    ssig1, csig1 = norm(ssig1, csig1)

    # |bet2| = -bet1 is kept exactly symmetric; it is singular for Newton.
    # sin(alp2) * cos(bet2) = sin(alp0)
    salp2 = salp0 / cbet2 if cbet2 != cbet1 else salp1
    # calp2 = sqrt(sq(calp0) - sq(sbet2)) / cbet2 >= 0
    if cbet2 != cbet1 or abs(sbet2) != -sbet1:
        if cbet1 < -sbet1:
            delta = (cbet2 - cbet1) * (cbet1 + cbet2)
        else:
            delta = (sbet1 - sbet2) * (sbet1 + sbet2)
        calp2 = math.sqrt(sq(calp1 * cbet1) + delta) / cbet2
    else:
        calp2 = abs(calp1)

    ssig2 = sbet2
    somg2 = salp0 * sbet2
    csig2 = comg2 = calp2 * cbet2
    ssig2, csig2 = norm(ssig2, csig2)

    # sig12 = sig2 - sig1, limit to [0, pi]
    sig12 = math.atan2(max(0.0, csig1 * ssig2 - ssig1 * csig2),
                       csig1 * csig2 + ssig1 * ssig2)
    # omg12 = omg2 - omg1, limit to [0, pi]
    somg12 = max(0.0, comg1 * somg2 - somg1 * comg2)
    comg12 = comg1 * comg2 + somg1 * somg2
    # eta = omg12 - lam120
    eta = math.atan2(somg12 * clam120 - comg12 * slam120,
                     comg12 * clam120 + somg12 * slam120)

    k2 = sq(calp0) * ellipsoid.ep2
    eps = eps_from_k2(k2)
    C3a = c3f(ellipsoid.c3x, eps)
    B312 = (sin_cos_series(True, ssig2, csig2, C3a) -
            sin_cos_series(True, ssig1, csig1, C3a))
    domg12 = -ellipsoid.f * a3f(ellipsoid.a3x, eps) * salp0 * (sig12 + B312)
    lam12 = eta + domg12

    if diffp:
        if calp2 == 0:
            dlam12 = -2 * ellipsoid.f1 * dn1 / sbet1
        else:
            _, dlam12, _, _, _ = lengths(
                ellipsoid.ep2, eps, sig12, ssig1, csig1, dn1, ssig2, csig2, dn2,
                cbet1, cbet2, want_distance=False, want_reduced_length=True,
            )
            dlam12 *= ellipsoid.f1 / (calp2 * cbet2)
    else:
        dlam12 = math.nan

    return (lam12, salp2, calp2, sig12, ssig1, csig1, ssig2, csig2,
            eps, domg12, dlam12)


def _gen_inverse(
    ellipsoid: "Ellipsoid",
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    want_area: bool,
):
    """Core of the inverse solver.

    Returns:
        (a12, s12, salp1, calp1, salp2, calp2, S12); S12 is NaN unless
        want_area.
    """
    f = ellipsoid.f
    f1 = ellipsoid.f1
    b = ellipsoid.b
    options = ellipsoid.options
    max_newton = options.max_newton_iterations
    max_total = options.max_iterations
    S12 = math.nan
    points = (lat1, lon1, lat2, lon2)

    # Exact longitude difference; lon12s carries its rounding error
    lon12, lon12s = ang_diff(lon1, lon2)
    lonsign = 1 if lon12 >= 0 else -1
    lon12 = lonsign * ang_round(lon12)
    lon12s = ang_round((180 - lon12) - lonsign * lon12s)
    lam12 = math.radians(lon12)
    if lon12 > 90:
        slam12, clam12 = sincosd(lon12s)
        clam12 = -clam12
    else:
        slam12, clam12 = sincosd(lon12)

    lat1 = ang_round(lat_fix(lat1))
    lat2 = ang_round(lat_fix(lat2))
    # Point 1 gets the larger |lat| (or the NaN)
    swapp = -1 if abs(lat1) < abs(lat2) else 1
    if swapp < 0:
        lonsign *= -1
        lat2, lat1 = lat1, lat2
    latsign = 1 if lat1 < 0 else -1
    lat1 *= latsign
    lat2 *= latsign
    # Canonical form:
    #     0 <= lon12 <= 180
    #     -90 <= lat1 <= 0
    #     lat1 <= lat2 <= -lat1
    # lonsign, swapp and latsign undo it at the end (1 = unchanged).

    sbet1, cbet1 = sincosd(lat1)
    sbet1 *= f1
    # cbet1 = +epsilon at poles
    sbet1, cbet1 = norm(sbet1, cbet1)
    cbet1 = max(TINY, cbet1)

    sbet2, cbet2 = sincosd(lat2)
    sbet2 *= f1
    sbet2, cbet2 = norm(sbet2, cbet2)
    cbet2 = max(TINY, cbet2)

    # Force bet2 = +/- bet1 exactly when the sensitive measure of
    # |bet1| - |bet2| vanishes; _lambda12 relies on it.
    if cbet1 < -sbet1:
        if cbet2 == cbet1:
            sbet2 = math.copysign(sbet1, sbet2)
    else:
        if abs(sbet2) == -sbet1:
            cbet2 = cbet1

    dn1 = math.sqrt(1 + ellipsoid.ep2 * sq(sbet1))
    dn2 = math.sqrt(1 + ellipsoid.ep2 * sq(sbet2))

    salp1 = calp1 = salp2 = calp2 = math.nan
    ssig1 = csig1 = ssig2 = csig2 = math.nan
    a12 = s12x = math.nan
    omg12 = domg12 = math.nan
    eps = 0.0

    meridian = lat1 == -90 or slam12 == 0
    if meridian:
        # Both points on one full meridian; head north at point 2
        calp1 = clam12
        salp1 = slam12
        calp2 = 1.0
        salp2 = 0.0

        # tan(bet) = tan(sig) * cos(alp)
        ssig1 = sbet1
        csig1 = calp1 * cbet1
        ssig2 = sbet2
        csig2 = calp2 * cbet2

        # sig12 = sig2 - sig1
        sig12 = math.atan2(max(0.0, csig1 * ssig2 - ssig1 * csig2),
                           csig1 * csig2 + ssig1 * ssig2)
        s12x, m12x, _, _, _ = lengths(
            ellipsoid.ep2, ellipsoid.n, sig12, ssig1, csig1, dn1, ssig2, csig2, dn2,
            cbet1, cbet2, want_distance=True, want_reduced_length=True,
        )
        # A meridian is shortest unless m12 < 0 past sig12 = pi/2; zero
        # length lines may show a spurious m12 < 0.
        if sig12 < 1 or m12x >= 0:
            if sig12 < 3 * TINY:
                sig12 = m12x = s12x = 0.0
            s12x *= b
            a12 = math.degrees(sig12)
        else:
            # m12 < 0, i.e., prolate and too close to anti-podal
            meridian = False

    # somg12 > 1 marks that it needs to be calculated
    somg12 = 2.0
    comg12 = 0.0
    if (not meridian and sbet1 == 0 and
            (f <= 0 or lon12s >= f * 180)):
        # Geodesic runs along equator
        calp1 = calp2 = 0.0
        salp1 = salp2 = 1.0
        s12x = ellipsoid.a * lam12
        sig12 = omg12 = lam12 / f1
        a12 = lon12 / f1
    elif not meridian:
        # Now point1 and point2 belong within a hemisphere bounded by a
        # meridian and geodesic is neither meridional or equatorial.
        sig12, salp1, calp1, salp2, calp2, dnm = _inverse_start(
            ellipsoid, sbet1, cbet1, dn1, sbet2, cbet2, dn2, lam12, slam12, clam12,
        )

        if sig12 >= 0:
            # Short lines (_inverse_start sets salp2, calp2, dnm)
            s12x = sig12 * b * dnm
            a12 = math.degrees(sig12)
            omg12 = lam12 / (f1 * dnm)
        else:
            # Solve lambda12(alp1) = lam12 for alp1 in (0, pi). The single
            # root is kept bracketed by (alp1a, alp1b); a Newton step that
            # leaves the bracket or has a non-positive slope is replaced
            # by the bracket midpoint.
            numit = 0
            converged = False
            bisected = False
            # Bracketing range
            tripn = tripb = False
            salp1a = TINY
            calp1a = 1.0
            salp1b = TINY
            calp1b = -1.0
            while numit < max_total:
                (v, salp2, calp2, sig12, ssig1, csig1, ssig2, csig2,
                 eps, domg12, dv) = _lambda12(
                    ellipsoid, sbet1, cbet1, dn1, sbet2, cbet2, dn2,
                    salp1, calp1, slam12, clam12, numit < max_newton,
                )
                # Reversed test to allow escape with NaNs
                if tripb or not (abs(v) >= (8 if tripn else 1) * TOL0):
                    converged = True
                    break
                # Update bracketing values
                if v > 0 and (numit > max_newton or calp1 / salp1 > calp1b / salp1b):
                    salp1b = salp1
                    calp1b = calp1
                elif v < 0 and (numit > max_newton or calp1 / salp1 < calp1a / salp1a):
                    salp1a = salp1
                    calp1a = calp1

                numit += 1
                if numit < max_newton and dv > 0:
                    dalp1 = -v / dv
                    sdalp1 = math.sin(dalp1)
                    cdalp1 = math.cos(dalp1)
                    nsalp1 = salp1 * cdalp1 + calp1 * sdalp1
                    if nsalp1 > 0 and abs(dalp1) < math.pi:
                        calp1 = calp1 * cdalp1 - salp1 * sdalp1
                        salp1 = nsalp1
                        salp1, calp1 = norm(salp1, calp1)
                        # Slope -> 0 loses quadratic convergence; tighten
                        # the stopping test instead.
                        tripn = abs(v) <= 16 * TOL0
                        continue

                # Bisect the bracket
                if not bisected:
                    logger.debug(
                        "Inverse (%r, %r) -> (%r, %r): switching to bisection at iteration %d",
                        *points, numit,
                    )
                    bisected = True
                salp1 = (salp1a + salp1b) / 2
                calp1 = (calp1a + calp1b) / 2
                salp1, calp1 = norm(salp1, calp1)
                tripn = False
                tripb = (abs(salp1a - salp1) + (calp1a - calp1) < TOLB or
                         abs(salp1 - salp1b) + (calp1 - calp1b) < TOLB)

            if not converged:
                logger.warning(
                    "Inverse (%r, %r) -> (%r, %r) did not converge in %d iterations; "
                    "returning best estimate",
                    *points, max_total,
                )

            s12x, _, _, _, _ = lengths(
                ellipsoid.ep2, eps, sig12, ssig1, csig1, dn1, ssig2, csig2, dn2,
                cbet1, cbet2, want_distance=True,
            )
            s12x *= b
            a12 = math.degrees(sig12)

            if want_area:
                # omg12 = lam12 - domg12
                sdomg12 = math.sin(domg12)
                cdomg12 = math.cos(domg12)
                somg12 = slam12 * cdomg12 - clam12 * sdomg12
                comg12 = clam12 * cdomg12 + slam12 * sdomg12

    # Convert -0 to 0
    s12 = 0.0 + s12x

    if want_area:
        # From _lambda12: sin(alp1) * cos(bet1) = sin(alp0)
        salp0 = salp1 * cbet1
        calp0 = math.hypot(calp1, salp1 * sbet1)  # calp0 > 0
        if calp0 != 0 and salp0 != 0:
            # From _lambda12: tan(bet) = tan(sig) * cos(alp)
            ssig1 = sbet1
            csig1 = calp1 * cbet1
            ssig2 = sbet2
            csig2 = calp2 * cbet2
            k2 = sq(calp0) * ellipsoid.ep2
            eps = eps_from_k2(k2)
            # Multiplier = a^2 * e^2 * cos(alpha0) * sin(alpha0).
            A4 = sq(ellipsoid.a) * calp0 * salp0 * ellipsoid.e2
            ssig1, csig1 = norm(ssig1, csig1)
            ssig2, csig2 = norm(ssig2, csig2)
            C4a = c4f(ellipsoid.c4x, eps)
            B41 = sin_cos_series(False, ssig1, csig1, C4a)
            B42 = sin_cos_series(False, ssig2, csig2, C4a)
            S12 = A4 * (B42 - B41)
        else:
            # Avoid problems with indeterminate sig1, sig2 on equator
            S12 = 0.0

        if not meridian and somg12 == 2.0:
            somg12 = math.sin(omg12)
            comg12 = math.cos(omg12)

        if not meridian and comg12 > -0.7071 and sbet2 - sbet1 < 1.75:
            # Use tan(Gamma/2) = tan(omg12/2)
            # * (tan(bet1/2)+tan(bet2/2))/(1+tan(bet1/2)*tan(bet2/2))
            # with tan(x/2) = sin(x)/(1+cos(x))
            domg12 = 1 + comg12
            dbet1 = 1 + cbet1
            dbet2 = 1 + cbet2
            alp12 = 2 * math.atan2(somg12 * (sbet1 * dbet2 + sbet2 * dbet1),
                                   domg12 * (sbet1 * sbet2 + dbet1 * dbet2))
        else:
            # alp12 = alp2 - alp1, used in atan2 so no need to normalize
            salp12 = salp2 * calp1 - calp2 * salp1
            calp12 = calp2 * calp1 + salp2 * salp1
            # alp1 = +/-180, alp2 = 0 must give alp12 = -180 regardless of
            # the sign of zero
            if salp12 == 0 and calp12 < 0:
                salp12 = TINY * calp1
                calp12 = -1.0
            alp12 = math.atan2(salp12, calp12)
        S12 += ellipsoid.c2 * alp12
        S12 *= swapp * lonsign * latsign
        # Convert -0 to 0
        S12 += 0.0

    # Convert calp, salp to azimuth accounting for lonsign, swapp, latsign.
    if swapp < 0:
        salp2, salp1 = salp1, salp2
        calp2, calp1 = calp1, calp2

    salp1 *= swapp * lonsign
    calp1 *= swapp * latsign
    salp2 *= swapp * lonsign
    calp2 *= swapp * latsign

    return a12, s12, salp1, calp1, salp2, calp2, S12


def solve_inverse(
    ellipsoid: "Ellipsoid",
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    outputs: Output = Output.STANDARD,
) -> InverseResult:
    """Solve the inverse geodesic problem.

    Args:
        ellipsoid: Ellipsoid to compute on
        lat1, lon1: Point 1 (degrees), lat1 in [-90, 90]
        lat2, lon2: Point 2 (degrees), lat2 in [-90, 90]
        outputs: Quantities to compute (DISTANCE, AZIMUTH, AREA)

    Returns:
        InverseResult with s12 >= 0 and azimuths in (-180, 180].
        Coincident points give s12 = 0 with both azimuths equal to 0 or
        180 (the meridian convention). Exactly antipodal points give a
        meridional solution.

    The iteration is bounded by ellipsoid.options; if the budget is
    exhausted the best estimate is returned and a warning is logged.
    """
    a12, s12, salp1, calp1, salp2, calp2, S12 = _gen_inverse(
        ellipsoid, lat1, lon1, lat2, lon2, bool(outputs & Output.AREA),
    )

    azi1 = azi2 = None
    if outputs & Output.AZIMUTH:
        azi1 = atan2d(salp1, calp1)
        azi2 = atan2d(salp2, calp2)

    return InverseResult(
        lat1=lat1,
        lon1=lon1,
        lat2=lat2,
        lon2=lon2,
        s12=s12 if outputs & Output.DISTANCE else None,
        azi1=azi1,
        azi2=azi2,
        a12=a12,
        area=S12 if outputs & Output.AREA else None,
    )

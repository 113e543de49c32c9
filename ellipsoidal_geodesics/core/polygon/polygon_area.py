"""ellipsoidal_geodesics.core.polygon.polygon_area

Perimeter and area of geodesic polygons.

Each edge contributes the area between the geodesic and the equator (S12
from the solvers). The running sums use compensated accumulators so that
polygons with many edges keep full precision. Closing the polygon adds the
edge from the last vertex back to the first. The sum is then reduced modulo
the total area of the ellipsoid, correcting by half of it when the boundary
crosses the prime meridian an odd number of times (i.e. encircles a pole).

Conventions:
  - Vertices in degrees, edges are shortest geodesics
  - Counter-clockwise traversal gives a positive area (reverse=False)
  - sign=True: area in (-A/2, A/2]; sign=False: area in [0, A), where A is
    the area of the ellipsoid
  - A polyline only accumulates its length; it is never closed
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Iterable, Optional, Tuple, Union

from ..geometry.accumulator import Accumulator
from ..geometry.angles import ang_diff, ang_normalize, remainder
from ..models.point import GeoPoint
from ..results.geodesic_result import Output, PolygonResult
from ..solver.direct import solve_direct
from ..solver.inverse import solve_inverse

if TYPE_CHECKING:
    from ..models.ellipsoid import Ellipsoid


_INVERSE_OUTPUTS = Output.DISTANCE | Output.AREA
_DIRECT_OUTPUTS = Output.LATITUDE | Output.LONGITUDE | Output.AREA | Output.LONG_UNROLL


def _transit(lon1: float, lon2: float) -> int:
    """Crossing count (+1 east, -1 west, 0) of the prime meridian by an edge."""
    lon1 = ang_normalize(lon1)
    lon2 = ang_normalize(lon2)
    lon12, _ = ang_diff(lon1, lon2)
    if lon1 <= 0 and lon2 > 0 and lon12 > 0:
        return 1
    if lon2 <= 0 and lon1 > 0 and lon12 < 0:
        return -1
    return 0


def _transit_direct(lon1: float, lon2: float) -> int:
    """Crossing count for an edge whose end longitude is unrolled."""
    lon1 = math.fmod(lon1, 720.0)
    lon2 = math.fmod(lon2, 720.0)
    return (
        (1 if (-360 < lon2 <= 0) or lon2 > 360 else 0)
        - (1 if (-360 < lon1 <= 0) or lon1 > 360 else 0)
    )


def _reduce_area(area: float, area0: float, crossings: int, reverse: bool, sign: bool) -> float:
    """Reduce a raw area sum to the range selected by reverse and sign."""
    area = remainder(area, area0)
    if crossings & 1:
        area += (1 if area < 0 else -1) * area0 / 2
    # area is with the clockwise sense. If !reverse convert to
    # counter-clockwise convention.
    if not reverse:
        area *= -1
    # If sign put area in (-area0/2, area0/2], else put area in [0, area0)
    if sign:
        if area > area0 / 2:
            area -= area0
        elif area <= -area0 / 2:
            area += area0
    else:
        if area >= area0:
            area -= area0
        elif area < 0:
            area += area0
    return 0.0 + area


def _reduce_accumulated(areasum: Accumulator, area0: float, crossings: int,
                        reverse: bool, sign: bool) -> float:
    """Same as _reduce_area, carried out on a compensated sum (modified in place)."""
    areasum.remainder(area0)
    if crossings & 1:
        areasum.add((1 if areasum.sum() < 0 else -1) * area0 / 2)
    if not reverse:
        areasum.negate()
    if sign:
        if areasum.sum() > area0 / 2:
            areasum.add(-area0)
        elif areasum.sum() <= -area0 / 2:
            areasum.add(area0)
    else:
        if areasum.sum() >= area0:
            areasum.add(-area0)
        elif areasum.sum() < 0:
            areasum.add(area0)
    return 0.0 + areasum.sum()


class PolygonArea:
    """
    Accumulate vertices or edges of a geodesic polygon (or polyline).

    Args:
        ellipsoid: The ellipsoid the polygon lives on
        polyline: If True, only the length is accumulated and the figure is
            not closed

    Example:
        >>> poly = WGS84.polygon()
        >>> for lat, lon in [(0, 0), (0, 1), (1, 1), (1, 0)]:
        ...     poly.add_point(lat, lon)
        >>> result = poly.compute()
    """

    def __init__(self, ellipsoid: "Ellipsoid", polyline: bool = False):
        self._ellipsoid = ellipsoid
        self._polyline = bool(polyline)
        self._area0 = ellipsoid.area
        self._perimetersum = Accumulator()
        self._areasum: Optional[Accumulator] = None if self._polyline else Accumulator()
        self.clear()

    @property
    def ellipsoid(self) -> "Ellipsoid":
        return self._ellipsoid

    @property
    def polyline(self) -> bool:
        return self._polyline

    @property
    def num(self) -> int:
        """Number of vertices added so far."""
        return self._num

    @property
    def current_point(self) -> Optional[Tuple[float, float]]:
        """(lat, lon) of the most recent vertex, None if empty.

        After add_edge the longitude is unrolled, so it may lie outside
        (-180, 180].
        """
        if self._num == 0:
            return None
        return (self._lat1, self._lon1)

    def clear(self) -> None:
        """Reset to an empty polygon."""
        self._num = 0
        self._crossings = 0
        self._perimetersum.set(0.0)
        if self._areasum is not None:
            self._areasum.set(0.0)
        self._lat0 = self._lon0 = self._lat1 = self._lon1 = math.nan

    def add_point(self, lat: float, lon: float) -> None:
        """Add a vertex; lat in [-90, 90] degrees."""
        if self._num == 0:
            self._lat0 = self._lat1 = lat
            self._lon0 = self._lon1 = lon
        else:
            edge = solve_inverse(self._ellipsoid, self._lat1, self._lon1, lat, lon, _INVERSE_OUTPUTS)
            self._perimetersum.add(edge.s12)
            if not self._polyline:
                self._areasum.add(edge.area)
                self._crossings += _transit(self._lon1, lon)
            self._lat1 = lat
            self._lon1 = lon
        self._num += 1

    def add_points(self, points: Iterable[Union[GeoPoint, Tuple[float, float]]]) -> None:
        """Add several vertices, given as GeoPoints or (lat, lon) pairs."""
        for point in points:
            if isinstance(point, GeoPoint):
                self.add_point(point.lat, point.lon)
            else:
                lat, lon = point
                self.add_point(lat, lon)

    def add_edge(self, azi: float, s: float) -> None:
        """Add the vertex reached by travelling s meters at azimuth azi.

        Ignored while the polygon is empty, since the edge has no start.
        """
        if self._num == 0:
            return
        step = solve_direct(self._ellipsoid, self._lat1, self._lon1, azi, s, _DIRECT_OUTPUTS)
        self._perimetersum.add(s)
        if not self._polyline:
            self._areasum.add(step.area)
            self._crossings += _transit_direct(self._lon1, step.lon2)
        self._lat1 = step.lat2
        self._lon1 = step.lon2
        self._num += 1

    def _empty_result(self, num: int) -> PolygonResult:
        return PolygonResult(num=num, perimeter=0.0, area=None if self._polyline else 0.0)

    def compute(self, reverse: bool = False, sign: bool = True) -> PolygonResult:
        """
        Perimeter and area of the polygon closed back to its first vertex.

        The accumulated state is left untouched, so more vertices can be
        added afterwards.

        Args:
            reverse: If True, clockwise traversal counts as positive
            sign: If True, return a signed area; otherwise the area of the
                region to the left of the boundary (with reverse=False)

        Returns:
            PolygonResult; area is None for a polyline
        """
        if self._num < 2:
            return self._empty_result(self._num)
        if self._polyline:
            return PolygonResult(num=self._num, perimeter=self._perimetersum.sum())

        closing = solve_inverse(
            self._ellipsoid, self._lat1, self._lon1, self._lat0, self._lon0, _INVERSE_OUTPUTS,
        )
        perimeter = self._perimetersum.sum(closing.s12)
        tempsum = Accumulator(self._areasum)
        tempsum.add(closing.area)
        crossings = self._crossings + _transit(self._lon1, self._lon0)
        area = _reduce_accumulated(tempsum, self._area0, crossings, reverse, sign)
        return PolygonResult(num=self._num, perimeter=perimeter, area=area)

    def test_point(self, lat: float, lon: float, reverse: bool = False, sign: bool = True) -> PolygonResult:
        """Result of compute() if (lat, lon) were added, without adding it."""
        if self._num == 0:
            return self._empty_result(1)

        perimeter = self._perimetersum.sum()
        tempsum = 0.0 if self._polyline else self._areasum.sum()
        crossings = self._crossings
        num = self._num + 1

        legs = [(self._lat1, self._lon1, lat, lon)]
        if not self._polyline:
            legs.append((lat, lon, self._lat0, self._lon0))
        for lat_a, lon_a, lat_b, lon_b in legs:
            edge = solve_inverse(self._ellipsoid, lat_a, lon_a, lat_b, lon_b, _INVERSE_OUTPUTS)
            perimeter += edge.s12
            if not self._polyline:
                tempsum += edge.area
                crossings += _transit(lon_a, lon_b)

        if self._polyline:
            return PolygonResult(num=num, perimeter=perimeter)
        area = _reduce_area(tempsum, self._area0, crossings, reverse, sign)
        return PolygonResult(num=num, perimeter=perimeter, area=area)

    def test_edge(self, azi: float, s: float, reverse: bool = False, sign: bool = True) -> PolygonResult:
        """Result of compute() if the edge (azi, s) were added, without adding it.

        With no vertices the edge would be ignored, so this returns compute().
        """
        if self._num == 0:
            return self.compute(reverse, sign)

        num = self._num + 1
        perimeter = self._perimetersum.sum() + s
        if self._polyline:
            return PolygonResult(num=num, perimeter=perimeter)

        tempsum = self._areasum.sum()
        crossings = self._crossings
        step = solve_direct(self._ellipsoid, self._lat1, self._lon1, azi, s, _DIRECT_OUTPUTS)
        tempsum += step.area
        crossings += _transit_direct(self._lon1, step.lon2)
        closing = solve_inverse(
            self._ellipsoid, step.lat2, step.lon2, self._lat0, self._lon0, _INVERSE_OUTPUTS,
        )
        perimeter += closing.s12
        tempsum += closing.area
        crossings += _transit(step.lon2, self._lon0)
        area = _reduce_area(tempsum, self._area0, crossings, reverse, sign)
        return PolygonResult(num=num, perimeter=perimeter, area=area)

    def __repr__(self) -> str:
        kind = "polyline" if self._polyline else "polygon"
        return f"PolygonArea({kind}, num={self._num})"

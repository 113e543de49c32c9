"""
Tests for polygon perimeter and area accumulation.

Reference values are published GeographicLib planimeter results for WGS84.
"""

import math

import pytest

from ellipsoidal_geodesics import WGS84, GeoPoint, PolygonArea, geodesic_circle_points


def planimeter(points):
    poly = WGS84.polygon()
    poly.add_points(points)
    return poly.compute(reverse=False, sign=True)


def poly_length(points):
    line = WGS84.polygon(polyline=True)
    line.add_points(points)
    return line.compute(reverse=False, sign=True)


class TestPlanimeterReference:
    """Polygons with published perimeters and areas."""

    def test_north_polar_cap(self):
        res = planimeter([(89, 0), (89, 90), (89, 180), (89, 270)])
        assert res.perimeter == pytest.approx(631819.8745, abs=1e-4)
        assert res.area == pytest.approx(24952305678.0, abs=1)

    def test_south_polar_cap(self):
        res = planimeter([(-89, 0), (-89, 90), (-89, 180), (-89, 270)])
        assert res.perimeter == pytest.approx(631819.8745, abs=1e-4)
        assert res.area == pytest.approx(-24952305678.0, abs=1)

    def test_diamond_on_equator(self):
        res = planimeter([(0, -1), (-1, 0), (0, 1), (1, 0)])
        assert res.perimeter == pytest.approx(627598.2731, abs=1e-4)
        assert res.area == pytest.approx(24619419146.0, abs=1)

    def test_octant(self):
        res = planimeter([(90, 0), (0, 0), (0, 90)])
        assert res.perimeter == pytest.approx(30022685, abs=1)
        assert res.area == pytest.approx(63758202715511.0, abs=1)

    def test_octant_polyline(self):
        res = poly_length([(90, 0), (0, 0), (0, 90)])
        assert res.perimeter == pytest.approx(20020719, abs=1)
        assert res.area is None

    def test_cap_offset_from_prime_meridian(self):
        res = planimeter([(89, 0.1), (89, 90.1), (89, -179.9)])
        assert res.perimeter == pytest.approx(539297, abs=1)
        assert res.area == pytest.approx(12476152838.5, abs=1)

    @pytest.mark.parametrize("points", [
        [(9, -0.00000000000001), (9, 180), (9, 0)],
        [(9, 0.00000000000001), (9, 0), (9, 180)],
        [(9, 0.00000000000001), (9, 180), (9, 0)],
        [(9, -0.00000000000001), (9, 0), (9, 180)],
    ])
    def test_degenerate_through_pole(self, points):
        res = planimeter(points)
        assert res.area == pytest.approx(0, abs=1)
        assert res.perimeter == pytest.approx(36026861, abs=1)

    def test_unnormalized_longitudes(self):
        res = planimeter([(89, -360), (89, -240), (89, -120), (89, 0), (89, 120), (89, 240)])
        assert res.perimeter == pytest.approx(1160741, abs=1)
        assert res.area == pytest.approx(32415230256.0, abs=1)


class TestAreaConventions:
    """reverse and sign handling."""

    R = 18454562325.45119
    LAT = [2, 1, 3]
    LON = [1, 2, 3]

    @pytest.fixture
    def two_points(self):
        poly = WGS84.polygon()
        poly.add_point(self.LAT[0], self.LON[0])
        poly.add_point(self.LAT[1], self.LON[1])
        return poly

    def expected(self, reverse, sign):
        a0 = WGS84.area
        return {
            (False, True): self.R,
            (False, False): self.R,
            (True, True): -self.R,
            (True, False): a0 - self.R,
        }[(reverse, sign)]

    @pytest.mark.parametrize("reverse,sign", [(False, True), (False, False), (True, True), (True, False)])
    def test_point_preview(self, two_points, reverse, sign):
        res = two_points.test_point(self.LAT[2], self.LON[2], reverse, sign)
        assert res.num == 3
        assert res.area == pytest.approx(self.expected(reverse, sign), abs=0.5)

    @pytest.mark.parametrize("reverse,sign", [(False, True), (False, False), (True, True), (True, False)])
    def test_edge_preview(self, two_points, reverse, sign):
        inv = WGS84.inverse(self.LAT[1], self.LON[1], self.LAT[2], self.LON[2])
        res = two_points.test_edge(inv.azi1, inv.s12, reverse, sign)
        assert res.num == 3
        assert res.area == pytest.approx(self.expected(reverse, sign), abs=0.5)

    @pytest.mark.parametrize("reverse,sign", [(False, True), (False, False), (True, True), (True, False)])
    def test_compute(self, two_points, reverse, sign):
        two_points.add_point(self.LAT[2], self.LON[2])
        res = two_points.compute(reverse, sign)
        assert res.area == pytest.approx(self.expected(reverse, sign), abs=0.5)

    def test_previews_do_not_mutate(self, two_points):
        before = two_points.compute()
        two_points.test_point(self.LAT[2], self.LON[2])
        two_points.test_edge(45.0, 1e5)
        assert two_points.num == 2
        assert two_points.compute() == before

    def test_complement(self):
        """Unsigned areas of the two traversal senses add up to the ellipsoid."""
        poly = WGS84.polygon()
        poly.add_points([(10, 10), (10, 20), (20, 20), (20, 10)])
        ccw = poly.compute(reverse=False, sign=False)
        cw = poly.compute(reverse=True, sign=False)
        assert ccw.area + cw.area == pytest.approx(WGS84.area, abs=1)

    def test_clockwise_signed_area_negative(self):
        ccw = planimeter([(10, 10), (10, 20), (20, 20), (20, 10)])
        cw = planimeter([(20, 10), (20, 20), (10, 20), (10, 10)])
        assert ccw.area < 0 < cw.area or cw.area < 0 < ccw.area
        assert ccw.area == pytest.approx(-cw.area, abs=1e-3)


class TestPolygonEdges:
    """Polygons built from edges instead of vertices."""

    def test_edges_match_points(self):
        points = [(0, 0), (0, 1), (1, 1), (1, 0)]
        by_points = planimeter(points)

        poly = WGS84.polygon()
        poly.add_point(*points[0])
        for (lat1, lon1), (lat2, lon2) in zip(points, points[1:]):
            inv = WGS84.inverse(lat1, lon1, lat2, lon2)
            poly.add_edge(inv.azi1, inv.s12)
        by_edges = poly.compute()

        assert by_edges.num == 4
        assert by_edges.area == pytest.approx(by_points.area, abs=1e-2)
        assert by_edges.perimeter == pytest.approx(by_points.perimeter, abs=1e-6)

    def test_edges_around_pole(self):
        """Edges across the date line keep the prime meridian count right."""
        poly = WGS84.polygon()
        poly.add_point(89, 0)
        for lon in (90, 180, 270):
            current_lat, current_lon = poly.current_point
            inv = WGS84.inverse(current_lat, current_lon, 89, lon)
            poly.add_edge(inv.azi1, inv.s12)
        res = poly.compute()
        assert res.area == pytest.approx(24952305678.0, abs=1)

    def test_add_edge_on_empty_polygon_ignored(self):
        poly = WGS84.polygon()
        poly.add_edge(90, 1000)
        assert poly.num == 0
        assert poly.current_point is None

    def test_polyline_edges(self):
        line = WGS84.polygon(polyline=True)
        line.add_point(1, 1)
        assert line.test_edge(90, 1000).perimeter == pytest.approx(1000)
        assert line.test_point(2, 2).perimeter == pytest.approx(156876.149, abs=0.5e-3)


class TestPolygonDegenerate:
    """Empty and near-empty polygons."""

    def test_empty(self):
        poly = WGS84.polygon()
        res = poly.compute()
        assert res.num == 0
        assert res.perimeter == 0.0
        assert res.area == 0.0
        res = poly.test_point(1, 1)
        assert res.num == 1
        assert res.perimeter == 0.0
        assert res.area == 0.0

    def test_single_point(self):
        poly = WGS84.polygon()
        poly.add_point(1, 1)
        res = poly.compute()
        assert res.perimeter == 0.0
        assert res.area == 0.0

    def test_empty_polyline(self):
        line = WGS84.polygon(polyline=True)
        res = line.compute()
        assert res.perimeter == 0.0
        assert res.area is None

    def test_clear(self):
        poly = WGS84.polygon()
        poly.add_points([(0, 0), (0, 1), (1, 1)])
        poly.clear()
        assert poly.num == 0
        poly.add_points([(89, 0), (89, 90), (89, 180), (89, 270)])
        assert poly.compute().area == pytest.approx(24952305678.0, abs=1)

    def test_accepts_geopoints(self):
        res = planimeter([GeoPoint(89, 0), GeoPoint(89, 90), GeoPoint(89, 180), GeoPoint(89, 270)])
        assert res.area == pytest.approx(24952305678.0, abs=1)

    def test_properties(self):
        poly = PolygonArea(WGS84, polyline=True)
        assert poly.polyline
        assert poly.ellipsoid is WGS84
        poly.add_point(3, 4)
        assert poly.current_point == (3, 4)

    def test_figure_eight(self):
        """Lobes traversed in opposite senses cancel."""
        res = planimeter([(-1, 1), (1, -1), (1, 1), (-1, -1)])
        assert res.area == pytest.approx(0.0, abs=1)
        assert res.perimeter > 0

    def test_repeated_circuit(self):
        """Going round a triangle twice doubles its area."""
        triangle = [(10, 10), (20, 15), (10, 20)]
        once = planimeter(triangle)
        twice = planimeter(triangle * 2)
        assert twice.area == pytest.approx(2 * once.area, rel=1e-12)
        assert twice.perimeter == pytest.approx(2 * once.perimeter, rel=1e-12)


class TestPolygonStability:
    """Compensated summation over many edges."""

    def test_many_short_edges(self):
        points = [(0.0, i / 1000.0) for i in range(5001)]
        line = WGS84.polygon(polyline=True)
        line.add_points(points)
        res = line.compute()

        edges = [
            WGS84.inverse(lat1, lon1, lat2, lon2).s12
            for (lat1, lon1), (lat2, lon2) in zip(points, points[1:])
        ]
        assert res.num == 5001
        assert res.perimeter == pytest.approx(math.fsum(edges), abs=1e-9)
        assert res.perimeter == pytest.approx(WGS84.a * math.radians(5.0), abs=1e-6)

    def test_circle_area(self):
        """A fine regular polygon approaches the planar polygon area."""
        n, r = 64, 1000.0
        ring = geodesic_circle_points(WGS84, 45.0, 7.0, r, num_vertices=n, closed=False)
        res = planimeter(ring)
        expected = 0.5 * n * r * r * math.sin(2 * math.pi / n)
        # Vertices run clockwise
        assert res.area < 0
        assert -res.area == pytest.approx(expected, rel=1e-5)

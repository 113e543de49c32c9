"""Tests for geodesic circle polygon generation."""

import pytest

from ellipsoidal_geodesics import WGS84, Ellipsoid, geodesic_circle_points


class TestGeodesicCirclePoints:
    """Tests for geodesic_circle_points function."""

    def test_closed_ring(self):
        vertices = geodesic_circle_points(WGS84, 10.0, 20.0, 1000.0, num_vertices=36)

        # Should have 37 points (36 + 1 to close)
        assert len(vertices) == 37

        # First and last should be same
        assert vertices[0] == vertices[-1]

    def test_open_ring(self):
        vertices = geodesic_circle_points(WGS84, 10.0, 20.0, 1000.0, num_vertices=36, closed=False)
        assert len(vertices) == 36

    def test_vertices_at_radius(self):
        for lat, lon in geodesic_circle_points(WGS84, -35.0, 150.0, 250e3, num_vertices=12):
            assert WGS84.inverse(-35.0, 150.0, lat, lon).s12 == pytest.approx(250e3, abs=1e-6)

    def test_first_vertex_due_north(self):
        lat, lon = geodesic_circle_points(WGS84, 0.0, 0.0, 1e5, num_vertices=8)[0]
        assert lat > 0
        assert lon == pytest.approx(0.0, abs=1e-12)

    def test_minimum_vertices(self):
        """Fewer than 4 vertices are raised to 4."""
        vertices = geodesic_circle_points(WGS84, 0.0, 0.0, 1e5, num_vertices=2)
        assert len(vertices) == 5

    def test_longitudes_normalized(self):
        for _, lon in geodesic_circle_points(Ellipsoid(6.4e6, 0.0), 0.0, 179.9, 1e5, num_vertices=16):
            assert -180 < lon <= 180

"""
Tests for the GeoPoint class.
"""

import math

import pytest

from ellipsoidal_geodesics import GeoPoint


class TestGeoPointCreation:
    """Tests for GeoPoint creation and validation."""

    def test_create_basic_point(self):
        point = GeoPoint(lat=45.0, lon=-120.5)
        assert point.lat == 45.0
        assert point.lon == -120.5

    def test_coordinates_converted_to_float(self):
        point = GeoPoint(lat=10, lon=20)
        assert isinstance(point.lat, float)
        assert isinstance(point.lon, float)

    def test_latitude_out_of_range(self):
        with pytest.raises(ValueError):
            GeoPoint(lat=90.5, lon=0.0)

    def test_non_finite_coordinates(self):
        with pytest.raises(ValueError):
            GeoPoint(lat=math.nan, lon=0.0)
        with pytest.raises(ValueError):
            GeoPoint(lat=0.0, lon=math.inf)

    def test_unnormalized_longitude_allowed(self):
        point = GeoPoint(lat=0.0, lon=190.0)
        assert point.normalized_lon == pytest.approx(-170.0)

    def test_pole(self):
        assert GeoPoint(lat=-90.0, lon=0.0).is_pole
        assert not GeoPoint(lat=89.9, lon=0.0).is_pole


class TestGeoPointSerialization:
    """Tests for GeoPoint serialization."""

    def test_to_dict(self):
        assert GeoPoint(1.0, 2.0).to_dict() == {"lat": 1.0, "lon": 2.0}

    def test_round_trip(self):
        point = GeoPoint(-33.9, 151.2)
        assert GeoPoint.from_dict(point.to_dict()) == point

    @pytest.mark.parametrize("data", [
        {"latitude": 1.0, "longitude": 2.0},
        {"lat": 1.0, "lng": 2.0},
        {"lat": "1.0", "lon": "2.0"},
    ])
    def test_from_dict_aliases(self, data):
        assert GeoPoint.from_dict(data).as_tuple() == (1.0, 2.0)

    def test_from_dict_missing_field(self):
        with pytest.raises(KeyError):
            GeoPoint.from_dict({"lat": 1.0})

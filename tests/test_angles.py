"""
Tests for the angle helpers.
"""

import math

import pytest

from ellipsoidal_geodesics.core.geometry.angles import (
    ang_diff,
    ang_normalize,
    ang_round,
    atan2d,
    error_free_sum,
    lat_fix,
    polyval,
    remainder,
    reverse_azimuth,
    sincosd,
)


class TestNormalize:
    """Tests for reducing angles to (-180, 180]."""

    def test_minus_180_maps_to_180(self):
        assert ang_normalize(-180.0) == 180.0

    def test_full_turns_removed(self):
        assert ang_normalize(360.0) == 0.0
        assert ang_normalize(540.0) == 180.0
        assert ang_normalize(-190.0) == pytest.approx(170.0)
        assert ang_normalize(725.0) == pytest.approx(5.0)

    def test_remainder_range(self):
        """remainder lands in [-y/2, y/2)."""
        assert remainder(180.0, 360.0) == -180.0
        assert remainder(-180.0, 360.0) == -180.0
        assert remainder(170.0, 360.0) == 170.0

    def test_lat_fix(self):
        assert lat_fix(45.0) == 45.0
        assert math.isnan(lat_fix(90.5))

    def test_reverse_azimuth(self):
        assert reverse_azimuth(10.0) == pytest.approx(-170.0)
        assert reverse_azimuth(0.0) == 180.0


class TestTrig:
    """Tests for degree-based trigonometry."""

    @pytest.mark.parametrize("angle,expected", [
        (0.0, (0.0, 1.0)),
        (90.0, (1.0, 0.0)),
        (180.0, (0.0, -1.0)),
        (-90.0, (-1.0, 0.0)),
        (450.0, (1.0, 0.0)),
    ])
    def test_sincosd_exact_at_quadrants(self, angle, expected):
        assert sincosd(angle) == expected

    def test_sincosd_general(self):
        s, c = sincosd(30.0)
        assert s == pytest.approx(0.5, abs=1e-15)
        assert c == pytest.approx(math.sqrt(3) / 2, abs=1e-15)

    def test_atan2d_quadrants(self):
        assert atan2d(1.0, 0.0) == 90.0
        assert atan2d(0.0, -1.0) == 180.0
        assert atan2d(-1e-300, -1.0) == -180.0
        assert atan2d(-1.0, 0.0) == -90.0
        assert atan2d(1.0, 1.0) == pytest.approx(45.0)


class TestDifferences:
    """Tests for exact angle differences."""

    def test_ang_diff_wraps(self):
        d, e = ang_diff(179.0, -179.0)
        assert d + e == pytest.approx(2.0)

    def test_ang_diff_small(self):
        d, e = ang_diff(10.0, 10.5)
        assert d == 0.5
        assert e == 0.0

    def test_error_free_sum(self):
        s, t = error_free_sum(1.0, 1e-20)
        assert s == 1.0
        assert t == 1e-20

    def test_ang_round_tiny_values(self):
        """Values below 1/16 are snapped; larger ones are untouched."""
        assert ang_round(1e-30) == 0.0
        assert ang_round(-1e-30) == -0.0
        assert ang_round(0.5) == 0.5

    def test_polyval_horner(self):
        # 2 x^2 + 3 x + 4 at x = 2
        assert polyval(2, [2.0, 3.0, 4.0], 0, 2.0) == 18.0
        # offset into the table
        assert polyval(1, [9.0, 1.0, 5.0], 1, 3.0) == 8.0
        assert polyval(-1, [9.0], 0, 3.0) == 0.0

"""
Tests for the Ellipsoid model and SolverOptions.
"""

import math

import pytest

from ellipsoidal_geodesics import (
    WGS84,
    Ellipsoid,
    InvalidParameterError,
    SolverOptions,
)


class TestEllipsoidCreation:
    """Tests for Ellipsoid construction and validation."""

    def test_wgs84_parameters(self):
        assert WGS84.a == 6378137.0
        assert WGS84.f == pytest.approx(1 / 298.257223563)
        assert WGS84.b == pytest.approx(6356752.314245, abs=1e-6)

    def test_derived_constants(self):
        ell = Ellipsoid(6.4e6, 0.1)
        assert ell.f1 == pytest.approx(0.9)
        assert ell.e2 == pytest.approx(0.19)
        assert ell.ep2 == pytest.approx(0.19 / 0.81)
        assert ell.n == pytest.approx(0.1 / 1.9)
        assert ell.b == pytest.approx(5.76e6)

    def test_integer_radius_accepted(self):
        ell = Ellipsoid(6378137, 0)
        assert isinstance(ell.a, float)
        assert ell.is_sphere

    def test_prolate(self):
        ell = Ellipsoid(6.4e6, -1 / 150.0)
        assert ell.is_prolate
        assert ell.b > ell.a

    @pytest.mark.parametrize("a,f", [
        (0.0, 0.0),
        (-1.0, 0.0),
        (float("nan"), 0.0),
        (float("inf"), 0.0),
        (6.4e6, 1.0),
        (6.4e6, 1.5),
        (6.4e6, float("nan")),
    ])
    def test_invalid_parameters_raise(self, a, f):
        with pytest.raises(InvalidParameterError):
            Ellipsoid(a, f)

    def test_non_numeric_raises(self):
        with pytest.raises(InvalidParameterError):
            Ellipsoid("big", 0.0)

    def test_invalid_parameter_is_value_error(self):
        with pytest.raises(ValueError):
            Ellipsoid(-1.0, 0.0)

    def test_equality_ignores_options(self):
        other = Ellipsoid(6378137.0, 1 / 298.257223563, SolverOptions(max_newton_iterations=5))
        assert other == WGS84


class TestEllipsoidArea:
    """Tests for the total surface area."""

    def test_wgs84_area_matches_closed_form(self):
        """2 pi a^2 (1 + (1 - e^2) / e * atanh(e))."""
        e = math.sqrt(WGS84.e2)
        expected = 2 * math.pi * WGS84.a ** 2 * (1 + (1 - WGS84.e2) / e * math.atanh(e))
        assert WGS84.area == pytest.approx(expected, rel=1e-13)
        assert WGS84.area == pytest.approx(510065621724088.5, abs=1.0)

    def test_sphere_area(self):
        ell = Ellipsoid(6.4e6, 0.0)
        assert ell.area == pytest.approx(4 * math.pi * 6.4e6 ** 2, rel=1e-15)

    def test_prolate_area(self):
        """Prolate: 2 pi a^2 (1 + (1 - e^2) / e' * atan(e')) with e'^2 = -e^2."""
        ell = Ellipsoid(6.4e6, -1 / 150.0)
        e = math.sqrt(-ell.e2)
        expected = 2 * math.pi * ell.a ** 2 * (1 + (1 - ell.e2) / e * math.atan(e))
        assert ell.area == pytest.approx(expected, rel=1e-13)


class TestEllipsoidSerialization:
    """Tests for dictionary round trips."""

    def test_round_trip(self):
        ell = Ellipsoid(6.4e6, 0.01, SolverOptions(max_newton_iterations=10))
        restored = Ellipsoid.from_dict(ell.to_dict())
        assert restored == ell
        assert restored.options.max_newton_iterations == 10

    def test_from_dict_without_options(self):
        ell = Ellipsoid.from_dict({"a": 6.4e6, "f": 0.0})
        assert ell.options == SolverOptions()

    def test_repr(self):
        assert "6378137.0" in repr(WGS84)


class TestSolverOptions:
    """Tests for SolverOptions."""

    def test_defaults(self):
        options = SolverOptions.default()
        assert options.max_newton_iterations == 20
        assert options.max_bisection_iterations == 63
        assert options.max_iterations == 83

    def test_invalid_newton_budget(self):
        with pytest.raises(InvalidParameterError):
            SolverOptions(max_newton_iterations=0)

    def test_invalid_bisection_budget(self):
        with pytest.raises(InvalidParameterError):
            SolverOptions(max_bisection_iterations=-1)

    def test_round_trip(self):
        options = SolverOptions(max_newton_iterations=7, max_bisection_iterations=3)
        assert SolverOptions.from_dict(options.to_dict()) == options

    def test_from_empty_dict(self):
        assert SolverOptions.from_dict({}) == SolverOptions()

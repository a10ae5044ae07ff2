"""
Tests for the log-log Power Law regression.
"""
import math

import pytest

from curve_modeler.calculations.regression import fit_power_law
from curve_modeler.errors import CollinearInputError


class TestFitPowerLaw:
    """Tests for fit_power_law function."""

    def test_recovers_exact_power_law(self):
        """Points generated from P = 1000 * t^-0.1 give S=1000, E=0.9."""
        points = [(t, 1000 * t ** -0.1) for t in (60, 300, 1200, 3600)]

        params = fit_power_law(points)

        assert params.scale == pytest.approx(1000, rel=1e-9)
        assert params.exponent == pytest.approx(0.9, abs=1e-12)
        assert params.k == pytest.approx(-0.1, abs=1e-12)

    def test_cumulative_exponent_is_slope(self):
        """Distance data d = 5 * t^0.9: E is the slope itself."""
        points = [(t, 5 * t ** 0.9) for t in (300, 600, 900)]

        params = fit_power_law(points, cumulative=True)

        assert params.scale == pytest.approx(5, rel=1e-9)
        assert params.exponent == pytest.approx(0.9, abs=1e-12)

    def test_two_points_pass_exactly(self):
        """Two points fit exactly through both."""
        params = fit_power_law([(240, 397), (902, 348)])

        assert params.rate_at(240) == pytest.approx(397, rel=1e-9)
        assert params.rate_at(902) == pytest.approx(348, rel=1e-9)

    def test_no_rounding_applied(self):
        """Parameters keep full precision."""
        params = fit_power_law([(240, 397), (902, 348)])

        expected_slope = math.log(348 / 397) / math.log(902 / 240)
        assert params.exponent == pytest.approx(expected_slope + 1, abs=1e-12)

    def test_single_distinct_time_raises(self):
        """Same time repeated: denominator is zero."""
        with pytest.raises(CollinearInputError) as excinfo:
            fit_power_law([(300, 400), (300, 380)])

        assert abs(excinfo.value.denominator) < 1e-12

    def test_single_point_raises(self):
        with pytest.raises(CollinearInputError):
            fit_power_law([(300, 400)])

    def test_empty_input_raises(self):
        with pytest.raises(CollinearInputError):
            fit_power_law([])

    def test_collinear_error_is_value_error(self):
        """Callers catching ValueError also catch the regression failure."""
        with pytest.raises(ValueError):
            fit_power_law([(60, 500)])

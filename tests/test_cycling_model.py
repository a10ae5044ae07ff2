"""
Tests for the cycling power-duration fitter.

Tests cover:
- CP-W' closed form and round trip through the test points
- Input validation order and failure codes
- APR decay constant estimation and clamping
- Power Law points (optional long test)
- LT1 band
"""
import math

import pytest

from curve_modeler.calculations.cycling import (
    fit_cycling_model,
    fit_cp_w_prime,
    estimate_apr_decay,
    cycling_lt1_range,
)
from curve_modeler.constants import APR_K_DEFAULT, APR_K_MIN, APR_K_MAX
from curve_modeler.errors import FitError


class TestClosedForm:
    """Tests for fit_cp_w_prime and the fitted CP/W'."""

    def test_reference_athlete(self, cycling_model):
        """1110W Pmax, 397W@4min, 348W@15min02s."""
        assert cycling_model.valid
        assert cycling_model.cp == pytest.approx(330.24, abs=0.01)
        assert cycling_model.w_prime == pytest.approx(16023.44, abs=0.01)
        assert cycling_model.w_prime > 0
        assert cycling_model.apr.po3min < cycling_model.pmax

    @pytest.mark.parametrize("p1,t1,p2,t2", [
        (397, 240, 348, 902),
        (520, 120, 310, 1200),
        (450.5, 180, 449.5, 181),
        (300, 60, 200, 3600),
    ])
    def test_round_trip_through_both_points(self, p1, t1, p2, t2):
        """CP + W'/t reproduces both test powers."""
        cp, w_prime = fit_cp_w_prime(p1, t1, p2, t2)

        assert cp + w_prime / t1 == pytest.approx(p1, rel=1e-12)
        assert cp + w_prime / t2 == pytest.approx(p2, rel=1e-12)

    def test_po3min_is_hyperbolic_power_at_3min(self, cycling_model):
        expected = cycling_model.cp + cycling_model.w_prime / 180
        assert cycling_model.apr.po3min == pytest.approx(expected)
        assert cycling_model.apr.apr == pytest.approx(cycling_model.pmax - expected)
        assert cycling_model.vo2max_power == cycling_model.apr.po3min


class TestValidation:
    """Inconsistent inputs produce an invalid model with a failure code."""

    def test_swapped_powers(self, cycling_inputs):
        cycling_inputs['severe_power'], cycling_inputs['threshold_power'] = 348.0, 397.0

        model = fit_cycling_model(**cycling_inputs)

        assert not model.valid
        assert model.error == FitError.INCONSISTENT_POWER_ORDER

    def test_severe_power_below_threshold(self):
        """300W severe vs 350W threshold."""
        model = fit_cycling_model(1000, 300, 240, 350, 900)

        assert model.valid is False
        assert "power" in model.reason
        assert model.cp is None
        assert model.w_prime is None
        assert model.apr is None
        assert model.power_law is None
        assert model.lt1 is None

    def test_equal_powers(self, cycling_inputs):
        cycling_inputs['threshold_power'] = cycling_inputs['severe_power']

        model = fit_cycling_model(**cycling_inputs)

        assert model.error == FitError.INCONSISTENT_POWER_ORDER

    def test_swapped_times(self, cycling_inputs):
        cycling_inputs['severe_time'], cycling_inputs['threshold_time'] = 902.0, 240.0

        model = fit_cycling_model(**cycling_inputs)

        assert not model.valid
        assert model.error == FitError.INCONSISTENT_TIME_ORDER
        assert "time" in model.reason

    def test_power_order_checked_before_time_order(self, cycling_inputs):
        """Both swapped: power error wins."""
        cycling_inputs.update(severe_power=348.0, threshold_power=397.0,
                              severe_time=902.0, threshold_time=240.0)

        model = fit_cycling_model(**cycling_inputs)

        assert model.error == FitError.INCONSISTENT_POWER_ORDER

    def test_non_positive_time(self, cycling_inputs):
        cycling_inputs['severe_time'] = 0.0

        model = fit_cycling_model(**cycling_inputs)

        assert model.error == FitError.NON_POSITIVE_TIME

    @pytest.mark.parametrize("field", ["pmax_power", "severe_power", "severe_time", "threshold_power", "threshold_time"])
    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_non_finite_input(self, cycling_inputs, field, value):
        cycling_inputs[field] = value

        model = fit_cycling_model(**cycling_inputs)

        assert not model.valid
        assert model.error == FitError.NON_FINITE_INPUT
        assert model.cp is None

    def test_negative_cp(self):
        """400W@5min then 100W@10min: less work in the longer test."""
        model = fit_cycling_model(1000, 400, 300, 100, 600)

        assert model.error == FitError.NEGATIVE_MODEL_PARAMETERS

    def test_pmax_below_3min_power(self, cycling_inputs):
        cycling_inputs['pmax_power'] = 400.0

        model = fit_cycling_model(**cycling_inputs)

        assert model.error == FitError.PMAX_TOO_LOW
        assert model.pmax == 400.0

    def test_invalid_to_dict(self):
        model = fit_cycling_model(1000, 300, 240, 350, 900)

        result = model.to_dict()

        assert result == {
            "valid": False,
            "reason": FitError.INCONSISTENT_POWER_ORDER.message,
            "error": "inconsistent_power_order",
        }


class TestAPRDecay:
    """Tests for estimate_apr_decay function."""

    def test_default_without_short_test(self):
        assert estimate_apr_decay(420, 690, None, None) == APR_K_DEFAULT

    def test_recovers_decay_from_short_test(self):
        """A 30s effort on an exact k=0.03 curve gives back k=0.03."""
        short_power = 420 + 690 * math.exp(-0.03 * 30)

        k = estimate_apr_decay(420, 690, short_power, 30)

        assert k == pytest.approx(0.03, rel=1e-9)

    def test_clamped_high(self):
        """Barely above Po3min after 5s would need a huge k."""
        assert estimate_apr_decay(420, 690, 421, 5) == APR_K_MAX

    def test_clamped_low(self):
        """Almost Pmax after 10s would need a tiny k."""
        assert estimate_apr_decay(420, 690, 1100, 10) == APR_K_MIN

    def test_short_power_outside_reserve(self):
        """Short power at or above Pmax, or at Po3min, keeps the default."""
        assert estimate_apr_decay(420, 690, 1110, 10) == APR_K_DEFAULT
        assert estimate_apr_decay(420, 690, 420, 10) == APR_K_DEFAULT

    def test_short_test_used_by_fitter(self, cycling_inputs, cycling_model):
        po3min, apr = cycling_model.apr.po3min, cycling_model.apr.apr
        short_power = po3min + apr * math.exp(-0.035 * 20)

        model = fit_cycling_model(**cycling_inputs, short_power=short_power, short_time=20)

        assert model.apr.k == pytest.approx(0.035, rel=1e-9)
        assert cycling_model.apr.k == APR_K_DEFAULT


class TestPowerLawPoints:
    """Power Law regression inputs."""

    def test_passes_through_raw_test_points(self, cycling_model):
        pl = cycling_model.power_law
        assert pl.rate_at(240) == pytest.approx(397, rel=1e-9)
        assert pl.rate_at(902) == pytest.approx(348, rel=1e-9)
        assert 0.89 < pl.exponent < 0.91

    def test_long_test_added(self, cycling_inputs, cycling_model):
        """A lower, longer effort changes the fit."""
        model = fit_cycling_model(**cycling_inputs, long_power=300.0, long_time=3600.0)

        assert model.valid
        assert model.power_law.exponent != pytest.approx(cycling_model.power_law.exponent, abs=1e-6)

    def test_long_test_above_threshold_ignored(self, cycling_inputs, cycling_model):
        model = fit_cycling_model(**cycling_inputs, long_power=360.0, long_time=3600.0)

        assert model.power_law == cycling_model.power_law

    def test_long_test_shorter_than_threshold_ignored(self, cycling_inputs, cycling_model):
        model = fit_cycling_model(**cycling_inputs, long_power=300.0, long_time=600.0)

        assert model.power_law == cycling_model.power_law

    @pytest.mark.parametrize("long_power", [0.0, -50.0, math.nan])
    def test_long_test_without_positive_power_ignored(self, cycling_inputs, cycling_model, long_power):
        model = fit_cycling_model(**cycling_inputs, long_power=long_power, long_time=3600.0)

        assert model.valid
        assert model.power_law == cycling_model.power_law
        assert math.isfinite(model.power_law.rate_at(3600))

    def test_infinite_long_time_ignored(self, cycling_inputs, cycling_model):
        model = fit_cycling_model(**cycling_inputs, long_power=300.0, long_time=math.inf)

        assert model.power_law == cycling_model.power_law


class TestLT1:
    """Tests for cycling_lt1_range function."""

    def test_fractions_of_30min_power(self):
        """CP=300, W'=18000: P30 = 310W."""
        lt1 = cycling_lt1_range(300, 18000)

        assert lt1.min == pytest.approx(310 * 0.72)
        assert lt1.estimate == pytest.approx(310 * 0.75)
        assert lt1.max == pytest.approx(310 * 0.80)

    def test_model_lt1(self, cycling_model):
        assert cycling_model.lt1.estimate == pytest.approx(254.35, abs=0.05)
        assert cycling_model.lt1.min < cycling_model.lt1.estimate < cycling_model.lt1.max

    def test_to_dict(self, cycling_model):
        result = cycling_model.to_dict()

        assert result["valid"] is True
        assert result["cp"] == cycling_model.cp
        assert result["power_law"]["E"] == cycling_model.power_law.exponent
        assert set(result["lt1"]) == {"min", "max", "estimate"}

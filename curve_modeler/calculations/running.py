"""
SRP: Running speed-duration model fitting (Critical Speed / D' and Power Law).
"""
import logging
import math
from typing import Optional, Tuple

from ..constants import (
    MAP_DURATION,
    RUNNING_PL_DURATIONS,
    RUNNING_LONG_MIN_DURATION,
    HIGH_ENDURANCE_EXPONENT,
    LT1_CS_FRACTION_HIGH,
    LT1_CS_FRACTION_LOW,
    LT1_LOWER_SPEED_FRACTION,
)
from ..errors import FitError, CollinearInputError
from ..types import RunningModel, LT1Range
from .regression import fit_power_law

logger = logging.getLogger(__name__)


def fit_cs_d_prime(
    severe_distance: float,
    severe_time: float,
    threshold_distance: float,
    threshold_time: float
) -> Tuple[float, float]:
    """Exact CS [m/s] and D' [m] through two (time, distance) points."""
    cs = (threshold_distance - severe_distance) / (threshold_time - severe_time)
    d_prime = severe_distance - cs * severe_time
    return cs, d_prime


def running_lt1_range(cs: float, exponent: float) -> LT1Range:
    """Empirical LT1 pace band keyed on the endurance exponent E.

    E > 0.90 (high endurance): upper speed = 84% CS, otherwise 80% CS.
    Lower speed is 96% of the upper one. Returned as pace [s/km]:
    min is the faster pace, estimate the midpoint.
    """
    fraction = LT1_CS_FRACTION_HIGH if exponent > HIGH_ENDURANCE_EXPONENT else LT1_CS_FRACTION_LOW
    upper_speed = cs * fraction
    lower_speed = upper_speed * LT1_LOWER_SPEED_FRACTION

    fast_pace = 1000 / upper_speed
    slow_pace = 1000 / lower_speed
    return LT1Range(min=fast_pace, max=slow_pace, estimate=(fast_pace + slow_pace) / 2)


def fit_running_model(
    severe_distance: float,
    severe_time: float,
    threshold_distance: float,
    threshold_time: float,
    long_distance_km: Optional[float] = None,
    long_time: Optional[float] = None
) -> RunningModel:
    """Fit CS-D' and Power Law models from running test inputs.

    The Power Law is regressed on velocities synthesized from the CS-D'
    fit at 5/10/15 min, not on the raw test points. An optional long
    test longer than 20 min adds a measured point.

    Args:
        severe_distance: Short test distance [m]
        severe_time: Short test time [s]
        threshold_distance: Medium test distance [m]
        threshold_time: Medium test time [s]
        long_distance_km: Optional long test distance [km]
        long_time: Optional long test time [s]

    Returns:
        RunningModel; valid=False with a reason when inputs are inconsistent
    """
    if not all(math.isfinite(v) for v in (severe_distance, severe_time, threshold_distance, threshold_time)):
        return _invalid(FitError.NON_FINITE_INPUT, severe_distance, severe_time, threshold_distance, threshold_time)

    if severe_time <= 0 or threshold_time <= 0:
        return _invalid(FitError.NON_POSITIVE_TIME, severe_time, threshold_time)

    if severe_time >= threshold_time:
        return _invalid(FitError.INCONSISTENT_TIME_ORDER, severe_time, threshold_time)

    if severe_distance >= threshold_distance:
        return _invalid(FitError.INCONSISTENT_DISTANCE_ORDER, severe_distance, threshold_distance)

    cs, d_prime = fit_cs_d_prime(severe_distance, severe_time, threshold_distance, threshold_time)
    if cs <= 0 or d_prime <= 0:
        return _invalid(FitError.NEGATIVE_MODEL_PARAMETERS, cs, d_prime)

    pl_points = [(t, (cs * t + d_prime) / t) for t in RUNNING_PL_DURATIONS]
    if long_distance_km is not None and long_time is not None:
        if RUNNING_LONG_MIN_DURATION < long_time < math.inf and 0 < long_distance_km < math.inf:
            pl_points.append((long_time, long_distance_km * 1000 / long_time))

    try:
        power_law = fit_power_law(pl_points)
    except CollinearInputError as e:
        logger.warning(f"Power Law fit failed: {e}")
        return RunningModel.invalid(FitError.COLLINEAR_INPUT)

    model = RunningModel(
        valid=True,
        cs=cs,
        d_prime=d_prime,
        power_law=power_law,
        lt1=running_lt1_range(cs, power_law.exponent),
        cs_pace=1000 / cs,
        vo2max_pace=MAP_DURATION * 1000 / (cs * MAP_DURATION + d_prime),
    )

    logger.debug(
        f"Running fit: CS={cs:.4f}m/s, D'={d_prime:.1f}m, "
        f"A={power_law.scale:.4f}, E={power_law.exponent:.6f}"
    )
    return model


def _invalid(error: FitError, *values) -> RunningModel:
    logger.warning(f"Running fit rejected ({error.value}): {values}")
    return RunningModel.invalid(error)

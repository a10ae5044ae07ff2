"""
SRP: Cycling power-duration model fitting.

Fits three complementary models from field-test points:
- CP-W' (hyperbolic): P(t) = CP + W'/t, closed form from two tests
- APR (exponential): P(t) = Po3min + APR * exp(-k*t), short durations
- Power Law: P(t) = S * t^(E-1), long durations
"""
import logging
import math
from typing import Optional, Tuple

from ..constants import (
    APR_MAX_DURATION,
    APR_K_DEFAULT,
    APR_K_MIN,
    APR_K_MAX,
    LT1_REFERENCE_DURATION,
    LT1_MIN_FRACTION,
    LT1_ESTIMATE_FRACTION,
    LT1_MAX_FRACTION,
)
from ..errors import FitError, CollinearInputError
from ..types import CyclingModel, APRParams, LT1Range
from .regression import fit_power_law

logger = logging.getLogger(__name__)


def fit_cp_w_prime(
    severe_power: float,
    severe_time: float,
    threshold_power: float,
    threshold_time: float
) -> Tuple[float, float]:
    """Exact CP and W' through two (time, power) points.

    Returns:
        Tuple (cp [W], w_prime [J])
    """
    w_prime = (severe_power - threshold_power) * severe_time * threshold_time / (threshold_time - severe_time)
    cp = severe_power - w_prime / severe_time
    return cp, w_prime


def estimate_apr_decay(
    po3min: float,
    apr: float,
    short_power: Optional[float],
    short_time: Optional[float]
) -> float:
    """Decay constant k of the APR model.

    Defaults to APR_K_DEFAULT. A short test whose power sits strictly
    between Po3min and Pmax re-estimates k, clamped to [APR_K_MIN, APR_K_MAX].
    """
    if short_power is None or short_time is None or short_time <= 0:
        return APR_K_DEFAULT
    if short_power <= po3min or apr <= 0:
        return APR_K_DEFAULT

    ratio = (short_power - po3min) / apr
    if not 0 < ratio < 1:
        return APR_K_DEFAULT

    k = -math.log(ratio) / short_time
    return max(APR_K_MIN, min(k, APR_K_MAX))


def cycling_lt1_range(cp: float, w_prime: float) -> LT1Range:
    """LT1 band as fixed fractions (72/75/80%) of the 30-minute power."""
    p30min = cp + w_prime / LT1_REFERENCE_DURATION
    return LT1Range(
        min=p30min * LT1_MIN_FRACTION,
        max=p30min * LT1_MAX_FRACTION,
        estimate=p30min * LT1_ESTIMATE_FRACTION,
    )


def fit_cycling_model(
    pmax_power: float,
    severe_power: float,
    severe_time: float,
    threshold_power: float,
    threshold_time: float,
    short_power: Optional[float] = None,
    short_time: Optional[float] = None,
    long_power: Optional[float] = None,
    long_time: Optional[float] = None
) -> CyclingModel:
    """Fit CP-W', APR and Power Law models from cycling test inputs.

    Validation runs in order and the first failure wins:
    power order, time order, positive times, positive CP/W',
    Pmax above the 3-minute power, non-degenerate regression.

    Args:
        pmax_power: Instantaneous maximal power [W]
        severe_power: Severe (short) test mean power [W]
        severe_time: Severe test duration [s]
        threshold_power: Threshold (medium) test mean power [W]
        threshold_time: Threshold test duration [s]
        short_power: Optional very-short test power [W], refines APR k
        short_time: Optional very-short test duration [s]
        long_power: Optional long test power [W], extra Power Law point
        long_time: Optional long test duration [s]

    Returns:
        CyclingModel; valid=False with a reason when inputs are inconsistent
    """
    if not all(math.isfinite(v) for v in (pmax_power, severe_power, severe_time, threshold_power, threshold_time)):
        return _invalid(FitError.NON_FINITE_INPUT, pmax_power, severe_power, severe_time, threshold_power, threshold_time)

    if severe_power <= threshold_power:
        return _invalid(FitError.INCONSISTENT_POWER_ORDER, pmax_power, severe_power, threshold_power)

    if severe_time >= threshold_time:
        return _invalid(FitError.INCONSISTENT_TIME_ORDER, pmax_power, severe_time, threshold_time)

    if severe_time <= 0:
        return _invalid(FitError.NON_POSITIVE_TIME, pmax_power, severe_time, threshold_time)

    cp, w_prime = fit_cp_w_prime(severe_power, severe_time, threshold_power, threshold_time)
    if cp <= 0 or w_prime <= 0:
        return _invalid(FitError.NEGATIVE_MODEL_PARAMETERS, pmax_power, cp, w_prime)

    po3min = cp + w_prime / APR_MAX_DURATION
    if pmax_power <= po3min:
        return _invalid(FitError.PMAX_TOO_LOW, pmax_power, pmax_power, po3min)

    apr = pmax_power - po3min
    k = estimate_apr_decay(po3min, apr, short_power, short_time)

    # Raw test points; the long test only counts if it extends the curve downwards
    pl_points = [(severe_time, severe_power), (threshold_time, threshold_power)]
    if long_power is not None and long_time is not None:
        if 0 < long_power < threshold_power and threshold_time < long_time < math.inf:
            pl_points.append((long_time, long_power))

    try:
        power_law = fit_power_law(pl_points)
    except CollinearInputError as e:
        logger.warning(f"Power Law fit failed: {e}")
        return CyclingModel.invalid(FitError.COLLINEAR_INPUT, pmax_power)

    model = CyclingModel(
        valid=True,
        pmax=pmax_power,
        cp=cp,
        w_prime=w_prime,
        apr=APRParams(po3min=po3min, apr=apr, k=k),
        power_law=power_law,
        lt1=cycling_lt1_range(cp, w_prime),
    )

    logger.debug(
        f"Cycling fit: CP={cp:.1f}W, W'={w_prime:.0f}J, Po3min={po3min:.1f}W, "
        f"k={k:.4f}, S={power_law.scale:.2f}, E={power_law.exponent:.6f}"
    )
    return model


def _invalid(error: FitError, pmax_power: float, *values) -> CyclingModel:
    logger.warning(f"Cycling fit rejected ({error.value}): {values}")
    return CyclingModel.invalid(error, pmax_power)

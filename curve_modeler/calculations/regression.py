"""
SRP: Log-log least-squares regression for the Power Law model.
"""
from typing import Iterable, Tuple

import numpy as np

from ..constants import REGRESSION_DENOMINATOR_EPS
from ..errors import CollinearInputError
from ..types import PowerLawParams


def fit_power_law(
    points: Iterable[Tuple[float, float]],
    cumulative: bool = False
) -> PowerLawParams:
    """Fit a Power Law by ordinary least squares on (ln t, ln v).

    Rate data (power or speed vs time) follow v = S * t^(E-1), so
    E = slope + 1. Cumulative data (distance vs time) follow
    d = S * t^E, so E = slope.

    No rounding is applied; display layers round.

    Args:
        points: (time [s], value) pairs, time and value > 0
        cumulative: True when value is distance covered rather than a rate

    Returns:
        PowerLawParams with scale S = exp(intercept) and exponent E

    Raises:
        CollinearInputError: If n*sum(x^2) - sum(x)^2 is numerically zero
            (fewer than two distinct times)
    """
    data = np.asarray(list(points), dtype=float)
    if data.size == 0:
        raise CollinearInputError(0.0)

    x = np.log(data[:, 0])
    y = np.log(data[:, 1])
    n = len(x)

    sx = x.sum()
    sy = y.sum()
    sxy = (x * y).sum()
    sx2 = (x * x).sum()

    denominator = n * sx2 - sx * sx
    if abs(denominator) < REGRESSION_DENOMINATOR_EPS:
        raise CollinearInputError(float(denominator))

    slope = (n * sxy - sx * sy) / denominator
    intercept = (sy - slope * sx) / n

    exponent = slope if cumulative else slope + 1
    return PowerLawParams(scale=float(np.exp(intercept)), exponent=float(exponent))

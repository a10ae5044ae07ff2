"""
SRP: Model selection and evaluation - the single source of truth for
which fitted model governs a duration or distance.

Cycling duration bands:
- t <= 3 min: APR (t == 1s returns Pmax)
- 3 min < t <= 16 min: CP-W'
- t > 16 min: Power Law
- 2-3 min transition zone: APR and CP-W' both computed, lower wins

Running distance bands:
- estimated CS-D' time in (0, 17 min): CS-D'
- otherwise: Power Law
"""
import logging
import math

from ..constants import (
    APR_MAX_DURATION,
    TRANSITION_ZONE_START,
    CP_MAX_DURATION,
    CS_MAX_DURATION,
    PMAX_DURATION,
    BISECTION_POWER_TOLERANCE,
    BISECTION_TIME_TOLERANCE,
    BISECTION_MAX_ITERATIONS,
)
from ..types import (
    CyclingModel,
    RunningModel,
    ModelKind,
    DualPrediction,
    Evaluation,
    Solution,
    RunningEvaluation,
    RunningSolution,
)

logger = logging.getLogger(__name__)

NAN = float("nan")


# ============================================================
# Cycling: single-model evaluators
# ============================================================

def apr_power(model: CyclingModel, t: float) -> float:
    """APR model power; the exponential form is replaced by Pmax at 1s."""
    if t == PMAX_DURATION:
        return model.pmax
    return model.apr.power_at(t)


def cp_w_power(model: CyclingModel, t: float) -> float:
    """CP-W' model power: CP + W'/t."""
    return model.cp + model.w_prime / t


def power_law_power(model: CyclingModel, t: float) -> float:
    """Power Law power: S * t^(E-1)."""
    return model.power_law.rate_at(t)


def _dual(apr_value: float, cp_w_value: float) -> DualPrediction:
    diff = abs(apr_value - cp_w_value)
    return DualPrediction(
        apr_value=apr_value,
        cp_w_value=cp_w_value,
        diff=diff,
        diff_pct=diff / max(apr_value, cp_w_value) * 100,
    )


# ============================================================
# Cycling: forward query (duration -> power)
# ============================================================

def evaluate_at_duration(model: CyclingModel, t: float) -> Evaluation:
    """Power sustainable for a duration, using the governing model.

    Inside the 120-180s transition zone both APR and CP-W' are reported
    and the lower (more conservative) value is the primary result.

    Args:
        model: Fitted cycling model
        t: Duration [s]

    Returns:
        Evaluation; value is NaN with ModelKind.NONE for invalid models
        or non-positive durations
    """
    if not model.valid or not t > 0 or not math.isfinite(t):
        return Evaluation(duration=t, value=NAN, model=ModelKind.NONE)

    if TRANSITION_ZONE_START <= t <= APR_MAX_DURATION:
        dual = _dual(apr_power(model, t), cp_w_power(model, t))
        value = min(dual.apr_value, dual.cp_w_value)
        return Evaluation(duration=t, value=value, model=dual.primary_model, dual=dual)

    if t <= APR_MAX_DURATION:
        return Evaluation(duration=t, value=apr_power(model, t), model=ModelKind.APR)

    if t <= CP_MAX_DURATION:
        return Evaluation(duration=t, value=cp_w_power(model, t), model=ModelKind.CP_W)

    return Evaluation(duration=t, value=power_law_power(model, t), model=ModelKind.POWER_LAW)


# ============================================================
# Cycling: inverse query (power -> duration)
# ============================================================

def solve_apr_time(model: CyclingModel, target_power: float) -> float:
    """Duration at which the APR model reaches target_power, by bisection.

    Returns NaN when target_power is outside [P(180s), Pmax].
    """
    max_power = model.pmax
    min_power = apr_power(model, APR_MAX_DURATION)

    if target_power > max_power or target_power < min_power:
        return NAN

    if abs(target_power - max_power) < BISECTION_POWER_TOLERANCE:
        return float(PMAX_DURATION)

    lo, hi = float(PMAX_DURATION), float(APR_MAX_DURATION)
    iterations = 0
    while hi - lo > BISECTION_TIME_TOLERANCE and iterations < BISECTION_MAX_ITERATIONS:
        mid = (lo + hi) / 2
        mid_power = apr_power(model, mid)

        if abs(mid_power - target_power) < BISECTION_POWER_TOLERANCE:
            return mid

        # Power decreases with time
        if mid_power > target_power:
            lo = mid
        else:
            hi = mid
        iterations += 1

    return (lo + hi) / 2


def solve_cp_w_time(model: CyclingModel, target_power: float) -> float:
    """t = W' / (P - CP); NaN at or below CP."""
    if target_power <= model.cp:
        return NAN
    return model.w_prime / (target_power - model.cp)


def solve_power_law_time(model: CyclingModel, target_power: float) -> float:
    """t = (P/S)^(1/(E-1)); NaN when the exponent is degenerate."""
    e_minus_1 = model.power_law.exponent - 1
    if e_minus_1 == 0 or target_power <= 0:
        return NAN
    try:
        return (target_power / model.power_law.scale) ** (1 / e_minus_1)
    except OverflowError:
        return NAN


def solve_for_duration(model: CyclingModel, target_power: float) -> Solution:
    """Duration sustainable at a target power.

    Precedence: APR if its solution lies in [1, 180]; CP-W' if in
    (180, 960]; CP-W' as fallback if <= 180; otherwise Power Law.
    When both APR and CP-W' land in [120, 180] both are reported and
    the shorter time is primary.

    Returns:
        Solution; Solution.no_solution() when no model yields a positive time
    """
    if not model.valid or not target_power > 0 or not math.isfinite(target_power):
        return Solution.no_solution(target_power)

    apr_time = solve_apr_time(model, target_power)
    cp_w_time = solve_cp_w_time(model, target_power)

    apr_in_zone = not math.isnan(apr_time) and TRANSITION_ZONE_START <= apr_time <= APR_MAX_DURATION
    cp_w_in_zone = not math.isnan(cp_w_time) and TRANSITION_ZONE_START <= cp_w_time <= APR_MAX_DURATION

    if apr_in_zone and cp_w_in_zone:
        dual = _dual(apr_time, cp_w_time)
        return Solution(
            target=target_power,
            time=min(apr_time, cp_w_time),
            model=dual.primary_model,
            dual=dual,
        )

    if not math.isnan(apr_time) and PMAX_DURATION <= apr_time <= APR_MAX_DURATION:
        time, kind = apr_time, ModelKind.APR
    elif not math.isnan(cp_w_time) and APR_MAX_DURATION < cp_w_time <= CP_MAX_DURATION:
        time, kind = cp_w_time, ModelKind.CP_W
    elif not math.isnan(cp_w_time) and cp_w_time <= APR_MAX_DURATION:
        time, kind = cp_w_time, ModelKind.CP_W
    else:
        time, kind = solve_power_law_time(model, target_power), ModelKind.POWER_LAW

    if math.isnan(time) or time <= 0 or math.isinf(time):
        logger.debug(f"No duration solution for {target_power}W")
        return Solution.no_solution(target_power)

    return Solution(target=target_power, time=time, model=kind)


# ============================================================
# Running: time <-> distance
# ============================================================

def evaluate_running_at_duration(model: RunningModel, t: float) -> RunningEvaluation:
    """Distance coverable in t seconds.

    t < 17 min: d = CS*t + D'. Otherwise d = A * t^E.
    """
    if not model.valid or not t > 0 or not math.isfinite(t):
        return RunningEvaluation(duration=t, distance=NAN, speed=NAN, pace=NAN, model=ModelKind.NONE)

    if t < CS_MAX_DURATION:
        distance = model.cs * t + model.d_prime
        kind = ModelKind.CS_D
    else:
        distance = model.power_law.scale * t ** model.power_law.exponent
        kind = ModelKind.POWER_LAW

    return RunningEvaluation(
        duration=t,
        distance=distance,
        speed=distance / t,
        pace=t * 1000 / distance,
        model=kind,
    )


def running_speed_at(model: RunningModel, t: float) -> float:
    """Sustainable speed [m/s] for a duration."""
    return evaluate_running_at_duration(model, t).speed


def solve_running_for_distance(model: RunningModel, distance: float) -> RunningSolution:
    """Time needed to cover a distance.

    The CS-D' estimate (d - D')/CS picks the model: inside (0, 17 min)
    it is the answer, otherwise t = (d/A)^(1/E).
    """
    if not model.valid or not distance > 0 or not math.isfinite(distance):
        return RunningSolution(distance=distance, time=NAN, pace=NAN, model=ModelKind.NONE)

    estimated = (distance - model.d_prime) / model.cs
    if 0 < estimated < CS_MAX_DURATION:
        time, kind = estimated, ModelKind.CS_D
    else:
        exponent = model.power_law.exponent
        if exponent <= 0:
            return RunningSolution(distance=distance, time=NAN, pace=NAN, model=ModelKind.NONE)
        time = (distance / model.power_law.scale) ** (1 / exponent)
        kind = ModelKind.POWER_LAW

    return RunningSolution(distance=distance, time=time, pace=time * 1000 / distance, model=kind)


def race_pace(model: RunningModel, distance: float) -> float:
    """Predicted race pace [s/km] over a distance."""
    return solve_running_for_distance(model, distance).pace

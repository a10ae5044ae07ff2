"""
Curve Sampling & Sustainable Tables Module.

Provides functions for:
- Sampling the cycling power-duration curve on the chart's time grid
- Sampling the running pace-duration curve (CS-D' and Power Law)
- Sustainable power / race time tables at standard durations and distances
- Tabulating training zones

Every value is taken from the model selector; nothing here re-implements
the duration or distance boundaries.
"""
from typing import List, Optional, Union
import logging

import numpy as np
import pandas as pd

from .config import Config
from .constants import (
    APR_MAX_DURATION,
    CP_CURVE_MIN_DURATION,
    CP_CURVE_MAX_DURATION,
    SUSTAINABLE_POWER_DURATIONS,
    SUSTAINABLE_RUNNING_DISTANCES,
)
from .types import CyclingModel, RunningModel, PowerZone, PaceZone
from .calculations.selector import (
    evaluate_at_duration,
    evaluate_running_at_duration,
    solve_running_for_distance,
)

logger = logging.getLogger(__name__)


# ============================================================
# Grids
# ============================================================

def cycling_duration_grid(max_duration: Optional[int] = None) -> np.ndarray:
    """1s steps to 3 min, 30s steps to 20 min, 3 min steps beyond."""
    if max_duration is None:
        max_duration = Config.CHART_MAX_DURATION_S
    grid = np.concatenate([
        np.arange(1, 181, 1),
        np.arange(210, 1201, 30),
        np.arange(1380, max_duration + 1, 180),
    ])
    return grid[grid <= max_duration]


# ============================================================
# Cycling
# ============================================================

def sample_power_curve(model: CyclingModel, max_duration: Optional[int] = None) -> pd.DataFrame:
    """Sample every model and the selected curve on the chart grid.

    Args:
        model: Fitted cycling model
        max_duration: Last sampled duration [s] (default: Config.CHART_MAX_DURATION_S)

    Returns:
        DataFrame with columns duration_s, apr, cp_w, power_law, selected, model.
        Individual model columns are NaN outside the range they are drawn over.
        Empty DataFrame for invalid models.
    """
    if not model.valid:
        logger.debug("Skipping curve sampling for invalid model")
        return pd.DataFrame()

    t = cycling_duration_grid(max_duration).astype(float)

    apr = model.apr.po3min + model.apr.apr * np.exp(-model.apr.k * t)
    apr[t == 1] = model.pmax
    cp_w = model.cp + model.w_prime / t
    power_law = model.power_law.scale * np.power(t, model.power_law.exponent - 1)

    evaluations = [evaluate_at_duration(model, d) for d in t]

    return pd.DataFrame({
        "duration_s": t.astype(int),
        "apr": np.where(t <= APR_MAX_DURATION, apr, np.nan),
        "cp_w": np.where((t >= CP_CURVE_MIN_DURATION) & (t <= CP_CURVE_MAX_DURATION), cp_w, np.nan),
        "power_law": np.where(t >= APR_MAX_DURATION, power_law, np.nan),
        "selected": [e.value for e in evaluations],
        "model": [e.model.value for e in evaluations],
    })


def sustainable_power_table(model: CyclingModel, body_weight: Optional[float] = None) -> pd.DataFrame:
    """Sustainable power at standard durations (5s to 60min)."""
    if not model.valid:
        return pd.DataFrame(columns=["label", "duration_s", "power_w", "power_wkg", "model"])

    rows = []
    for label, duration in SUSTAINABLE_POWER_DURATIONS:
        evaluation = evaluate_at_duration(model, duration)
        rows.append({
            "label": label,
            "duration_s": duration,
            "power_w": evaluation.value,
            "power_wkg": evaluation.value / body_weight if body_weight and body_weight > 0 else np.nan,
            "model": evaluation.model.value,
        })
    return pd.DataFrame(rows)


# ============================================================
# Running
# ============================================================

def sample_speed_curve(model: RunningModel, max_duration: Optional[int] = None) -> pd.DataFrame:
    """Sample CS-D' and Power Law paces [s/km].

    CS-D' is drawn from 150s to 60min in 10s steps, Power Law from 3min
    to max_duration in 60s steps. The frames are merged on duration_s
    and the selected pace is added for every row.

    Returns:
        DataFrame with columns duration_s, cs_pace, power_law_pace,
        selected_pace, model. Empty DataFrame for invalid models.
    """
    if not model.valid:
        logger.debug("Skipping curve sampling for invalid model")
        return pd.DataFrame()

    if max_duration is None:
        max_duration = Config.RUNNING_CHART_MAX_DURATION_S

    t_cs = np.arange(150, 3601, 10).astype(float)
    cs_frame = pd.DataFrame({
        "duration_s": t_cs.astype(int),
        "cs_pace": t_cs * 1000 / (model.cs * t_cs + model.d_prime),
    })

    t_pl = np.arange(180, max_duration + 1, 60).astype(float)
    pl_speed = model.power_law.scale * np.power(t_pl, model.power_law.exponent - 1)
    pl_frame = pd.DataFrame({
        "duration_s": t_pl.astype(int),
        "power_law_pace": 1000 / pl_speed,
    })

    curve = pd.merge(cs_frame, pl_frame, on="duration_s", how="outer").sort_values("duration_s")
    curve = curve.reset_index(drop=True)

    evaluations = [evaluate_running_at_duration(model, float(d)) for d in curve["duration_s"]]
    curve["selected_pace"] = [e.pace for e in evaluations]
    curve["model"] = [e.model.value for e in evaluations]
    return curve


def sustainable_running_table(model: RunningModel) -> pd.DataFrame:
    """Predicted time and pace at standard race distances (1500m to 50km)."""
    if not model.valid:
        return pd.DataFrame(columns=["label", "distance_m", "time_s", "pace_s_per_km", "model"])

    rows = []
    for label, distance in SUSTAINABLE_RUNNING_DISTANCES:
        solution = solve_running_for_distance(model, distance)
        rows.append({
            "label": label,
            "distance_m": distance,
            "time_s": solution.time,
            "pace_s_per_km": solution.pace,
            "model": solution.model.value,
        })
    return pd.DataFrame(rows)


# ============================================================
# Zones
# ============================================================

def zones_table(zones: Optional[List[Union[PowerZone, PaceZone]]]) -> pd.DataFrame:
    """One row per zone; pace zones gain slow/fast pace columns."""
    if not zones:
        return pd.DataFrame()

    rows = []
    for z in zones:
        row = {"zone": z.zone, "name": z.name, "domain": z.domain.value, "rpe": z.rpe}
        if isinstance(z, PowerZone):
            row.update({
                "lower_w": z.lower,
                "upper_w": z.upper,
                "lower_wkg": z.lower_wkg,
                "upper_wkg": z.upper_wkg,
            })
        else:
            row.update({
                "lower_kmh": z.lower_speed,
                "upper_kmh": z.upper_speed,
                "slow_pace": z.slow_pace,
                "fast_pace": z.fast_pace,
            })
        rows.append(row)
    return pd.DataFrame(rows)

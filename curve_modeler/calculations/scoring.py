"""
SRP: Athlete-card scoring - stat scores, overall rating, profile type, rarity tier.
"""
import logging
import math
from typing import Dict, Optional, Union

import numpy as np
from scipy import stats

from ..config import Config
from ..constants import (
    SCORE_MULTIPLIER,
    SPECIALIZATION_Z_THRESHOLD,
    CLIMBER_MAX_BODY_WEIGHT,
    RARITY_THRESHOLDS,
    CYCLING_STAT_DURATIONS,
    CYCLING_BENCHMARKS,
    RUNNING_STAT_DISTANCES,
    RUNNING_BENCHMARKS,
)
from ..types import (
    CyclingModel,
    RunningModel,
    Sex,
    AthleteProfile,
    CyclingProfileType,
    RunningProfileType,
    RarityTier,
)
from .selector import evaluate_at_duration, solve_running_for_distance

logger = logging.getLogger(__name__)

RUNNING_PROFILE_BY_STAT = {
    "1500m": RunningProfileType.FAST_MIDDLE_DISTANCE,
    "5000m": RunningProfileType.MIDDLE_DISTANCE,
    "10km": RunningProfileType.LONG_DISTANCE,
    "Half": RunningProfileType.HALF_MARATHON_SPECIALIST,
    "Marathon": RunningProfileType.MARATHONER,
}


def round_half_up(value: float) -> int:
    """Round .5 upwards (not to even)."""
    return int(math.floor(value + 0.5))


# ============================================================
# Performance values
# ============================================================

def athlete_watt_per_kg(model: CyclingModel, body_weight: float) -> Dict[str, float]:
    """W/kg at the five card durations, each from its governing model."""
    return {
        stat: evaluate_at_duration(model, duration).value / body_weight
        for stat, duration in CYCLING_STAT_DURATIONS.items()
    }


def athlete_running_times(model: RunningModel) -> Dict[str, float]:
    """Predicted race time [s] at the five card distances."""
    return {
        stat: solve_running_for_distance(model, distance).time
        for stat, distance in RUNNING_STAT_DISTANCES.items()
    }


# ============================================================
# Scores
# ============================================================

def cycling_scores(watt_per_kg: Dict[str, float], sex: Union[Sex, str]) -> Dict[str, int]:
    """score = round(W/kg / benchmark * 95); higher W/kg scores higher."""
    benchmarks = CYCLING_BENCHMARKS[Sex(sex).value]
    return {
        stat: round_half_up(value / benchmarks[stat] * SCORE_MULTIPLIER)
        for stat, value in watt_per_kg.items()
    }


def running_scores(times: Dict[str, float], sex: Union[Sex, str]) -> Dict[str, int]:
    """score = round(benchmark / time * 95); shorter times score higher."""
    benchmarks = RUNNING_BENCHMARKS[Sex(sex).value]
    return {
        stat: round_half_up(benchmarks[stat] / time * SCORE_MULTIPLIER)
        for stat, time in times.items()
    }


def overall_rating(scores: Dict[str, int]) -> int:
    return round_half_up(sum(scores.values()) / len(scores))


def rarity_tier(rating: int) -> RarityTier:
    for name, minimum in RARITY_THRESHOLDS:
        if rating >= minimum:
            return RarityTier(name)
    return RarityTier.STANDARD


# ============================================================
# Profile classification
# ============================================================

def peak_specialty(scores: Dict[str, int]) -> Optional[str]:
    """Stat that stands out from the athlete's own other stats.

    Z-scores use the population standard deviation. Returns the stat with
    the highest Z-score when it exceeds SPECIALIZATION_Z_THRESHOLD, else
    None (generalist). Identical scores have no peak.
    """
    labels = list(scores.keys())
    values = np.array([scores[label] for label in labels], dtype=float)

    if np.std(values) == 0:
        return None

    z = stats.zscore(values, ddof=0)
    peak_index = int(np.argmax(z))
    if z[peak_index] > SPECIALIZATION_Z_THRESHOLD:
        return labels[peak_index]
    return None


def classify_cycling_profile(scores: Dict[str, int], body_weight: float) -> CyclingProfileType:
    peak = peak_specialty(scores)
    if peak == "NM":
        return CyclingProfileType.SPRINTER
    if peak in ("LACT", "VO2"):
        return CyclingProfileType.PUNCHEUR
    if peak in ("THR", "STA"):
        if body_weight <= CLIMBER_MAX_BODY_WEIGHT:
            return CyclingProfileType.CLIMBER
        return CyclingProfileType.TIME_TRIALIST
    return CyclingProfileType.ALL_ROUNDER


def classify_running_profile(scores: Dict[str, int]) -> RunningProfileType:
    peak = peak_specialty(scores)
    return RUNNING_PROFILE_BY_STAT.get(peak, RunningProfileType.COMPLETE_ATHLETE)


# ============================================================
# Public entry point
# ============================================================

def compute_athlete_profile(
    model: Union[CyclingModel, RunningModel],
    body_weight: Optional[float],
    sex: Optional[Union[Sex, str]] = None
) -> Optional[AthleteProfile]:
    """Build the athlete-card profile for a fitted model.

    Args:
        model: Valid CyclingModel or RunningModel
        body_weight: Body mass [kg]; required for cycling, unused for running
        sex: Benchmark table selector (default: Config.DEFAULT_SEX)

    Returns:
        AthleteProfile, or None for invalid models, missing body weight
        (cycling) or unpredictable performances

    Raises:
        ValueError: If model is not a cycling or running model, or sex is unknown
    """
    sex = Sex(sex or Config.DEFAULT_SEX)

    if isinstance(model, CyclingModel):
        if not model.valid or not body_weight or body_weight <= 0:
            return None
        performance = athlete_watt_per_kg(model, body_weight)
    elif isinstance(model, RunningModel):
        if not model.valid:
            return None
        performance = athlete_running_times(model)
    else:
        raise ValueError(f"Unsupported model type: {type(model).__name__}")

    if not all(math.isfinite(v) and v > 0 for v in performance.values()):
        logger.warning(f"Unpredictable card performance: {performance}")
        return None

    if isinstance(model, CyclingModel):
        scores = cycling_scores(performance, sex)
        profile_type = classify_cycling_profile(scores, body_weight)
    else:
        scores = running_scores(performance, sex)
        profile_type = classify_running_profile(scores)

    rating = overall_rating(scores)
    return AthleteProfile(
        stats=scores,
        performance=performance,
        overall_rating=rating,
        profile_type=profile_type,
        rarity_tier=rarity_tier(rating),
    )

"""
SRP: Training zones, threshold summary and physiological profile indicators.

All functions are pure over a fitted model. Invalid models yield None.
"""
import logging
from typing import Dict, List, Optional, Tuple, Union

from ..constants import (
    VO2MAX_SLOPE,
    VO2MAX_INTERCEPT,
    VO2MAX_REFERENCE_DURATION,
    MMSS_LOWER_DURATION,
    CYCLING_Z1_LT1_FRACTION,
    CYCLING_Z3_CP_FRACTION,
    CYCLING_Z4_CP_FRACTION,
    RUNNING_Z1_LT1_FRACTION,
    RUNNING_Z3_DURATION,
    RUNNING_Z4_DURATION,
    RUNNING_Z5_DURATION,
    FATIGUE_RESISTANT_MAX,
    FATIGUE_MIXED_MAX,
    CYCLING_DELTA_SPEED_THRESHOLD,
    RUNNING_DELTA_ENDURANCE_THRESHOLD,
)
from ..types import (
    CyclingModel,
    RunningModel,
    Sex,
    IntensityDomain,
    FatigueProfile,
    ProfileOrientation,
    AthleteProfile,
    PowerZone,
    PaceZone,
    ThresholdSummary,
    RunningThresholdSummary,
    PhysiologicalProfile,
)
from .selector import power_law_power, running_speed_at
from .scoring import compute_athlete_profile

logger = logging.getLogger(__name__)

# (zone, name, domain, rpe) - boundaries are computed per model
CYCLING_ZONE_LABELS = [
    ("Z1", "Easy", IntensityDomain.MODERATE, "1-2"),
    ("Z2", "Endurance", IntensityDomain.MODERATE, "3-4"),
    ("Z3", "Tempo / Sweet Spot", IntensityDomain.HEAVY, "5-6"),
    ("Z4", "Critical Power", IntensityDomain.HEAVY, "7"),
    ("Z5", "HIIT", IntensityDomain.SEVERE, ">8"),
    ("Z6", "SIT", IntensityDomain.EXTREME, ">8"),
]

RUNNING_ZONE_LABELS = [
    ("Z1", "Easy", IntensityDomain.MODERATE, "1-2"),
    ("Z2", "Endurance", IntensityDomain.MODERATE, "3-4"),
    ("Z3", "Tempo", IntensityDomain.HEAVY, "5-6"),
    ("Z4", "Threshold", IntensityDomain.HEAVY, "7"),
    ("Z5", "VO2max", IntensityDomain.SEVERE, ">8"),
    ("Z6", "Speed", IntensityDomain.EXTREME, ">8"),
]


# ============================================================
# Training zones
# ============================================================

def cycling_power_zones(model: CyclingModel, body_weight: Optional[float] = None) -> List[PowerZone]:
    """Six power zones anchored on LT1 estimate, CP and Po3min."""
    lt1 = model.lt1.estimate
    cp = model.cp
    bounds = [
        (None, lt1 * CYCLING_Z1_LT1_FRACTION),
        (lt1 * CYCLING_Z1_LT1_FRACTION, lt1),
        (lt1, cp * CYCLING_Z3_CP_FRACTION),
        (cp * CYCLING_Z3_CP_FRACTION, cp * CYCLING_Z4_CP_FRACTION),
        (cp * CYCLING_Z4_CP_FRACTION, model.apr.po3min),
        (model.apr.po3min, None),
    ]

    def per_kg(value):
        if value is None or not body_weight or body_weight <= 0:
            return None
        return value / body_weight

    return [
        PowerZone(
            zone=zone, name=name, lower=lower, upper=upper, domain=domain, rpe=rpe,
            lower_wkg=per_kg(lower), upper_wkg=per_kg(upper),
        )
        for (zone, name, domain, rpe), (lower, upper) in zip(CYCLING_ZONE_LABELS, bounds)
    ]


def running_pace_zones(model: RunningModel) -> List[PaceZone]:
    """Six speed zones [km/h] anchored on LT1 and the 60/25/3 min speeds."""
    lt1_speed = 3600 / model.lt1.estimate
    v60 = running_speed_at(model, RUNNING_Z3_DURATION) * 3.6
    v25 = running_speed_at(model, RUNNING_Z4_DURATION) * 3.6
    v3 = running_speed_at(model, RUNNING_Z5_DURATION) * 3.6

    bounds = [
        (None, lt1_speed * RUNNING_Z1_LT1_FRACTION),
        (lt1_speed * RUNNING_Z1_LT1_FRACTION, lt1_speed),
        (lt1_speed, v60),
        (v60, v25),
        (v25, v3),
        (v3, None),
    ]
    return [
        PaceZone(zone=zone, name=name, lower_speed=lower, upper_speed=upper, domain=domain, rpe=rpe)
        for (zone, name, domain, rpe), (lower, upper) in zip(RUNNING_ZONE_LABELS, bounds)
    ]


def compute_training_zones(
    model: Union[CyclingModel, RunningModel],
    body_weight: Optional[float] = None
) -> Optional[List[Union[PowerZone, PaceZone]]]:
    """Training zones for a fitted model; None if the model is invalid.

    Raises:
        ValueError: If model is not a cycling or running model
    """
    if isinstance(model, CyclingModel):
        return cycling_power_zones(model, body_weight) if model.valid else None
    if isinstance(model, RunningModel):
        return running_pace_zones(model) if model.valid else None
    raise ValueError(f"Unsupported model type: {type(model).__name__}")


def intensity_domain_boundaries(model: CyclingModel) -> Optional[Dict[IntensityDomain, Tuple[Optional[float], Optional[float]]]]:
    """Power ranges of the four intensity domains shaded on the chart."""
    if not model.valid:
        return None
    return {
        IntensityDomain.MODERATE: (None, model.lt1.estimate),
        IntensityDomain.HEAVY: (model.lt1.estimate, model.cp),
        IntensityDomain.SEVERE: (model.cp, model.apr.po3min),
        IntensityDomain.EXTREME: (model.apr.po3min, None),
    }


# ============================================================
# Threshold summary
# ============================================================

def estimate_vo2max(cp: float, w_prime: float, body_weight: float) -> Tuple[float, float]:
    """VO2max from the 5-minute CP-W' power.

    Always uses CP + W'/300 directly, never the duration selector.

    Returns:
        Tuple (relative [ml/kg/min], absolute [L/min])
    """
    p5min = cp + w_prime / VO2MAX_REFERENCE_DURATION
    relative = VO2MAX_SLOPE * (p5min / body_weight) + VO2MAX_INTERCEPT
    return relative, relative * body_weight / 1000


def compute_threshold_summary(
    model: Union[CyclingModel, RunningModel],
    body_weight: Optional[float] = None
) -> Optional[Union[ThresholdSummary, RunningThresholdSummary]]:
    """Pmax, MAP, MMSS, LT1 and VO2max for a cycling model, or the
    pace-based equivalents for a running model.

    Returns None for invalid models, and for cycling without a positive body weight.
    """
    if isinstance(model, RunningModel):
        if not model.valid:
            return None
        return RunningThresholdSummary(
            map_pace=model.vo2max_pace,
            critical_speed=model.cs,
            cs_pace=model.cs_pace,
            lt1=model.lt1,
        )

    if not isinstance(model, CyclingModel):
        raise ValueError(f"Unsupported model type: {type(model).__name__}")

    if not model.valid or not body_weight or body_weight <= 0:
        return None

    mmss = (power_law_power(model, MMSS_LOWER_DURATION), model.cp)
    vo2_rel, vo2_abs = estimate_vo2max(model.cp, model.w_prime, body_weight)

    return ThresholdSummary(
        pmax=model.pmax,
        map=model.apr.po3min,
        mmss=mmss,
        lt1=model.lt1,
        vo2max=vo2_rel,
        vo2max_absolute=vo2_abs,
        pmax_wkg=model.pmax / body_weight,
        map_wkg=model.apr.po3min / body_weight,
        mmss_wkg=(mmss[0] / body_weight, mmss[1] / body_weight),
    )


# ============================================================
# Physiological profile
# ============================================================

def fatigue_index(exponent: float) -> float:
    """Fatigue resistance index: % power lost when duration doubles."""
    return (1 - 2 ** (exponent - 1)) * 100


def classify_fatigue(index: float) -> FatigueProfile:
    if index < FATIGUE_RESISTANT_MAX:
        return FatigueProfile.RESISTANT
    if index <= FATIGUE_MIXED_MAX:
        return FatigueProfile.MIXED
    return FatigueProfile.FAST


def utilization_fraction(model: Union[CyclingModel, RunningModel]) -> float:
    """Threshold as % of the 5-minute capacity."""
    if isinstance(model, CyclingModel):
        return model.cp / (model.cp + model.w_prime / VO2MAX_REFERENCE_DURATION) * 100
    return model.cs / (model.cs + model.d_prime / VO2MAX_REFERENCE_DURATION) * 100


def profile_orientation(athlete: AthleteProfile, is_cycling: bool) -> Tuple[int, ProfileOrientation]:
    """Speed vs endurance lean from the short/long stat gap.

    Cycling: STA - VO2 below -5 is speed oriented.
    Running: 1500m - 10km below -3 is endurance oriented.
    """
    if is_cycling:
        delta = athlete.stats["STA"] - athlete.stats["VO2"]
        if delta < CYCLING_DELTA_SPEED_THRESHOLD:
            return delta, ProfileOrientation.SPEED_ORIENTED
        return delta, ProfileOrientation.ENDURANCE_ORIENTED

    delta = athlete.stats["1500m"] - athlete.stats["10km"]
    if delta < RUNNING_DELTA_ENDURANCE_THRESHOLD:
        return delta, ProfileOrientation.ENDURANCE_ORIENTED
    return delta, ProfileOrientation.SPEED_ORIENTED


def compute_physiological_profile(
    model: Union[CyclingModel, RunningModel],
    body_weight: Optional[float],
    sex: Optional[Union[Sex, str]] = None
) -> Optional[PhysiologicalProfile]:
    """Athlete profile plus fatigue, utilization and orientation indicators."""
    athlete = compute_athlete_profile(model, body_weight, sex)
    if athlete is None:
        return None

    index = fatigue_index(model.power_law.exponent)
    delta, orientation = profile_orientation(athlete, isinstance(model, CyclingModel))

    return PhysiologicalProfile(
        athlete=athlete,
        fatigue_index=index,
        fatigue_profile=classify_fatigue(index),
        utilization_fraction=utilization_fraction(model),
        profile_delta=delta,
        orientation=orientation,
    )

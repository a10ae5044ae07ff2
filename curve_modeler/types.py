"""
Result objects for the performance-curve engine.

Every fitter, evaluator and scorer returns one of these immutable-by-convention
containers. Nothing here holds state between calls.
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Any

from .errors import FitError


# ============================================================
# ENUMS
# ============================================================

class Sex(str, Enum):
    """Selects the benchmark table."""
    MALE = "male"
    FEMALE = "female"


class ModelKind(str, Enum):
    """Which fitted model produced a value."""
    APR = "APR"
    CP_W = "CP-W'"
    CS_D = "CS-D'"
    POWER_LAW = "Power Law"
    NONE = "none"          # no solution / invalid model


class CyclingProfileType(str, Enum):
    SPRINTER = "SPRINTER"
    PUNCHEUR = "PUNCHEUR"
    CLIMBER = "CLIMBER"
    TIME_TRIALIST = "TIME TRIALIST"
    ALL_ROUNDER = "ALL-ROUNDER"


class RunningProfileType(str, Enum):
    FAST_MIDDLE_DISTANCE = "FAST MIDDLE-DISTANCE"
    MIDDLE_DISTANCE = "MIDDLE-DISTANCE"
    LONG_DISTANCE = "LONG-DISTANCE"
    HALF_MARATHON_SPECIALIST = "HALF MARATHON SPECIALIST"
    MARATHONER = "MARATHONER"
    COMPLETE_ATHLETE = "COMPLETE ATHLETE"


class RarityTier(str, Enum):
    """Canonical rarity tier derived from the overall rating."""
    ALIEN = "ALIEN"
    HERO = "HERO"
    PRO = "PRO"
    ELITE = "ELITE"
    STANDARD = "STANDARD"


class IntensityDomain(str, Enum):
    MODERATE = "moderate"
    HEAVY = "heavy"
    SEVERE = "severe"
    EXTREME = "extreme"


class FatigueProfile(str, Enum):
    """Fatigue-resistance classification from the Power Law exponent."""
    RESISTANT = "resistant"
    MIXED = "mixed"
    FAST = "fast"


class ProfileOrientation(str, Enum):
    SPEED_ORIENTED = "speed_oriented"
    ENDURANCE_ORIENTED = "endurance_oriented"


# ============================================================
# MODEL PARAMETERS
# ============================================================

@dataclass(frozen=True)
class LT1Range:
    """Lactate threshold 1 band.

    Watts for cycling, pace in s/km for running (min = faster pace).
    """
    min: float
    max: float
    estimate: float

    def to_dict(self) -> Dict[str, float]:
        return {"min": self.min, "max": self.max, "estimate": self.estimate}


@dataclass(frozen=True)
class APRParams:
    """Anaerobic Power Reserve model: P(t) = po3min + apr * exp(-k*t)."""
    po3min: float   # asymptote: CP-W' power at 3 min [W]
    apr: float      # amplitude: Pmax - po3min [W]
    k: float        # decay rate [1/s]

    def power_at(self, t: float) -> float:
        return self.po3min + self.apr * math.exp(-self.k * t)


@dataclass(frozen=True)
class PowerLawParams:
    """Power Law model.

    Cycling: P(t) = scale * t^(exponent-1)
    Running: v(t) = scale * t^(exponent-1), i.e. d(t) = scale * t^exponent
    """
    scale: float
    exponent: float

    @property
    def k(self) -> float:
        """Exponent minus one (the running 'k' parameter)."""
        return self.exponent - 1

    def rate_at(self, t: float) -> float:
        return self.scale * t ** (self.exponent - 1)


@dataclass(frozen=True)
class CyclingModel:
    """Fitted cycling power-duration models.

    When valid is False only `reason`, `error` and `pmax` are meaningful.
    """
    valid: bool
    reason: Optional[str] = None
    error: Optional[FitError] = None
    pmax: Optional[float] = None
    cp: Optional[float] = None
    w_prime: Optional[float] = None
    apr: Optional[APRParams] = None
    power_law: Optional[PowerLawParams] = None
    lt1: Optional[LT1Range] = None

    @classmethod
    def invalid(cls, error: FitError, pmax: Optional[float] = None) -> "CyclingModel":
        return cls(valid=False, reason=error.message, error=error, pmax=pmax)

    @property
    def vo2max_power(self) -> Optional[float]:
        """3-minute power estimate."""
        return self.apr.po3min if self.apr else None

    def to_dict(self) -> Dict[str, Any]:
        if not self.valid:
            return {"valid": False, "reason": self.reason, "error": self.error.value}
        return {
            "valid": True,
            "pmax": self.pmax,
            "cp": self.cp,
            "w_prime": self.w_prime,
            "apr": {"po3min": self.apr.po3min, "apr": self.apr.apr, "k": self.apr.k},
            "power_law": {"S": self.power_law.scale, "E": self.power_law.exponent},
            "lt1": self.lt1.to_dict(),
            "vo2max_power": self.vo2max_power,
        }


@dataclass(frozen=True)
class RunningModel:
    """Fitted running speed-duration models.

    When valid is False only `reason` and `error` are meaningful.
    """
    valid: bool
    reason: Optional[str] = None
    error: Optional[FitError] = None
    cs: Optional[float] = None           # Critical Speed [m/s]
    d_prime: Optional[float] = None      # D' [m]
    power_law: Optional[PowerLawParams] = None
    lt1: Optional[LT1Range] = None       # pace [s/km]
    cs_pace: Optional[float] = None      # [s/km]
    vo2max_pace: Optional[float] = None  # MAP pace at 3 min [s/km]

    @classmethod
    def invalid(cls, error: FitError) -> "RunningModel":
        return cls(valid=False, reason=error.message, error=error)

    def to_dict(self) -> Dict[str, Any]:
        if not self.valid:
            return {"valid": False, "reason": self.reason, "error": self.error.value}
        return {
            "valid": True,
            "cs": self.cs,
            "d_prime": self.d_prime,
            "cs_pace": self.cs_pace,
            "power_law": {"A": self.power_law.scale, "k": self.power_law.k},
            "lt1": self.lt1.to_dict(),
            "vo2max_pace": self.vo2max_pace,
        }


# ============================================================
# EVALUATION RESULTS
# ============================================================

@dataclass(frozen=True)
class DualPrediction:
    """Both APR and CP-W' answers inside the 2-3 min transition zone."""
    apr_value: float
    cp_w_value: float
    diff: float
    diff_pct: float

    @property
    def primary_model(self) -> ModelKind:
        return ModelKind.APR if self.apr_value < self.cp_w_value else ModelKind.CP_W

    @property
    def alt_model(self) -> ModelKind:
        return ModelKind.CP_W if self.primary_model == ModelKind.APR else ModelKind.APR

    @property
    def alt_value(self) -> float:
        return self.cp_w_value if self.primary_model == ModelKind.APR else self.apr_value


@dataclass(frozen=True)
class Evaluation:
    """Forward query result: power at a duration."""
    duration: float
    value: float
    model: ModelKind
    dual: Optional[DualPrediction] = None

    @property
    def in_transition_zone(self) -> bool:
        return self.dual is not None


@dataclass(frozen=True)
class Solution:
    """Inverse query result: duration sustainable at a target power.

    time is NaN and model is ModelKind.NONE when no model has a solution.
    """
    target: float
    time: float
    model: ModelKind
    dual: Optional[DualPrediction] = None

    @classmethod
    def no_solution(cls, target: float) -> "Solution":
        return cls(target=target, time=float("nan"), model=ModelKind.NONE)

    @property
    def found(self) -> bool:
        return self.model != ModelKind.NONE and math.isfinite(self.time)


@dataclass(frozen=True)
class RunningEvaluation:
    """Distance covered in a given time."""
    duration: float
    distance: float      # [m]
    speed: float         # [m/s]
    pace: float          # [s/km]
    model: ModelKind


@dataclass(frozen=True)
class RunningSolution:
    """Time needed to cover a given distance."""
    distance: float
    time: float
    pace: float
    model: ModelKind

    @property
    def found(self) -> bool:
        return self.model != ModelKind.NONE and math.isfinite(self.time)


# ============================================================
# PROFILE / ZONES / SUMMARY
# ============================================================

@dataclass(frozen=True)
class AthleteProfile:
    """Athlete-card profile.

    stats: ordered stat label -> score
    performance: ordered stat label -> W/kg (cycling) or predicted time in s (running)
    """
    stats: Dict[str, int]
    performance: Dict[str, float]
    overall_rating: int
    profile_type: Enum
    rarity_tier: RarityTier

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stats": dict(self.stats),
            "performance": {k: round(v, 3) for k, v in self.performance.items()},
            "overall_rating": self.overall_rating,
            "profile_type": self.profile_type.value,
            "rarity_tier": self.rarity_tier.value,
        }


@dataclass(frozen=True)
class PowerZone:
    """Cycling training zone. upper is None for the open-ended top zone."""
    zone: str
    name: str
    lower: Optional[float]
    upper: Optional[float]
    domain: IntensityDomain
    rpe: str
    lower_wkg: Optional[float] = None
    upper_wkg: Optional[float] = None


@dataclass(frozen=True)
class PaceZone:
    """Running training zone. Speeds in km/h, paces in s/km."""
    zone: str
    name: str
    lower_speed: Optional[float]
    upper_speed: Optional[float]
    domain: IntensityDomain
    rpe: str

    @property
    def slow_pace(self) -> Optional[float]:
        return 3600 / self.lower_speed if self.lower_speed else None

    @property
    def fast_pace(self) -> Optional[float]:
        return 3600 / self.upper_speed if self.upper_speed else None


@dataclass(frozen=True)
class ThresholdSummary:
    """Physiological summary values derived from a cycling model."""
    pmax: float
    map: float                          # 3-minute power [W]
    mmss: Tuple[float, float]           # (P50min, CP) [W]
    lt1: LT1Range
    vo2max: float                       # [ml/kg/min]
    vo2max_absolute: float              # [L/min]
    pmax_wkg: float
    map_wkg: float
    mmss_wkg: Tuple[float, float]


@dataclass(frozen=True)
class RunningThresholdSummary:
    """Running summary. No VO2max estimate exists; MAP pace stands in."""
    map_pace: float
    critical_speed: float
    cs_pace: float
    lt1: LT1Range
    vo2max: Optional[float] = None


@dataclass(frozen=True)
class PhysiologicalProfile:
    """Athlete profile plus fatigue/utilization indicators."""
    athlete: AthleteProfile
    fatigue_index: float
    fatigue_profile: FatigueProfile
    utilization_fraction: float
    profile_delta: int
    orientation: ProfileOrientation

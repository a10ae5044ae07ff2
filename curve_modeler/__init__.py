"""
Curve Modeler - performance-curve engine for cyclists and runners.

Fits power-duration (cycling) and speed-duration (running) models from a
handful of field tests, then derives sustainable efforts, race predictions,
training zones and an athlete-card profile from the fitted model.
NO UI OR I/O DEPENDENCIES ALLOWED.

Sub-modules:
- calculations: fitters, model selector, scoring, zones
- curves: chart sampling and sustainable tables (pandas)
- formatting: display-only string helpers
- types / errors / constants / config
"""

from .config import Config, configure_logging
from .errors import FitError, CollinearInputError
from .types import (
    Sex,
    ModelKind,
    CyclingProfileType,
    RunningProfileType,
    RarityTier,
    IntensityDomain,
    FatigueProfile,
    ProfileOrientation,
    LT1Range,
    APRParams,
    PowerLawParams,
    CyclingModel,
    RunningModel,
    DualPrediction,
    Evaluation,
    Solution,
    RunningEvaluation,
    RunningSolution,
    AthleteProfile,
    PowerZone,
    PaceZone,
    ThresholdSummary,
    RunningThresholdSummary,
    PhysiologicalProfile,
)
from .calculations import (
    fit_power_law,
    fit_cycling_model,
    fit_running_model,
    evaluate_at_duration,
    solve_for_duration,
    evaluate_running_at_duration,
    solve_running_for_distance,
    race_pace,
    compute_athlete_profile,
    compute_training_zones,
    compute_threshold_summary,
    compute_physiological_profile,
    intensity_domain_boundaries,
)
from .curves import (
    sample_power_curve,
    sample_speed_curve,
    sustainable_power_table,
    sustainable_running_table,
    zones_table,
)

__version__ = "1.0.0"

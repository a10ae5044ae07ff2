"""
SOLID: Single Responsibility Principle - model calculations.

This package groups the computational functions by responsibility:
- regression.py: Log-log least squares for the Power Law
- cycling.py: CP-W', APR and Power Law fitting from cycling tests
- running.py: CS-D' and Power Law fitting from running tests
- selector.py: Which model governs a duration/distance, forward and inverse queries
- scoring.py: Athlete card scores, profile type, rarity tier
- zones.py: Training zones, threshold summary, physiological profile

All public functions are re-exported from this module.
"""

from .regression import (
    fit_power_law,
)

from .cycling import (
    fit_cycling_model,
    fit_cp_w_prime,
    estimate_apr_decay,
    cycling_lt1_range,
)

from .running import (
    fit_running_model,
    fit_cs_d_prime,
    running_lt1_range,
)

from .selector import (
    evaluate_at_duration,
    solve_for_duration,
    solve_apr_time,
    evaluate_running_at_duration,
    solve_running_for_distance,
    running_speed_at,
    race_pace,
)

from .scoring import (
    compute_athlete_profile,
    athlete_watt_per_kg,
    athlete_running_times,
    cycling_scores,
    running_scores,
    overall_rating,
    rarity_tier,
    peak_specialty,
    classify_cycling_profile,
    classify_running_profile,
    round_half_up,
)

from .zones import (
    compute_training_zones,
    compute_threshold_summary,
    compute_physiological_profile,
    intensity_domain_boundaries,
    estimate_vo2max,
    fatigue_index,
    classify_fatigue,
    utilization_fraction,
)

__all__ = [
    # Regression
    'fit_power_law',
    # Cycling
    'fit_cycling_model',
    'fit_cp_w_prime',
    'estimate_apr_decay',
    'cycling_lt1_range',
    # Running
    'fit_running_model',
    'fit_cs_d_prime',
    'running_lt1_range',
    # Selector
    'evaluate_at_duration',
    'solve_for_duration',
    'solve_apr_time',
    'evaluate_running_at_duration',
    'solve_running_for_distance',
    'running_speed_at',
    'race_pace',
    # Scoring
    'compute_athlete_profile',
    'athlete_watt_per_kg',
    'athlete_running_times',
    'cycling_scores',
    'running_scores',
    'overall_rating',
    'rarity_tier',
    'peak_specialty',
    'classify_cycling_profile',
    'classify_running_profile',
    'round_half_up',
    # Zones
    'compute_training_zones',
    'compute_threshold_summary',
    'compute_physiological_profile',
    'intensity_domain_boundaries',
    'estimate_vo2max',
    'fatigue_index',
    'classify_fatigue',
    'utilization_fraction',
]

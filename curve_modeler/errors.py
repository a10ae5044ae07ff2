"""
Fit failure taxonomy.

Fitters report failures as values (FitError codes on an invalid model),
never as exceptions. CollinearInputError is the one exception in the
package and is caught at the fitter boundary.
"""
from enum import Enum


class FitError(str, Enum):
    """Reason a model could not be fitted."""
    INCONSISTENT_POWER_ORDER = "inconsistent_power_order"
    INCONSISTENT_TIME_ORDER = "inconsistent_time_order"
    INCONSISTENT_DISTANCE_ORDER = "inconsistent_distance_order"
    NON_POSITIVE_TIME = "non_positive_time"
    NEGATIVE_MODEL_PARAMETERS = "negative_model_parameters"
    PMAX_TOO_LOW = "pmax_too_low"
    NON_FINITE_INPUT = "non_finite_input"
    COLLINEAR_INPUT = "collinear_input"

    @property
    def message(self) -> str:
        """Human-readable reason shown by the UI layer."""
        return _MESSAGES[self]


_MESSAGES = {
    FitError.INCONSISTENT_POWER_ORDER:
        "Inconsistent input: severe-effort power must be greater than threshold-effort power.",
    FitError.INCONSISTENT_TIME_ORDER:
        "Inconsistent input: severe-effort time must be shorter than threshold-effort time.",
    FitError.INCONSISTENT_DISTANCE_ORDER:
        "Inconsistent input: severe-effort distance must be shorter than threshold-effort distance.",
    FitError.NON_POSITIVE_TIME:
        "Invalid input: test times must be greater than zero.",
    FitError.NEGATIVE_MODEL_PARAMETERS:
        "Invalid fit: the hyperbolic model parameters came out non-positive. Check the inputs.",
    FitError.PMAX_TOO_LOW:
        "Inconsistent input: Pmax must be greater than the estimated 3-minute power.",
    FitError.NON_FINITE_INPUT:
        "Invalid input: test values must be finite numbers.",
    FitError.COLLINEAR_INPUT:
        "Cannot compute the long-duration (Power Law) model: regression points are collinear.",
}


class CollinearInputError(ValueError):
    """Log-log regression denominator is numerically zero."""

    def __init__(self, denominator: float):
        self.denominator = denominator
        super().__init__(
            f"Degenerate power-law regression (denominator={denominator:.3e})"
        )

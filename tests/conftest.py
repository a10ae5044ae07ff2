# Tests configuration for curve_modeler
import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from curve_modeler.calculations import fit_cycling_model, fit_running_model


@pytest.fixture
def cycling_inputs():
    """Field tests of a strong amateur: Pmax, 4min and 15min efforts."""
    return {
        'pmax_power': 1110.0,
        'severe_power': 397.0,
        'severe_time': 240.0,
        'threshold_power': 348.0,
        'threshold_time': 902.0,
    }


@pytest.fixture
def cycling_model(cycling_inputs):
    """Valid cycling model fitted from cycling_inputs."""
    return fit_cycling_model(**cycling_inputs)


@pytest.fixture
def running_inputs():
    """1500m in 5:00 and 5000m in 19:00."""
    return {
        'severe_distance': 1500.0,
        'severe_time': 300.0,
        'threshold_distance': 5000.0,
        'threshold_time': 1140.0,
    }


@pytest.fixture
def running_model(running_inputs):
    """Valid running model fitted from running_inputs (CS=4.1667 m/s, D'=250 m)."""
    return fit_running_model(**running_inputs)

"""Daily household simulation: configuration, runner and results."""

from .models import HourlyData, SimulationConfig, SimulationResult
from .runner import SimulationRunner, run_simulation

__all__ = [
    "HourlyData",
    "SimulationConfig",
    "SimulationResult",
    "SimulationRunner",
    "run_simulation",
]

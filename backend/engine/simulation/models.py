"""Configuration and result containers for the daily household simulation."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from engine.generation.sources import EnergySourceConfig
from engine.load.load_model import Appliance

# Field precision (decimal places) of the day-level aggregates.
TOTAL_PRECISION: dict[str, int] = {
    "total_cost": 2,
    "total_co2": 1,
    "total_consumption": 1,
    "total_generation": 1,
    "self_sufficiency": 1,
    "grid_import": 1,
    "grid_export": 1,
    "battery_level": 1,
    "free_energy_used": 1,
}


def round_half_up(value: float, digits: int) -> float:
    """Round *value* to *digits* places, halves away from zero.

    The built-in ``round`` sends halves to the even neighbour, so a total of
    0.25 would display as 0.2.  Rounding the decimal form gives 0.3.
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))

_HOURLY_SERIES = (
    "solar",
    "wind",
    "heat_pump",
    "kinetic",
    "total_generation",
    "consumption",
    "battery_level",
    "grid_import",
    "grid_export",
    "free_energy_used",
    "cost",
    "co2",
)


@dataclass
class SimulationConfig:
    """Household set-up for one simulated day.

    Parameters
    ----------
    energy_sources : list[EnergySourceConfig]
        All configured sources, active or not.
    battery_capacity_kwh : float
        Battery capacity (>= 0).  The battery starts the day half full.
    appliances : list[Appliance]
        Appliances as entered by the user.  The simulation itself runs on
        the list passed to it explicitly.
    prioritize_free_energy : bool
        User preference carried with the configuration.  Not used by the
        balancing rules.
    seed : int or None
        Seed for the random wind and kinetic shapes.  ``None`` draws a new
        day for every profile built from this configuration.
    wrap_midnight : bool
        Let appliance runs continue past 23:00 into the early hours, both
        when computing consumption and when choosing candidate start hours.
    """

    energy_sources: list[EnergySourceConfig] = field(default_factory=list)
    battery_capacity_kwh: float = 0.0
    appliances: list[Appliance] = field(default_factory=list)
    prioritize_free_energy: bool = True
    seed: Optional[int] = None
    wrap_midnight: bool = False

    def __post_init__(self) -> None:
        if self.battery_capacity_kwh < 0:
            raise ValueError(
                f"battery_capacity_kwh must be >= 0, got {self.battery_capacity_kwh}"
            )
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be >= 0, got {self.seed}")


@dataclass
class HourlyData:
    """Energy flows for a single hour of the simulated day (kWh, EUR, kg)."""

    hour: int
    solar: float
    wind: float
    heat_pump: float
    kinetic: float
    total_generation: float
    consumption: float
    battery_level: float
    grid_import: float
    grid_export: float
    free_energy_used: float
    cost: float
    co2: float


@dataclass
class SimulationResult:
    """Outcome of one 24-hour simulation.

    The ``total_*`` aggregates are rounded for display (see
    :data:`TOTAL_PRECISION`); ``raw_totals`` holds the same quantities
    unrounded for callers that compare or divide them.
    """

    hourly_data: list[HourlyData]
    total_cost: float
    total_co2: float
    total_consumption: float
    total_generation: float
    self_sufficiency: float
    grid_import: float
    grid_export: float
    battery_level: float
    free_energy_used: float
    raw_totals: dict[str, float] = field(default_factory=dict, repr=False)

    def as_arrays(self) -> dict[str, NDArray[np.float64]]:
        """Return each hourly series as a shape ``(24,)`` array."""
        return {
            key: np.array([getattr(h, key) for h in self.hourly_data], dtype=np.float64)
            for key in _HOURLY_SERIES
        }

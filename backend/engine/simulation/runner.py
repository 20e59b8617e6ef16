"""Simulation orchestrator for a household's daily energy balance.

``SimulationRunner`` wires together the generation, load, battery and grid
engine modules into a single 24-hour simulation.  For each hour it computes
on-site generation and appliance consumption, balances them through the
battery and grid with the load-following rule, and prices the grid exchange.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from engine.battery.battery_system import BatterySystem
from engine.dispatch.load_following import dispatch_load_following
from engine.generation.profile import HOURS_PER_DAY, GenerationProfile
from engine.generation.sources import calculate_generation
from engine.grid.grid_connection import GridConnection
from engine.grid.tariff import HourlyTariff
from engine.load.load_model import Appliance, calculate_consumption
from engine.simulation.models import (
    TOTAL_PRECISION,
    HourlyData,
    SimulationConfig,
    SimulationResult,
    round_half_up,
)

logger = logging.getLogger(__name__)

# ======================================================================
# Constants
# ======================================================================

INITIAL_BATTERY_SOC: float = 0.50


def self_sufficiency_pct(total_generation: float, total_consumption: float) -> float:
    """Share of consumption covered by on-site generation, capped at 100 %.

    Defined as 0 when nothing is consumed.
    """
    if total_consumption <= 0:
        return 0.0
    return min(100.0, total_generation / total_consumption * 100.0)


# ======================================================================
# SimulationRunner
# ======================================================================

class SimulationRunner:
    """Day-long simulation of one household configuration.

    Parameters
    ----------
    config : SimulationConfig
        Sources, battery capacity and simulation options.
    appliances : iterable of Appliance
        Schedule to simulate.  Not modified.
    profile : GenerationProfile or None
        Daily generation shapes.  Built from ``config.seed`` when omitted.
    tariff : HourlyTariff or None
        Price and carbon tables.  Defaults to the standard household tariff.
    """

    def __init__(
        self,
        config: SimulationConfig,
        appliances: Iterable[Appliance],
        profile: Optional[GenerationProfile] = None,
        tariff: Optional[HourlyTariff] = None,
    ) -> None:
        self.config = config
        self.appliances = list(appliances)
        self.profile = profile if profile is not None else GenerationProfile.from_seed(config.seed)
        self.tariff = tariff if tariff is not None else HourlyTariff()

    def run(self) -> SimulationResult:
        """Execute the 24-hour pass and collect hourly rows and totals."""
        battery = BatterySystem(
            capacity_kwh=self.config.battery_capacity_kwh,
            initial_soc=INITIAL_BATTERY_SOC,
        )
        grid = GridConnection(tariff=self.tariff)

        hourly: list[HourlyData] = []
        total_consumption = 0.0
        total_generation = 0.0

        for hour in range(HOURS_PER_DAY):
            generation = calculate_generation(
                hour, self.config.energy_sources, self.profile
            )
            consumption = calculate_consumption(
                hour, self.appliances, self.config.wrap_midnight
            )

            flows = dispatch_load_following(
                generation["total"], consumption, battery, grid, hour
            )

            hourly.append(
                HourlyData(
                    hour=hour,
                    solar=generation["solar"],
                    wind=generation["wind"],
                    heat_pump=generation["heat_pump"],
                    kinetic=generation["kinetic"],
                    total_generation=generation["total"],
                    consumption=consumption,
                    battery_level=flows["battery_level"],
                    grid_import=flows["grid_import"],
                    grid_export=flows["grid_export"],
                    free_energy_used=0.0,
                    cost=flows["cost"],
                    co2=flows["co2"],
                )
            )

            total_consumption += consumption
            total_generation += generation["total"]

        # Grid money, emissions and exchange come from the meter.
        total_import = grid.total_import_kwh
        raw_totals = {
            "total_cost": grid.total_cost,
            "total_co2": grid.total_co2_kg,
            "total_consumption": total_consumption,
            "total_generation": total_generation,
            "self_sufficiency": self_sufficiency_pct(total_generation, total_consumption),
            "grid_import": total_import,
            "grid_export": grid.total_export_kwh,
            "battery_level": battery.level_kwh,
            # Approximation: generation minus import, not a sum of hourly use.
            "free_energy_used": total_generation - total_import,
        }
        rounded = {
            key: round_half_up(value, TOTAL_PRECISION[key]) for key, value in raw_totals.items()
        }

        logger.debug(
            "Simulated day: cost=%.2f co2=%.1f import=%.1f export=%.1f kWh",
            grid.total_cost,
            grid.total_co2_kg,
            total_import,
            grid.total_export_kwh,
        )

        return SimulationResult(hourly_data=hourly, raw_totals=raw_totals, **rounded)


def run_simulation(
    config: SimulationConfig,
    appliances: Iterable[Appliance],
    profile: Optional[GenerationProfile] = None,
) -> SimulationResult:
    """Simulate one day of *appliances* under *config*.

    Parameters
    ----------
    config : SimulationConfig
        Household configuration.
    appliances : iterable of Appliance
        Schedule to simulate.
    profile : GenerationProfile or None
        Shared generation shapes.  Pass the same profile to every call whose
        results will be compared with each other.

    Returns
    -------
    SimulationResult
        Exactly 24 hourly rows plus day totals.
    """
    return SimulationRunner(config, appliances, profile=profile).run()

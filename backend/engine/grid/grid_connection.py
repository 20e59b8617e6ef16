"""Household grid connection with import/export metering.

Represents the meter between the household and the utility grid.  Imports
are billed at the hour's tariff price and carry the hour's grid carbon
intensity; exports are credited at the tariff's sell price and are
carbon-neutral.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .tariff import HourlyTariff


@dataclass
class GridConnection:
    """Bi-directional, unconstrained grid interconnection.

    Parameters
    ----------
    tariff : HourlyTariff
        Hourly price and carbon-intensity tables.
    """

    tariff: HourlyTariff = field(default_factory=HourlyTariff)

    # --- Accumulators (not constructor params) ----------------------------
    total_import_kwh: float = field(default=0.0, init=False, repr=False)
    total_export_kwh: float = field(default=0.0, init=False, repr=False)
    total_cost: float = field(default=0.0, init=False, repr=False)
    total_co2_kg: float = field(default=0.0, init=False, repr=False)

    # ------------------------------------------------------------------
    # Import
    # ------------------------------------------------------------------

    def import_power(self, kwh_needed: float, hour: int) -> Tuple[float, float, float]:
        """Import energy from the grid.

        Parameters
        ----------
        kwh_needed : float
            Energy to import for this one-hour step (kWh).
        hour : int
            Hour of day, 0 -- 23.

        Returns
        -------
        energy_kwh : float
            Energy imported.
        cost : float
            Energy cost for this step (EUR).
        co2_kg : float
            Emissions attributed to the imported energy (kg).
        """
        if kwh_needed <= 0:
            return 0.0, 0.0, 0.0

        cost = kwh_needed * self.tariff.buy_price(hour)
        co2_kg = kwh_needed * self.tariff.carbon_intensity(hour)

        self.total_import_kwh += kwh_needed
        self.total_cost += cost
        self.total_co2_kg += co2_kg

        return kwh_needed, cost, co2_kg

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export_power(self, kwh_excess: float, hour: int) -> Tuple[float, float]:
        """Export surplus energy to the grid.

        Parameters
        ----------
        kwh_excess : float
            Surplus energy available for export (kWh).
        hour : int
            Hour of day, 0 -- 23.

        Returns
        -------
        energy_kwh : float
            Energy exported.
        revenue : float
            Credit earned for this step (EUR).
        """
        if kwh_excess <= 0:
            return 0.0, 0.0

        revenue = kwh_excess * self.tariff.sell_price(hour)

        self.total_export_kwh += kwh_excess
        self.total_cost -= revenue  # revenue reduces net cost

        return kwh_excess, revenue

"""Hourly electricity tariff and grid carbon intensity.

The household buys grid energy at a price that varies by hour of day and is
compensated for exports at a fixed fraction of that hour's import price.
Grid carbon intensity is tabulated alongside the price so both can be looked
up with the same hour index.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

HOURS_PER_DAY = 24

# ======================================================================
# Default tables
# ======================================================================

# Import price per hour (EUR/kWh): cheap overnight, morning and evening peaks.
ENERGY_PRICES: tuple[float, ...] = (
    0.19, 0.18, 0.17, 0.16, 0.15, 0.17,  # 00-05
    0.22, 0.27, 0.30, 0.28, 0.25, 0.23,  # 06-11
    0.21, 0.20, 0.19, 0.22, 0.24, 0.28,  # 12-17
    0.33, 0.31, 0.29, 0.27, 0.25, 0.24,  # 18-23
)

# Grid carbon intensity per hour (kg CO2/kWh): cleanest around solar noon.
CO2_INTENSITY: tuple[float, ...] = (
    0.36, 0.35, 0.34, 0.33, 0.32, 0.34,  # 00-05
    0.38, 0.42, 0.39, 0.36, 0.30, 0.26,  # 06-11
    0.22, 0.20, 0.21, 0.24, 0.28, 0.31,  # 12-17
    0.35, 0.34, 0.33, 0.32, 0.31, 0.30,  # 18-23
)

# Exported energy is credited at this fraction of the import price.
EXPORT_PRICE_RATIO: float = 0.7


# ======================================================================
# Hourly tariff
# ======================================================================

@dataclass
class HourlyTariff:
    """24-slot import price and carbon-intensity tables.

    Parameters
    ----------
    prices : List[float]
        Import price for each hour of the day (EUR/kWh).
    co2_intensity : List[float]
        Grid carbon intensity for each hour of the day (kg CO2/kWh).
    export_ratio : float
        Fraction of the import price paid for exported energy.
    """

    prices: List[float] = field(default_factory=lambda: list(ENERGY_PRICES))
    co2_intensity: List[float] = field(default_factory=lambda: list(CO2_INTENSITY))
    export_ratio: float = EXPORT_PRICE_RATIO

    def __post_init__(self) -> None:
        if len(self.prices) != HOURS_PER_DAY:
            raise ValueError(
                f"prices must have {HOURS_PER_DAY} values, got {len(self.prices)}"
            )
        if len(self.co2_intensity) != HOURS_PER_DAY:
            raise ValueError(
                f"co2_intensity must have {HOURS_PER_DAY} values, "
                f"got {len(self.co2_intensity)}"
            )
        if any(p < 0 for p in self.prices):
            raise ValueError("prices must be >= 0")
        if any(c < 0 for c in self.co2_intensity):
            raise ValueError("co2_intensity must be >= 0")
        if self.export_ratio < 0:
            raise ValueError(f"export_ratio must be >= 0, got {self.export_ratio}")

    def buy_price(self, hour: int) -> float:
        """Cost to import 1 kWh during *hour* (EUR/kWh)."""
        return self.prices[hour]

    def sell_price(self, hour: int) -> float:
        """Credit for exporting 1 kWh during *hour* (EUR/kWh)."""
        return self.prices[hour] * self.export_ratio

    def carbon_intensity(self, hour: int) -> float:
        """Grid emissions per imported kWh during *hour* (kg CO2/kWh)."""
        return self.co2_intensity[hour]

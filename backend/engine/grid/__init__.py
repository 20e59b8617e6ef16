"""Grid connection and tariff module."""

from .tariff import CO2_INTENSITY, ENERGY_PRICES, EXPORT_PRICE_RATIO, HourlyTariff
from .grid_connection import GridConnection

__all__ = [
    "CO2_INTENSITY",
    "ENERGY_PRICES",
    "EXPORT_PRICE_RATIO",
    "HourlyTariff",
    "GridConnection",
]

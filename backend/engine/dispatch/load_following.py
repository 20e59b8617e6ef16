"""Load-following dispatch for a household with battery and grid.

On-site generation serves the load first.  What is left over cascades
through the battery and the grid in a fixed priority order:

**Surplus priority:** generation -> load -> battery charge -> grid export
**Deficit priority:** battery discharge -> grid import

The grid is unconstrained, so there is never curtailment or unmet load.
"""

from __future__ import annotations

from engine.battery.battery_system import BatterySystem
from engine.grid.grid_connection import GridConnection


def dispatch_load_following(
    generation_kwh: float,
    consumption_kwh: float,
    battery: BatterySystem,
    grid: GridConnection,
    hour: int,
) -> dict[str, float]:
    """Balance one hour of generation against consumption.

    Parameters
    ----------
    generation_kwh : float
        Total on-site generation for the hour.
    consumption_kwh : float
        Total appliance consumption for the hour.
    battery : BatterySystem
        Household battery; mutated in place.
    grid : GridConnection
        Grid meter; its accumulators are updated.
    hour : int
        Hour of day, 0 -- 23, used for tariff lookups.

    Returns
    -------
    dict[str, float]
        Keys ``battery_charge``, ``battery_discharge``, ``battery_level``,
        ``grid_import``, ``grid_export``, ``cost`` and ``co2``.  At most one
        of ``grid_import`` / ``grid_export`` is non-zero.
    """
    result: dict[str, float] = {
        "battery_charge": 0.0,
        "battery_discharge": 0.0,
        "battery_level": 0.0,
        "grid_import": 0.0,
        "grid_export": 0.0,
        "cost": 0.0,
        "co2": 0.0,
    }

    balance = generation_kwh - consumption_kwh  # positive = surplus

    if balance > 0:
        # ----- SURPLUS -----------------------------------------------------
        surplus = balance

        # 1) Charge battery
        charged = battery.charge(surplus)
        result["battery_charge"] = charged
        surplus -= charged

        # 2) Export the rest
        if surplus > 0:
            exported, revenue = grid.export_power(surplus, hour)
            result["grid_export"] = exported
            result["cost"] = -revenue

    else:
        # ----- DEFICIT -----------------------------------------------------
        deficit = -balance

        # 1) Discharge battery
        discharged = battery.discharge(deficit)
        result["battery_discharge"] = discharged
        deficit -= discharged

        # 2) Import the rest
        if deficit > 0:
            imported, cost, co2 = grid.import_power(deficit, hour)
            result["grid_import"] = imported
            result["cost"] = cost
            result["co2"] = co2

    result["battery_level"] = battery.level_kwh
    return result

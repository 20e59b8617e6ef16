"""Default household set-up.

A typical household: 5 kW of rooftop solar, a 10 kWh battery, and four
appliances, one of which is an electric car charging overnight.  Used as the
starting point of the configuration form and as a ready-made scenario in
tests and examples.
"""

from __future__ import annotations

from typing import Any, Optional

from engine.generation.sources import EnergySourceConfig, SourceType
from engine.load.load_model import Appliance
from engine.simulation.models import SimulationConfig

# ======================================================================
# Presets
# ======================================================================

HOUSEHOLD_PRESETS: dict[str, Any] = {
    "battery_capacity_kwh": 10.0,
    "prioritize_free_energy": True,
    "sources": [
        {"type": "solar", "capacity_kw": 5.0, "is_active": True},
        {"type": "wind", "capacity_kw": 2.0, "is_active": False},
        {"type": "heat_pump", "capacity_kw": 0.0, "is_active": False, "efficiency": 3.0},
        {"type": "kinetic", "capacity_kw": 0.1, "is_active": False},
    ],
    "appliances": [
        # name, power (kW), duration (h), start hour, flexible
        ("Washing machine", 2.0, 2, 10, True),
        ("Dishwasher", 1.5, 2, 20, True),
        ("Electric car", 7.0, 4, 23, True),
        ("Base load", 0.3, 24, 0, False),
    ],
}


# ======================================================================
# Builders
# ======================================================================

def default_sources() -> list[EnergySourceConfig]:
    """One config per source kind; only solar is switched on."""
    return [
        EnergySourceConfig(
            type=SourceType(src["type"]),
            capacity_kw=src["capacity_kw"],
            is_active=src["is_active"],
            efficiency=src.get("efficiency"),
        )
        for src in HOUSEHOLD_PRESETS["sources"]
    ]


def default_appliances() -> list[Appliance]:
    """The four preset appliances with ids ``appliance-0`` .. ``appliance-3``."""
    return [
        Appliance(
            id=f"appliance-{i}",
            name=name,
            power_kw=power,
            duration_h=duration,
            start_hour=start,
            flexible=flexible,
        )
        for i, (name, power, duration, start, flexible) in enumerate(
            HOUSEHOLD_PRESETS["appliances"]
        )
    ]


def default_config(seed: Optional[int] = None) -> SimulationConfig:
    """Complete preset configuration, optionally with a fixed weather seed."""
    return SimulationConfig(
        energy_sources=default_sources(),
        battery_capacity_kwh=HOUSEHOLD_PRESETS["battery_capacity_kwh"],
        appliances=default_appliances(),
        prioritize_free_energy=HOUSEHOLD_PRESETS["prioritize_free_energy"],
        seed=seed,
    )

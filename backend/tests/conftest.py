"""Shared test fixtures for SmartGrid engine and API tests."""

from __future__ import annotations

import numpy as np
import pytest

from engine.generation.profile import HOURS_PER_DAY, GenerationProfile
from engine.generation.sources import EnergySourceConfig, SourceType
from engine.load.load_model import Appliance
from engine.simulation.models import SimulationConfig


# ======================================================================
# Generation fixtures
# ======================================================================

@pytest.fixture
def flat_profile() -> GenerationProfile:
    """Deterministic profile: real solar curve, wind and kinetic fixed at 0.5."""
    seeded = GenerationProfile.from_seed(0)
    return GenerationProfile(
        solar=seeded.solar,
        wind=np.full(HOURS_PER_DAY, 0.5),
        heat_pump=np.ones(HOURS_PER_DAY),
        kinetic=np.full(HOURS_PER_DAY, 0.5),
    )


@pytest.fixture
def seeded_profile() -> GenerationProfile:
    """Random wind/kinetic shapes drawn from a fixed seed."""
    return GenerationProfile.from_seed(42)


# ======================================================================
# Source fixtures
# ======================================================================

@pytest.fixture
def solar_5kw() -> EnergySourceConfig:
    """5 kW rooftop solar, switched on."""
    return EnergySourceConfig(type=SourceType.SOLAR, capacity_kw=5.0, is_active=True)


@pytest.fixture
def all_sources() -> list[EnergySourceConfig]:
    """One active source of every kind."""
    return [
        EnergySourceConfig(type=SourceType.SOLAR, capacity_kw=5.0),
        EnergySourceConfig(type=SourceType.WIND, capacity_kw=2.0),
        EnergySourceConfig(type=SourceType.HEAT_PUMP, capacity_kw=1.0, efficiency=3.0),
        EnergySourceConfig(type=SourceType.KINETIC, capacity_kw=0.1),
    ]


# ======================================================================
# Appliance fixtures
# ======================================================================

@pytest.fixture
def base_load() -> Appliance:
    """Always-on 0.3 kW household base load."""
    return Appliance(
        id="base", name="Base load", power_kw=0.3, duration_h=24, start_hour=0, flexible=False
    )


@pytest.fixture
def washing_machine() -> Appliance:
    """2 kW for 2 hours, evening start, movable."""
    return Appliance(
        id="wm", name="Washing machine", power_kw=2.0, duration_h=2, start_hour=20, flexible=True
    )


@pytest.fixture
def electric_car() -> Appliance:
    """7 kW for 4 hours from 23:00, runs past midnight."""
    return Appliance(
        id="ev", name="Electric car", power_kw=7.0, duration_h=4, start_hour=23, flexible=True
    )


@pytest.fixture
def household(base_load, washing_machine, electric_car) -> list[Appliance]:
    return [washing_machine, electric_car, base_load]


# ======================================================================
# Config fixtures
# ======================================================================

@pytest.fixture
def solar_config(solar_5kw) -> SimulationConfig:
    """Solar only, no battery."""
    return SimulationConfig(energy_sources=[solar_5kw], battery_capacity_kwh=0.0)


@pytest.fixture
def solar_battery_config(solar_5kw) -> SimulationConfig:
    """Solar with a 10 kWh battery."""
    return SimulationConfig(energy_sources=[solar_5kw], battery_capacity_kwh=10.0)

from fastapi import APIRouter

from app.schemas.simulation import (
    ApplianceSchema,
    EnergySourceSchema,
    SimulationRequest,
)
from engine.presets import default_config

router = APIRouter()


@router.get(
    "/default",
    response_model=SimulationRequest,
    summary="Default household",
    description="Preset sources, battery and appliances used to pre-fill a new configuration.",
)
async def get_default_preset():
    config = default_config()
    return SimulationRequest(
        energy_sources=[EnergySourceSchema.model_validate(s) for s in config.energy_sources],
        battery_capacity_kwh=config.battery_capacity_kwh,
        appliances=[ApplianceSchema.model_validate(a) for a in config.appliances],
        prioritize_free_energy=config.prioritize_free_energy,
        seed=config.seed,
        wrap_midnight=config.wrap_midnight,
    )

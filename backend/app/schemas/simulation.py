from __future__ import annotations

from pydantic import BaseModel, Field

from engine.economics.comparison import ComparisonResult
from engine.generation.sources import EnergySourceConfig, SourceType
from engine.load.load_model import Appliance
from engine.simulation.models import SimulationConfig, SimulationResult


class EnergySourceSchema(BaseModel):
    type: SourceType
    capacity_kw: float = Field(ge=0)
    is_active: bool = True
    efficiency: float | None = Field(default=None, ge=0)

    model_config = {"from_attributes": True, "allow_inf_nan": False}

    def to_engine(self) -> EnergySourceConfig:
        return EnergySourceConfig(
            type=self.type,
            capacity_kw=self.capacity_kw,
            is_active=self.is_active,
            efficiency=self.efficiency,
        )


class ApplianceSchema(BaseModel):
    id: str = Field(min_length=1, max_length=64)
    name: str = Field(max_length=255)
    power_kw: float = Field(gt=0)
    duration_h: int = Field(ge=1, le=24)
    start_hour: int = Field(ge=0, le=23)
    flexible: bool = True

    model_config = {"from_attributes": True, "allow_inf_nan": False}

    def to_engine(self) -> Appliance:
        return Appliance(
            id=self.id,
            name=self.name,
            power_kw=self.power_kw,
            duration_h=self.duration_h,
            start_hour=self.start_hour,
            flexible=self.flexible,
        )


class ApplianceResponse(ApplianceSchema):
    end_hour: int


class SimulationRequest(BaseModel):
    energy_sources: list[EnergySourceSchema] = Field(default_factory=list)
    battery_capacity_kwh: float = Field(default=0.0, ge=0)
    appliances: list[ApplianceSchema] = Field(default_factory=list, max_length=50)
    prioritize_free_energy: bool = True
    seed: int | None = Field(default=None, ge=0)
    wrap_midnight: bool = False

    model_config = {"allow_inf_nan": False}

    def to_engine(self, default_seed: int | None = None) -> tuple[SimulationConfig, list[Appliance]]:
        appliances = [a.to_engine() for a in self.appliances]
        config = SimulationConfig(
            energy_sources=[s.to_engine() for s in self.energy_sources],
            battery_capacity_kwh=self.battery_capacity_kwh,
            appliances=appliances,
            prioritize_free_energy=self.prioritize_free_energy,
            seed=self.seed if self.seed is not None else default_seed,
            wrap_midnight=self.wrap_midnight,
        )
        return config, appliances


class HourlyDataResponse(BaseModel):
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

    model_config = {"from_attributes": True}


class SimulationResultResponse(BaseModel):
    hourly_data: list[HourlyDataResponse]
    total_cost: float
    total_co2: float
    total_consumption: float
    total_generation: float
    self_sufficiency: float
    grid_import: float
    grid_export: float
    battery_level: float
    free_energy_used: float

    model_config = {"from_attributes": True}

    @classmethod
    def from_result(cls, result: SimulationResult) -> "SimulationResultResponse":
        return cls.model_validate(result)


class OptimizeResponse(BaseModel):
    appliances: list[ApplianceResponse]


class SourceBreakdownResponse(BaseModel):
    source: SourceType
    total_kwh: float
    percentage: float

    model_config = {"from_attributes": True}


class ComparisonResponse(BaseModel):
    normal: SimulationResultResponse
    optimized: SimulationResultResponse
    optimized_appliances: list[ApplianceResponse]
    cost_savings: float
    co2_savings: float
    cost_savings_percentage: float
    co2_savings_percentage: float
    source_breakdown: list[SourceBreakdownResponse]

    model_config = {"from_attributes": True}

    @classmethod
    def from_result(cls, result: ComparisonResult) -> "ComparisonResponse":
        return cls.model_validate(result)

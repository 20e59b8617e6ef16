import logging

from fastapi import APIRouter, HTTPException, Request, status

from app.config import settings
from app.core.rate_limit import simulation_limiter
from app.schemas.simulation import (
    ApplianceResponse,
    ComparisonResponse,
    OptimizeResponse,
    SimulationRequest,
    SimulationResultResponse,
)
from engine.economics.comparison import compare
from engine.load.load_model import Appliance
from engine.optimization.scheduler import optimize_schedule
from engine.simulation.models import SimulationConfig
from engine.simulation.runner import run_simulation

logger = logging.getLogger(__name__)

router = APIRouter()

# Engine calls are CPU-bound and synchronous, so the routes are plain ``def``
# and run in FastAPI's threadpool.


def _to_engine(body: SimulationRequest) -> tuple[SimulationConfig, list[Appliance]]:
    try:
        return body.to_engine(default_seed=settings.default_seed)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)
        ) from e


def _check_unique_ids(appliances: list[Appliance]) -> None:
    ids = [a.id for a in appliances]
    if len(ids) != len(set(ids)):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Appliance ids must be unique",
        )


@router.post(
    "/simulate",
    response_model=SimulationResultResponse,
    summary="Simulate one day",
    description="Run the 24-hour energy balance for the given household and schedule.",
)
def simulate(body: SimulationRequest):
    config, appliances = _to_engine(body)
    result = run_simulation(config, appliances)
    return SimulationResultResponse.from_result(result)


@router.post(
    "/optimize",
    response_model=OptimizeResponse,
    summary="Optimise appliance schedule",
    description="Move flexible appliances to the start hours with the lowest cost and CO2.",
)
def optimize(body: SimulationRequest, request: Request):
    simulation_limiter.check(request)
    config, appliances = _to_engine(body)
    _check_unique_ids(appliances)

    optimized = optimize_schedule(config, appliances)
    return OptimizeResponse(
        appliances=[ApplianceResponse.model_validate(a) for a in optimized]
    )


@router.post(
    "/compare",
    response_model=ComparisonResponse,
    summary="Compare normal and optimised schedules",
    description=(
        "Simulate the schedule as given, optimise it, simulate the optimised "
        "schedule and report cost and CO2 savings."
    ),
)
def compare_schedules(body: SimulationRequest, request: Request):
    simulation_limiter.check(request)
    config, appliances = _to_engine(body)
    _check_unique_ids(appliances)

    result = compare(config, appliances)
    logger.info(
        "Compared %d appliances: cost %.2f -> %.2f",
        len(appliances),
        result.normal.total_cost,
        result.optimized.total_cost,
        extra={"appliance_count": len(appliances)},
    )
    return ComparisonResponse.from_result(result)

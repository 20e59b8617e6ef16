"""Appliance schedule optimisation."""

from .scheduler import (
    CO2_WEIGHT,
    COST_WEIGHT,
    candidate_start_hours,
    optimize_schedule,
    schedule_score,
)

__all__ = [
    "CO2_WEIGHT",
    "COST_WEIGHT",
    "candidate_start_hours",
    "optimize_schedule",
    "schedule_score",
]

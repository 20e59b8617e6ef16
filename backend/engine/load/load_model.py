"""Household appliance loads for a single simulated day.

An appliance draws a fixed power for a whole number of hours starting at a
given hour of the day.  Consumption per hour is the sum of the power of
every appliance running in that hour.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Iterable

HOURS_PER_DAY = 24


@dataclass
class Appliance:
    """A schedulable household load.

    Parameters
    ----------
    id : str
        Opaque unique identifier.
    name : str
        Display name.
    power_kw : float
        Power draw while running, in kW (> 0).
    duration_h : int
        Run time in whole hours, 1 -- 24.
    start_hour : int
        Hour of day the appliance is switched on, 0 -- 23.
    flexible : bool
        Whether the schedule optimiser may move the start hour.
    """

    id: str
    name: str
    power_kw: float
    duration_h: int
    start_hour: int
    flexible: bool = True

    def __post_init__(self) -> None:
        if self.power_kw <= 0:
            raise ValueError(f"power_kw must be > 0, got {self.power_kw}")
        if not 1 <= self.duration_h <= HOURS_PER_DAY:
            raise ValueError(
                f"duration_h must be in [1, {HOURS_PER_DAY}], got {self.duration_h}"
            )
        if not 0 <= self.start_hour < HOURS_PER_DAY:
            raise ValueError(
                f"start_hour must be in [0, {HOURS_PER_DAY - 1}], got {self.start_hour}"
            )

    @property
    def end_hour(self) -> int:
        """Hour of day the appliance switches off (wraps past midnight)."""
        return (self.start_hour + self.duration_h) % HOURS_PER_DAY

    def with_start(self, start_hour: int) -> "Appliance":
        """Return a copy of this appliance starting at *start_hour*."""
        return dataclasses.replace(self, start_hour=start_hour)

    def is_running(self, hour: int, wrap_midnight: bool = False) -> bool:
        """Whether the appliance draws power during *hour*.

        Without *wrap_midnight* the run is cut off at the end of the day,
        so an appliance starting at 23:00 for 4 hours only runs at 23:00.
        """
        if wrap_midnight:
            return (hour - self.start_hour) % HOURS_PER_DAY < self.duration_h
        return self.start_hour <= hour < self.start_hour + self.duration_h


def copy_appliances(appliances: Iterable[Appliance]) -> list[Appliance]:
    """Shallow-copy every appliance so callers' objects are never aliased."""
    return [dataclasses.replace(a) for a in appliances]


def calculate_consumption(
    hour: int,
    appliances: Iterable[Appliance],
    wrap_midnight: bool = False,
) -> float:
    """Total power drawn by all appliances running during *hour* (kWh)."""
    return float(
        sum(a.power_kw for a in appliances if a.is_running(hour, wrap_midnight))
    )


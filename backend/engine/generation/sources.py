"""Per-hour generation from the configured on-site energy sources.

Each hourly slot has unit length, so instantaneous output in kW is booked
directly as kWh for that hour.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Optional

from .profile import GenerationProfile


class SourceType(str, enum.Enum):
    SOLAR = "solar"
    WIND = "wind"
    HEAT_PUMP = "heat_pump"
    KINETIC = "kinetic"


@dataclass
class EnergySourceConfig:
    """One on-site generation source.

    Parameters
    ----------
    type : SourceType
        Source kind.
    capacity_kw : float
        Rated capacity in kW (>= 0).
    is_active : bool
        Inactive sources produce nothing.
    efficiency : float or None
        Coefficient of performance.  Only applied to heat pumps; ``None``
        is treated as 1.
    """

    type: SourceType
    capacity_kw: float = 0.0
    is_active: bool = True
    efficiency: Optional[float] = None

    def __post_init__(self) -> None:
        self.type = SourceType(self.type)
        if self.capacity_kw < 0:
            raise ValueError(f"capacity_kw must be >= 0, got {self.capacity_kw}")
        if self.efficiency is not None and self.efficiency < 0:
            raise ValueError(f"efficiency must be >= 0, got {self.efficiency}")

    @property
    def contributes(self) -> bool:
        return self.is_active and self.capacity_kw > 0


def calculate_generation(
    hour: int,
    sources: Iterable[EnergySourceConfig],
    profile: GenerationProfile,
) -> dict[str, float]:
    """Return generation per source kind for one hour of the day.

    Parameters
    ----------
    hour : int
        Hour of day, 0 -- 23.
    sources : iterable of EnergySourceConfig
        Full source list; inactive or zero-capacity entries are skipped.
    profile : GenerationProfile
        Daily shape tables.

    Returns
    -------
    dict[str, float]
        Keys ``solar``, ``wind``, ``heat_pump``, ``kinetic`` and ``total``
        in kWh.
    """
    result: dict[str, float] = {kind.value: 0.0 for kind in SourceType}
    result["total"] = 0.0

    for source in sources:
        if not source.contributes:
            continue

        output = float(profile.shape(source.type)[hour]) * source.capacity_kw
        if source.type is SourceType.HEAT_PUMP:
            output *= source.efficiency or 1.0

        result[source.type.value] += output
        result["total"] += output

    return result

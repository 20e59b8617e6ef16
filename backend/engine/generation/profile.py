"""Daily output-shape tables for on-site generation sources.

Each source kind has a 24-entry table giving the fraction of rated capacity
produced in each hour of the day.  Solar and heat-pump shapes are fixed;
wind and kinetic shapes are drawn from a random generator once per profile
so that every simulation sharing a profile sees the same day.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

HOURS_PER_DAY = 24

SOURCE_KINDS: tuple[str, ...] = ("solar", "wind", "heat_pump", "kinetic")

# ======================================================================
# Fixed shape templates
# ======================================================================

# Solar: zero overnight, peak at noon, symmetric afternoon decline.
_SOLAR_HOURLY = np.array(
    [
        0.00, 0.00, 0.00, 0.00, 0.00, 0.00,  # 00-05
        0.05, 0.20, 0.45, 0.70, 0.85, 0.95,  # 06-11
        1.00, 0.95, 0.85, 0.70, 0.45, 0.20,  # 12-17
        0.05, 0.00, 0.00, 0.00, 0.00, 0.00,  # 18-23
    ],
    dtype=np.float64,
)

# Heat pump: runs at rated output whenever it is switched on.
_HEAT_PUMP_HOURLY = np.ones(HOURS_PER_DAY, dtype=np.float64)

# Wind output range (fraction of capacity).
WIND_RANGE: tuple[float, float] = (0.3, 1.0)

# Kinetic output ranges: busy household hours vs. the rest of the day.
KINETIC_ACTIVE_RANGE: tuple[float, float] = (0.7, 1.0)
KINETIC_IDLE_RANGE: tuple[float, float] = (0.2, 0.7)
KINETIC_ACTIVE_HOURS: frozenset[int] = frozenset([7, 8, 9, 17, 18, 19, 20, 21])


def _kinetic_shape(rng: np.random.Generator) -> NDArray[np.float64]:
    """Draw a kinetic shape: higher while people are up and moving."""
    shape = np.empty(HOURS_PER_DAY, dtype=np.float64)
    for hour in range(HOURS_PER_DAY):
        low, high = (
            KINETIC_ACTIVE_RANGE if hour in KINETIC_ACTIVE_HOURS else KINETIC_IDLE_RANGE
        )
        shape[hour] = rng.uniform(low, high)
    return shape


# ======================================================================
# GenerationProfile
# ======================================================================

@dataclass(frozen=True, eq=False)
class GenerationProfile:
    """Per-hour capacity fractions for every source kind.

    Parameters
    ----------
    solar, wind, heat_pump, kinetic : ndarray, shape (24,)
        Fraction of rated capacity produced in each hour.
    """

    solar: NDArray[np.float64]
    wind: NDArray[np.float64]
    heat_pump: NDArray[np.float64]
    kinetic: NDArray[np.float64]

    def __post_init__(self) -> None:
        for name in SOURCE_KINDS:
            shape = np.asarray(getattr(self, name), dtype=np.float64)
            if shape.shape != (HOURS_PER_DAY,):
                raise ValueError(
                    f"{name} shape must have {HOURS_PER_DAY} values, got {shape.shape}"
                )
            if np.any(shape < 0):
                raise ValueError(f"{name} shape must be non-negative")
            # Frozen dataclass: bypass __setattr__ to store the coerced array.
            object.__setattr__(self, name, shape)

    @classmethod
    def from_seed(cls, seed: Optional[int] = None) -> "GenerationProfile":
        """Build a profile whose wind and kinetic tables come from *seed*.

        ``seed=None`` draws fresh entropy, so two unseeded profiles differ.
        """
        if seed is not None and seed < 0:
            raise ValueError(f"seed must be >= 0, got {seed}")
        rng = np.random.default_rng(seed)
        wind = rng.uniform(WIND_RANGE[0], WIND_RANGE[1], HOURS_PER_DAY)
        return cls(
            solar=_SOLAR_HOURLY.copy(),
            wind=wind,
            heat_pump=_HEAT_PUMP_HOURLY.copy(),
            kinetic=_kinetic_shape(rng),
        )

    def shape(self, source_type: str) -> NDArray[np.float64]:
        """Return the 24-hour shape for *source_type*."""
        key = getattr(source_type, "value", source_type)
        if key not in SOURCE_KINDS:
            raise ValueError(f"Unknown source type '{source_type}'")
        return getattr(self, key)

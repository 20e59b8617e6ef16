"""On-site generation: daily shape tables and per-hour source output."""

from .profile import HOURS_PER_DAY, SOURCE_KINDS, GenerationProfile
from .sources import EnergySourceConfig, SourceType, calculate_generation

__all__ = [
    "HOURS_PER_DAY",
    "SOURCE_KINDS",
    "GenerationProfile",
    "EnergySourceConfig",
    "SourceType",
    "calculate_generation",
]

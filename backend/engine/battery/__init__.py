"""Battery storage engine -- bounded charge / discharge bookkeeping."""

from .battery_system import BatterySystem

__all__ = ["BatterySystem"]

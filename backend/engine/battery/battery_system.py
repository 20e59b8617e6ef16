"""
Household battery storage with lossless energy bookkeeping.

``BatterySystem`` is the storage model used by the dispatch step.  It
exposes a simple ``charge`` / ``discharge`` interface that never lets the
stored energy leave ``[0, capacity_kwh]``: a request that would overflow or
drain the battery is clamped and the accepted amount is returned.
"""

from __future__ import annotations


class BatterySystem:
    """Ideal battery: no losses, no power limit, hard energy bounds.

    Parameters
    ----------
    capacity_kwh : float
        Usable energy capacity in kWh (>= 0).  A zero-capacity battery
        accepts and delivers nothing.
    initial_soc : float
        Starting state of charge as a fraction of capacity.  Default 0.50.
    """

    def __init__(self, capacity_kwh: float, initial_soc: float = 0.50) -> None:
        if capacity_kwh < 0:
            raise ValueError(f"capacity_kwh must be >= 0, got {capacity_kwh}")
        if not 0.0 <= initial_soc <= 1.0:
            raise ValueError(f"initial_soc must be in [0, 1], got {initial_soc}")

        self.capacity_kwh: float = float(capacity_kwh)
        self._level: float = self.capacity_kwh * initial_soc

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def level_kwh(self) -> float:
        """Energy currently stored, in kWh."""
        return self._level

    @property
    def headroom_kwh(self) -> float:
        """Energy the battery can still accept, in kWh."""
        return self.capacity_kwh - self._level

    def charge(self, energy_kwh: float) -> float:
        """Store up to *energy_kwh*.

        Returns
        -------
        float
            Energy actually accepted (>= 0), limited by the headroom.
        """
        accepted = min(self.headroom_kwh, max(energy_kwh, 0.0))
        self._level = min(self._level + accepted, self.capacity_kwh)
        return accepted

    def discharge(self, energy_kwh: float) -> float:
        """Release up to *energy_kwh*.

        Returns
        -------
        float
            Energy actually delivered (>= 0), limited by the stored level.
        """
        delivered = min(self._level, max(energy_kwh, 0.0))
        self._level -= delivered
        return delivered

    def __repr__(self) -> str:
        return (
            f"BatterySystem(level={self._level:.2f}/{self.capacity_kwh:.2f} kWh)"
        )

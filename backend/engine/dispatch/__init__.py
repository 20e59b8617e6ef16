"""Dispatch strategy for household energy balancing.

* **load_following** -- generation first, then battery, then grid.
"""

from .load_following import dispatch_load_following

__all__ = ["dispatch_load_following"]

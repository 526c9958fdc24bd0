"""Energy management for the simulated drone.

Components:
    BatteryStatus: Percentage battery level with per-tick drain, floored at 0
"""

from .battery import EMPTY_LEVEL, FULL_LEVEL, BatteryStatus

__all__ = ["BatteryStatus", "EMPTY_LEVEL", "FULL_LEVEL"]

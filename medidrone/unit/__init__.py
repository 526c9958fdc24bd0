"""Type-safe units used by the simulator.

Only time quantities are modelled as units: tick length, grace windows, report
delays and the mission timer. Plane coordinates, altitude and battery level are
plain floats because the simulation plane has no physical scale.
"""

from .unit_base import Number, Unit
from .unit_float import UnitFloat
from .unit_time import ClockTime, Second, Time

__all__ = [
    "Unit",
    "UnitFloat",
    "Number",
    "Second",
    "ClockTime",
    "Time",
]

"""Time units for the simulation clock and scheduled effects.

All time units share ``Second`` as family root and store seconds internally.

Example:
    >>> grace = Second(5)
    >>> float(grace / 2)
    2.5
    >>> str(ClockTime(3725.5))
    '01:02:05.500'
"""

from __future__ import annotations

from math import isfinite

from .unit_float import UnitFloat


class Second(UnitFloat):
    """Time unit: second (SI base unit for time)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "s"


class ClockTime(Second):
    """Elapsed time rendered as ``HH:MM:SS.sss``.

    Used for the mission timer, which the presentation layer shows as a
    running clock.
    """

    SCALE_TO_SI = 1.0

    def __str__(self) -> str:
        if not isfinite(float(self)):
            return "--:--:--"
        h, r = divmod(float(self), 3600)
        m, s = divmod(r, 60)
        return f"{int(h):02d}:{int(m):02d}:{s:06.3f}"

    def __repr__(self) -> str:
        return f"ClockTime({str(self)})"


Time = Second | ClockTime

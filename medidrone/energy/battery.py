"""Battery level tracking for the drone.

The demo does not model energy in physical units: the battery is a percentage
that drains by a fixed amount every tick while the drone is flying. It never
recharges during a simulator's lifetime; successive missions fly on whatever
charge is left.
"""

import math

from medidrone.errors import ConfigurationError

FULL_LEVEL = 100.0
EMPTY_LEVEL = 0.0


class BatteryStatus:
    """Battery charge as a percentage in ``[0, 100]``.

    Attributes:
        _level (float): Current charge in percent.
    """

    _level: float

    def __init__(self, level: float):
        """Initialize with a starting charge.

        Args:
            level (float): Initial charge in percent.

        Raises:
            ConfigurationError: If the level is not a finite value in [0, 100].
        """
        if not math.isfinite(level) or not EMPTY_LEVEL <= level <= FULL_LEVEL:
            msg = f"Battery level must be within [0, 100]: {level}"
            raise ConfigurationError(msg)
        self._level = float(level)

    @property
    def percentage(self) -> float:
        return self._level

    def drain(self, rate: float) -> bool:
        """Consume ``rate`` percent, flooring the level at zero.

        Args:
            rate (float): Non-negative amount to remove.

        Returns:
            bool: True if this call emptied the battery, False otherwise
                (including when it was already empty).

        Raises:
            ValueError: If ``rate`` is negative.
        """
        if rate < 0.0:
            msg = "Drain rate cannot be negative"
            raise ValueError(msg)
        was_empty = self.is_empty()
        self._level = max(EMPTY_LEVEL, self._level - rate)
        return not was_empty and self.is_empty()

    def is_empty(self) -> bool:
        return self._level <= EMPTY_LEVEL

    def __repr__(self) -> str:
        return f"BatteryStatus({self._level:.4f}%)"

"""Countdown timer advanced by the simulation tick.

Timers never read the wall clock. The owner advances them by the tick length,
which keeps delayed effects deterministic under test.

Example:
    >>> timer = Timer(Second(0.3))
    >>> for _ in range(3):
    ...     timer.advance(Second(0.1))
    >>> timer.done
    True
"""

from medidrone.unit import Second, Time

# Absorbs float drift from repeatedly subtracting the tick length.
_DONE_TOLERANCE = Second(1e-9)


class Timer:
    """Countdown timer for scheduled effects.

    Note:
        Timer instances should not be reused; create a new one for each
        delayed effect.

    Attributes:
        _duration (Time): Remaining time. Reaches zero when the timer is done.
    """

    _duration: Time

    def __init__(self, duration: Time) -> None:
        """Initialize the timer.

        Args:
            duration (Time): Initial countdown duration, non-negative.

        Raises:
            ValueError: If the duration is negative.
        """
        if float(duration) < 0.0:
            msg = f"Timer duration cannot be negative: {duration}"
            raise ValueError(msg)
        self._duration = duration

    @property
    def duration(self) -> Time:
        """Remaining time before the timer is done."""
        return self._duration

    @property
    def done(self) -> bool:
        return self._duration <= _DONE_TOLERANCE

    def advance(self, delta: Time) -> None:
        """Count down by ``delta``."""
        self._duration -= delta

    def reset(self, duration: Time) -> None:
        """Restart the countdown from ``duration``."""
        self._duration = duration

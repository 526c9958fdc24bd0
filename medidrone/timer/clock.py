"""Simulation clock shared by the simulator and the vehicle.

The clock counts ticks; simulated time is derived as ``ticks * dt`` instead of
being accumulated, so it does not drift over long runs.
"""

from medidrone.unit import ClockTime, Time


class SimulationClock:
    """Fixed-step clock.

    Attributes:
        dt (Time): Length of one tick.
        ticks (int): Number of ticks elapsed since the clock was created.
    """

    def __init__(self, dt: Time) -> None:
        if float(dt) <= 0.0:
            msg = f"Tick length must be positive: {dt}"
            raise ValueError(msg)
        self.dt = dt
        self.ticks = 0

    @property
    def now(self) -> ClockTime:
        """Current simulated time."""
        return ClockTime.from_si(self.ticks * float(self.dt))

    def advance(self) -> None:
        self.ticks += 1

    def since(self, earlier: Time) -> ClockTime:
        """Simulated time elapsed since ``earlier``."""
        return ClockTime.from_si(max(0.0, float(self.now) - float(earlier)))

"""Simulation time management.

Components:
    SimulationClock: Fixed-step tick counter with derived simulated time
    Timer: Countdown timer advanced by the tick driver
    ScheduledEffect: Delayed effect with a fire-time precondition
"""

from .clock import SimulationClock
from .scheduled import EffectFn, Precondition, ScheduledEffect
from .timer import Timer

__all__ = [
    "SimulationClock",
    "Timer",
    "ScheduledEffect",
    "EffectFn",
    "Precondition",
]

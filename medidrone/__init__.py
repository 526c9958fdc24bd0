"""Medical delivery drone mission simulator.

A single drone flies a six-waypoint delivery plan (takeoff, two navigation
legs, delivery zone, return waypoint, landing) through a validated mission
phase state machine, driven by a fixed-rate tick.

Package Layout:
    • medidrone.mission: Waypoint plans, mission catalog, payload, reports
    • medidrone.vehicles: Drone, vehicle state, motion, telemetry
    • medidrone.state: Validated finite state machine
    • medidrone.timer: Simulation clock, timers, scheduled effects
    • medidrone.energy: Battery model
    • medidrone.simulator: Public facade, mission log, recorder, cosmetic environment
    • medidrone.unit: Type-safe time units

Quick Start:
    >>> from medidrone import MissionSimulator
    >>> sim = MissionSimulator(seed=1)
    >>> selected = sim.select_mission(1)
    >>> started = sim.initiate_flight()
    >>> events = sim.run(max_ticks=5000)
"""

from .errors import ConfigurationError, MediDroneError, PreconditionError
from .events import Event, EventType
from .simulator import CommandResult, MissionSimulator
from .vehicles import Command, MissionPhase

__version__ = "0.1.0"

__all__ = [
    "MissionSimulator",
    "CommandResult",
    "Command",
    "MissionPhase",
    "Event",
    "EventType",
    "MediDroneError",
    "PreconditionError",
    "ConfigurationError",
]

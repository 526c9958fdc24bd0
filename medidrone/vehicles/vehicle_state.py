"""Mutable vehicle state and its read-only snapshot.

``VehicleState`` is the single record the core functions operate on: the
motion integrator, telemetry derivation and battery drain all take it as an
explicit argument. It is created once per simulator and survives across
missions; selecting a mission replaces its plan and resets the waypoint
cursor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from medidrone.energy import BatteryStatus
from medidrone.geo import Position
from medidrone.mission import MissionScenario, Waypoint


class MissionPhase(Enum):
    READY = "ready"
    TAKEOFF = "takeoff"
    NAVIGATION = "navigation"
    DELIVERY = "delivery"
    RETURN = "return"
    COMPLETED = "completed"
    EMERGENCY = "emergency"


FLYING_PHASES = frozenset(
    {MissionPhase.TAKEOFF, MissionPhase.NAVIGATION, MissionPhase.DELIVERY, MissionPhase.RETURN}
)
"""Phases in which the vehicle is airborne (possibly paused)."""

TERMINAL_PHASES = frozenset({MissionPhase.COMPLETED, MissionPhase.EMERGENCY})


@dataclass
class VehicleState:
    """Everything the simulation mutates about the drone.

    Attributes:
        position (Position): Current plane position.
        battery (BatteryStatus): Battery charge, drained while flying.
        altitude (float): Meters above ground, never negative.
        speed (float): Derived ground speed, never negative.
        heading (float): Degrees in ``[0, 360)``.
        is_flying (bool): True while the drone advances along its plan. A
            pause clears it without changing the phase.
        mission_phase (MissionPhase): Current phase of the mission.
        waypoints (tuple[Waypoint, ...]): The active plan.
        current_waypoint_index (int): Cursor into ``waypoints``; only grows
            during a mission and never exceeds ``len(waypoints)``.
        current_mission (MissionScenario | None): The selected scenario.
    """

    position: Position
    battery: BatteryStatus
    altitude: float = 0.0
    speed: float = 0.0
    heading: float = 0.0
    is_flying: bool = False
    mission_phase: MissionPhase = MissionPhase.READY
    waypoints: tuple[Waypoint, ...] = field(default_factory=tuple)
    current_waypoint_index: int = 0
    current_mission: MissionScenario | None = None

    @property
    def battery_level(self) -> float:
        return self.battery.percentage

    @property
    def active_waypoint(self) -> Waypoint | None:
        """The waypoint the drone is heading for, or None past the plan end."""
        if self.current_waypoint_index < len(self.waypoints):
            return self.waypoints[self.current_waypoint_index]
        return None

    @property
    def plan_exhausted(self) -> bool:
        return self.current_waypoint_index >= len(self.waypoints)

    def advance_cursor_to(self, index: int) -> None:
        """Move the cursor forward to ``index``; never moves it back."""
        self.current_waypoint_index = min(
            len(self.waypoints), max(self.current_waypoint_index, index)
        )

    def snapshot(self) -> VehicleStatus:
        return VehicleStatus(
            position=self.position,
            altitude=self.altitude,
            speed=self.speed,
            heading=self.heading,
            battery_level=self.battery.percentage,
            is_flying=self.is_flying,
            mission_phase=self.mission_phase,
            waypoints=self.waypoints,
            current_waypoint_index=self.current_waypoint_index,
            mission_id=self.current_mission.id if self.current_mission else None,
        )


@dataclass(frozen=True)
class VehicleStatus:
    """Immutable snapshot of ``VehicleState`` handed to callers."""

    position: Position
    altitude: float
    speed: float
    heading: float
    battery_level: float
    is_flying: bool
    mission_phase: MissionPhase
    waypoints: tuple[Waypoint, ...]
    current_waypoint_index: int
    mission_id: int | None

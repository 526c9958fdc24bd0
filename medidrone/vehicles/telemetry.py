"""Kinematic telemetry derived from each tick's motion.

Speed and heading come from the displacement toward the active waypoint;
altitude follows a simple per-phase profile (climb after takeoff, cruise climb
while navigating, descend over the delivery zone, hold otherwise). These are
display-grade values, not a flight model.
"""

import math

from medidrone.config import (
    DELIVERY_ALTITUDE_FLOOR,
    DELIVERY_DESCENT_RATE,
    NAVIGATION_ALTITUDE_CAP,
    NAVIGATION_CLIMB_RATE,
    SPEED_CAP,
    SPEED_SCALE,
    TAKEOFF_ALTITUDE_CAP,
    TAKEOFF_CLIMB_RATE,
)
from medidrone.geo import Position

from .vehicle_state import MissionPhase, VehicleState


def derive_speed(distance: float) -> float:
    """Speed shown while closing on a waypoint: proportional, then capped."""
    return min(SPEED_CAP, distance * SPEED_SCALE)


def normalize_heading(degrees: float) -> float:
    """Wrap an angle into ``[0, 360)``."""
    heading = math.fmod(degrees, 360.0)
    if heading < 0.0:
        heading += 360.0
    # A tiny negative input wraps to exactly 360.0 after the addition.
    if heading >= 360.0:
        heading = 0.0
    return heading


def derive_heading(displacement: Position) -> float:
    """Heading of ``displacement`` in degrees, 0 along +x."""
    return normalize_heading(math.degrees(math.atan2(displacement.y, displacement.x)))


def next_altitude(phase: MissionPhase, altitude: float) -> float:
    """Altitude after one moving tick in ``phase``."""
    if phase is MissionPhase.TAKEOFF and altitude < TAKEOFF_ALTITUDE_CAP:
        return min(TAKEOFF_ALTITUDE_CAP, altitude + TAKEOFF_CLIMB_RATE)
    if phase is MissionPhase.NAVIGATION and altitude < NAVIGATION_ALTITUDE_CAP:
        return min(NAVIGATION_ALTITUDE_CAP, altitude + NAVIGATION_CLIMB_RATE)
    if phase is MissionPhase.DELIVERY and altitude > DELIVERY_ALTITUDE_FLOOR:
        return max(DELIVERY_ALTITUDE_FLOOR, altitude - DELIVERY_DESCENT_RATE)
    return altitude


def apply_telemetry(state: VehicleState, displacement: Position, distance: float) -> None:
    """Update speed, heading and altitude of ``state`` for a moving tick.

    Args:
        state (VehicleState): Vehicle to update in place.
        displacement (Position): Vector from the position before the move to
            the active waypoint.
        distance (float): Length of ``displacement``.
    """
    state.speed = derive_speed(distance)
    state.heading = derive_heading(displacement)
    state.altitude = next_altitude(state.mission_phase, state.altitude)

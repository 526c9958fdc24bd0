"""Waypoint-following motion integrator and per-tick battery drain.

Each tick the drone either moves a fixed ``STEP_SIZE`` toward the active
waypoint or, when it is within ``ARRIVAL_EPSILON`` of it, registers the
arrival and advances the cursor. Arrival and movement never happen in the same
tick: the tick that detects an arrival leaves the position untouched.

The step is a fixed distance per tick, not scaled by the tick length, so the
drone's simulated speed depends on the rate of the driver.
"""

from medidrone.config import ARRIVAL_EPSILON, DRAIN_RATE, STEP_SIZE
from medidrone.geo import Position
from medidrone.mission import Waypoint

from .telemetry import apply_telemetry
from .vehicle_state import VehicleState


def step_toward(position: Position, target: Position, step: float = STEP_SIZE) -> Position:
    """Move ``position`` by ``step`` along the straight line to ``target``.

    ``position`` must differ from ``target``.
    """
    d = target - position
    dist = d.norm
    return Position(position.x + d.x / dist * step, position.y + d.y / dist * step)


def advance(state: VehicleState) -> Waypoint | None:
    """Advance ``state`` by one tick along its plan.

    Args:
        state (VehicleState): Vehicle to move in place.

    Returns:
        Waypoint | None: The waypoint reached on this tick, if any. The cursor
            has already been moved past it; the caller runs the arrival
            handling. None when the drone moved, is not flying, or has
            exhausted its plan.
    """
    target = state.active_waypoint
    if not state.is_flying or target is None:
        return None

    d = target.position - state.position
    dist = d.norm
    if dist > ARRIVAL_EPSILON:
        state.position = step_toward(state.position, target.position)
        apply_telemetry(state, d, dist)
        return None

    # Covers dist == 0 as well, so step_toward never divides by zero.
    state.current_waypoint_index += 1
    return target


def drain_battery(state: VehicleState, rate: float = DRAIN_RATE) -> bool:
    """Drain the battery for one flying tick.

    Returns:
        bool: True if this tick emptied the battery.
    """
    if not state.is_flying:
        return False
    return state.battery.drain(rate)

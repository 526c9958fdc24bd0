"""Waypoint plan construction for a delivery mission.

Every mission flies the same six-leg shape: climb out from home, two
navigation legs, the delivery zone, a return waypoint and the landing zone.
The plan is derived from the home position and the delivery target only:

    0  TAKEOFF     home + TAKEOFF_OFFSET
    1  NAVIGATION  target scaled by NAVIGATION_SCALES[0] per axis
    2  NAVIGATION  target scaled by NAVIGATION_SCALES[1] per axis
    3  DELIVERY    target
    4  RETURN      home + RETURN_OFFSET
    5  LANDING     home

The navigation legs scale each axis of the target by a different factor, which
bends the approach instead of flying a straight line to the target.

Example:
    >>> plan = build_plan(Position(50, 280), Position(200, 100))
    >>> plan[0].position, plan[3].position
    (Position(x=100.0, y=230.0), Position(x=200, y=100))
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import random

from medidrone.config import (
    NAVIGATION_SCALES,
    RETURN_OFFSET,
    TAKEOFF_OFFSET,
    TARGET_X_RANGE,
    TARGET_Y_RANGE,
)
from medidrone.errors import ConfigurationError
from medidrone.geo import Position

PLAN_LENGTH = 6


class PhaseTag(Enum):
    """Role of a waypoint; decides what happens when the drone reaches it."""

    TAKEOFF = "takeoff"
    NAVIGATION = "navigation"
    DELIVERY = "delivery"
    RETURN = "return"
    LANDING = "landing"


@dataclass(frozen=True)
class Waypoint:
    """A fixed point of the mission plan.

    Attributes:
        position (Position): Where the waypoint is.
        phase_tag (PhaseTag): What reaching it triggers.
        label (str): Human-readable name for logs and displays.
    """

    position: Position
    phase_tag: PhaseTag
    label: str


def build_plan(origin: Position, target: Position) -> tuple[Waypoint, ...]:
    """Build the six-waypoint plan from ``origin`` to ``target`` and back.

    Args:
        origin (Position): Home position; the plan takes off from and lands on it.
        target (Position): Delivery zone.

    Returns:
        tuple[Waypoint, ...]: The ordered plan, always ``PLAN_LENGTH`` long.

    Raises:
        ConfigurationError: If either position has a non-finite coordinate.
    """
    for name, point in (("origin", origin), ("target", target)):
        if not point.is_finite():
            msg = f"Plan {name} has non-finite coordinates: {point}"
            raise ConfigurationError(msg)

    (sx1, sy1), (sx2, sy2) = NAVIGATION_SCALES
    return (
        Waypoint(origin + TAKEOFF_OFFSET, PhaseTag.TAKEOFF, "Takeoff Point"),
        Waypoint(target.scaled(sx1, sy1), PhaseTag.NAVIGATION, "Navigation Waypoint 1"),
        Waypoint(target.scaled(sx2, sy2), PhaseTag.NAVIGATION, "Navigation Waypoint 2"),
        Waypoint(target, PhaseTag.DELIVERY, "Delivery Zone"),
        Waypoint(origin + RETURN_OFFSET, PhaseTag.RETURN, "Return Waypoint"),
        Waypoint(origin, PhaseTag.LANDING, "Landing Zone"),
    )


def pick_target(rng: random.Random) -> Position:
    """Draw a delivery target uniformly inside the configured target box."""
    x_lo, x_hi = TARGET_X_RANGE
    y_lo, y_hi = TARGET_Y_RANGE
    return Position(x_lo + rng.random() * (x_hi - x_lo), y_lo + rng.random() * (y_hi - y_lo))


def index_of(plan: tuple[Waypoint, ...], tag: PhaseTag) -> int | None:
    """Index of the first waypoint tagged ``tag``, or None."""
    for i, waypoint in enumerate(plan):
        if waypoint.phase_tag is tag:
            return i
    return None

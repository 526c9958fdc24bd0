"""Points on the simulation plane.

The demo flies over a flat, unitless plane (screen-like coordinates: ``x``
grows to the right, ``y`` grows downwards). ``Position`` is immutable; the
motion integrator replaces the vehicle's position each tick rather than
mutating it, so snapshots taken earlier stay valid.
"""

from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True, slots=True)
class Position:
    """A 2D point ``(x, y)`` in simulation-plane units.

    Attributes:
        x (float): Horizontal coordinate.
        y (float): Vertical coordinate (screen convention, down is positive).
    """

    x: float
    y: float

    def __add__(self, other: Position) -> Position:
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Position) -> Position:
        return Position(self.x - other.x, self.y - other.y)

    def scaled(self, sx: float, sy: float) -> Position:
        """Return this point with each axis scaled independently."""
        return Position(self.x * sx, self.y * sy)

    @property
    def norm(self) -> float:
        """Euclidean length of the point seen as a vector."""
        return math.hypot(self.x, self.y)

    def distance_to(self, other: Position) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

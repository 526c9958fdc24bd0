"""Plane geometry for the simulator.

Components:
    Position: Immutable 2D point with vector helpers.
"""

from .position import Position

__all__ = ["Position"]

"""Per-tick flight recorder.

Samples one row per tick from the vehicle snapshot and turns the track into a
pandas DataFrame for export or analysis.

Example:
    >>> df = simulator.recorder.to_dataframe()
    >>> df.loc[df["phase"] == "navigation", "altitude"].max()
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd

from medidrone.unit import ClockTime
from medidrone.vehicles import VehicleStatus

COLUMNS = (
    "tick",
    "time",
    "x",
    "y",
    "altitude",
    "speed",
    "heading",
    "battery",
    "phase",
    "waypoint_index",
)


@dataclass(frozen=True)
class FlightSummary:
    samples: int
    max_altitude: float
    mean_moving_speed: float
    distance: float
    battery_used: float


class FlightRecorder:
    """Collects ``VehicleStatus`` samples keyed by tick."""

    def __init__(self):
        self._rows: list[tuple] = []

    def sample(self, tick: int, time: ClockTime, status: VehicleStatus) -> None:
        self._rows.append(
            (
                tick,
                float(time),
                status.position.x,
                status.position.y,
                status.altitude,
                status.speed,
                status.heading,
                status.battery_level,
                status.mission_phase.value,
                status.current_waypoint_index,
            )
        )

    def clear(self) -> None:
        self._rows.clear()

    def __len__(self) -> int:
        return len(self._rows)

    def to_dataframe(self) -> pd.DataFrame:
        """The recorded track, one row per tick, indexed by tick."""
        return pd.DataFrame(self._rows, columns=list(COLUMNS)).set_index("tick")

    def summary(self) -> FlightSummary:
        """Aggregate figures over the recorded track."""
        if not self._rows:
            return FlightSummary(0, 0.0, 0.0, 0.0, 0.0)

        track = np.asarray([(r[2], r[3], r[4], r[5], r[7]) for r in self._rows], dtype=float)
        xy, altitude, speed, battery = track[:, :2], track[:, 2], track[:, 3], track[:, 4]

        moving = speed[speed > 0.0]
        steps = np.diff(xy, axis=0)
        return FlightSummary(
            samples=len(self._rows),
            max_altitude=float(np.max(altitude)),
            mean_moving_speed=float(np.mean(moving)) if moving.size else 0.0,
            distance=float(np.sum(np.hypot(steps[:, 0], steps[:, 1]))),
            battery_used=float(max(0.0, battery[0] - np.min(battery))),
        )

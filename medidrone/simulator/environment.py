"""Cosmetic environment: telemetry noise and random obstacle alerts.

Nothing here feeds back into the vehicle state. Both components draw from an
injected ``random.Random`` and are stepped by the simulator tick, so a fixed
seed reproduces the same readings.
"""

from __future__ import annotations

from dataclasses import dataclass
import random

from medidrone.config import (
    DEFAULT_PAYLOAD_TEMPERATURE,
    OBSTACLE_ALERT_DURATION,
    OBSTACLE_PROBABILITY,
    OBSTACLE_SCAN_INTERVAL,
    PAYLOAD_TEMPERATURE_RANGE,
    TELEMETRY_REFRESH_INTERVAL,
)
from medidrone.geo import Position
from medidrone.timer import Timer
from medidrone.unit import ClockTime, Time


@dataclass
class LinkTelemetry:
    """Readings shown next to the flight data; purely decorative."""

    satellites: int = 12
    gps_accuracy: float = 1.2
    signal_strength: int = 85
    latency_ms: int = 45
    payload_temperature: float = DEFAULT_PAYLOAD_TEMPERATURE


class TelemetryJitter:
    """Re-rolls the link readings every ``TELEMETRY_REFRESH_INTERVAL``.

    The payload temperature takes a small random walk, only while flying, and
    stays within ``PAYLOAD_TEMPERATURE_RANGE``.
    """

    def __init__(self, rng: random.Random, interval: Time = TELEMETRY_REFRESH_INTERVAL):
        self.rng = rng
        self.interval = interval
        self.readings = LinkTelemetry()
        self._timer = Timer(interval)

    def reset(self, payload_temperature: float) -> None:
        self.readings.payload_temperature = payload_temperature
        self._timer.reset(self.interval)

    def update(self, dt: Time, is_flying: bool) -> bool:
        """Step by ``dt``; returns True on ticks that refreshed the readings."""
        self._timer.advance(dt)
        if not self._timer.done:
            return False
        self._timer.reset(self.interval)
        self.refresh(is_flying)
        return True

    def refresh(self, is_flying: bool) -> None:
        r = self.readings
        r.satellites = 12 + self.rng.randrange(3) - 1
        r.gps_accuracy = 1.2 + (self.rng.random() - 0.5) * 0.4
        r.signal_strength = 85 + self.rng.randrange(10) - 5
        r.latency_ms = 45 + self.rng.randrange(20) - 10
        if is_flying:
            lo, hi = PAYLOAD_TEMPERATURE_RANGE
            drift = (self.rng.random() - 0.5) * 0.1
            r.payload_temperature = max(lo, min(hi, r.payload_temperature + drift))


@dataclass(frozen=True)
class ObstacleAlert:
    position: Position
    size: float
    detected_at: ClockTime
    clears_at: ClockTime

    message = "LiDAR: Obstacle detected - autonomous avoidance engaged"


class ObstacleMonitor:
    """Rolls for a random obstacle every ``OBSTACLE_SCAN_INTERVAL`` while flying.

    Alerts stay active for ``OBSTACLE_ALERT_DURATION`` and are then dropped.
    """

    def __init__(
        self,
        rng: random.Random,
        interval: Time = OBSTACLE_SCAN_INTERVAL,
        probability: float = OBSTACLE_PROBABILITY,
    ):
        if not 0.0 <= probability <= 1.0:
            msg = f"Obstacle probability must be within [0, 1]: {probability}"
            raise ValueError(msg)
        self.rng = rng
        self.interval = interval
        self.probability = probability
        self.detected = 0
        self._active: list[ObstacleAlert] = []
        self._timer = Timer(interval)

    @property
    def active_alerts(self) -> list[ObstacleAlert]:
        return list(self._active)

    def update(self, dt: Time, now: ClockTime, is_flying: bool) -> ObstacleAlert | None:
        """Step by ``dt``; returns the alert raised on this tick, if any."""
        self._active = [a for a in self._active if a.clears_at > now]

        self._timer.advance(dt)
        if not self._timer.done:
            return None
        self._timer.reset(self.interval)
        if not is_flying or self.rng.random() >= self.probability:
            return None

        alert = ObstacleAlert(
            position=Position(75 + self.rng.random() * 350, 50 + self.rng.random() * 150),
            size=15 + self.rng.random() * 25,
            detected_at=now,
            clears_at=ClockTime.from_si(float(now) + float(OBSTACLE_ALERT_DURATION)),
        )
        self._active.append(alert)
        self.detected += 1
        return alert

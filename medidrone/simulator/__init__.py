"""Simulator facade and its supporting components.

Components:
    MissionSimulator: Commands, tick driver and queries
    CommandResult: Outcome of an operator command
    MissionLog: Bounded operator-facing log
    FlightRecorder: Per-tick track with pandas export
    TelemetryJitter / ObstacleMonitor: Cosmetic environment
"""

from .environment import LinkTelemetry, ObstacleAlert, ObstacleMonitor, TelemetryJitter
from .mission_log import LogEntry, LogLevel, MissionLog
from .recorder import FlightRecorder, FlightSummary
from .simulator import CommandResult, MissionSimulator, Subscriber

__all__ = [
    "MissionSimulator",
    "CommandResult",
    "Subscriber",
    "MissionLog",
    "LogEntry",
    "LogLevel",
    "FlightRecorder",
    "FlightSummary",
    "TelemetryJitter",
    "LinkTelemetry",
    "ObstacleMonitor",
    "ObstacleAlert",
]

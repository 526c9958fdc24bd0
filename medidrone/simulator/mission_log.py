"""Operator-facing mission log.

The log keeps the most recent entries (newest first) for display and forwards
every entry to the ``medidrone.mission`` logger, so headless runs get the same
narrative through the standard logging handlers.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
import logging

from medidrone.config import LOG_CAPACITY
from medidrone.timer import SimulationClock
from medidrone.unit import ClockTime

logger = logging.getLogger("medidrone.mission")


class LogLevel(Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


_LOGGING_LEVELS = {
    LogLevel.SUCCESS: logging.INFO,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


@dataclass(frozen=True)
class LogEntry:
    time: ClockTime
    message: str
    level: LogLevel


class MissionLog:
    """Bounded, newest-first list of mission messages.

    Args:
        clock (SimulationClock): Timestamps entries with simulated time.
        capacity (int): Number of entries kept; older ones are dropped.
    """

    def __init__(self, clock: SimulationClock, capacity: int = LOG_CAPACITY):
        if capacity <= 0:
            msg = f"Log capacity must be positive: {capacity}"
            raise ValueError(msg)
        self._clock = clock
        self._entries: deque[LogEntry] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen

    @property
    def entries(self) -> list[LogEntry]:
        """Entries, newest first."""
        return list(self._entries)

    def add(self, message: str, level: LogLevel = LogLevel.INFO) -> LogEntry:
        entry = LogEntry(self._clock.now, message, level)
        self._entries.appendleft(entry)
        logger.log(_LOGGING_LEVELS[level], "[%s] %s", entry.time, message)
        return entry

    def success(self, message: str) -> LogEntry:
        return self.add(message, LogLevel.SUCCESS)

    def info(self, message: str) -> LogEntry:
        return self.add(message, LogLevel.INFO)

    def warning(self, message: str) -> LogEntry:
        return self.add(message, LogLevel.WARNING)

    def error(self, message: str) -> LogEntry:
        return self.add(message, LogLevel.ERROR)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

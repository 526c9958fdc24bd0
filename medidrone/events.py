"""Notifications emitted by the simulator core.

State transitions never call into the presentation layer directly. Instead
they queue ``Event`` records, which ``MissionSimulator.tick()`` and the
command methods hand back to the caller and push to subscribers.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Any


class EventType(Enum):
    MISSION_SELECTED = auto()
    PHASE_CHANGED = auto()
    WAYPOINT_REACHED = auto()
    PAYLOAD_DEPLOYED = auto()
    FLIGHT_PAUSED = auto()
    FLIGHT_RESUMED = auto()
    MISSION_COMPLETED = auto()
    REPORT_READY = auto()
    BATTERY_DEPLETED = auto()
    STATUS_CHANGED = auto()


@dataclass(frozen=True)
class Event:
    """A single notification.

    Events are immutable: ``data`` is a read-only view of the details. Equality
    compares all three fields; the hash covers ``type`` and ``tick`` only,
    since detail values need not be hashable.

    Attributes:
        type (EventType): What happened.
        tick (int): Clock tick on which it happened.
        data (Mapping[str, Any]): Event-specific details, e.g. ``previous`` and
            ``phase`` for ``PHASE_CHANGED`` or ``index`` and ``label`` for
            ``WAYPOINT_REACHED``.
    """

    type: EventType
    tick: int
    data: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

"""Mission outcome report.

The report is generated a few seconds after landing (and on demand) from
values measured during the flight: odometer distance, peak altitude, battery
used since takeoff and average ground speed while moving.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from medidrone.unit import ClockTime

from .catalog import MedicalSupply, MissionScenario, WeatherCondition
from .payload import PayloadStatus

STATUS_COMPLETED = "Successfully Completed"
STATUS_INCOMPLETE = "Incomplete"


@dataclass(frozen=True)
class DeliveredSupply:
    name: str
    weight_kg: float
    urgency: str


@dataclass(frozen=True)
class MissionReport:
    """Summary of a flown mission.

    Attributes:
        mission_name (str): Scenario name.
        status (str): ``STATUS_COMPLETED`` or ``STATUS_INCOMPLETE``.
        duration (ClockTime): Simulated time from takeoff to report.
        distance_travelled (float): Odometer reading in plane units.
        payload_status (str): Whether the payload was released.
        urgency (str): Scenario urgency.
        max_altitude (float): Highest altitude reached, in meters.
        battery_consumed (float): Percentage points used since takeoff.
        average_speed (float): Mean derived speed over the ticks the drone moved.
        supplies (tuple[DeliveredSupply, ...]): Payload manifest.
        weather (str): Weather type at the destination.
        threat_level (str): Scenario threat level.
    """

    mission_name: str
    status: str
    duration: ClockTime
    distance_travelled: float
    payload_status: str
    urgency: str
    max_altitude: float
    battery_consumed: float
    average_speed: float
    supplies: tuple[DeliveredSupply, ...]
    weather: str
    threat_level: str

    @property
    def successful(self) -> bool:
        return self.status == STATUS_COMPLETED

    def as_dict(self) -> dict:
        """Plain-data form of the report; the duration is given in seconds."""
        data = asdict(self)
        data["duration"] = float(self.duration)
        return data


def build_mission_report(
    scenario: MissionScenario,
    supplies: list[MedicalSupply],
    weather: WeatherCondition,
    payload: PayloadStatus,
    *,
    completed: bool,
    duration: ClockTime,
    distance_travelled: float,
    max_altitude: float,
    battery_consumed: float,
    average_speed: float,
) -> MissionReport:
    return MissionReport(
        mission_name=scenario.name,
        status=STATUS_COMPLETED if completed else STATUS_INCOMPLETE,
        duration=duration,
        distance_travelled=distance_travelled,
        payload_status=payload.status_text,
        urgency=scenario.urgency,
        max_altitude=max_altitude,
        battery_consumed=max(0.0, battery_consumed),
        average_speed=average_speed,
        supplies=tuple(DeliveredSupply(s.name, s.weight_kg, s.urgency) for s in supplies),
        weather=weather.type,
        threat_level=scenario.threat_level,
    )

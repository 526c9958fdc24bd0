"""Mission definition: plans, catalog data, payload and outcome reports.

Components:
    Waypoint / PhaseTag / build_plan: The six-waypoint delivery plan
    MissionCatalog: Validated scenarios, supplies and weather
    PayloadStatus: Payload weight, bay temperature and delivery flag
    MissionReport: Outcome report built from measured flight values
"""

from .catalog import (
    MedicalSupply,
    MissionCatalog,
    MissionScenario,
    MissionSummary,
    WeatherCondition,
)
from .payload import PayloadStatus
from .report import STATUS_COMPLETED, STATUS_INCOMPLETE, MissionReport, build_mission_report
from .waypoint import PLAN_LENGTH, PhaseTag, Waypoint, build_plan, index_of, pick_target

__all__ = [
    "MedicalSupply",
    "MissionCatalog",
    "MissionScenario",
    "MissionSummary",
    "WeatherCondition",
    "PayloadStatus",
    "MissionReport",
    "build_mission_report",
    "STATUS_COMPLETED",
    "STATUS_INCOMPLETE",
    "PLAN_LENGTH",
    "PhaseTag",
    "Waypoint",
    "build_plan",
    "index_of",
    "pick_target",
]

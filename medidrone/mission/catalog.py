"""Mission scenarios, medical supplies and weather conditions.

The catalog is the static data the demo offers for selection. It is validated
once when built: every supply a scenario references must exist and ids must be
unique, so a bad catalog fails before any mission is flown.

Example:
    >>> catalog = MissionCatalog.default()
    >>> scenario = catalog.get("2")
    >>> scenario.name
    'Mountain Rescue Operation'
    >>> round(catalog.payload_weight(scenario), 2)
    1.75
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from medidrone.errors import ConfigurationError
from medidrone.geo import Position


@dataclass(frozen=True)
class MedicalSupply:
    """A supply item that can be loaded as payload.

    Attributes:
        id (str): Catalog key referenced by scenarios.
        name (str): Display name.
        weight_kg (float): Weight of one unit.
        temp_requirement (str): Storage requirement ("2-6°C", "ambient", ...).
        urgency (str): Clinical priority.
    """

    id: str
    name: str
    weight_kg: float
    temp_requirement: str
    urgency: str


@dataclass(frozen=True)
class WeatherCondition:
    type: str
    visibility: str
    wind_speed: str
    impact: str


@dataclass(frozen=True)
class MissionScenario:
    """A selectable delivery mission.

    Attributes:
        id (int): Unique mission id.
        name (str): Display name.
        description (str): Short operational description.
        latitude (float): Nominal geographic location (display only).
        longitude (float): Nominal geographic location (display only).
        urgency (str): "critical", "high" or "medium".
        supplies (tuple[str, ...]): Ids of the supplies carried.
        weather (str): Weather type expected at the destination.
        threat_level (str): "low", "medium" or "high".
    """

    id: int
    name: str
    description: str
    latitude: float
    longitude: float
    urgency: str
    supplies: tuple[str, ...]
    weather: str
    threat_level: str


@dataclass(frozen=True)
class MissionSummary:
    """What the presentation layer shows once a mission is selected."""

    mission_id: int
    name: str
    description: str
    urgency: str
    supply_names: tuple[str, ...]
    payload_weight_kg: float
    weather: WeatherCondition
    threat_level: str
    threat_factors: tuple[str, ...]
    target: Position


THREAT_FACTORS: dict[str, tuple[str, ...]] = {
    "low": (
        "Clear airspace",
        "Minimal ground threats",
        "Safe flight corridor established",
    ),
    "medium": (
        "Moderate weather conditions",
        "Possible terrain obstacles",
        "Standard threat protocols active",
    ),
    "high": (
        "Active threat zones detected",
        "Communications interference possible",
        "Enhanced security protocols required",
    ),
}

DEFAULT_SUPPLIES = (
    MedicalSupply("blood_type_o", "Blood Type O-", 0.5, "2-6°C", "critical"),
    MedicalSupply("morphine", "Morphine 10mg", 0.05, "15-25°C", "high"),
    MedicalSupply("bandages", "Emergency Bandages", 0.3, "ambient", "medium"),
    MedicalSupply("antibiotics", "Broad Spectrum Antibiotics", 0.1, "15-25°C", "medium"),
    MedicalSupply("oxygen", "Portable Oxygen", 1.2, "ambient", "critical"),
    MedicalSupply("thermal_blankets", "Emergency Thermal Blankets", 0.4, "ambient", "low"),
    MedicalSupply("pain_medication", "Pain Relief Medication", 0.15, "15-25°C", "medium"),
    MedicalSupply("surgical_instruments", "Sterile Surgical Kit", 2.0, "sterile", "high"),
    MedicalSupply("anesthetics", "Local Anesthetics", 0.2, "2-8°C", "high"),
    MedicalSupply("iv_fluids", "IV Saline Solution", 1.5, "15-25°C", "medium"),
)

DEFAULT_WEATHER = (
    WeatherCondition("clear", "10km", "5kmh", "minimal"),
    WeatherCondition("cloudy", "8km", "15kmh", "slight"),
    WeatherCondition("rain", "3km", "25kmh", "moderate"),
    WeatherCondition("snow", "1km", "35kmh", "significant"),
    WeatherCondition("storm", "0.5km", "60kmh", "severe"),
)

DEFAULT_SCENARIOS = (
    MissionScenario(
        id=1,
        name="Border Patrol Medical Emergency",
        description="Wounded soldier at remote border outpost requires immediate medical supplies",
        latitude=28.7041,
        longitude=77.1025,
        urgency="critical",
        supplies=("blood_type_o", "morphine", "bandages", "antibiotics"),
        weather="clear",
        threat_level="medium",
    ),
    MissionScenario(
        id=2,
        name="Mountain Rescue Operation",
        description="Avalanche survivor needs emergency medication at high altitude",
        latitude=32.2734,
        longitude=77.1734,
        urgency="high",
        supplies=("oxygen", "thermal_blankets", "pain_medication"),
        weather="snow",
        threat_level="low",
    ),
    MissionScenario(
        id=3,
        name="Forward Operating Base Resupply",
        description="Critical medical supplies for field hospital running low",
        latitude=34.0522,
        longitude=74.8336,
        urgency="medium",
        supplies=("surgical_instruments", "anesthetics", "iv_fluids"),
        weather="windy",
        threat_level="high",
    ),
)


class MissionCatalog:
    """Validated lookup of scenarios, supplies and weather conditions."""

    def __init__(
        self,
        scenarios: Iterable[MissionScenario],
        supplies: Iterable[MedicalSupply],
        weather: Sequence[WeatherCondition],
    ):
        """Build and validate the catalog.

        Args:
            scenarios: Selectable missions.
            supplies: Every supply a scenario may reference.
            weather: Known weather conditions; the first one is the fallback.

        Raises:
            ConfigurationError: On duplicate ids, unknown supply references,
                non-positive supply weights or an empty weather table.
        """
        self._supplies = _index_unique(supplies, key=lambda s: s.id, kind="supply")
        self._scenarios = _index_unique(scenarios, key=lambda s: s.id, kind="mission")
        if not weather:
            msg = "Catalog needs at least one weather condition"
            raise ConfigurationError(msg)
        self._weather = tuple(weather)

        for supply in self._supplies.values():
            if supply.weight_kg <= 0:
                msg = f"Supply {supply.id!r} must have a positive weight"
                raise ConfigurationError(msg)
        for scenario in self._scenarios.values():
            unknown = [s for s in scenario.supplies if s not in self._supplies]
            if unknown:
                msg = f"Mission {scenario.id} references unknown supplies: {unknown}"
                raise ConfigurationError(msg)

    @classmethod
    def default(cls) -> MissionCatalog:
        """The catalog shipped with the demo."""
        return cls(DEFAULT_SCENARIOS, DEFAULT_SUPPLIES, DEFAULT_WEATHER)

    @property
    def scenarios(self) -> list[MissionScenario]:
        return list(self._scenarios.values())

    def get(self, mission_id: int | str) -> MissionScenario | None:
        """Look up a scenario by id.

        Args:
            mission_id: Integer id, or its decimal string form as delivered by
                a form field.

        Returns:
            The scenario, or None if the id is unknown or malformed. Floats,
            booleans and non-decimal strings are malformed.
        """
        if isinstance(mission_id, bool):
            return None
        if isinstance(mission_id, int):
            key = mission_id
        elif isinstance(mission_id, str) and mission_id.isdecimal():
            key = int(mission_id)
        else:
            return None
        return self._scenarios.get(key)

    def supplies_for(self, scenario: MissionScenario) -> list[MedicalSupply]:
        return [self._supplies[s] for s in scenario.supplies]

    def payload_weight(self, scenario: MissionScenario) -> float:
        return sum(s.weight_kg for s in self.supplies_for(scenario))

    def weather_for(self, scenario: MissionScenario) -> WeatherCondition:
        """Weather for the scenario; unknown types fall back to the first entry."""
        for condition in self._weather:
            if condition.type == scenario.weather:
                return condition
        return self._weather[0]

    @staticmethod
    def threat_factors(level: str) -> tuple[str, ...]:
        return THREAT_FACTORS.get(level, ())

    def summarize(self, scenario: MissionScenario, target: Position) -> MissionSummary:
        return MissionSummary(
            mission_id=scenario.id,
            name=scenario.name,
            description=scenario.description,
            urgency=scenario.urgency,
            supply_names=tuple(s.name for s in self.supplies_for(scenario)),
            payload_weight_kg=self.payload_weight(scenario),
            weather=self.weather_for(scenario),
            threat_level=scenario.threat_level,
            threat_factors=self.threat_factors(scenario.threat_level),
            target=target,
        )


def _index_unique(items, key, kind: str) -> dict:
    indexed = {}
    for item in items:
        k = key(item)
        if k in indexed:
            msg = f"Duplicate {kind} id: {k!r}"
            raise ConfigurationError(msg)
        indexed[k] = item
    return indexed

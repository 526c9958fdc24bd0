"""
Tests for the mission catalog, payload and outcome report.
"""

import unittest

from medidrone.errors import ConfigurationError
from medidrone.geo import Position
from medidrone.mission import (
    STATUS_COMPLETED,
    STATUS_INCOMPLETE,
    MedicalSupply,
    MissionCatalog,
    MissionScenario,
    PayloadStatus,
    WeatherCondition,
    build_mission_report,
)
from medidrone.unit import ClockTime


def scenario(mission_id=1, supplies=("a",), weather="clear"):
    return MissionScenario(
        id=mission_id,
        name=f"Mission {mission_id}",
        description="test",
        latitude=0.0,
        longitude=0.0,
        urgency="high",
        supplies=supplies,
        weather=weather,
        threat_level="low",
    )


SUPPLIES = (
    MedicalSupply("a", "Supply A", 0.5, "2-6°C", "critical"),
    MedicalSupply("b", "Supply B", 1.0, "ambient", "low"),
)
WEATHER = (WeatherCondition("clear", "10km", "5kmh", "minimal"),)


class TestMissionCatalog(unittest.TestCase):
    """Test MissionCatalog."""

    def setUp(self):
        self.catalog = MissionCatalog.default()

    def test_default_scenarios(self):
        names = [s.name for s in self.catalog.scenarios]
        self.assertEqual(
            names,
            [
                "Border Patrol Medical Emergency",
                "Mountain Rescue Operation",
                "Forward Operating Base Resupply",
            ],
        )

    def test_get_accepts_int_and_numeric_string(self):
        self.assertIs(self.catalog.get(2), self.catalog.get("2"))
        self.assertEqual(self.catalog.get(2).name, "Mountain Rescue Operation")

    def test_get_unknown_or_malformed(self):
        self.assertIsNone(self.catalog.get(99))
        self.assertIsNone(self.catalog.get("abc"))
        self.assertIsNone(self.catalog.get(None))

    def test_get_rejects_floats_and_booleans(self):
        self.assertIsNone(self.catalog.get(2.9))
        self.assertIsNone(self.catalog.get(2.0))
        self.assertIsNone(self.catalog.get(True))
        self.assertIsNone(self.catalog.get("2.0"))
        self.assertIsNone(self.catalog.get("-1"))

    def test_payload_weight(self):
        self.assertAlmostEqual(self.catalog.payload_weight(self.catalog.get(1)), 0.95)
        self.assertAlmostEqual(self.catalog.payload_weight(self.catalog.get(2)), 1.75)

    def test_weather_falls_back_to_first_entry(self):
        fob = self.catalog.get(3)
        self.assertEqual(fob.weather, "windy")
        self.assertEqual(self.catalog.weather_for(fob).type, "clear")
        self.assertEqual(self.catalog.weather_for(self.catalog.get(2)).type, "snow")

    def test_threat_factors(self):
        self.assertEqual(len(MissionCatalog.threat_factors("high")), 3)
        self.assertEqual(MissionCatalog.threat_factors("unknown"), ())

    def test_summarize(self):
        target = Position(300, 120)
        summary = self.catalog.summarize(self.catalog.get(1), target)
        self.assertEqual(summary.mission_id, 1)
        self.assertEqual(summary.target, target)
        self.assertEqual(summary.urgency, "critical")
        self.assertIn("Blood Type O-", summary.supply_names)
        self.assertEqual(summary.threat_factors[0], "Moderate weather conditions")

    def test_duplicate_mission_ids_rejected(self):
        with self.assertRaises(ConfigurationError):
            MissionCatalog([scenario(1), scenario(1)], SUPPLIES, WEATHER)

    def test_unknown_supply_rejected(self):
        with self.assertRaises(ConfigurationError):
            MissionCatalog([scenario(1, supplies=("missing",))], SUPPLIES, WEATHER)

    def test_non_positive_weight_rejected(self):
        bad = SUPPLIES + (MedicalSupply("c", "Nothing", 0.0, "ambient", "low"),)
        with self.assertRaises(ConfigurationError):
            MissionCatalog([scenario(1)], bad, WEATHER)

    def test_empty_weather_rejected(self):
        with self.assertRaises(ConfigurationError):
            MissionCatalog([scenario(1)], SUPPLIES, ())


class TestPayloadStatus(unittest.TestCase):
    """Test PayloadStatus."""

    def test_cold_chain_lowers_temperature(self):
        payload = PayloadStatus.load(list(SUPPLIES))
        self.assertAlmostEqual(payload.weight_kg, 1.5)
        self.assertEqual(payload.temperature_c, 3.8)
        self.assertFalse(payload.delivered)

    def test_ambient_payload_temperature(self):
        payload = PayloadStatus.load([SUPPLIES[1]])
        self.assertEqual(payload.temperature_c, 4.2)
        self.assertEqual(payload.status_text, "Still Loaded")

    def test_release(self):
        payload = PayloadStatus.load(list(SUPPLIES))
        payload.release()
        self.assertEqual(payload.weight_kg, 0.0)
        self.assertTrue(payload.delivered)
        self.assertEqual(payload.status_text, "Successfully Delivered")


class TestMissionReport(unittest.TestCase):
    """Test build_mission_report."""

    def build(self, completed):
        payload = PayloadStatus.load(list(SUPPLIES))
        return build_mission_report(
            scenario(7, supplies=("a", "b")),
            list(SUPPLIES),
            WEATHER[0],
            payload,
            completed=completed,
            duration=ClockTime(95.5),
            distance_travelled=812.0,
            max_altitude=150.0,
            battery_consumed=0.62,
            average_speed=41.0,
        )

    def test_completed_report(self):
        report = self.build(completed=True)
        self.assertEqual(report.status, STATUS_COMPLETED)
        self.assertTrue(report.successful)
        self.assertEqual(report.mission_name, "Mission 7")
        self.assertEqual(report.payload_status, "Still Loaded")
        self.assertEqual([s.name for s in report.supplies], ["Supply A", "Supply B"])
        self.assertEqual(report.weather, "clear")

    def test_incomplete_report(self):
        report = self.build(completed=False)
        self.assertEqual(report.status, STATUS_INCOMPLETE)
        self.assertFalse(report.successful)

    def test_as_dict(self):
        data = self.build(completed=True).as_dict()
        self.assertEqual(data["duration"], 95.5)
        self.assertIsInstance(data["duration"], float)
        self.assertEqual(data["supplies"][0]["weight_kg"], 0.5)
        self.assertEqual(data["distance_travelled"], 812.0)


if __name__ == "__main__":
    unittest.main()

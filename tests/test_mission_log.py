"""
Tests for the mission log.
"""

import unittest

from medidrone.simulator import LogLevel, MissionLog
from medidrone.timer import SimulationClock
from medidrone.unit import Second


class TestMissionLog(unittest.TestCase):
    """Test MissionLog."""

    def setUp(self):
        self.clock = SimulationClock(Second(0.1))
        self.log = MissionLog(self.clock)

    def test_newest_first(self):
        self.log.info("first")
        self.clock.advance()
        self.log.warning("second")
        entries = self.log.entries
        self.assertEqual([e.message for e in entries], ["second", "first"])
        self.assertEqual(entries[0].level, LogLevel.WARNING)
        self.assertAlmostEqual(float(entries[0].time), 0.1)

    def test_capacity_bounds_entries(self):
        for i in range(60):
            self.log.info(f"entry {i}")
        self.assertEqual(len(self.log), 50)
        self.assertEqual(self.log.entries[0].message, "entry 59")
        self.assertEqual(self.log.entries[-1].message, "entry 10")

    def test_forwards_to_logging(self):
        with self.assertLogs("medidrone.mission", level="INFO") as captured:
            self.log.success("Payload deployed")
            self.log.error("Battery depleted")
        self.assertEqual(len(captured.records), 2)
        self.assertEqual(captured.records[1].levelname, "ERROR")
        self.assertIn("Payload deployed", captured.output[0])

    def test_invalid_capacity(self):
        with self.assertRaises(ValueError):
            MissionLog(self.clock, capacity=0)

    def test_clear(self):
        self.log.info("x")
        self.log.clear()
        self.assertEqual(self.log.entries, [])


if __name__ == "__main__":
    unittest.main()

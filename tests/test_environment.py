"""
Tests for the cosmetic environment.
"""

import random
import unittest

from medidrone.simulator import ObstacleMonitor, TelemetryJitter
from medidrone.unit import ClockTime, Second

DT = Second(0.1)


class TestTelemetryJitter(unittest.TestCase):
    """Test TelemetryJitter."""

    def test_refreshes_every_interval(self):
        jitter = TelemetryJitter(random.Random(1))
        refreshed = [jitter.update(DT, is_flying=True) for _ in range(60)]
        self.assertEqual(sum(refreshed), 3)
        self.assertTrue(refreshed[19])

    def test_readings_stay_in_bands(self):
        jitter = TelemetryJitter(random.Random(5))
        for _ in range(500):
            jitter.refresh(is_flying=True)
            r = jitter.readings
            self.assertTrue(11 <= r.satellites <= 13)
            self.assertTrue(1.0 <= r.gps_accuracy <= 1.4)
            self.assertTrue(80 <= r.signal_strength <= 89)
            self.assertTrue(35 <= r.latency_ms <= 54)
            self.assertTrue(2.0 <= r.payload_temperature <= 6.0)

    def test_temperature_holds_on_ground(self):
        jitter = TelemetryJitter(random.Random(5))
        jitter.reset(3.8)
        for _ in range(20):
            jitter.refresh(is_flying=False)
        self.assertEqual(jitter.readings.payload_temperature, 3.8)


class TestObstacleMonitor(unittest.TestCase):
    """Test ObstacleMonitor."""

    def test_certain_detection_every_interval(self):
        monitor = ObstacleMonitor(random.Random(2), probability=1.0)
        alerts = []
        for tick in range(1, 301):
            alert = monitor.update(DT, ClockTime(tick * 0.1), is_flying=True)
            if alert is not None:
                alerts.append(alert)
        self.assertEqual(len(alerts), 2)
        self.assertEqual(monitor.detected, 2)
        first = alerts[0]
        self.assertTrue(75 <= first.position.x <= 425)
        self.assertTrue(50 <= first.position.y <= 200)
        self.assertAlmostEqual(float(first.clears_at) - float(first.detected_at), 8.0)

    def test_never_detects_on_ground(self):
        monitor = ObstacleMonitor(random.Random(2), probability=1.0)
        for tick in range(1, 301):
            self.assertIsNone(monitor.update(DT, ClockTime(tick * 0.1), is_flying=False))

    def test_alerts_expire(self):
        monitor = ObstacleMonitor(random.Random(2), interval=Second(1), probability=1.0)
        for tick in range(1, 11):
            monitor.update(DT, ClockTime(tick * 0.1), is_flying=True)
        self.assertEqual(len(monitor.active_alerts), 1)
        for tick in range(11, 100):
            monitor.update(DT, ClockTime(tick * 0.1), is_flying=False)
        self.assertEqual(monitor.active_alerts, [])

    def test_invalid_probability(self):
        with self.assertRaises(ValueError):
            ObstacleMonitor(random.Random(), probability=1.5)


if __name__ == "__main__":
    unittest.main()

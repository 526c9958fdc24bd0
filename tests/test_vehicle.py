"""
Tests for the abstract vehicle plumbing.
"""

import unittest

from medidrone.energy import BatteryStatus
from medidrone.events import EventType
from medidrone.geo import Position
from medidrone.timer import SimulationClock
from medidrone.unit import Second
from medidrone.vehicles import Vehicle, VehicleState


class Probe(Vehicle):
    """Minimal vehicle without a state machine."""

    def update(self, dt, now):
        pass

    def is_operational(self):
        return True


def make_probe():
    clock = SimulationClock(Second(0.1))
    return Probe(VehicleState(position=Position(0, 0), battery=BatteryStatus(50.0)), clock), clock


class TestVehicle(unittest.TestCase):
    """Test Vehicle."""

    def test_state_machine_required(self):
        probe, _ = make_probe()
        with self.assertRaises(NotImplementedError):
            _ = probe.current_state
        with self.assertRaises(NotImplementedError):
            probe.can_transition_to(None)

    def test_scheduled_effect_fires_after_delay(self):
        probe, _ = make_probe()
        calls = []
        probe.schedule_effect("ping", Second(0.3), lambda: calls.append("ping"))
        probe.timer_update(Second(0.1))
        probe.timer_update(Second(0.1))
        self.assertEqual(calls, [])
        self.assertEqual(len(probe.pending_effects), 1)
        probe.timer_update(Second(0.1))
        self.assertEqual(calls, ["ping"])
        self.assertEqual(probe.pending_effects, ())

    def test_stale_effect_is_dropped(self):
        probe, _ = make_probe()
        calls = []
        probe.schedule_effect("ping", Second(0.1), lambda: calls.append("ping"), lambda: False)
        probe.timer_update(Second(0.1))
        self.assertEqual(calls, [])
        self.assertEqual(probe.pending_effects, ())

    def test_effect_scheduled_while_firing_survives(self):
        probe, _ = make_probe()
        calls = []

        def chain():
            calls.append("first")
            probe.schedule_effect("second", Second(0.1), lambda: calls.append("second"))

        probe.schedule_effect("first", Second(0.1), chain)
        probe.timer_update(Second(0.1))
        self.assertEqual([e.name for e in probe.pending_effects], ["second"])
        probe.timer_update(Second(0.1))
        self.assertEqual(calls, ["first", "second"])

    def test_events_are_stamped_and_drained(self):
        probe, clock = make_probe()
        clock.advance()
        clock.advance()
        event = probe.emit(EventType.STATUS_CHANGED, status="ok")
        self.assertEqual(event.tick, 2)
        self.assertEqual(event["status"], "ok")
        self.assertEqual(probe.drain_events(), [event])
        self.assertEqual(probe.drain_events(), [])

    def test_events_are_immutable_and_hashable(self):
        probe, _ = make_probe()
        details = {"status": "ok"}
        event = probe.emit(EventType.STATUS_CHANGED, **details)
        same = probe.emit(EventType.STATUS_CHANGED, status="ok")
        other = probe.emit(EventType.STATUS_CHANGED, status="paused")

        with self.assertRaises(TypeError):
            event.data["status"] = "changed"
        self.assertEqual(event, same)
        self.assertNotEqual(event, other)
        self.assertEqual(hash(event), hash(same))
        self.assertEqual(len({event, same, other}), 2)


if __name__ == "__main__":
    unittest.main()

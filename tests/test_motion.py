"""
Tests for the motion integrator and battery drain.
"""

import unittest

from medidrone.energy import BatteryStatus
from medidrone.geo import Position
from medidrone.mission import PhaseTag, Waypoint
from medidrone.vehicles import MissionPhase, VehicleState, advance, drain_battery, step_toward


def flying_state(start, *targets):
    waypoints = tuple(Waypoint(t, PhaseTag.NAVIGATION, f"wp{i}") for i, t in enumerate(targets))
    return VehicleState(
        position=start,
        battery=BatteryStatus(98.0),
        is_flying=True,
        mission_phase=MissionPhase.NAVIGATION,
        waypoints=waypoints,
    )


class TestStepToward(unittest.TestCase):

    def test_moves_fixed_distance_along_line(self):
        p = step_toward(Position(0, 0), Position(3, 4), 1.5)
        self.assertAlmostEqual(p.x, 0.9)
        self.assertAlmostEqual(p.y, 1.2)
        self.assertAlmostEqual(p.distance_to(Position(0, 0)), 1.5)


class TestAdvance(unittest.TestCase):
    """Test advance."""

    def test_distance_decreases_until_single_arrival(self):
        target = Position(30, 40)
        state = flying_state(Position(0, 0), target)
        distances = [state.position.distance_to(target)]
        arrivals = []

        for _ in range(200):
            reached = advance(state)
            if reached is not None:
                arrivals.append(reached)
            elif not arrivals:
                distances.append(state.position.distance_to(target))

        self.assertEqual(len(arrivals), 1)
        self.assertEqual(arrivals[0].position, target)
        for before, after in zip(distances, distances[1:]):
            self.assertLess(after, before)
        self.assertLessEqual(distances[-1], 3.0)
        self.assertEqual(state.current_waypoint_index, 1)

    def test_no_motion_on_arrival_tick(self):
        state = flying_state(Position(0, 0), Position(2, 0))
        reached = advance(state)
        self.assertIsNotNone(reached)
        self.assertEqual(state.position, Position(0, 0))
        self.assertEqual(state.current_waypoint_index, 1)

    def test_zero_distance_is_arrival(self):
        state = flying_state(Position(5, 5), Position(5, 5))
        self.assertIsNotNone(advance(state))
        self.assertEqual(state.position, Position(5, 5))

    def test_past_plan_end_is_noop(self):
        state = flying_state(Position(0, 0), Position(1, 0))
        advance(state)
        before = (state.position, state.current_waypoint_index, state.speed)
        self.assertIsNone(advance(state))
        self.assertEqual((state.position, state.current_waypoint_index, state.speed), before)

    def test_not_flying_is_noop(self):
        state = flying_state(Position(0, 0), Position(100, 0))
        state.is_flying = False
        self.assertIsNone(advance(state))
        self.assertEqual(state.position, Position(0, 0))

    def test_index_never_exceeds_plan_length(self):
        state = flying_state(Position(0, 0), Position(10, 0), Position(10, 10))
        last = 0
        for _ in range(100):
            advance(state)
            self.assertGreaterEqual(state.current_waypoint_index, last)
            self.assertLessEqual(state.current_waypoint_index, 2)
            last = state.current_waypoint_index
        self.assertEqual(last, 2)

    def test_moving_tick_updates_telemetry(self):
        state = flying_state(Position(0, 0), Position(0, 100))
        advance(state)
        self.assertAlmostEqual(state.heading, 90.0)
        self.assertEqual(state.speed, 45.0)
        self.assertAlmostEqual(state.altitude, 0.3)


class TestDrainBattery(unittest.TestCase):

    def test_drains_only_while_flying(self):
        state = flying_state(Position(0, 0), Position(100, 0))
        drain_battery(state, 0.5)
        self.assertAlmostEqual(state.battery_level, 97.5)

        state.is_flying = False
        drain_battery(state, 0.5)
        self.assertAlmostEqual(state.battery_level, 97.5)

    def test_battery_never_increases_and_stays_non_negative(self):
        state = flying_state(Position(0, 0), Position(100, 0))
        last = state.battery_level
        for _ in range(300):
            drain_battery(state, 0.5)
            self.assertLessEqual(state.battery_level, last)
            self.assertGreaterEqual(state.battery_level, 0.0)
            last = state.battery_level
        self.assertEqual(last, 0.0)


if __name__ == "__main__":
    unittest.main()

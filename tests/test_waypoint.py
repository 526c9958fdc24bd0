"""
Tests for the waypoint plan builder.
"""

import math
import random
import unittest

from medidrone.errors import ConfigurationError
from medidrone.geo import Position
from medidrone.mission import PLAN_LENGTH, PhaseTag, build_plan, index_of, pick_target


class TestBuildPlan(unittest.TestCase):
    """Test build_plan."""

    def setUp(self):
        self.plan = build_plan(Position(50, 280), Position(200, 100))

    def test_plan_has_six_waypoints(self):
        self.assertEqual(len(self.plan), PLAN_LENGTH)
        self.assertEqual(len(self.plan), 6)

    def test_takeoff_and_delivery_positions(self):
        """Takeoff is offset from home, delivery is the target itself."""
        self.assertEqual(self.plan[0].position, Position(100, 230))
        self.assertEqual(self.plan[3].position, Position(200, 100))

    def test_navigation_legs_scale_each_axis(self):
        nav1, nav2 = self.plan[1].position, self.plan[2].position
        self.assertAlmostEqual(nav1.x, 80.0)
        self.assertAlmostEqual(nav1.y, 80.0)
        self.assertAlmostEqual(nav2.x, 140.0)
        self.assertAlmostEqual(nav2.y, 110.0)

    def test_return_and_landing_positions(self):
        self.assertEqual(self.plan[4].position, Position(150, 200))
        self.assertEqual(self.plan[5].position, Position(50, 280))

    def test_phase_tags_in_order(self):
        self.assertEqual(
            [w.phase_tag for w in self.plan],
            [
                PhaseTag.TAKEOFF,
                PhaseTag.NAVIGATION,
                PhaseTag.NAVIGATION,
                PhaseTag.DELIVERY,
                PhaseTag.RETURN,
                PhaseTag.LANDING,
            ],
        )

    def test_labels(self):
        self.assertEqual(self.plan[0].label, "Takeoff Point")
        self.assertEqual(self.plan[2].label, "Navigation Waypoint 2")
        self.assertEqual(self.plan[5].label, "Landing Zone")

    def test_plan_is_deterministic(self):
        self.assertEqual(self.plan, build_plan(Position(50, 280), Position(200, 100)))

    def test_non_finite_target_rejected(self):
        with self.assertRaises(ConfigurationError):
            build_plan(Position(50, 280), Position(math.nan, 100))

    def test_non_finite_origin_rejected_as_value_error(self):
        with self.assertRaises(ValueError):
            build_plan(Position(math.inf, 280), Position(200, 100))


class TestPlanHelpers(unittest.TestCase):
    """Test pick_target and index_of."""

    def test_pick_target_stays_in_box(self):
        rng = random.Random(0)
        for _ in range(500):
            target = pick_target(rng)
            self.assertTrue(200 <= target.x < 500)
            self.assertTrue(50 <= target.y < 200)

    def test_pick_target_is_reproducible(self):
        self.assertEqual(pick_target(random.Random(42)), pick_target(random.Random(42)))

    def test_index_of(self):
        plan = build_plan(Position(50, 280), Position(300, 150))
        self.assertEqual(index_of(plan, PhaseTag.DELIVERY), 3)
        self.assertEqual(index_of(plan, PhaseTag.NAVIGATION), 1)
        self.assertIsNone(index_of((), PhaseTag.LANDING))


if __name__ == "__main__":
    unittest.main()

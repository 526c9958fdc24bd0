"""
Tests for the time unit family.
"""

import unittest

from medidrone.unit import ClockTime, Second


class TestTimeUnits(unittest.TestCase):
    """Test Second and ClockTime."""

    def test_stored_in_si(self):
        self.assertEqual(float(Second(2.5)), 2.5)
        self.assertEqual(float(ClockTime.from_si(90.0)), 90.0)

    def test_arithmetic_keeps_unit(self):
        total = Second(1.5) + Second(2)
        self.assertIsInstance(total, Second)
        self.assertEqual(total, Second(3.5))
        self.assertEqual(Second(2) * 3, Second(6))
        self.assertEqual(Second(6) / 3, Second(2))
        self.assertEqual(ClockTime(60) / Second(30), 2.0)

    def test_same_family_comparison(self):
        self.assertEqual(ClockTime(60), Second(60))
        self.assertLess(Second(59), ClockTime(60))
        self.assertIsInstance(ClockTime(10) - Second(4), ClockTime)

    def test_plain_float_comparison_is_not_unit_equality(self):
        self.assertNotEqual(Second(1), "1 s")
        with self.assertRaises(TypeError):
            _ = Second(1) < 2.0

    def test_hashable(self):
        self.assertEqual(len({Second(1), Second(1)}), 1)

    def test_clock_time_formatting(self):
        self.assertEqual(str(ClockTime(0)), "00:00:00.000")
        self.assertEqual(str(ClockTime(61.25)), "00:01:01.250")
        self.assertEqual(repr(ClockTime(5)), "ClockTime(00:00:05.000)")

    def test_str(self):
        self.assertEqual(str(Second(5)), "5 s")
        self.assertEqual(repr(Second(0.5)), "Second(0.5)")


if __name__ == "__main__":
    unittest.main()

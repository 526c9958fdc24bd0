"""
Tests for the validated state machine.
"""

from enum import Enum, auto
import unittest

from medidrone.state import Action, StateMachine


class Light(Enum):
    RED = auto()
    GREEN = auto()
    YELLOW = auto()
    OFF = auto()


class TestStateMachine(unittest.TestCase):
    """Test StateMachine."""

    def setUp(self):
        self.entered = []
        self.machine = StateMachine(
            Light.RED,
            {
                Light.RED: [Action(Light.GREEN, lambda *a: self.entered.append(("green", a)))],
                Light.GREEN: [Action(Light.YELLOW), Action(Light.OFF)],
                Light.YELLOW: [Action(Light.RED, lambda: self.entered.append(("red", ())))],
            },
        )

    def test_initial_state(self):
        self.assertEqual(self.machine.current, Light.RED)

    def test_transition_runs_effect_with_arguments(self):
        self.machine.request_transition(Light.GREEN, "now")
        self.assertEqual(self.machine.current, Light.GREEN)
        self.assertEqual(self.entered, [("green", ("now",))])

    def test_effect_observes_new_state(self):
        seen = []
        machine = StateMachine(Light.RED, {Light.RED: [Action(Light.GREEN, lambda: seen.append(machine.current))]})
        machine.request_transition(Light.GREEN)
        self.assertEqual(seen, [Light.GREEN])

    def test_action_without_effect(self):
        self.machine.request_transition(Light.GREEN)
        self.assertIsNone(self.machine.request_transition(Light.YELLOW))
        self.assertEqual(self.machine.current, Light.YELLOW)

    def test_illegal_transition_raises_and_keeps_state(self):
        self.assertFalse(self.machine.can_transition(Light.YELLOW))
        with self.assertRaises(ValueError):
            self.machine.request_transition(Light.YELLOW)
        self.assertEqual(self.machine.current, Light.RED)

    def test_terminal_state_has_no_targets(self):
        self.machine.request_transition(Light.GREEN)
        self.machine.request_transition(Light.OFF)
        self.assertFalse(self.machine.can_transition(Light.GREEN))
        self.assertFalse(self.machine.can_transition(Light.RED))


if __name__ == "__main__":
    unittest.main()

"""Validated finite state machine for mission phases.

A ``StateMachine`` holds the current state and a graph mapping each state to
the ``Action`` objects it may take. An ``Action`` names a target state and an
optional entry effect that runs after the state has changed, so the effect
observes the new state.

Callers that must treat an illegal transition as a silent no-op ask
``can_transition`` first; ``request_transition`` itself raises, because asking
for an edge that is not in the graph is a programming error.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

State = TypeVar("State", bound=Enum)
"""Type variable for state enumerations."""

ActionFn = Callable[..., Any]
"""Entry effect run when an action is taken."""

StateGraph = dict[Enum, Iterable["Action"]]


@dataclass(frozen=True)
class Action:
    """A transition to ``state`` with an optional entry effect.

    Attributes:
        state: The target state this action transitions to.
        effect: Optional function executed once the transition has happened.
    """

    state: Enum
    effect: ActionFn | None = None

    def __call__(self, *args, **kwargs) -> Any:
        if self.effect:
            return self.effect(*args, **kwargs)
        return None


class StateMachine:
    """A finite state machine that validates every transition.

    Attributes:
        _state: Current state.
        _allowed: Mapping of state to the actions it may take.
    """

    _allowed: StateGraph
    _state: Enum

    def __init__(self, initial_state: Enum, nodes_graph: StateGraph):
        """Initialize with a starting state and the transition graph.

        Args:
            initial_state: The state the machine starts in.
            nodes_graph: Mapping from each state to its allowed actions.
                States without an entry are terminal.
        """
        self._state = initial_state
        self._allowed = {state: tuple(actions) for state, actions in nodes_graph.items()}

    @property
    def current(self) -> Enum:
        """The current state."""
        return self._state

    def can_transition(self, to: Enum) -> bool:
        """Return True if the graph has an edge from the current state to ``to``."""
        return self._find_action(self._state, to) is not None

    def request_transition(self, next_state: Enum, *args, **kwargs) -> Any:
        """Move to ``next_state`` and run the action's entry effect.

        Args:
            next_state: The target state.
            *args: Forwarded to the entry effect.
            **kwargs: Forwarded to the entry effect.

        Returns:
            Whatever the entry effect returns, or None.

        Raises:
            ValueError: If the graph has no edge from the current state to
                ``next_state``.
        """
        action = self._find_action(self._state, next_state)
        if action is None:
            msg = f"Illegal transition {self._state.name} -> {next_state.name}"
            raise ValueError(msg)
        self._state = action.state
        return action(*args, **kwargs)

    def _find_action(self, frm: Enum, to: Enum) -> Action | None:
        for action in self._allowed.get(frm, ()):
            if action.state == to:
                return action
        return None

"""Abstract vehicle with a phase state machine, scheduled effects and an event outbox.

``Vehicle`` provides the plumbing every simulated vehicle needs; concrete
vehicles define the transition graph and the per-tick behaviour.

Execution model per tick (driven by the simulator):
    1. ``timer_update(dt)`` counts down scheduled effects and fires the due
       ones whose precondition still holds.
    2. ``update(dt, now)`` runs the vehicle's own behaviour for the tick.
    3. The simulator collects the queued events with ``drain_events()``.

Scheduled Effects:
    ``schedule_effect`` registers a named delayed effect together with a
    precondition. Effects are owned by the vehicle, advanced only by the tick
    driver and discarded once they fire or turn out to be stale; there is no
    explicit cancellation, a changed mission simply fails the precondition.
"""

from abc import ABC, abstractmethod
from typing import Any

from medidrone.events import Event, EventType
from medidrone.state import State, StateGraph, StateMachine
from medidrone.timer import EffectFn, Precondition, ScheduledEffect, SimulationClock, Timer
from medidrone.unit import Time

from .vehicle_state import VehicleState


class Vehicle(ABC):
    """Base class for simulated vehicles.

    Attributes:
        id (int): Unique identifier of the instance.
        state (VehicleState): The mutable state the core functions operate on.
        clock (SimulationClock): Shared simulation clock.
    """

    id: int
    state: VehicleState
    clock: SimulationClock
    _state_machine: StateMachine | None = None
    _effects: list[ScheduledEffect]
    _outbox: list[Event]

    def __init__(self, state: VehicleState, clock: SimulationClock):
        """Initialize the vehicle around an existing state record.

        Args:
            state (VehicleState): State record, owned by this vehicle from now on.
            clock (SimulationClock): Clock used to timestamp events and
                measure elapsed flight time.
        """
        self.id = id(self)
        self.state = state
        self.clock = clock
        self._effects = []
        self._outbox = []

    def init_state_machine(self, initial_state: State, nodes_graph: StateGraph) -> None:
        self._state_machine = StateMachine(initial_state, nodes_graph)

    @property
    def current_state(self) -> State:
        """Current state of the vehicle's state machine.

        Raises:
            NotImplementedError: If the subclass did not initialize the machine.
        """
        if not self._state_machine:
            msg = "Subclasses must initialize the state_machine"
            raise NotImplementedError(msg)
        return self._state_machine.current

    def can_transition_to(self, next_state: State) -> bool:
        if not self._state_machine:
            msg = "Subclasses must initialize the state_machine"
            raise NotImplementedError(msg)
        return self._state_machine.can_transition(next_state)

    def transition_to(self, next_state: State, *args, **kwargs) -> Any:
        """Take the transition to ``next_state`` and run its entry effect.

        Raises:
            NotImplementedError: If the state machine has not been initialized.
            ValueError: If the transition is not in the graph.
        """
        if not self._state_machine:
            msg = "Subclasses must initialize the state_machine"
            raise NotImplementedError(msg)
        return self._state_machine.request_transition(next_state, *args, **kwargs)

    # ------------------------------------------------------------------ effects

    def schedule_effect(
        self,
        name: str,
        delay: Time,
        effect: EffectFn,
        precondition: Precondition = lambda: True,
    ) -> ScheduledEffect:
        """Register a delayed effect.

        Args:
            name (str): Identifier for logs and queries.
            delay (Time): Simulated time until the effect is due.
            effect (EffectFn): What to run once due.
            precondition (Precondition): Re-checked at fire time; the effect is
                dropped if it returns False.

        Returns:
            ScheduledEffect: The registered record.
        """
        scheduled = ScheduledEffect(name, Timer(delay), effect, precondition)
        self._effects.append(scheduled)
        return scheduled

    def timer_update(self, dt: Time) -> None:
        """Count every pending effect down by ``dt`` and fire the due ones."""
        for scheduled in list(self._effects):
            scheduled.timer.advance(dt)
            if scheduled.due:
                scheduled.fire()
        self._effects = [e for e in self._effects if not e.settled]

    @property
    def pending_effects(self) -> tuple[ScheduledEffect, ...]:
        return tuple(self._effects)

    # ------------------------------------------------------------------- events

    def emit(self, event_type: EventType, **data: Any) -> Event:
        event = Event(event_type, self.clock.ticks, data)
        self._outbox.append(event)
        return event

    def drain_events(self) -> list[Event]:
        """Return the queued events and clear the outbox."""
        events, self._outbox = self._outbox, []
        return events

    # ----------------------------------------------------------------- abstract

    @abstractmethod
    def update(self, dt: Time, now: Time) -> None:
        """Run the vehicle's behaviour for one tick.

        Args:
            dt (Time): Tick length.
            now (Time): Simulated time at this tick.
        """

    @abstractmethod
    def is_operational(self) -> bool:
        """True if the vehicle can start a new flight."""

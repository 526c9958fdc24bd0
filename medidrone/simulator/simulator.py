"""Public facade of the delivery mission simulator.

``MissionSimulator`` wires the catalog, clock, drone, mission log, recorder
and cosmetic environment together and exposes the operator commands and the
tick driver.

Tick order:
    1. Advance the simulation clock.
    2. Count down scheduled effects and fire the due ones (precondition
       re-checked at fire time).
    3. Move the drone, handle waypoint arrivals, drain the battery.
    4. Step the cosmetic environment.
    5. Sample the flight recorder while a mission is loaded.
    6. Collect the drone's events, push them to subscribers and return them.

Commands never raise for domain conditions. A command that does not apply in
the current phase returns a falsy ``CommandResult`` carrying the
``PreconditionError``, and leaves the state untouched.

Example:
    >>> sim = MissionSimulator(seed=7)
    >>> selected = sim.select_mission(1)
    >>> started = sim.initiate_flight()
    >>> events = sim.run(max_ticks=5000)
    >>> sim.last_report.status
    'Successfully Completed'
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging
import random
from typing import Any

from medidrone.config import HOME_POSITION, INITIAL_BATTERY_LEVEL, TICK_DT
from medidrone.energy import BatteryStatus
from medidrone.errors import ConfigurationError, PreconditionError
from medidrone.events import Event
from medidrone.geo import Position
from medidrone.mission import (
    MissionCatalog,
    MissionReport,
    PayloadStatus,
    build_plan,
    pick_target,
)
from medidrone.timer import ScheduledEffect, SimulationClock
from medidrone.unit import ClockTime, Time
from medidrone.vehicles import (
    TERMINAL_PHASES,
    Command,
    MedicalDrone,
    MissionPhase,
    VehicleState,
    VehicleStatus,
)

from .environment import ObstacleMonitor, TelemetryJitter
from .mission_log import MissionLog
from .recorder import FlightRecorder

logger = logging.getLogger(__name__)

Subscriber = Callable[[Event], None]


@dataclass(frozen=True)
class CommandResult:
    """Outcome of an operator command.

    Truthy if the command was accepted.

    Attributes:
        accepted (bool): Whether the command took effect.
        error (PreconditionError | None): Why it was rejected.
        value (Any): Command-specific return value (``MissionSummary`` for a
            selection, ``MissionReport`` for ``generate_report``).
        events (tuple[Event, ...]): Events the command produced.
    """

    accepted: bool
    error: PreconditionError | None = None
    value: Any = None
    events: tuple[Event, ...] = ()

    def __bool__(self) -> bool:
        return self.accepted


class MissionSimulator:
    """Single-drone delivery mission simulator.

    Args:
        catalog (MissionCatalog | None): Mission data; defaults to the built-in catalog.
        rng (random.Random | None): Source for delivery targets. Built from
            ``seed`` when omitted.
        seed (int | None): Seed for the default ``rng``.
        origin (Position): Home position; every plan starts and ends here.
        dt (Time): Tick length of the driver.
        initial_battery (float): Battery percentage at start-up.

    Raises:
        ConfigurationError: If the origin is not finite or the battery level
            is out of range.
    """

    def __init__(
        self,
        catalog: MissionCatalog | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
        origin: Position = HOME_POSITION,
        dt: Time = TICK_DT,
        initial_battery: float = INITIAL_BATTERY_LEVEL,
    ):
        if not origin.is_finite():
            msg = f"Home position has non-finite coordinates: {origin}"
            raise ConfigurationError(msg)

        self.catalog = catalog if catalog is not None else MissionCatalog.default()
        self.rng = rng if rng is not None else random.Random(seed)
        self.origin = origin
        self.clock = SimulationClock(dt)
        self.log = MissionLog(self.clock)
        self.recorder = FlightRecorder()

        # Separate stream so cosmetic draws never shift the target sequence.
        env_rng = random.Random(self.rng.getrandbits(32))
        self.telemetry = TelemetryJitter(env_rng)
        self.obstacles = ObstacleMonitor(env_rng)

        state = VehicleState(position=origin, battery=BatteryStatus(initial_battery))
        self.drone = MedicalDrone(state, self.clock, self.catalog, self.log)
        self._subscribers: list[Subscriber] = []

        self.log.info("System initialized - ready for mission assignment")

    # ------------------------------------------------------------ subscribers

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Push every future event to ``callback``.

        Returns:
            Callable[[], None]: Removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # --------------------------------------------------------------- commands

    def select_mission(self, mission_id: int | str, target: Position | None = None) -> CommandResult:
        """Select a mission and build its plan.

        Args:
            mission_id: Catalog id, as int or decimal string.
            target: Delivery zone; drawn from the target box when omitted.

        Returns:
            CommandResult: ``value`` is the ``MissionSummary``.

        Raises:
            ConfigurationError: If ``target`` has non-finite coordinates.
        """
        scenario = self.catalog.get(mission_id)
        if scenario is None:
            return self._reject(PreconditionError(f"Unknown mission: {mission_id!r}"))
        if self.drone.in_flight:
            return self._reject(PreconditionError(f"Cannot change mission during {self.phase.value}"))

        if target is None:
            target = pick_target(self.rng)
        plan = build_plan(self.origin, target)
        result = self._command(self.drone.load_mission, scenario, plan)
        if not result:
            return result

        self.telemetry.reset(self.drone.payload.temperature_c)
        # Track covers one mission, starting from the state at selection.
        self.recorder.clear()
        self._sample()
        summary = self.catalog.summarize(scenario, target)
        return CommandResult(True, value=summary, events=result.events)

    def initiate_flight(self) -> CommandResult:
        return self._command(self.drone.take_off)

    def pause(self) -> CommandResult:
        return self._command(self.drone.pause)

    def resume(self) -> CommandResult:
        return self._command(self.drone.resume)

    def toggle_pause(self) -> CommandResult:
        if self.drone.is_paused:
            return self.resume()
        return self.pause()

    def emergency_landing(self) -> CommandResult:
        return self._command(self.drone.emergency_landing)

    def return_to_home(self) -> CommandResult:
        return self._command(self.drone.return_to_home)

    def deploy_payload(self) -> CommandResult:
        return self._command(self.drone.deploy_payload)

    def generate_report(self) -> CommandResult:
        """Build the outcome report on demand; ``value`` is the ``MissionReport``."""
        return self._command(self.drone.build_report)

    # ------------------------------------------------------------------- tick

    def tick(self) -> list[Event]:
        """Advance the simulation by one tick.

        Returns:
            list[Event]: Events produced during the tick, in order.
        """
        self.clock.advance()
        dt, now = self.clock.dt, self.clock.now

        self.drone.timer_update(dt)
        self.drone.update(dt, now)

        is_flying = self.drone.state.is_flying
        self.telemetry.update(dt, is_flying)
        if self.obstacles.update(dt, now, is_flying) is not None:
            self.log.warning("Obstacle detected by LiDAR - adjusting flight path")

        if self.drone.state.current_mission is not None:
            self._sample()
        return list(self._flush())

    @property
    def finished(self) -> bool:
        """True when no flight is in progress and no scheduled effect is pending."""
        if self.drone.in_flight and self.drone.state.is_flying:
            return False
        if self.phase in TERMINAL_PHASES:
            return not self.drone.pending_effects
        return self.phase is MissionPhase.READY

    def run(self, max_ticks: int) -> list[Event]:
        """Tick until ``finished`` or ``max_ticks`` ticks have run.

        Returns:
            list[Event]: All events produced, in order.
        """
        events: list[Event] = []
        for _ in range(max_ticks):
            if self.finished:
                break
            events.extend(self.tick())
        return events

    # ---------------------------------------------------------------- queries

    def snapshot(self) -> VehicleStatus:
        return self.drone.state.snapshot()

    @property
    def phase(self) -> MissionPhase:
        return self.drone.phase

    @property
    def current_waypoint_index(self) -> int:
        return self.drone.state.current_waypoint_index

    @property
    def is_paused(self) -> bool:
        return self.drone.is_paused

    @property
    def available_commands(self) -> frozenset[Command]:
        return self.drone.available_commands()

    @property
    def status_text(self) -> str:
        return self.drone.status_text

    @property
    def payload(self) -> PayloadStatus:
        return self.drone.payload

    @property
    def last_report(self) -> MissionReport | None:
        return self.drone.last_report

    @property
    def mission_elapsed(self) -> ClockTime:
        return self.drone.mission_elapsed

    @property
    def pending_effects(self) -> tuple[ScheduledEffect, ...]:
        return self.drone.pending_effects

    # ---------------------------------------------------------------- helpers

    def _command(self, fn: Callable[..., Any], *args) -> CommandResult:
        try:
            value = fn(*args)
        except PreconditionError as exc:
            return self._reject(exc)
        return CommandResult(True, value=value, events=self._flush())

    def _reject(self, error: PreconditionError) -> CommandResult:
        logger.warning("Command rejected: %s", error)
        return CommandResult(False, error=error, events=self._flush())

    def _sample(self) -> None:
        self.recorder.sample(self.clock.ticks, self.clock.now, self.drone.state.snapshot())

    def _flush(self) -> tuple[Event, ...]:
        events = tuple(self.drone.drain_events())
        for event in events:
            for callback in list(self._subscribers):
                callback(event)
        return events

"""Medical delivery drone driven by the mission phase state machine.

``MedicalDrone`` extends ``Vehicle`` with the delivery mission lifecycle:

    READY -> TAKEOFF -> NAVIGATION -> DELIVERY -> RETURN -> COMPLETED
                 \\__________\\____________\\_________\\-> EMERGENCY

Phase changes come from two sources. Commands (select, takeoff, pause,
resume, return-to-home, deploy, emergency landing) are validated against the
current phase and raise ``PreconditionError`` when they do not apply; the
simulator facade turns that into a rejected ``CommandResult``. Waypoint
arrivals are dispatched by ``PhaseTag`` to the ``on_*`` handlers, which take
the graph edge for the reached waypoint.

Each phase has an ``enter_*`` effect bound in the transition graph. Entry
effects set the status text, schedule delayed effects and record flight
bookkeeping (takeoff time, battery at takeoff, landing time).

Pause is not a phase: it clears ``is_flying`` and leaves the phase untouched.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
import logging
from typing import TYPE_CHECKING

from medidrone.config import AUTO_DEPLOY_GRACE, DRAIN_RATE, REPORT_DELAY
from medidrone.errors import PreconditionError
from medidrone.events import EventType
from medidrone.mission import (
    MissionCatalog,
    MissionReport,
    MissionScenario,
    PayloadStatus,
    PhaseTag,
    Waypoint,
    build_mission_report,
    index_of,
)
from medidrone.state import Action
from medidrone.timer import SimulationClock
from medidrone.unit import ClockTime, Time

from .motion import advance, drain_battery
from .vehicle import Vehicle
from .vehicle_state import FLYING_PHASES, MissionPhase, VehicleState

if TYPE_CHECKING:
    from medidrone.simulator.mission_log import MissionLog

logger = logging.getLogger(__name__)

AUTO_DEPLOY_EFFECT = "auto_deploy"
REPORT_EFFECT = "mission_report"


class Command(Enum):
    """Operator commands, as reported by ``available_commands``."""

    SELECT_MISSION = "select_mission"
    TAKEOFF = "takeoff"
    PAUSE = "pause"
    RESUME = "resume"
    RETURN_HOME = "return_home"
    DEPLOY = "deploy"
    EMERGENCY = "emergency"


class MedicalDrone(Vehicle):
    """Single drone flying one delivery mission at a time.

    Attributes:
        catalog (MissionCatalog): Source of supplies and weather for reports.
        log (MissionLog): Operator-facing mission log.
        payload (PayloadStatus): Payload of the current mission.
        status_text (str): Operator-facing status line.
        last_report (MissionReport | None): Most recent outcome report.
        distance_travelled (float): Odometer since takeoff, in plane units.
        max_altitude (float): Peak altitude since takeoff.
    """

    catalog: MissionCatalog
    log: MissionLog
    payload: PayloadStatus
    status_text: str
    last_report: MissionReport | None
    distance_travelled: float
    max_altitude: float
    _generation: int
    _flight_started_at: ClockTime | None
    _flight_ended_at: ClockTime | None
    _battery_at_takeoff: float
    _speed_total: float
    _moving_ticks: int
    _battery_depleted: bool
    _on_arrival: dict[PhaseTag, Callable[[Waypoint], None]]

    def __init__(
        self,
        state: VehicleState,
        clock: SimulationClock,
        catalog: MissionCatalog,
        log: MissionLog,
    ):
        super().__init__(state, clock)
        self.catalog = catalog
        self.log = log
        self.payload = PayloadStatus()
        self.status_text = "Ready for Mission Assignment"
        self.last_report = None
        self._generation = 0
        self._flight_started_at = None
        self._flight_ended_at = None
        self._battery_depleted = state.battery.is_empty()
        self._reset_flight_stats()

        self.init_state_machine(
            MissionPhase.READY,
            {
                MissionPhase.READY: [
                    Action(MissionPhase.READY, self.enter_ready),
                    Action(MissionPhase.TAKEOFF, self.enter_takeoff),
                ],
                MissionPhase.TAKEOFF: [
                    Action(MissionPhase.NAVIGATION, self.enter_navigation),
                    Action(MissionPhase.RETURN, self.enter_return),
                    Action(MissionPhase.EMERGENCY, self.enter_emergency),
                ],
                MissionPhase.NAVIGATION: [
                    Action(MissionPhase.DELIVERY, self.enter_delivery),
                    Action(MissionPhase.RETURN, self.enter_return),
                    Action(MissionPhase.EMERGENCY, self.enter_emergency),
                ],
                MissionPhase.DELIVERY: [
                    Action(MissionPhase.RETURN, self.enter_return),
                    Action(MissionPhase.EMERGENCY, self.enter_emergency),
                ],
                MissionPhase.RETURN: [
                    Action(MissionPhase.COMPLETED, self.enter_completed),
                    Action(MissionPhase.EMERGENCY, self.enter_emergency),
                ],
                MissionPhase.COMPLETED: [Action(MissionPhase.READY, self.enter_ready)],
                MissionPhase.EMERGENCY: [Action(MissionPhase.READY, self.enter_ready)],
            },
        )

        self._on_arrival = {
            PhaseTag.TAKEOFF: self.on_takeoff_point,
            PhaseTag.NAVIGATION: self.on_navigation_point,
            PhaseTag.DELIVERY: self.on_delivery_zone,
            PhaseTag.RETURN: self.on_return_point,
            PhaseTag.LANDING: self.on_landing_zone,
        }

    # ---------------------------------------------------------------- queries

    @property
    def phase(self) -> MissionPhase:
        return self.state.mission_phase

    @property
    def in_flight(self) -> bool:
        """True in a flying phase, paused or not."""
        return self.state.mission_phase in FLYING_PHASES

    @property
    def is_paused(self) -> bool:
        return self.in_flight and not self.state.is_flying

    @property
    def mission_elapsed(self) -> ClockTime:
        """Simulated time since takeoff; frozen once the flight ended."""
        if self._flight_started_at is None:
            return ClockTime(0)
        if self._flight_ended_at is None:
            return self.clock.since(self._flight_started_at)
        return ClockTime.from_si(max(0.0, float(self._flight_ended_at) - float(self._flight_started_at)))

    @property
    def average_speed(self) -> float:
        if not self._moving_ticks:
            return 0.0
        return self._speed_total / self._moving_ticks

    @property
    def battery_consumed(self) -> float:
        return max(0.0, self._battery_at_takeoff - self.state.battery_level)

    def available_commands(self) -> frozenset[Command]:
        """Commands that would currently be accepted."""
        commands = set()
        if not self.in_flight:
            commands.add(Command.SELECT_MISSION)
            if (
                self.phase is MissionPhase.READY
                and self.state.current_mission is not None
                and self.is_operational()
            ):
                commands.add(Command.TAKEOFF)
            return frozenset(commands)

        commands.add(Command.EMERGENCY)
        if self.state.is_flying:
            commands.update((Command.PAUSE, Command.RETURN_HOME))
        else:
            commands.add(Command.RESUME)
        if self.phase is MissionPhase.DELIVERY:
            commands.add(Command.DEPLOY)
        return frozenset(commands)

    def is_operational(self) -> bool:
        return not self.state.battery.is_empty()

    # --------------------------------------------------------------- commands

    def load_mission(self, scenario: MissionScenario, plan: tuple[Waypoint, ...]) -> None:
        """Make ``scenario`` the active mission, flying ``plan``.

        Raises:
            PreconditionError: While a mission is in flight.
        """
        if self.in_flight:
            msg = f"Cannot change mission during {self.phase.value}"
            raise PreconditionError(msg)

        self._generation += 1
        self.state.current_mission = scenario
        self.state.waypoints = plan
        self.state.current_waypoint_index = 0
        self.payload = PayloadStatus.load(self.catalog.supplies_for(scenario))
        self.last_report = None
        self._flight_started_at = None
        self._flight_ended_at = None
        self._reset_flight_stats()

        self._change_phase(MissionPhase.READY)
        self._set_status("Mission Selected - Ready for Takeoff")
        self.emit(EventType.MISSION_SELECTED, mission_id=scenario.id, name=scenario.name)
        self.log.info(f"Mission selected: {scenario.name}")

    def take_off(self) -> None:
        """Start flying the loaded plan.

        Raises:
            PreconditionError: If no mission is selected or the drone is not READY.
        """
        if self.state.current_mission is None:
            msg = "no mission selected"
            raise PreconditionError(msg)
        if self.phase is not MissionPhase.READY:
            msg = f"Cannot take off during {self.phase.value}"
            raise PreconditionError(msg)
        if not self.is_operational():
            msg = "Battery depleted"
            raise PreconditionError(msg)

        self.state.is_flying = True
        self._change_phase(MissionPhase.TAKEOFF)

    def pause(self) -> None:
        if not (self.in_flight and self.state.is_flying):
            msg = "Nothing to pause"
            raise PreconditionError(msg)
        self.state.is_flying = False
        self._set_status("Mission Paused")
        self.emit(EventType.FLIGHT_PAUSED, phase=self.phase)
        self.log.warning("Mission paused by operator")

    def resume(self) -> None:
        if not self.is_paused:
            msg = "Mission is not paused"
            raise PreconditionError(msg)
        self.state.is_flying = True
        self._set_status("Mission Resumed")
        self.emit(EventType.FLIGHT_RESUMED, phase=self.phase)
        self.log.info("Mission resumed")

    def emergency_landing(self) -> None:
        if not self.in_flight:
            msg = f"No flight to abort during {self.phase.value}"
            raise PreconditionError(msg)
        self._change_phase(MissionPhase.EMERGENCY)

    def return_to_home(self) -> None:
        """Abandon the remaining outbound legs and head for the return waypoint.

        Raises:
            PreconditionError: Unless the drone is flying and not paused.
        """
        if not (self.in_flight and self.state.is_flying):
            msg = f"Return to home unavailable during {self.phase.value}"
            raise PreconditionError(msg)

        self.state.advance_cursor_to(len(self.state.waypoints) - 2)
        if self.phase is not MissionPhase.RETURN:
            self._change_phase(MissionPhase.RETURN)
        self._set_status("Return to Home - Manual Override")
        self.log.warning("Manual return to home initiated")

    def deploy_payload(self) -> None:
        if self.phase is not MissionPhase.DELIVERY:
            msg = f"Payload can only be deployed at the delivery zone, not during {self.phase.value}"
            raise PreconditionError(msg)
        self._release_payload(automatic=False)

    def build_report(self) -> MissionReport:
        """Build the outcome report for the current mission from measured values.

        Raises:
            PreconditionError: If no mission was ever selected.
        """
        scenario = self.state.current_mission
        if scenario is None:
            msg = "no mission selected"
            raise PreconditionError(msg)
        return build_mission_report(
            scenario,
            self.catalog.supplies_for(scenario),
            self.catalog.weather_for(scenario),
            self.payload,
            completed=self.phase is MissionPhase.COMPLETED,
            duration=self.mission_elapsed,
            distance_travelled=self.distance_travelled,
            max_altitude=self.max_altitude,
            battery_consumed=self.battery_consumed,
            average_speed=self.average_speed,
        )

    # ----------------------------------------------------------------- update

    def update(self, dt: Time, now: Time) -> None:
        """Move along the plan for one tick and drain the battery."""
        if not self.state.is_flying or self.state.plan_exhausted:
            return

        before = self.state.position
        reached = advance(self.state)
        if reached is None:
            self.distance_travelled += before.distance_to(self.state.position)
            self.max_altitude = max(self.max_altitude, self.state.altitude)
            self._speed_total += self.state.speed
            self._moving_ticks += 1
        else:
            self.emit(
                EventType.WAYPOINT_REACHED,
                index=self.state.current_waypoint_index - 1,
                label=reached.label,
                phase_tag=reached.phase_tag,
            )
            self._on_arrival[reached.phase_tag](reached)

        if drain_battery(self.state, DRAIN_RATE) and not self._battery_depleted:
            self._battery_depleted = True
            self.emit(EventType.BATTERY_DEPLETED, phase=self.phase)
            self.log.error("Battery depleted")

    # --------------------------------------------------------- arrival hooks

    def on_takeoff_point(self, waypoint: Waypoint) -> None:
        self.log.info("Takeoff waypoint reached - climbing to cruise altitude")
        if self.phase is MissionPhase.TAKEOFF:
            self._change_phase(MissionPhase.NAVIGATION)

    def on_navigation_point(self, waypoint: Waypoint) -> None:
        self.log.info(f"{waypoint.label} reached")

    def on_delivery_zone(self, waypoint: Waypoint) -> None:
        self.log.success("Delivery zone reached - ready for payload drop")
        if self.phase is MissionPhase.NAVIGATION:
            self._change_phase(MissionPhase.DELIVERY)

    def on_return_point(self, waypoint: Waypoint) -> None:
        self.log.info("Return waypoint reached - beginning final approach")
        if self.can_transition_to(MissionPhase.RETURN):
            self._change_phase(MissionPhase.RETURN)
        self._set_status("Final Approach to Base")

    def on_landing_zone(self, waypoint: Waypoint) -> None:
        if self.can_transition_to(MissionPhase.COMPLETED):
            self._change_phase(MissionPhase.COMPLETED)

    # ------------------------------------------------------------ phase entry

    def enter_ready(self, previous: MissionPhase) -> None:
        # READY is on the ground, including after an emergency landing.
        self.state.is_flying = False
        self.state.altitude = 0.0
        self.state.speed = 0.0

    def enter_takeoff(self, previous: MissionPhase) -> None:
        self._flight_started_at = self.clock.now
        self._flight_ended_at = None
        self._reset_flight_stats()
        self._set_status("Initiating Takeoff Sequence")
        self.log.success("Takeoff sequence initiated")

    def enter_navigation(self, previous: MissionPhase) -> None:
        self._set_status("Navigating to Target Zone")

    def enter_delivery(self, previous: MissionPhase) -> None:
        self._set_status("At Delivery Zone - Ready to Deploy")
        generation = self._generation
        self.schedule_effect(
            AUTO_DEPLOY_EFFECT,
            AUTO_DEPLOY_GRACE,
            self._auto_deploy,
            lambda: self.phase is MissionPhase.DELIVERY and self._generation == generation,
        )

    def enter_return(self, previous: MissionPhase) -> None:
        self._set_status("Returning to Base")

    def enter_completed(self, previous: MissionPhase) -> None:
        self._land()
        self._set_status("Mission Completed Successfully")
        self.emit(EventType.MISSION_COMPLETED, mission_id=self.state.current_mission.id)
        self.log.success("Mission completed - drone landed at base")
        generation = self._generation
        self.schedule_effect(
            REPORT_EFFECT,
            REPORT_DELAY,
            self._publish_report,
            lambda: self.phase is MissionPhase.COMPLETED and self._generation == generation,
        )

    def enter_emergency(self, previous: MissionPhase) -> None:
        self.state.is_flying = False
        self.state.speed = 0.0
        self._flight_ended_at = self.clock.now
        self._set_status("Emergency Landing Initiated")
        self.log.error("EMERGENCY LANDING INITIATED")
        self.log.warning("All systems switching to emergency protocols")

    # ---------------------------------------------------------------- helpers

    def _change_phase(self, phase: MissionPhase) -> None:
        previous = self.state.mission_phase
        if not self.can_transition_to(phase):
            msg = f"Cannot go from {previous.value} to {phase.value}"
            raise PreconditionError(msg)
        self.state.mission_phase = phase
        if previous is not phase:
            logger.debug("Phase %s -> %s", previous.value, phase.value)
            self.emit(EventType.PHASE_CHANGED, previous=previous, phase=phase)
        self.transition_to(phase, previous)

    def _set_status(self, text: str) -> None:
        if text == self.status_text:
            return
        self.status_text = text
        self.emit(EventType.STATUS_CHANGED, status=text)

    def _reset_flight_stats(self) -> None:
        self.distance_travelled = 0.0
        self.max_altitude = self.state.altitude
        self._battery_at_takeoff = self.state.battery_level
        self._speed_total = 0.0
        self._moving_ticks = 0

    def _land(self) -> None:
        self.state.is_flying = False
        self.state.altitude = 0.0
        self.state.speed = 0.0
        self._flight_ended_at = self.clock.now

    def _release_payload(self, automatic: bool) -> None:
        self.payload.release()
        delivery = index_of(self.state.waypoints, PhaseTag.DELIVERY)
        if delivery is not None:
            self.state.advance_cursor_to(delivery + 1)
        self.log.success("Payload deployed successfully")
        self.log.success("Medical supplies delivered to target zone")
        self._change_phase(MissionPhase.RETURN)
        self._set_status("Payload Delivered - Returning to Base")
        self.emit(EventType.PAYLOAD_DEPLOYED, automatic=automatic)

    def _auto_deploy(self) -> None:
        self.log.info("Delivery grace period elapsed - deploying payload automatically")
        self._release_payload(automatic=True)

    def _publish_report(self) -> None:
        self.last_report = self.build_report()
        self.emit(EventType.REPORT_READY, report=self.last_report)
        self.log.info("Mission report generated")

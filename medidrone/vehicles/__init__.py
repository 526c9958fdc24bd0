"""Vehicle models and the per-tick core functions that move them.

Components:
    Vehicle: Abstract base with state machine, scheduled effects and events
    MedicalDrone: Delivery drone running the mission phase machine
    VehicleState / VehicleStatus: Mutable state and its snapshot
    advance / drain_battery: Motion integrator and battery drain
    apply_telemetry: Speed, heading and altitude derivation
"""

from .drone import AUTO_DEPLOY_EFFECT, REPORT_EFFECT, Command, MedicalDrone
from .motion import advance, drain_battery, step_toward
from .telemetry import apply_telemetry, derive_heading, derive_speed, next_altitude, normalize_heading
from .vehicle import Vehicle
from .vehicle_state import FLYING_PHASES, TERMINAL_PHASES, MissionPhase, VehicleState, VehicleStatus

__all__ = [
    "Vehicle",
    "MedicalDrone",
    "Command",
    "AUTO_DEPLOY_EFFECT",
    "REPORT_EFFECT",
    "VehicleState",
    "VehicleStatus",
    "MissionPhase",
    "FLYING_PHASES",
    "TERMINAL_PHASES",
    "advance",
    "drain_battery",
    "step_toward",
    "apply_telemetry",
    "derive_heading",
    "derive_speed",
    "next_altitude",
    "normalize_heading",
]

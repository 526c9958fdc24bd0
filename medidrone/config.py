"""Simulation constants for the medical-delivery drone demo.

Edit these values to retune the demo. Durations use the type-safe time units;
distances, speeds and altitudes are plain floats in simulation-plane units.

The per-tick constants (``STEP_SIZE``, climb and descent rates, ``DRAIN_RATE``)
are applied once per tick and are not scaled by ``TICK_DT``: the simulated
speed depends on the tick rate of the driver.
"""

from medidrone.geo import Position
from medidrone.unit import Second

# Clock
TICK_DT = Second(0.1)  # 10 Hz driver

# Motion integrator
STEP_SIZE = 1.5  # plane units per tick
ARRIVAL_EPSILON = 3.0  # plane units

# Telemetry derivation
SPEED_CAP = 45.0
SPEED_SCALE = 0.8
TAKEOFF_CLIMB_RATE = 0.8  # m per tick
TAKEOFF_ALTITUDE_CAP = 100.0
NAVIGATION_CLIMB_RATE = 0.3
NAVIGATION_ALTITUDE_CAP = 150.0
DELIVERY_DESCENT_RATE = 0.5
DELIVERY_ALTITUDE_FLOOR = 20.0

# Resource drain
INITIAL_BATTERY_LEVEL = 98.0  # percent
DRAIN_RATE = 0.0008  # percent per tick

# Delayed effects
AUTO_DEPLOY_GRACE = Second(5)
REPORT_DELAY = Second(3)

# Waypoint plan
HOME_POSITION = Position(50.0, 280.0)
TAKEOFF_OFFSET = Position(50.0, -50.0)
RETURN_OFFSET = Position(100.0, -80.0)
# Per-axis scale factors applied to the target for the two navigation legs.
NAVIGATION_SCALES = ((0.4, 0.8), (0.7, 1.1))
TARGET_X_RANGE = (200.0, 500.0)
TARGET_Y_RANGE = (50.0, 200.0)

# Payload
DEFAULT_PAYLOAD_TEMPERATURE = 4.2  # °C
COLD_CHAIN_TEMPERATURE = 3.8
COLD_CHAIN_MARKER = "2-"

# Mission log
LOG_CAPACITY = 50

# Cosmetic environment (presentation only)
TELEMETRY_REFRESH_INTERVAL = Second(2)
OBSTACLE_SCAN_INTERVAL = Second(15)
OBSTACLE_PROBABILITY = 0.3
PAYLOAD_TEMPERATURE_RANGE = (2.0, 6.0)
OBSTACLE_ALERT_DURATION = Second(8)

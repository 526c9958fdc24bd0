"""Error taxonomy for the mission simulator.

Two kinds of failure exist in the simulator core:

    PreconditionError: A command was issued in a phase where it is not valid
        (takeoff without a mission, payload deploy outside the delivery zone,
        ...). These are always recoverable. The public command API never raises
        them; it returns them inside a rejected ``CommandResult`` so callers can
        show them to the user.

    ConfigurationError: Mission, waypoint or battery data is malformed
        (non-finite coordinates, unknown supply ids, out-of-range battery level).
        These are raised eagerly at construction time so that bad data never
        reaches the tick loop.
"""


class MediDroneError(Exception):
    """Base class for all simulator errors."""


class PreconditionError(MediDroneError):
    """A command is not valid in the current mission phase."""


class ConfigurationError(MediDroneError, ValueError):
    """Mission, plan or vehicle data failed validation."""

"""Delayed effects with a fire-time precondition.

A ``ScheduledEffect`` pairs a ``Timer`` with the effect to run when it
expires and a precondition that is evaluated at fire time. Between
scheduling and firing the mission may have moved on (a manual deploy, an
emergency landing, a new mission); if the precondition no longer holds, the
effect is dropped without running.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
import logging

from .timer import Timer

logger = logging.getLogger(__name__)

EffectFn = Callable[[], None]
Precondition = Callable[[], bool]


@dataclass
class ScheduledEffect:
    """A named effect fired once its timer expires.

    Attributes:
        name (str): Identifier used in logs and queries (``"auto_deploy"``, ...).
        timer (Timer): Countdown until the effect is due.
        effect (EffectFn): The effect to run.
        precondition (Precondition): Re-checked at fire time.
        fired (bool): True once the effect ran.
        stale (bool): True if the precondition failed at fire time.
    """

    name: str
    timer: Timer
    effect: EffectFn
    precondition: Precondition = field(default=lambda: True)
    fired: bool = False
    stale: bool = False

    @property
    def due(self) -> bool:
        return self.timer.done

    @property
    def settled(self) -> bool:
        """True once the effect either fired or was dropped as stale."""
        return self.fired or self.stale

    def fire(self) -> bool:
        """Run the effect if its precondition still holds.

        Returns:
            bool: True if the effect ran, False if it was stale.
        """
        if self.settled:
            return False
        if not self.precondition():
            self.stale = True
            logger.debug("Scheduled effect %s dropped: precondition no longer holds", self.name)
            return False
        self.fired = True
        self.effect()
        return True

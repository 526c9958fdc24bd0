"""Medical payload carried by the drone."""

from __future__ import annotations

from dataclasses import dataclass

from medidrone.config import COLD_CHAIN_MARKER, COLD_CHAIN_TEMPERATURE, DEFAULT_PAYLOAD_TEMPERATURE

from .catalog import MedicalSupply


@dataclass
class PayloadStatus:
    """Mutable payload state for the active mission.

    Attributes:
        weight_kg (float): Weight still on board; zero once deployed.
        temperature_c (float): Cargo bay temperature.
        delivered (bool): True once the payload was released at the delivery zone.
    """

    weight_kg: float = 0.0
    temperature_c: float = DEFAULT_PAYLOAD_TEMPERATURE
    delivered: bool = False

    @classmethod
    def load(cls, supplies: list[MedicalSupply]) -> PayloadStatus:
        """Load ``supplies``; cold-chain items lower the bay temperature."""
        cold_chain = any(COLD_CHAIN_MARKER in s.temp_requirement for s in supplies)
        return cls(
            weight_kg=sum(s.weight_kg for s in supplies),
            temperature_c=COLD_CHAIN_TEMPERATURE if cold_chain else DEFAULT_PAYLOAD_TEMPERATURE,
        )

    def release(self) -> None:
        self.weight_kg = 0.0
        self.delivered = True

    @property
    def status_text(self) -> str:
        return "Successfully Delivered" if self.delivered else "Still Loaded"

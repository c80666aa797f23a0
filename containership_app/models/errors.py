"""
Load outcomes and errors raised by containers and vessels.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LoadFailure(Enum):
    LIQUID_HAZARDOUS_OVERFILL = "liquid_hazardous_overfill"
    LIQUID_OVERFILL = "liquid_overfill"
    GAS_OVERFILL = "gas_overfill"
    TEMPERATURE_TOO_LOW = "temperature_too_low"
    REFRIGERATED_OVERFILL = "refrigerated_overfill"

    @property
    def is_overfill(self) -> bool:
        return self is not LoadFailure.TEMPERATURE_TOO_LOW


@dataclass(slots=True, frozen=True)
class LoadOutcome:
    """Result of checking (or applying) a load against a container's rules."""

    accepted: bool
    weight: float
    limit: float
    failure: LoadFailure | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.accepted

    @classmethod
    def accept(cls, weight: float, limit: float) -> "LoadOutcome":
        return cls(accepted=True, weight=weight, limit=limit)

    @classmethod
    def reject(cls, weight: float, limit: float, failure: LoadFailure, message: str) -> "LoadOutcome":
        return cls(accepted=False, weight=weight, limit=limit, failure=failure, message=message)


@dataclass(slots=True, eq=False)
class OverfillError(Exception):
    message: str
    failure: LoadFailure | None = None
    serial_number: str = ""

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class ContainerSpecError(ValueError):
    """Invalid physical attributes given when building a container."""


class VesselSpecError(ValueError):
    """Invalid configuration given when building a vessel."""

"""
Container vessel with fleet-wide capacity limits.

A vessel admits a container only while both the container count and the
total gross weight (tare + cargo, in kg) stay within its configured limits.
The weight limit is configured in tonnes.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

from ..config.limits import KG_PER_TONNE
from .container import Container, format_quantity
from .errors import VesselSpecError

_LOG = logging.getLogger(__name__)


class Vessel:
    """Owns an ordered collection of containers; load order is preserved."""

    __slots__ = ("_name", "_max_speed", "_max_container_count", "_max_total_weight_tons", "_containers")

    def __init__(
        self,
        name: str,
        max_speed: float,
        max_container_count: int,
        max_total_weight_tons: float,
    ) -> None:
        if max_speed < 0:
            raise VesselSpecError("Max speed must not be negative.")
        if max_container_count < 0:
            raise VesselSpecError("Max container count must not be negative.")
        if max_total_weight_tons < 0:
            raise VesselSpecError("Max total weight must not be negative.")

        self._name = name
        self._max_speed = float(max_speed)
        self._max_container_count = int(max_container_count)
        self._max_total_weight_tons = float(max_total_weight_tons)
        self._containers: List[Container] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def max_speed(self) -> float:
        return self._max_speed

    @property
    def max_container_count(self) -> int:
        return self._max_container_count

    @property
    def max_total_weight_tons(self) -> float:
        return self._max_total_weight_tons

    @property
    def max_total_weight_kg(self) -> float:
        return self._max_total_weight_tons * KG_PER_TONNE

    @property
    def containers(self) -> Tuple[Container, ...]:
        """Snapshot of the loaded containers in load order."""
        return tuple(self._containers)

    def total_weight_kg(self) -> float:
        return sum(c.tare_weight + c.current_load for c in self._containers)

    def remaining_weight_kg(self) -> float:
        return self.max_total_weight_kg - self.total_weight_kg()

    def can_accept(self, container: Container) -> bool:
        if len(self._containers) >= self._max_container_count:
            return False
        incoming = container.tare_weight + container.current_load
        return self.total_weight_kg() + incoming <= self.max_total_weight_kg

    def load_container(self, container: Container) -> bool:
        """
        Take the container aboard if count and weight limits allow it.

        Returns False (and keeps nothing) when either limit would be exceeded;
        this is an ordinary outcome, not an error.
        """
        if not self.can_accept(container):
            _LOG.info(
                "%s rejected %s: %d/%d containers, %.1f/%.1f kg",
                self._name,
                container.serial_number,
                len(self._containers),
                self._max_container_count,
                self.total_weight_kg(),
                self.max_total_weight_kg,
            )
            return False
        self._containers.append(container)
        _LOG.info("%s loaded %s", self._name, container.serial_number)
        return True

    def remove_container(self, serial_number: str) -> bool:
        """Remove every container carrying this serial; True if any was removed."""
        kept = [c for c in self._containers if c.serial_number != serial_number]
        removed = len(self._containers) - len(kept)
        if not removed:
            return False
        self._containers = kept
        _LOG.info("%s removed %s", self._name, serial_number)
        return True

    def find_container(self, serial_number: str) -> Container | None:
        for c in self._containers:
            if c.serial_number == serial_number:
                return c
        return None

    def describe_containers(self) -> List[str]:
        return [c.describe() for c in self._containers]

    def summary(self) -> str:
        speed = format_quantity(self._max_speed)
        max_weight = format_quantity(self._max_total_weight_tons)
        lines = [f"Ship: {self._name} Speed: {speed}kn Max weight: {max_weight}t"]
        lines.extend(self.describe_containers())
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self._containers)

    def __iter__(self) -> Iterator[Container]:
        return iter(tuple(self._containers))

    def __contains__(self, serial_number: object) -> bool:
        return any(c.serial_number == serial_number for c in self._containers)

    def __repr__(self) -> str:
        return f"Vessel(name={self._name!r}, containers={len(self._containers)})"

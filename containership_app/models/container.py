"""
Cargo container kinds and their loading rules.

Each kind decides on its own limit for a requested load:

- Liquid: 50% of max payload for hazardous cargo, 90% otherwise.
- Gas: the full max payload; unloading leaves 5% of the gas behind.
- Refrigerated: the full max payload, but only when the container is kept at
  or above the temperature the product requires.

A load that breaks the rule never changes the container. ``try_load`` reports
the result as a :class:`LoadOutcome`; ``load`` raises :class:`OverfillError`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, Dict

from ..config.limits import (
    GAS_RESIDUAL_FRACTION,
    LIQUID_FILL_FRACTION,
    LIQUID_HAZARDOUS_FILL_FRACTION,
)
from .errors import ContainerSpecError, LoadFailure, LoadOutcome, OverfillError
from .hazard import emit_hazard, notify_if_capable
from .serials import SerialNumberGenerator, default_generator

_LOG = logging.getLogger(__name__)


class ContainerKind(Enum):
    LIQUID = "L"
    GAS = "G"
    REFRIGERATED = "C"

    @property
    def code(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return f"{self.name.capitalize()}Container"

    @classmethod
    def from_code(cls, code: str) -> "ContainerKind":
        try:
            return cls(code.strip().upper())
        except ValueError as e:
            raise ContainerSpecError(f"Unknown container kind code '{code}'.") from e


def format_quantity(value: float) -> str:
    """Exact decimal text for a quantity; whole numbers print without ``.0``."""
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


class Container(ABC):
    """
    Base for all container kinds.

    Physical attributes are fixed at construction; ``current_load`` is only
    changed through ``load``/``try_load`` and ``unload``.
    """

    kind: ClassVar[ContainerKind]

    __slots__ = (
        "_serial_number",
        "_height",
        "_depth",
        "_tare_weight",
        "_max_payload",
        "_current_load",
    )

    def __init__(
        self,
        height: int,
        depth: int,
        tare_weight: float,
        max_payload: float,
        *,
        serials: SerialNumberGenerator | None = None,
    ) -> None:
        if height < 0 or depth < 0:
            raise ContainerSpecError("Height and depth must not be negative.")
        if tare_weight < 0:
            raise ContainerSpecError("Tare weight must not be negative.")
        if max_payload < 0:
            raise ContainerSpecError("Max payload must not be negative.")

        self._height = int(height)
        self._depth = int(depth)
        self._tare_weight = float(tare_weight)
        self._max_payload = float(max_payload)
        self._current_load = 0.0

        generator = default_generator() if serials is None else serials
        self._serial_number = generator.next_serial(self.kind.code)

    # ---------- attributes ----------
    @property
    def serial_number(self) -> str:
        return self._serial_number

    @property
    def height(self) -> int:
        return self._height

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def tare_weight(self) -> float:
        return self._tare_weight

    @property
    def max_payload(self) -> float:
        return self._max_payload

    @property
    def current_load(self) -> float:
        return self._current_load

    @property
    def gross_weight(self) -> float:
        """Tare plus cargo, in kg."""
        return self._tare_weight + self._current_load

    # ---------- loading ----------
    @abstractmethod
    def evaluate_load(self, weight: float, is_hazardous: bool = False) -> LoadOutcome:
        """Check a load against this kind's rules without touching the container."""

    @abstractmethod
    def unload(self) -> None:
        ...

    def _record_request(self, is_hazardous: bool) -> None:
        """Hook for kinds that remember something about every load request."""

    def try_load(self, weight: float, is_hazardous: bool = False) -> LoadOutcome:
        """
        Apply a load and report the outcome.

        On success ``current_load`` becomes ``weight`` (replacing, not adding).
        On an overfill the hazard alert fires first for kinds that have one;
        the load itself is left untouched on any failure.
        """
        self._record_request(is_hazardous)
        outcome = self.evaluate_load(weight, is_hazardous)
        if outcome.ok:
            self._current_load = float(weight)
            _LOG.debug("%s loaded with %s kg", self._serial_number, format_quantity(self._current_load))
            return outcome

        if outcome.failure is not None and outcome.failure.is_overfill:
            notify_if_capable(self)
        _LOG.debug(
            "%s rejected load of %s kg (limit %s kg): %s",
            self._serial_number, format_quantity(float(weight)), format_quantity(outcome.limit), outcome.message,
        )
        return outcome

    def load(self, weight: float, is_hazardous: bool = False) -> None:
        outcome = self.try_load(weight, is_hazardous)
        if not outcome.ok:
            raise OverfillError(outcome.message, outcome.failure, self._serial_number)

    # ---------- description ----------
    def _extra_description(self) -> str:
        return ""

    def describe(self) -> str:
        text = f"[{self.kind.label}] {self._serial_number} Load: {format_quantity(self._current_load)}"
        extra = self._extra_description()
        return f"{text}, {extra}" if extra else text

    def to_dict(self) -> Dict[str, Any]:
        return {
            "serial_number": self._serial_number,
            "kind": self.kind.code,
            "height": self._height,
            "depth": self._depth,
            "tare_weight": self._tare_weight,
            "max_payload": self._max_payload,
            "current_load": self._current_load,
            "gross_weight": self.gross_weight,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(serial_number={self._serial_number!r}, current_load={self._current_load!r})"


class LiquidContainer(Container):
    kind = ContainerKind.LIQUID

    __slots__ = ("_is_hazardous",)

    def __init__(
        self,
        height: int,
        depth: int,
        tare_weight: float,
        max_payload: float,
        *,
        serials: SerialNumberGenerator | None = None,
    ) -> None:
        super().__init__(height, depth, tare_weight, max_payload, serials=serials)
        self._is_hazardous = False

    @property
    def is_hazardous(self) -> bool:
        """Hazard flag from the most recent load request."""
        return self._is_hazardous

    def _record_request(self, is_hazardous: bool) -> None:
        self._is_hazardous = bool(is_hazardous)

    def load_limit(self, is_hazardous: bool) -> float:
        fraction = LIQUID_HAZARDOUS_FILL_FRACTION if is_hazardous else LIQUID_FILL_FRACTION
        return fraction * self._max_payload

    def evaluate_load(self, weight: float, is_hazardous: bool = False) -> LoadOutcome:
        limit = self.load_limit(is_hazardous)
        if weight > limit:
            failure = LoadFailure.LIQUID_HAZARDOUS_OVERFILL if is_hazardous else LoadFailure.LIQUID_OVERFILL
            return LoadOutcome.reject(weight, limit, failure, "Overfilled hazardous liquid container")
        return LoadOutcome.accept(weight, limit)

    def unload(self) -> None:
        self._current_load = 0.0

    def notify_hazard(self, serial_number: str) -> None:
        emit_hazard("Hazardous situation in container", serial_number)

    def _extra_description(self) -> str:
        return f"Hazardous: {'yes' if self._is_hazardous else 'no'}"

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["is_hazardous"] = self._is_hazardous
        return d


class GasContainer(Container):
    kind = ContainerKind.GAS

    __slots__ = ("_pressure",)

    def __init__(
        self,
        height: int,
        depth: int,
        tare_weight: float,
        max_payload: float,
        pressure: float,
        *,
        serials: SerialNumberGenerator | None = None,
    ) -> None:
        super().__init__(height, depth, tare_weight, max_payload, serials=serials)
        self._pressure = float(pressure)

    @property
    def pressure(self) -> float:
        return self._pressure

    def evaluate_load(self, weight: float, is_hazardous: bool = False) -> LoadOutcome:
        # The hazard flag plays no part in gas limits.
        limit = self._max_payload
        if weight > limit:
            return LoadOutcome.reject(weight, limit, LoadFailure.GAS_OVERFILL, "Overfilled gas container")
        return LoadOutcome.accept(weight, limit)

    def unload(self) -> None:
        self._current_load *= GAS_RESIDUAL_FRACTION

    def notify_hazard(self, serial_number: str) -> None:
        emit_hazard("Hazardous situation in gas container", serial_number)

    def _extra_description(self) -> str:
        return f"Pressure: {format_quantity(self._pressure)}"

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["pressure"] = self._pressure
        return d


class RefrigeratedContainer(Container):
    kind = ContainerKind.REFRIGERATED

    __slots__ = ("_product_type", "_required_temp", "_container_temp")

    def __init__(
        self,
        height: int,
        depth: int,
        tare_weight: float,
        max_payload: float,
        product_type: str,
        required_temp: float,
        container_temp: float,
        *,
        serials: SerialNumberGenerator | None = None,
    ) -> None:
        super().__init__(height, depth, tare_weight, max_payload, serials=serials)
        self._product_type = product_type
        self._required_temp = float(required_temp)
        self._container_temp = float(container_temp)

    @property
    def product_type(self) -> str:
        return self._product_type

    @property
    def required_temp(self) -> float:
        return self._required_temp

    @property
    def container_temp(self) -> float:
        return self._container_temp

    def evaluate_load(self, weight: float, is_hazardous: bool = False) -> LoadOutcome:
        limit = self._max_payload
        if self._container_temp < self._required_temp:
            return LoadOutcome.reject(
                weight, limit, LoadFailure.TEMPERATURE_TOO_LOW, "Temperature too low for product type"
            )
        if weight > limit:
            return LoadOutcome.reject(
                weight, limit, LoadFailure.REFRIGERATED_OVERFILL, "Overfilled refrigerated container"
            )
        return LoadOutcome.accept(weight, limit)

    def unload(self) -> None:
        self._current_load = 0.0

    def _extra_description(self) -> str:
        return f"Product: {self._product_type}"

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update(
            product_type=self._product_type,
            required_temp=self._required_temp,
            container_temp=self._container_temp,
        )
        return d


_KIND_CLASSES: Dict[ContainerKind, type[Container]] = {
    ContainerKind.LIQUID: LiquidContainer,
    ContainerKind.GAS: GasContainer,
    ContainerKind.REFRIGERATED: RefrigeratedContainer,
}


def build_container(kind: ContainerKind | str, *args: Any, **kwargs: Any) -> Container:
    """Construct a container from its kind (or kind code letter)."""
    if not isinstance(kind, ContainerKind):
        kind = ContainerKind.from_code(kind)
    return _KIND_CLASSES[kind](*args, **kwargs)

"""
Domain models for the container ship app.

Containers (liquid, gas, refrigerated), the vessel that carries them, and the
serial number generator shared by all container kinds.
"""

from .container import (
    Container,
    ContainerKind,
    GasContainer,
    LiquidContainer,
    RefrigeratedContainer,
    build_container,
    format_quantity,
)
from .errors import ContainerSpecError, LoadFailure, LoadOutcome, OverfillError, VesselSpecError
from .hazard import HazardNotifier, notify_if_capable
from .serials import SerialNumberGenerator, default_generator, next_serial
from .vessel import Vessel

__all__ = [
    "Container",
    "ContainerKind",
    "LiquidContainer",
    "GasContainer",
    "RefrigeratedContainer",
    "build_container",
    "format_quantity",
    "Vessel",
    "OverfillError",
    "LoadFailure",
    "LoadOutcome",
    "ContainerSpecError",
    "VesselSpecError",
    "HazardNotifier",
    "notify_if_capable",
    "SerialNumberGenerator",
    "default_generator",
    "next_serial",
]

"""
Hazard notification capability.

Only some container kinds can raise a hazard alert (liquid and gas). Callers
go through :class:`HazardNotifier` instead of assuming every container has it.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

_LOG = logging.getLogger(__name__)


@runtime_checkable
class HazardNotifier(Protocol):
    def notify_hazard(self, serial_number: str) -> None:
        """Emit a hazard alert for the given container. Must not fail or change state."""
        ...


def emit_hazard(message: str, serial_number: str) -> None:
    _LOG.warning("%s %s", message, serial_number)


def notify_if_capable(container: object) -> bool:
    """Send a hazard alert when the container supports it; return whether one was sent."""
    if not isinstance(container, HazardNotifier):
        return False
    container.notify_hazard(getattr(container, "serial_number", ""))
    return True

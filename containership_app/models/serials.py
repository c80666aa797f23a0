"""
Serial number allocation for containers.

Every container receives a serial of the form ``KON-<kind code>-<n>``. The
sequence number comes from a single counter shared by all kinds, so the
numeric suffix is unique across the whole process, not per kind.

The process-wide generator is plain module state with no locking; callers
that need isolation (or run several threads) should pass their own
:class:`SerialNumberGenerator` to the containers they build.
"""

from __future__ import annotations

from ..config.limits import SERIAL_PREFIX, SERIAL_START


class SerialNumberGenerator:
    """Monotonic serial allocator shared across container kinds."""

    __slots__ = ("_next",)

    def __init__(self, start: int = SERIAL_START) -> None:
        self._next = start

    def peek(self) -> int:
        """Sequence number the next allocation will use."""
        return self._next

    def next_serial(self, kind_code: str) -> str:
        serial = f"{SERIAL_PREFIX}-{kind_code}-{self._next}"
        self._next += 1
        return serial


_DEFAULT = SerialNumberGenerator()


def default_generator() -> SerialNumberGenerator:
    return _DEFAULT


def next_serial(kind_code: str) -> str:
    """Allocate from the process-wide generator."""
    return _DEFAULT.next_serial(kind_code)


def parse_sequence(serial: str) -> int:
    """Return the numeric suffix of a serial, e.g. 12 for ``KON-L-12``."""
    prefix, _, rest = serial.partition("-")
    _, _, number = rest.partition("-")
    if prefix != SERIAL_PREFIX or not number.isdigit():
        raise ValueError(f"Not a container serial: '{serial}'.")
    return int(number)

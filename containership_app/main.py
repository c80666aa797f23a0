"""
Application entry point for the container ship app.

Builds the sample cargo, loads it onto a vessel and prints the manifest.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from containership_app.config.settings import Settings, init_logging
from containership_app.models import (
    GasContainer,
    LiquidContainer,
    OverfillError,
    RefrigeratedContainer,
    Vessel,
)
from containership_app.reports import build_vessel_summary_text

_LOG = logging.getLogger(__name__)


def build_demo_vessel() -> Vessel:
    """Load one container of each kind onto the sample vessel."""
    liquid = LiquidContainer(250, 300, 2000, 10000)
    liquid.load(4000, True)

    gas = GasContainer(250, 300, 1500, 8000, pressure=10)
    gas.load(7000, False)

    reefer = RefrigeratedContainer(250, 300, 2200, 9000, "Bananas", 5, 6)
    reefer.load(8000, False)

    vessel = Vessel("Poseidon", 20, 100, 40000)
    for container in (liquid, gas, reefer):
        vessel.load_container(container)
    return vessel


def main() -> int:
    settings = Settings.default()
    init_logging(settings)

    try:
        vessel = build_demo_vessel()
    except OverfillError as e:
        _LOG.error("Load failed for %s: %s", e.serial_number, e)
        print(f"Error: {e}")
        return 1

    print(build_vessel_summary_text(vessel))
    return 0


if __name__ == "__main__":
    # Allow running as a script: `python -m containership_app.main`
    # or `python containership_app/main.py` (when cwd is project root)
    project_root = Path(__file__).resolve().parents[1]
    if project_root.exists():
        sys.path.insert(0, str(project_root))
    sys.exit(main())

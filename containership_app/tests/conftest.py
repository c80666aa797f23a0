"""Pytest configuration and fixtures."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from containership_app.config.settings import LOG_FORMAT
from containership_app.models import (
    GasContainer,
    LiquidContainer,
    RefrigeratedContainer,
    SerialNumberGenerator,
    Vessel,
)


@pytest.fixture
def serials():
    """A private serial sequence starting at 1, independent of the process-wide one."""
    return SerialNumberGenerator()


@pytest.fixture
def liquid(serials):
    return LiquidContainer(250, 300, 2000.0, 10000.0, serials=serials)


@pytest.fixture
def gas(serials):
    return GasContainer(250, 300, 1500.0, 8000.0, 10.0, serials=serials)


@pytest.fixture
def reefer(serials):
    return RefrigeratedContainer(250, 300, 2200.0, 9000.0, "Bananas", 5.0, 6.0, serials=serials)


@pytest.fixture
def cold_reefer(serials):
    """Refrigerated container kept below the product's required temperature."""
    return RefrigeratedContainer(250, 300, 2200.0, 9000.0, "Fish", 5.0, 2.0, serials=serials)


@pytest.fixture
def sample_vessel():
    return Vessel("Poseidon", 20.0, 100, 40000.0)


@pytest.fixture
def root_logging():
    """Root logger; handlers installed by init_logging are removed and closed afterwards."""
    root = logging.getLogger()
    saved_level = root.level
    yield root
    for handler in root.handlers[:]:
        if getattr(handler.formatter, "_fmt", None) == LOG_FORMAT:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)

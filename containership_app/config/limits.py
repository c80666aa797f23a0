"""
Loading rules for container kinds and vessel capacity checks.

Fractions are applied to a container's max payload; vessel weight limits are
configured in tonnes and compared against container weights in kilograms.
"""

from __future__ import annotations

# Liquid: hazardous cargo may fill at most half of the payload
LIQUID_HAZARDOUS_FILL_FRACTION = 0.5

# Liquid: non-hazardous cargo may fill up to 90% of the payload
LIQUID_FILL_FRACTION = 0.9

# Gas: fraction of the load left in the container after unloading
GAS_RESIDUAL_FRACTION = 0.05

# Vessel max weight is given in tonnes, container weights in kg
KG_PER_TONNE = 1000.0

# Serial numbers: KON-<kind code>-<sequence>
SERIAL_PREFIX = "KON"
SERIAL_START = 1

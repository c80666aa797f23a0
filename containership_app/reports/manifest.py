"""
Cargo manifest for a vessel: per-container rows, a pandas table, and a text
summary with capacity usage.
"""

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

from ..models import Vessel

MANIFEST_COLUMNS = [
    "serial_number",
    "kind",
    "height",
    "depth",
    "tare_weight",
    "max_payload",
    "current_load",
    "gross_weight",
    "is_hazardous",
    "pressure",
    "product_type",
    "required_temp",
    "container_temp",
]


def manifest_rows(vessel: Vessel) -> List[Dict[str, Any]]:
    """One dict per container in load order; kind-specific keys only where they apply."""
    return [c.to_dict() for c in vessel]


def manifest_frame(vessel: Vessel) -> pd.DataFrame:
    """
    Manifest as a DataFrame with a fixed column order.

    Columns that do not apply to a container kind (e.g. ``pressure`` for a
    liquid container) are left empty.
    """
    return pd.DataFrame(manifest_rows(vessel), columns=MANIFEST_COLUMNS)


def build_vessel_summary_text(vessel: Vessel) -> str:
    lines: list[str] = [vessel.summary()]
    lines.append("")
    lines.append(f"Containers: {len(vessel)}/{vessel.max_container_count}")
    lines.append(f"Weight: {vessel.total_weight_kg():.1f}/{vessel.max_total_weight_kg:.1f} kg")
    return "\n".join(lines)

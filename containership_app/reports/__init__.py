"""
Reporting utilities (manifest table and text summary) for vessels.
"""

from containership_app.reports.manifest import (
    MANIFEST_COLUMNS,
    build_vessel_summary_text,
    manifest_frame,
    manifest_rows,
)

__all__ = [
    "MANIFEST_COLUMNS",
    "build_vessel_summary_text",
    "manifest_frame",
    "manifest_rows",
]

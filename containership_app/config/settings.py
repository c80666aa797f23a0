"""
Basic settings and logging configuration for the container ship app.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


@dataclass(slots=True)
class Settings:
    """Application-level settings."""

    project_root: Path
    data_dir: Path
    log_file: Path | None = None
    log_level: int = logging.INFO

    @classmethod
    def default(cls, *, log_to_file: bool = False) -> "Settings":
        """Create default settings based on the current file location."""
        project_root = Path(__file__).resolve().parents[2]
        data_dir = project_root / "containership_app_data"
        log_file = data_dir / "containership.log" if log_to_file else None
        return cls(project_root=project_root, data_dir=data_dir, log_file=log_file)


def init_logging(settings: Settings) -> None:
    """
    Configure basic logging to console and optional file.

    Any handlers already on the root logger are replaced (and closed), so the
    handlers built here are always the ones installed.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=settings.log_level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    logging.getLogger(__name__).info(
        "Logging initialized. Log file: %s", settings.log_file or "<console only>"
    )

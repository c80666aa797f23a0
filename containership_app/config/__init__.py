"""
Configuration: loading-rule constants and logging settings.
"""

from .settings import Settings, init_logging

__all__ = ["Settings", "init_logging"]

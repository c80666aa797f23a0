"""
Container ship loading: cargo container kinds with per-kind load rules and a
vessel that enforces count and weight capacity.
"""

__version__ = "0.1.0"

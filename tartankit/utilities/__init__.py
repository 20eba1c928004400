"""
Shared deterministic helpers used identically by the colors, sett and
generator packages.
"""

from .rounding import round_half_up

__all__ = [
    "round_half_up",
]

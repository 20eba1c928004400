"""
Rounding helper.

Python's built-in round() uses banker's rounding (round(2.5) == 2). Thread
counts and color channels in tartankit always round halves upward.
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 ties going toward +infinity.

    >>> round_half_up(2.5)
    3
    >>> round_half_up(-2.5)
    -2
    """
    return math.floor(value + 0.5)

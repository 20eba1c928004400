"""
CIEDE2000 perceptual color difference.

delta_e2000 implements the full formula from Sharma, Wu & Dalal (2005) with
unit weighting factors (kL = kC = kH = 1). A value of about 2.3 is a just
noticeable difference; tartan stripes generally want 15 or more.
"""

from __future__ import annotations

import math
from typing import Protocol

from .types import LAB

_25_POW_7: float = 25.0**7


class _HasLab(Protocol):
    @property
    def lab(self) -> LAB: ...


def delta_e2000(lab1: LAB, lab2: LAB) -> float:
    """Return the CIEDE2000 distance between two L*a*b* colors.

    The result is 0 for identical inputs and symmetric in its arguments.
    """
    L1, a1, b1 = lab1.L, lab1.a, lab1.b
    L2, a2, b2 = lab2.L, lab2.a, lab2.b

    c1 = math.hypot(a1, b1)
    c2 = math.hypot(a2, b2)
    c_bar = (c1 + c2) / 2
    g = 0.5 * (1 - math.sqrt(c_bar**7 / (c_bar**7 + _25_POW_7)))

    a1p = a1 * (1 + g)
    a2p = a2 * (1 + g)
    c1p = math.hypot(a1p, b1)
    c2p = math.hypot(a2p, b2)

    h1p = math.degrees(math.atan2(b1, a1p)) % 360
    h2p = math.degrees(math.atan2(b2, a2p)) % 360

    d_lp = L2 - L1
    d_cp = c2p - c1p

    chroma_product = c1p * c2p
    if chroma_product == 0:
        d_hp = 0.0
    elif abs(h2p - h1p) <= 180:
        d_hp = h2p - h1p
    elif h2p - h1p > 180:
        d_hp = h2p - h1p - 360
    else:
        d_hp = h2p - h1p + 360

    d_big_hp = 2 * math.sqrt(chroma_product) * math.sin(math.radians(d_hp) / 2)

    l_bar_p = (L1 + L2) / 2
    c_bar_p = (c1p + c2p) / 2

    if chroma_product == 0:
        h_bar_p = h1p + h2p
    elif abs(h1p - h2p) <= 180:
        h_bar_p = (h1p + h2p) / 2
    elif h1p + h2p < 360:
        h_bar_p = (h1p + h2p + 360) / 2
    else:
        h_bar_p = (h1p + h2p - 360) / 2

    t = (
        1
        - 0.17 * math.cos(math.radians(h_bar_p - 30))
        + 0.24 * math.cos(math.radians(2 * h_bar_p))
        + 0.32 * math.cos(math.radians(3 * h_bar_p + 6))
        - 0.20 * math.cos(math.radians(4 * h_bar_p - 63))
    )

    d_theta = 30 * math.exp(-(((h_bar_p - 275) / 25) ** 2))
    r_c = 2 * math.sqrt(c_bar_p**7 / (c_bar_p**7 + _25_POW_7))
    s_l = 1 + (0.015 * (l_bar_p - 50) ** 2) / math.sqrt(20 + (l_bar_p - 50) ** 2)
    s_c = 1 + 0.045 * c_bar_p
    s_h = 1 + 0.015 * c_bar_p * t
    r_t = -math.sin(math.radians(2 * d_theta)) * r_c

    term_l = d_lp / s_l
    term_c = d_cp / s_c
    term_h = d_big_hp / s_h

    return math.sqrt(term_l**2 + term_c**2 + term_h**2 + r_t * term_c * term_h)


def has_minimum_contrast(color1: _HasLab, color2: _HasLab, min_delta_e: float = 15.0) -> bool:
    """True when the two colors are at least ``min_delta_e`` apart (CIEDE2000)."""
    return delta_e2000(color1.lab, color2.lab) >= min_delta_e

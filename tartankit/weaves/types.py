"""
Core type definitions for the weave layer.

WeaveType is the closed vocabulary of supported structures; WeavePattern
entries are loaded from the YAML weave table and are frozen after startup.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WeaveType(str, Enum):
    PLAIN = "plain"
    TWILL_2_2 = "twill-2-2"
    TWILL_3_1 = "twill-3-1"
    HERRINGBONE = "herringbone"
    HOUNDSTOOTH = "houndstooth"
    BASKETWEAVE = "basketweave"


@dataclass(frozen=True)
class WeavePattern:
    """
    Loom draft for one weave structure.

    threading and treadling are 1-indexed (shaft and treadle numbers as a
    weaver writes them). tie_up[treadle][shaft] is True when that shaft
    lifts for that treadle, putting the warp over the weft.
    """

    type: WeaveType
    name: str
    description: str
    threading: tuple[int, ...]
    tie_up: tuple[tuple[bool, ...], ...]
    treadling: tuple[int, ...]
    shafts: int
    treadles: int


@dataclass(frozen=True)
class WovenPixel:
    """Resolved appearance of one warp/weft intersection."""

    color: str
    warp_on_top: bool
    warp_color: str
    weft_color: str


@dataclass(frozen=True)
class WeaveAnalysis:
    """
    Structural properties of a weave over one repeat.

    Attributes:
        warp_dominance: Fraction of intersections showing warp (0..1).
        diagonal_angle: Twill line angle in degrees; 0 when there is none.
        repeat_size: (warp threads, weft passes) in one repeat.
        max_float: Longest run (warp, weft) a thread stays on the surface.
    """

    warp_dominance: float
    diagonal_angle: float
    repeat_size: tuple[int, int]
    max_float: tuple[int, int]

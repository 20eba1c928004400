"""
Core type definitions for the color science layer.

All types are frozen dataclasses with fail-fast validation in __post_init__.
TartanColor entries are built once by the palette registry from YAML and are
never written to at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ColorCategory(str, Enum):
    """Broad hue family of a palette entry."""

    BLUE = "blue"
    RED = "red"
    GREEN = "green"
    TEAL = "teal"
    YELLOW = "yellow"
    BLACK = "black"
    GREY = "grey"
    WHITE = "white"
    BROWN = "brown"
    PURPLE = "purple"
    ORANGE = "orange"
    PINK = "pink"


@dataclass(frozen=True)
class RGB:
    """8-bit sRGB triple. Each channel must be an integer in 0..255."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0 <= value <= 255:
                raise ValueError(f"RGB channel {channel} must be in 0..255, got {value}")


@dataclass(frozen=True)
class LAB:
    """CIE L*a*b* coordinates (D65 reference white)."""

    L: float
    a: float
    b: float


@dataclass(frozen=True)
class HSL:
    """Hue in degrees (0-360), saturation and lightness in percent (0-100)."""

    h: float
    s: float
    l: float  # noqa: E741


@dataclass(frozen=True)
class TartanColor:
    """
    A named yarn color in the tartan palette.

    Attributes:
        code: Uppercase letter code used in threadcount notation (e.g. "B", "HG").
        name: Human-readable name (e.g. "Hunting Green").
        hex: Hex literal as listed in the palette data (e.g. "#355E3B").
        rgb: Parsed sRGB value of ``hex``.
        lab: Precomputed L*a*b* value of ``rgb`` for Delta E comparisons.
        category: Hue family.
    """

    code: str
    name: str
    hex: str
    rgb: RGB
    lab: LAB
    category: ColorCategory

    def __post_init__(self) -> None:
        if not self.code or not self.code.isalpha() or not self.code.isupper():
            raise ValueError(f"TartanColor code must be uppercase letters, got {self.code!r}")
        if not self.name:
            raise ValueError("TartanColor name must not be empty")

"""
Color space conversion: hex, sRGB, HSL and CIE L*a*b*.

The LAB pipeline is sRGB → linear RGB (gamma threshold 0.04045) → XYZ
(sRGB primaries) → L*a*b* against the D65 reference white. Channel values
produced from floating-point math are rounded half-up.
"""

from __future__ import annotations

import re

from tartankit.utilities.rounding import round_half_up

from .types import HSL, LAB, RGB

_HEX_RE = re.compile(r"#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})", re.IGNORECASE)

# sRGB → XYZ matrix (D65)
_RGB_TO_XYZ: tuple[tuple[float, float, float], ...] = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

# D65 reference white, Y normalized to 100
D65_WHITE: tuple[float, float, float] = (95.047, 100.000, 108.883)

LAB_EPSILON: float = 0.008856
LAB_KAPPA: float = 903.3


class InvalidHex(ValueError):
    """Raised when a color literal is not a 6-digit hex value."""


# ── Hex / RGB ──────────────────────────────────────────────────────────────────


def hex_to_rgb(hex_value: str) -> RGB:
    """Parse ``#rrggbb`` (leading ``#`` optional, any case) into an RGB.

    Raises:
        InvalidHex: If the literal is not exactly six hex digits.
    """
    match = _HEX_RE.fullmatch(hex_value) if isinstance(hex_value, str) else None
    if match is None:
        raise InvalidHex(f"Invalid hex color: {hex_value!r}")
    return RGB(*(int(group, 16) for group in match.groups()))


def rgb_to_hex(rgb: RGB) -> str:
    """Format an RGB as lowercase ``#rrggbb``."""
    return "#" + "".join(f"{round_half_up(c):02x}" for c in (rgb.r, rgb.g, rgb.b))


# ── HSL ────────────────────────────────────────────────────────────────────────


def rgb_to_hsl(rgb: RGB) -> HSL:
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    hi = max(r, g, b)
    lo = min(r, g, b)
    lightness = (hi + lo) / 2

    if hi == lo:
        return HSL(h=0.0, s=0.0, l=lightness * 100)

    d = hi - lo
    saturation = d / (2 - hi - lo) if lightness > 0.5 else d / (hi + lo)

    if hi == r:
        hue = ((g - b) / d + (6 if g < b else 0)) / 6
    elif hi == g:
        hue = ((b - r) / d + 2) / 6
    else:
        hue = ((r - g) / d + 4) / 6

    return HSL(h=hue * 360, s=saturation * 100, l=lightness * 100)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HSL) -> RGB:
    h = hsl.h / 360
    s = hsl.s / 100
    lightness = hsl.l / 100

    if s == 0:
        v = round_half_up(lightness * 255)
        return RGB(v, v, v)

    q = lightness * (1 + s) if lightness < 0.5 else lightness + s - lightness * s
    p = 2 * lightness - q
    return RGB(
        r=round_half_up(_hue_to_channel(p, q, h + 1 / 3) * 255),
        g=round_half_up(_hue_to_channel(p, q, h) * 255),
        b=round_half_up(_hue_to_channel(p, q, h - 1 / 3) * 255),
    )


# ── LAB ────────────────────────────────────────────────────────────────────────


def _linearize(channel: float) -> float:
    """Undo the sRGB transfer curve for one channel in 0..1."""
    if channel > 0.04045:
        return ((channel + 0.055) / 1.055) ** 2.4
    return channel / 12.92


def rgb_to_xyz(rgb: RGB) -> tuple[float, float, float]:
    """Convert sRGB to CIE XYZ scaled so that white has Y = 100."""
    linear = [_linearize(c / 255) * 100 for c in (rgb.r, rgb.g, rgb.b)]
    x, y, z = (sum(m * c for m, c in zip(row, linear)) for row in _RGB_TO_XYZ)
    return x, y, z


def _lab_f(t: float) -> float:
    if t > LAB_EPSILON:
        return t ** (1 / 3)
    return (LAB_KAPPA * t + 16) / 116


def rgb_to_lab(rgb: RGB) -> LAB:
    """Convert sRGB to CIE L*a*b* under the D65 illuminant."""
    x, y, z = rgb_to_xyz(rgb)
    fx = _lab_f(x / D65_WHITE[0])
    fy = _lab_f(y / D65_WHITE[1])
    fz = _lab_f(z / D65_WHITE[2])
    return LAB(L=116 * fy - 16, a=500 * (fx - fy), b=200 * (fy - fz))


# ── Manipulation ───────────────────────────────────────────────────────────────


def _clamp_channel(value: float) -> int:
    return min(255, max(0, round_half_up(value)))


def adjust_brightness(rgb: RGB, factor: float) -> RGB:
    """Multiply every channel by ``factor``, clamped to 0..255."""
    return RGB(
        _clamp_channel(rgb.r * factor),
        _clamp_channel(rgb.g * factor),
        _clamp_channel(rgb.b * factor),
    )


def adjust_saturation(rgb: RGB, factor: float) -> RGB:
    hsl = rgb_to_hsl(rgb)
    return hsl_to_rgb(HSL(h=hsl.h, s=min(100.0, max(0.0, hsl.s * factor)), l=hsl.l))


def shift_hue(rgb: RGB, degrees: float) -> RGB:
    hsl = rgb_to_hsl(rgb)
    return hsl_to_rgb(HSL(h=(hsl.h + degrees + 360) % 360, s=hsl.s, l=hsl.l))


def blend_colors(color1: RGB, color2: RGB, ratio: float = 0.5) -> RGB:
    """Linear mix; ``ratio`` 0 returns ``color1``, 1 returns ``color2``."""
    return RGB(
        round_half_up(color1.r * (1 - ratio) + color2.r * ratio),
        round_half_up(color1.g * (1 - ratio) + color2.g * ratio),
        round_half_up(color1.b * (1 - ratio) + color2.b * ratio),
    )

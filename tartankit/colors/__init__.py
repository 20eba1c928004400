"""
Color science for tartan design.

Provides hex/RGB/HSL/LAB conversion, the CIEDE2000 perceptual distance, and
the read-only 48-color tartan palette registry.
"""

from .conversion import (
    InvalidHex,
    adjust_brightness,
    adjust_saturation,
    blend_colors,
    hex_to_rgb,
    hsl_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
    rgb_to_xyz,
    shift_hue,
)
from .delta_e import delta_e2000, has_minimum_contrast
from .palette import (
    DEFAULT_PALETTE_NAME,
    NEUTRAL_GREY,
    PaletteRegistry,
    UnknownColorCode,
    find_closest_color,
    get_color,
    get_colors_by_category,
    get_contrasting_colors,
    get_palette,
    require_color,
    resolve_rgb,
)
from .types import HSL, LAB, RGB, ColorCategory, TartanColor

__all__ = [
    # types
    "RGB",
    "LAB",
    "HSL",
    "ColorCategory",
    "TartanColor",
    # errors
    "InvalidHex",
    "UnknownColorCode",
    # conversion
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_xyz",
    "rgb_to_lab",
    "adjust_brightness",
    "adjust_saturation",
    "shift_hue",
    "blend_colors",
    # distance
    "delta_e2000",
    "has_minimum_contrast",
    # palette
    "DEFAULT_PALETTE_NAME",
    "NEUTRAL_GREY",
    "PaletteRegistry",
    "get_palette",
    "get_color",
    "require_color",
    "get_colors_by_category",
    "find_closest_color",
    "get_contrasting_colors",
    "resolve_rgb",
]

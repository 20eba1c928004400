"""
Weave structures and warp/weft intersection resolution.
"""

from .engine import (
    analyze_weave,
    format_tie_up,
    generate_threading,
    generate_treadling,
    get_intersection_color,
    is_warp_on_top,
)
from .registry import WeaveRegistry, get_weave_pattern, get_weave_registry
from .types import WeaveAnalysis, WeavePattern, WeaveType, WovenPixel

__all__ = [
    # Enums
    "WeaveType",
    # Registry entry and result types
    "WeavePattern",
    "WovenPixel",
    "WeaveAnalysis",
    # Registry
    "WeaveRegistry",
    "get_weave_registry",
    "get_weave_pattern",
    # Engine
    "is_warp_on_top",
    "get_intersection_color",
    "analyze_weave",
    "generate_threading",
    "generate_treadling",
    "format_tie_up",
]

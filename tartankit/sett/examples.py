"""
Well-known setts, useful as fixtures and as seeds for variation.
"""

from __future__ import annotations

from types import MappingProxyType

from .notation import parse_threadcount
from .types import Sett

EXAMPLE_SETTS: MappingProxyType[str, str] = MappingProxyType(
    {
        "Black Watch": "K/22 B4 K4 B4 K16 G/28 K6 G28 K16 B/22",
        "Royal Stewart": "R/72 G4 R4 G28 K4 Y4 K4 W4 K4 Y4 K4 G28 R/4",
        "MacLeod": "Y/32 K4 Y4 K24 Y/32",
        "Simple Check": "B/24 W4 B/24",
        "Basic Tartan": "G/16 B4 G16 R4 G16 B4 G/16",
    }
)


def get_example_sett(name: str) -> Sett:
    """Parse the named example sett.

    Raises
    ------
    KeyError
        If *name* is not one of EXAMPLE_SETTS.
    """
    if name not in EXAMPLE_SETTS:
        raise KeyError(f"Unknown example sett: {name!r}")
    return parse_threadcount(EXAMPLE_SETTS[name], name=name)

"""
Threadcount notation: parse and format.

A threadcount is a space-separated run of tokens ``{code}{'/'?}{count}``,
e.g. ``"B/24 W4 B24 R2 K24 G24 W/2"``. A ``/`` marks the stripe as a pivot
(mirror axis). A leading or trailing ``...`` marks an asymmetric sett that
repeats as written instead of mirroring.

Symmetry resolution when parsing:
  explicit ``...``          → asymmetric
  any pivot present         → symmetric
  neither                   → symmetric (default; may misread intended
                              asymmetric input, kept for compatibility with
                              existing notation)
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Optional

from .types import Sett, Symmetry, ThreadStripe

_STRIPE_RE = re.compile(r"([A-Z]+)(/?)(\d+)", re.IGNORECASE)
_ASYMMETRIC_MARKER = "..."


class InvalidNotation(ValueError):
    """Raised when a threadcount string contains no parseable stripes."""


def parse_threadcount(threadcount: str, name: Optional[str] = None) -> Sett:
    """
    Parse threadcount notation into a Sett.

    Parameters
    ----------
    threadcount:
        Notation such as ``"B/24 W4 B/24"`` or ``"...K8 R4 G8..."``.
        Color codes are case-insensitive and normalized to uppercase.
    name:
        Optional display name stored on the Sett.

    Raises
    ------
    InvalidNotation
        If no ``{letters}{digits}`` token can be found.
    """
    normalized = threadcount.strip()
    is_asymmetric = normalized.startswith(_ASYMMETRIC_MARKER) or normalized.endswith(
        _ASYMMETRIC_MARKER
    )
    cleaned = normalized.replace(_ASYMMETRIC_MARKER, " ")

    stripes = [
        ThreadStripe(color=code.upper(), count=int(count), is_pivot=bool(slash))
        for code, slash, count in _STRIPE_RE.findall(cleaned)
    ]
    if not stripes:
        raise InvalidNotation(f"Invalid threadcount: {threadcount!r}")

    # Pivots and the default both resolve to symmetric; only "..." opts out.
    symmetry = Symmetry.ASYMMETRIC if is_asymmetric else Symmetry.SYMMETRIC

    return Sett(threadcount=normalized, stripes=tuple(stripes), symmetry=symmetry, name=name)


def format_stripes(stripes: Iterable[ThreadStripe], symmetry: Symmetry) -> str:
    """Render stripes as notation; asymmetric runs are wrapped in ``...``."""
    body = " ".join(f"{s.color}{'/' if s.is_pivot else ''}{s.count}" for s in stripes)
    if symmetry == Symmetry.ASYMMETRIC:
        return f"{_ASYMMETRIC_MARKER}{body}{_ASYMMETRIC_MARKER}"
    return body


def to_threadcount_string(sett: Sett) -> str:
    """Render a Sett back to notation; the inverse of parse_threadcount."""
    return format_stripes(sett.stripes, sett.symmetry)


def build_sett(
    stripes: Iterable[ThreadStripe],
    symmetry: Symmetry = Symmetry.SYMMETRIC,
    name: Optional[str] = None,
) -> Sett:
    """Construct a Sett from stripes, deriving its notation string."""
    stripe_tuple = tuple(stripes)
    return Sett(
        threadcount=format_stripes(stripe_tuple, symmetry),
        stripes=stripe_tuple,
        symmetry=symmetry,
        name=name,
    )

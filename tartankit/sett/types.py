"""
Core type definitions for the sett (threadcount) layer.

A Sett is immutable: every transform builds a new one. Derived values
(total thread count, unique colors) are computed from the stripes rather
than stored, so they can never drift out of sync.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Optional


class Symmetry(str, Enum):
    """How a sett repeats: mirrored about its pivots, or tiled as written."""

    SYMMETRIC = "symmetric"
    ASYMMETRIC = "asymmetric"


@dataclass(frozen=True)
class ThreadStripe:
    """
    One run of same-colored threads.

    color is a palette code, normalized to uppercase at construction. The
    code is not checked against the palette here; validate_sett reports
    unknown codes as warnings.
    """

    color: str
    count: int
    is_pivot: bool = False

    def __post_init__(self) -> None:
        if not self.color:
            raise ValueError("ThreadStripe color must not be empty")
        if self.count < 1:
            raise ValueError(f"ThreadStripe count must be >= 1, got {self.count}")
        if self.color != self.color.upper():
            object.__setattr__(self, "color", self.color.upper())


@dataclass(frozen=True)
class Sett:
    """
    The repeating threadcount pattern of one tartan.

    Attributes:
        threadcount: Notation the sett was parsed from or rendered to.
        stripes: Ordered stripes of one half-sett (symmetric) or full
            repeat (asymmetric).
        symmetry: Whether the stripes are mirrored when expanded.
        name: Optional display name.
    """

    threadcount: str
    stripes: tuple[ThreadStripe, ...]
    symmetry: Symmetry = Symmetry.SYMMETRIC
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.stripes, list):
            object.__setattr__(self, "stripes", tuple(self.stripes))
        if not self.stripes:
            raise ValueError("Sett must have at least one stripe")

    @property
    def total_threads(self) -> int:
        return sum(s.count for s in self.stripes)

    @property
    def colors(self) -> tuple[str, ...]:
        """Unique stripe colors in first-seen order."""
        return tuple(dict.fromkeys(s.color for s in self.stripes))

    @property
    def has_pivots(self) -> bool:
        return any(s.is_pivot for s in self.stripes)


@dataclass(frozen=True)
class ExpandedSett:
    """Full thread-by-thread color sequence for one complete repeat."""

    threads: tuple[str, ...]
    distribution: MappingProxyType[str, int] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        if not self.threads:
            raise ValueError("ExpandedSett must contain at least one thread")
        # Accept plain dicts at construction sites and silently promote to MappingProxyType.
        if isinstance(self.distribution, dict):
            object.__setattr__(self, "distribution", MappingProxyType(self.distribution))

    @property
    def length(self) -> int:
        return len(self.threads)


@dataclass(frozen=True)
class SettSignature:
    """
    Canonical string forms used for equality and deduplication.

    signature: exact colors and counts ("B24-W4-R2").
    structure_signature: colors abstracted to first-seen letters ("A24-B4-C2").
    proportion_signature: per-stripe share of the total, 2 decimals ("0.8:0.13:0.07").
    """

    signature: str
    structure_signature: str
    proportion_signature: str


@dataclass(frozen=True)
class SignatureComparison:
    exact: bool
    structural: bool
    proportional: bool

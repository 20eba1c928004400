"""
Generator constraints and named presets.

GeneratorConstraints is the per-call, read-only input of the generator. The
default constraints and the named presets ("simple", "classic", "hunting",
...) are loaded from ``data/presets.yaml`` once at import time.

Constraints describe what the generator aims for; they are not a promise.
When a combination is infeasible (too few contrasting colors, a thread
budget that cannot be split within the per-stripe range) the generator
degrades gracefully. Callers needing guarantees re-check the result with
validate_sett.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional, cast

import yaml

from tartankit.colors.palette import get_palette

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"

DEFAULT_MIN_COLOR_CONTRAST: float = 15.0


class SymmetryChoice(str, Enum):
    """Requested symmetry; EITHER lets the generator decide per seed."""

    SYMMETRIC = "symmetric"
    ASYMMETRIC = "asymmetric"
    EITHER = "either"


@dataclass(frozen=True)
class IntRange:
    """Inclusive integer range."""

    min: int
    max: int

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ValueError(f"range min must be <= max, got [{self.min}, {self.max}]")

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.min <= value <= self.max


@dataclass(frozen=True)
class GeneratorConstraints:
    """
    Bounds for one generated tartan.

    Attributes:
        color_count: Number of distinct colors to select.
        stripe_count: Number of written stripes.
        thread_count: Threads per stripe.
        total_threads: Thread budget for the written stripes.
        allowed_colors: Color pool; None means the whole palette.
        required_colors: Colors that are always selected first.
        symmetry: Requested symmetry of the resulting sett.
        min_color_contrast: Minimum CIEDE2000 distance between selected colors.
    """

    color_count: IntRange
    stripe_count: IntRange
    thread_count: IntRange
    total_threads: IntRange
    allowed_colors: Optional[tuple[str, ...]] = None
    required_colors: Optional[tuple[str, ...]] = None
    symmetry: SymmetryChoice = SymmetryChoice.SYMMETRIC
    min_color_contrast: float = DEFAULT_MIN_COLOR_CONTRAST

    def __post_init__(self) -> None:
        if self.color_count.min < 1:
            raise ValueError(f"color_count.min must be >= 1, got {self.color_count.min}")
        if self.stripe_count.min < 1:
            raise ValueError(f"stripe_count.min must be >= 1, got {self.stripe_count.min}")
        if self.thread_count.min < 1:
            raise ValueError(f"thread_count.min must be >= 1, got {self.thread_count.min}")
        if self.total_threads.min < 1:
            raise ValueError(f"total_threads.min must be >= 1, got {self.total_threads.min}")
        if self.min_color_contrast < 0:
            raise ValueError(
                f"min_color_contrast must be non-negative, got {self.min_color_contrast}"
            )
        if not isinstance(self.symmetry, SymmetryChoice):
            object.__setattr__(self, "symmetry", SymmetryChoice(self.symmetry))
        palette = get_palette()
        for attr in ("allowed_colors", "required_colors"):
            codes = getattr(self, attr)
            if codes is None:
                continue
            normalized = tuple(palette.require(code).code for code in codes)
            object.__setattr__(self, attr, normalized)

    def with_overrides(self, **changes: Any) -> GeneratorConstraints:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


# ── Presets ────────────────────────────────────────────────────────────────────


def constraints_from_dict(raw: dict[str, Any]) -> GeneratorConstraints:
    """Build GeneratorConstraints from a plain mapping (as stored in YAML).

    Range fields are ``[min, max]`` pairs.
    """

    def _range(key: str) -> IntRange:
        lo, hi = raw[key]
        return IntRange(int(lo), int(hi))

    allowed = raw.get("allowed_colors")
    required = raw.get("required_colors")
    return GeneratorConstraints(
        color_count=_range("color_count"),
        stripe_count=_range("stripe_count"),
        thread_count=_range("thread_count"),
        total_threads=_range("total_threads"),
        allowed_colors=tuple(allowed) if allowed is not None else None,
        required_colors=tuple(required) if required is not None else None,
        symmetry=SymmetryChoice(raw.get("symmetry", SymmetryChoice.SYMMETRIC.value)),
        min_color_contrast=float(raw.get("min_color_contrast", DEFAULT_MIN_COLOR_CONTRAST)),
    )


def load_presets(
    data_dir: Path = _DATA_DIR, filename: str = "presets.yaml"
) -> tuple[GeneratorConstraints, MappingProxyType[str, GeneratorConstraints]]:
    """Load (default constraints, named presets) from a YAML file."""
    path = data_dir / filename
    try:
        with open(path) as f:
            data = cast(dict[str, Any], yaml.safe_load(f))
    except FileNotFoundError:
        raise FileNotFoundError(f"Preset data file not found: {path}") from None
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse preset data file {path}: {exc}") from exc

    try:
        default = constraints_from_dict(data["default"])
        presets = {
            name: constraints_from_dict(raw) for name, raw in (data.get("presets") or {}).items()
        }
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Invalid preset data in {path}: {exc}") from exc

    logger.debug("Loaded default constraints and %d presets from %s", len(presets), path)
    return default, MappingProxyType(presets)


DEFAULT_CONSTRAINTS, CONSTRAINT_PRESETS = load_presets()


def get_preset(name: str) -> GeneratorConstraints:
    """Return the named preset.

    Raises
    ------
    KeyError
        If *name* is not a known preset.
    """
    if name not in CONSTRAINT_PRESETS:
        raise KeyError(f"Unknown constraint preset: {name!r}")
    return CONSTRAINT_PRESETS[name]


def list_presets() -> list[str]:
    """Return a sorted list of all preset names."""
    return sorted(CONSTRAINT_PRESETS)

"""
Sett transforms. Each returns a new Sett with regenerated notation; the
input is never modified.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace

from tartankit.utilities.rounding import round_half_up

from .notation import format_stripes
from .types import Sett, ThreadStripe


def _with_stripes(sett: Sett, stripes: tuple[ThreadStripe, ...]) -> Sett:
    return replace(sett, stripes=stripes, threadcount=format_stripes(stripes, sett.symmetry))


def scale_sett(sett: Sett, factor: float) -> Sett:
    """
    Multiply every stripe count by ``factor``.

    Each count is rounded half-up and floored at 1, so the new total is only
    approximately ``total_threads * factor``.

    Raises:
        ValueError: If factor is not positive.
    """
    if factor <= 0:
        raise ValueError(f"factor must be positive, got {factor}")
    return _with_stripes(
        sett,
        tuple(replace(s, count=max(1, round_half_up(s.count * factor))) for s in sett.stripes),
    )


def normalize_sett(sett: Sett, target_threads: int) -> Sett:
    """Scale a sett so its total is approximately ``target_threads``."""
    if target_threads <= 0:
        raise ValueError(f"target_threads must be positive, got {target_threads}")
    return scale_sett(sett, target_threads / sett.total_threads)


def shift_colors(sett: Sett, color_mapping: Mapping[str, str]) -> Sett:
    """Recolor stripes through ``color_mapping``; unmapped colors are kept."""
    mapping = {k.upper(): v.upper() for k, v in color_mapping.items()}
    return _with_stripes(
        sett,
        tuple(replace(s, color=mapping.get(s.color, s.color)) for s in sett.stripes),
    )


def reverse_sett(sett: Sett) -> Sett:
    """Reverse stripe order. Only the two end stripes may keep a pivot flag."""
    reversed_stripes = tuple(reversed(sett.stripes))
    last = len(reversed_stripes) - 1
    return _with_stripes(
        sett,
        tuple(
            s if i in (0, last) else replace(s, is_pivot=False)
            for i, s in enumerate(reversed_stripes)
        ),
    )

"""
Sett expansion: stripes → full thread-by-thread color sequence.

Symmetric setts are woven forward and then mirrored back. Pivot stripes sit
on the mirror axes and are woven once, so the expanded length is
``2 * total_threads - sum(pivot counts)``. Asymmetric setts are woven once
as written, so the expanded length equals ``total_threads``.
"""

from __future__ import annotations

from collections import Counter

from .types import ExpandedSett, Sett, Symmetry


def expand_sett(sett: Sett) -> ExpandedSett:
    """Expand a Sett into one complete repeat."""
    threads: list[str] = []
    for stripe in sett.stripes:
        threads.extend([stripe.color] * stripe.count)

    if sett.symmetry == Symmetry.SYMMETRIC:
        for stripe in reversed(sett.stripes):
            if stripe.is_pivot:
                continue
            threads.extend([stripe.color] * stripe.count)

    return ExpandedSett(threads=tuple(threads), distribution=dict(Counter(threads)))


def get_thread_at(expanded: ExpandedSett, index: int) -> str:
    """Color of the thread at ``index``, wrapping in both directions.

    Python's ``%`` is floor modulo, so negative indices count back from the
    end of the repeat.
    """
    return expanded.threads[index % expanded.length]

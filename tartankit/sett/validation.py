"""
Sett validation against numeric bounds.

validate_sett never raises: it returns a SettValidation listing one error per
violated bound plus non-fatal warnings. Warnings cover:

  - a symmetric sett with no explicit pivot (its mirror axes are implied)
  - adjacent stripes of the same color (they weave as one wider stripe)
  - color codes that are not in the palette (renderers fall back to grey)
"""

from __future__ import annotations

from dataclasses import dataclass

from tartankit.colors.palette import get_palette

from .types import Sett, Symmetry


@dataclass(frozen=True)
class ValidationOptions:
    """Inclusive bounds checked by validate_sett."""

    min_colors: int = 2
    max_colors: int = 8
    min_stripes: int = 2
    max_stripes: int = 20
    min_thread_count: int = 2
    max_thread_count: int = 100
    min_total_threads: int = 10
    max_total_threads: int = 500


@dataclass(frozen=True)
class SettValidation:
    valid: bool
    errors: tuple[str, ...]
    warnings: tuple[str, ...]


def validate_sett(sett: Sett, options: ValidationOptions | None = None) -> SettValidation:
    """
    Check a sett against ``options`` (defaults when None).

    Returns
    -------
    SettValidation
        ``valid`` is True only when ``errors`` is empty. Warnings never
        affect validity.
    """
    opts = options or ValidationOptions()
    errors: list[str] = []
    warnings: list[str] = []

    n_colors = len(sett.colors)
    if n_colors < opts.min_colors:
        errors.append(f"Too few colors: {n_colors} (min: {opts.min_colors})")
    if n_colors > opts.max_colors:
        errors.append(f"Too many colors: {n_colors} (max: {opts.max_colors})")

    n_stripes = len(sett.stripes)
    if n_stripes < opts.min_stripes:
        errors.append(f"Too few stripes: {n_stripes} (min: {opts.min_stripes})")
    if n_stripes > opts.max_stripes:
        errors.append(f"Too many stripes: {n_stripes} (max: {opts.max_stripes})")

    for stripe in sett.stripes:
        if stripe.count < opts.min_thread_count:
            errors.append(
                f"Stripe {stripe.color} has too few threads: {stripe.count} "
                f"(min: {opts.min_thread_count})"
            )
        if stripe.count > opts.max_thread_count:
            errors.append(
                f"Stripe {stripe.color} has too many threads: {stripe.count} "
                f"(max: {opts.max_thread_count})"
            )

    total = sett.total_threads
    if total < opts.min_total_threads:
        errors.append(f"Total threads too low: {total} (min: {opts.min_total_threads})")
    if total > opts.max_total_threads:
        errors.append(f"Total threads too high: {total} (max: {opts.max_total_threads})")

    if sett.symmetry == Symmetry.SYMMETRIC and not sett.has_pivots:
        warnings.append("Symmetric sett has no explicit pivot points")

    for current, following in zip(sett.stripes, sett.stripes[1:]):
        if current.color == following.color:
            warnings.append(f"Adjacent stripes with same color: {current.color}")

    palette = get_palette()
    for code in sett.colors:
        if code not in palette:
            warnings.append(f"Unknown color code: {code}")

    return SettValidation(valid=not errors, errors=tuple(errors), warnings=tuple(warnings))

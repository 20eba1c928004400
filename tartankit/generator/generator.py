"""
Constrained, seeded tartan generation.

generate_tartan() runs three stages on one SeededRandom:

  1. color selection   pick N colors from the allowed pool, each at least
                       min_color_contrast (CIEDE2000) from those already chosen
  2. stripe synthesis  split a random thread budget over S stripes, never
                       repeating the previous stripe's color
  3. assembly          render notation, parse it back into a Sett, and sign it

The draw order within a seed is fixed, so a seed fully determines its
result. generate_batch() and generate_variations() derive one seed per
attempt (base + offset), which keeps every result independently
reproducible.

Infeasible constraints never raise. If no remaining candidate has enough
contrast, the first remaining shuffled candidate is taken instead; if a
batch cannot find enough structurally distinct setts within its attempt
budget, it returns fewer results. Both cases are logged at INFO.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from tartankit.colors.delta_e import has_minimum_contrast
from tartankit.colors.palette import get_palette
from tartankit.sett.notation import format_stripes, parse_threadcount
from tartankit.sett.signatures import generate_signatures
from tartankit.sett.types import Sett, SettSignature, Symmetry, ThreadStripe
from tartankit.utilities.rounding import round_half_up

from .constraints import DEFAULT_CONSTRAINTS, GeneratorConstraints, SymmetryChoice
from .rng import SeededRandom

logger = logging.getLogger(__name__)

# Exclusive upper bound for seeds drawn when the caller does not supply one.
_MAX_RANDOM_SEED = 2**31 - 1

# Non-final stripes are drawn between these multiples of the average
# remaining budget per stripe.
_STRIPE_SPREAD_LOW = 0.3
_STRIPE_SPREAD_HIGH = 1.7

_BATCH_ATTEMPTS_PER_RESULT = 10

# Proportion variations scale each count by a factor in [0.7, 1.3).
_PROPORTION_BASE = 0.7
_PROPORTION_SPAN = 0.6
_PROPORTION_MIN_COUNT = 2


class VariationType(str, Enum):
    COLORS = "colors"
    PROPORTIONS = "proportions"
    BOTH = "both"


@dataclass(frozen=True)
class GeneratorResult:
    """
    One generated tartan.

    Attributes:
        sett: The generated sett.
        seed: Seed that reproduces this exact result.
        constraints: Constraints the result was generated under.
        signature: Signatures of ``sett``, used for deduplication.
    """

    sett: Sett
    seed: int
    constraints: GeneratorConstraints
    signature: SettSignature


def random_seed() -> int:
    """Draw a fresh seed for callers that do not supply one."""
    return random.randrange(_MAX_RANDOM_SEED)


# ── Stage 1: color selection ───────────────────────────────────────────────────


def select_colors(constraints: GeneratorConstraints, rng: SeededRandom) -> list[str]:
    """
    Choose the tartan's colors.

    Required colors come first. The remaining pool (allowed colors, or the
    whole palette in registry order) is reshuffled before each pick and
    scanned for the first candidate that contrasts with every color chosen
    so far.
    """
    palette = get_palette()
    pool = (
        list(dict.fromkeys(constraints.allowed_colors))
        if constraints.allowed_colors is not None
        else palette.codes()
    )
    num_colors = rng.randint(constraints.color_count.min, constraints.color_count.max)

    selected = list(dict.fromkeys(constraints.required_colors or ()))
    available = [code for code in pool if code not in selected]

    while len(selected) < num_colors and available:
        rng.shuffle(available)
        choice = next(
            (
                code
                for code in available
                if all(
                    has_minimum_contrast(
                        palette.require(code),
                        palette.require(chosen),
                        constraints.min_color_contrast,
                    )
                    for chosen in selected
                )
            ),
            None,
        )
        if choice is None:
            choice = available[0]
            logger.info(
                "No candidate reaches contrast %.1f against %s; accepting %s",
                constraints.min_color_contrast,
                selected,
                choice,
            )
        selected.append(choice)
        available.remove(choice)

    return selected


# ── Stage 2: stripe synthesis ──────────────────────────────────────────────────


def synthesize_stripes(
    colors: list[str], constraints: GeneratorConstraints, rng: SeededRandom
) -> list[tuple[str, int]]:
    """
    Split a random thread budget into ``(color, count)`` stripes.

    Each non-final stripe is drawn from
    ``[max(tmin, 0.3·avg), min(tmax, 1.7·avg, remaining - later·tmin)]``
    where ``avg`` is the remaining budget per remaining stripe, so later
    stripes can still reach tmin. The final stripe takes whatever budget is
    left, clamped into ``[tmin, tmax]``.
    """
    if not colors:
        raise ValueError("cannot synthesize stripes without colors")

    t_min = constraints.thread_count.min
    t_max = constraints.thread_count.max
    num_stripes = rng.randint(constraints.stripe_count.min, constraints.stripe_count.max)
    remaining = rng.randint(constraints.total_threads.min, constraints.total_threads.max)

    stripes: list[tuple[str, int]] = []
    for i in range(num_stripes):
        options = colors if i == 0 else [c for c in colors if c != stripes[-1][0]]
        # A single selected color cannot alternate.
        color = rng.pick(options or colors)

        stripes_left = num_stripes - i
        if stripes_left == 1:
            count = max(t_min, min(t_max, remaining))
        else:
            avg = remaining / stripes_left
            hi = min(
                t_max,
                math.floor(avg * _STRIPE_SPREAD_HIGH),
                remaining - (stripes_left - 1) * t_min,
            )
            hi = max(hi, t_min)
            lo = min(max(t_min, math.floor(avg * _STRIPE_SPREAD_LOW)), hi)
            count = rng.randint(lo, hi)

        remaining -= count
        stripes.append((color, count))

    return stripes


def _resolve_symmetry(choice: SymmetryChoice, rng: SeededRandom) -> Symmetry:
    if choice == SymmetryChoice.EITHER:
        return Symmetry.SYMMETRIC if rng.next_float() < 0.5 else Symmetry.ASYMMETRIC
    return Symmetry(choice.value)


# ── Stage 3: assembly ──────────────────────────────────────────────────────────


def _assemble(stripes: list[tuple[str, int]], symmetry: Symmetry) -> Sett:
    """Render stripes as notation and parse it back into a Sett.

    Symmetric setts pivot on exactly their first and last stripe.
    """
    last = len(stripes) - 1
    thread_stripes = [
        ThreadStripe(
            color=color,
            count=count,
            is_pivot=symmetry == Symmetry.SYMMETRIC and i in (0, last),
        )
        for i, (color, count) in enumerate(stripes)
    ]
    return parse_threadcount(format_stripes(thread_stripes, symmetry))


def generate_tartan(
    constraints: Optional[GeneratorConstraints] = None,
    seed: Optional[int] = None,
) -> GeneratorResult:
    """
    Generate one tartan.

    Parameters
    ----------
    constraints:
        Generation bounds; DEFAULT_CONSTRAINTS when None.
    seed:
        PRNG seed. The same constraints and seed always give an identical
        result. A random seed is drawn when None and reported on the result.
    """
    opts = constraints if constraints is not None else DEFAULT_CONSTRAINTS
    actual_seed = seed if seed is not None else random_seed()
    rng = SeededRandom(actual_seed)

    colors = select_colors(opts, rng)
    stripes = synthesize_stripes(colors, opts, rng)
    symmetry = _resolve_symmetry(opts.symmetry, rng)
    sett = _assemble(stripes, symmetry)

    logger.debug("Generated %s from seed %d", sett.threadcount, actual_seed)
    return GeneratorResult(
        sett=sett,
        seed=actual_seed,
        constraints=opts,
        signature=generate_signatures(sett),
    )


# ── Batch generation ───────────────────────────────────────────────────────────


def generate_batch(
    count: int,
    constraints: Optional[GeneratorConstraints] = None,
    base_seed: Optional[int] = None,
) -> list[GeneratorResult]:
    """
    Generate up to ``count`` structurally distinct tartans.

    Attempt ``k`` uses seed ``base_seed + k``. A result is kept only if its
    structural signature has not been seen in this batch. At most
    ``10 * count`` attempts are made; if the quota is not filled the shorter
    list is returned without error.
    """
    start = base_seed if base_seed is not None else random_seed()
    results: list[GeneratorResult] = []
    seen: set[str] = set()
    max_attempts = count * _BATCH_ATTEMPTS_PER_RESULT

    attempts = 0
    while len(results) < count and attempts < max_attempts:
        result = generate_tartan(constraints, start + attempts)
        attempts += 1
        structure = result.signature.structure_signature
        if structure not in seen:
            seen.add(structure)
            results.append(result)

    if len(results) < count:
        logger.info(
            "Batch from seed %d filled %d of %d after %d attempts",
            start,
            len(results),
            count,
            attempts,
        )
    return results


# ── Variations ─────────────────────────────────────────────────────────────────


def _remap_colors(stripes: list[ThreadStripe], base: Sett, rng: SeededRandom) -> list[ThreadStripe]:
    """Give each distinct base color a new palette color, never reusing one."""
    codes = get_palette().codes()
    color_map: dict[str, str] = {}
    for original in base.colors:
        used = set(color_map.values())
        color_map[original] = rng.pick([c for c in codes if c not in used])
    return [replace(s, color=color_map.get(s.color, s.color)) for s in stripes]


def _perturb_counts(stripes: list[ThreadStripe], rng: SeededRandom) -> list[ThreadStripe]:
    return [
        replace(
            s,
            count=max(
                _PROPORTION_MIN_COUNT,
                round_half_up(s.count * (_PROPORTION_BASE + rng.next_float() * _PROPORTION_SPAN)),
            ),
        )
        for s in stripes
    ]


def generate_variations(
    base_sett: Sett,
    count: int,
    variation_type: VariationType = VariationType.COLORS,
    seed: Optional[int] = None,
) -> list[GeneratorResult]:
    """
    Derive ``count`` variations of ``base_sett``.

    COLORS keeps the structure and recolors it; PROPORTIONS keeps the colors
    and rescales every stripe; BOTH does both, colors first. Variation ``i``
    uses seed ``seed + i``. Symmetry and pivots are carried over unchanged.
    """
    variation_type = VariationType(variation_type)
    start = seed if seed is not None else random_seed()
    results: list[GeneratorResult] = []

    for i in range(count):
        rng = SeededRandom(start + i)
        stripes = list(base_sett.stripes)

        if variation_type in (VariationType.COLORS, VariationType.BOTH):
            stripes = _remap_colors(stripes, base_sett, rng)
        if variation_type in (VariationType.PROPORTIONS, VariationType.BOTH):
            stripes = _perturb_counts(stripes, rng)

        sett = parse_threadcount(format_stripes(stripes, base_sett.symmetry))
        results.append(
            GeneratorResult(
                sett=sett,
                seed=start + i,
                constraints=DEFAULT_CONSTRAINTS,
                signature=generate_signatures(sett),
            )
        )

    return results

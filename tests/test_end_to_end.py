"""
End-to-end integration tests for the full tartan pipeline.

Exercises: preset → generate_tartan → validate_sett → expand_sett → weave
resolution, verifying that a generated sett validates, expands to the
expected repeat and weaves into a grid of palette colors.
"""

from __future__ import annotations

from tartankit.colors import get_palette
from tartankit.generator import VariationType, generate_tartan, generate_variations, get_preset
from tartankit.sett import (
    ValidationOptions,
    expand_sett,
    get_example_sett,
    parse_threadcount,
    scale_sett,
    validate_sett,
)
from tartankit.weaves import WeaveType, get_intersection_color, get_weave_pattern

# ── Shared test fixtures ───────────────────────────────────────────────────────

_GRID = 48

# Validation bounds implied by the "classic" preset; the final stripe may be
# clamped, so the total can fall below the thread budget.
_CLASSIC_BOUNDS = ValidationOptions(
    min_colors=1,
    max_colors=6,
    min_stripes=6,
    max_stripes=10,
    min_thread_count=4,
    max_thread_count=48,
    min_total_threads=24,
    max_total_threads=160,
)


def _weave_grid(warp_sett, weft_sett, weave_type):
    warp = expand_sett(warp_sett)
    weft = expand_sett(weft_sett)
    weave = get_weave_pattern(weave_type)
    return [
        [get_intersection_color(warp, weft, weave, x, y).color for x in range(_GRID)]
        for y in range(_GRID)
    ]


# ── Generated tartan ───────────────────────────────────────────────────────────


def test_generated_tartan_full_pipeline():
    classic = get_preset("classic")
    result = generate_tartan(classic, seed=2024)

    validation = validate_sett(result.sett, _CLASSIC_BOUNDS)
    assert validation.errors == ()

    expanded = expand_sett(result.sett)
    assert expanded.length == 2 * result.sett.total_threads - (
        result.sett.stripes[0].count + result.sett.stripes[-1].count
    )

    grid = _weave_grid(result.sett, result.sett, WeaveType.TWILL_2_2)
    palette = get_palette()
    assert all(code in palette for row in grid for code in row)


def test_variations_weave_like_their_base():
    base = get_example_sett("Black Watch")
    variations = generate_variations(base, 3, VariationType.PROPORTIONS, seed=11)
    for variation in variations:
        grid = _weave_grid(variation.sett, variation.sett, WeaveType.TWILL_2_2)
        assert {code for row in grid for code in row} <= set(base.colors)


# ── Example tartan ─────────────────────────────────────────────────────────────


def test_example_tartan_woven_in_plain_and_twill():
    sett = scale_sett(get_example_sett("Simple Check"), 0.25)
    assert sett.threadcount == "B/6 W1 B/6"

    plain = _weave_grid(sett, sett, WeaveType.PLAIN)
    twill = _weave_grid(sett, sett, WeaveType.TWILL_2_2)

    # Where warp and weft share a color, the weave structure is invisible.
    assert plain[0][0] == twill[0][0] == "B"
    assert {code for row in plain for code in row} == {"B", "W"}


def test_warp_and_weft_may_differ():
    warp = parse_threadcount("K/4 W/4")
    weft = parse_threadcount("...R8...")
    grid = _weave_grid(warp, weft, WeaveType.PLAIN)
    assert {code for row in grid for code in row} == {"K", "W", "R"}
    assert grid[0][1] == "R"

"""Tests for intersection resolution, weave analysis and draft helpers."""

import pytest

from tartankit.sett import expand_sett, parse_threadcount
from tartankit.weaves import (
    WeaveType,
    WovenPixel,
    analyze_weave,
    format_tie_up,
    generate_threading,
    generate_treadling,
    get_intersection_color,
    get_weave_pattern,
    is_warp_on_top,
)


@pytest.fixture(scope="module")
def plain():
    return get_weave_pattern(WeaveType.PLAIN)


@pytest.fixture(scope="module")
def twill():
    return get_weave_pattern(WeaveType.TWILL_2_2)


# ── Intersections ──────────────────────────────────────────────────────────────


class TestIsWarpOnTop:
    def test_twill_origin_shows_warp(self, twill):
        assert is_warp_on_top(twill, 0, 0)

    def test_plain_alternates(self, plain):
        assert is_warp_on_top(plain, 0, 0)
        assert not is_warp_on_top(plain, 1, 0)
        assert not is_warp_on_top(plain, 0, 1)
        assert is_warp_on_top(plain, 1, 1)

    def test_indices_wrap_around_repeat(self, twill):
        for w in range(4):
            for f in range(4):
                assert is_warp_on_top(twill, w, f) == is_warp_on_top(twill, w + 8, f + 12)

    def test_twill_steps_diagonally(self, twill):
        # Moving one warp and one weft together stays on the same twill line.
        for i in range(8):
            assert is_warp_on_top(twill, i, i)


class TestIntersectionColor:
    @pytest.fixture(scope="class")
    def expanded(self):
        warp = expand_sett(parse_threadcount("R/2 G/2"))
        weft = expand_sett(parse_threadcount("...K2 W2..."))
        return warp, weft

    def test_warp_on_top_shows_warp_color(self, expanded, plain):
        warp, weft = expanded
        assert get_intersection_color(warp, weft, plain, 0, 0) == WovenPixel(
            color="R", warp_on_top=True, warp_color="R", weft_color="K"
        )

    def test_weft_on_top_shows_weft_color(self, expanded, plain):
        warp, weft = expanded
        pixel = get_intersection_color(warp, weft, plain, 1, 0)
        assert pixel.color == "K"
        assert not pixel.warp_on_top

    def test_each_axis_wraps_its_own_sett(self, expanded, plain):
        warp, weft = expanded
        pixel = get_intersection_color(warp, weft, plain, 6, 3)
        assert pixel.warp_color == "G"
        assert pixel.weft_color == "W"

    def test_solid_cloth_shows_one_color(self, twill):
        black = expand_sett(parse_threadcount("K/4 K/4"))
        for w in range(6):
            for f in range(6):
                assert get_intersection_color(black, black, twill, w, f).color == "K"


# ── Analysis ───────────────────────────────────────────────────────────────────


class TestAnalyzeWeave:
    @pytest.mark.parametrize(
        "weave_type, dominance, max_float, angle",
        [
            (WeaveType.PLAIN, 0.5, (1, 1), 0.0),
            (WeaveType.TWILL_2_2, 0.5, (2, 2), 45.0),
            (WeaveType.TWILL_3_1, 0.75, (3, 1), 45.0),
            (WeaveType.HOUNDSTOOTH, 0.5, (4, 2), 0.0),
            (WeaveType.BASKETWEAVE, 0.5, (2, 2), 0.0),
            (WeaveType.HERRINGBONE, 19 / 36, (3, 3), 45.0),
        ],
    )
    def test_reference_values(self, weave_type, dominance, max_float, angle):
        analysis = analyze_weave(get_weave_pattern(weave_type))
        assert analysis.warp_dominance == pytest.approx(dominance)
        assert analysis.max_float == max_float
        assert analysis.diagonal_angle == angle

    def test_repeat_size(self):
        analysis = analyze_weave(get_weave_pattern(WeaveType.HOUNDSTOOTH))
        assert analysis.repeat_size == (4, 8)

    @pytest.mark.parametrize("weave_type", list(WeaveType))
    def test_dominance_in_unit_interval(self, weave_type):
        analysis = analyze_weave(get_weave_pattern(weave_type))
        assert 0.0 <= analysis.warp_dominance <= 1.0
        assert min(analysis.max_float) >= 1


# ── Draft helpers ──────────────────────────────────────────────────────────────


class TestDraftHelpers:
    def test_generate_threading_repeats(self, twill):
        assert generate_threading(twill, 6) == [1, 2, 3, 4, 1, 2]

    def test_generate_treadling_repeats(self):
        houndstooth = get_weave_pattern(WeaveType.HOUNDSTOOTH)
        assert generate_treadling(houndstooth, 3) == [1, 1, 2]

    def test_zero_length(self, twill):
        assert generate_threading(twill, 0) == []

    def test_format_tie_up_plain(self, plain):
        assert format_tie_up(plain) == "T1: █░\nT2: ░█"

    def test_format_tie_up_has_one_line_per_treadle(self, twill):
        lines = format_tie_up(twill).splitlines()
        assert len(lines) == twill.treadles
        assert lines[0] == "T1: ██░░"

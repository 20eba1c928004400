"""
Tests for threadcount notation and the sett value types.

Covers:
  - ThreadStripe and Sett construction rules
  - Parsing pivots, case, asymmetric markers and invalid input
  - Formatting back to notation
"""

import pytest

from tartankit.sett import (
    InvalidNotation,
    Sett,
    Symmetry,
    ThreadStripe,
    build_sett,
    format_stripes,
    parse_threadcount,
    to_threadcount_string,
)

# ── Value types ────────────────────────────────────────────────────────────────


class TestThreadStripe:
    def test_color_is_uppercased(self):
        assert ThreadStripe(color="dg", count=4).color == "DG"

    def test_pivot_defaults_to_false(self):
        assert ThreadStripe(color="K", count=4).is_pivot is False

    @pytest.mark.parametrize("count", [0, -3])
    def test_non_positive_count_raises(self, count):
        with pytest.raises(ValueError, match="count must be >= 1"):
            ThreadStripe(color="K", count=count)

    def test_empty_color_raises(self):
        with pytest.raises(ValueError):
            ThreadStripe(color="", count=4)

    def test_is_frozen(self):
        stripe = ThreadStripe(color="K", count=4)
        with pytest.raises(AttributeError):
            stripe.count = 5  # type: ignore[misc]


class TestSett:
    def test_list_of_stripes_becomes_tuple(self):
        sett = Sett(threadcount="K4 W4", stripes=[ThreadStripe("K", 4), ThreadStripe("W", 4)])
        assert isinstance(sett.stripes, tuple)

    def test_empty_stripes_raise(self):
        with pytest.raises(ValueError, match="at least one stripe"):
            Sett(threadcount="", stripes=())

    def test_derived_values(self):
        sett = parse_threadcount("B/24 W4 B24 R2 K24 G24 W/2")
        assert sett.total_threads == 104
        assert sett.colors == ("B", "W", "R", "K", "G")
        assert sett.has_pivots


# ── Parsing ────────────────────────────────────────────────────────────────────


class TestParseThreadcount:
    def test_stripes_and_pivots(self):
        sett = parse_threadcount("B/24 W4 B/24")
        assert sett.stripes == (
            ThreadStripe("B", 24, is_pivot=True),
            ThreadStripe("W", 4),
            ThreadStripe("B", 24, is_pivot=True),
        )
        assert sett.symmetry == Symmetry.SYMMETRIC

    def test_no_pivots_defaults_to_symmetric(self):
        sett = parse_threadcount("K8 R4 G8")
        assert sett.symmetry == Symmetry.SYMMETRIC
        assert not sett.has_pivots

    @pytest.mark.parametrize("text", ["...K8 R4 G8...", "...K8 R4 G8", "K8 R4 G8..."])
    def test_ellipsis_marks_asymmetric(self, text):
        sett = parse_threadcount(text)
        assert sett.symmetry == Symmetry.ASYMMETRIC
        assert [s.color for s in sett.stripes] == ["K", "R", "G"]

    def test_codes_are_case_insensitive(self):
        sett = parse_threadcount("b/24 w4 hg/8")
        assert [s.color for s in sett.stripes] == ["B", "W", "HG"]

    def test_multi_letter_codes(self):
        sett = parse_threadcount("DGY/6 LPK10 DPK/2")
        assert [(s.color, s.count) for s in sett.stripes] == [("DGY", 6), ("LPK", 10), ("DPK", 2)]

    def test_surrounding_whitespace_is_stripped(self):
        assert parse_threadcount("  K4 W4  ").threadcount == "K4 W4"

    def test_name_is_kept(self):
        assert parse_threadcount("K4 W4", name="Mono").name == "Mono"

    @pytest.mark.parametrize("text", ["", "   ", "hello", "42 17", "..."])
    def test_unparseable_input_raises(self, text):
        with pytest.raises(InvalidNotation):
            parse_threadcount(text)

    def test_invalid_notation_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_threadcount("no stripes here")


# ── Formatting ─────────────────────────────────────────────────────────────────


class TestFormatting:
    @pytest.mark.parametrize(
        "text",
        [
            "B/24 W4 B24 R2 K24 G24 W/2",
            "K8 R4 G8",
            "...K8 R4 G8...",
            "Y/32 K4 Y4 K24 Y/32",
        ],
    )
    def test_canonical_notation_round_trips(self, text):
        assert to_threadcount_string(parse_threadcount(text)) == text

    def test_trailing_marker_is_rendered_on_both_sides(self):
        assert to_threadcount_string(parse_threadcount("K8 R4 G8...")) == "...K8 R4 G8..."

    def test_lowercase_input_formats_uppercase(self):
        assert to_threadcount_string(parse_threadcount("b/24 w4 b/24")) == "B/24 W4 B/24"

    def test_format_stripes_symmetric(self):
        stripes = [ThreadStripe("K", 8, is_pivot=True), ThreadStripe("W", 2)]
        assert format_stripes(stripes, Symmetry.SYMMETRIC) == "K/8 W2"

    def test_build_sett_derives_notation(self):
        sett = build_sett(
            [ThreadStripe("K", 8), ThreadStripe("W", 2)], Symmetry.ASYMMETRIC, name="Pair"
        )
        assert sett.threadcount == "...K8 W2..."
        assert sett.symmetry == Symmetry.ASYMMETRIC
        assert sett.name == "Pair"
        assert parse_threadcount(sett.threadcount).stripes == sett.stripes

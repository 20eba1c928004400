"""
Tests for validate_sett and the bundled example setts.

Covers:
  - Each bound yields its own error message
  - Warnings never affect validity
  - Custom ValidationOptions
  - Every example sett parses and validates cleanly
"""

import pytest

from tartankit.sett import (
    EXAMPLE_SETTS,
    Symmetry,
    ValidationOptions,
    expand_sett,
    get_example_sett,
    parse_threadcount,
    validate_sett,
)


class TestValidateSett:
    def test_clean_sett(self):
        result = validate_sett(parse_threadcount("B/24 W4 B/24"))
        assert result.valid
        assert result.errors == ()
        assert result.warnings == ()

    def test_single_color_with_thin_stripe(self):
        result = validate_sett(parse_threadcount("B24 B1"))
        assert not result.valid
        assert result.errors == (
            "Too few colors: 1 (min: 2)",
            "Stripe B has too few threads: 1 (min: 2)",
        )
        assert result.warnings == (
            "Symmetric sett has no explicit pivot points",
            "Adjacent stripes with same color: B",
        )

    def test_too_few_stripes(self):
        result = validate_sett(parse_threadcount("B/24"))
        assert "Too few stripes: 1 (min: 2)" in result.errors

    def test_too_many_threads_in_stripe(self):
        result = validate_sett(parse_threadcount("K/120 W/4"))
        assert "Stripe K has too many threads: 120 (max: 100)" in result.errors

    def test_total_too_low(self):
        result = validate_sett(parse_threadcount("K/2 W/2"))
        assert result.errors == ("Total threads too low: 4 (min: 10)",)

    def test_total_too_high(self):
        result = validate_sett(parse_threadcount("K/100 W100 R100 G100 B100 Y/100"))
        assert result.errors == ("Total threads too high: 600 (max: 500)",)

    def test_unknown_color_code_is_a_warning(self):
        result = validate_sett(parse_threadcount("ZZ/8 K/8"))
        assert result.valid
        assert result.warnings == ("Unknown color code: ZZ",)

    def test_asymmetric_needs_no_pivots(self):
        result = validate_sett(parse_threadcount("...K8 R4 G8..."))
        assert result.valid
        assert result.warnings == ()

    def test_custom_options(self):
        options = ValidationOptions(max_colors=1, max_total_threads=50)
        result = validate_sett(parse_threadcount("B/24 W4 B/24"), options)
        assert result.errors == (
            "Too many colors: 2 (max: 1)",
            "Total threads too high: 52 (max: 50)",
        )

    def test_every_violation_is_reported(self):
        options = ValidationOptions(min_colors=5, min_stripes=5, min_thread_count=30)
        result = validate_sett(parse_threadcount("B/24 W4 B/24"), options)
        assert len(result.errors) == 5


class TestExampleSetts:
    def test_five_examples(self):
        assert set(EXAMPLE_SETTS) == {
            "Black Watch",
            "Royal Stewart",
            "MacLeod",
            "Simple Check",
            "Basic Tartan",
        }

    @pytest.mark.parametrize("name", sorted(EXAMPLE_SETTS))
    def test_example_is_valid(self, name):
        sett = get_example_sett(name)
        assert sett.name == name
        assert sett.symmetry == Symmetry.SYMMETRIC
        result = validate_sett(sett)
        assert result.valid, result.errors
        assert result.warnings == ()

    def test_royal_stewart(self):
        sett = get_example_sett("Royal Stewart")
        assert sett.total_threads == 168
        assert sett.colors == ("R", "G", "K", "Y", "W")

    def test_macleod_expansion(self):
        expanded = expand_sett(get_example_sett("MacLeod"))
        assert expanded.length == 2 * 96 - 32 - 32

    def test_unknown_example_raises(self):
        with pytest.raises(KeyError, match="Tartan of Nowhere"):
            get_example_sett("Tartan of Nowhere")

"""Tests for the half-up rounding helper."""

import pytest

from tartankit.utilities import round_half_up


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.5, 1),
            (1.5, 2),
            (2.5, 3),
            (12.5, 13),
            (-0.5, 0),
            (-2.5, -2),
        ],
    )
    def test_ties_round_toward_positive_infinity(self, value, expected):
        assert round_half_up(value) == expected

    def test_differs_from_builtin_round_on_even_ties(self):
        """Builtin round() is banker's rounding; round_half_up is not."""
        assert round(2.5) == 2
        assert round_half_up(2.5) == 3

    def test_non_ties(self):
        assert round_half_up(2.49) == 2
        assert round_half_up(2.51) == 3
        assert round_half_up(7.0) == 7

    def test_returns_int(self):
        assert isinstance(round_half_up(3.2), int)

"""Tests for dividing a withdrawal between the two receivers."""

import pytest

from splitescrow.errors import ImpreciseSplitError, TemplateInputError
from splitescrow.ratio import split_amount, validate_ratio


class TestSplitAmount:
    def test_exact_third(self):
        assert split_amount(3000, 1, 3, precise=True) == (1000, 2000)

    def test_multiplies_before_dividing(self):
        """A ratio below one must not truncate to zero."""
        assert split_amount(100, 1, 4) == (25, 75)

    def test_precise_remainder_raises(self):
        with pytest.raises(ImpreciseSplitError) as excinfo:
            split_amount(10, 1, 3, precise=True)
        assert excinfo.value.remainder == 1
        assert excinfo.value.amount == 10

    def test_remainder_goes_to_receiver_two(self):
        # floor(10 / 3) = 3 for receiver one, the leftover unit lands on receiver two
        assert split_amount(10, 1, 3, precise=False) == (3, 7)
        assert split_amount(11, 2, 3, precise=False) == (7, 4)

    def test_conservation_when_imprecise(self):
        for amount in (0, 1, 7, 999, 1000001):
            for ratn, ratd in ((1, 3), (2, 7), (5, 5), (3, 10)):
                one, two = split_amount(amount, ratn, ratd, precise=False)
                assert one + two == amount
                assert one == amount * ratn // ratd

    def test_precision_gate_matches_modulus(self):
        for amount in range(0, 30):
            if (amount * 2) % 7:
                with pytest.raises(ImpreciseSplitError):
                    split_amount(amount, 2, 7, precise=True)
            else:
                assert sum(split_amount(amount, 2, 7, precise=True)) == amount

    def test_whole_ratio(self):
        assert split_amount(500, 4, 4) == (500, 0)

    def test_zero_amount(self):
        assert split_amount(0, 1, 3) == (0, 0)

    def test_negative_amount(self):
        with pytest.raises(TemplateInputError, match="non-negative"):
            split_amount(-1, 1, 3)


class TestValidateRatio:
    def test_valid(self):
        validate_ratio(1, 3)
        validate_ratio(3, 3)

    def test_zero_denominator(self):
        with pytest.raises(TemplateInputError, match="ratd"):
            validate_ratio(1, 0)

    def test_zero_numerator(self):
        with pytest.raises(TemplateInputError, match="ratn"):
            validate_ratio(0, 3)

    def test_numerator_above_denominator(self):
        with pytest.raises(TemplateInputError, match="ratn"):
            validate_ratio(4, 3)

    def test_not_an_integer(self):
        with pytest.raises(TemplateInputError, match="integer"):
            validate_ratio(1.5, 3)

"""Tests for ssr.digits module."""

import sys
from fractions import Fraction

import pytest

from ssr.digits import to_text, unbounded_digits


def test_to_text_past_digit_limit():
    text = to_text(10**5000)
    assert len(text) == 5001
    assert text.startswith("1") and set(text[1:]) == {"0"}


def test_to_text_fraction():
    text = to_text(Fraction(10**5000 + 1, 3))
    numerator, denominator = text.split("/")
    assert len(numerator) == 5001
    assert denominator == "3"


def test_limit_restored():
    before = sys.get_int_max_str_digits()
    with unbounded_digits():
        assert sys.get_int_max_str_digits() == 0
    assert sys.get_int_max_str_digits() == before


def test_limit_restored_after_error():
    before = sys.get_int_max_str_digits()
    with pytest.raises(RuntimeError):
        with unbounded_digits():
            raise RuntimeError("boom")
    assert sys.get_int_max_str_digits() == before

"""Shared test fixtures for the SSR test suite."""

from __future__ import annotations

import string
from collections.abc import Callable
from pathlib import Path

import pytest

DIGITS = string.digits + string.ascii_lowercase

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


def _to_base(value: int, base: int) -> str:
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    value = abs(value)
    out = []
    while value:
        value, rem = divmod(value, base)
        out.append(DIGITS[rem])
    return sign + "".join(reversed(out))


@pytest.fixture
def to_base() -> Callable[[int, int], str]:
    """Encoder for integers in any base 2..36 (inverse of decode_value)."""
    return _to_base


@pytest.fixture
def square_points() -> dict[int, int]:
    """f(x) = x^2 sampled at x = 1, 2, 3; constant term 0."""
    return {1: 1, 2: 4, 3: 9}


@pytest.fixture
def big_coeffs() -> list[int]:
    """Degree-4 polynomial whose coefficients are all well beyond 64 bits."""
    return [
        2**127 - 1,
        -(3**90),
        17 * 2**70 + 5,
        -(10**25) + 3,
        7**40,
    ]


@pytest.fixture
def examples_dir() -> Path:
    return EXAMPLES_DIR

"""Exact evaluation of integer polynomials, for building known share sets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def evaluate_polynomial(coeffs: Sequence[int], x: int) -> int:
    """Horner evaluation; coeffs[0] is the constant term."""
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def sample_points(coeffs: Sequence[int], xs: Iterable[int]) -> dict[int, int]:
    """Map each x to f(x) for the polynomial with the given coefficients."""
    return {x: evaluate_polynomial(coeffs, x) for x in xs}

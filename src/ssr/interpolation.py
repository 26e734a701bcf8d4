"""Lagrange interpolation over the integers with exact rational steps.

Recovers f(0) from k points of an integer polynomial of degree < k.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from enum import Enum, auto
from fractions import Fraction

from ssr.digits import to_text
from ssr.errors import (
    DuplicateAbscissaError,
    InsufficientPointsError,
    InvalidThresholdError,
    NonIntegralSecretError,
)
from ssr.models import Point, ReconstructionRequest

logger = logging.getLogger(__name__)

PointsLike = Mapping[int, int] | Iterable[Point] | Iterable[tuple[int, int]]


class Selection(Enum):
    """Which k points to use when more than k are available."""

    ASCENDING = auto()
    INPUT_ORDER = auto()


def _as_pairs(points: PointsLike) -> list[tuple[int, int]]:
    if isinstance(points, Mapping):
        return list(points.items())
    pairs = []
    for p in points:
        if isinstance(p, Point):
            pairs.append((p.x, p.y))
        else:
            x, y = p
            pairs.append((x, y))
    return pairs


def _check_threshold(k: int) -> None:
    if isinstance(k, bool) or not isinstance(k, int):
        raise InvalidThresholdError(f"k must be an integer, got {k!r}")
    if k < 1:
        raise InvalidThresholdError(f"k must be >= 1, got {to_text(k)}")


def _check_distinct(xs: Iterable[int]) -> None:
    seen: set[int] = set()
    for x in xs:
        if x in seen:
            raise DuplicateAbscissaError(x)
        seen.add(x)


def _interpolate(selected: list[tuple[int, int]], at: int) -> Fraction:
    """sum_i y_i * prod_{j != i} (at - x_j) / (x_i - x_j).

    Each factor is multiplied in and divided out before the next one, in
    index order. Fractions keep every step exact.
    """
    total = Fraction(0)
    for i, (xi, yi) in enumerate(selected):
        term = Fraction(yi)
        for j, (xj, _) in enumerate(selected):
            if i == j:
                continue
            term = term * (at - xj) / (xi - xj)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Basis term for x=%s: %s", to_text(xi), to_text(term))
        total += term
    return total


class Interpolator:
    """Recovers a polynomial's constant term from k of its evaluations.

    Args:
        selection: Ordering used to pick the k points when more are given.
            ASCENDING (default) sorts by x; INPUT_ORDER keeps the caller's
            order.
    """

    def __init__(self, selection: Selection = Selection.ASCENDING) -> None:
        self.selection = selection

    def select(self, points: PointsLike, k: int) -> list[tuple[int, int]]:
        """Validate the request and return the k points that will be used.

        Raises:
            InvalidThresholdError: k is not a positive integer.
            DuplicateAbscissaError: Two supplied points share an x.
            InsufficientPointsError: Fewer than k points were supplied.
        """
        _check_threshold(k)
        pairs = _as_pairs(points)
        _check_distinct(x for x, _ in pairs)
        if len(pairs) < k:
            raise InsufficientPointsError(required=k, available=len(pairs))

        if self.selection is Selection.ASCENDING:
            pairs = sorted(pairs, key=lambda p: p[0])
        selected = pairs[:k]
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Selected abscissas %s for k=%d", to_text([x for x, _ in selected]), k
            )
        return selected

    def evaluate(self, points: PointsLike, k: int, at: int) -> Fraction:
        """Value at x=at of the degree < k polynomial through the selected points."""
        return _interpolate(self.select(points, k), at)

    def reconstruct(self, points: PointsLike, k: int) -> int:
        """Recover the secret f(0) from at least k points.

        Args:
            points: Mapping x -> y, Points, or (x, y) pairs.
            k: Threshold; the polynomial has degree k - 1.

        Returns:
            The constant term as an exact integer.

        Raises:
            InvalidThresholdError: k is not a positive integer.
            DuplicateAbscissaError: Two supplied points share an x.
            InsufficientPointsError: Fewer than k points were supplied.
            NonIntegralSecretError: The selected points do not lie on an
                integer polynomial, so f(0) is not an integer.
        """
        value = self.evaluate(points, k, 0)
        if value.denominator != 1:
            raise NonIntegralSecretError(value)
        return value.numerator

    def reconstruct_request(self, request: ReconstructionRequest) -> int:
        return self.reconstruct(request.points, request.k)

    def find_inconsistent(self, points: PointsLike, k: int) -> list[int]:
        """x-coordinates of surplus points that miss the selected polynomial.

        Only points beyond the k selected ones are checked. An empty list
        means every supplied point agrees.
        """
        pairs = _as_pairs(points)
        selected = self.select(pairs, k)
        chosen = {x for x, _ in selected}
        return [
            x for x, y in pairs
            if x not in chosen and _interpolate(selected, x) != y
        ]

    @staticmethod
    def lagrange_coefficients(xs: list[int], at: int = 0) -> list[Fraction]:
        """Basis weights L_i(at) = prod_{j != i} (at - x_j) / (x_i - x_j)."""
        _check_distinct(xs)
        coeffs = []
        for i, xi in enumerate(xs):
            weight = Fraction(1)
            for j, xj in enumerate(xs):
                if i == j:
                    continue
                weight = weight * (at - xj) / (xi - xj)
            coeffs.append(weight)
        return coeffs


def reconstruct_secret(
    points: PointsLike,
    k: int,
    selection: Selection = Selection.ASCENDING,
) -> int:
    """Convenience: recover f(0) from at least k points."""
    return Interpolator(selection).reconstruct(points, k)

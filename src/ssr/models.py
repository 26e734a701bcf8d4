"""Data models for shares, decoded points, and reconstruction requests."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from ssr.errors import ShareError

MIN_BASE = 2
MAX_BASE = 36


@dataclass(frozen=True)
class Share:
    """A parsed share entry: x-coordinate plus y encoded in some base."""

    index: int
    base: int
    encoded_value: str

    def __post_init__(self) -> None:
        if self.index < 1:
            raise ValueError(f"index must be >= 1, got {self.index}")
        if not MIN_BASE <= self.base <= MAX_BASE:
            raise ValueError(
                f"base must be in [{MIN_BASE}, {MAX_BASE}], got {self.base}"
            )


@dataclass(frozen=True)
class Point:
    """A decoded share (x, y) with y an exact integer."""

    x: int
    y: int


@dataclass(frozen=True)
class ReconstructionRequest:
    """Threshold k together with the points available to meet it.

    Attributes:
        k: Number of points the polynomial needs (its degree + 1).
        points: Candidate points; at least k of them are required.
    """

    k: int
    points: tuple[Point, ...]

    @classmethod
    def from_mapping(cls, k: int, points: Mapping[int, int]) -> ReconstructionRequest:
        return cls(k=k, points=tuple(Point(x, y) for x, y in sorted(points.items())))


@dataclass(frozen=True)
class Diagnostic:
    """Why a share entry was left out of a decode result."""

    index: int
    error: ShareError

    @property
    def reason(self) -> str:
        return str(self.error)


@dataclass
class DecodeResult:
    """Output of a decode pass.

    Attributes:
        points: Mapping from share index (x) to decoded value (y).
        diagnostics: One entry per skipped share, in index order.
    """

    points: dict[int, int] = field(default_factory=dict)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def skipped(self) -> list[int]:
        return [d.index for d in self.diagnostics]

    def to_points(self) -> list[Point]:
        """Decoded points sorted by x."""
        return [Point(x, y) for x, y in sorted(self.points.items())]

    def __len__(self) -> int:
        return len(self.points)

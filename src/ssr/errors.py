"""Error taxonomy for share decoding and secret reconstruction.

Everything derives from ValueError so callers catching ValueError keep working.
Per-share errors (ShareError) are recovered inside the decoder; the rest abort
a single reconstruction request.
"""

from __future__ import annotations

from fractions import Fraction

from ssr.digits import to_text


class ReconstructionError(ValueError):
    """Base class for all ssr errors."""


class ShareError(ReconstructionError):
    """A single share entry could not be turned into a point."""

    def __init__(self, index: int, message: str) -> None:
        super().__init__(f"share {index}: {message}")
        self.index = index


class MalformedShareError(ShareError):
    """Missing base or value, or a base that is not an integer in [2, 36]."""


class DecodeError(ShareError):
    """Value string is not a valid numeral in the stated base."""


class InvalidThresholdError(ReconstructionError):
    """Threshold k is not a positive integer."""


class InsufficientPointsError(ReconstructionError):
    """Fewer usable points than the threshold."""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            f"Not enough points to solve the polynomial: "
            f"need at least {to_text(required)}, got {available}"
        )
        self.required = required
        self.available = available


class DuplicateAbscissaError(ReconstructionError):
    """Two points share an x-coordinate, so a Lagrange divisor would be zero."""

    def __init__(self, x: int) -> None:
        super().__init__(f"Duplicate abscissa x={to_text(x)}")
        self.x = x


class NonIntegralSecretError(ReconstructionError):
    """Interpolated constant is not an integer.

    The selected points do not lie on an integer polynomial of degree < k.
    """

    def __init__(self, value: Fraction) -> None:
        super().__init__(f"Interpolated constant {to_text(value)} is not an integer")
        self.value = value


class InputFormatError(ReconstructionError):
    """Test-case document is unreadable or lacks its keys section."""

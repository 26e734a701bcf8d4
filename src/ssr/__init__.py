"""Shamir Secret Reconstruction (SSR).

Recovers the constant term of an integer polynomial from k of its
evaluations, with share values encoded in any numeral base from 2 to 36.
"""

from ssr.decoder import ShareDecoder, decode_shares, decode_value
from ssr.errors import (
    DecodeError,
    DuplicateAbscissaError,
    InputFormatError,
    InsufficientPointsError,
    InvalidThresholdError,
    MalformedShareError,
    NonIntegralSecretError,
    ReconstructionError,
    ShareError,
)
from ssr.interpolation import Interpolator, Selection, reconstruct_secret
from ssr.models import DecodeResult, Diagnostic, Point, ReconstructionRequest, Share

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "DecodeResult",
    "Diagnostic",
    "DuplicateAbscissaError",
    "InputFormatError",
    "InsufficientPointsError",
    "Interpolator",
    "InvalidThresholdError",
    "MalformedShareError",
    "NonIntegralSecretError",
    "Point",
    "ReconstructionError",
    "ReconstructionRequest",
    "Selection",
    "Share",
    "ShareDecoder",
    "ShareError",
    "decode_shares",
    "decode_value",
    "reconstruct_secret",
]

"""Share decoding: raw (index, base, value) records to exact integer points.

Bad entries are skipped with a logged diagnostic; the batch survives as long
as the caller still ends up with at least k points.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from ssr.digits import to_text, unbounded_digits
from ssr.errors import DecodeError, MalformedShareError, ShareError
from ssr.models import MAX_BASE, MIN_BASE, DecodeResult, Diagnostic, Point, Share

logger = logging.getLogger(__name__)

_BASE_PATTERN = re.compile(r"[+-]?[0-9]+")
_NUMERAL_PATTERN = re.compile(r"[+-]?[0-9A-Za-z]+")


def decode_value(encoded: str, base: int) -> int:
    """Decode a numeral in the given base to an exact integer.

    Accepts an optional sign followed by digits 0-9 and letters a-z (either
    case). Unlike int(), whitespace, underscores and 0x/0o/0b prefixes are
    rejected.

    Raises:
        ValueError: If base is outside [2, 36] or encoded is not a numeral
            in that base.
    """
    if not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"base must be in [{MIN_BASE}, {MAX_BASE}], got {to_text(base)}")
    if not _NUMERAL_PATTERN.fullmatch(encoded):
        raise ValueError(f"{encoded!r} is not a numeral")

    digits = encoded.lstrip("+-")
    for ch in digits:
        if int(ch, 36) >= base:
            raise ValueError(f"digit {ch!r} is out of range for base {base}")

    with unbounded_digits():
        return int(encoded, base)


def _parse_base(index: int, raw: Any) -> int:
    if isinstance(raw, bool):
        raise MalformedShareError(index, f"base must be an integer, got {raw!r}")
    if isinstance(raw, int):
        base = raw
    elif isinstance(raw, str) and _BASE_PATTERN.fullmatch(raw):
        with unbounded_digits():
            base = int(raw)
    else:
        raise MalformedShareError(index, f"base {raw!r} is not an integer")

    if not MIN_BASE <= base <= MAX_BASE:
        raise MalformedShareError(
            index, f"base {to_text(base)} is outside [{MIN_BASE}, {MAX_BASE}]"
        )
    return base


def parse_share(index: int, record: Any) -> Share:
    """Validate one raw record and build a Share from it.

    Raises:
        MalformedShareError: If the record is absent, lacks base or value,
            or carries a base that is not an integer in [2, 36].
    """
    if record is None:
        raise MalformedShareError(index, "entry is missing")
    if not isinstance(record, Mapping):
        raise MalformedShareError(index, "entry is not an object")

    raw_base = record.get("base")
    raw_value = record.get("value")
    if raw_base is None or raw_value is None:
        raise MalformedShareError(index, "missing base or value")
    if not isinstance(raw_value, str):
        raise MalformedShareError(index, f"value must be a string, got {raw_value!r}")

    return Share(index=index, base=_parse_base(index, raw_base), encoded_value=raw_value)


class ShareDecoder:
    """Turns raw share records into exact integer points.

    Args:
        strict: Raise the first per-share error instead of skipping it.
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    def decode_share(self, share: Share) -> Point:
        """Decode a parsed share's value under its base."""
        try:
            y = decode_value(share.encoded_value, share.base)
        except ValueError as exc:
            raise DecodeError(share.index, str(exc)) from exc
        return Point(x=share.index, y=y)

    def decode(self, records: Mapping[Any, Any], n: int) -> DecodeResult:
        """Decode entries 1..n of records.

        Records are looked up by the decimal string of their index, falling
        back to the integer index. Each index is the x-coordinate of its
        point, unchanged.

        Args:
            records: Mapping of index -> {"base": ..., "value": ...}.
            n: Number of indexed entries to look for.

        Returns:
            DecodeResult with the surviving points and one diagnostic per
            skipped entry.
        """
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")

        result = DecodeResult()
        for i in range(1, n + 1):
            record = records.get(str(i), records.get(i))
            try:
                point = self.decode_share(parse_share(i, record))
            except ShareError as exc:
                if self.strict:
                    raise
                logger.warning("Skipping %s", exc)
                result.diagnostics.append(Diagnostic(index=i, error=exc))
                continue
            result.points[point.x] = point.y

        logger.debug(
            "Decoded %d of %d shares (skipped: %s)",
            len(result.points), n, result.skipped or "none",
        )
        return result


def decode_shares(
    records: Mapping[Any, Any],
    n: int,
    strict: bool = False,
) -> DecodeResult:
    """Convenience: decode entries 1..n with a default decoder."""
    return ShareDecoder(strict=strict).decode(records, n)

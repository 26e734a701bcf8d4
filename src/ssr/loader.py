"""Reading share documents from JSON.

A document looks like::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ssr.decoder import ShareDecoder
from ssr.digits import to_text, unbounded_digits
from ssr.errors import DuplicateAbscissaError, InputFormatError
from ssr.interpolation import Interpolator
from ssr.models import DecodeResult, ReconstructionRequest

logger = logging.getLogger(__name__)

_INDEX_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class ShareDocument:
    """A parsed and decoded share document.

    Attributes:
        name: Label used in reports (the file stem when loaded from disk).
        n: Number of shares the document declares.
        k: Reconstruction threshold.
        decoded: Points that survived decoding, plus diagnostics.
    """

    name: str
    n: int
    k: int
    decoded: DecodeResult

    @property
    def request(self) -> ReconstructionRequest:
        return ReconstructionRequest.from_mapping(self.k, self.decoded.points)

    def solve(self, interpolator: Interpolator | None = None) -> int:
        """Reconstruct the secret held by this document."""
        interpolator = interpolator or Interpolator()
        return interpolator.reconstruct_request(self.request)


def _read_key(keys: Mapping[str, Any], name: str) -> int:
    value = keys.get(name)
    if value is None:
        raise InputFormatError(f"The 'keys' object must contain '{name}'.")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InputFormatError(f"'keys.{name}' must be an integer, got {value!r}")
    return value


def parse_document(
    data: Any,
    name: str = "<memory>",
    decoder: ShareDecoder | None = None,
) -> ShareDocument:
    """Validate the keys section of a loaded document and decode its shares.

    Raises:
        InputFormatError: The document is not an object, or its keys
            section is missing or lacks integer n and k.
        ShareError: Only in strict decoding mode.
    """
    if not isinstance(data, Mapping):
        raise InputFormatError("Document must be a JSON object.")
    keys = data.get("keys")
    if not isinstance(keys, Mapping):
        raise InputFormatError("JSON must contain a 'keys' object with 'n' and 'k'.")

    n = _read_key(keys, "n")
    k = _read_key(keys, "k")
    if n < 0:
        raise InputFormatError(f"'keys.n' must be >= 0, got {to_text(n)}")

    decoder = decoder or ShareDecoder()
    decoded = decoder.decode(data, n)
    if decoded.diagnostics:
        logger.info(
            "%s: %d of %d shares skipped", name, len(decoded.diagnostics), n
        )
    return ShareDocument(name=name, n=n, k=k, decoded=decoded)


def _reject_repeated_shares(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    """object_pairs_hook: a share index given twice is a repeated abscissa."""
    obj: dict[str, Any] = {}
    for key, value in pairs:
        if key in obj and _INDEX_PATTERN.fullmatch(key):
            raise DuplicateAbscissaError(int(key))
        obj[key] = value
    return obj


def load_document(
    path: str | Path,
    decoder: ShareDecoder | None = None,
) -> ShareDocument:
    """Read and decode a JSON share document from disk.

    Raises:
        InputFormatError: The file cannot be read, is not UTF-8 or valid
            JSON, or its keys section is malformed.
        DuplicateAbscissaError: The same share index appears twice.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputFormatError(f"Error reading JSON file {path}: {exc}") from exc
    try:
        with unbounded_digits():
            data = json.loads(text, object_pairs_hook=_reject_repeated_shares)
    except json.JSONDecodeError as exc:
        raise InputFormatError(f"Error parsing JSON file {path}: {exc}") from exc
    return parse_document(data, name=path.stem, decoder=decoder)

"""Text conversion for integers of any size.

CPython refuses int/str conversions beyond 4300 digits in non power-of-two
bases unless the limit is lifted. Share values and secrets are unbounded.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager


@contextmanager
def unbounded_digits() -> Iterator[None]:
    """Lift the interpreter's int/str digit limit for the enclosed block."""
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(0)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)


def to_text(value: object) -> str:
    """str() that also works for integers (and fractions) past the digit limit."""
    with unbounded_digits():
        return str(value)

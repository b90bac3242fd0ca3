from __future__ import annotations
from numbers import Integral

import numpy as np

from ..errors import InvalidBase, RangeOverflow

INT64_MAX = int(np.iinfo(np.int64).max)


def _as_int(value, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{what} must be an integer (got {value!r})")
    return int(value)


def check_base(base, limit: int = INT64_MAX) -> int:
    """Return ``base`` as an int, raising ``InvalidBase`` unless 2 <= base <= limit."""
    if isinstance(base, bool) or not isinstance(base, Integral):
        raise InvalidBase(base, "base must be an integer")
    b = int(base)
    if b < 2:
        raise InvalidBase(base)
    if b > limit:
        raise InvalidBase(base, f"base must be <= {limit} for this digit dtype")
    return b


def check_index(index, what: str = "index", limit: int = INT64_MAX) -> int:
    """Return a non-negative ``index`` that fits below ``limit``."""
    i = _as_int(index, what)
    if i < 0:
        raise ValueError(f"{what} must be >= 0 (got {i})")
    if i > limit:
        raise RangeOverflow(f"{what} {i} exceeds the index range (max {limit})")
    return i


def fill_digits(digits: np.ndarray, position: int, base: int) -> None:
    """Write the base-``base`` digits of ``position`` into ``digits``, LSD first.

    Unused high digits are zeroed. ``position`` must be below
    ``base ** len(digits)``.
    """
    digits[:] = 0
    i = 0
    while position:
        position, digits[i] = divmod(position, base)
        i += 1


def digits_to_position(digits: np.ndarray, base: int) -> int:
    """Inverse of :func:`fill_digits`, computed with exact Python ints."""
    pos = 0
    for digit in reversed(digits.tolist()):
        pos = pos * base + digit
    return pos


__all__ = [
    "check_base",
    "check_index",
    "fill_digits",
    "digits_to_position",
    "INT64_MAX",
]

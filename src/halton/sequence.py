from __future__ import annotations
from typing import Optional

import numpy as np

from .errors import RangeOverflow
from .params import DEFAULT_PARAMS, SequenceParams
from .utils import odometer
from .utils.helpers import check_base, check_index, digits_to_position, fill_digits

# Below this offset ``advance_by`` steps one value at a time; above it the
# digits are rebuilt directly.
SKIP_THRESHOLD = 32


class Sequence:
    """Incremental Halton sequence generator for one base.

    The current position is held as a fixed-length array of base-b digits
    (least significant first) together with a cache of partial fractional
    sums, so producing the next value is O(1) amortised and jumping to an
    arbitrary position is O(depth).

    The generator starts at position 0; the first call to :meth:`step`
    returns the value at index 1. Once all ``depth`` digits are at
    ``base - 1`` the sequence is exhausted and :meth:`step` returns ``None``
    forever.

    Parameters
    ----------
    base : int
        Radix of the sequence, ``>= 2``.
    params : SequenceParams, optional
        Digit depth and numeric widths. Defaults to ``DEFAULT_PARAMS``.
    """

    def __init__(self, base: int, params: Optional[SequenceParams] = None):
        self.params = (params or DEFAULT_PARAMS).validate()
        self.base = check_base(base, self.params.digit_limit)
        self._last = self.base ** self.params.depth - 1
        self._digits = np.zeros(self.params.depth, dtype=self.params.digit_dtype)
        self._sums = np.zeros(self.params.depth, dtype=self.params.value_dtype)

    @classmethod
    def skip(cls, base: int, n: int, params: Optional[SequenceParams] = None) -> "Sequence":
        """Create a generator already positioned at ``n``.

        Equivalent to ``Sequence(base)`` followed by ``reposition(n)``: the
        first :meth:`step` returns the value at index ``n + 1``.
        """
        seq = cls(base, params)
        seq._seek(seq._checked_target(0, n))
        return seq

    # ------------------------------------------------------------------
    # Position bookkeeping
    # ------------------------------------------------------------------
    @property
    def depth(self) -> int:
        return self.params.depth

    @property
    def position(self) -> int:
        """Halton index of the most recently produced value (0 before any)."""
        return digits_to_position(self._digits, self.base)

    @property
    def max_position(self) -> int:
        """Last representable position, ``base**depth - 1``.

        Raises ``RangeOverflow`` when it does not fit the index dtype.
        """
        limit = self.params.index_limit
        if self._last > limit:
            raise RangeOverflow(
                f"base {self.base} with depth {self.depth} spans {self._last} positions, "
                f"more than {self.params.index_dtype} can hold (max {limit})"
            )
        return self._last

    @property
    def exhausted(self) -> bool:
        return bool(np.all(self._digits == self.base - 1))

    def remaining(self) -> int:
        """Number of values still to be produced before exhaustion."""
        return self.max_position - self.position

    def __length_hint__(self) -> int:
        return self.remaining()

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------
    def step(self) -> Optional[float]:
        """Return the next value, or ``None`` once the sequence is exhausted."""
        ok, value = odometer.step(self._digits, self._sums, self.base)
        return value if ok else None

    def __iter__(self) -> "Sequence":
        return self

    def __next__(self) -> float:
        value = self.step()
        if value is None:
            raise StopIteration
        return value

    def take(self, count: int) -> np.ndarray:
        """Return up to ``count`` successive values as an array.

        The array is shorter than ``count`` only if the sequence runs out.
        """
        count = check_index(count, "count")
        out = np.empty(count, dtype=self.params.value_dtype)
        produced = odometer.take(self._digits, self._sums, self.base, out)
        return out[:produced]

    # ------------------------------------------------------------------
    # Repositioning
    # ------------------------------------------------------------------
    def _checked_target(self, start: int, n: int) -> int:
        n = check_index(n, "offset", limit=self.params.index_limit)
        target = start + n
        limit = self.params.index_limit
        if target > limit:
            raise RangeOverflow(
                f"position {start} + {n} exceeds {self.params.index_dtype} (max {limit})"
            )
        if target > self._last:
            raise RangeOverflow(
                f"position {start} + {n} is past the last position {self._last} "
                f"for base {self.base} and depth {self.depth}"
            )
        return target

    def _seek(self, target: int) -> None:
        fill_digits(self._digits, target, self.base)
        odometer.rebuild_sums(self._digits, self._sums, self.base)

    def reposition(self, n: int) -> None:
        """Skip ``n`` values in O(depth).

        The next :meth:`step` returns the value at ``position + n + 1``.
        Raises ``RangeOverflow`` without changing state if the target lies
        past the last position or outside the index dtype.
        """
        self._seek(self._checked_target(self.position, n))

    def advance_by(self, n: int) -> None:
        """Skip ``n`` values, stepping for short skips and seeking otherwise."""
        start = self.position
        target = self._checked_target(start, n)
        if target - start < SKIP_THRESHOLD:
            for _ in range(target - start):
                odometer.step(self._digits, self._sums, self.base)
        else:
            self._seek(target)

    # ------------------------------------------------------------------
    # Copying
    # ------------------------------------------------------------------
    def copy(self) -> "Sequence":
        """Independent clone with its own digit and sum arrays."""
        clone = self.__class__.__new__(self.__class__)
        clone.params = self.params
        clone.base = self.base
        clone._last = self._last
        clone._digits = self._digits.copy()
        clone._sums = self._sums.copy()
        return clone

    __copy__ = copy

    def __deepcopy__(self, memo) -> "Sequence":
        return self.copy()

    def __repr__(self) -> str:
        return f"Sequence(base={self.base}, depth={self.depth}, position={self.position})"


__all__ = ["Sequence", "SKIP_THRESHOLD"]

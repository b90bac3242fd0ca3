from __future__ import annotations

import numpy as np

from .errors import RangeOverflow
from .utils.halton import _radical_inverse, radical_inverse_many
from .utils.helpers import INT64_MAX, check_base, check_index


def number(base: int, index: int) -> float:
    """Return the ``index``-th Halton number in ``base``.

    The digits of ``index`` written in ``base`` are mirrored around the radix
    point, so the result lies strictly inside (0, 1) for ``index >= 1`` and is
    exactly 0.0 for ``index == 0``.

    Parameters
    ----------
    base : int
        Radix, ``>= 2``. Anything smaller raises ``InvalidBase``.
    index : int
        Non-negative 1-based Halton index. Values beyond the signed 64-bit
        range raise ``RangeOverflow``.
    """
    b = check_base(base)
    i = check_index(index)
    return _radical_inverse(i, b)


def numbers(base: int, indices) -> np.ndarray:
    """Vectorised :func:`number` over an integer array of indices.

    Returns a float64 array with the same shape as ``indices``.
    """
    b = check_base(base)
    idx = np.asarray(indices)
    if idx.size and not np.issubdtype(idx.dtype, np.integer):
        raise TypeError(f"indices must be integers (got dtype {idx.dtype})")
    if idx.size == 0:
        return np.zeros(idx.shape, np.float64)
    if int(idx.min()) < 0:
        raise ValueError("indices must be >= 0")
    if int(idx.max()) > INT64_MAX:
        raise RangeOverflow(f"index {int(idx.max())} exceeds the index range (max {INT64_MAX})")
    flat = np.ascontiguousarray(idx.ravel(), dtype=np.int64)
    return radical_inverse_many(flat, b).reshape(idx.shape)


__all__ = ["number", "numbers"]

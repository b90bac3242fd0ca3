from __future__ import annotations
from typing import Optional, Sequence as Seq, Tuple

import numpy as np

from .params import SequenceParams
from .sequence import Sequence
from .utils.halton import jitter_grid_kernel
from .utils.helpers import check_base, check_index


def points(
    bases: Seq[int],
    count: int,
    skip: int = 0,
    params: Optional[SequenceParams] = None,
) -> np.ndarray:
    """Multi-dimensional Halton points, one base per column.

    Parameters
    ----------
    bases : sequence of int
        One base per dimension, typically distinct primes such as (2, 3).
    count : int
        Number of points requested.
    skip : int, optional
        Number of leading indices to drop in every dimension.
    params : SequenceParams, optional
        Layout of the per-dimension generators.

    Returns
    -------
    np.ndarray
        Array of shape ``(n, len(bases))`` with ``n <= count``; ``n`` is
        smaller only when some dimension runs out of positions.
    """
    if len(bases) == 0:
        raise ValueError("bases must not be empty")
    count = check_index(count, "count")
    columns = [Sequence.skip(b, skip, params).take(count) for b in bases]
    n = min(c.shape[0] for c in columns)
    return np.stack([c[:n] for c in columns], axis=1)


def jitter_grid(samples: int, bases: Tuple[int, int] = (2, 3)) -> Tuple[np.ndarray, np.ndarray]:
    """Stratified Halton jitter grid with ``samples * samples`` cells.

    Returns float32 arrays ``(u, v)`` in [0, 1); cell ``c = i * samples + j``
    holds one point inside ``[i/g, (i+1)/g) x [j/g, (j+1)/g)``.
    """
    g = check_index(samples, "samples")
    if g < 1:
        raise ValueError(f"samples must be >= 1 (got {samples!r})")
    if len(bases) != 2:
        raise ValueError(f"bases must hold exactly two entries (got {bases!r})")
    bu, bv = (check_base(b) for b in bases)
    return jitter_grid_kernel(g, bu, bv)


__all__ = ["points", "jitter_grid"]

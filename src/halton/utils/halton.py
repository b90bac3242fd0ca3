from __future__ import annotations
import numpy as np
import numba as nb


@nb.njit(inline="always", cache=True)
def _radical_inverse(i: int, base: int) -> float:
    """Return the i-th value of a 1-D Halton sequence in the given base."""
    f = 1.0
    r = 0.0
    while i:
        f /= base
        r += f * (i % base)
        i //= base
    return r


@nb.njit(cache=True)
def radical_inverse_many(indices, base: int):
    """Radical inverse of every entry of a 1-D int64 array."""
    n = indices.shape[0]
    out = np.empty(n, np.float64)
    for k in range(n):
        out[k] = _radical_inverse(indices[k], base)
    return out


@nb.njit(cache=True)
def jitter_grid_kernel(samples: int, base_u: int, base_v: int):
    """Stratified 2-D Halton jitter grid of size samples * samples.

    Cell ``c = i * samples + j`` is jittered inside its stratum by the
    ``c + 1``-th Halton pair, so every cell holds exactly one point.
    """
    g = samples
    cells = g * g
    u = np.empty(cells, np.float32)
    v = np.empty(cells, np.float32)
    for c in range(cells):
        i = c // g
        j = c - i * g
        u[c] = (_radical_inverse(c + 1, base_u) + i) / g
        v[c] = (_radical_inverse(c + 1, base_v) + j) / g
    return u, v


__all__ = ["radical_inverse_many", "jitter_grid_kernel"]

#!/usr/bin/env python3
"""
bench_sequence

Times direct radical-inverse evaluation against incremental stepping for
bases 2 and 17, both per call and for one million values in bulk.
"""
import sys
import time
from pathlib import Path

import numpy as np

N = 1_000_000
PER_CALL = 100_000
BASES = (2, 17)


def ensure_repo_on_path():
    here = Path(__file__).resolve().parent
    src = here.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


def _log(msg: str) -> None:
    print(msg, flush=True)


def _timed(fn):
    t0 = time.perf_counter()
    res = fn()
    return res, time.perf_counter() - t0


def main():
    ensure_repo_on_path()
    from halton import Sequence, number, numbers

    # trigger numba compilation before timing
    number(2, 1)
    numbers(2, np.arange(2))
    Sequence(2).step()
    Sequence(2).take(2)

    for base in BASES:
        _, dt = _timed(lambda: [number(base, i) for i in range(PER_CALL)])
        _log(f"number     base {base:2d}: {dt / PER_CALL * 1e9:8.1f} ns/call")

        seq = Sequence(base)
        _, dt = _timed(lambda: [seq.step() for _ in range(PER_CALL)])
        _log(f"step       base {base:2d}: {dt / PER_CALL * 1e9:8.1f} ns/call")

        direct, dt = _timed(lambda: numbers(base, np.arange(1, N + 1)))
        _log(f"numbers    base {base:2d}: {dt * 1e3:8.2f} ms for {N:,d}")

        bulk, dt = _timed(lambda: Sequence(base).take(N))
        _log(f"take       base {base:2d}: {dt * 1e3:8.2f} ms for {N:,d}")
        _log(f"max |numbers - take|: {np.max(np.abs(direct - bulk)):.3e}")


if __name__ == "__main__":
    main()

from __future__ import annotations
import numba as nb

# Kernels over the (digits, sums) state of a Sequence.
#   digits[i] : i-th base-b digit of the position, least significant first
#   sums[i]   : fractional contribution of the digits above i, so that
#               sums[i - 1] == (digits[i] + sums[i]) / base
# The value at the current position is (digits[0] + sums[0]) / base.


@nb.njit(cache=True)
def step(digits, sums, base: int):
    """Advance the odometer by one and return ``(ok, value)``.

    ``ok`` is False when every digit already sits at ``base - 1``; the state is
    left untouched in that case so exhaustion is stable.
    """
    top = base - 1
    if digits[0] < top:
        digits[0] += 1
        return True, (digits[0] + sums[0]) / base

    depth = digits.shape[0]
    l = 1
    while l < depth and digits[l] == top:
        l += 1
    if l == depth:
        return False, 0.0

    for i in range(l):
        digits[i] = 0
    digits[l] += 1

    # only sums below the carry level depend on the changed digits
    sums[l - 1] = (digits[l] + sums[l]) / base
    for i in range(l - 1, 0, -1):
        sums[i - 1] = sums[i] / base
    return True, sums[0] / base


@nb.njit(cache=True)
def rebuild_sums(digits, sums, base: int) -> None:
    """Recompute the whole partial-sum cache from the digits (O(depth))."""
    depth = digits.shape[0]
    sums[depth - 1] = 0.0
    for i in range(depth - 1, 0, -1):
        sums[i - 1] = (digits[i] + sums[i]) / base


@nb.njit(cache=True)
def take(digits, sums, base: int, out) -> int:
    """Fill ``out`` with successive values; return how many were produced."""
    n = out.shape[0]
    for k in range(n):
        ok, value = step(digits, sums, base)
        if not ok:
            return k
        out[k] = value
    return n


__all__ = ["step", "rebuild_sums", "take"]

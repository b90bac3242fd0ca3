from __future__ import annotations

"""Numeric kernels and argument helpers.

Compiled kernels live in ``halton`` (radical inverse, jitter grid) and
``odometer`` (digit/partial-sum stepping). They do no argument checking;
validation happens in :mod:`halton.utils.helpers` at the public entry points.
"""

from .halton import radical_inverse_many, jitter_grid_kernel  # noqa: F401
from .helpers import check_base, check_index  # noqa: F401

__all__ = [
    "radical_inverse_many",
    "jitter_grid_kernel",
    "check_base",
    "check_index",
]

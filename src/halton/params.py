from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

import numpy as np

_INDEX_DTYPES = ("uint8", "uint16", "uint32", "uint64", "int32", "int64")
_DIGIT_DTYPES = ("uint8", "uint16", "uint32")
_VALUE_DTYPES = ("float32", "float64")


@dataclass(frozen=True)
class SequenceParams:
    """Storage layout of a :class:`~halton.sequence.Sequence`.

    Parameters
    ----------
    depth : int
        Maximum number of base-b digits tracked (D). The last representable
        position is ``base**depth - 1``.
    index_dtype : {"uint64","uint32","uint16","uint8","int64","int32"}
        Integer width positions must fit in. ``remaining()`` and repositioning
        raise ``RangeOverflow`` instead of wrapping past it.
    digit_dtype : {"uint16","uint8","uint32"}
        Storage for the digit array. Bounds the largest usable base.
    value_dtype : {"float64","float32"}
        Precision of the partial-sum cache and of the emitted values.
    """
    depth: int = 20
    index_dtype: str = "uint64"
    digit_dtype: str = "uint16"
    value_dtype: str = "float64"

    def validate(self) -> "SequenceParams":
        if not isinstance(self.depth, (int, np.integer)) or isinstance(self.depth, bool):
            raise TypeError(f"depth must be an integer (got {self.depth!r})")
        if self.depth < 1:
            raise ValueError(f"depth must be >= 1 (got {self.depth!r})")
        if self.index_dtype not in _INDEX_DTYPES:
            raise ValueError(f"index_dtype must be one of {_INDEX_DTYPES} (got {self.index_dtype!r})")
        if self.digit_dtype not in _DIGIT_DTYPES:
            raise ValueError(f"digit_dtype must be one of {_DIGIT_DTYPES} (got {self.digit_dtype!r})")
        if self.value_dtype not in _VALUE_DTYPES:
            raise ValueError(f"value_dtype must be one of {_VALUE_DTYPES} (got {self.value_dtype!r})")
        return self

    @property
    def index_limit(self) -> int:
        """Largest position the index dtype can hold."""
        return int(np.iinfo(self.index_dtype).max)

    @property
    def digit_limit(self) -> int:
        """Largest base whose digits fit in the digit dtype."""
        return int(np.iinfo(self.digit_dtype).max)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_PARAMS = SequenceParams()


__all__ = ["SequenceParams", "DEFAULT_PARAMS"]

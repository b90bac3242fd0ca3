from .main import number, numbers
from .sequence import Sequence, SKIP_THRESHOLD
from .api import points, jitter_grid
from .params import SequenceParams, DEFAULT_PARAMS
from .errors import HaltonError, InvalidBase, RangeOverflow

__all__ = [
    "number",
    "numbers",
    "Sequence",
    "SKIP_THRESHOLD",
    "points",
    "jitter_grid",
    "SequenceParams",
    "DEFAULT_PARAMS",
    "HaltonError",
    "InvalidBase",
    "RangeOverflow",
]

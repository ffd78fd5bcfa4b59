from ._common import is_nan, nan_series, true_range_at
from .cycle import HT_PERIOD_LOOKBACK, HT_PHASE_LOOKBACK, MAMA_LOOKBACK
from .math_ops import BINARY_UFUNCS, UNARY_UFUNCS, binary_f64, unary_f64
from .overlap import ma_f64, ma_lookback
from .pattern import PATTERN_LOOKBACKS

__all__ = [
    "BINARY_UFUNCS",
    "HT_PERIOD_LOOKBACK",
    "HT_PHASE_LOOKBACK",
    "MAMA_LOOKBACK",
    "PATTERN_LOOKBACKS",
    "UNARY_UFUNCS",
    "binary_f64",
    "is_nan",
    "ma_f64",
    "ma_lookback",
    "nan_series",
    "true_range_at",
    "unary_f64",
]

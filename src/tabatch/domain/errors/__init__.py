from .compute_budget_exceeded import ComputeBudgetExceeded
from .computation_error import ComputationError
from .indicator_argument_error import IndicatorArgumentError
from .insufficient_data import InsufficientData
from .missing_input_series_error import MissingInputSeriesError
from .unknown_indicator_error import UnknownIndicatorError

__all__ = [
    "ComputationError",
    "ComputeBudgetExceeded",
    "IndicatorArgumentError",
    "InsufficientData",
    "MissingInputSeriesError",
    "UnknownIndicatorError",
]

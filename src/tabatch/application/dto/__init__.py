from .indicator_result import IndicatorResult, ResultMeta
from .kernel_descriptor import KernelDescriptor
from .kernel_report import KernelReport
from .output_window import OutputWindow
from .parameter_set import ParameterSet
from .price_bars import PriceBars

__all__ = [
    "IndicatorResult",
    "KernelDescriptor",
    "KernelReport",
    "OutputWindow",
    "ParameterSet",
    "PriceBars",
    "ResultMeta",
]

from .dto import (
    IndicatorResult,
    KernelDescriptor,
    KernelReport,
    OutputWindow,
    ParameterSet,
    PriceBars,
    ResultMeta,
)
from .ports import IndicatorCatalog, IndicatorKernel
from .services import InvocationHarness

__all__ = [
    "IndicatorCatalog",
    "IndicatorKernel",
    "IndicatorResult",
    "InvocationHarness",
    "KernelDescriptor",
    "KernelReport",
    "OutputWindow",
    "ParameterSet",
    "PriceBars",
    "ResultMeta",
]

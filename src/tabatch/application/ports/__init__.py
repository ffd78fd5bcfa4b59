from .compute import IndicatorKernel
from .registry import IndicatorCatalog

__all__ = ["IndicatorCatalog", "IndicatorKernel"]

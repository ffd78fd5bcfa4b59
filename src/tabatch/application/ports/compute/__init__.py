from .indicator_kernel import IndicatorKernel

__all__ = ["IndicatorKernel"]

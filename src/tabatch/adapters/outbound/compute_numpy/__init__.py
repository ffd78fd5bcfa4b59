"""
Numpy oracle adapters for kernel validation.

Related: tabatch.adapters.outbound.compute_numba.kernels
"""

from .momentum import compute_momentum_f64, is_supported_momentum_indicator
from .overlap import compute_ma_f64, is_supported_ma_indicator

__all__ = [
    "compute_ma_f64",
    "compute_momentum_f64",
    "is_supported_ma_indicator",
    "is_supported_momentum_indicator",
]

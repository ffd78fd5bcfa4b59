"""
Numba kernels for bar-level price transforms.

Related: tabatch.domain.definitions.price_transform
"""

from __future__ import annotations

import numba as nb
import numpy as np


@nb.njit(cache=True)
def avg_price_f64(
    open_: np.ndarray,
    high: np.ndarray,
    low: np.ndarray,
    close: np.ndarray,
) -> np.ndarray:
    return (open_ + high + low + close) / 4.0


@nb.njit(cache=True)
def med_price_f64(high: np.ndarray, low: np.ndarray) -> np.ndarray:
    return (high + low) / 2.0


@nb.njit(cache=True)
def typ_price_f64(high: np.ndarray, low: np.ndarray, close: np.ndarray) -> np.ndarray:
    return (high + low + close) / 3.0


@nb.njit(cache=True)
def wcl_price_f64(high: np.ndarray, low: np.ndarray, close: np.ndarray) -> np.ndarray:
    return (high + low + 2.0 * close) / 4.0

"""
Numba kernels for true range and average true range.

Related: tabatch.adapters.outbound.compute_numba.kernels._common
"""

from __future__ import annotations

import numba as nb
import numpy as np

from ._common import nan_series, true_range_at


@nb.njit(cache=True)
def true_range_f64(high: np.ndarray, low: np.ndarray, close: np.ndarray) -> np.ndarray:
    size = close.shape[0]
    out = nan_series(size)
    for index in range(1, size):
        out[index] = true_range_at(high, low, close, index)
    return out


@nb.njit(cache=True)
def atr_f64(high: np.ndarray, low: np.ndarray, close: np.ndarray, period: int) -> np.ndarray:
    """
    Compute Wilder's average true range.

    Args:
        high: High series.
        low: Low series.
        close: Close series.
        period: Wilder smoothing period.
    Returns:
        np.ndarray: ATR, NaN before `period`.
    Assumptions:
        The first value is the mean true range of bars `1..period`.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    size = close.shape[0]
    out = nan_series(size)
    if period >= size:
        return out

    total = 0.0
    for index in range(1, period + 1):
        total += true_range_at(high, low, close, index)
    previous = total / period
    out[period] = previous
    for index in range(period + 1, size):
        previous = (previous * (period - 1) + true_range_at(high, low, close, index)) / period
        out[index] = previous
    return out


@nb.njit(cache=True)
def natr_f64(high: np.ndarray, low: np.ndarray, close: np.ndarray, period: int) -> np.ndarray:
    size = close.shape[0]
    out = atr_f64(high, low, close, period)
    for index in range(period, size):
        if close[index] != 0.0:
            out[index] = 100.0 * out[index] / close[index]
        else:
            out[index] = 0.0
    return out

"""
Numba kernels for accumulation/distribution and on-balance volume.

Related: tabatch.adapters.outbound.compute_numba.kernel_table
"""

from __future__ import annotations

import numba as nb
import numpy as np

from ._common import ema_alpha, nan_series


@nb.njit(cache=True)
def ad_f64(high: np.ndarray, low: np.ndarray, close: np.ndarray, volume: np.ndarray) -> np.ndarray:
    """
    Compute the Chaikin accumulation/distribution line.

    Args:
        high: High series.
        low: Low series.
        close: Close series.
        volume: Volume series.
    Returns:
        np.ndarray: Cumulative money-flow volume, valid from index 0.
    Assumptions:
        Bars with zero range contribute nothing.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    size = close.shape[0]
    out = np.empty(size, dtype=np.float64)
    total = 0.0
    for index in range(size):
        spread = high[index] - low[index]
        if spread > 0.0:
            location = ((close[index] - low[index]) - (high[index] - close[index])) / spread
            total += location * volume[index]
        out[index] = total
    return out


@nb.njit(cache=True)
def ad_osc_f64(
    high: np.ndarray,
    low: np.ndarray,
    close: np.ndarray,
    volume: np.ndarray,
    fast_period: int,
    slow_period: int,
) -> np.ndarray:
    size = close.shape[0]
    out = nan_series(size)
    line = ad_f64(high, low, close, volume)
    if size == 0:
        return out

    fast_alpha = ema_alpha(fast_period)
    slow_alpha = ema_alpha(slow_period)
    start = max(fast_period, slow_period) - 1
    fast = line[0]
    slow = line[0]
    for index in range(1, size):
        fast = fast + fast_alpha * (line[index] - fast)
        slow = slow + slow_alpha * (line[index] - slow)
        if index >= start:
            out[index] = fast - slow
    return out


@nb.njit(cache=True)
def obv_f64(source: np.ndarray, volume: np.ndarray) -> np.ndarray:
    size = source.shape[0]
    out = np.empty(size, dtype=np.float64)
    if size == 0:
        return out

    total = volume[0]
    out[0] = total
    for index in range(1, size):
        if source[index] > source[index - 1]:
            total += volume[index]
        elif source[index] < source[index - 1]:
            total -= volume[index]
        out[index] = total
    return out

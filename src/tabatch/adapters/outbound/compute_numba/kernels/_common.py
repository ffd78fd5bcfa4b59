"""
Common Numba helpers shared by indicator kernels.

Related: tabatch.adapters.outbound.compute_numba.kernel_table,
  tabatch.adapters.outbound.compute_numba.warmup
"""

from __future__ import annotations

import math

import numba as nb
import numpy as np

RAD_TO_DEG = 180.0 / math.pi
DEG_TO_RAD = math.pi / 180.0


@nb.njit(cache=True)
def is_nan(value: float) -> bool:
    """
    Return whether the provided scalar is NaN.

    Args:
        value: Floating-point scalar.
    Returns:
        bool: True when value is NaN.
    Assumptions:
        The caller passes numeric values compatible with `math.isnan`.
    Raises:
        None.
    Side Effects:
        None.
    """
    return math.isnan(value)


@nb.njit(cache=True)
def nan_series(size: int) -> np.ndarray:
    """
    Allocate a float64 series filled with NaN.

    Args:
        size: Series length.
    Returns:
        np.ndarray: One-dimensional float64 array of NaN.
    Assumptions:
        `size` is non-negative.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    out = np.empty(size, dtype=np.float64)
    for index in range(size):
        out[index] = np.nan
    return out


@nb.njit(cache=True)
def ema_alpha(period: int) -> float:
    return 2.0 / (float(period) + 1.0)


@nb.njit(cache=True)
def window_max(source: np.ndarray, start: int, end: int) -> float:
    """
    Return the maximum of `source[start:end + 1]`.

    Args:
        source: One-dimensional float64 series.
        start: First index of the window, inclusive.
        end: Last index of the window, inclusive.
    Returns:
        float: Window maximum.
    Assumptions:
        `0 <= start <= end < len(source)`.
    Raises:
        None.
    Side Effects:
        None.
    """
    highest = source[start]
    for index in range(start + 1, end + 1):
        if source[index] > highest:
            highest = source[index]
    return highest


@nb.njit(cache=True)
def window_min(source: np.ndarray, start: int, end: int) -> float:
    lowest = source[start]
    for index in range(start + 1, end + 1):
        if source[index] < lowest:
            lowest = source[index]
    return lowest


@nb.njit(cache=True)
def true_range_at(high: np.ndarray, low: np.ndarray, close: np.ndarray, index: int) -> float:
    """
    Return the true range of bar `index` against the previous close.

    Args:
        high: High series.
        low: Low series.
        close: Close series.
        index: Bar index, at least 1.
    Returns:
        float: `max(high, prev_close) - min(low, prev_close)`.
    Assumptions:
        `index >= 1`.
    Raises:
        None.
    Side Effects:
        None.
    """
    previous_close = close[index - 1]
    upper = high[index]
    lower = low[index]
    if previous_close > upper:
        upper = previous_close
    if previous_close < lower:
        lower = previous_close
    return upper - lower


@nb.njit(cache=True)
def copy_tail(source: np.ndarray, first: int) -> np.ndarray:
    out = nan_series(source.shape[0])
    for index in range(first, source.shape[0]):
        out[index] = source[index]
    return out

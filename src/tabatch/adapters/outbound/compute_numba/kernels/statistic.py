"""
Numba kernels for rolling regression, correlation and dispersion.

Related: tabatch.domain.definitions.statistic,
  tabatch.adapters.outbound.compute_numba.kernel_table
"""

from __future__ import annotations

import math

import numba as nb
import numpy as np

from ._common import RAD_TO_DEG, nan_series

LINREG_VALUE = 0
LINREG_SLOPE = 1
LINREG_INTERCEPT = 2
LINREG_ANGLE = 3
LINREG_FORECAST = 4


@nb.njit(cache=True)
def linear_reg_f64(source: np.ndarray, period: int, mode: int) -> np.ndarray:
    """
    Fit a least-squares line to each trailing window and project one statistic.

    Args:
        source: One-dimensional float64 series.
        period: Window length.
        mode: One of `LINREG_*` selecting value, slope, intercept, angle or forecast.
    Returns:
        np.ndarray: Selected statistic, NaN before `period - 1`.
    Assumptions:
        The oldest sample of each window sits at x=0 and the newest at x=period-1.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    size = source.shape[0]
    out = nan_series(size)
    sum_x = period * (period - 1) * 0.5
    sum_x_sq = period * (period - 1) * (2 * period - 1) / 6.0
    divisor = period * sum_x_sq - sum_x * sum_x

    for index in range(period - 1, size):
        sum_y = 0.0
        sum_xy = 0.0
        start = index - period + 1
        for offset in range(period):
            value = source[start + offset]
            sum_y += value
            sum_xy += offset * value
        if divisor != 0.0:
            slope = (period * sum_xy - sum_x * sum_y) / divisor
        else:
            slope = 0.0
        intercept = (sum_y - slope * sum_x) / period

        if mode == LINREG_SLOPE:
            out[index] = slope
        elif mode == LINREG_INTERCEPT:
            out[index] = intercept
        elif mode == LINREG_ANGLE:
            out[index] = math.atan(slope) * RAD_TO_DEG
        elif mode == LINREG_FORECAST:
            out[index] = intercept + slope * period
        else:
            out[index] = intercept + slope * (period - 1)
    return out


@nb.njit(cache=True)
def variance_f64(source: np.ndarray, period: int) -> np.ndarray:
    size = source.shape[0]
    out = nan_series(size)
    for index in range(period - 1, size):
        mean = 0.0
        for offset in range(index - period + 1, index + 1):
            mean += source[offset]
        mean = mean / period
        total = 0.0
        for offset in range(index - period + 1, index + 1):
            diff = source[offset] - mean
            total += diff * diff
        out[index] = total / period
    return out


@nb.njit(cache=True)
def std_dev_f64(source: np.ndarray, period: int, deviations: float) -> np.ndarray:
    size = source.shape[0]
    out = variance_f64(source, period)
    for index in range(period - 1, size):
        out[index] = math.sqrt(out[index]) * deviations
    return out


@nb.njit(cache=True)
def correl_f64(first: np.ndarray, second: np.ndarray, period: int) -> np.ndarray:
    """
    Compute rolling Pearson correlation of two series.

    Args:
        first: First series.
        second: Second series.
        period: Window length.
    Returns:
        np.ndarray: Correlation in `[-1, 1]`, NaN before `period - 1`.
    Assumptions:
        Windows where either series is flat report 0.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    size = first.shape[0]
    out = nan_series(size)
    for index in range(period - 1, size):
        sum_x = 0.0
        sum_y = 0.0
        sum_xx = 0.0
        sum_yy = 0.0
        sum_xy = 0.0
        for offset in range(index - period + 1, index + 1):
            x = first[offset]
            y = second[offset]
            sum_x += x
            sum_y += y
            sum_xx += x * x
            sum_yy += y * y
            sum_xy += x * y
        denominator = (sum_xx - sum_x * sum_x / period) * (sum_yy - sum_y * sum_y / period)
        if denominator > 0.0:
            out[index] = (sum_xy - sum_x * sum_y / period) / math.sqrt(denominator)
        else:
            out[index] = 0.0
    return out


@nb.njit(cache=True)
def _returns(source: np.ndarray) -> np.ndarray:
    size = source.shape[0]
    out = np.zeros(size, dtype=np.float64)
    for index in range(1, size):
        previous = source[index - 1]
        if previous != 0.0:
            out[index] = (source[index] - previous) / previous
    return out


@nb.njit(cache=True)
def beta_f64(first: np.ndarray, second: np.ndarray, period: int) -> np.ndarray:
    size = first.shape[0]
    out = nan_series(size)
    x_returns = _returns(first)
    y_returns = _returns(second)
    for index in range(period, size):
        sum_x = 0.0
        sum_y = 0.0
        sum_xx = 0.0
        sum_xy = 0.0
        for offset in range(index - period + 1, index + 1):
            x = x_returns[offset]
            y = y_returns[offset]
            sum_x += x
            sum_y += y
            sum_xx += x * x
            sum_xy += x * y
        denominator = period * sum_xx - sum_x * sum_x
        if denominator != 0.0:
            out[index] = (period * sum_xy - sum_x * sum_y) / denominator
        else:
            out[index] = 0.0
    return out

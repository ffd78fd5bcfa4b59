"""
Numpy oracle implementation for moving-average kernels.

Related: tabatch.adapters.outbound.compute_numba.kernels.overlap
"""

from __future__ import annotations

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

_SUPPORTED_MA_IDS = ("sma", "ema", "wma", "dema", "tema")


def is_supported_ma_indicator(*, indicator_id: str) -> bool:
    return indicator_id.strip().lower() in _SUPPORTED_MA_IDS


def compute_ma_f64(*, indicator_id: str, source: np.ndarray, period: int) -> np.ndarray:
    """
    Compute one moving average as a full-length float64 vector.

    Args:
        indicator_id: One of `sma`, `ema`, `wma`, `dema`, `tema`.
        source: Source series vector.
        period: Window length.
    Returns:
        np.ndarray: Moving average, NaN before its lookback.
    Assumptions:
        EMA-based averages are seeded with the SMA of the first window.
    Raises:
        ValueError: If indicator id is unsupported or period is not positive.
    Side Effects:
        Allocates intermediate arrays.
    """
    normalized_id = indicator_id.strip().lower()
    if not is_supported_ma_indicator(indicator_id=normalized_id):
        raise ValueError(f"unsupported MA indicator_id: {indicator_id!r}")
    if period <= 0:
        raise ValueError(f"period must be > 0, got {period}")

    source_f64 = np.ascontiguousarray(source, dtype=np.float64)
    if normalized_id == "sma":
        return _sma(source_f64, period)
    if normalized_id == "wma":
        return _wma(source_f64, period)

    ema1 = _ema(source_f64, period)
    if normalized_id == "ema":
        return ema1
    ema2 = _ema(ema1, period)
    if normalized_id == "dema":
        return 2.0 * ema1 - ema2
    ema3 = _ema(ema2, period)
    return 3.0 * ema1 - 3.0 * ema2 + ema3


def _sma(source: np.ndarray, period: int) -> np.ndarray:
    out = np.full(source.shape[0], np.nan, dtype=np.float64)
    if period > source.shape[0]:
        return out
    out[period - 1 :] = sliding_window_view(source, period).mean(axis=1)
    return out


def _wma(source: np.ndarray, period: int) -> np.ndarray:
    out = np.full(source.shape[0], np.nan, dtype=np.float64)
    if period > source.shape[0]:
        return out
    weights = np.arange(1, period + 1, dtype=np.float64)
    out[period - 1 :] = sliding_window_view(source, period) @ weights / weights.sum()
    return out


def _ema(source: np.ndarray, period: int) -> np.ndarray:
    """
    EMA over the non-NaN tail of `source`, seeded with the SMA of its first window.
    """
    out = np.full(source.shape[0], np.nan, dtype=np.float64)
    valid = np.flatnonzero(~np.isnan(source))
    if valid.size == 0:
        return out
    first = int(valid[0])
    start = first + period - 1
    if start >= source.shape[0]:
        return out

    alpha = 2.0 / (period + 1.0)
    previous = float(np.mean(source[first : start + 1]))
    out[start] = previous
    for index in range(start + 1, source.shape[0]):
        previous = previous + alpha * (float(source[index]) - previous)
        out[index] = previous
    return out


__all__ = ["compute_ma_f64", "is_supported_ma_indicator"]

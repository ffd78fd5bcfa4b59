"""
Numpy oracle implementation for momentum kernels.

Related: tabatch.adapters.outbound.compute_numba.kernels.momentum
"""

from __future__ import annotations

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

_SUPPORTED_MOMENTUM_IDS = ("rsi", "mom", "roc", "roc_p", "roc_r", "roc_r100", "will_r")


def is_supported_momentum_indicator(*, indicator_id: str) -> bool:
    return indicator_id.strip().lower() in _SUPPORTED_MOMENTUM_IDS


def compute_momentum_f64(
    *,
    indicator_id: str,
    source: np.ndarray,
    period: int,
    high: np.ndarray | None = None,
    low: np.ndarray | None = None,
) -> np.ndarray:
    """
    Compute one momentum indicator as a full-length float64 vector.

    Args:
        indicator_id: Supported momentum identifier.
        source: Source (close) series vector.
        period: Look-back period.
        high: High series, required by `will_r`.
        low: Low series, required by `will_r`.
    Returns:
        np.ndarray: Indicator values, NaN before its lookback.
    Assumptions:
        Zero denominators yield 0, matching the numba kernels.
    Raises:
        ValueError: If indicator id is unsupported or required series are missing.
    Side Effects:
        Allocates intermediate arrays.
    """
    normalized_id = indicator_id.strip().lower()
    if not is_supported_momentum_indicator(indicator_id=normalized_id):
        raise ValueError(f"unsupported momentum indicator_id: {indicator_id!r}")

    source_f64 = np.ascontiguousarray(source, dtype=np.float64)
    if normalized_id == "rsi":
        return _rsi(source_f64, period)
    if normalized_id == "will_r":
        if high is None or low is None:
            raise ValueError("will_r requires high and low series")
        return _will_r(
            np.ascontiguousarray(high, dtype=np.float64),
            np.ascontiguousarray(low, dtype=np.float64),
            source_f64,
            period,
        )
    return _rate_of_change(normalized_id, source_f64, period)


def _rsi(source: np.ndarray, period: int) -> np.ndarray:
    out = np.full(source.shape[0], np.nan, dtype=np.float64)
    if period >= source.shape[0]:
        return out

    changes = np.diff(source)
    gains = np.where(changes > 0.0, changes, 0.0)
    losses = np.where(changes < 0.0, -changes, 0.0)
    avg_gain = float(gains[:period].mean())
    avg_loss = float(losses[:period].mean())
    for index in range(period, source.shape[0]):
        if index > period:
            avg_gain = (avg_gain * (period - 1) + gains[index - 1]) / period
            avg_loss = (avg_loss * (period - 1) + losses[index - 1]) / period
        total = avg_gain + avg_loss
        out[index] = 0.0 if total == 0.0 else 100.0 * avg_gain / total
    return out


def _rate_of_change(indicator_id: str, source: np.ndarray, period: int) -> np.ndarray:
    out = np.full(source.shape[0], np.nan, dtype=np.float64)
    if period >= source.shape[0]:
        return out

    current = source[period:]
    reference = source[:-period]
    if indicator_id == "mom":
        out[period:] = current - reference
        return out

    safe = np.where(reference == 0.0, 1.0, reference)
    if indicator_id == "roc":
        values = (current / safe - 1.0) * 100.0
    elif indicator_id == "roc_p":
        values = current / safe - 1.0
    elif indicator_id == "roc_r":
        values = current / safe
    else:
        values = current / safe * 100.0
    out[period:] = np.where(reference == 0.0, 0.0, values)
    return out


def _will_r(high: np.ndarray, low: np.ndarray, close: np.ndarray, period: int) -> np.ndarray:
    out = np.full(close.shape[0], np.nan, dtype=np.float64)
    if period > close.shape[0]:
        return out

    highest = sliding_window_view(high, period).max(axis=1)
    lowest = sliding_window_view(low, period).min(axis=1)
    spread = highest - lowest
    safe = np.where(spread == 0.0, 1.0, spread)
    values = -100.0 * (highest - close[period - 1 :]) / safe
    out[period - 1 :] = np.where(spread == 0.0, 0.0, values)
    return out


__all__ = ["compute_momentum_f64", "is_supported_momentum_indicator"]

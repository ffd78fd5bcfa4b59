"""
Candle geometry helpers and reference-size settings for pattern detectors.

Detectors receive a `(4, N)` float64 matrix with open/high/low/close rows. A candle
dimension is "long", "short", "near" and so on relative to a trailing average of a
reference range, scaled by a per-setting factor.

Related: tabatch.adapters.outbound.compute_numba.kernels.pattern
"""

from __future__ import annotations

import numba as nb
import numpy as np

OPEN = 0
HIGH = 1
LOW = 2
CLOSE = 3

RANGE_REAL_BODY = 0
RANGE_HIGH_LOW = 1
RANGE_SHADOWS = 2

BODY_LONG = 0
BODY_VERY_LONG = 1
BODY_SHORT = 2
BODY_DOJI = 3
SHADOW_LONG = 4
SHADOW_VERY_LONG = 5
SHADOW_SHORT = 6
SHADOW_VERY_SHORT = 7
NEAR = 8
FAR = 9
EQUAL = 10

# rows follow the setting constants above
SETTING_RANGE = np.array([0, 0, 0, 1, 0, 0, 2, 1, 1, 1, 1], dtype=np.int64)
SETTING_PERIOD = np.array([10, 10, 10, 10, 0, 0, 10, 10, 5, 5, 5], dtype=np.int64)
SETTING_FACTOR = np.array(
    [1.0, 3.0, 1.0, 0.1, 1.0, 2.0, 1.0, 0.1, 0.2, 0.6, 0.05], dtype=np.float64
)


@nb.njit(cache=True)
def signal_series(size: int) -> np.ndarray:
    return np.zeros(size, dtype=np.int32)


@nb.njit(cache=True)
def body(bars: np.ndarray, index: int) -> float:
    return abs(bars[CLOSE, index] - bars[OPEN, index])


@nb.njit(cache=True)
def body_top(bars: np.ndarray, index: int) -> float:
    return max(bars[OPEN, index], bars[CLOSE, index])


@nb.njit(cache=True)
def body_bottom(bars: np.ndarray, index: int) -> float:
    return min(bars[OPEN, index], bars[CLOSE, index])


@nb.njit(cache=True)
def upper_shadow(bars: np.ndarray, index: int) -> float:
    return bars[HIGH, index] - body_top(bars, index)


@nb.njit(cache=True)
def lower_shadow(bars: np.ndarray, index: int) -> float:
    return body_bottom(bars, index) - bars[LOW, index]


@nb.njit(cache=True)
def span(bars: np.ndarray, index: int) -> float:
    return bars[HIGH, index] - bars[LOW, index]


@nb.njit(cache=True)
def color(bars: np.ndarray, index: int) -> int:
    """
    Return candle color: 1 for white (close >= open), -1 for black.

    Args:
        bars: `(4, N)` OHLC matrix.
        index: Candle index.
    Returns:
        int: 1 or -1.
    Assumptions:
        None.
    Raises:
        None.
    Side Effects:
        None.
    """
    if bars[CLOSE, index] >= bars[OPEN, index]:
        return 1
    return -1


@nb.njit(cache=True)
def _reference_range(bars: np.ndarray, setting: int, index: int) -> float:
    kind = SETTING_RANGE[setting]
    if kind == RANGE_REAL_BODY:
        return body(bars, index)
    if kind == RANGE_HIGH_LOW:
        return span(bars, index)
    return upper_shadow(bars, index) + lower_shadow(bars, index)


@nb.njit(cache=True)
def average(bars: np.ndarray, setting: int, index: int) -> float:
    """
    Return the reference size of one setting for the candle at `index`.

    Args:
        bars: `(4, N)` OHLC matrix.
        setting: One of the setting constants (`BODY_LONG`, `NEAR`, ...).
        index: Candle index the reference applies to.
    Returns:
        float: `factor * mean(range over [index - period, index))`, or the candle's
            own range when the period is 0; halved for shadow ranges.
    Assumptions:
        `index >= period` of the setting.
    Raises:
        None.
    Side Effects:
        None.
    """
    period = SETTING_PERIOD[setting]
    if period > 0:
        total = 0.0
        for offset in range(index - period, index):
            total += _reference_range(bars, setting, offset)
        reference = total / period
    else:
        reference = _reference_range(bars, setting, index)
    if SETTING_RANGE[setting] == RANGE_SHADOWS:
        reference = reference / 2.0
    return SETTING_FACTOR[setting] * reference


@nb.njit(cache=True)
def body_gap_up(bars: np.ndarray, index: int, previous: int) -> bool:
    return body_bottom(bars, index) > body_top(bars, previous)


@nb.njit(cache=True)
def body_gap_down(bars: np.ndarray, index: int, previous: int) -> bool:
    return body_top(bars, index) < body_bottom(bars, previous)


@nb.njit(cache=True)
def range_gap_up(bars: np.ndarray, index: int, previous: int) -> bool:
    return bars[LOW, index] > bars[HIGH, previous]


@nb.njit(cache=True)
def range_gap_down(bars: np.ndarray, index: int, previous: int) -> bool:
    return bars[HIGH, index] < bars[LOW, previous]


@nb.njit(cache=True)
def is_marubozu(bars: np.ndarray, index: int) -> bool:
    return (
        body(bars, index) > average(bars, BODY_LONG, index)
        and upper_shadow(bars, index) < average(bars, SHADOW_VERY_SHORT, index)
        and lower_shadow(bars, index) < average(bars, SHADOW_VERY_SHORT, index)
    )


@nb.njit(cache=True)
def is_near(bars: np.ndarray, value: float, reference: float, setting: int, index: int) -> bool:
    tolerance = average(bars, setting, index)
    return reference - tolerance <= value <= reference + tolerance

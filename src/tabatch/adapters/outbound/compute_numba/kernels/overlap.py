"""
Numba kernels for overlap studies: moving-average family, bands, midpoints, SAR.

Every moving-average kernel takes a `first` index so averages can be chained over
series whose leading samples are not yet valid (DEMA over EMA, MACD signal, stochastic
%D over %K). Samples before `first` are never read.

`mavp_f64` stays in plain NumPy: it groups samples by period and reuses `ma_f64`.

Related: tabatch.adapters.outbound.compute_numba.kernels._common,
  tabatch.adapters.outbound.compute_numba.kernels.cycle,
  tabatch.adapters.outbound.compute_numpy.overlap
"""

from __future__ import annotations

import math

import numba as nb
import numpy as np

from ._common import copy_tail, ema_alpha, nan_series, window_max, window_min
from .cycle import MAMA_LOOKBACK, mama_f64

MA_SMA = 0
MA_EMA = 1
MA_WMA = 2
MA_DEMA = 3
MA_TEMA = 4
MA_TRIMA = 5
MA_KAMA = 6
MA_MAMA = 7
MA_T3 = 8

_KAMA_FAST = 2.0 / 3.0
_KAMA_SLOW = 2.0 / 31.0
_MAMA_FAST_DEFAULT = 0.5
_MAMA_SLOW_DEFAULT = 0.05
_T3_VFACTOR_DEFAULT = 0.7


@nb.njit(cache=True)
def sma_f64(source: np.ndarray, period: int, first: int) -> np.ndarray:
    """
    Compute simple moving average with a running sum.

    Args:
        source: One-dimensional float64 series.
        period: Positive window length.
        first: First index of `source` to use.
    Returns:
        np.ndarray: SMA, NaN before `first + period - 1`.
    Assumptions:
        `period >= 1`.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    size = source.shape[0]
    out = nan_series(size)
    start = first + period - 1
    if start >= size:
        return out

    total = 0.0
    for index in range(first, start + 1):
        total += source[index]
    out[start] = total / period
    for index in range(start + 1, size):
        total += source[index] - source[index - period]
        out[index] = total / period
    return out


@nb.njit(cache=True)
def ema_f64(source: np.ndarray, period: int, first: int, alpha: float) -> np.ndarray:
    """
    Compute exponential moving average seeded with the SMA of the first window.

    Args:
        source: One-dimensional float64 series.
        period: Seed window length.
        first: First index of `source` to use.
        alpha: Smoothing factor, usually `2 / (period + 1)`.
    Returns:
        np.ndarray: EMA, NaN before `first + period - 1`.
    Assumptions:
        `period >= 1` and `0 < alpha <= 1`.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    size = source.shape[0]
    out = nan_series(size)
    start = first + period - 1
    if start >= size:
        return out

    total = 0.0
    for index in range(first, start + 1):
        total += source[index]
    previous = total / period
    out[start] = previous
    for index in range(start + 1, size):
        previous = previous + alpha * (source[index] - previous)
        out[index] = previous
    return out


@nb.njit(cache=True)
def wma_f64(source: np.ndarray, period: int, first: int) -> np.ndarray:
    size = source.shape[0]
    out = nan_series(size)
    start = first + period - 1
    if start >= size:
        return out

    denominator = float(period) * (float(period) + 1.0) / 2.0
    weighted = 0.0
    total = 0.0
    for offset in range(period):
        value = source[first + offset]
        weighted += value * float(offset + 1)
        total += value
    out[start] = weighted / denominator
    for index in range(start + 1, size):
        weighted += float(period) * source[index] - total
        total += source[index] - source[index - period]
        out[index] = weighted / denominator
    return out


@nb.njit(cache=True)
def dema_f64(source: np.ndarray, period: int, first: int) -> np.ndarray:
    alpha = ema_alpha(period)
    ema1 = ema_f64(source, period, first, alpha)
    ema2 = ema_f64(ema1, period, first + period - 1, alpha)
    return 2.0 * ema1 - ema2


@nb.njit(cache=True)
def tema_f64(source: np.ndarray, period: int, first: int) -> np.ndarray:
    alpha = ema_alpha(period)
    ema1 = ema_f64(source, period, first, alpha)
    ema2 = ema_f64(ema1, period, first + period - 1, alpha)
    ema3 = ema_f64(ema2, period, first + 2 * (period - 1), alpha)
    return 3.0 * ema1 - 3.0 * ema2 + ema3


@nb.njit(cache=True)
def trima_f64(source: np.ndarray, period: int, first: int) -> np.ndarray:
    """
    Compute triangular moving average as an SMA of an SMA.

    Args:
        source: One-dimensional float64 series.
        period: Total window length.
        first: First index of `source` to use.
    Returns:
        np.ndarray: TRIMA, NaN before `first + period - 1`.
    Assumptions:
        Odd periods use two windows of `(period + 1) / 2`; even periods use
        `period / 2` then `period / 2 + 1`.
    Raises:
        None.
    Side Effects:
        Allocates working arrays.
    """
    if period % 2 == 1:
        inner = (period + 1) // 2
        outer = inner
    else:
        inner = period // 2
        outer = inner + 1
    smoothed = sma_f64(source, inner, first)
    return sma_f64(smoothed, outer, first + inner - 1)


@nb.njit(cache=True)
def kama_f64(source: np.ndarray, period: int, first: int) -> np.ndarray:
    """
    Compute Kaufman adaptive moving average.

    Args:
        source: One-dimensional float64 series.
        period: Efficiency-ratio window.
        first: First index of `source` to use.
    Returns:
        np.ndarray: KAMA, NaN before `first + period`.
    Assumptions:
        Fast and slow smoothing constants correspond to 2 and 30 bar EMAs.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    size = source.shape[0]
    out = nan_series(size)
    start = first + period
    if start >= size:
        return out

    volatility = 0.0
    for index in range(start - period + 1, start + 1):
        volatility += abs(source[index] - source[index - 1])

    previous = source[start - 1]
    for index in range(start, size):
        if index > start:
            volatility += abs(source[index] - source[index - 1])
            volatility -= abs(source[index - period] - source[index - period - 1])
        direction = abs(source[index] - source[index - period])
        if volatility <= direction or volatility == 0.0:
            ratio = 1.0
        else:
            ratio = direction / volatility
        constant = ratio * (_KAMA_FAST - _KAMA_SLOW) + _KAMA_SLOW
        constant = constant * constant
        previous = previous + constant * (source[index] - previous)
        out[index] = previous
    return out


@nb.njit(cache=True)
def t3_f64(source: np.ndarray, period: int, volume_factor: float, first: int) -> np.ndarray:
    """
    Compute Tillson T3 from six chained EMAs.

    Args:
        source: One-dimensional float64 series.
        period: EMA period of each stage.
        volume_factor: Tillson volume factor in `[0, 1]`.
        first: First index of `source` to use.
    Returns:
        np.ndarray: T3, NaN before `first + 6 * (period - 1)`.
    Assumptions:
        None.
    Raises:
        None.
    Side Effects:
        Allocates working arrays.
    """
    alpha = ema_alpha(period)
    lag = period - 1
    e1 = ema_f64(source, period, first, alpha)
    e2 = ema_f64(e1, period, first + lag, alpha)
    e3 = ema_f64(e2, period, first + 2 * lag, alpha)
    e4 = ema_f64(e3, period, first + 3 * lag, alpha)
    e5 = ema_f64(e4, period, first + 4 * lag, alpha)
    e6 = ema_f64(e5, period, first + 5 * lag, alpha)

    v = volume_factor
    v2 = v * v
    v3 = v2 * v
    c1 = -v3
    c2 = 3.0 * v2 + 3.0 * v3
    c3 = -6.0 * v2 - 3.0 * v - 3.0 * v3
    c4 = 1.0 + 3.0 * v + v3 + 3.0 * v2
    return c1 * e6 + c2 * e5 + c3 * e4 + c4 * e3


@nb.njit(cache=True)
def ma_lookback(period: int, ma_code: int) -> int:
    """
    Return lookback of one moving-average family member.

    Args:
        period: Moving-average period.
        ma_code: Integer code of the moving-average family.
    Returns:
        int: Leading samples consumed before the first output.
    Assumptions:
        Period 1 is an identity transform for every family.
    Raises:
        None.
    Side Effects:
        None.
    """
    if period == 1:
        return 0
    if ma_code == MA_DEMA:
        return 2 * (period - 1)
    if ma_code == MA_TEMA:
        return 3 * (period - 1)
    if ma_code == MA_KAMA:
        return period
    if ma_code == MA_MAMA:
        return MAMA_LOOKBACK
    if ma_code == MA_T3:
        return 6 * (period - 1)
    return period - 1


@nb.njit(cache=True)
def ma_f64(source: np.ndarray, period: int, ma_code: int, first: int) -> np.ndarray:
    """
    Dispatch one moving average by family code.

    Args:
        source: One-dimensional float64 series.
        period: Moving-average period.
        ma_code: Integer code of the moving-average family.
        first: First index of `source` to use.
    Returns:
        np.ndarray: Moving average, NaN before `first + ma_lookback(period, ma_code)`.
    Assumptions:
        MAMA ignores `period` and uses default limits; T3 uses the default volume factor.
    Raises:
        None.
    Side Effects:
        Allocates output arrays.
    """
    if period == 1:
        return copy_tail(source, first)
    if ma_code == MA_EMA:
        return ema_f64(source, period, first, ema_alpha(period))
    if ma_code == MA_WMA:
        return wma_f64(source, period, first)
    if ma_code == MA_DEMA:
        return dema_f64(source, period, first)
    if ma_code == MA_TEMA:
        return tema_f64(source, period, first)
    if ma_code == MA_TRIMA:
        return trima_f64(source, period, first)
    if ma_code == MA_KAMA:
        return kama_f64(source, period, first)
    if ma_code == MA_MAMA:
        mama, _ = mama_f64(source, _MAMA_FAST_DEFAULT, _MAMA_SLOW_DEFAULT, first)
        return mama
    if ma_code == MA_T3:
        return t3_f64(source, period, _T3_VFACTOR_DEFAULT, first)
    return sma_f64(source, period, first)


@nb.njit(cache=True)
def bbands_f64(
    source: np.ndarray,
    period: int,
    deviations_up: float,
    deviations_down: float,
    ma_code: int,
):
    """
    Compute Bollinger bands around a selectable moving average.

    Args:
        source: One-dimensional float64 series.
        period: Moving-average and standard-deviation window.
        deviations_up: Multiplier of the upper band.
        deviations_down: Multiplier of the lower band.
        ma_code: Integer code of the middle-band moving average.
    Returns:
        tuple[np.ndarray, np.ndarray, np.ndarray]: `(upper, middle, lower)`.
    Assumptions:
        Standard deviation is the population deviation of the trailing window.
    Raises:
        None.
    Side Effects:
        Allocates output arrays.
    """
    size = source.shape[0]
    upper = nan_series(size)
    middle_out = nan_series(size)
    lower = nan_series(size)
    middle = ma_f64(source, period, ma_code, 0)
    start = ma_lookback(period, ma_code)
    if period - 1 > start:
        start = period - 1

    for index in range(start, size):
        mean = 0.0
        for offset in range(index - period + 1, index + 1):
            mean += source[offset]
        mean = mean / period
        variance = 0.0
        for offset in range(index - period + 1, index + 1):
            diff = source[offset] - mean
            variance += diff * diff
        deviation = math.sqrt(variance / period)
        middle_out[index] = middle[index]
        upper[index] = middle[index] + deviations_up * deviation
        lower[index] = middle[index] - deviations_down * deviation
    return upper, middle_out, lower


@nb.njit(cache=True)
def mid_point_f64(source: np.ndarray, period: int) -> np.ndarray:
    size = source.shape[0]
    out = nan_series(size)
    for index in range(period - 1, size):
        start = index - period + 1
        out[index] = (window_max(source, start, index) + window_min(source, start, index)) / 2.0
    return out


@nb.njit(cache=True)
def mid_price_f64(high: np.ndarray, low: np.ndarray, period: int) -> np.ndarray:
    size = high.shape[0]
    out = nan_series(size)
    for index in range(period - 1, size):
        start = index - period + 1
        out[index] = (window_max(high, start, index) + window_min(low, start, index)) / 2.0
    return out


@nb.njit(cache=True)
def _starts_short(high: np.ndarray, low: np.ndarray) -> bool:
    up_move = high[1] - high[0]
    down_move = low[0] - low[1]
    return down_move > 0.0 and down_move > up_move


@nb.njit(cache=True)
def sar_f64(high: np.ndarray, low: np.ndarray, acceleration: float, maximum: float) -> np.ndarray:
    """
    Compute Wilder's parabolic stop-and-reverse.

    Args:
        high: High series.
        low: Low series.
        acceleration: Acceleration factor step and initial value.
        maximum: Acceleration factor cap.
    Returns:
        np.ndarray: SAR level, NaN at index 0.
    Assumptions:
        Initial direction is short when the second bar shows a dominant minus
        directional movement, long otherwise.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    size = high.shape[0]
    out = nan_series(size)
    if size < 2:
        return out
    if acceleration > maximum:
        acceleration = maximum

    factor = acceleration
    is_long = not _starts_short(high, low)
    if is_long:
        extreme = high[1]
        sar = low[0]
    else:
        extreme = low[1]
        sar = high[0]
    new_low = low[1]
    new_high = high[1]

    for index in range(1, size):
        previous_low = new_low
        previous_high = new_high
        new_low = low[index]
        new_high = high[index]
        if is_long:
            if new_low <= sar:
                is_long = False
                sar = max(extreme, previous_high, new_high)
                out[index] = sar
                factor = acceleration
                extreme = new_low
                sar = sar + factor * (extreme - sar)
                sar = max(sar, previous_high, new_high)
            else:
                out[index] = sar
                if new_high > extreme:
                    extreme = new_high
                    factor = min(factor + acceleration, maximum)
                sar = sar + factor * (extreme - sar)
                sar = min(sar, previous_low, new_low)
        else:
            if new_high >= sar:
                is_long = True
                sar = min(extreme, previous_low, new_low)
                out[index] = sar
                factor = acceleration
                extreme = new_high
                sar = sar + factor * (extreme - sar)
                sar = min(sar, previous_low, new_low)
            else:
                out[index] = sar
                if new_low < extreme:
                    extreme = new_low
                    factor = min(factor + acceleration, maximum)
                sar = sar + factor * (extreme - sar)
                sar = max(sar, previous_high, new_high)
    return out


@nb.njit(cache=True)
def sar_ext_f64(
    high: np.ndarray,
    low: np.ndarray,
    start_value: float,
    offset_on_reverse: float,
    af_init_long: float,
    af_long: float,
    af_max_long: float,
    af_init_short: float,
    af_short: float,
    af_max_short: float,
) -> np.ndarray:
    """
    Compute parabolic SAR with separate long/short factors; short levels are negative.

    Args:
        high: High series.
        low: Low series.
        start_value: 0 for automatic direction, >0 to start long at that level,
            <0 to start short at its absolute value.
        offset_on_reverse: Fraction added to (short) or removed from (long) the SAR
            level on reversal.
        af_init_long: Initial long acceleration factor.
        af_long: Long acceleration factor step.
        af_max_long: Long acceleration factor cap.
        af_init_short: Initial short acceleration factor.
        af_short: Short acceleration factor step.
        af_max_short: Short acceleration factor cap.
    Returns:
        np.ndarray: Signed SAR level, NaN at index 0.
    Assumptions:
        Initial factors above their caps are clamped to the caps.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    size = high.shape[0]
    out = nan_series(size)
    if size < 2:
        return out
    if af_init_long > af_max_long:
        af_init_long = af_max_long
    if af_long > af_max_long:
        af_long = af_max_long
    if af_init_short > af_max_short:
        af_init_short = af_max_short
    if af_short > af_max_short:
        af_short = af_max_short

    if start_value == 0.0:
        is_long = not _starts_short(high, low)
        if is_long:
            sar = low[0]
        else:
            sar = high[0]
    elif start_value > 0.0:
        is_long = True
        sar = start_value
    else:
        is_long = False
        sar = -start_value

    if is_long:
        extreme = high[1]
    else:
        extreme = low[1]
    factor_long = af_init_long
    factor_short = af_init_short
    new_low = low[1]
    new_high = high[1]

    for index in range(1, size):
        previous_low = new_low
        previous_high = new_high
        new_low = low[index]
        new_high = high[index]
        if is_long:
            if new_low <= sar:
                is_long = False
                sar = max(extreme, previous_high, new_high)
                if offset_on_reverse != 0.0:
                    sar += sar * offset_on_reverse
                out[index] = -sar
                factor_short = af_init_short
                extreme = new_low
                sar = sar + factor_short * (extreme - sar)
                sar = max(sar, previous_high, new_high)
            else:
                out[index] = sar
                if new_high > extreme:
                    extreme = new_high
                    factor_long = min(factor_long + af_long, af_max_long)
                sar = sar + factor_long * (extreme - sar)
                sar = min(sar, previous_low, new_low)
        else:
            if new_high >= sar:
                is_long = True
                sar = min(extreme, previous_low, new_low)
                if offset_on_reverse != 0.0:
                    sar -= sar * offset_on_reverse
                out[index] = sar
                factor_long = af_init_long
                extreme = new_high
                sar = sar + factor_long * (extreme - sar)
                sar = min(sar, previous_low, new_low)
            else:
                out[index] = -sar
                if new_low < extreme:
                    extreme = new_low
                    factor_short = min(factor_short + af_short, af_max_short)
                sar = sar + factor_short * (extreme - sar)
                sar = max(sar, previous_high, new_high)
    return out


def mavp_f64(
    source: np.ndarray,
    periods: np.ndarray,
    min_period: int,
    max_period: int,
    ma_code: int,
) -> np.ndarray:
    """
    Compute a moving average whose period varies per sample.

    Args:
        source: One-dimensional float64 series.
        periods: Requested period per sample; truncated and clamped to
            `[min_period, max_period]`.
        min_period: Smallest allowed period.
        max_period: Largest allowed period.
        ma_code: Integer code of the moving-average family.
    Returns:
        np.ndarray: Per-sample moving average, NaN before `ma_lookback(max_period)`.
    Assumptions:
        `min_period <= max_period`; non-finite requested periods are clamped like
        out-of-range values. Every per-period average is seeded so that its first
        value lands on `ma_lookback(max_period)`.
    Raises:
        None.
    Side Effects:
        Allocates one moving-average array per distinct period.
    """
    requested = np.nan_to_num(
        np.trunc(periods),
        nan=float(min_period),
        posinf=float(max_period),
        neginf=float(min_period),
    )
    resolved = np.clip(requested, min_period, max_period).astype(np.int64)
    out = nan_series(source.shape[0])
    first_valid = ma_lookback(max_period, ma_code)
    for period in np.unique(resolved):
        first = first_valid - ma_lookback(int(period), ma_code)
        averaged = ma_f64(source, int(period), ma_code, first)
        mask = resolved == period
        out[mask] = averaged[mask]
    return out

"""
Numba kernels for momentum oscillators and directional movement.

Related: tabatch.adapters.outbound.compute_numba.kernels.overlap,
  tabatch.adapters.outbound.compute_numba.kernel_table,
  tabatch.adapters.outbound.compute_numpy.momentum
"""

from __future__ import annotations

import numba as nb
import numpy as np

from ._common import ema_alpha, nan_series, true_range_at, window_max, window_min
from .overlap import ema_f64, ma_f64, ma_lookback

_MACD_FIX_FAST_ALPHA = 0.15
_MACD_FIX_SLOW_ALPHA = 0.075
_MACD_FIX_FAST_PERIOD = 12
_MACD_FIX_SLOW_PERIOD = 26


@nb.njit(cache=True)
def _directional_moves(high: np.ndarray, low: np.ndarray):
    size = high.shape[0]
    plus_dm = np.zeros(size, dtype=np.float64)
    minus_dm = np.zeros(size, dtype=np.float64)
    for index in range(1, size):
        up_move = high[index] - high[index - 1]
        down_move = low[index - 1] - low[index]
        if up_move > 0.0 and up_move > down_move:
            plus_dm[index] = up_move
        elif down_move > 0.0 and down_move > up_move:
            minus_dm[index] = down_move
    return plus_dm, minus_dm


@nb.njit(cache=True)
def _wilder_dm_f64(high: np.ndarray, low: np.ndarray, period: int, plus: bool) -> np.ndarray:
    size = high.shape[0]
    out = nan_series(size)
    plus_dm, minus_dm = _directional_moves(high, low)
    moves = plus_dm if plus else minus_dm
    if period == 1:
        for index in range(1, size):
            out[index] = moves[index]
        return out
    if period - 1 >= size:
        return out

    smoothed = 0.0
    for index in range(1, period):
        smoothed += moves[index]
    out[period - 1] = smoothed
    for index in range(period, size):
        smoothed = smoothed - smoothed / period + moves[index]
        out[index] = smoothed
    return out


@nb.njit(cache=True)
def plus_dm_f64(high: np.ndarray, low: np.ndarray, period: int) -> np.ndarray:
    return _wilder_dm_f64(high, low, period, True)


@nb.njit(cache=True)
def minus_dm_f64(high: np.ndarray, low: np.ndarray, period: int) -> np.ndarray:
    return _wilder_dm_f64(high, low, period, False)


@nb.njit(cache=True)
def directional_indicators_f64(
    high: np.ndarray,
    low: np.ndarray,
    close: np.ndarray,
    period: int,
):
    """
    Compute Wilder-smoothed plus and minus directional indicators.

    Args:
        high: High series.
        low: Low series.
        close: Close series.
        period: Wilder smoothing period.
    Returns:
        tuple[np.ndarray, np.ndarray]: `(plus_di, minus_di)`, NaN before `period`.
    Assumptions:
        A zero smoothed true range yields 0 for both indicators.
    Raises:
        None.
    Side Effects:
        Allocates output arrays.
    """
    size = high.shape[0]
    plus_di = nan_series(size)
    minus_di = nan_series(size)
    if period >= size:
        return plus_di, minus_di

    plus_dm, minus_dm = _directional_moves(high, low)
    smoothed_plus = 0.0
    smoothed_minus = 0.0
    smoothed_tr = 0.0
    for index in range(1, period):
        smoothed_plus += plus_dm[index]
        smoothed_minus += minus_dm[index]
        smoothed_tr += true_range_at(high, low, close, index)

    for index in range(period, size):
        smoothed_plus = smoothed_plus - smoothed_plus / period + plus_dm[index]
        smoothed_minus = smoothed_minus - smoothed_minus / period + minus_dm[index]
        smoothed_tr = smoothed_tr - smoothed_tr / period + true_range_at(high, low, close, index)
        if smoothed_tr > 0.0:
            plus_di[index] = 100.0 * smoothed_plus / smoothed_tr
            minus_di[index] = 100.0 * smoothed_minus / smoothed_tr
        else:
            plus_di[index] = 0.0
            minus_di[index] = 0.0
    return plus_di, minus_di


@nb.njit(cache=True)
def dx_f64(high: np.ndarray, low: np.ndarray, close: np.ndarray, period: int) -> np.ndarray:
    size = high.shape[0]
    out = nan_series(size)
    plus_di, minus_di = directional_indicators_f64(high, low, close, period)
    previous = 0.0
    for index in range(period, size):
        total = plus_di[index] + minus_di[index]
        if total > 0.0:
            previous = 100.0 * abs(plus_di[index] - minus_di[index]) / total
        out[index] = previous
    return out


@nb.njit(cache=True)
def adx_f64(high: np.ndarray, low: np.ndarray, close: np.ndarray, period: int) -> np.ndarray:
    """
    Compute average directional movement index.

    Args:
        high: High series.
        low: Low series.
        close: Close series.
        period: Wilder smoothing period.
    Returns:
        np.ndarray: ADX, NaN before `2 * period - 1`.
    Assumptions:
        The first value is the arithmetic mean of the first `period` DX values.
    Raises:
        None.
    Side Effects:
        Allocates output arrays.
    """
    size = high.shape[0]
    out = nan_series(size)
    start = 2 * period - 1
    if start >= size:
        return out

    dx = dx_f64(high, low, close, period)
    total = 0.0
    for index in range(period, start + 1):
        total += dx[index]
    previous = total / period
    out[start] = previous
    for index in range(start + 1, size):
        previous = (previous * (period - 1) + dx[index]) / period
        out[index] = previous
    return out


@nb.njit(cache=True)
def adxr_f64(high: np.ndarray, low: np.ndarray, close: np.ndarray, period: int) -> np.ndarray:
    size = high.shape[0]
    out = nan_series(size)
    adx = adx_f64(high, low, close, period)
    for index in range(3 * period - 2, size):
        out[index] = (adx[index] + adx[index - period + 1]) / 2.0
    return out


@nb.njit(cache=True)
def aroon_f64(high: np.ndarray, low: np.ndarray, period: int):
    """
    Compute Aroon down and up lines.

    Args:
        high: High series.
        low: Low series.
        period: Look-back period; each window spans `period + 1` bars.
    Returns:
        tuple[np.ndarray, np.ndarray]: `(aroon_down, aroon_up)`, NaN before `period`.
    Assumptions:
        Ties resolve to the most recent extreme.
    Raises:
        None.
    Side Effects:
        Allocates output arrays.
    """
    size = high.shape[0]
    down = nan_series(size)
    up = nan_series(size)
    factor = 100.0 / period
    for index in range(period, size):
        highest_index = index - period
        lowest_index = index - period
        for offset in range(index - period + 1, index + 1):
            if high[offset] >= high[highest_index]:
                highest_index = offset
            if low[offset] <= low[lowest_index]:
                lowest_index = offset
        up[index] = factor * (period - (index - highest_index))
        down[index] = factor * (period - (index - lowest_index))
    return down, up


@nb.njit(cache=True)
def aroon_osc_f64(high: np.ndarray, low: np.ndarray, period: int) -> np.ndarray:
    down, up = aroon_f64(high, low, period)
    return up - down


@nb.njit(cache=True)
def bop_f64(open_: np.ndarray, high: np.ndarray, low: np.ndarray, close: np.ndarray) -> np.ndarray:
    size = close.shape[0]
    out = np.empty(size, dtype=np.float64)
    for index in range(size):
        spread = high[index] - low[index]
        if spread > 0.0:
            out[index] = (close[index] - open_[index]) / spread
        else:
            out[index] = 0.0
    return out


@nb.njit(cache=True)
def cci_f64(high: np.ndarray, low: np.ndarray, close: np.ndarray, period: int) -> np.ndarray:
    size = close.shape[0]
    out = nan_series(size)
    typical = (high + low + close) / 3.0
    for index in range(period - 1, size):
        mean = 0.0
        for offset in range(index - period + 1, index + 1):
            mean += typical[offset]
        mean = mean / period
        deviation = 0.0
        for offset in range(index - period + 1, index + 1):
            deviation += abs(typical[offset] - mean)
        deviation = deviation / period
        if deviation != 0.0:
            out[index] = (typical[index] - mean) / (0.015 * deviation)
        else:
            out[index] = 0.0
    return out


@nb.njit(cache=True)
def _wilder_gain_loss(source: np.ndarray, period: int, oscillator: bool) -> np.ndarray:
    size = source.shape[0]
    out = nan_series(size)
    if period >= size:
        return out

    gains = 0.0
    losses = 0.0
    for index in range(1, period + 1):
        change = source[index] - source[index - 1]
        if change > 0.0:
            gains += change
        else:
            losses -= change
    gains = gains / period
    losses = losses / period

    for index in range(period, size):
        if index > period:
            change = source[index] - source[index - 1]
            gain = change if change > 0.0 else 0.0
            loss = -change if change < 0.0 else 0.0
            gains = (gains * (period - 1) + gain) / period
            losses = (losses * (period - 1) + loss) / period
        total = gains + losses
        if total == 0.0:
            out[index] = 0.0
        elif oscillator:
            out[index] = 100.0 * (gains - losses) / total
        else:
            out[index] = 100.0 * gains / total
    return out


@nb.njit(cache=True)
def rsi_f64(source: np.ndarray, period: int) -> np.ndarray:
    """
    Compute Wilder's relative strength index.

    Args:
        source: One-dimensional float64 series.
        period: Wilder smoothing period.
    Returns:
        np.ndarray: RSI in `[0, 100]`, NaN before `period`.
    Assumptions:
        Flat windows report 0.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    return _wilder_gain_loss(source, period, False)


@nb.njit(cache=True)
def cmo_f64(source: np.ndarray, period: int) -> np.ndarray:
    return _wilder_gain_loss(source, period, True)


@nb.njit(cache=True)
def mom_f64(source: np.ndarray, period: int) -> np.ndarray:
    size = source.shape[0]
    out = nan_series(size)
    for index in range(period, size):
        out[index] = source[index] - source[index - period]
    return out


@nb.njit(cache=True)
def roc_family_f64(source: np.ndarray, period: int, mode: int) -> np.ndarray:
    """
    Compute one member of the rate-of-change family.

    Args:
        source: One-dimensional float64 series.
        period: Distance to the reference sample.
        mode: 0 percent change, 1 fractional change, 2 ratio, 3 ratio times 100.
    Returns:
        np.ndarray: Rate of change, NaN before `period`.
    Assumptions:
        A zero reference sample yields 0.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    size = source.shape[0]
    out = nan_series(size)
    for index in range(period, size):
        previous = source[index - period]
        if previous == 0.0:
            out[index] = 0.0
            continue
        ratio = source[index] / previous
        if mode == 0:
            out[index] = (ratio - 1.0) * 100.0
        elif mode == 1:
            out[index] = ratio - 1.0
        elif mode == 2:
            out[index] = ratio
        else:
            out[index] = ratio * 100.0
    return out


@nb.njit(cache=True)
def _signal_and_hist(line: np.ndarray, signal: np.ndarray):
    return line, signal, line - signal


@nb.njit(cache=True)
def macd_f64(source: np.ndarray, fast_period: int, slow_period: int, signal_period: int):
    """
    Compute MACD line, EMA signal line and histogram.

    Args:
        source: One-dimensional float64 series.
        fast_period: Fast EMA period.
        slow_period: Slow EMA period; swapped with `fast_period` when smaller.
        signal_period: Signal EMA period.
    Returns:
        tuple[np.ndarray, np.ndarray, np.ndarray]: `(macd, signal, hist)`.
    Assumptions:
        Both EMAs are seeded with an SMA ending at `slow_period - 1`, so the fast
        seed window starts at `slow_period - fast_period`. The signal EMA starts at
        the first valid MACD sample.
    Raises:
        None.
    Side Effects:
        Allocates output arrays.
    """
    if slow_period < fast_period:
        fast_period, slow_period = slow_period, fast_period
    fast = ema_f64(source, fast_period, slow_period - fast_period, ema_alpha(fast_period))
    slow = ema_f64(source, slow_period, 0, ema_alpha(slow_period))
    line = fast - slow
    signal = ema_f64(line, signal_period, slow_period - 1, ema_alpha(signal_period))
    return _signal_and_hist(line, signal)


@nb.njit(cache=True)
def macd_fix_f64(source: np.ndarray, signal_period: int):
    fast = ema_f64(
        source,
        _MACD_FIX_FAST_PERIOD,
        _MACD_FIX_SLOW_PERIOD - _MACD_FIX_FAST_PERIOD,
        _MACD_FIX_FAST_ALPHA,
    )
    slow = ema_f64(source, _MACD_FIX_SLOW_PERIOD, 0, _MACD_FIX_SLOW_ALPHA)
    line = fast - slow
    signal = ema_f64(line, signal_period, _MACD_FIX_SLOW_PERIOD - 1, ema_alpha(signal_period))
    return _signal_and_hist(line, signal)


@nb.njit(cache=True)
def macd_ext_f64(
    source: np.ndarray,
    fast_period: int,
    fast_code: int,
    slow_period: int,
    slow_code: int,
    signal_period: int,
    signal_code: int,
):
    if slow_period < fast_period:
        fast_period, slow_period = slow_period, fast_period
        fast_code, slow_code = slow_code, fast_code
    fast_lookback = ma_lookback(fast_period, fast_code)
    slow_lookback = ma_lookback(slow_period, slow_code)
    first = max(fast_lookback, slow_lookback)
    # Both averages produce their first value at `first`.
    fast = ma_f64(source, fast_period, fast_code, first - fast_lookback)
    slow = ma_f64(source, slow_period, slow_code, first - slow_lookback)
    line = fast - slow
    signal = ma_f64(line, signal_period, signal_code, first)
    return _signal_and_hist(line, signal)


@nb.njit(cache=True)
def price_oscillator_f64(
    source: np.ndarray,
    fast_period: int,
    slow_period: int,
    ma_code: int,
    percent: bool,
) -> np.ndarray:
    """
    Compute absolute or percentage price oscillator.

    Args:
        source: One-dimensional float64 series.
        fast_period: Fast moving-average period.
        slow_period: Slow moving-average period; swapped when smaller.
        ma_code: Moving-average family code for both averages.
        percent: Whether to scale the spread by the slow average.
    Returns:
        np.ndarray: APO or PPO series.
    Assumptions:
        PPO reports 0 where the slow average is 0.
    Raises:
        None.
    Side Effects:
        Allocates output arrays.
    """
    if slow_period < fast_period:
        fast_period, slow_period = slow_period, fast_period
    fast = ma_f64(source, fast_period, ma_code, 0)
    slow = ma_f64(source, slow_period, ma_code, 0)
    if not percent:
        return fast - slow

    size = source.shape[0]
    out = nan_series(size)
    for index in range(size):
        if slow[index] != 0.0:
            out[index] = 100.0 * (fast[index] - slow[index]) / slow[index]
        elif not np.isnan(slow[index]):
            out[index] = 0.0
    return out


@nb.njit(cache=True)
def mfi_f64(
    high: np.ndarray,
    low: np.ndarray,
    close: np.ndarray,
    volume: np.ndarray,
    period: int,
) -> np.ndarray:
    size = close.shape[0]
    out = nan_series(size)
    typical = (high + low + close) / 3.0
    positive = np.zeros(size, dtype=np.float64)
    negative = np.zeros(size, dtype=np.float64)
    for index in range(1, size):
        flow = typical[index] * volume[index]
        if typical[index] > typical[index - 1]:
            positive[index] = flow
        elif typical[index] < typical[index - 1]:
            negative[index] = flow

    for index in range(period, size):
        positive_sum = 0.0
        negative_sum = 0.0
        for offset in range(index - period + 1, index + 1):
            positive_sum += positive[offset]
            negative_sum += negative[offset]
        total = positive_sum + negative_sum
        if total < 1.0:
            out[index] = 0.0
        else:
            out[index] = 100.0 * positive_sum / total
    return out


@nb.njit(cache=True)
def fast_k_f64(
    high: np.ndarray,
    low: np.ndarray,
    close: np.ndarray,
    period: int,
    first: int,
) -> np.ndarray:
    size = close.shape[0]
    out = nan_series(size)
    for index in range(first + period - 1, size):
        start = index - period + 1
        highest = window_max(high, start, index)
        lowest = window_min(low, start, index)
        spread = highest - lowest
        if spread > 0.0:
            out[index] = 100.0 * (close[index] - lowest) / spread
        else:
            out[index] = 0.0
    return out


@nb.njit(cache=True)
def stoch_f64(
    high: np.ndarray,
    low: np.ndarray,
    close: np.ndarray,
    fast_k_period: int,
    slow_k_period: int,
    slow_k_code: int,
    slow_d_period: int,
    slow_d_code: int,
):
    """
    Compute slow stochastic %K and %D.

    Args:
        high: High series.
        low: Low series.
        close: Close series.
        fast_k_period: Raw %K window.
        slow_k_period: Smoothing period of raw %K.
        slow_k_code: Moving-average family code of the %K smoothing.
        slow_d_period: Smoothing period of slow %K.
        slow_d_code: Moving-average family code of the %D smoothing.
    Returns:
        tuple[np.ndarray, np.ndarray]: `(slow_k, slow_d)`.
    Assumptions:
        A flat high/low window reports raw %K of 0.
    Raises:
        None.
    Side Effects:
        Allocates output arrays.
    """
    fast_k = fast_k_f64(high, low, close, fast_k_period, 0)
    first_k = fast_k_period - 1
    slow_k = ma_f64(fast_k, slow_k_period, slow_k_code, first_k)
    first_d = first_k + ma_lookback(slow_k_period, slow_k_code)
    slow_d = ma_f64(slow_k, slow_d_period, slow_d_code, first_d)
    return slow_k, slow_d


@nb.njit(cache=True)
def stoch_f_f64(
    high: np.ndarray,
    low: np.ndarray,
    close: np.ndarray,
    fast_k_period: int,
    fast_d_period: int,
    fast_d_code: int,
    first: int,
):
    fast_k = fast_k_f64(high, low, close, fast_k_period, first)
    fast_d = ma_f64(fast_k, fast_d_period, fast_d_code, first + fast_k_period - 1)
    return fast_k, fast_d


@nb.njit(cache=True)
def stoch_rsi_f64(
    source: np.ndarray,
    period: int,
    fast_k_period: int,
    fast_d_period: int,
    fast_d_code: int,
):
    rsi = rsi_f64(source, period)
    return stoch_f_f64(rsi, rsi, rsi, fast_k_period, fast_d_period, fast_d_code, period)


@nb.njit(cache=True)
def trix_f64(source: np.ndarray, period: int) -> np.ndarray:
    size = source.shape[0]
    out = nan_series(size)
    alpha = ema_alpha(period)
    lag = period - 1
    ema1 = ema_f64(source, period, 0, alpha)
    ema2 = ema_f64(ema1, period, lag, alpha)
    ema3 = ema_f64(ema2, period, 2 * lag, alpha)
    for index in range(3 * lag + 1, size):
        previous = ema3[index - 1]
        if previous != 0.0:
            out[index] = (ema3[index] / previous - 1.0) * 100.0
        else:
            out[index] = 0.0
    return out


@nb.njit(cache=True)
def ult_osc_f64(
    high: np.ndarray,
    low: np.ndarray,
    close: np.ndarray,
    first_period: int,
    second_period: int,
    third_period: int,
) -> np.ndarray:
    """
    Compute the ultimate oscillator over three buying-pressure averages.

    Args:
        high: High series.
        low: Low series.
        close: Close series.
        first_period: One of the three averaging windows.
        second_period: One of the three averaging windows.
        third_period: One of the three averaging windows.
    Returns:
        np.ndarray: Oscillator, NaN before the longest window.
    Assumptions:
        Windows are weighted 4/2/1 from shortest to longest.
    Raises:
        None.
    Side Effects:
        Allocates working arrays.
    """
    size = close.shape[0]
    out = nan_series(size)
    periods = np.array([first_period, second_period, third_period])
    periods.sort()
    longest = periods[2]
    if longest >= size:
        return out

    pressure_sum = np.zeros(size, dtype=np.float64)
    range_sum = np.zeros(size, dtype=np.float64)
    for index in range(1, size):
        true_low = min(low[index], close[index - 1])
        pressure_sum[index] = pressure_sum[index - 1] + close[index] - true_low
        range_sum[index] = range_sum[index - 1] + true_range_at(high, low, close, index)

    weights = np.array([4.0, 2.0, 1.0])
    for index in range(longest, size):
        total = 0.0
        for slot in range(3):
            window = periods[slot]
            spread = range_sum[index] - range_sum[index - window]
            if spread != 0.0:
                total += weights[slot] * (pressure_sum[index] - pressure_sum[index - window]) / spread
        out[index] = 100.0 * total / 7.0
    return out


@nb.njit(cache=True)
def will_r_f64(high: np.ndarray, low: np.ndarray, close: np.ndarray, period: int) -> np.ndarray:
    size = close.shape[0]
    out = nan_series(size)
    for index in range(period - 1, size):
        start = index - period + 1
        highest = window_max(high, start, index)
        lowest = window_min(low, start, index)
        spread = highest - lowest
        if spread > 0.0:
            out[index] = -100.0 * (highest - close[index]) / spread
        else:
            out[index] = 0.0
    return out

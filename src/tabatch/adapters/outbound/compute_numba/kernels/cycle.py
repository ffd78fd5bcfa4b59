"""
Numba kernels built on the Hilbert-transform dominant-cycle estimator.

Every estimator run starts at a `first` index. The 4-3-2-1 price smoother is primed
with the twelve samples `[first, first + 12)` and the transform itself runs from
`first + 12` with all earlier history taken as zero.

Related: tabatch.adapters.outbound.compute_numba.kernels.overlap,
  tabatch.adapters.outbound.compute_numba.kernel_table
"""

from __future__ import annotations

import math

import numba as nb
import numpy as np

from ._common import DEG_TO_RAD, RAD_TO_DEG, nan_series

HT_PERIOD_LOOKBACK = 32
HT_PHASE_LOOKBACK = 63
MAMA_LOOKBACK = 32

_SMOOTHER_PRIMING = 12
_A = 0.0962
_B = 0.5769
_TWO_PI = 8.0 * math.atan(1.0)


@nb.njit(cache=True)
def _smoothed_price(source: np.ndarray, index: int) -> float:
    return (
        4.0 * source[index]
        + 3.0 * source[index - 1]
        + 2.0 * source[index - 2]
        + source[index - 3]
    ) * 0.1


@nb.njit(cache=True)
def _hilbert_at(values: np.ndarray, index: int, adjustment: float) -> float:
    return (
        _A * values[index]
        + _B * values[index - 2]
        - _B * values[index - 4]
        - _A * values[index - 6]
    ) * adjustment


@nb.njit(cache=True)
def hilbert_core_f64(source: np.ndarray, first: int):
    """
    Run the Hilbert-transform cycle estimator over `source[first:]`.

    Args:
        source: One-dimensional float64 price series.
        first: Index of the first sample to use; earlier samples are ignored.
    Returns:
        tuple: `(smooth_price, in_phase, quadrature, smooth_period)` full-length arrays;
            entries before `first + 12` are zero.
    Assumptions:
        Detrender, quadrature and in-phase histories read zero before `first + 12`.
        The period estimate starts at zero and is clamped to `[6, 50]` from the first
        step on.
    Raises:
        None.
    Side Effects:
        Allocates working arrays.
    """
    size = source.shape[0]
    smooth = np.zeros(size, dtype=np.float64)
    detrender = np.zeros(size, dtype=np.float64)
    in_phase = np.zeros(size, dtype=np.float64)
    quadrature = np.zeros(size, dtype=np.float64)
    j_in_phase = np.zeros(size, dtype=np.float64)
    j_quadrature = np.zeros(size, dtype=np.float64)
    smooth_period_out = np.zeros(size, dtype=np.float64)

    previous_i2 = 0.0
    previous_q2 = 0.0
    re = 0.0
    im = 0.0
    period = 0.0
    smooth_period = 0.0

    start = first + _SMOOTHER_PRIMING
    for index in range(start, size):
        adjustment = 0.075 * period + 0.54
        smooth[index] = _smoothed_price(source, index)
        detrender[index] = _hilbert_at(smooth, index, adjustment)
        quadrature[index] = _hilbert_at(detrender, index, adjustment)
        in_phase[index] = detrender[index - 3]
        j_in_phase[index] = _hilbert_at(in_phase, index, adjustment)
        j_quadrature[index] = _hilbert_at(quadrature, index, adjustment)

        q2 = 0.2 * (quadrature[index] + j_in_phase[index]) + 0.8 * previous_q2
        i2 = 0.2 * (in_phase[index] - j_quadrature[index]) + 0.8 * previous_i2
        re = 0.2 * (i2 * previous_i2 + q2 * previous_q2) + 0.8 * re
        im = 0.2 * (i2 * previous_q2 - q2 * previous_i2) + 0.8 * im
        previous_i2 = i2
        previous_q2 = q2

        previous_period = period
        if im != 0.0 and re != 0.0:
            angle = math.atan(im / re) * RAD_TO_DEG
            if angle != 0.0:
                period = 360.0 / angle
            else:
                period = 1.5 * previous_period
        if period > 1.5 * previous_period:
            period = 1.5 * previous_period
        if period < 0.67 * previous_period:
            period = 0.67 * previous_period
        if period < 6.0:
            period = 6.0
        elif period > 50.0:
            period = 50.0
        period = 0.2 * period + 0.8 * previous_period
        smooth_period = 0.33 * period + 0.67 * smooth_period
        smooth_period_out[index] = smooth_period

    return smooth, in_phase, quadrature, smooth_period_out


@nb.njit(cache=True)
def _dc_phase_series(smooth: np.ndarray, smooth_period: np.ndarray, start: int) -> np.ndarray:
    """
    Compute dominant cycle phase in degrees from the smoothed price.

    Args:
        smooth: Smoothed price, zero before `start`.
        smooth_period: Smoothed dominant cycle period, positive from `start`.
        start: First index where the estimator ran.
    Returns:
        np.ndarray: Phase in `(-45, 315]`, zero before `start`.
    Assumptions:
        When the imaginary part vanishes the previous phase is shifted by 90 degrees
        toward the sign of the real part instead of being recomputed.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    size = smooth.shape[0]
    out = np.zeros(size, dtype=np.float64)
    phase = 0.0
    for index in range(start, size):
        period = smooth_period[index]
        cycle = int(period + 0.5)
        real_part = 0.0
        imag_part = 0.0
        for step in range(cycle):
            if index - step < 0:
                break
            angle = float(step) * _TWO_PI / float(cycle)
            real_part += math.sin(angle) * smooth[index - step]
            imag_part += math.cos(angle) * smooth[index - step]

        if abs(imag_part) > 0.0:
            phase = math.atan(real_part / imag_part) * RAD_TO_DEG
        elif real_part < 0.0:
            phase -= 90.0
        elif real_part > 0.0:
            phase += 90.0
        phase += 90.0
        phase += 360.0 / period
        if imag_part < 0.0:
            phase += 180.0
        if phase > 315.0:
            phase -= 360.0
        out[index] = phase
    return out


@nb.njit(cache=True)
def _instantaneous_trend(source: np.ndarray, smooth_period: np.ndarray, start: int) -> np.ndarray:
    size = source.shape[0]
    trend = np.zeros(size, dtype=np.float64)
    for index in range(start, size):
        cycle = int(smooth_period[index] + 0.5)
        total = 0.0
        for step in range(cycle):
            if index - step < 0:
                break
            total += source[index - step]
        if cycle > 0:
            trend[index] = total / float(cycle)
    return trend


@nb.njit(cache=True)
def _trendline_at(trend: np.ndarray, index: int) -> float:
    return (
        4.0 * trend[index]
        + 3.0 * trend[index - 1]
        + 2.0 * trend[index - 2]
        + trend[index - 3]
    ) / 10.0


@nb.njit(cache=True)
def ht_dc_period_f64(source: np.ndarray) -> np.ndarray:
    """
    Compute Hilbert-transform dominant cycle period.

    Args:
        source: One-dimensional float64 price series.
    Returns:
        np.ndarray: Smoothed cycle period, NaN before `HT_PERIOD_LOOKBACK`.
    Assumptions:
        None.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    size = source.shape[0]
    out = nan_series(size)
    _, _, _, smooth_period = hilbert_core_f64(source, 0)
    for index in range(HT_PERIOD_LOOKBACK, size):
        out[index] = smooth_period[index]
    return out


@nb.njit(cache=True)
def ht_phasor_f64(source: np.ndarray):
    size = source.shape[0]
    in_phase_out = nan_series(size)
    quadrature_out = nan_series(size)
    _, in_phase, quadrature, _ = hilbert_core_f64(source, 0)
    for index in range(HT_PERIOD_LOOKBACK, size):
        in_phase_out[index] = in_phase[index]
        quadrature_out[index] = quadrature[index]
    return in_phase_out, quadrature_out


@nb.njit(cache=True)
def ht_dc_phase_f64(source: np.ndarray) -> np.ndarray:
    size = source.shape[0]
    out = nan_series(size)
    smooth, _, _, smooth_period = hilbert_core_f64(source, 0)
    phase = _dc_phase_series(smooth, smooth_period, _SMOOTHER_PRIMING)
    for index in range(HT_PHASE_LOOKBACK, size):
        out[index] = phase[index]
    return out


@nb.njit(cache=True)
def ht_sine_f64(source: np.ndarray):
    size = source.shape[0]
    sine = nan_series(size)
    lead_sine = nan_series(size)
    smooth, _, _, smooth_period = hilbert_core_f64(source, 0)
    phase = _dc_phase_series(smooth, smooth_period, _SMOOTHER_PRIMING)
    for index in range(HT_PHASE_LOOKBACK, size):
        sine[index] = math.sin(phase[index] * DEG_TO_RAD)
        lead_sine[index] = math.sin((phase[index] + 45.0) * DEG_TO_RAD)
    return sine, lead_sine


@nb.njit(cache=True)
def ht_trendline_f64(source: np.ndarray) -> np.ndarray:
    size = source.shape[0]
    out = nan_series(size)
    _, _, _, smooth_period = hilbert_core_f64(source, 0)
    trend = _instantaneous_trend(source, smooth_period, _SMOOTHER_PRIMING)
    for index in range(HT_PHASE_LOOKBACK, size):
        out[index] = _trendline_at(trend, index)
    return out


@nb.njit(cache=True)
def ht_trend_mode_i32(source: np.ndarray) -> np.ndarray:
    """
    Classify each bar as trending (1) or cycling (0).

    Args:
        source: One-dimensional float64 price series.
    Returns:
        np.ndarray: int32 mode flags, zero before `HT_PHASE_LOOKBACK`.
    Assumptions:
        Trend is assumed until a sine/lead-sine crossover, a short stay in trend,
        or a phase advance near the cycle rate says otherwise; a 1.5% gap between
        smoothed price and trendline forces trend. Sine, lead sine and phase state
        start at zero where the estimator starts.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    size = source.shape[0]
    out = np.zeros(size, dtype=np.int32)
    start = _SMOOTHER_PRIMING
    smooth, _, _, smooth_period = hilbert_core_f64(source, 0)
    phase = _dc_phase_series(smooth, smooth_period, start)
    trend = _instantaneous_trend(source, smooth_period, start)

    days_in_trend = 0
    sine = 0.0
    lead_sine = 0.0
    for index in range(start, size):
        previous_sine = sine
        previous_lead_sine = lead_sine
        sine = math.sin(phase[index] * DEG_TO_RAD)
        lead_sine = math.sin((phase[index] + 45.0) * DEG_TO_RAD)
        trendline = _trendline_at(trend, index)

        mode = 1
        if (sine > lead_sine and previous_sine <= previous_lead_sine) or (
            sine < lead_sine and previous_sine >= previous_lead_sine
        ):
            days_in_trend = 0
            mode = 0
        days_in_trend += 1
        if float(days_in_trend) < 0.5 * smooth_period[index]:
            mode = 0

        if smooth_period[index] != 0.0:
            delta_phase = phase[index] - phase[index - 1]
            rate = 360.0 / smooth_period[index]
            if 0.67 * rate < delta_phase < 1.5 * rate:
                mode = 0

        if trendline != 0.0 and abs((smooth[index] - trendline) / trendline) >= 0.015:
            mode = 1

        if index >= HT_PHASE_LOOKBACK:
            out[index] = mode
    return out


@nb.njit(cache=True)
def mama_f64(source: np.ndarray, fast_limit: float, slow_limit: float, first: int):
    """
    Compute MESA adaptive moving average and its following average.

    Args:
        source: One-dimensional float64 price series.
        fast_limit: Upper bound of the adaptive smoothing factor.
        slow_limit: Lower bound of the adaptive smoothing factor.
        first: Index of the first sample to use.
    Returns:
        tuple[np.ndarray, np.ndarray]: `(mama, fama)`, NaN before `first + MAMA_LOOKBACK`.
    Assumptions:
        `0 < slow_limit` and `0 < fast_limit < 1`. Both averages start from zero at
        `first + 12` and converge over the lookback.
    Raises:
        None.
    Side Effects:
        Allocates output arrays.
    """
    size = source.shape[0]
    mama_out = nan_series(size)
    fama_out = nan_series(size)
    start = first + _SMOOTHER_PRIMING
    if start >= size:
        return mama_out, fama_out

    _, in_phase, quadrature, _ = hilbert_core_f64(source, first)
    previous_phase = 0.0
    mama = 0.0
    fama = 0.0
    for index in range(start, size):
        phase = 0.0
        if in_phase[index] != 0.0:
            phase = math.atan(quadrature[index] / in_phase[index]) * RAD_TO_DEG
        delta_phase = previous_phase - phase
        previous_phase = phase
        if delta_phase > 1.0:
            alpha = fast_limit / delta_phase
            if alpha < slow_limit:
                alpha = slow_limit
        else:
            alpha = fast_limit
        mama = alpha * source[index] + (1.0 - alpha) * mama
        fama = 0.5 * alpha * mama + (1.0 - 0.5 * alpha) * fama
        if index >= first + MAMA_LOOKBACK:
            mama_out[index] = mama
            fama_out[index] = fama
    return mama_out, fama_out

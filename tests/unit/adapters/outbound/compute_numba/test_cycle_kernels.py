from __future__ import annotations

import math

import numpy as np
import pytest

from tabatch.adapters.outbound.compute_numba.kernels.cycle import (
    HT_PERIOD_LOOKBACK,
    HT_PHASE_LOOKBACK,
    MAMA_LOOKBACK,
    ht_dc_period_f64,
    ht_dc_phase_f64,
    ht_phasor_f64,
    ht_sine_f64,
    ht_trend_mode_i32,
    ht_trendline_f64,
    mama_f64,
)

_RAD_TO_DEG = 45.0 / math.atan(1.0)
_DEG_TO_RAD = math.atan(1.0) / 45.0
_PHASE_RING = 50


def _prices(size: int = 600) -> np.ndarray:
    rng = np.random.default_rng(20260211)
    trend = 150.0 + np.cumsum(rng.normal(0.0, 1.2, size))
    cycle = 4.0 * np.sin(np.arange(size) * 2.0 * np.pi / 23.0)
    return np.ascontiguousarray(trend + cycle)


class _HilbertStage:
    """
    Streaming Hilbert filter with one three-slot ring per bar parity.

    Odd and even bars are filtered independently, so each parity sees taps two,
    four and six bars back.
    """

    def __init__(self) -> None:
        self.ring = ([0.0, 0.0, 0.0], [0.0, 0.0, 0.0])
        self.previous = [0.0, 0.0]
        self.previous_input = [0.0, 0.0]
        self.value = 0.0

    def step(self, value: float, parity: int, slot: int, adjustment: float) -> float:
        scaled = 0.0962 * value
        out = -self.ring[parity][slot]
        self.ring[parity][slot] = scaled
        out += scaled
        out -= self.previous[parity]
        self.previous[parity] = 0.5769 * self.previous_input[parity]
        out += self.previous[parity]
        self.previous_input[parity] = value
        self.value = out * adjustment
        return self.value


def _streaming_cycle_reference(
    source: np.ndarray,
    fast_limit: float = 0.5,
    slow_limit: float = 0.05,
) -> dict[str, np.ndarray]:
    """
    Run the dominant-cycle estimator bar by bar with running sums and ring buffers.

    Args:
        source: Price series.
        fast_limit: MAMA fast limit.
        slow_limit: MAMA slow limit.
    Returns:
        dict[str, np.ndarray]: Per-bar estimator state keyed by output name; entries
            before bar 12 are NaN.
    Assumptions:
        The price smoother is a running 4-3-2-1 WMA primed over bars 0..11.
    Raises:
        None.
    Side Effects:
        Allocates numpy arrays.
    """
    size = source.shape[0]
    names = (
        "smooth_period",
        "in_phase",
        "quadrature",
        "phase",
        "trendline",
        "trend_mode",
        "mama",
        "fama",
    )
    out = {name: np.full(size, np.nan) for name in names}

    wma_sub = source[0] + source[1] + source[2]
    wma_sum = source[0] + 2.0 * source[1] + 3.0 * source[2]
    trailing_value = 0.0
    trailing_index = 0

    def price_wma(price: float) -> float:
        nonlocal wma_sub, wma_sum, trailing_value, trailing_index
        wma_sub += price - trailing_value
        wma_sum += 4.0 * price
        trailing_value = source[trailing_index]
        trailing_index += 1
        smoothed = wma_sum * 0.1
        wma_sum -= wma_sub
        return smoothed

    for today in range(3, 12):
        price_wma(source[today])

    detrender = _HilbertStage()
    q1 = _HilbertStage()
    ji = _HilbertStage()
    jq = _HilbertStage()
    slot = 0
    i1_even_prev2 = i1_even_prev3 = 0.0
    i1_odd_prev2 = i1_odd_prev3 = 0.0
    previous_i2 = previous_q2 = 0.0
    re = im = 0.0
    period = smooth_period = 0.0
    mama = fama = 0.0
    previous_mama_phase = 0.0
    smooth_ring = [0.0] * _PHASE_RING
    ring_index = 0
    phase = 0.0
    sine = lead_sine = 0.0
    i_trend1 = i_trend2 = i_trend3 = 0.0
    days_in_trend = 0

    for today in range(12, size):
        adjustment = 0.075 * period + 0.54
        price = source[today]
        smoothed = price_wma(price)
        smooth_ring[ring_index] = smoothed

        parity = today % 2
        in_phase = i1_even_prev3 if parity == 0 else i1_odd_prev3
        detrender.step(smoothed, parity, slot, adjustment)
        q1.step(detrender.value, parity, slot, adjustment)
        mama_phase = math.atan(q1.value / in_phase) * _RAD_TO_DEG if in_phase != 0.0 else 0.0
        ji.step(in_phase, parity, slot, adjustment)
        jq.step(q1.value, parity, slot, adjustment)
        if parity == 0:
            slot = (slot + 1) % 3
            i1_odd_prev3 = i1_odd_prev2
            i1_odd_prev2 = detrender.value
        else:
            i1_even_prev3 = i1_even_prev2
            i1_even_prev2 = detrender.value
        q2 = 0.2 * (q1.value + ji.value) + 0.8 * previous_q2
        i2 = 0.2 * (in_phase - jq.value) + 0.8 * previous_i2

        delta = previous_mama_phase - mama_phase
        previous_mama_phase = mama_phase
        alpha = max(fast_limit / delta, slow_limit) if delta > 1.0 else fast_limit
        mama = alpha * price + (1.0 - alpha) * mama
        fama = 0.5 * alpha * mama + (1.0 - 0.5 * alpha) * fama

        re = 0.2 * (i2 * previous_i2 + q2 * previous_q2) + 0.8 * re
        im = 0.2 * (i2 * previous_q2 - q2 * previous_i2) + 0.8 * im
        previous_q2 = q2
        previous_i2 = i2
        previous_period = period
        if im != 0.0 and re != 0.0:
            period = 360.0 / (math.atan(im / re) * _RAD_TO_DEG)
        period = min(period, 1.5 * previous_period)
        period = max(period, 0.67 * previous_period)
        period = min(max(period, 6.0), 50.0)
        period = 0.2 * period + 0.8 * previous_period
        smooth_period = 0.33 * period + 0.67 * smooth_period

        previous_phase = phase
        cycle = int(smooth_period + 0.5)
        real_part = imag_part = 0.0
        index = ring_index
        for step in range(cycle):
            angle = step * (8.0 * math.atan(1.0)) / cycle
            real_part += math.sin(angle) * smooth_ring[index]
            imag_part += math.cos(angle) * smooth_ring[index]
            index = _PHASE_RING - 1 if index == 0 else index - 1
        if abs(imag_part) > 0.0:
            phase = math.atan(real_part / imag_part) * _RAD_TO_DEG
        elif real_part < 0.0:
            phase -= 90.0
        elif real_part > 0.0:
            phase += 90.0
        phase += 90.0
        phase += 360.0 / smooth_period
        if imag_part < 0.0:
            phase += 180.0
        if phase > 315.0:
            phase -= 360.0

        previous_sine, previous_lead_sine = sine, lead_sine
        sine = math.sin(phase * _DEG_TO_RAD)
        lead_sine = math.sin((phase + 45.0) * _DEG_TO_RAD)

        instant = sum(source[today - step] for step in range(cycle))
        if cycle > 0:
            instant /= cycle
        trendline = (4.0 * instant + 3.0 * i_trend1 + 2.0 * i_trend2 + i_trend3) / 10.0
        i_trend3, i_trend2, i_trend1 = i_trend2, i_trend1, instant

        mode = 1
        if (sine > lead_sine and previous_sine <= previous_lead_sine) or (
            sine < lead_sine and previous_sine >= previous_lead_sine
        ):
            days_in_trend = 0
            mode = 0
        days_in_trend += 1
        if days_in_trend < 0.5 * smooth_period:
            mode = 0
        delta_phase = phase - previous_phase
        if 0.67 * 360.0 / smooth_period < delta_phase < 1.5 * 360.0 / smooth_period:
            mode = 0
        if trendline != 0.0 and abs((smoothed - trendline) / trendline) >= 0.015:
            mode = 1

        for name, value in (
            ("smooth_period", smooth_period),
            ("in_phase", in_phase),
            ("quadrature", q1.value),
            ("phase", phase),
            ("trendline", trendline),
            ("trend_mode", float(mode)),
            ("mama", mama),
            ("fama", fama),
        ):
            out[name][today] = value
        ring_index = (ring_index + 1) % _PHASE_RING
    return out


def _assert_tail_close(actual: np.ndarray, expected: np.ndarray, lookback: int) -> None:
    assert np.all(np.isnan(actual[:lookback]))
    np.testing.assert_allclose(actual[lookback:], expected[lookback:], rtol=1e-8, atol=1e-8)


def test_period_estimators_match_streaming_reference_from_first_valid_sample() -> None:
    """
    Verify dominant-cycle period and phasor values from the first valid bar on.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        The streaming reference primes its smoother over bars 0..11 and treats every
        filter history as zero before bar 12.
    Raises:
        AssertionError: If warmup or any valid value differs from the reference.
    Side Effects:
        JIT-compiles cycle kernels on first use.
    """
    source = _prices()
    reference = _streaming_cycle_reference(source)

    _assert_tail_close(ht_dc_period_f64(source), reference["smooth_period"], HT_PERIOD_LOOKBACK)
    in_phase, quadrature = ht_phasor_f64(source)
    _assert_tail_close(in_phase, reference["in_phase"], HT_PERIOD_LOOKBACK)
    _assert_tail_close(quadrature, reference["quadrature"], HT_PERIOD_LOOKBACK)


def test_phase_estimators_match_streaming_reference_from_first_valid_sample() -> None:
    """
    Verify phase, sine, trendline and trend mode from the first valid bar on.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Phase state carries over between bars when the imaginary part vanishes.
    Raises:
        AssertionError: If warmup or any valid value differs from the reference.
    Side Effects:
        JIT-compiles cycle kernels on first use.
    """
    source = _prices()
    reference = _streaming_cycle_reference(source)
    phase = reference["phase"]

    _assert_tail_close(ht_dc_phase_f64(source), phase, HT_PHASE_LOOKBACK)
    sine, lead_sine = ht_sine_f64(source)
    _assert_tail_close(sine, np.sin(np.deg2rad(phase)), HT_PHASE_LOOKBACK)
    _assert_tail_close(lead_sine, np.sin(np.deg2rad(phase + 45.0)), HT_PHASE_LOOKBACK)
    _assert_tail_close(ht_trendline_f64(source), reference["trendline"], HT_PHASE_LOOKBACK)

    mode = ht_trend_mode_i32(source)
    assert mode.dtype == np.int32
    assert np.all(mode[:HT_PHASE_LOOKBACK] == 0)
    np.testing.assert_array_equal(
        mode[HT_PHASE_LOOKBACK:],
        reference["trend_mode"][HT_PHASE_LOOKBACK:].astype(np.int32),
    )


def test_mama_starts_from_zero_and_matches_streaming_reference() -> None:
    """
    Verify MAMA/FAMA seeding at zero and their values from the first valid bar on.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Default limits are 0.5 and 0.05.
    Raises:
        AssertionError: If warmup or any valid value differs from the reference.
    Side Effects:
        JIT-compiles cycle kernels on first use.
    """
    source = _prices()
    reference = _streaming_cycle_reference(source)

    mama, fama = mama_f64(source, 0.5, 0.05, 0)

    _assert_tail_close(mama, reference["mama"], MAMA_LOOKBACK)
    _assert_tail_close(fama, reference["fama"], MAMA_LOOKBACK)


@pytest.mark.parametrize("first", [1, 7, 40])
def test_mama_start_up_is_anchored_at_first(first: int) -> None:
    source = _prices(300)

    shifted, _ = mama_f64(source, 0.5, 0.05, first)
    trimmed, _ = mama_f64(np.ascontiguousarray(source[first:]), 0.5, 0.05, 0)

    assert np.all(np.isnan(shifted[: first + MAMA_LOOKBACK]))
    np.testing.assert_allclose(shifted[first:], trimmed, rtol=1e-12, atol=1e-12, equal_nan=True)

from __future__ import annotations

import numpy as np
import pytest

from tabatch.adapters.outbound.compute_numba.kernels.momentum import (
    aroon_f64,
    cmo_f64,
    macd_ext_f64,
    macd_f64,
    macd_fix_f64,
    mom_f64,
    roc_family_f64,
    rsi_f64,
    will_r_f64,
)
from tabatch.adapters.outbound.compute_numba.kernels.overlap import MA_EMA, MA_SMA
from tabatch.adapters.outbound.compute_numpy import compute_momentum_f64


def _ohlc(size: int = 300) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Build deterministic high/low/close series with positive spread.

    Args:
        size: Number of samples.
    Returns:
        tuple[np.ndarray, np.ndarray, np.ndarray]: High, low and close.
    Assumptions:
        None.
    Raises:
        None.
    Side Effects:
        Allocates numpy arrays.
    """
    rng = np.random.default_rng(20260211)
    close = 100.0 + np.cumsum(rng.normal(0.0, 1.0, size))
    high = close + rng.uniform(0.1, 2.0, size)
    low = close - rng.uniform(0.1, 2.0, size)
    return (
        np.ascontiguousarray(high),
        np.ascontiguousarray(low),
        np.ascontiguousarray(close),
    )


@pytest.mark.parametrize("period", [2, 9, 14, 30])
def test_rsi_matches_numpy_oracle(period: int) -> None:
    """
    Verify Wilder RSI agrees with the NumPy oracle.

    Args:
        period: Wilder smoothing period.
    Returns:
        None.
    Assumptions:
        Both implementations seed averages with the first `period` changes.
    Raises:
        AssertionError: If outputs diverge.
    Side Effects:
        None.
    """
    _, _, close = _ohlc()
    np.testing.assert_allclose(
        rsi_f64(close, period),
        compute_momentum_f64(indicator_id="rsi", source=close, period=period),
        rtol=1e-10,
        atol=1e-9,
        equal_nan=True,
    )


@pytest.mark.parametrize(
    ("indicator_id", "mode"),
    [("roc", 0), ("roc_p", 1), ("roc_r", 2), ("roc_r100", 3)],
)
def test_rate_of_change_family_matches_numpy_oracle(indicator_id: str, mode: int) -> None:
    _, _, close = _ohlc()
    np.testing.assert_allclose(
        roc_family_f64(close, 10, mode),
        compute_momentum_f64(indicator_id=indicator_id, source=close, period=10),
        rtol=1e-12,
        equal_nan=True,
    )


def test_mom_and_will_r_match_numpy_oracle() -> None:
    high, low, close = _ohlc()
    np.testing.assert_allclose(
        mom_f64(close, 10),
        compute_momentum_f64(indicator_id="mom", source=close, period=10),
        equal_nan=True,
    )
    np.testing.assert_allclose(
        will_r_f64(high, low, close, 14),
        compute_momentum_f64(indicator_id="will_r", source=close, period=14, high=high, low=low),
        rtol=1e-12,
        equal_nan=True,
    )


def test_flat_series_yields_zero_instead_of_division_failure() -> None:
    """
    Verify zero-range windows report 0 for ratio-based oscillators.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Flat inputs make every denominator zero.
    Raises:
        AssertionError: If non-zero or non-finite values appear.
    Side Effects:
        None.
    """
    flat = np.full(40, 5.0)
    np.testing.assert_array_equal(rsi_f64(flat, 14)[14:], 0.0)
    np.testing.assert_array_equal(cmo_f64(flat, 14)[14:], 0.0)
    np.testing.assert_array_equal(will_r_f64(flat, flat, flat, 14)[13:], 0.0)
    np.testing.assert_array_equal(roc_family_f64(np.zeros(20), 5, 0)[5:], 0.0)


def test_aroon_ties_resolve_to_most_recent_extreme() -> None:
    high = np.asarray([5.0, 5.0, 5.0, 5.0])
    low = np.asarray([1.0, 1.0, 1.0, 1.0])

    down, up = aroon_f64(high, low, 3)

    assert np.isnan(up[2])
    assert up[3] == pytest.approx(100.0)
    assert down[3] == pytest.approx(100.0)


def test_macd_histogram_is_line_minus_signal() -> None:
    _, _, close = _ohlc()
    line, signal, hist = macd_f64(close, 12, 26, 9)

    lookback = 25 + 8
    assert np.all(np.isfinite(signal[lookback:]))
    np.testing.assert_allclose(hist[lookback:], line[lookback:] - signal[lookback:])


def _seeded_ema(values: np.ndarray, period: int, seed_start: int, alpha: float) -> np.ndarray:
    """
    Build a reference EMA whose SMA seed window starts at `seed_start`.

    Args:
        values: Source series.
        period: Seed window length.
        seed_start: First index of the seed window.
        alpha: Smoothing factor.
    Returns:
        np.ndarray: Reference EMA, NaN before `seed_start + period - 1`.
    Assumptions:
        The seed window is fully inside `values`.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    out = np.full(values.shape[0], np.nan)
    seed_end = seed_start + period - 1
    previous = float(np.mean(values[seed_start : seed_end + 1]))
    out[seed_end] = previous
    for index in range(seed_end + 1, values.shape[0]):
        previous = previous + alpha * (values[index] - previous)
        out[index] = previous
    return out


def test_macd_seeds_fast_ema_at_the_slow_seed_end() -> None:
    """
    Verify the first MACD samples come from SMA seeds that both end at `slow - 1`.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Fast seed covers `[slow - fast, slow)`, slow seed covers `[0, slow)`, and the
        signal seed covers the first `signal` MACD samples.
    Raises:
        AssertionError: If warmup or any early value differs from the seeded reference.
    Side Effects:
        None.
    """
    _, _, close = _ohlc()
    line, signal, hist = macd_f64(close, 12, 26, 9)

    assert np.all(np.isnan(line[:25]))
    assert line[25] == pytest.approx(np.mean(close[14:26]) - np.mean(close[:26]), rel=1e-12)
    expected_line = _seeded_ema(close, 12, 14, 2.0 / 13.0) - _seeded_ema(close, 26, 0, 2.0 / 27.0)
    np.testing.assert_allclose(line[25:], expected_line[25:], rtol=1e-10, atol=1e-10)

    assert np.all(np.isnan(signal[:33]))
    assert signal[33] == pytest.approx(np.mean(line[25:34]), rel=1e-12)
    expected_signal = _seeded_ema(line, 9, 25, 0.2)
    np.testing.assert_allclose(signal[33:], expected_signal[33:], rtol=1e-10, atol=1e-10)
    np.testing.assert_allclose(hist[33:], line[33:] - signal[33:])


def test_macd_swaps_fast_and_slow_periods() -> None:
    _, _, close = _ohlc()
    for straight, swapped in zip(macd_f64(close, 12, 26, 9), macd_f64(close, 26, 12, 9)):
        np.testing.assert_array_equal(straight, swapped)


def test_macd_fix_uses_fixed_factors_and_offset_fast_seed() -> None:
    """
    Verify MACD-fix uses 0.15/0.075 smoothing with the fast seed starting at index 14.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Fast and slow periods are fixed at 12 and 26.
    Raises:
        AssertionError: If early values differ from the seeded reference.
    Side Effects:
        None.
    """
    _, _, close = _ohlc()
    line, signal, _ = macd_fix_f64(close, 9)

    assert line[25] == pytest.approx(np.mean(close[14:26]) - np.mean(close[:26]), rel=1e-12)
    expected_line = _seeded_ema(close, 12, 14, 0.15) - _seeded_ema(close, 26, 0, 0.075)
    np.testing.assert_allclose(line[25:], expected_line[25:], rtol=1e-10, atol=1e-10)
    assert signal[33] == pytest.approx(np.mean(line[25:34]), rel=1e-12)


def test_macd_ext_aligns_both_averages_on_the_larger_lookback() -> None:
    """
    Verify MACD-ext starts the shorter-lookback average late so both begin together.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        EMA-only MACD-ext equals MACD; a fast EMA(5) against a slow SMA(20) is seeded
        over `[15, 20)`.
    Raises:
        AssertionError: If outputs differ from MACD or from the seeded reference.
    Side Effects:
        None.
    """
    _, _, close = _ohlc()
    for ext, plain in zip(
        macd_ext_f64(close, 12, MA_EMA, 26, MA_EMA, 9, MA_EMA),
        macd_f64(close, 12, 26, 9),
    ):
        np.testing.assert_allclose(ext, plain, rtol=1e-12, atol=1e-12, equal_nan=True)

    line, signal, _ = macd_ext_f64(close, 5, MA_EMA, 20, MA_SMA, 4, MA_SMA)
    assert np.all(np.isnan(line[:19]))
    assert line[19] == pytest.approx(np.mean(close[15:20]) - np.mean(close[:20]), rel=1e-12)
    slow = np.convolve(close, np.full(20, 1.0 / 20.0), mode="valid")
    expected_line = _seeded_ema(close, 5, 15, 2.0 / 6.0)[19:] - slow
    np.testing.assert_allclose(line[19:], expected_line, rtol=1e-10, atol=1e-10)
    assert signal[22] == pytest.approx(np.mean(line[19:23]), rel=1e-12)

from __future__ import annotations

import numpy as np
import pytest

from tabatch.adapters.outbound.compute_numba.kernels.overlap import (
    MA_DEMA,
    MA_EMA,
    MA_KAMA,
    MA_MAMA,
    MA_SMA,
    MA_T3,
    MA_TEMA,
    MA_TRIMA,
    MA_WMA,
    bbands_f64,
    dema_f64,
    ema_f64,
    ma_f64,
    ma_lookback,
    mavp_f64,
    sma_f64,
    tema_f64,
    wma_f64,
)
from tabatch.adapters.outbound.compute_numpy import compute_ma_f64


def _source(size: int = 240) -> np.ndarray:
    rng = np.random.default_rng(20260211)
    return np.ascontiguousarray(100.0 + np.cumsum(rng.normal(0.0, 1.0, size)))


def test_sma_matches_hand_computed_values() -> None:
    """
    Verify SMA warmup NaNs and running-sum values on a short sequence.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Lookback of SMA is `period - 1`.
    Raises:
        AssertionError: If values or warmup differ.
    Side Effects:
        None.
    """
    source = np.asarray([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])

    out = sma_f64(source, 3, 0)

    expected = np.asarray([np.nan, np.nan, 2.0, 3.0, 4.0, 5.0])
    np.testing.assert_allclose(out, expected, rtol=0.0, atol=1e-12, equal_nan=True)


def test_ema_is_seeded_with_first_window_mean() -> None:
    source = np.asarray([2.0, 4.0, 6.0, 8.0])
    out = ema_f64(source, 3, 0, 0.5)
    np.testing.assert_allclose(out, [np.nan, np.nan, 4.0, 6.0], equal_nan=True)


@pytest.mark.parametrize(
    ("indicator_id", "kernel"),
    [
        ("sma", lambda source, period: sma_f64(source, period, 0)),
        ("ema", lambda source, period: ema_f64(source, period, 0, 2.0 / (period + 1.0))),
        ("wma", lambda source, period: wma_f64(source, period, 0)),
        ("dema", lambda source, period: dema_f64(source, period, 0)),
        ("tema", lambda source, period: tema_f64(source, period, 0)),
    ],
)
def test_numba_moving_averages_match_numpy_oracle(indicator_id: str, kernel) -> None:
    """
    Verify Numba moving averages agree with the NumPy oracle including warmup NaNs.

    Args:
        indicator_id: Oracle identifier.
        kernel: Numba routine adapter taking `(source, period)`.
    Returns:
        None.
    Assumptions:
        Both implementations seed EMA stages with the first-window SMA.
    Raises:
        AssertionError: If outputs diverge beyond float tolerance.
    Side Effects:
        None.
    """
    source = _source()
    for period in (2, 5, 14, 30):
        numba_out = kernel(source, period)
        numpy_out = compute_ma_f64(indicator_id=indicator_id, source=source, period=period)
        np.testing.assert_allclose(numba_out, numpy_out, rtol=1e-10, atol=1e-9, equal_nan=True)


@pytest.mark.parametrize(
    ("ma_code", "period", "expected"),
    [
        (MA_SMA, 10, 9),
        (MA_EMA, 10, 9),
        (MA_WMA, 10, 9),
        (MA_DEMA, 10, 18),
        (MA_TEMA, 10, 27),
        (MA_TRIMA, 10, 9),
        (MA_KAMA, 10, 10),
        (MA_MAMA, 10, 32),
        (MA_T3, 5, 24),
        (MA_TEMA, 1, 0),
    ],
)
def test_ma_lookback_per_family(ma_code: int, period: int, expected: int) -> None:
    assert ma_lookback(period, ma_code) == expected


def test_every_ma_family_leaves_exactly_lookback_warmup_nans() -> None:
    """
    Verify each moving-average family emits its first value at its lookback index.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Input contains no NaN values.
    Raises:
        AssertionError: If the first finite value is misaligned.
    Side Effects:
        None.
    """
    source = _source()
    for ma_code in (MA_SMA, MA_EMA, MA_WMA, MA_DEMA, MA_TEMA, MA_TRIMA, MA_KAMA, MA_MAMA, MA_T3):
        out = ma_f64(source, 7, ma_code, 0)
        lookback = ma_lookback(7, ma_code)
        assert np.all(np.isnan(out[:lookback])), ma_code
        assert np.all(np.isfinite(out[lookback:])), ma_code


def test_bbands_with_sma_middle_uses_population_deviation() -> None:
    source = _source(60)
    upper, middle, lower = bbands_f64(source, 20, 2.0, 1.0, MA_SMA)

    windows = np.lib.stride_tricks.sliding_window_view(source, 20)
    deviation = windows.std(axis=1)
    np.testing.assert_allclose(middle[19:], windows.mean(axis=1), rtol=1e-12)
    np.testing.assert_allclose(upper[19:] - middle[19:], 2.0 * deviation, rtol=1e-9, atol=1e-9)
    np.testing.assert_allclose(middle[19:] - lower[19:], deviation, rtol=1e-9, atol=1e-9)
    assert np.all(np.isnan(upper[:19]))


def test_mavp_clamps_requested_periods() -> None:
    """
    Verify per-sample periods are truncated and clamped to the configured range.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Constant requested periods reduce mavp to a plain moving average.
    Raises:
        AssertionError: If clamped output differs from the fixed-period average.
    Side Effects:
        None.
    """
    source = _source(80)

    clamped_high = mavp_f64(source, np.full(80, 50.9), 2, 10, MA_SMA)
    clamped_low = mavp_f64(source, np.full(80, 1.0), 4, 10, MA_SMA)

    np.testing.assert_allclose(clamped_high[9:], sma_f64(source, 10, 0)[9:])
    np.testing.assert_allclose(clamped_low[9:], sma_f64(source, 4, 0)[9:])


def test_mavp_seeds_every_period_to_start_at_the_max_period_lookback() -> None:
    """
    Verify per-period EMAs are seeded so their first value lands on the max-period lookback.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        With `max_period=10` the EMA lookback is 9, so a period-4 EMA is seeded over
        `[6, 10)` and a period-10 EMA over `[0, 10)`.
    Raises:
        AssertionError: If warmup or early values differ from the offset-seeded EMAs.
    Side Effects:
        None.
    """
    source = _source(80)
    periods = np.tile(np.asarray([4.0, 10.0]), 40)

    constant = mavp_f64(source, np.full(80, 4.0), 2, 10, MA_EMA)
    mixed = mavp_f64(source, periods, 2, 10, MA_EMA)

    assert np.all(np.isnan(constant[:9]))
    assert constant[9] == pytest.approx(np.mean(source[6:10]), rel=1e-12)
    np.testing.assert_allclose(constant[9:], ema_f64(source, 4, 6, 0.4)[9:])

    short = ema_f64(source, 4, 6, 0.4)
    long = ema_f64(source, 10, 0, 2.0 / 11.0)
    expected = np.where(periods == 4.0, short, long)
    assert np.all(np.isnan(mixed[:9]))
    np.testing.assert_allclose(mixed[9:], expected[9:])

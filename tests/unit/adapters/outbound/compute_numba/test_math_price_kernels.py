from __future__ import annotations

import numpy as np

from tabatch.adapters.outbound.compute_numba.kernels.math_ops import (
    binary_f64,
    min_max_index_i32,
    rolling_extreme_f64,
    rolling_extreme_index_i32,
    rolling_sum_f64,
    unary_f64,
)
from tabatch.adapters.outbound.compute_numba.kernels.price import (
    avg_price_f64,
    med_price_f64,
    typ_price_f64,
    wcl_price_f64,
)
from tabatch.adapters.outbound.compute_numba.kernels.statistic import (
    LINREG_ANGLE,
    LINREG_FORECAST,
    LINREG_INTERCEPT,
    LINREG_SLOPE,
    LINREG_VALUE,
    linear_reg_f64,
    std_dev_f64,
    variance_f64,
)
from tabatch.adapters.outbound.compute_numba.kernels.volatility import atr_f64, true_range_f64
from tabatch.adapters.outbound.compute_numba.kernels.volume import obv_f64


def test_element_wise_transforms_keep_out_of_domain_samples_as_nan() -> None:
    """
    Verify ufunc-backed transforms return NaN for out-of-domain samples without raising.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Floating-point warnings are suppressed for element-wise transforms.
    Raises:
        AssertionError: If values differ from the reference ufunc.
    Side Effects:
        None.
    """
    source = np.asarray([-1.0, 0.0, 4.0, 9.0])

    out = unary_f64("sqrt", source)

    assert np.isnan(out[0])
    np.testing.assert_array_equal(out[1:], [0.0, 2.0, 3.0])
    np.testing.assert_array_equal(unary_f64("floor", np.asarray([1.7, -1.2])), [1.0, -2.0])
    assert np.isinf(binary_f64("div", np.asarray([1.0]), np.asarray([0.0])))[0]
    np.testing.assert_array_equal(
        binary_f64("sub", np.asarray([5.0, 1.0]), np.asarray([2.0, 3.0])),
        [3.0, -2.0],
    )


def test_rolling_sum_and_extremes() -> None:
    source = np.asarray([3.0, 1.0, 4.0, 1.0, 5.0, 9.0, 2.0])

    np.testing.assert_allclose(
        rolling_sum_f64(source, 3),
        [np.nan, np.nan, 8.0, 6.0, 10.0, 15.0, 16.0],
        equal_nan=True,
    )
    np.testing.assert_allclose(
        rolling_extreme_f64(source, 3, True),
        [np.nan, np.nan, 4.0, 4.0, 5.0, 9.0, 9.0],
        equal_nan=True,
    )
    np.testing.assert_allclose(
        rolling_extreme_f64(source, 3, False),
        [np.nan, np.nan, 1.0, 1.0, 1.0, 1.0, 2.0],
        equal_nan=True,
    )


def test_extreme_index_ties_resolve_to_most_recent_sample() -> None:
    """
    Verify index outputs are absolute positions and prefer the latest tie.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Index outputs are int32 with zeros in the warmup region.
    Raises:
        AssertionError: If positions or dtype mismatch.
    Side Effects:
        None.
    """
    source = np.asarray([2.0, 7.0, 7.0, 1.0, 1.0, 3.0])

    highest = rolling_extreme_index_i32(source, 3, True)
    lowest, highest_pair = min_max_index_i32(source, 3)

    assert highest.dtype == np.int32
    np.testing.assert_array_equal(highest, [0, 0, 2, 2, 2, 5])
    np.testing.assert_array_equal(lowest, [0, 0, 0, 3, 4, 4])
    np.testing.assert_array_equal(highest_pair, highest)


def test_price_transforms() -> None:
    open_ = np.asarray([1.0, 2.0])
    high = np.asarray([4.0, 6.0])
    low = np.asarray([0.0, 2.0])
    close = np.asarray([3.0, 2.0])

    np.testing.assert_allclose(avg_price_f64(open_, high, low, close), [2.0, 3.0])
    np.testing.assert_allclose(med_price_f64(high, low), [2.0, 4.0])
    np.testing.assert_allclose(typ_price_f64(high, low, close), [7.0 / 3.0, 10.0 / 3.0])
    np.testing.assert_allclose(wcl_price_f64(high, low, close), [2.5, 3.0])


def test_linear_regression_family_on_a_straight_line() -> None:
    """
    Verify regression statistics recover an exact line.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Window x coordinates run from 0 (oldest) to `period - 1` (newest).
    Raises:
        AssertionError: If slope, intercept, angle, value or forecast mismatch.
    Side Effects:
        None.
    """
    source = 2.0 * np.arange(20, dtype=np.float64) + 5.0
    period = 5
    last = source.shape[0] - 1

    assert linear_reg_f64(source, period, LINREG_SLOPE)[last] == 2.0
    np.testing.assert_allclose(
        linear_reg_f64(source, period, LINREG_INTERCEPT)[last], source[last - period + 1]
    )
    np.testing.assert_allclose(linear_reg_f64(source, period, LINREG_VALUE)[last], source[last])
    np.testing.assert_allclose(
        linear_reg_f64(source, period, LINREG_FORECAST)[last], source[last] + 2.0
    )
    np.testing.assert_allclose(
        linear_reg_f64(source, period, LINREG_ANGLE)[last], np.degrees(np.arctan(2.0))
    )
    assert np.all(np.isnan(linear_reg_f64(source, period, LINREG_VALUE)[: period - 1]))


def test_variance_and_std_dev_use_population_moments() -> None:
    rng = np.random.default_rng(3)
    source = rng.normal(0.0, 1.0, 50)
    windows = np.lib.stride_tricks.sliding_window_view(source, 10)

    np.testing.assert_allclose(variance_f64(source, 10)[9:], windows.var(axis=1), rtol=1e-9)
    np.testing.assert_allclose(std_dev_f64(source, 10, 1.5)[9:], 1.5 * windows.std(axis=1), rtol=1e-9)


def test_true_range_atr_and_obv() -> None:
    high = np.asarray([10.0, 12.0, 11.0, 13.0])
    low = np.asarray([9.0, 10.0, 8.0, 12.0])
    close = np.asarray([9.5, 11.0, 9.0, 12.5])
    volume = np.asarray([100.0, 50.0, 30.0, 20.0])

    np.testing.assert_allclose(true_range_f64(high, low, close), [np.nan, 2.5, 3.0, 4.0], equal_nan=True)
    np.testing.assert_allclose(atr_f64(high, low, close, 2), [np.nan, np.nan, 2.75, 3.375], equal_nan=True)
    np.testing.assert_allclose(obv_f64(close, volume), [100.0, 150.0, 120.0, 140.0])

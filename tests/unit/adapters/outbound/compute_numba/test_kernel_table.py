from __future__ import annotations

import numpy as np
import pytest

from tabatch.adapters.outbound.compute_numba import NumbaKernel, numba_kernels
from tabatch.application.dto import KernelReport
from tabatch.application.services import bind_parameters
from tabatch.domain.definitions import all_defs
from tabatch.domain.entities import RetCode

_DEFS = {definition.indicator_id.value: definition for definition in all_defs()}


def _lookback(indicator_id: str, **overrides: object) -> int:
    kernel = numba_kernels()[indicator_id]
    return kernel.lookback(bind_parameters(_DEFS[indicator_id], overrides))


def test_kernel_table_covers_every_definition_exactly_once() -> None:
    """
    Verify kernel keys and definition ids describe the same identity space.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        `numba_kernels()` returns a read-only mapping.
    Raises:
        AssertionError: If keys differ or the mapping is mutable.
    Side Effects:
        None.
    """
    kernels = numba_kernels()

    assert set(kernels) == set(_DEFS)
    assert len(kernels) == 158
    with pytest.raises(TypeError):
        kernels["sma"] = kernels["ema"]  # type: ignore[index]


@pytest.mark.parametrize(
    ("indicator_id", "overrides", "expected"),
    [
        ("sma", {}, 29),
        ("kama", {}, 30),
        ("dema", {"time_period": 10}, 18),
        ("moving_average", {"time_period": 10, "ma_type": "tema"}, 27),
        ("bbands", {"time_period": 21}, 20),
        ("bbands", {"time_period": 21, "ma_type": "kama"}, 21),
        ("macd", {}, 33),
        ("macd_fix", {}, 33),
        ("rsi", {}, 14),
        ("adx", {}, 27),
        ("adxr", {}, 40),
        ("trix", {}, 88),
        ("stoch", {}, 8),
        ("stoch_f", {}, 6),
        ("ult_osc", {}, 28),
        ("atr", {}, 14),
        ("sar", {}, 1),
        ("ht_trendline", {}, 63),
        ("add", {}, 0),
        ("cdl_doji", {}, 10),
        ("cdl_engulfing", {}, 2),
        ("mavp", {"max_period": 20}, 19),
    ],
)
def test_lookback_per_indicator(indicator_id: str, overrides: dict[str, object], expected: int) -> None:
    assert _lookback(indicator_id, **overrides) == expected


def test_short_input_reports_non_positive_valid_count_without_writing() -> None:
    """
    Verify a kernel leaves buffers untouched when no sample can be valid.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Buffers are NaN-filled by the caller.
    Raises:
        AssertionError: If report or buffers differ.
    Side Effects:
        None.
    """
    kernel = numba_kernels()["sma"]
    params = bind_parameters(_DEFS["sma"], {"time_period": 10})
    outputs = (np.full(5, np.nan),)

    report = kernel.compute((np.arange(5.0),), params, outputs)

    assert report.valid_count == -4
    assert report.ok
    assert np.all(np.isnan(outputs[0]))


def test_compute_writes_only_the_valid_tail() -> None:
    kernel = numba_kernels()["sma"]
    params = bind_parameters(_DEFS["sma"], {"time_period": 3})
    outputs = (np.full(6, -1.0),)

    report = kernel.compute((np.arange(6.0),), params, outputs)

    assert report == KernelReport(valid_count=4)
    np.testing.assert_allclose(outputs[0], [-1.0, -1.0, 1.0, 2.0, 3.0, 4.0])


def test_mavp_rejects_inverted_period_bounds() -> None:
    kernel = numba_kernels()["mavp"]
    params = bind_parameters(_DEFS["mavp"], {"min_period": 12, "max_period": 4})
    outputs = (np.full(50, np.nan),)

    report = kernel.compute((np.arange(50.0), np.full(50, 6.0)), params, outputs)

    assert report.ret_code is RetCode.BAD_PARAM
    assert not report.ok


def test_output_arity_mismatch_is_an_internal_error() -> None:
    kernel = NumbaKernel(
        name="pair",
        lookback_fn=lambda params: 0,
        compute_fn=lambda inputs, params: inputs[0],
    )
    params = bind_parameters(_DEFS["sma"])

    report = kernel.compute((np.ones(3),), params, (np.zeros(3), np.zeros(3)))

    assert report.ret_code is RetCode.INTERNAL_ERROR

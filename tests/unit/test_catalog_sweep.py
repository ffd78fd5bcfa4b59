from __future__ import annotations

from typing import Any

import numpy as np
import pytest

from tabatch.application.dto import PriceBars
from tabatch.application.services import InvocationHarness
from tabatch.domain.definitions import all_defs
from tabatch.domain.entities import (
    MA_TYPE_VALUES,
    IndicatorDef,
    IndicatorGroup,
    InputSeries,
    OutputDType,
    ParamKind,
)
from tabatch.domain.errors import InsufficientData
from tabatch.wiring import build_catalog

_HARNESS = InvocationHarness(catalog=build_catalog())
_EXTRA_BARS = 60


def _bars(size: int) -> PriceBars:
    """
    Build a deterministic random-walk OHLCV bundle with positive spread.

    Args:
        size: Number of bars.
    Returns:
        PriceBars: Aligned bars.
    Assumptions:
        Prices stay far from zero for the chosen walk.
    Raises:
        IndicatorArgumentError: If generated arrays violate DTO invariants.
    Side Effects:
        Allocates numpy arrays.
    """
    rng = np.random.default_rng(20260211)
    close = 200.0 + np.cumsum(rng.normal(0.0, 1.5, size))
    open_ = close + rng.normal(0.0, 0.7, size)
    high = np.maximum(open_, close) + rng.uniform(0.05, 1.5, size)
    low = np.minimum(open_, close) - rng.uniform(0.05, 1.5, size)
    volume = rng.uniform(500.0, 5_000.0, size)
    return PriceBars(open=open_, high=high, low=low, close=close, volume=volume)


def _inputs(definition: IndicatorDef, size: int) -> list[np.ndarray]:
    bars = _bars(size)
    inputs: list[np.ndarray] = []
    for kind in definition.inputs:
        if definition.group is IndicatorGroup.MATH_TRANSFORM:
            inputs.append(0.05 + 0.9 * (np.arange(size) % 17) / 17.0)
        elif kind is InputSeries.PERIODS:
            inputs.append(np.resize(np.asarray([4.0, 9.0, 16.0, 25.0]), size))
        elif kind is InputSeries.REAL0:
            inputs.append(bars.high)
        elif kind is InputSeries.REAL1:
            inputs.append(bars.low)
        else:
            inputs.append(bars.series(kind))
    return inputs


def _variants() -> list[Any]:
    """
    Build one parametrize case per definition and parameter variant.

    Args:
        None.
    Returns:
        list[Any]: `pytest.param(definition, params)` cases covering defaults, every
            integer parameter at its lower bound and every moving-average type.
    Assumptions:
        Enum parameters only select moving-average types.
    Raises:
        None.
    Side Effects:
        None.
    """
    cases: list[Any] = []
    for definition in all_defs():
        indicator_id = definition.indicator_id.value
        cases.append(pytest.param(definition, {}, id=f"{indicator_id}-default"))

        minimums = {
            param.name: param.hard_min
            for param in definition.params
            if param.kind is ParamKind.INT
        }
        if minimums:
            cases.append(pytest.param(definition, minimums, id=f"{indicator_id}-minimum"))

        enum_names = [param.name for param in definition.params if param.kind is ParamKind.ENUM]
        for value in MA_TYPE_VALUES if enum_names else ():
            params = {name: value for name in enum_names}
            cases.append(pytest.param(definition, params, id=f"{indicator_id}-{value}"))
    return cases


@pytest.mark.parametrize(("definition", "params"), _variants())
def test_every_indicator_honours_its_lookback(
    definition: IndicatorDef,
    params: dict[str, Any],
) -> None:
    """
    Verify the lookback boundary and the trimmed output contract for every indicator.

    Args:
        definition: Catalog definition under test.
        params: Parameter overrides of the variant.
    Returns:
        None.
    Assumptions:
        Exactly `lookback` samples raise `InsufficientData`, one more yields a single
        value, and valid windows never contain NaN or infinity.
    Raises:
        AssertionError: If the uniform output contract is violated.
    Side Effects:
        JIT-compiles the indicator kernel on first use.
    """
    indicator_id = definition.indicator_id
    lookback = _HARNESS.lookback(indicator_id, params)
    expected_dtype = np.int32 if definition.output.dtype is OutputDType.INT32 else np.float64

    if lookback > 0:
        with pytest.raises(InsufficientData) as error:
            _HARNESS.invoke(indicator_id, _inputs(definition, lookback), params)
        assert error.value.min_size == lookback + 1

    single = _HARNESS.invoke(indicator_id, _inputs(definition, lookback + 1), params)
    assert (single.window.start, single.window.end) == (lookback, lookback + 1)
    assert all(values.shape == (1,) for values in single.values)

    size = lookback + _EXTRA_BARS
    result = _HARNESS.invoke(indicator_id, _inputs(definition, size), params)
    assert result.names == definition.output.names
    assert (result.window.start, result.window.end) == (lookback, size)
    for values in result.values:
        assert values.shape == (_EXTRA_BARS,)
        assert values.dtype == expected_dtype
        assert np.all(np.isfinite(values)), indicator_id.value

from __future__ import annotations

import time

import numpy as np
import pytest

from tabatch.adapters.outbound.compute_numba import ComputeNumbaWarmupRunner
from tabatch.application.dto import PriceBars
from tabatch.application.services import InvocationHarness
from tabatch.platform.config import TaBatchRuntimeConfig
from tabatch.wiring import build_catalog


def _bars(*, size: int) -> PriceBars:
    """
    Build deterministic dense OHLCV bars for perf-smoke.

    Args:
        size: Number of bars.
    Returns:
        PriceBars: Valid dense OHLCV payload.
    Assumptions:
        Payload is deterministic and has strictly positive high-low spread.
    Raises:
        IndicatorArgumentError: If generated arrays violate PriceBars invariants.
    Side Effects:
        Allocates numpy arrays.
    """
    base = np.linspace(100.0, 140.0, size, dtype=np.float64)
    wave = np.sin(np.linspace(0.0, 200.0 * np.pi, size))
    close = base + 2.0 * wave
    open_ = close - 0.3 * wave
    return PriceBars(
        open=open_,
        high=np.maximum(open_, close) + 1.0,
        low=np.minimum(open_, close) - 1.0,
        close=close,
        volume=np.linspace(10.0, 100.0, size, dtype=np.float64),
    )


@pytest.mark.perf_smoke
def test_batch_indicators_perf_smoke() -> None:
    """
    Run perf-smoke over a mixed indicator set on one million bars.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Perf-smoke validates successful runtime execution, not strict latency SLA.
    Raises:
        AssertionError: If output lengths or dtypes are violated.
    Side Effects:
        Triggers Numba warmup and kernel JIT compilation.
    """
    config = TaBatchRuntimeConfig(max_compute_bytes_total=1024**3)
    catalog = build_catalog()
    ComputeNumbaWarmupRunner(config=config, catalog=catalog).warmup()
    harness = InvocationHarness(
        catalog=catalog,
        max_compute_bytes_total=config.max_compute_bytes_total,
    )
    bars = _bars(size=1_000_000)

    started = time.perf_counter()
    for indicator_id in ("sma", "kama", "bbands", "macd", "rsi", "adx", "sar", "cdl_engulfing"):
        result = harness.invoke_bars(indicator_id, bars)
        lookback = harness.lookback(indicator_id)
        for values in result.values:
            assert values.shape == (1_000_000 - lookback,)
    elapsed = time.perf_counter() - started

    assert harness.invoke_bars("cdl_engulfing", bars).values[0].dtype == np.int32
    assert elapsed > 0.0

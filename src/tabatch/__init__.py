"""
Batch technical-analysis indicators behind one uniform invocation contract.
"""

from __future__ import annotations

from typing import Any

import numpy.typing as npt

from tabatch.application.dto import IndicatorResult, PriceBars
from tabatch.domain.entities import IndicatorDef, MAType
from tabatch.domain.errors import (
    ComputationError,
    ComputeBudgetExceeded,
    IndicatorArgumentError,
    InsufficientData,
    MissingInputSeriesError,
    UnknownIndicatorError,
)
from tabatch.wiring import default_harness


def invoke(
    indicator_id: str,
    *inputs: npt.ArrayLike,
    **params: Any,
) -> IndicatorResult:
    """
    Run one catalog indicator through the process-wide default harness.

    Args:
        indicator_id: Catalog identifier such as `sma` or `cdl_doji`.
        *inputs: Input series in the definition's declared order.
        **params: Parameter overrides; omitted names use catalog defaults.
    Returns:
        IndicatorResult: Trimmed output copies plus their window.
    Assumptions:
        None.
    Raises:
        UnknownIndicatorError: If the id is not in the catalog.
        IndicatorArgumentError: If inputs or parameters are malformed.
        InsufficientData: If the input is too short for any valid output.
        ComputationError: If the kernel reports a failure.
    Side Effects:
        Builds the default harness on first use.
    """
    return default_harness().invoke(indicator_id, inputs, params)


def invoke_bars(indicator_id: str, bars: PriceBars, **params: Any) -> IndicatorResult:
    return default_harness().invoke_bars(indicator_id, bars, params)


def lookback(indicator_id: str, **params: Any) -> int:
    return default_harness().lookback(indicator_id, params)


def definitions() -> tuple[IndicatorDef, ...]:
    return default_harness().definitions()


__all__ = [
    "ComputationError",
    "ComputeBudgetExceeded",
    "IndicatorArgumentError",
    "IndicatorDef",
    "IndicatorResult",
    "InsufficientData",
    "MAType",
    "MissingInputSeriesError",
    "PriceBars",
    "UnknownIndicatorError",
    "definitions",
    "invoke",
    "invoke_bars",
    "lookback",
]

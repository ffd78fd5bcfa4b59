"""
Trim full-length output buffers into caller-owned result series.

Related: tabatch.application.dto.indicator_result,
  tabatch.application.services.window_resolver
"""

from __future__ import annotations

import numpy as np

from tabatch.application.dto.indicator_result import IndicatorResult, ResultMeta
from tabatch.application.dto.output_window import OutputWindow
from tabatch.domain.entities import IndicatorDef


def package_result(
    definition: IndicatorDef,
    outputs: tuple[np.ndarray, ...],
    window: OutputWindow,
    meta: ResultMeta,
) -> IndicatorResult:
    """
    Copy the window of every output buffer into a fresh result.

    Args:
        definition: Definition declaring output names and count.
        outputs: Full-length buffers filled by the kernel.
        window: Valid range shared by every output channel.
        meta: Invocation metadata.
    Returns:
        IndicatorResult: Equal-length, non-aliased output series.
    Assumptions:
        Buffers follow the definition's declared output order.
    Raises:
        ValueError: If buffer count differs from the declared outputs.
    Side Effects:
        Allocates one array per output channel.
    """
    names = definition.output.names
    if len(outputs) != len(names):
        raise ValueError(
            f"{definition.indicator_id} declares {len(names)} outputs, got {len(outputs)}"
        )
    section = window.as_slice()
    values = tuple(buffer[section].copy() for buffer in outputs)
    return IndicatorResult(
        indicator_id=definition.indicator_id,
        names=names,
        values=values,
        window=window,
        meta=meta,
    )

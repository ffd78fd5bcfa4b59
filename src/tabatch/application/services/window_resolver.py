"""
Map a kernel-reported valid count onto the output window of full-length buffers.

Related: tabatch.application.dto.output_window,
  tabatch.domain.errors.insufficient_data
"""

from __future__ import annotations

from tabatch.application.dto.output_window import OutputWindow
from tabatch.domain.entities import RetCode
from tabatch.domain.errors import ComputationError, InsufficientData


def resolve_output_window(
    *,
    indicator_id: str,
    input_size: int,
    valid_count: int,
    lookback: int,
) -> OutputWindow:
    """
    Resolve the trailing valid window `[input_size - valid_count, input_size)`.

    Args:
        indicator_id: Catalog identifier, used in error payloads.
        input_size: Common length of the input series and output buffers.
        valid_count: Trailing valid samples reported by the kernel.
        lookback: Kernel lookback for the bound parameters.
    Returns:
        OutputWindow: Window covering exactly the kernel-reported valid range.
    Assumptions:
        Kernels write valid samples to the end of the buffers.
    Raises:
        InsufficientData: If `valid_count <= 0`.
        ComputationError: If the kernel reports more valid samples than the input holds.
    Side Effects:
        None.
    """
    if valid_count <= 0:
        raise InsufficientData(indicator_id=indicator_id, size=input_size, lookback=lookback)
    if valid_count > input_size:
        raise ComputationError(
            indicator_id=indicator_id,
            ret_code=RetCode.INTERNAL_ERROR,
            reason=f"valid_count={valid_count} exceeds input size {input_size}",
        )
    return OutputWindow(start=input_size - valid_count, end=input_size)

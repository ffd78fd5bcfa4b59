import pytest

from tabatch.application.services import resolve_output_window
from tabatch.domain.entities import RetCode
from tabatch.domain.errors import (
    ComputationError,
    IndicatorArgumentError,
    InsufficientData,
)


def test_window_covers_trailing_valid_range() -> None:
    """
    Verify the window is `[N - valid_count, N)`.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Kernels write valid samples at the end of the buffers.
    Raises:
        AssertionError: If bounds mismatch.
    Side Effects:
        None.
    """
    window = resolve_output_window(indicator_id="kama", input_size=100, valid_count=70, lookback=30)
    assert (window.start, window.end) == (30, 100)
    assert window.length == 70


def test_window_is_whole_buffer_when_everything_is_valid() -> None:
    window = resolve_output_window(indicator_id="add", input_size=10, valid_count=10, lookback=0)
    assert (window.start, window.end) == (0, 10)


@pytest.mark.parametrize("valid_count", [0, -1, -25])
def test_non_positive_valid_count_raises_insufficient_data(valid_count: int) -> None:
    """
    Verify `valid_count <= 0` raises InsufficientData with its payload.

    Args:
        valid_count: Kernel-reported valid sample count.
    Returns:
        None.
    Assumptions:
        `min_size` equals `lookback + 1`.
    Raises:
        AssertionError: If the error or its payload mismatch.
    Side Effects:
        None.
    """
    with pytest.raises(InsufficientData) as error_info:
        resolve_output_window(
            indicator_id="cdl_doji",
            input_size=5,
            valid_count=valid_count,
            lookback=10,
        )

    error = error_info.value
    assert error.indicator_id == "cdl_doji"
    assert error.size == 5
    assert error.lookback == 10
    assert error.min_size == 11
    assert list(error.details) == ["indicator_id", "size", "lookback", "min_size"]
    assert not isinstance(error, (IndicatorArgumentError, ComputationError))


def test_valid_count_above_input_size_is_a_kernel_misreport() -> None:
    with pytest.raises(ComputationError) as error_info:
        resolve_output_window(indicator_id="sma", input_size=10, valid_count=11, lookback=0)
    assert error_info.value.ret_code is RetCode.INTERNAL_ERROR

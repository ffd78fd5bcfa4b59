from __future__ import annotations

from enum import IntEnum


class RetCode(IntEnum):
    """
    Status code a kernel reports next to its valid sample count.

    Related: ...application.dto.kernel_report, ..errors.computation_error
    """

    SUCCESS = 0
    LIB_NOT_INITIALIZED = 1
    BAD_PARAM = 2
    ALLOC_ERROR = 3
    OUT_OF_RANGE_START_INDEX = 12
    OUT_OF_RANGE_END_INDEX = 13
    INVALID_HANDLE = 14
    INTERNAL_ERROR = 5000

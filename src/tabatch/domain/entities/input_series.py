from __future__ import annotations

from enum import Enum


class InputSeries(str, Enum):
    """
    Logical input series an indicator definition declares, in positional order.

    `REAL` is the generic single price series, `REAL0`/`REAL1` are the two operands
    of binary operators and statistic pairs, and `PERIODS` is the per-bar period
    series of the variable-period moving average.

    Related: .indicator_def, ...application.dto.price_bars
    """

    REAL = "real"
    REAL0 = "real0"
    REAL1 = "real1"
    PERIODS = "periods"
    OPEN = "open"
    HIGH = "high"
    LOW = "low"
    CLOSE = "close"
    VOLUME = "volume"

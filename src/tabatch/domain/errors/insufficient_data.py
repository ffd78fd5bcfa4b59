from __future__ import annotations

from collections import OrderedDict
from typing import Mapping


class InsufficientData(Exception):
    """
    Raised when the input is too short for the indicator to emit any valid value.

    Independent of `IndicatorArgumentError` and `ComputationError`; callers catch it
    separately to tell "not enough history yet" apart from real failures.

    Related: ...application.services.window_resolver
    """

    def __init__(self, *, indicator_id: str, size: int, lookback: int) -> None:
        """
        Build insufficient-data payload and message.

        Args:
            indicator_id: Catalog identifier of the invoked indicator.
            size: Common length of the supplied input series.
            lookback: Number of leading samples the kernel consumes before its first output.
        Returns:
            None.
        Assumptions:
            `lookback` comes from the kernel for the bound parameter set.
        Raises:
            None.
        Side Effects:
            None.
        """
        self.indicator_id = indicator_id
        self.size = int(size)
        self.lookback = int(lookback)
        self.min_size = self.lookback + 1
        super().__init__(
            f"insufficient data for {indicator_id}: "
            f"size={self.size}, lookback={self.lookback}, min_size={self.min_size}"
        )

    @property
    def details(self) -> Mapping[str, str | int]:
        return OrderedDict(
            [
                ("indicator_id", self.indicator_id),
                ("size", self.size),
                ("lookback", self.lookback),
                ("min_size", self.min_size),
            ]
        )

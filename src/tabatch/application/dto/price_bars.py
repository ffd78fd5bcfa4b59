from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from tabatch.domain.entities import InputSeries
from tabatch.domain.errors import IndicatorArgumentError, MissingInputSeriesError


@dataclass(frozen=True, slots=True)
class PriceBars:
    """
    Dense aligned OHLCV arrays for price-bar invocation.

    Related: ..services.invocation_harness, ...domain.entities.input_series
    """

    open: np.ndarray
    high: np.ndarray
    low: np.ndarray
    close: np.ndarray
    volume: np.ndarray

    def __post_init__(self) -> None:
        """
        Normalize arrays to contiguous float64 and validate alignment.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            All arrays describe the same bar timeline and are aligned by index.
        Raises:
            IndicatorArgumentError: If an array is not numeric, not 1-D, or its
                length differs from `open`.
        Side Effects:
            Replaces fields with contiguous float64 arrays.
        """
        length: int | None = None
        for name in ("open", "high", "low", "close", "volume"):
            values = _as_f64(name, getattr(self, name))
            if length is None:
                length = values.shape[0]
            elif values.shape[0] != length:
                raise IndicatorArgumentError(
                    f"{name} length must match baseline length {length}, got {values.shape[0]}"
                )
            object.__setattr__(self, name, values)

    def __len__(self) -> int:
        return int(self.close.shape[0])

    def series(self, kind: InputSeries) -> np.ndarray:
        """
        Return the bar field that feeds a declared input series.

        Args:
            kind: Declared input series of an indicator definition.
        Returns:
            np.ndarray: Matching bar field; `close` for the generic `REAL` input.
        Assumptions:
            None.
        Raises:
            MissingInputSeriesError: If `kind` has no bar counterpart.
        Side Effects:
            None.
        """
        field = _FIELDS.get(kind)
        if field is None:
            raise MissingInputSeriesError(
                f"input series {kind.value} is not available from price bars"
            )
        return getattr(self, field)


_FIELDS = {
    InputSeries.REAL: "close",
    InputSeries.OPEN: "open",
    InputSeries.HIGH: "high",
    InputSeries.LOW: "low",
    InputSeries.CLOSE: "close",
    InputSeries.VOLUME: "volume",
}


def _as_f64(name: str, values: npt.ArrayLike) -> np.ndarray:
    try:
        array = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as error:
        raise IndicatorArgumentError(f"{name} must be numeric") from error
    if array.ndim != 1:
        raise IndicatorArgumentError(f"{name} must be a 1D array")
    return np.ascontiguousarray(array)

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from tabatch.domain.entities import IndicatorId

from .output_window import OutputWindow


@dataclass(frozen=True, slots=True)
class ResultMeta:
    """
    Invocation metadata carried next to trimmed outputs.

    Related: .indicator_result, ..services.invocation_harness
    """

    size: int
    lookback: int
    compute_ms: float | None = None

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("ResultMeta requires size > 0")
        if self.lookback < 0:
            raise ValueError("ResultMeta requires lookback >= 0")
        if self.compute_ms is not None and self.compute_ms < 0:
            raise ValueError("ResultMeta compute_ms must be >= 0 when provided")


@dataclass(frozen=True, slots=True)
class IndicatorResult:
    """
    Trimmed, caller-owned indicator outputs of one invocation.

    Related: ..services.result_packager, .output_window
    """

    indicator_id: IndicatorId
    names: tuple[str, ...]
    values: tuple[np.ndarray, ...]
    window: OutputWindow
    meta: ResultMeta

    def __post_init__(self) -> None:
        """
        Validate output arity and cross-output length consistency.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Every channel was trimmed with the same window.
        Raises:
            ValueError: If names and values disagree in count, a value is not a 1-D
                ndarray, or channel lengths differ from the window length.
        Side Effects:
            None.
        """
        if self.indicator_id is None:  # type: ignore[truthy-bool]
            raise ValueError("IndicatorResult requires indicator_id")
        if not 1 <= len(self.values) <= 3:
            raise ValueError("IndicatorResult requires one to three output series")
        if len(self.names) != len(self.values):
            raise ValueError("IndicatorResult names and values must have the same count")

        for name, series in zip(self.names, self.values):
            try:
                if series.ndim != 1:
                    raise ValueError(f"IndicatorResult output {name} must be 1D")
            except AttributeError as error:
                raise ValueError(
                    f"IndicatorResult output {name} must be a numpy ndarray"
                ) from error
            if series.shape[0] != self.window.length:
                raise ValueError(
                    f"IndicatorResult output {name} length {series.shape[0]} "
                    f"must equal window length {self.window.length}"
                )

    def __len__(self) -> int:
        return self.window.length

    def __getitem__(self, name: str) -> np.ndarray:
        for output_name, series in zip(self.names, self.values):
            if output_name == name:
                return series
        raise KeyError(name)

    def unpack(self) -> np.ndarray | tuple[np.ndarray, ...]:
        """
        Return a single series for single-output indicators, a tuple otherwise.

        Args:
            None.
        Returns:
            np.ndarray | tuple[np.ndarray, ...]: Output series in declared order.
        Assumptions:
            None.
        Raises:
            None.
        Side Effects:
            None.
        """
        if len(self.values) == 1:
            return self.values[0]
        return self.values

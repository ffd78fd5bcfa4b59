from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OutputWindow:
    """
    Half-open range `[start, end)` of valid samples inside full-length output buffers.

    Related: ..services.window_resolver, ..services.result_packager
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """
        Validate window bounds.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Windows are non-empty; empty results are signaled by `InsufficientData`.
        Raises:
            ValueError: If `start` is negative or `end <= start`.
        Side Effects:
            None.
        """
        if self.start < 0:
            raise ValueError("OutputWindow requires start >= 0")
        if self.end <= self.start:
            raise ValueError("OutputWindow requires end > start")

    @property
    def length(self) -> int:
        return self.end - self.start

    def as_slice(self) -> slice:
        return slice(self.start, self.end)

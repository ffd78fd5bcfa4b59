from __future__ import annotations

from collections import OrderedDict
from typing import Mapping

from .indicator_argument_error import IndicatorArgumentError


class ComputeBudgetExceeded(IndicatorArgumentError):
    """
    Raised when input plus output buffers of one invocation exceed the configured budget.

    Related: ...application.services.invocation_harness,
      tabatch.platform.config.runtime_config
    """

    def __init__(
        self,
        *,
        indicator_id: str,
        size: int,
        buffers: int,
        bytes_total_est: int,
        max_compute_bytes_total: int,
    ) -> None:
        """
        Build deterministic budget-exceeded payload and message.

        Args:
            indicator_id: Catalog identifier of the invoked indicator.
            size: Input series length.
            buffers: Count of input plus output buffers.
            bytes_total_est: Estimated bytes held by all buffers.
            max_compute_bytes_total: Configured maximum.
        Returns:
            None.
        Assumptions:
            All values are non-negative integers produced by the harness guard.
        Raises:
            None.
        Side Effects:
            Stores ordered error details.
        """
        self._details: Mapping[str, int | str] = OrderedDict(
            [
                ("indicator_id", indicator_id),
                ("size", int(size)),
                ("buffers", int(buffers)),
                ("bytes_total_est", int(bytes_total_est)),
                ("max_compute_bytes_total", int(max_compute_bytes_total)),
            ]
        )
        message = (
            "compute budget exceeded: "
            f"total_est={bytes_total_est} > max_compute_bytes_total={max_compute_bytes_total}"
        )
        super().__init__(message)

    @property
    def details(self) -> Mapping[str, int | str]:
        """
        Return stable ordered details payload for diagnostics.

        Args:
            None.
        Returns:
            Mapping[str, int | str]: Deterministic details mapping.
        Assumptions:
            Mapping keys order is preserved for predictable error rendering.
        Raises:
            None.
        Side Effects:
            None.
        """
        return self._details

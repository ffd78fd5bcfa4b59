from __future__ import annotations

from tabatch.domain.entities.ret_code import RetCode


class ComputationError(RuntimeError):
    """
    Raised when a kernel reports a non-success status or fails while computing.

    Related: ..entities.ret_code, ...application.services.invocation_harness
    """

    def __init__(self, *, indicator_id: str, ret_code: RetCode, reason: str | None = None) -> None:
        """
        Build computation failure message.

        Args:
            indicator_id: Catalog identifier of the invoked indicator.
            ret_code: Kernel status code describing the failure.
            reason: Optional human-readable detail.
        Returns:
            None.
        Assumptions:
            `ret_code` is never `RetCode.SUCCESS`.
        Raises:
            None.
        Side Effects:
            None.
        """
        self.indicator_id = indicator_id
        self.ret_code = ret_code
        message = f"{indicator_id} failed with {ret_code.name} ({int(ret_code)})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

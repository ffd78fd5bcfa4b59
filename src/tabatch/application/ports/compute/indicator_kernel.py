from __future__ import annotations

from typing import Protocol

import numpy as np

from tabatch.application.dto.kernel_report import KernelReport
from tabatch.application.dto.parameter_set import ParameterSet


class IndicatorKernel(Protocol):
    """
    Port for one indicator's numeric routine.

    Related:
      - src/tabatch/application/dto/kernel_descriptor.py
      - src/tabatch/application/services/invocation_harness.py
      - src/tabatch/adapters/outbound/compute_numba/kernel_table.py
    """

    def lookback(self, params: ParameterSet) -> int:
        """
        Return how many leading samples the kernel consumes before its first output.

        Args:
            params: Bound parameter set.
        Returns:
            int: Non-negative lookback.
        Assumptions:
            Parameters have already passed domain validation.
        Raises:
            None.
        Side Effects:
            None.
        """
        ...

    def compute(
        self,
        inputs: tuple[np.ndarray, ...],
        params: ParameterSet,
        outputs: tuple[np.ndarray, ...],
    ) -> KernelReport:
        """
        Fill full-length output buffers and report the trailing valid count.

        Args:
            inputs: Equal-length contiguous float64 input series in declared order.
            params: Bound parameter set.
            outputs: Preallocated full-length buffers, one per declared output.
        Returns:
            KernelReport: Valid count aligned to the end of the buffers, plus status.
        Assumptions:
            Inputs are read-only for the kernel.
        Raises:
            ArithmeticError: If the numeric routine fails unexpectedly.
        Side Effects:
            Writes into `outputs`.
        """
        ...

from __future__ import annotations

from typing import Protocol

from tabatch.application.dto.kernel_descriptor import KernelDescriptor
from tabatch.domain.entities import IndicatorDef, IndicatorId


class IndicatorCatalog(Protocol):
    """
    Port for listing indicator definitions and resolving kernel descriptors.

    Related:
      - src/tabatch/domain/entities/indicator_def.py
      - src/tabatch/domain/errors/unknown_indicator_error.py
      - src/tabatch/adapters/outbound/registry/static_indicator_catalog.py
    """

    def list_defs(self) -> tuple[IndicatorDef, ...]:
        """
        Return all indicator definitions available in this catalog.

        Args:
            None.
        Returns:
            tuple[IndicatorDef, ...]: Stable tuple of registered definitions.
        Assumptions:
            Returned definitions are immutable and safe to reuse across calls.
        Raises:
            None.
        Side Effects:
            None.
        """
        ...

    def get(self, indicator_id: IndicatorId) -> KernelDescriptor:
        """
        Resolve one kernel descriptor by identifier.

        Args:
            indicator_id: Indicator identifier to resolve.
        Returns:
            KernelDescriptor: Matching definition plus kernel.
        Assumptions:
            Catalog identity space is unique and deterministic.
        Raises:
            UnknownIndicatorError: If the indicator is not present in the catalog.
        Side Effects:
            None.
        """
        ...

"""
Indicator catalog adapter backed by hard definitions and the kernel table.

Related: tabatch.application.ports.registry.indicator_catalog,
  tabatch.domain.definitions,
  tabatch.adapters.outbound.compute_numba.kernel_table
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from tabatch.application.dto import KernelDescriptor
from tabatch.application.ports.compute import IndicatorKernel
from tabatch.application.ports.registry import IndicatorCatalog
from tabatch.domain.entities import IndicatorDef, IndicatorId
from tabatch.domain.errors import UnknownIndicatorError


class StaticIndicatorCatalog(IndicatorCatalog):
    """
    Read-only indicator catalog with fail-fast definition/kernel consistency checks.
    """

    def __init__(
        self,
        *,
        defs: tuple[IndicatorDef, ...],
        kernels: Mapping[str, IndicatorKernel],
    ) -> None:
        """
        Pair every definition with its kernel and build deterministic lookups.

        Args:
            defs: Hard indicator definitions.
            kernels: Kernel implementations keyed by indicator id.
        Returns:
            None.
        Assumptions:
            Definition ids and kernel keys describe the same identity space.
        Raises:
            ValueError: If definitions repeat an id, a definition has no kernel, or a
                kernel has no definition.
        Side Effects:
            None.
        """
        descriptors: dict[str, KernelDescriptor] = {}
        for definition in defs:
            indicator_id = definition.indicator_id.value
            if indicator_id in descriptors:
                raise ValueError(f"duplicate indicator_id in hard defs: {indicator_id}")
            kernel = kernels.get(indicator_id)
            if kernel is None:
                raise ValueError(f"no kernel registered for indicator_id: {indicator_id}")
            descriptors[indicator_id] = KernelDescriptor(definition=definition, kernel=kernel)

        orphaned = sorted(set(kernels) - set(descriptors))
        if orphaned:
            raise ValueError(f"kernels without definitions: {', '.join(orphaned)}")

        self._defs = tuple(defs)
        self._descriptors: Mapping[str, KernelDescriptor] = MappingProxyType(descriptors)

    def __len__(self) -> int:
        return len(self._defs)

    def __contains__(self, indicator_id: object) -> bool:
        if isinstance(indicator_id, IndicatorId):
            return indicator_id.value in self._descriptors
        return indicator_id in self._descriptors

    def list_defs(self) -> tuple[IndicatorDef, ...]:
        return self._defs

    def get(self, indicator_id: IndicatorId) -> KernelDescriptor:
        """
        Resolve one kernel descriptor by id.

        Args:
            indicator_id: Target indicator identifier.
        Returns:
            KernelDescriptor: Matching definition plus kernel.
        Assumptions:
            `indicator_id` is normalized by domain value-object invariants.
        Raises:
            UnknownIndicatorError: If indicator id is not registered.
        Side Effects:
            None.
        """
        descriptor = self._descriptors.get(indicator_id.value)
        if descriptor is None:
            raise UnknownIndicatorError(f"unknown indicator: {indicator_id.value!r}")
        return descriptor


__all__ = ["StaticIndicatorCatalog"]

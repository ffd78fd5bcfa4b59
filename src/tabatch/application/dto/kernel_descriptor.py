from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tabatch.domain.entities import IndicatorDef, IndicatorId

if TYPE_CHECKING:
    from tabatch.application.ports.compute.indicator_kernel import IndicatorKernel


@dataclass(frozen=True, slots=True)
class KernelDescriptor:
    """
    Catalog entry binding an indicator definition to its kernel.

    Related: ..ports.compute.indicator_kernel, ..ports.registry.indicator_catalog
    """

    definition: IndicatorDef
    kernel: IndicatorKernel

    def __post_init__(self) -> None:
        if self.definition is None:  # type: ignore[truthy-bool]
            raise ValueError("KernelDescriptor requires definition")
        if self.kernel is None:  # type: ignore[truthy-bool]
            raise ValueError("KernelDescriptor requires kernel")

    @property
    def indicator_id(self) -> IndicatorId:
        return self.definition.indicator_id

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .indicator_group import IndicatorGroup
from .indicator_id import IndicatorId
from .input_series import InputSeries
from .output_spec import OutputSpec
from .param_def import ParamDef


@dataclass(frozen=True, slots=True)
class IndicatorDef:
    """
    Full domain definition of an indicator: inputs, parameters with defaults, outputs.

    Related: .param_def, .output_spec, ...application.dto.kernel_descriptor
    """

    indicator_id: IndicatorId
    title: str
    group: IndicatorGroup
    inputs: tuple[InputSeries, ...]
    params: tuple[ParamDef, ...]
    output: OutputSpec

    def __post_init__(self) -> None:
        """
        Validate indicator definition consistency.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Input series may repeat only for generic operands, never for OHLCV fields.
        Raises:
            ValueError: If title is blank, inputs are empty or duplicated, or parameter
                names collide.
        Side Effects:
            Normalizes title by stripping spaces.
        """
        if self.indicator_id is None:  # type: ignore[truthy-bool]
            raise ValueError("IndicatorDef requires indicator_id")
        if self.output is None:  # type: ignore[truthy-bool]
            raise ValueError("IndicatorDef requires output")

        normalized_title = self.title.strip()
        object.__setattr__(self, "title", normalized_title)
        if not normalized_title:
            raise ValueError("IndicatorDef requires a non-empty title")

        if len(self.inputs) == 0:
            raise ValueError("IndicatorDef requires at least one input series")
        if len(set(self.inputs)) != len(self.inputs):
            raise ValueError("IndicatorDef input series must be unique")

        param_names: list[str] = []
        for param in self.params:
            param_names.append(param.name)
        if len(set(param_names)) != len(param_names):
            raise ValueError("IndicatorDef parameter names must be unique")

    def param(self, name: str) -> ParamDef:
        """
        Return parameter declaration by name.

        Args:
            name: Parameter name.
        Returns:
            ParamDef: Matching declaration.
        Assumptions:
            Names are unique per definition.
        Raises:
            KeyError: If the definition declares no such parameter.
        Side Effects:
            None.
        """
        for param in self.params:
            if param.name == name:
                return param
        raise KeyError(name)

    @property
    def defaults(self) -> Mapping[str, float | int | str]:
        """
        Return read-only mapping of parameter defaults in declaration order.
        """
        return MappingProxyType(
            {param.name: param.default for param in self.params}  # type: ignore[misc]
        )

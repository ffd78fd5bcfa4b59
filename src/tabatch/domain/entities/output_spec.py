from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_MAX_OUTPUTS = 3


class OutputDType(str, Enum):
    """
    Element type of indicator output buffers.

    Related: .output_spec
    """

    FLOAT64 = "float64"
    INT32 = "int32"


@dataclass(frozen=True, slots=True)
class OutputSpec:
    """
    Output declaration for an indicator definition: one, two or three named channels
    sharing a single element type.

    Related: .indicator_def, ...application.dto.indicator_result
    """

    names: tuple[str, ...]
    dtype: OutputDType = OutputDType.FLOAT64

    def __post_init__(self) -> None:
        """
        Validate output names.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Each output component name is unique and non-empty.
        Raises:
            ValueError: If the name count is outside 1..3 or a name is blank or duplicated.
        Side Effects:
            Normalizes names by stripping surrounding spaces.
        """
        if not self.names:
            raise ValueError("OutputSpec requires at least one output name")
        if len(self.names) > _MAX_OUTPUTS:
            raise ValueError(f"OutputSpec supports at most {_MAX_OUTPUTS} outputs")

        normalized: list[str] = []
        for name in self.names:
            value = name.strip()
            if not value:
                raise ValueError("OutputSpec names must be non-empty")
            normalized.append(value)

        if len(set(normalized)) != len(normalized):
            raise ValueError("OutputSpec names must be unique")

        object.__setattr__(self, "names", tuple(normalized))

    @property
    def arity(self) -> int:
        return len(self.names)

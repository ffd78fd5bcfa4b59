from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from tabatch.domain.entities import MAType


class ParameterSet(Mapping[str, float | int | str]):
    """
    Read-only bound parameter values for one invocation, defaults already applied.

    Related: ..services.parameter_binder, ..ports.compute.indicator_kernel
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, float | int | str] | None = None) -> None:
        self._values = MappingProxyType(dict(values or {}))

    def __getitem__(self, name: str) -> float | int | str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ParameterSet({dict(self._values)!r})"

    def get_int(self, name: str) -> int:
        """
        Return an integer parameter.

        Args:
            name: Parameter name.
        Returns:
            int: Bound integer value.
        Assumptions:
            The binder stored an `int` for integer-kind parameters.
        Raises:
            KeyError: If the parameter is not bound.
            TypeError: If the bound value is an enum member name.
        Side Effects:
            None.
        """
        value = self._values[name]
        if isinstance(value, str):
            raise TypeError(f"parameter {name} is not numeric")
        return int(value)

    def get_float(self, name: str) -> float:
        value = self._values[name]
        if isinstance(value, str):
            raise TypeError(f"parameter {name} is not numeric")
        return float(value)

    def get_ma_type(self, name: str = "ma_type") -> MAType:
        return MAType(self._values[name])

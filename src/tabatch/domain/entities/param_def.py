from __future__ import annotations

from dataclasses import dataclass

from .param_kind import ParamKind


@dataclass(frozen=True, slots=True)
class ParamDef:
    """
    Domain declaration of a single indicator parameter and its default.

    Related: .param_kind, ...application.services.parameter_binder
    """

    name: str
    kind: ParamKind
    hard_min: float | int | None = None
    hard_max: float | int | None = None
    enum_values: tuple[str, ...] | None = None
    default: float | int | str | None = None

    def __post_init__(self) -> None:
        """
        Validate parameter definition invariants.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Enum and numeric parameter families are mutually exclusive.
        Raises:
            ValueError: If name is invalid or kind-specific invariants are violated.
        Side Effects:
            Normalizes `name` and enum values by stripping spaces.
        """
        normalized_name = self.name.strip()
        object.__setattr__(self, "name", normalized_name)
        if not normalized_name:
            raise ValueError("ParamDef requires a non-empty name")
        if not normalized_name.isidentifier():
            raise ValueError(f"ParamDef name must be a valid identifier: {normalized_name!r}")

        if (
            self.hard_min is not None
            and self.hard_max is not None
            and self.hard_min > self.hard_max
        ):
            raise ValueError("ParamDef requires hard_min <= hard_max")

        if self.default is None:
            raise ValueError("ParamDef requires a default value")

        if self.kind is ParamKind.ENUM:
            self._validate_enum_param()
            return

        self._validate_numeric_param()

    def _validate_numeric_param(self) -> None:
        """
        Validate numeric parameter invariants.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Integer kinds carry integer defaults; float kinds accept any real default.
        Raises:
            ValueError: If numeric constraints are violated.
        Side Effects:
            Normalizes float defaults to `float`.
        """
        if self.enum_values is not None:
            raise ValueError("Numeric ParamDef must not define enum_values")
        if isinstance(self.default, (bool, str)):
            raise ValueError("Numeric ParamDef default must be a number")

        if self.kind is ParamKind.INT and not isinstance(self.default, int):
            raise ValueError("Integer ParamDef default must be an int")
        if self.kind is ParamKind.FLOAT:
            object.__setattr__(self, "default", float(self.default))  # type: ignore[arg-type]

        if self.hard_min is not None and self.default < self.hard_min:  # type: ignore[operator]
            raise ValueError("ParamDef default must be >= hard_min")
        if self.hard_max is not None and self.default > self.hard_max:  # type: ignore[operator]
            raise ValueError("ParamDef default must be <= hard_max")

    def _validate_enum_param(self) -> None:
        """
        Validate enum parameter invariants.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Enum kind disallows numeric bounds and requires non-empty enum values.
        Raises:
            ValueError: If enum constraints are violated.
        Side Effects:
            Normalizes enum values by stripping spaces and lowercasing.
        """
        if self.hard_min is not None or self.hard_max is not None:
            raise ValueError("Enum ParamDef does not allow hard_min or hard_max")

        if self.enum_values is None or len(self.enum_values) == 0:
            raise ValueError("Enum ParamDef requires non-empty enum_values")

        normalized: list[str] = []
        for raw in self.enum_values:
            value = raw.strip().lower()
            if not value:
                raise ValueError("Enum ParamDef values must be non-empty strings")
            normalized.append(value)

        if len(set(normalized)) != len(normalized):
            raise ValueError("Enum ParamDef values must be unique")

        if not isinstance(self.default, str) or self.default not in normalized:
            raise ValueError("Enum ParamDef default must belong to enum_values")

        object.__setattr__(self, "enum_values", tuple(normalized))

"""
Bind caller parameter overrides to an indicator definition.

Related: tabatch.domain.entities.param_def,
  tabatch.application.dto.parameter_set
"""

from __future__ import annotations

import math
from enum import Enum
from numbers import Integral, Real
from typing import Any, Mapping

from tabatch.application.dto.parameter_set import ParameterSet
from tabatch.domain.entities import IndicatorDef, ParamDef, ParamKind
from tabatch.domain.errors import IndicatorArgumentError


def bind_parameters(
    definition: IndicatorDef,
    overrides: Mapping[str, Any] | None = None,
) -> ParameterSet:
    """
    Apply defaults and validate overrides against declared parameter domains.

    Args:
        definition: Indicator definition declaring parameters and defaults.
        overrides: Caller-supplied values by parameter name; omitted names use defaults.
    Returns:
        ParameterSet: Complete bound parameter set in declaration order.
    Assumptions:
        Definitions are validated at construction, so defaults are always in-domain.
    Raises:
        IndicatorArgumentError: If a name is unknown, a value has the wrong type, or a
            value falls outside its declared bounds or enum members.
    Side Effects:
        None.
    """
    supplied = dict(overrides or {})
    declared = {param.name for param in definition.params}
    unknown = sorted(name for name in supplied if name not in declared)
    if unknown:
        raise IndicatorArgumentError(
            f"{definition.indicator_id} does not accept parameter(s): {', '.join(unknown)}"
        )

    bound: dict[str, float | int | str] = {}
    for param in definition.params:
        if param.name in supplied and supplied[param.name] is not None:
            bound[param.name] = _coerce(definition, param, supplied[param.name])
        else:
            bound[param.name] = param.default  # type: ignore[assignment]
    return ParameterSet(bound)


def _coerce(definition: IndicatorDef, param: ParamDef, raw: Any) -> float | int | str:
    label = f"{definition.indicator_id}.{param.name}"

    if param.kind is ParamKind.ENUM:
        value = raw.value if isinstance(raw, Enum) else raw
        if not isinstance(value, str):
            raise IndicatorArgumentError(f"{label} must be one of {param.enum_values}")
        normalized = value.strip().lower()
        if normalized not in (param.enum_values or ()):
            raise IndicatorArgumentError(
                f"{label} must be one of {param.enum_values}, got {value!r}"
            )
        return normalized

    if isinstance(raw, bool) or not isinstance(raw, Real):
        raise IndicatorArgumentError(f"{label} must be a number, got {type(raw).__name__}")

    number: float | int
    if param.kind is ParamKind.INT:
        if isinstance(raw, Integral):
            number = int(raw)
        elif float(raw).is_integer():
            number = int(raw)
        else:
            raise IndicatorArgumentError(f"{label} must be an integer, got {raw!r}")
    else:
        number = float(raw)
        if math.isnan(number):
            raise IndicatorArgumentError(f"{label} must not be NaN")

    if param.hard_min is not None and number < param.hard_min:
        raise IndicatorArgumentError(f"{label} must be >= {param.hard_min}, got {number}")
    if param.hard_max is not None and number > param.hard_max:
        raise IndicatorArgumentError(f"{label} must be <= {param.hard_max}, got {number}")
    return number

"""
Shared builders for hard indicator definitions.

Related: tabatch.domain.entities.indicator_def,
  tabatch.domain.entities.param_def
"""

from __future__ import annotations

from tabatch.domain.entities import (
    MA_TYPE_VALUES,
    IndicatorDef,
    IndicatorGroup,
    IndicatorId,
    InputSeries,
    MAType,
    OutputDType,
    OutputSpec,
    ParamDef,
    ParamKind,
)

PERIOD_MAX = 100_000
REAL_LIMIT = 3.0e37

REAL = (InputSeries.REAL,)
REAL_PAIR = (InputSeries.REAL0, InputSeries.REAL1)
HL = (InputSeries.HIGH, InputSeries.LOW)
HLC = (InputSeries.HIGH, InputSeries.LOW, InputSeries.CLOSE)
HLCV = (InputSeries.HIGH, InputSeries.LOW, InputSeries.CLOSE, InputSeries.VOLUME)
OHLC = (InputSeries.OPEN, InputSeries.HIGH, InputSeries.LOW, InputSeries.CLOSE)


def period(name: str = "time_period", *, default: int, minimum: int = 2) -> ParamDef:
    """
    Build integer look-back period parameter.

    Args:
        name: Parameter name.
        default: Default period.
        minimum: Inclusive hard lower bound (1 for indicators defined on one sample).
    Returns:
        ParamDef: Integer parameter bounded by `minimum..PERIOD_MAX`.
    Assumptions:
        None.
    Raises:
        ValueError: If ParamDef invariants are violated.
    Side Effects:
        None.
    """
    return ParamDef(
        name=name,
        kind=ParamKind.INT,
        hard_min=minimum,
        hard_max=PERIOD_MAX,
        default=default,
    )


def real(
    name: str,
    *,
    default: float,
    minimum: float = -REAL_LIMIT,
    maximum: float = REAL_LIMIT,
) -> ParamDef:
    return ParamDef(
        name=name,
        kind=ParamKind.FLOAT,
        hard_min=minimum,
        hard_max=maximum,
        default=default,
    )


def ma_type(name: str = "ma_type", *, default: MAType = MAType.EMA) -> ParamDef:
    return ParamDef(
        name=name,
        kind=ParamKind.ENUM,
        enum_values=MA_TYPE_VALUES,
        default=default.value,
    )


def indicator(
    indicator_id: str,
    title: str,
    *,
    group: IndicatorGroup,
    inputs: tuple[InputSeries, ...],
    params: tuple[ParamDef, ...] = (),
    outputs: tuple[str, ...] = ("real",),
    dtype: OutputDType = OutputDType.FLOAT64,
) -> IndicatorDef:
    """
    Build one immutable indicator definition.

    Args:
        indicator_id: Catalog identifier.
        title: Human-readable title.
        group: Functional family.
        inputs: Declared input series in positional order.
        params: Parameter declarations in keyword order.
        outputs: Output channel names in result order.
        dtype: Element type of all output channels.
    Returns:
        IndicatorDef: Validated definition.
    Assumptions:
        None.
    Raises:
        ValueError: If any entity invariant is violated.
    Side Effects:
        None.
    """
    return IndicatorDef(
        indicator_id=IndicatorId(indicator_id),
        title=title,
        group=group,
        inputs=inputs,
        params=params,
        output=OutputSpec(names=outputs, dtype=dtype),
    )


def sorted_defs(items: tuple[IndicatorDef, ...]) -> tuple[IndicatorDef, ...]:
    return tuple(sorted(items, key=lambda item: item.indicator_id.value))

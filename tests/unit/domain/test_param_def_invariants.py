import pytest

from tabatch.domain.entities import (
    MA_TYPE_VALUES,
    IndicatorId,
    MAType,
    OutputDType,
    OutputSpec,
    ParamDef,
    ParamKind,
)


def test_param_def_accepts_numeric_bounds_and_default() -> None:
    """
    Verify valid numeric parameter invariants.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        INT parameters accept inclusive hard bounds around the default.
    Raises:
        AssertionError: If construction unexpectedly fails or fields mismatch.
    Side Effects:
        None.
    """
    param = ParamDef(
        name=" time_period ",
        kind=ParamKind.INT,
        hard_min=2,
        hard_max=100_000,
        default=30,
    )
    assert param.name == "time_period"
    assert param.default == 30


def test_param_def_rejects_invalid_numeric_range() -> None:
    with pytest.raises(ValueError):
        ParamDef(name="time_period", kind=ParamKind.INT, hard_min=20, hard_max=10, default=14)


def test_param_def_rejects_default_outside_bounds() -> None:
    """
    Verify defaults must sit inside the declared hard bounds.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Bounds are inclusive.
    Raises:
        AssertionError: If ValueError is not raised.
    Side Effects:
        None.
    """
    with pytest.raises(ValueError):
        ParamDef(name="time_period", kind=ParamKind.INT, hard_min=2, hard_max=10, default=1)
    with pytest.raises(ValueError):
        ParamDef(name="penetration", kind=ParamKind.FLOAT, hard_min=0.0, default=-0.1)


def test_param_def_requires_int_default_for_int_kind() -> None:
    with pytest.raises(ValueError):
        ParamDef(name="time_period", kind=ParamKind.INT, default=14.5)


def test_param_def_normalizes_float_default() -> None:
    param = ParamDef(name="deviations", kind=ParamKind.FLOAT, default=2)
    assert isinstance(param.default, float)
    assert param.default == 2.0


def test_param_def_enum_requires_member_default() -> None:
    """
    Verify enum parameters reject bounds and defaults outside their members.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Enum members are normalized to lowercase.
    Raises:
        AssertionError: If invalid enum declarations are accepted.
    Side Effects:
        None.
    """
    param = ParamDef(
        name="ma_type",
        kind=ParamKind.ENUM,
        enum_values=(" SMA ", "EMA"),
        default="ema",
    )
    assert param.enum_values == ("sma", "ema")

    with pytest.raises(ValueError):
        ParamDef(name="ma_type", kind=ParamKind.ENUM, enum_values=("sma",), default="ema")
    with pytest.raises(ValueError):
        ParamDef(
            name="ma_type",
            kind=ParamKind.ENUM,
            enum_values=("sma",),
            hard_min=0,
            default="sma",
        )
    with pytest.raises(ValueError):
        ParamDef(name="ma_type", kind=ParamKind.ENUM, enum_values=("sma", "SMA"), default="sma")


def test_param_def_rejects_non_identifier_name() -> None:
    with pytest.raises(ValueError):
        ParamDef(name="time period", kind=ParamKind.INT, default=5)


def test_output_spec_limits_arity_and_names() -> None:
    """
    Verify output declarations hold one to three unique names.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        None.
    Raises:
        AssertionError: If invalid output declarations are accepted.
    Side Effects:
        None.
    """
    spec = OutputSpec(names=("upper_band", "middle_band", "lower_band"))
    assert spec.arity == 3
    assert spec.dtype is OutputDType.FLOAT64

    with pytest.raises(ValueError):
        OutputSpec(names=())
    with pytest.raises(ValueError):
        OutputSpec(names=("a", "b", "c", "d"))
    with pytest.raises(ValueError):
        OutputSpec(names=("real", "real"))


def test_indicator_id_normalizes_and_validates() -> None:
    assert IndicatorId("  SMA ").value == "sma"
    assert IndicatorId.of("cdl_doji") == IndicatorId("cdl_doji")
    with pytest.raises(ValueError):
        IndicatorId("")
    with pytest.raises(ValueError):
        IndicatorId("sma-30")


def test_ma_type_codes_follow_declaration_order() -> None:
    assert [member.code for member in MAType] == list(range(9))
    assert MAType.SMA.code == 0
    assert MAType.EMA.code == 1
    assert MAType.T3.code == 8
    assert MA_TYPE_VALUES == ("sma", "ema", "wma", "dema", "tema", "trima", "kama", "mama", "t3")

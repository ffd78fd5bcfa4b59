from collections import Counter

from tabatch.domain.definitions import all_defs
from tabatch.domain.entities import (
    IndicatorGroup,
    InputSeries,
    OutputDType,
    ParamKind,
)

_PENETRATION_DEFAULTS = {
    "cdl_abandoned_baby": 0.3,
    "cdl_dark_cloud_cover": 0.5,
    "cdl_evening_doji_star": 0.3,
    "cdl_evening_star": 0.3,
    "cdl_mat_hold": 0.5,
    "cdl_morning_doji_star": 0.3,
    "cdl_morning_star": 0.3,
}


def test_all_defs_have_unique_ids() -> None:
    """
    Verify the hard definition set has no duplicate identifiers.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        `all_defs()` concatenates every group module.
    Raises:
        AssertionError: If any indicator id repeats.
    Side Effects:
        None.
    """
    ids = [definition.indicator_id.value for definition in all_defs()]
    duplicates = [item for item, count in Counter(ids).items() if count > 1]
    assert duplicates == []
    assert len(ids) == 158


def test_group_sizes_match_catalog_layout() -> None:
    counts = Counter(definition.group for definition in all_defs())
    assert counts[IndicatorGroup.MATH_TRANSFORM] == 15
    assert counts[IndicatorGroup.MATH_OPERATORS] == 11
    assert counts[IndicatorGroup.OVERLAP_STUDIES] == 17
    assert counts[IndicatorGroup.MOMENTUM] == 30
    assert counts[IndicatorGroup.VOLUME] == 3
    assert counts[IndicatorGroup.VOLATILITY] == 3
    assert counts[IndicatorGroup.PRICE_TRANSFORM] == 4
    assert counts[IndicatorGroup.CYCLE] == 5
    assert counts[IndicatorGroup.STATISTIC] == 9
    assert counts[IndicatorGroup.PATTERN_RECOGNITION] == 61


def test_pattern_definitions_read_ohlc_and_emit_int32() -> None:
    """
    Verify candlestick detectors share the OHLC input contract and int32 output.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Only star, abandoned-baby, dark-cloud and mat-hold detectors take parameters.
    Raises:
        AssertionError: If a pattern definition deviates from the shared contract.
    Side Effects:
        None.
    """
    patterns = [
        definition
        for definition in all_defs()
        if definition.group is IndicatorGroup.PATTERN_RECOGNITION
    ]
    for definition in patterns:
        assert definition.indicator_id.value.startswith("cdl_")
        assert definition.inputs == (
            InputSeries.OPEN,
            InputSeries.HIGH,
            InputSeries.LOW,
            InputSeries.CLOSE,
        )
        assert definition.output.dtype is OutputDType.INT32
        assert definition.output.arity == 1

    with_params = {
        definition.indicator_id.value: definition.defaults["penetration"]
        for definition in patterns
        if definition.params
    }
    assert with_params == _PENETRATION_DEFAULTS


def test_multi_output_definitions_declare_expected_names() -> None:
    by_id = {definition.indicator_id.value: definition for definition in all_defs()}
    assert by_id["bbands"].output.names == ("upper_band", "middle_band", "lower_band")
    assert by_id["macd"].output.names == ("macd", "macd_signal", "macd_hist")
    assert by_id["aroon"].output.names == ("aroon_down", "aroon_up")
    assert by_id["stoch"].output.names == ("slow_k", "slow_d")
    assert by_id["mama"].output.names == ("mama", "fama")
    assert by_id["min_max_index"].output.dtype is OutputDType.INT32
    assert by_id["ht_trend_mode"].output.dtype is OutputDType.INT32


def test_ma_type_parameters_default_to_ema() -> None:
    """
    Verify every moving-average selector is an enum parameter defaulting to EMA.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Selector names are `ma_type` or end with `_ma`.
    Raises:
        AssertionError: If a selector has a different kind or default.
    Side Effects:
        None.
    """
    selectors = [
        param
        for definition in all_defs()
        for param in definition.params
        if param.name == "ma_type" or param.name.endswith("_ma")
    ]
    assert selectors
    for param in selectors:
        assert param.kind is ParamKind.ENUM
        assert param.default == "ema"


def test_spec_defaults_for_core_indicators() -> None:
    by_id = {definition.indicator_id.value: definition for definition in all_defs()}
    assert dict(by_id["kama"].defaults) == {"time_period": 30}
    assert dict(by_id["bbands"].defaults) == {
        "time_period": 5,
        "deviations_up": 2.0,
        "deviations_down": 2.0,
        "ma_type": "ema",
    }
    assert dict(by_id["macd"].defaults) == {
        "fast_period": 12,
        "slow_period": 26,
        "signal_period": 9,
    }
    assert dict(by_id["sar"].defaults) == {"acceleration": 0.02, "maximum": 0.2}
    assert by_id["cdl_doji"].params == ()

"""
Caller-facing batch functions, one per catalog indicator.

Every function takes its input series positionally and its parameters as keywords
whose defaults equal the catalog defaults. Single-output indicators return one
ndarray; multi-output indicators return a tuple in declared output order. All
outputs are trimmed to `N - lookback` samples, so `result[0]` aligns with input
index `lookback`.

Related: tabatch.application.services.invocation_harness, tabatch.wiring
"""

from __future__ import annotations

from typing import Any

import numpy as np
import numpy.typing as npt

from tabatch.domain.entities import MAType
from tabatch.wiring import default_harness

Series = npt.ArrayLike
MA = MAType | str
Output = Any


def _call(indicator_id: str, *inputs: Series, **params: Any) -> Output:
    return default_harness().invoke(indicator_id, inputs, params).unpack()


# Math transform


def acos(real: Series) -> np.ndarray:
    return _call("acos", real)


def asin(real: Series) -> np.ndarray:
    return _call("asin", real)


def atan(real: Series) -> np.ndarray:
    return _call("atan", real)


def ceil(real: Series) -> np.ndarray:
    return _call("ceil", real)


def cos(real: Series) -> np.ndarray:
    return _call("cos", real)


def cosh(real: Series) -> np.ndarray:
    return _call("cosh", real)


def exp(real: Series) -> np.ndarray:
    return _call("exp", real)


def floor(real: Series) -> np.ndarray:
    return _call("floor", real)


def ln(real: Series) -> np.ndarray:
    return _call("ln", real)


def log10(real: Series) -> np.ndarray:
    return _call("log10", real)


def sin(real: Series) -> np.ndarray:
    return _call("sin", real)


def sinh(real: Series) -> np.ndarray:
    return _call("sinh", real)


def sqrt(real: Series) -> np.ndarray:
    return _call("sqrt", real)


def tan(real: Series) -> np.ndarray:
    return _call("tan", real)


def tanh(real: Series) -> np.ndarray:
    return _call("tanh", real)


# Math operators


def add(real0: Series, real1: Series) -> np.ndarray:
    return _call("add", real0, real1)


def div(real0: Series, real1: Series) -> np.ndarray:
    return _call("div", real0, real1)


def mult(real0: Series, real1: Series) -> np.ndarray:
    return _call("mult", real0, real1)


def sub(real0: Series, real1: Series) -> np.ndarray:
    return _call("sub", real0, real1)


def max_(real: Series, *, time_period: int = 30) -> np.ndarray:
    """Highest value over `time_period`."""
    return _call("max", real, time_period=time_period)


def min_(real: Series, *, time_period: int = 30) -> np.ndarray:
    return _call("min", real, time_period=time_period)


def sum_(real: Series, *, time_period: int = 30) -> np.ndarray:
    return _call("sum", real, time_period=time_period)


def max_index(real: Series, *, time_period: int = 30) -> np.ndarray:
    """Absolute input index of the window maximum, as int32."""
    return _call("max_index", real, time_period=time_period)


def min_index(real: Series, *, time_period: int = 30) -> np.ndarray:
    return _call("min_index", real, time_period=time_period)


def min_max(real: Series, *, time_period: int = 30) -> tuple[np.ndarray, np.ndarray]:
    return _call("min_max", real, time_period=time_period)


def min_max_index(real: Series, *, time_period: int = 30) -> tuple[np.ndarray, np.ndarray]:
    return _call("min_max_index", real, time_period=time_period)


# Overlap studies


def bbands(
    real: Series,
    *,
    time_period: int = 5,
    deviations_up: float = 2.0,
    deviations_down: float = 2.0,
    ma_type: MA = MAType.EMA,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Bollinger Bands around a moving average.

    Args:
        real: Source series.
        time_period: Window of the middle band and the standard deviation.
        deviations_up: Upper band multiplier.
        deviations_down: Lower band multiplier.
        ma_type: Middle band moving-average family.
    Returns:
        tuple[np.ndarray, np.ndarray, np.ndarray]: Upper, middle and lower bands.
    Assumptions:
        None.
    Raises:
        InsufficientData: If `len(real)` does not exceed the lookback.
    Side Effects:
        None.
    """
    return _call(
        "bbands",
        real,
        time_period=time_period,
        deviations_up=deviations_up,
        deviations_down=deviations_down,
        ma_type=ma_type,
    )


def dema(real: Series, *, time_period: int = 30) -> np.ndarray:
    return _call("dema", real, time_period=time_period)


def ema(real: Series, *, time_period: int = 30) -> np.ndarray:
    return _call("ema", real, time_period=time_period)


def ht_trendline(real: Series) -> np.ndarray:
    return _call("ht_trendline", real)


def kama(real: Series, *, time_period: int = 30) -> np.ndarray:
    return _call("kama", real, time_period=time_period)


def mama(
    real: Series,
    *,
    fast_limit: float = 0.5,
    slow_limit: float = 0.05,
) -> tuple[np.ndarray, np.ndarray]:
    return _call("mama", real, fast_limit=fast_limit, slow_limit=slow_limit)


def mavp(
    real: Series,
    periods: Series,
    *,
    min_period: int = 2,
    max_period: int = 30,
    ma_type: MA = MAType.EMA,
) -> np.ndarray:
    """
    Moving average whose period changes per bar.

    Args:
        real: Source series.
        periods: Per-bar period, truncated and clamped to `[min_period, max_period]`.
        min_period: Lower clamp.
        max_period: Upper clamp; the lookback follows it.
        ma_type: Moving-average family.
    Returns:
        np.ndarray: Variable-period moving average.
    Assumptions:
        None.
    Raises:
        ComputationError: If `min_period > max_period`.
    Side Effects:
        None.
    """
    return _call(
        "mavp",
        real,
        periods,
        min_period=min_period,
        max_period=max_period,
        ma_type=ma_type,
    )


def mid_point(real: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("mid_point", real, time_period=time_period)


def mid_price(high: Series, low: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("mid_price", high, low, time_period=time_period)


def moving_average(real: Series, *, time_period: int = 30, ma_type: MA = MAType.EMA) -> np.ndarray:
    return _call("moving_average", real, time_period=time_period, ma_type=ma_type)


def sar(
    high: Series,
    low: Series,
    *,
    acceleration: float = 0.02,
    maximum: float = 0.2,
) -> np.ndarray:
    return _call("sar", high, low, acceleration=acceleration, maximum=maximum)


def sar_ext(
    high: Series,
    low: Series,
    *,
    start_value: float = 0.0,
    offset_on_reverse: float = 0.0,
    af_init_long: float = 0.02,
    af_long: float = 0.02,
    af_max_long: float = 0.2,
    af_init_short: float = 0.02,
    af_short: float = 0.02,
    af_max_short: float = 0.2,
) -> np.ndarray:
    """Extended parabolic SAR; short positions are reported as negative values."""
    return _call(
        "sar_ext",
        high,
        low,
        start_value=start_value,
        offset_on_reverse=offset_on_reverse,
        af_init_long=af_init_long,
        af_long=af_long,
        af_max_long=af_max_long,
        af_init_short=af_init_short,
        af_short=af_short,
        af_max_short=af_max_short,
    )


def sma(real: Series, *, time_period: int = 30) -> np.ndarray:
    return _call("sma", real, time_period=time_period)


def t3(real: Series, *, time_period: int = 5, volume_factor: float = 0.7) -> np.ndarray:
    return _call("t3", real, time_period=time_period, volume_factor=volume_factor)


def tema(real: Series, *, time_period: int = 30) -> np.ndarray:
    return _call("tema", real, time_period=time_period)


def trima(real: Series, *, time_period: int = 30) -> np.ndarray:
    return _call("trima", real, time_period=time_period)


def wma(real: Series, *, time_period: int = 30) -> np.ndarray:
    return _call("wma", real, time_period=time_period)


# Momentum


def adx(high: Series, low: Series, close: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("adx", high, low, close, time_period=time_period)


def adxr(high: Series, low: Series, close: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("adxr", high, low, close, time_period=time_period)


def apo(
    real: Series,
    *,
    fast_period: int = 12,
    slow_period: int = 26,
    ma_type: MA = MAType.EMA,
) -> np.ndarray:
    return _call(
        "apo", real, fast_period=fast_period, slow_period=slow_period, ma_type=ma_type
    )


def aroon(high: Series, low: Series, *, time_period: int = 14) -> tuple[np.ndarray, np.ndarray]:
    """Return `(aroon_down, aroon_up)`."""
    return _call("aroon", high, low, time_period=time_period)


def aroon_osc(high: Series, low: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("aroon_osc", high, low, time_period=time_period)


def bop(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("bop", open_, high, low, close)


def cci(high: Series, low: Series, close: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("cci", high, low, close, time_period=time_period)


def cmo(real: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("cmo", real, time_period=time_period)


def dx(high: Series, low: Series, close: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("dx", high, low, close, time_period=time_period)


def macd(
    real: Series,
    *,
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return `(macd, macd_signal, macd_hist)`."""
    return _call(
        "macd",
        real,
        fast_period=fast_period,
        slow_period=slow_period,
        signal_period=signal_period,
    )


def macd_ext(
    real: Series,
    *,
    fast_period: int = 12,
    fast_ma: MA = MAType.EMA,
    slow_period: int = 26,
    slow_ma: MA = MAType.EMA,
    signal_period: int = 9,
    signal_ma: MA = MAType.EMA,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    return _call(
        "macd_ext",
        real,
        fast_period=fast_period,
        fast_ma=fast_ma,
        slow_period=slow_period,
        slow_ma=slow_ma,
        signal_period=signal_period,
        signal_ma=signal_ma,
    )


def macd_fix(real: Series, *, signal_period: int = 9) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    return _call("macd_fix", real, signal_period=signal_period)


def mfi(
    high: Series,
    low: Series,
    close: Series,
    volume: Series,
    *,
    time_period: int = 14,
) -> np.ndarray:
    return _call("mfi", high, low, close, volume, time_period=time_period)


def minus_di(high: Series, low: Series, close: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("minus_di", high, low, close, time_period=time_period)


def minus_dm(high: Series, low: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("minus_dm", high, low, time_period=time_period)


def mom(real: Series, *, time_period: int = 10) -> np.ndarray:
    return _call("mom", real, time_period=time_period)


def plus_di(high: Series, low: Series, close: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("plus_di", high, low, close, time_period=time_period)


def plus_dm(high: Series, low: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("plus_dm", high, low, time_period=time_period)


def ppo(
    real: Series,
    *,
    fast_period: int = 12,
    slow_period: int = 26,
    ma_type: MA = MAType.EMA,
) -> np.ndarray:
    return _call(
        "ppo", real, fast_period=fast_period, slow_period=slow_period, ma_type=ma_type
    )


def roc(real: Series, *, time_period: int = 10) -> np.ndarray:
    return _call("roc", real, time_period=time_period)


def roc_p(real: Series, *, time_period: int = 10) -> np.ndarray:
    return _call("roc_p", real, time_period=time_period)


def roc_r(real: Series, *, time_period: int = 10) -> np.ndarray:
    return _call("roc_r", real, time_period=time_period)


def roc_r100(real: Series, *, time_period: int = 10) -> np.ndarray:
    return _call("roc_r100", real, time_period=time_period)


def rsi(real: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("rsi", real, time_period=time_period)


def stoch(
    high: Series,
    low: Series,
    close: Series,
    *,
    fast_k_period: int = 5,
    slow_k_period: int = 3,
    slow_k_ma: MA = MAType.EMA,
    slow_d_period: int = 3,
    slow_d_ma: MA = MAType.EMA,
) -> tuple[np.ndarray, np.ndarray]:
    """Return `(slow_k, slow_d)`."""
    return _call(
        "stoch",
        high,
        low,
        close,
        fast_k_period=fast_k_period,
        slow_k_period=slow_k_period,
        slow_k_ma=slow_k_ma,
        slow_d_period=slow_d_period,
        slow_d_ma=slow_d_ma,
    )


def stoch_f(
    high: Series,
    low: Series,
    close: Series,
    *,
    fast_k_period: int = 5,
    fast_d_period: int = 3,
    fast_d_ma: MA = MAType.EMA,
) -> tuple[np.ndarray, np.ndarray]:
    return _call(
        "stoch_f",
        high,
        low,
        close,
        fast_k_period=fast_k_period,
        fast_d_period=fast_d_period,
        fast_d_ma=fast_d_ma,
    )


def stoch_rsi(
    real: Series,
    *,
    time_period: int = 14,
    fast_k_period: int = 5,
    fast_d_period: int = 3,
    fast_d_ma: MA = MAType.EMA,
) -> tuple[np.ndarray, np.ndarray]:
    return _call(
        "stoch_rsi",
        real,
        time_period=time_period,
        fast_k_period=fast_k_period,
        fast_d_period=fast_d_period,
        fast_d_ma=fast_d_ma,
    )


def trix(real: Series, *, time_period: int = 30) -> np.ndarray:
    return _call("trix", real, time_period=time_period)


def ult_osc(
    high: Series,
    low: Series,
    close: Series,
    *,
    first_period: int = 7,
    second_period: int = 14,
    third_period: int = 28,
) -> np.ndarray:
    return _call(
        "ult_osc",
        high,
        low,
        close,
        first_period=first_period,
        second_period=second_period,
        third_period=third_period,
    )


def will_r(high: Series, low: Series, close: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("will_r", high, low, close, time_period=time_period)


# Volume


def ad(high: Series, low: Series, close: Series, volume: Series) -> np.ndarray:
    return _call("ad", high, low, close, volume)


def ad_osc(
    high: Series,
    low: Series,
    close: Series,
    volume: Series,
    *,
    fast_period: int = 3,
    slow_period: int = 10,
) -> np.ndarray:
    return _call(
        "ad_osc", high, low, close, volume, fast_period=fast_period, slow_period=slow_period
    )


def obv(real: Series, volume: Series) -> np.ndarray:
    return _call("obv", real, volume)


# Volatility


def atr(high: Series, low: Series, close: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("atr", high, low, close, time_period=time_period)


def natr(high: Series, low: Series, close: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("natr", high, low, close, time_period=time_period)


def true_range(high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("true_range", high, low, close)


# Price transform


def avg_price(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("avg_price", open_, high, low, close)


def med_price(high: Series, low: Series) -> np.ndarray:
    return _call("med_price", high, low)


def typ_price(high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("typ_price", high, low, close)


def wcl_price(high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("wcl_price", high, low, close)


# Cycle


def ht_dc_period(real: Series) -> np.ndarray:
    return _call("ht_dc_period", real)


def ht_dc_phase(real: Series) -> np.ndarray:
    return _call("ht_dc_phase", real)


def ht_phasor(real: Series) -> tuple[np.ndarray, np.ndarray]:
    return _call("ht_phasor", real)


def ht_sine(real: Series) -> tuple[np.ndarray, np.ndarray]:
    return _call("ht_sine", real)


def ht_trend_mode(real: Series) -> np.ndarray:
    """1 while the series trends, 0 while it cycles; int32."""
    return _call("ht_trend_mode", real)


# Statistic


def beta(real0: Series, real1: Series, *, time_period: int = 5) -> np.ndarray:
    return _call("beta", real0, real1, time_period=time_period)


def correl(real0: Series, real1: Series, *, time_period: int = 30) -> np.ndarray:
    return _call("correl", real0, real1, time_period=time_period)


def linear_reg(real: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("linear_reg", real, time_period=time_period)


def linear_reg_angle(real: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("linear_reg_angle", real, time_period=time_period)


def linear_reg_intercept(real: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("linear_reg_intercept", real, time_period=time_period)


def linear_reg_slope(real: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("linear_reg_slope", real, time_period=time_period)


def std_dev(real: Series, *, time_period: int = 5, deviations: float = 1.0) -> np.ndarray:
    return _call("std_dev", real, time_period=time_period, deviations=deviations)


def tsf(real: Series, *, time_period: int = 14) -> np.ndarray:
    return _call("tsf", real, time_period=time_period)


def variance(real: Series, *, time_period: int = 5, deviations: float = 1.0) -> np.ndarray:
    return _call("variance", real, time_period=time_period, deviations=deviations)


# Pattern recognition


def cdl_2crows(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_2crows", open_, high, low, close)


def cdl_3black_crows(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_3black_crows", open_, high, low, close)


def cdl_3inside(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_3inside", open_, high, low, close)


def cdl_3line_strike(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_3line_strike", open_, high, low, close)


def cdl_3outside(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_3outside", open_, high, low, close)


def cdl_3stars_in_south(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_3stars_in_south", open_, high, low, close)


def cdl_3white_soldiers(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_3white_soldiers", open_, high, low, close)


def cdl_abandoned_baby(
    open_: Series,
    high: Series,
    low: Series,
    close: Series,
    *,
    penetration: float = 0.3,
) -> np.ndarray:
    return _call("cdl_abandoned_baby", open_, high, low, close, penetration=penetration)


def cdl_advance_block(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_advance_block", open_, high, low, close)


def cdl_belt_hold(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_belt_hold", open_, high, low, close)


def cdl_breakaway(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_breakaway", open_, high, low, close)


def cdl_closing_marubozu(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_closing_marubozu", open_, high, low, close)


def cdl_conceal_babys_wall(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_conceal_babys_wall", open_, high, low, close)


def cdl_counter_attack(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_counter_attack", open_, high, low, close)


def cdl_dark_cloud_cover(
    open_: Series,
    high: Series,
    low: Series,
    close: Series,
    *,
    penetration: float = 0.5,
) -> np.ndarray:
    return _call("cdl_dark_cloud_cover", open_, high, low, close, penetration=penetration)


def cdl_doji(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_doji", open_, high, low, close)


def cdl_doji_star(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_doji_star", open_, high, low, close)


def cdl_dragonfly_doji(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_dragonfly_doji", open_, high, low, close)


def cdl_engulfing(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_engulfing", open_, high, low, close)


def cdl_evening_doji_star(
    open_: Series,
    high: Series,
    low: Series,
    close: Series,
    *,
    penetration: float = 0.3,
) -> np.ndarray:
    return _call("cdl_evening_doji_star", open_, high, low, close, penetration=penetration)


def cdl_evening_star(
    open_: Series,
    high: Series,
    low: Series,
    close: Series,
    *,
    penetration: float = 0.3,
) -> np.ndarray:
    return _call("cdl_evening_star", open_, high, low, close, penetration=penetration)


def cdl_gap_side_side_white(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_gap_side_side_white", open_, high, low, close)


def cdl_gravestone_doji(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_gravestone_doji", open_, high, low, close)


def cdl_hammer(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_hammer", open_, high, low, close)


def cdl_hanging_man(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_hanging_man", open_, high, low, close)


def cdl_harami(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_harami", open_, high, low, close)


def cdl_harami_cross(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_harami_cross", open_, high, low, close)


def cdl_high_wave(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_high_wave", open_, high, low, close)


def cdl_hikkake(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_hikkake", open_, high, low, close)


def cdl_hikkake_mod(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_hikkake_mod", open_, high, low, close)


def cdl_homing_pigeon(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_homing_pigeon", open_, high, low, close)


def cdl_identical_3crows(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_identical_3crows", open_, high, low, close)


def cdl_in_neck(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_in_neck", open_, high, low, close)


def cdl_inverted_hammer(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_inverted_hammer", open_, high, low, close)


def cdl_kicking(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_kicking", open_, high, low, close)


def cdl_kicking_by_length(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_kicking_by_length", open_, high, low, close)


def cdl_ladder_bottom(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_ladder_bottom", open_, high, low, close)


def cdl_long_legged_doji(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_long_legged_doji", open_, high, low, close)


def cdl_long_line(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_long_line", open_, high, low, close)


def cdl_marubozu(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_marubozu", open_, high, low, close)


def cdl_matching_low(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_matching_low", open_, high, low, close)


def cdl_mat_hold(
    open_: Series,
    high: Series,
    low: Series,
    close: Series,
    *,
    penetration: float = 0.5,
) -> np.ndarray:
    return _call("cdl_mat_hold", open_, high, low, close, penetration=penetration)


def cdl_morning_doji_star(
    open_: Series,
    high: Series,
    low: Series,
    close: Series,
    *,
    penetration: float = 0.3,
) -> np.ndarray:
    return _call("cdl_morning_doji_star", open_, high, low, close, penetration=penetration)


def cdl_morning_star(
    open_: Series,
    high: Series,
    low: Series,
    close: Series,
    *,
    penetration: float = 0.3,
) -> np.ndarray:
    return _call("cdl_morning_star", open_, high, low, close, penetration=penetration)


def cdl_on_neck(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_on_neck", open_, high, low, close)


def cdl_piercing(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_piercing", open_, high, low, close)


def cdl_rickshaw_man(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_rickshaw_man", open_, high, low, close)


def cdl_rise_fall_3methods(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_rise_fall_3methods", open_, high, low, close)


def cdl_separating_lines(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_separating_lines", open_, high, low, close)


def cdl_shooting_star(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_shooting_star", open_, high, low, close)


def cdl_short_line(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_short_line", open_, high, low, close)


def cdl_spinning_top(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_spinning_top", open_, high, low, close)


def cdl_stalled_pattern(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_stalled_pattern", open_, high, low, close)


def cdl_stick_sandwich(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_stick_sandwich", open_, high, low, close)


def cdl_takuri(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_takuri", open_, high, low, close)


def cdl_tasuki_gap(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_tasuki_gap", open_, high, low, close)


def cdl_thrusting(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_thrusting", open_, high, low, close)


def cdl_tristar(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_tristar", open_, high, low, close)


def cdl_unique_3river(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_unique_3river", open_, high, low, close)


def cdl_upside_gap_2crows(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_upside_gap_2crows", open_, high, low, close)


def cdl_xside_gap_3methods(open_: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    return _call("cdl_xside_gap_3methods", open_, high, low, close)

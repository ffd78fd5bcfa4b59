"""
Hard indicator definitions for momentum oscillators.

Related: tabatch.adapters.outbound.compute_numba.kernels.momentum
"""

from __future__ import annotations

from tabatch.domain.entities import IndicatorDef, IndicatorGroup

from ._helpers import HL, HLC, HLCV, OHLC, REAL, indicator, ma_type, period, sorted_defs

_GROUP = IndicatorGroup.MOMENTUM


def defs() -> tuple[IndicatorDef, ...]:
    """
    Return momentum definitions sorted by indicator_id.

    Args:
        None.
    Returns:
        tuple[IndicatorDef, ...]: Directional movement, oscillators, rate of change and
            stochastic family.
    Assumptions:
        Moving-average type parameters default to EMA.
    Raises:
        ValueError: If any definition violates domain invariants.
    Side Effects:
        None.
    """
    p14 = period(default=14)
    p10 = period(default=10, minimum=1)
    fast_slow_ma = (
        period("fast_period", default=12),
        period("slow_period", default=26),
        ma_type(),
    )

    items = (
        indicator("adx", "Average Directional Movement Index", group=_GROUP, inputs=HLC,
                  params=(p14,)),
        indicator("adxr", "Average Directional Movement Index Rating", group=_GROUP,
                  inputs=HLC, params=(p14,)),
        indicator("apo", "Absolute Price Oscillator", group=_GROUP, inputs=REAL,
                  params=fast_slow_ma),
        indicator("aroon", "Aroon", group=_GROUP, inputs=HL, params=(p14,),
                  outputs=("aroon_down", "aroon_up")),
        indicator("aroon_osc", "Aroon Oscillator", group=_GROUP, inputs=HL, params=(p14,)),
        indicator("bop", "Balance Of Power", group=_GROUP, inputs=OHLC),
        indicator("cci", "Commodity Channel Index", group=_GROUP, inputs=HLC, params=(p14,)),
        indicator("cmo", "Chande Momentum Oscillator", group=_GROUP, inputs=REAL,
                  params=(p14,)),
        indicator("dx", "Directional Movement Index", group=_GROUP, inputs=HLC, params=(p14,)),
        indicator(
            "macd",
            "Moving Average Convergence/Divergence",
            group=_GROUP,
            inputs=REAL,
            params=(
                period("fast_period", default=12),
                period("slow_period", default=26),
                period("signal_period", default=9, minimum=1),
            ),
            outputs=("macd", "macd_signal", "macd_hist"),
        ),
        indicator(
            "macd_ext",
            "MACD with controllable MA type",
            group=_GROUP,
            inputs=REAL,
            params=(
                period("fast_period", default=12),
                ma_type("fast_ma"),
                period("slow_period", default=26),
                ma_type("slow_ma"),
                period("signal_period", default=9, minimum=1),
                ma_type("signal_ma"),
            ),
            outputs=("macd", "macd_signal", "macd_hist"),
        ),
        indicator(
            "macd_fix",
            "Moving Average Convergence/Divergence Fix 12/26",
            group=_GROUP,
            inputs=REAL,
            params=(period("signal_period", default=9, minimum=1),),
            outputs=("macd", "macd_signal", "macd_hist"),
        ),
        indicator("mfi", "Money Flow Index", group=_GROUP, inputs=HLCV, params=(p14,)),
        indicator("minus_di", "Minus Directional Indicator", group=_GROUP, inputs=HLC,
                  params=(p14,)),
        indicator("minus_dm", "Minus Directional Movement", group=_GROUP, inputs=HL,
                  params=(p14,)),
        indicator("mom", "Momentum", group=_GROUP, inputs=REAL, params=(p10,)),
        indicator("plus_di", "Plus Directional Indicator", group=_GROUP, inputs=HLC,
                  params=(p14,)),
        indicator("plus_dm", "Plus Directional Movement", group=_GROUP, inputs=HL,
                  params=(p14,)),
        indicator("ppo", "Percentage Price Oscillator", group=_GROUP, inputs=REAL,
                  params=fast_slow_ma),
        indicator("roc", "Rate of change : ((price/prevPrice)-1)*100", group=_GROUP,
                  inputs=REAL, params=(p10,)),
        indicator("roc_p", "Rate of change Percentage: (price-prevPrice)/prevPrice",
                  group=_GROUP, inputs=REAL, params=(p10,)),
        indicator("roc_r", "Rate of change ratio: (price/prevPrice)", group=_GROUP,
                  inputs=REAL, params=(p10,)),
        indicator("roc_r100", "Rate of change ratio 100 scale: (price/prevPrice)*100",
                  group=_GROUP, inputs=REAL, params=(p10,)),
        indicator("rsi", "Relative Strength Index", group=_GROUP, inputs=REAL, params=(p14,)),
        indicator(
            "stoch",
            "Stochastic",
            group=_GROUP,
            inputs=HLC,
            params=(
                period("fast_k_period", default=5, minimum=1),
                period("slow_k_period", default=3, minimum=1),
                ma_type("slow_k_ma"),
                period("slow_d_period", default=3, minimum=1),
                ma_type("slow_d_ma"),
            ),
            outputs=("slow_k", "slow_d"),
        ),
        indicator(
            "stoch_f",
            "Stochastic Fast",
            group=_GROUP,
            inputs=HLC,
            params=(
                period("fast_k_period", default=5, minimum=1),
                period("fast_d_period", default=3, minimum=1),
                ma_type("fast_d_ma"),
            ),
            outputs=("fast_k", "fast_d"),
        ),
        indicator(
            "stoch_rsi",
            "Stochastic Relative Strength Index",
            group=_GROUP,
            inputs=REAL,
            params=(
                p14,
                period("fast_k_period", default=5, minimum=1),
                period("fast_d_period", default=3, minimum=1),
                ma_type("fast_d_ma"),
            ),
            outputs=("fast_k", "fast_d"),
        ),
        indicator("trix", "1-day Rate-Of-Change (ROC) of a Triple Smooth EMA", group=_GROUP,
                  inputs=REAL, params=(period(default=30, minimum=1),)),
        indicator(
            "ult_osc",
            "Ultimate Oscillator",
            group=_GROUP,
            inputs=HLC,
            params=(
                period("first_period", default=7, minimum=1),
                period("second_period", default=14, minimum=1),
                period("third_period", default=28, minimum=1),
            ),
        ),
        indicator("will_r", "Williams' %R", group=_GROUP, inputs=HLC, params=(p14,)),
    )
    return sorted_defs(items)

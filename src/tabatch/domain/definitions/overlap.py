"""
Hard indicator definitions for overlap studies: moving averages, bands and SAR.

Related: tabatch.adapters.outbound.compute_numba.kernels.overlap,
  tabatch.adapters.outbound.compute_numba.kernels.cycle
"""

from __future__ import annotations

from tabatch.domain.entities import IndicatorDef, IndicatorGroup, InputSeries

from ._helpers import HL, REAL, indicator, ma_type, period, real, sorted_defs

_GROUP = IndicatorGroup.OVERLAP_STUDIES


def defs() -> tuple[IndicatorDef, ...]:
    """
    Return overlap-study definitions sorted by indicator_id.

    Args:
        None.
    Returns:
        tuple[IndicatorDef, ...]: Moving averages, bands, midpoints and parabolic SAR.
    Assumptions:
        Moving-average type parameters default to EMA.
    Raises:
        ValueError: If any definition violates domain invariants.
    Side Effects:
        None.
    """
    window = period(default=30)

    items = (
        indicator(
            "bbands",
            "Bollinger Bands",
            group=_GROUP,
            inputs=REAL,
            params=(
                period(default=5),
                real("deviations_up", default=2.0),
                real("deviations_down", default=2.0),
                ma_type(),
            ),
            outputs=("upper_band", "middle_band", "lower_band"),
        ),
        indicator("dema", "Double Exponential Moving Average", group=_GROUP, inputs=REAL,
                  params=(window,)),
        indicator("ema", "Exponential Moving Average", group=_GROUP, inputs=REAL,
                  params=(window,)),
        indicator("ht_trendline", "Hilbert Transform - Instantaneous Trendline", group=_GROUP,
                  inputs=REAL),
        indicator("kama", "Kaufman Adaptive Moving Average", group=_GROUP, inputs=REAL,
                  params=(window,)),
        indicator(
            "mama",
            "MESA Adaptive Moving Average",
            group=_GROUP,
            inputs=REAL,
            params=(
                real("fast_limit", default=0.5, minimum=0.01, maximum=0.99),
                real("slow_limit", default=0.05, minimum=0.01, maximum=0.99),
            ),
            outputs=("mama", "fama"),
        ),
        indicator(
            "mavp",
            "Moving average with variable period",
            group=_GROUP,
            inputs=(InputSeries.REAL, InputSeries.PERIODS),
            params=(
                period("min_period", default=2),
                period("max_period", default=30),
                ma_type(),
            ),
        ),
        indicator("mid_point", "MidPoint over period", group=_GROUP, inputs=REAL,
                  params=(period(default=14),)),
        indicator("mid_price", "Midpoint Price over period", group=_GROUP, inputs=HL,
                  params=(period(default=14),)),
        indicator(
            "moving_average",
            "Moving average",
            group=_GROUP,
            inputs=REAL,
            params=(period(default=30, minimum=1), ma_type()),
        ),
        indicator(
            "sar",
            "Parabolic SAR",
            group=_GROUP,
            inputs=HL,
            params=(
                real("acceleration", default=0.02, minimum=0.0),
                real("maximum", default=0.2, minimum=0.0),
            ),
        ),
        indicator(
            "sar_ext",
            "Parabolic SAR - Extended",
            group=_GROUP,
            inputs=HL,
            params=(
                real("start_value", default=0.0),
                real("offset_on_reverse", default=0.0, minimum=0.0),
                real("af_init_long", default=0.02, minimum=0.0),
                real("af_long", default=0.02, minimum=0.0),
                real("af_max_long", default=0.2, minimum=0.0),
                real("af_init_short", default=0.02, minimum=0.0),
                real("af_short", default=0.02, minimum=0.0),
                real("af_max_short", default=0.2, minimum=0.0),
            ),
        ),
        indicator("sma", "Simple Moving Average", group=_GROUP, inputs=REAL, params=(window,)),
        indicator(
            "t3",
            "Triple Exponential Moving Average (T3)",
            group=_GROUP,
            inputs=REAL,
            params=(
                period(default=5),
                real("volume_factor", default=0.7, minimum=0.0, maximum=1.0),
            ),
        ),
        indicator("tema", "Triple Exponential Moving Average", group=_GROUP, inputs=REAL,
                  params=(window,)),
        indicator("trima", "Triangular Moving Average", group=_GROUP, inputs=REAL,
                  params=(window,)),
        indicator("wma", "Weighted Moving Average", group=_GROUP, inputs=REAL, params=(window,)),
    )
    return sorted_defs(items)

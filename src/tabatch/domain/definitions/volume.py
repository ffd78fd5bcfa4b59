"""
Hard indicator definitions for volume indicators.

Related: tabatch.adapters.outbound.compute_numba.kernels.volume
"""

from __future__ import annotations

from tabatch.domain.entities import IndicatorDef, IndicatorGroup, InputSeries

from ._helpers import HLCV, indicator, period, sorted_defs

_GROUP = IndicatorGroup.VOLUME


def defs() -> tuple[IndicatorDef, ...]:
    """
    Return volume definitions sorted by indicator_id.

    Args:
        None.
    Returns:
        tuple[IndicatorDef, ...]: Accumulation/distribution family and on-balance volume.
    Assumptions:
        None.
    Raises:
        ValueError: If any definition violates domain invariants.
    Side Effects:
        None.
    """
    items = (
        indicator("ad", "Chaikin A/D Line", group=_GROUP, inputs=HLCV),
        indicator(
            "ad_osc",
            "Chaikin A/D Oscillator",
            group=_GROUP,
            inputs=HLCV,
            params=(period("fast_period", default=3), period("slow_period", default=10)),
        ),
        indicator(
            "obv",
            "On Balance Volume",
            group=_GROUP,
            inputs=(InputSeries.REAL, InputSeries.VOLUME),
        ),
    )
    return sorted_defs(items)

"""
Hard indicator definitions for volatility indicators.

Related: tabatch.adapters.outbound.compute_numba.kernels.volatility
"""

from __future__ import annotations

from tabatch.domain.entities import IndicatorDef, IndicatorGroup

from ._helpers import HLC, indicator, period, sorted_defs

_GROUP = IndicatorGroup.VOLATILITY


def defs() -> tuple[IndicatorDef, ...]:
    window = period(default=14, minimum=1)
    items = (
        indicator("atr", "Average True Range", group=_GROUP, inputs=HLC, params=(window,)),
        indicator("natr", "Normalized Average True Range", group=_GROUP, inputs=HLC,
                  params=(window,)),
        indicator("true_range", "True Range", group=_GROUP, inputs=HLC),
    )
    return sorted_defs(items)

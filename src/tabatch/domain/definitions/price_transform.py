"""
Hard indicator definitions for price transforms.

Related: tabatch.adapters.outbound.compute_numba.kernels.price
"""

from __future__ import annotations

from tabatch.domain.entities import IndicatorDef, IndicatorGroup

from ._helpers import HL, HLC, OHLC, indicator, sorted_defs

_GROUP = IndicatorGroup.PRICE_TRANSFORM


def defs() -> tuple[IndicatorDef, ...]:
    """
    Return price-transform definitions sorted by indicator_id.

    Args:
        None.
    Returns:
        tuple[IndicatorDef, ...]: Zero-lookback bar averages.
    Assumptions:
        None.
    Raises:
        ValueError: If any definition violates domain invariants.
    Side Effects:
        None.
    """
    items = (
        indicator("avg_price", "Average Price", group=_GROUP, inputs=OHLC),
        indicator("med_price", "Median Price", group=_GROUP, inputs=HL),
        indicator("typ_price", "Typical Price", group=_GROUP, inputs=HLC),
        indicator("wcl_price", "Weighted Close Price", group=_GROUP, inputs=HLC),
    )
    return sorted_defs(items)

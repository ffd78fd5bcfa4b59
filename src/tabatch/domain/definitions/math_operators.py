"""
Hard indicator definitions for math operators and rolling extremes.

Related: tabatch.adapters.outbound.compute_numba.kernels.math_ops
"""

from __future__ import annotations

from tabatch.domain.entities import IndicatorDef, IndicatorGroup, OutputDType

from ._helpers import REAL, REAL_PAIR, indicator, period, sorted_defs

_GROUP = IndicatorGroup.MATH_OPERATORS


def defs() -> tuple[IndicatorDef, ...]:
    """
    Return math-operator definitions sorted by indicator_id.

    Args:
        None.
    Returns:
        tuple[IndicatorDef, ...]: Binary operators and rolling max/min/sum family.
    Assumptions:
        Index outputs are absolute positions into the input series.
    Raises:
        ValueError: If any definition violates domain invariants.
    Side Effects:
        None.
    """
    window = period(default=30)

    items = (
        indicator("add", "Vector Arithmetic Add", group=_GROUP, inputs=REAL_PAIR),
        indicator("div", "Vector Arithmetic Div", group=_GROUP, inputs=REAL_PAIR),
        indicator("mult", "Vector Arithmetic Mult", group=_GROUP, inputs=REAL_PAIR),
        indicator("sub", "Vector Arithmetic Subtraction", group=_GROUP, inputs=REAL_PAIR),
        indicator("max", "Highest value over a specified period", group=_GROUP, inputs=REAL,
                  params=(window,)),
        indicator("min", "Lowest value over a specified period", group=_GROUP, inputs=REAL,
                  params=(window,)),
        indicator("sum", "Summation", group=_GROUP, inputs=REAL, params=(window,)),
        indicator(
            "max_index",
            "Index of highest value over a specified period",
            group=_GROUP,
            inputs=REAL,
            params=(window,),
            outputs=("integer",),
            dtype=OutputDType.INT32,
        ),
        indicator(
            "min_index",
            "Index of lowest value over a specified period",
            group=_GROUP,
            inputs=REAL,
            params=(window,),
            outputs=("integer",),
            dtype=OutputDType.INT32,
        ),
        indicator(
            "min_max",
            "Lowest and highest values over a specified period",
            group=_GROUP,
            inputs=REAL,
            params=(window,),
            outputs=("min", "max"),
        ),
        indicator(
            "min_max_index",
            "Indexes of lowest and highest values over a specified period",
            group=_GROUP,
            inputs=REAL,
            params=(window,),
            outputs=("min_idx", "max_idx"),
            dtype=OutputDType.INT32,
        ),
    )
    return sorted_defs(items)

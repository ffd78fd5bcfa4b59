"""
Hard indicator definitions grouped by functional family.

Related: tabatch.domain.entities.indicator_def
"""

from __future__ import annotations

from tabatch.domain.entities import IndicatorDef

from .cycle import defs as cycle_defs
from .math_operators import defs as math_operators_defs
from .math_transform import defs as math_transform_defs
from .momentum import defs as momentum_defs
from .overlap import defs as overlap_defs
from .pattern import defs as pattern_defs
from .price_transform import defs as price_transform_defs
from .statistic import defs as statistic_defs
from .volatility import defs as volatility_defs
from .volume import defs as volume_defs


def all_defs() -> tuple[IndicatorDef, ...]:
    """
    Return the full hard-definition set in stable cross-group order.

    Args:
        None.
    Returns:
        tuple[IndicatorDef, ...]: Immutable concatenation ordered as math transform,
            math operators, overlap, momentum, volume, volatility, price transform,
            cycle, statistic, pattern recognition.
    Assumptions:
        Each group-level defs() already returns deterministic tuples.
    Raises:
        None.
    Side Effects:
        None.
    """
    return (
        *math_transform_defs(),
        *math_operators_defs(),
        *overlap_defs(),
        *momentum_defs(),
        *volume_defs(),
        *volatility_defs(),
        *price_transform_defs(),
        *cycle_defs(),
        *statistic_defs(),
        *pattern_defs(),
    )


__all__ = ["all_defs"]

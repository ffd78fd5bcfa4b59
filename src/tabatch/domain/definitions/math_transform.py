"""
Hard indicator definitions for element-wise math transforms.

Related: tabatch.adapters.outbound.compute_numba.kernels.math_ops
"""

from __future__ import annotations

from tabatch.domain.entities import IndicatorDef, IndicatorGroup

from ._helpers import REAL, indicator, sorted_defs

_TITLES = (
    ("acos", "Vector Trigonometric ACos"),
    ("asin", "Vector Trigonometric ASin"),
    ("atan", "Vector Trigonometric ATan"),
    ("ceil", "Vector Ceil"),
    ("cos", "Vector Trigonometric Cos"),
    ("cosh", "Vector Trigonometric Cosh"),
    ("exp", "Vector Arithmetic Exp"),
    ("floor", "Vector Floor"),
    ("ln", "Vector Log Natural"),
    ("log10", "Vector Log10"),
    ("sin", "Vector Trigonometric Sin"),
    ("sinh", "Vector Trigonometric Sinh"),
    ("sqrt", "Vector Square Root"),
    ("tan", "Vector Trigonometric Tan"),
    ("tanh", "Vector Trigonometric Tanh"),
)


def defs() -> tuple[IndicatorDef, ...]:
    """
    Return math-transform definitions sorted by indicator_id.

    Args:
        None.
    Returns:
        tuple[IndicatorDef, ...]: Single-input, single-output, parameterless definitions.
    Assumptions:
        Every transform has zero lookback.
    Raises:
        ValueError: If any definition violates domain invariants.
    Side Effects:
        None.
    """
    return sorted_defs(
        tuple(
            indicator(name, title, group=IndicatorGroup.MATH_TRANSFORM, inputs=REAL)
            for name, title in _TITLES
        )
    )

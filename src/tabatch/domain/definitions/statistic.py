"""
Hard indicator definitions for statistic functions.

Related: tabatch.adapters.outbound.compute_numba.kernels.statistic
"""

from __future__ import annotations

from tabatch.domain.entities import IndicatorDef, IndicatorGroup

from ._helpers import REAL, REAL_PAIR, indicator, period, real, sorted_defs

_GROUP = IndicatorGroup.STATISTIC


def defs() -> tuple[IndicatorDef, ...]:
    """
    Return statistic definitions sorted by indicator_id.

    Args:
        None.
    Returns:
        tuple[IndicatorDef, ...]: Regression, correlation and dispersion functions.
    Assumptions:
        None.
    Raises:
        ValueError: If any definition violates domain invariants.
    Side Effects:
        None.
    """
    p14 = period(default=14)
    deviations = real("deviations", default=1.0)

    items = (
        indicator("beta", "Beta", group=_GROUP, inputs=REAL_PAIR,
                  params=(period(default=5, minimum=1),)),
        indicator("correl", "Pearson's Correlation Coefficient (r)", group=_GROUP,
                  inputs=REAL_PAIR, params=(period(default=30, minimum=1),)),
        indicator("linear_reg", "Linear Regression", group=_GROUP, inputs=REAL,
                  params=(p14,)),
        indicator("linear_reg_angle", "Linear Regression Angle", group=_GROUP, inputs=REAL,
                  params=(p14,)),
        indicator("linear_reg_intercept", "Linear Regression Intercept", group=_GROUP,
                  inputs=REAL, params=(p14,)),
        indicator("linear_reg_slope", "Linear Regression Slope", group=_GROUP, inputs=REAL,
                  params=(p14,)),
        indicator("std_dev", "Standard Deviation", group=_GROUP, inputs=REAL,
                  params=(period(default=5), deviations)),
        indicator("tsf", "Time Series Forecast", group=_GROUP, inputs=REAL, params=(p14,)),
        indicator("variance", "Variance", group=_GROUP, inputs=REAL,
                  params=(period(default=5, minimum=1), deviations)),
    )
    return sorted_defs(items)

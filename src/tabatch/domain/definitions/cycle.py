"""
Hard indicator definitions for Hilbert-transform cycle indicators.

Related: tabatch.adapters.outbound.compute_numba.kernels.cycle
"""

from __future__ import annotations

from tabatch.domain.entities import IndicatorDef, IndicatorGroup, OutputDType

from ._helpers import REAL, indicator, sorted_defs

_GROUP = IndicatorGroup.CYCLE


def defs() -> tuple[IndicatorDef, ...]:
    """
    Return cycle definitions sorted by indicator_id.

    Args:
        None.
    Returns:
        tuple[IndicatorDef, ...]: Parameterless Hilbert-transform indicators.
    Assumptions:
        Lookbacks are fixed by the transform warm-up, not by parameters.
    Raises:
        ValueError: If any definition violates domain invariants.
    Side Effects:
        None.
    """
    items = (
        indicator("ht_dc_period", "Hilbert Transform - Dominant Cycle Period", group=_GROUP,
                  inputs=REAL),
        indicator("ht_dc_phase", "Hilbert Transform - Dominant Cycle Phase", group=_GROUP,
                  inputs=REAL),
        indicator("ht_phasor", "Hilbert Transform - Phasor Components", group=_GROUP,
                  inputs=REAL, outputs=("in_phase", "quadrature")),
        indicator("ht_sine", "Hilbert Transform - SineWave", group=_GROUP, inputs=REAL,
                  outputs=("sine", "lead_sine")),
        indicator(
            "ht_trend_mode",
            "Hilbert Transform - Trend vs Cycle Mode",
            group=_GROUP,
            inputs=REAL,
            outputs=("integer",),
            dtype=OutputDType.INT32,
        ),
    )
    return sorted_defs(items)

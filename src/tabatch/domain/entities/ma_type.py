from __future__ import annotations

from enum import Enum


class MAType(str, Enum):
    """
    Moving-average families selectable through `ma_type`-style parameters.

    Related: .param_def, tabatch.adapters.outbound.compute_numba.kernels.overlap
    """

    SMA = "sma"
    EMA = "ema"
    WMA = "wma"
    DEMA = "dema"
    TEMA = "tema"
    TRIMA = "trima"
    KAMA = "kama"
    MAMA = "mama"
    T3 = "t3"

    @property
    def code(self) -> int:
        """
        Return the stable integer code kernels dispatch on.

        Args:
            None.
        Returns:
            int: Zero-based position of the member in declaration order.
        Assumptions:
            Declaration order never changes.
        Raises:
            None.
        Side Effects:
            None.
        """
        return _CODES[self]


_CODES = {member: index for index, member in enumerate(MAType)}

MA_TYPE_VALUES: tuple[str, ...] = tuple(member.value for member in MAType)

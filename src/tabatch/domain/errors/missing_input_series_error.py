from __future__ import annotations

from .indicator_argument_error import IndicatorArgumentError


class MissingInputSeriesError(IndicatorArgumentError):
    """
    Raised when a declared input series cannot be taken from a price-bar bundle.

    Related: ...application.dto.price_bars
    """

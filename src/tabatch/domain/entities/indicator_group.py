from __future__ import annotations

from enum import Enum


class IndicatorGroup(str, Enum):
    """
    Functional family an indicator belongs to.

    Related: .indicator_def, ..definitions
    """

    MATH_TRANSFORM = "math_transform"
    MATH_OPERATORS = "math_operators"
    OVERLAP_STUDIES = "overlap_studies"
    MOMENTUM = "momentum"
    VOLUME = "volume"
    VOLATILITY = "volatility"
    PRICE_TRANSFORM = "price_transform"
    CYCLE = "cycle"
    STATISTIC = "statistic"
    PATTERN_RECOGNITION = "pattern_recognition"

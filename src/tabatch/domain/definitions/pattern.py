"""
Hard indicator definitions for candlestick pattern recognition.

Every detector reads open/high/low/close and emits an int32 signal per bar:
0 when no pattern completes, +100/-100 for bullish/bearish patterns and
+200/-200 for confirmed variants (hikkake family).

Related: tabatch.adapters.outbound.compute_numba.kernels.pattern
"""

from __future__ import annotations

from tabatch.domain.entities import IndicatorDef, IndicatorGroup, OutputDType

from ._helpers import OHLC, indicator, real, sorted_defs

# (indicator id, title, default penetration or None)
PATTERNS: tuple[tuple[str, str, float | None], ...] = (
    ("cdl_2crows", "Two Crows", None),
    ("cdl_3black_crows", "Three Black Crows", None),
    ("cdl_3inside", "Three Inside Up/Down", None),
    ("cdl_3line_strike", "Three-Line Strike", None),
    ("cdl_3outside", "Three Outside Up/Down", None),
    ("cdl_3stars_in_south", "Three Stars In The South", None),
    ("cdl_3white_soldiers", "Three Advancing White Soldiers", None),
    ("cdl_abandoned_baby", "Abandoned Baby", 0.3),
    ("cdl_advance_block", "Advance Block", None),
    ("cdl_belt_hold", "Belt-hold", None),
    ("cdl_breakaway", "Breakaway", None),
    ("cdl_closing_marubozu", "Closing Marubozu", None),
    ("cdl_conceal_babys_wall", "Concealing Baby Swallow", None),
    ("cdl_counter_attack", "Counterattack", None),
    ("cdl_dark_cloud_cover", "Dark Cloud Cover", 0.5),
    ("cdl_doji", "Doji", None),
    ("cdl_doji_star", "Doji Star", None),
    ("cdl_dragonfly_doji", "Dragonfly Doji", None),
    ("cdl_engulfing", "Engulfing Pattern", None),
    ("cdl_evening_doji_star", "Evening Doji Star", 0.3),
    ("cdl_evening_star", "Evening Star", 0.3),
    ("cdl_gap_side_side_white", "Up/Down-gap side-by-side white lines", None),
    ("cdl_gravestone_doji", "Gravestone Doji", None),
    ("cdl_hammer", "Hammer", None),
    ("cdl_hanging_man", "Hanging Man", None),
    ("cdl_harami", "Harami Pattern", None),
    ("cdl_harami_cross", "Harami Cross Pattern", None),
    ("cdl_high_wave", "High-Wave Candle", None),
    ("cdl_hikkake", "Hikkake Pattern", None),
    ("cdl_hikkake_mod", "Modified Hikkake Pattern", None),
    ("cdl_homing_pigeon", "Homing Pigeon", None),
    ("cdl_identical_3crows", "Identical Three Crows", None),
    ("cdl_in_neck", "In-Neck Pattern", None),
    ("cdl_inverted_hammer", "Inverted Hammer", None),
    ("cdl_kicking", "Kicking", None),
    ("cdl_kicking_by_length", "Kicking - bull/bear determined by the longer marubozu", None),
    ("cdl_ladder_bottom", "Ladder Bottom", None),
    ("cdl_long_legged_doji", "Long Legged Doji", None),
    ("cdl_long_line", "Long Line Candle", None),
    ("cdl_marubozu", "Marubozu", None),
    ("cdl_matching_low", "Matching Low", None),
    ("cdl_mat_hold", "Mat Hold", 0.5),
    ("cdl_morning_doji_star", "Morning Doji Star", 0.3),
    ("cdl_morning_star", "Morning Star", 0.3),
    ("cdl_on_neck", "On-Neck Pattern", None),
    ("cdl_piercing", "Piercing Pattern", None),
    ("cdl_rickshaw_man", "Rickshaw Man", None),
    ("cdl_rise_fall_3methods", "Rising/Falling Three Methods", None),
    ("cdl_separating_lines", "Separating Lines", None),
    ("cdl_shooting_star", "Shooting Star", None),
    ("cdl_short_line", "Short Line Candle", None),
    ("cdl_spinning_top", "Spinning Top", None),
    ("cdl_stalled_pattern", "Stalled Pattern", None),
    ("cdl_stick_sandwich", "Stick Sandwich", None),
    ("cdl_takuri", "Takuri (Dragonfly Doji with very long lower shadow)", None),
    ("cdl_tasuki_gap", "Tasuki Gap", None),
    ("cdl_thrusting", "Thrusting Pattern", None),
    ("cdl_tristar", "Tristar Pattern", None),
    ("cdl_unique_3river", "Unique 3 River", None),
    ("cdl_upside_gap_2crows", "Upside Gap Two Crows", None),
    ("cdl_xside_gap_3methods", "Upside/Downside Gap Three Methods", None),
)


def defs() -> tuple[IndicatorDef, ...]:
    """
    Return candlestick-pattern definitions sorted by indicator_id.

    Args:
        None.
    Returns:
        tuple[IndicatorDef, ...]: OHLC detectors with int32 signal output.
    Assumptions:
        Star, abandoned-baby, dark-cloud and mat-hold detectors expose `penetration`.
    Raises:
        ValueError: If any definition violates domain invariants.
    Side Effects:
        None.
    """
    items: list[IndicatorDef] = []
    for indicator_id, title, penetration in PATTERNS:
        params = ()
        if penetration is not None:
            params = (real("penetration", default=penetration, minimum=0.0),)
        items.append(
            indicator(
                indicator_id,
                title,
                group=IndicatorGroup.PATTERN_RECOGNITION,
                inputs=OHLC,
                params=params,
                outputs=("integer",),
                dtype=OutputDType.INT32,
            )
        )
    return sorted_defs(tuple(items))

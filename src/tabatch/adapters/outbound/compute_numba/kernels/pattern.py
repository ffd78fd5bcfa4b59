"""
Numba candlestick pattern detectors.

Each detector takes a `(4, N)` OHLC matrix and the first index it may evaluate, and
returns an int32 series: 0 without a pattern, +100 bullish, -100 bearish, and +/-200
for confirmed hikkake variants.

Related: tabatch.adapters.outbound.compute_numba.kernels._candles,
  tabatch.domain.definitions.pattern
"""

from __future__ import annotations

from types import MappingProxyType

import numba as nb
import numpy as np

from ._candles import (
    BODY_DOJI,
    BODY_LONG,
    BODY_SHORT,
    CLOSE,
    EQUAL,
    FAR,
    HIGH,
    LOW,
    NEAR,
    OPEN,
    SHADOW_LONG,
    SHADOW_SHORT,
    SHADOW_VERY_LONG,
    SHADOW_VERY_SHORT,
    average,
    body,
    body_bottom,
    body_gap_down,
    body_gap_up,
    body_top,
    color,
    is_marubozu,
    is_near,
    lower_shadow,
    range_gap_down,
    range_gap_up,
    signal_series,
    span,
    upper_shadow,
)

PATTERN_LOOKBACKS = MappingProxyType(
    {
        "cdl_2crows": 12,
        "cdl_3black_crows": 13,
        "cdl_3inside": 12,
        "cdl_3line_strike": 8,
        "cdl_3outside": 3,
        "cdl_3stars_in_south": 12,
        "cdl_3white_soldiers": 12,
        "cdl_abandoned_baby": 12,
        "cdl_advance_block": 12,
        "cdl_belt_hold": 10,
        "cdl_breakaway": 14,
        "cdl_closing_marubozu": 10,
        "cdl_conceal_babys_wall": 13,
        "cdl_counter_attack": 11,
        "cdl_dark_cloud_cover": 11,
        "cdl_doji": 10,
        "cdl_doji_star": 11,
        "cdl_dragonfly_doji": 10,
        "cdl_engulfing": 2,
        "cdl_evening_doji_star": 12,
        "cdl_evening_star": 12,
        "cdl_gap_side_side_white": 7,
        "cdl_gravestone_doji": 10,
        "cdl_hammer": 11,
        "cdl_hanging_man": 11,
        "cdl_harami": 11,
        "cdl_harami_cross": 11,
        "cdl_high_wave": 10,
        "cdl_hikkake": 5,
        "cdl_hikkake_mod": 10,
        "cdl_homing_pigeon": 11,
        "cdl_identical_3crows": 12,
        "cdl_in_neck": 11,
        "cdl_inverted_hammer": 11,
        "cdl_kicking": 11,
        "cdl_kicking_by_length": 11,
        "cdl_ladder_bottom": 14,
        "cdl_long_legged_doji": 10,
        "cdl_long_line": 10,
        "cdl_marubozu": 10,
        "cdl_matching_low": 6,
        "cdl_mat_hold": 14,
        "cdl_morning_doji_star": 12,
        "cdl_morning_star": 12,
        "cdl_on_neck": 11,
        "cdl_piercing": 11,
        "cdl_rickshaw_man": 10,
        "cdl_rise_fall_3methods": 14,
        "cdl_separating_lines": 11,
        "cdl_shooting_star": 11,
        "cdl_short_line": 10,
        "cdl_spinning_top": 10,
        "cdl_stalled_pattern": 12,
        "cdl_stick_sandwich": 7,
        "cdl_takuri": 10,
        "cdl_tasuki_gap": 7,
        "cdl_thrusting": 11,
        "cdl_tristar": 12,
        "cdl_unique_3river": 12,
        "cdl_upside_gap_2crows": 12,
        "cdl_xside_gap_3methods": 2,
    }
)


# single-candle patterns


@nb.njit(cache=True)
def cdl_belt_hold_i32(bars: np.ndarray, start: int) -> np.ndarray:
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        side = color(bars, i)
        if body(bars, i) > average(bars, BODY_LONG, i) and (
            (side == 1 and lower_shadow(bars, i) < average(bars, SHADOW_VERY_SHORT, i))
            or (side == -1 and upper_shadow(bars, i) < average(bars, SHADOW_VERY_SHORT, i))
        ):
            out[i] = side * 100
    return out


@nb.njit(cache=True)
def cdl_closing_marubozu_i32(bars: np.ndarray, start: int) -> np.ndarray:
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        side = color(bars, i)
        if body(bars, i) > average(bars, BODY_LONG, i) and (
            (side == 1 and upper_shadow(bars, i) < average(bars, SHADOW_VERY_SHORT, i))
            or (side == -1 and lower_shadow(bars, i) < average(bars, SHADOW_VERY_SHORT, i))
        ):
            out[i] = side * 100
    return out


@nb.njit(cache=True)
def cdl_doji_i32(bars: np.ndarray, start: int) -> np.ndarray:
    """
    Flag candles whose real body is negligible against the recent high-low range.

    Args:
        bars: `(4, N)` OHLC matrix.
        start: First index to evaluate.
    Returns:
        np.ndarray: int32 series with 100 on doji candles.
    Assumptions:
        `start` leaves room for the doji reference average.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if body(bars, i) <= average(bars, BODY_DOJI, i):
            out[i] = 100
    return out


@nb.njit(cache=True)
def cdl_dragonfly_doji_i32(bars: np.ndarray, start: int) -> np.ndarray:
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            body(bars, i) <= average(bars, BODY_DOJI, i)
            and upper_shadow(bars, i) < average(bars, SHADOW_VERY_SHORT, i)
            and lower_shadow(bars, i) > average(bars, SHADOW_VERY_SHORT, i)
        ):
            out[i] = 100
    return out


@nb.njit(cache=True)
def cdl_gravestone_doji_i32(bars: np.ndarray, start: int) -> np.ndarray:
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            body(bars, i) <= average(bars, BODY_DOJI, i)
            and lower_shadow(bars, i) < average(bars, SHADOW_VERY_SHORT, i)
            and upper_shadow(bars, i) > average(bars, SHADOW_VERY_SHORT, i)
        ):
            out[i] = 100
    return out


@nb.njit(cache=True)
def cdl_high_wave_i32(bars: np.ndarray, start: int) -> np.ndarray:
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            body(bars, i) < average(bars, BODY_SHORT, i)
            and upper_shadow(bars, i) > average(bars, SHADOW_VERY_LONG, i)
            and lower_shadow(bars, i) > average(bars, SHADOW_VERY_LONG, i)
        ):
            out[i] = color(bars, i) * 100
    return out


@nb.njit(cache=True)
def cdl_long_legged_doji_i32(bars: np.ndarray, start: int) -> np.ndarray:
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if body(bars, i) <= average(bars, BODY_DOJI, i) and (
            lower_shadow(bars, i) > average(bars, SHADOW_LONG, i)
            or upper_shadow(bars, i) > average(bars, SHADOW_LONG, i)
        ):
            out[i] = 100
    return out


@nb.njit(cache=True)
def cdl_long_line_i32(bars: np.ndarray, start: int) -> np.ndarray:
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            body(bars, i) > average(bars, BODY_LONG, i)
            and upper_shadow(bars, i) < average(bars, SHADOW_SHORT, i)
            and lower_shadow(bars, i) < average(bars, SHADOW_SHORT, i)
        ):
            out[i] = color(bars, i) * 100
    return out


@nb.njit(cache=True)
def cdl_marubozu_i32(bars: np.ndarray, start: int) -> np.ndarray:
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if is_marubozu(bars, i):
            out[i] = color(bars, i) * 100
    return out


@nb.njit(cache=True)
def cdl_rickshaw_man_i32(bars: np.ndarray, start: int) -> np.ndarray:
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        middle = bars[LOW, i] + span(bars, i) / 2.0
        near = average(bars, NEAR, i)
        if (
            body(bars, i) <= average(bars, BODY_DOJI, i)
            and lower_shadow(bars, i) > average(bars, SHADOW_LONG, i)
            and upper_shadow(bars, i) > average(bars, SHADOW_LONG, i)
            and body_bottom(bars, i) <= middle + near
            and body_top(bars, i) >= middle - near
        ):
            out[i] = 100
    return out


@nb.njit(cache=True)
def cdl_short_line_i32(bars: np.ndarray, start: int) -> np.ndarray:
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            body(bars, i) < average(bars, BODY_SHORT, i)
            and upper_shadow(bars, i) < average(bars, SHADOW_SHORT, i)
            and lower_shadow(bars, i) < average(bars, SHADOW_SHORT, i)
        ):
            out[i] = color(bars, i) * 100
    return out


@nb.njit(cache=True)
def cdl_spinning_top_i32(bars: np.ndarray, start: int) -> np.ndarray:
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        real_body = body(bars, i)
        if (
            real_body < average(bars, BODY_SHORT, i)
            and upper_shadow(bars, i) > real_body
            and lower_shadow(bars, i) > real_body
        ):
            out[i] = color(bars, i) * 100
    return out


@nb.njit(cache=True)
def cdl_takuri_i32(bars: np.ndarray, start: int) -> np.ndarray:
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            body(bars, i) <= average(bars, BODY_DOJI, i)
            and upper_shadow(bars, i) < average(bars, SHADOW_VERY_SHORT, i)
            and lower_shadow(bars, i) > average(bars, SHADOW_VERY_LONG, i)
        ):
            out[i] = 100
    return out


# two-candle patterns


@nb.njit(cache=True)
def cdl_counter_attack_i32(bars: np.ndarray, start: int) -> np.ndarray:
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            color(bars, i - 1) == -color(bars, i)
            and body(bars, i - 1) > average(bars, BODY_LONG, i - 1)
            and body(bars, i) > average(bars, BODY_LONG, i)
            and is_near(bars, close[i], close[i - 1], EQUAL, i - 1)
        ):
            out[i] = color(bars, i) * 100
    return out


@nb.njit(cache=True)
def cdl_dark_cloud_cover_i32(bars: np.ndarray, start: int, penetration: float) -> np.ndarray:
    open_ = bars[OPEN]
    high = bars[HIGH]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            color(bars, i - 1) == 1
            and body(bars, i - 1) > average(bars, BODY_LONG, i - 1)
            and color(bars, i) == -1
            and open_[i] > high[i - 1]
            and close[i] > open_[i - 1]
            and close[i] < close[i - 1] - body(bars, i - 1) * penetration
        ):
            out[i] = -100
    return out


@nb.njit(cache=True)
def cdl_doji_star_i32(bars: np.ndarray, start: int) -> np.ndarray:
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        side = color(bars, i - 1)
        if (
            body(bars, i - 1) > average(bars, BODY_LONG, i - 1)
            and body(bars, i) <= average(bars, BODY_DOJI, i)
            and (
                (side == 1 and body_gap_up(bars, i, i - 1))
                or (side == -1 and body_gap_down(bars, i, i - 1))
            )
        ):
            out[i] = -side * 100
    return out


@nb.njit(cache=True)
def cdl_engulfing_i32(bars: np.ndarray, start: int) -> np.ndarray:
    """
    Flag a body that engulfs the opposite-colored previous body.

    Args:
        bars: `(4, N)` OHLC matrix.
        start: First index to evaluate.
    Returns:
        np.ndarray: int32 series with +100 bullish and -100 bearish engulfing.
    Assumptions:
        One matching body edge is allowed when the other edge strictly engulfs.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    open_ = bars[OPEN]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        bullish = (
            color(bars, i) == 1
            and color(bars, i - 1) == -1
            and (
                (close[i] >= open_[i - 1] and open_[i] < close[i - 1])
                or (close[i] > open_[i - 1] and open_[i] <= close[i - 1])
            )
        )
        bearish = (
            color(bars, i) == -1
            and color(bars, i - 1) == 1
            and (
                (open_[i] >= close[i - 1] and close[i] < open_[i - 1])
                or (open_[i] > close[i - 1] and close[i] <= open_[i - 1])
            )
        )
        if bullish or bearish:
            out[i] = color(bars, i) * 100
    return out


@nb.njit(cache=True)
def _hammer_shape(bars: np.ndarray, i: int) -> bool:
    return (
        body(bars, i) < average(bars, BODY_SHORT, i)
        and lower_shadow(bars, i) > average(bars, SHADOW_LONG, i)
        and upper_shadow(bars, i) < average(bars, SHADOW_VERY_SHORT, i)
    )


@nb.njit(cache=True)
def cdl_hammer_i32(bars: np.ndarray, start: int) -> np.ndarray:
    low = bars[LOW]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if _hammer_shape(bars, i) and body_bottom(bars, i) <= low[i - 1] + average(
            bars, NEAR, i - 1
        ):
            out[i] = 100
    return out


@nb.njit(cache=True)
def cdl_hanging_man_i32(bars: np.ndarray, start: int) -> np.ndarray:
    high = bars[HIGH]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if _hammer_shape(bars, i) and body_bottom(bars, i) >= high[i - 1] - average(
            bars, NEAR, i - 1
        ):
            out[i] = -100
    return out


@nb.njit(cache=True)
def _harami(bars: np.ndarray, start: int, setting: int) -> np.ndarray:
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            body(bars, i - 1) > average(bars, BODY_LONG, i - 1)
            and body(bars, i) <= average(bars, setting, i)
            and body_top(bars, i) < body_top(bars, i - 1)
            and body_bottom(bars, i) > body_bottom(bars, i - 1)
        ):
            out[i] = -color(bars, i - 1) * 100
    return out


@nb.njit(cache=True)
def cdl_harami_i32(bars: np.ndarray, start: int) -> np.ndarray:
    return _harami(bars, start, BODY_SHORT)


@nb.njit(cache=True)
def cdl_harami_cross_i32(bars: np.ndarray, start: int) -> np.ndarray:
    return _harami(bars, start, BODY_DOJI)


@nb.njit(cache=True)
def cdl_homing_pigeon_i32(bars: np.ndarray, start: int) -> np.ndarray:
    open_ = bars[OPEN]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            color(bars, i - 1) == -1
            and color(bars, i) == -1
            and body(bars, i - 1) > average(bars, BODY_LONG, i - 1)
            and body(bars, i) <= average(bars, BODY_SHORT, i)
            and open_[i] < open_[i - 1]
            and close[i] > close[i - 1]
        ):
            out[i] = 100
    return out


@nb.njit(cache=True)
def _long_black_then_white(bars: np.ndarray, i: int) -> bool:
    return (
        color(bars, i - 1) == -1
        and body(bars, i - 1) > average(bars, BODY_LONG, i - 1)
        and color(bars, i) == 1
        and bars[OPEN, i] < bars[LOW, i - 1]
    )


@nb.njit(cache=True)
def cdl_in_neck_i32(bars: np.ndarray, start: int) -> np.ndarray:
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            _long_black_then_white(bars, i)
            and close[i] <= close[i - 1] + average(bars, EQUAL, i - 1)
            and close[i] >= close[i - 1]
        ):
            out[i] = -100
    return out


@nb.njit(cache=True)
def cdl_on_neck_i32(bars: np.ndarray, start: int) -> np.ndarray:
    low = bars[LOW]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if _long_black_then_white(bars, i) and is_near(bars, close[i], low[i - 1], EQUAL, i - 1):
            out[i] = -100
    return out


@nb.njit(cache=True)
def cdl_thrusting_i32(bars: np.ndarray, start: int) -> np.ndarray:
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            _long_black_then_white(bars, i)
            and close[i] > close[i - 1] + average(bars, EQUAL, i - 1)
            and close[i] <= close[i - 1] + body(bars, i - 1) * 0.5
        ):
            out[i] = -100
    return out


@nb.njit(cache=True)
def cdl_piercing_i32(bars: np.ndarray, start: int) -> np.ndarray:
    open_ = bars[OPEN]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            _long_black_then_white(bars, i)
            and body(bars, i) > average(bars, BODY_LONG, i)
            and close[i] < open_[i - 1]
            and close[i] > close[i - 1] + body(bars, i - 1) * 0.5
        ):
            out[i] = 100
    return out


@nb.njit(cache=True)
def cdl_inverted_hammer_i32(bars: np.ndarray, start: int) -> np.ndarray:
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            body(bars, i) < average(bars, BODY_SHORT, i)
            and upper_shadow(bars, i) > average(bars, SHADOW_LONG, i)
            and lower_shadow(bars, i) < average(bars, SHADOW_VERY_SHORT, i)
            and body_gap_down(bars, i, i - 1)
        ):
            out[i] = 100
    return out


@nb.njit(cache=True)
def cdl_shooting_star_i32(bars: np.ndarray, start: int) -> np.ndarray:
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            body(bars, i) < average(bars, BODY_SHORT, i)
            and upper_shadow(bars, i) > average(bars, SHADOW_LONG, i)
            and lower_shadow(bars, i) < average(bars, SHADOW_VERY_SHORT, i)
            and body_gap_up(bars, i, i - 1)
        ):
            out[i] = -100
    return out


@nb.njit(cache=True)
def _kicking_setup(bars: np.ndarray, i: int) -> bool:
    side = color(bars, i - 1)
    return (
        side == -color(bars, i)
        and is_marubozu(bars, i - 1)
        and is_marubozu(bars, i)
        and (
            (side == -1 and range_gap_up(bars, i, i - 1))
            or (side == 1 and range_gap_down(bars, i, i - 1))
        )
    )


@nb.njit(cache=True)
def cdl_kicking_i32(bars: np.ndarray, start: int) -> np.ndarray:
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if _kicking_setup(bars, i):
            out[i] = color(bars, i) * 100
    return out


@nb.njit(cache=True)
def cdl_kicking_by_length_i32(bars: np.ndarray, start: int) -> np.ndarray:
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if _kicking_setup(bars, i):
            if body(bars, i) > body(bars, i - 1):
                out[i] = color(bars, i) * 100
            else:
                out[i] = color(bars, i - 1) * 100
    return out


@nb.njit(cache=True)
def cdl_matching_low_i32(bars: np.ndarray, start: int) -> np.ndarray:
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            color(bars, i - 1) == -1
            and color(bars, i) == -1
            and is_near(bars, close[i], close[i - 1], EQUAL, i - 1)
        ):
            out[i] = 100
    return out


@nb.njit(cache=True)
def cdl_separating_lines_i32(bars: np.ndarray, start: int) -> np.ndarray:
    open_ = bars[OPEN]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        side = color(bars, i)
        if (
            color(bars, i - 1) == -side
            and is_near(bars, open_[i], open_[i - 1], EQUAL, i - 1)
            and body(bars, i) > average(bars, BODY_LONG, i)
            and (
                (side == 1 and lower_shadow(bars, i) < average(bars, SHADOW_VERY_SHORT, i))
                or (side == -1 and upper_shadow(bars, i) < average(bars, SHADOW_VERY_SHORT, i))
            )
        ):
            out[i] = side * 100
    return out


# three-candle patterns


@nb.njit(cache=True)
def cdl_2crows_i32(bars: np.ndarray, start: int) -> np.ndarray:
    open_ = bars[OPEN]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            color(bars, i - 2) == 1
            and body(bars, i - 2) > average(bars, BODY_LONG, i - 2)
            and color(bars, i - 1) == -1
            and body_gap_up(bars, i - 1, i - 2)
            and color(bars, i) == -1
            and open_[i] < open_[i - 1]
            and open_[i] > close[i - 1]
            and close[i] > open_[i - 2]
            and close[i] < close[i - 2]
        ):
            out[i] = -100
    return out


@nb.njit(cache=True)
def cdl_3inside_i32(bars: np.ndarray, start: int) -> np.ndarray:
    open_ = bars[OPEN]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        first_side = color(bars, i - 2)
        if (
            body(bars, i - 2) > average(bars, BODY_LONG, i - 2)
            and body(bars, i - 1) <= average(bars, BODY_SHORT, i - 1)
            and body_top(bars, i - 1) < body_top(bars, i - 2)
            and body_bottom(bars, i - 1) > body_bottom(bars, i - 2)
            and (
                (first_side == 1 and color(bars, i) == -1 and close[i] < open_[i - 2])
                or (first_side == -1 and color(bars, i) == 1 and close[i] > open_[i - 2])
            )
        ):
            out[i] = -first_side * 100
    return out


@nb.njit(cache=True)
def cdl_3outside_i32(bars: np.ndarray, start: int) -> np.ndarray:
    open_ = bars[OPEN]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            color(bars, i - 1) == 1
            and color(bars, i - 2) == -1
            and close[i - 1] > open_[i - 2]
            and open_[i - 1] < close[i - 2]
            and close[i] > close[i - 1]
        ):
            out[i] = 100
        elif (
            color(bars, i - 1) == -1
            and color(bars, i - 2) == 1
            and open_[i - 1] > close[i - 2]
            and close[i - 1] < open_[i - 2]
            and close[i] < close[i - 1]
        ):
            out[i] = -100
    return out


@nb.njit(cache=True)
def cdl_3stars_in_south_i32(bars: np.ndarray, start: int) -> np.ndarray:
    open_ = bars[OPEN]
    high = bars[HIGH]
    low = bars[LOW]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            color(bars, i - 2) == -1
            and color(bars, i - 1) == -1
            and color(bars, i) == -1
            and body(bars, i - 2) > average(bars, BODY_LONG, i - 2)
            and lower_shadow(bars, i - 2) > average(bars, SHADOW_LONG, i - 2)
            and body(bars, i - 1) < body(bars, i - 2)
            and open_[i - 1] > close[i - 2]
            and open_[i - 1] <= high[i - 2]
            and low[i - 1] < close[i - 2]
            and low[i - 1] >= low[i - 2]
            and lower_shadow(bars, i - 1) > average(bars, SHADOW_VERY_SHORT, i - 1)
            and body(bars, i) < average(bars, BODY_SHORT, i)
            and lower_shadow(bars, i) < average(bars, SHADOW_VERY_SHORT, i)
            and upper_shadow(bars, i) < average(bars, SHADOW_VERY_SHORT, i)
            and low[i] > low[i - 1]
            and high[i] < high[i - 1]
        ):
            out[i] = 100
    return out


@nb.njit(cache=True)
def cdl_3white_soldiers_i32(bars: np.ndarray, start: int) -> np.ndarray:
    open_ = bars[OPEN]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            color(bars, i - 2) == 1
            and upper_shadow(bars, i - 2) < average(bars, SHADOW_VERY_SHORT, i - 2)
            and color(bars, i - 1) == 1
            and upper_shadow(bars, i - 1) < average(bars, SHADOW_VERY_SHORT, i - 1)
            and color(bars, i) == 1
            and upper_shadow(bars, i) < average(bars, SHADOW_VERY_SHORT, i)
            and close[i] > close[i - 1]
            and close[i - 1] > close[i - 2]
            and open_[i - 1] > open_[i - 2]
            and open_[i - 1] <= close[i - 2] + average(bars, NEAR, i - 2)
            and open_[i] > open_[i - 1]
            and open_[i] <= close[i - 1] + average(bars, NEAR, i - 1)
            and body(bars, i - 1) > body(bars, i - 2) - average(bars, FAR, i - 2)
            and body(bars, i) > body(bars, i - 1) - average(bars, FAR, i - 1)
            and body(bars, i) > average(bars, BODY_SHORT, i)
        ):
            out[i] = 100
    return out


@nb.njit(cache=True)
def cdl_abandoned_baby_i32(bars: np.ndarray, start: int, penetration: float) -> np.ndarray:
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        first_body = body(bars, i - 2)
        if not (
            first_body > average(bars, BODY_LONG, i - 2)
            and body(bars, i - 1) <= average(bars, BODY_DOJI, i - 1)
            and body(bars, i) > average(bars, BODY_SHORT, i)
        ):
            continue
        if (
            color(bars, i - 2) == 1
            and color(bars, i) == -1
            and close[i] < close[i - 2] - first_body * penetration
            and range_gap_up(bars, i - 1, i - 2)
            and range_gap_down(bars, i, i - 1)
        ):
            out[i] = -100
        elif (
            color(bars, i - 2) == -1
            and color(bars, i) == 1
            and close[i] > close[i - 2] + first_body * penetration
            and range_gap_down(bars, i - 1, i - 2)
            and range_gap_up(bars, i, i - 1)
        ):
            out[i] = 100
    return out


@nb.njit(cache=True)
def cdl_advance_block_i32(bars: np.ndarray, start: int) -> np.ndarray:
    """
    Flag three advancing white candles whose strength visibly fades.

    Args:
        bars: `(4, N)` OHLC matrix.
        start: First index to evaluate.
    Returns:
        np.ndarray: int32 series with -100 where the advance weakens.
    Assumptions:
        Weakening means shrinking bodies, growing upper shadows, or both.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    open_ = bars[OPEN]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if not (
            color(bars, i - 2) == 1
            and color(bars, i - 1) == 1
            and color(bars, i) == 1
            and close[i] > close[i - 1]
            and close[i - 1] > close[i - 2]
            and open_[i - 1] > open_[i - 2]
            and open_[i - 1] <= close[i - 2] + average(bars, NEAR, i - 2)
            and open_[i] > open_[i - 1]
            and open_[i] <= close[i - 1] + average(bars, NEAR, i - 1)
            and body(bars, i - 2) > average(bars, BODY_LONG, i - 2)
            and upper_shadow(bars, i - 2) < average(bars, SHADOW_SHORT, i - 2)
        ):
            continue
        body2 = body(bars, i - 2)
        body1 = body(bars, i - 1)
        body0 = body(bars, i)
        if (
            (
                body1 < body2 - average(bars, FAR, i - 2)
                and body0 < body1 + average(bars, NEAR, i - 1)
            )
            or body0 < body1 - average(bars, FAR, i - 1)
            or (
                body0 < body1
                and body1 < body2
                and (
                    upper_shadow(bars, i) > average(bars, SHADOW_SHORT, i)
                    or upper_shadow(bars, i - 1) > average(bars, SHADOW_SHORT, i - 1)
                )
            )
            or (body0 < body1 and upper_shadow(bars, i) > average(bars, SHADOW_LONG, i))
        ):
            out[i] = -100
    return out


@nb.njit(cache=True)
def _star(bars: np.ndarray, start: int, penetration: float, doji: bool, bullish: bool):
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    middle_setting = BODY_DOJI if doji else BODY_SHORT
    first_side = -1 if bullish else 1
    for i in range(start, bars.shape[1]):
        first_body = body(bars, i - 2)
        if not (
            first_body > average(bars, BODY_LONG, i - 2)
            and color(bars, i - 2) == first_side
            and body(bars, i - 1) <= average(bars, middle_setting, i - 1)
            and body(bars, i) > average(bars, BODY_SHORT, i)
            and color(bars, i) == -first_side
        ):
            continue
        if bullish:
            if body_gap_down(bars, i - 1, i - 2) and close[i] > close[i - 2] + first_body * penetration:
                out[i] = 100
        elif body_gap_up(bars, i - 1, i - 2) and close[i] < close[i - 2] - first_body * penetration:
            out[i] = -100
    return out


@nb.njit(cache=True)
def cdl_evening_doji_star_i32(bars: np.ndarray, start: int, penetration: float) -> np.ndarray:
    return _star(bars, start, penetration, True, False)


@nb.njit(cache=True)
def cdl_evening_star_i32(bars: np.ndarray, start: int, penetration: float) -> np.ndarray:
    return _star(bars, start, penetration, False, False)


@nb.njit(cache=True)
def cdl_morning_doji_star_i32(bars: np.ndarray, start: int, penetration: float) -> np.ndarray:
    return _star(bars, start, penetration, True, True)


@nb.njit(cache=True)
def cdl_morning_star_i32(bars: np.ndarray, start: int, penetration: float) -> np.ndarray:
    return _star(bars, start, penetration, False, True)


@nb.njit(cache=True)
def cdl_gap_side_side_white_i32(bars: np.ndarray, start: int) -> np.ndarray:
    open_ = bars[OPEN]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        gap_up = body_gap_up(bars, i - 1, i - 2) and body_gap_up(bars, i, i - 2)
        gap_down = body_gap_down(bars, i - 1, i - 2) and body_gap_down(bars, i, i - 2)
        if (
            (gap_up or gap_down)
            and color(bars, i - 1) == 1
            and color(bars, i) == 1
            and is_near(bars, body(bars, i), body(bars, i - 1), NEAR, i - 1)
            and is_near(bars, open_[i], open_[i - 1], EQUAL, i - 1)
        ):
            out[i] = 100 if gap_up else -100
    return out


@nb.njit(cache=True)
def cdl_identical_3crows_i32(bars: np.ndarray, start: int) -> np.ndarray:
    open_ = bars[OPEN]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            color(bars, i - 2) == -1
            and lower_shadow(bars, i - 2) < average(bars, SHADOW_VERY_SHORT, i - 2)
            and color(bars, i - 1) == -1
            and lower_shadow(bars, i - 1) < average(bars, SHADOW_VERY_SHORT, i - 1)
            and color(bars, i) == -1
            and lower_shadow(bars, i) < average(bars, SHADOW_VERY_SHORT, i)
            and close[i - 2] > close[i - 1]
            and close[i - 1] > close[i]
            and is_near(bars, open_[i - 1], close[i - 2], EQUAL, i - 2)
            and is_near(bars, open_[i], close[i - 1], EQUAL, i - 1)
        ):
            out[i] = -100
    return out


@nb.njit(cache=True)
def cdl_stalled_pattern_i32(bars: np.ndarray, start: int) -> np.ndarray:
    open_ = bars[OPEN]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            color(bars, i - 2) == 1
            and color(bars, i - 1) == 1
            and color(bars, i) == 1
            and close[i] > close[i - 1]
            and close[i - 1] > close[i - 2]
            and body(bars, i - 2) > average(bars, BODY_LONG, i - 2)
            and body(bars, i - 1) > average(bars, BODY_LONG, i - 1)
            and upper_shadow(bars, i - 1) < average(bars, SHADOW_VERY_SHORT, i - 1)
            and open_[i - 1] > open_[i - 2]
            and open_[i - 1] <= close[i - 2] + average(bars, NEAR, i - 2)
            and body(bars, i) < average(bars, BODY_SHORT, i)
            and open_[i] >= close[i - 1] - body(bars, i) - average(bars, NEAR, i - 1)
        ):
            out[i] = -100
    return out


@nb.njit(cache=True)
def cdl_stick_sandwich_i32(bars: np.ndarray, start: int) -> np.ndarray:
    low = bars[LOW]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            color(bars, i - 2) == -1
            and color(bars, i - 1) == 1
            and color(bars, i) == -1
            and low[i - 1] > close[i - 2]
            and is_near(bars, close[i], close[i - 2], EQUAL, i - 2)
        ):
            out[i] = 100
    return out


@nb.njit(cache=True)
def cdl_tasuki_gap_i32(bars: np.ndarray, start: int) -> np.ndarray:
    open_ = bars[OPEN]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        similar = abs(body(bars, i - 1) - body(bars, i)) < average(bars, NEAR, i - 1)
        if not similar:
            continue
        if (
            body_gap_up(bars, i - 1, i - 2)
            and color(bars, i - 1) == 1
            and color(bars, i) == -1
            and open_[i] < close[i - 1]
            and open_[i] > open_[i - 1]
            and close[i] < open_[i - 1]
            and close[i] > body_top(bars, i - 2)
        ):
            out[i] = 100
        elif (
            body_gap_down(bars, i - 1, i - 2)
            and color(bars, i - 1) == -1
            and color(bars, i) == 1
            and open_[i] < open_[i - 1]
            and open_[i] > close[i - 1]
            and close[i] > open_[i - 1]
            and close[i] < body_bottom(bars, i - 2)
        ):
            out[i] = -100
    return out


@nb.njit(cache=True)
def cdl_tristar_i32(bars: np.ndarray, start: int) -> np.ndarray:
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if not (
            body(bars, i - 2) <= average(bars, BODY_DOJI, i - 2)
            and body(bars, i - 1) <= average(bars, BODY_DOJI, i - 1)
            and body(bars, i) <= average(bars, BODY_DOJI, i)
        ):
            continue
        if body_gap_up(bars, i - 1, i - 2) and body_top(bars, i) < body_top(bars, i - 1):
            out[i] = -100
        elif body_gap_down(bars, i - 1, i - 2) and body_bottom(bars, i) > body_bottom(bars, i - 1):
            out[i] = 100
    return out


@nb.njit(cache=True)
def cdl_unique_3river_i32(bars: np.ndarray, start: int) -> np.ndarray:
    open_ = bars[OPEN]
    low = bars[LOW]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            body(bars, i - 2) > average(bars, BODY_LONG, i - 2)
            and color(bars, i - 2) == -1
            and color(bars, i - 1) == -1
            and close[i - 1] > close[i - 2]
            and open_[i - 1] <= open_[i - 2]
            and low[i - 1] < low[i - 2]
            and body(bars, i) < average(bars, BODY_SHORT, i)
            and color(bars, i) == 1
            and open_[i] > low[i - 1]
        ):
            out[i] = 100
    return out


@nb.njit(cache=True)
def cdl_upside_gap_2crows_i32(bars: np.ndarray, start: int) -> np.ndarray:
    open_ = bars[OPEN]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            color(bars, i - 2) == 1
            and body(bars, i - 2) > average(bars, BODY_LONG, i - 2)
            and color(bars, i - 1) == -1
            and body(bars, i - 1) <= average(bars, BODY_SHORT, i - 1)
            and body_gap_up(bars, i - 1, i - 2)
            and color(bars, i) == -1
            and open_[i] > open_[i - 1]
            and close[i] < close[i - 1]
            and close[i] > close[i - 2]
        ):
            out[i] = -100
    return out


@nb.njit(cache=True)
def cdl_xside_gap_3methods_i32(bars: np.ndarray, start: int) -> np.ndarray:
    open_ = bars[OPEN]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        side = color(bars, i - 2)
        if (
            color(bars, i - 1) == side
            and color(bars, i) == -side
            and open_[i] < body_top(bars, i - 1)
            and open_[i] > body_bottom(bars, i - 1)
            and close[i] < body_top(bars, i - 2)
            and close[i] > body_bottom(bars, i - 2)
            and (
                (side == 1 and body_gap_up(bars, i - 1, i - 2))
                or (side == -1 and body_gap_down(bars, i - 1, i - 2))
            )
        ):
            out[i] = side * 100
    return out


# four- and five-candle patterns


@nb.njit(cache=True)
def cdl_3black_crows_i32(bars: np.ndarray, start: int) -> np.ndarray:
    open_ = bars[OPEN]
    high = bars[HIGH]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            color(bars, i - 3) == 1
            and color(bars, i - 2) == -1
            and lower_shadow(bars, i - 2) < average(bars, SHADOW_VERY_SHORT, i - 2)
            and color(bars, i - 1) == -1
            and lower_shadow(bars, i - 1) < average(bars, SHADOW_VERY_SHORT, i - 1)
            and color(bars, i) == -1
            and lower_shadow(bars, i) < average(bars, SHADOW_VERY_SHORT, i)
            and open_[i - 1] < open_[i - 2]
            and open_[i - 1] > close[i - 2]
            and open_[i] < open_[i - 1]
            and open_[i] > close[i - 1]
            and high[i - 3] > close[i - 2]
            and close[i - 2] > close[i - 1]
            and close[i - 1] > close[i]
        ):
            out[i] = -100
    return out


@nb.njit(cache=True)
def cdl_3line_strike_i32(bars: np.ndarray, start: int) -> np.ndarray:
    open_ = bars[OPEN]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        side = color(bars, i - 1)
        if not (
            color(bars, i - 3) == side
            and color(bars, i - 2) == side
            and color(bars, i) == -side
            and open_[i - 2] >= body_bottom(bars, i - 3) - average(bars, NEAR, i - 3)
            and open_[i - 2] <= body_top(bars, i - 3) + average(bars, NEAR, i - 3)
            and open_[i - 1] >= body_bottom(bars, i - 2) - average(bars, NEAR, i - 2)
            and open_[i - 1] <= body_top(bars, i - 2) + average(bars, NEAR, i - 2)
        ):
            continue
        if (
            side == 1
            and close[i - 1] > close[i - 2]
            and close[i - 2] > close[i - 3]
            and open_[i] > close[i - 1]
            and close[i] < open_[i - 3]
        ) or (
            side == -1
            and close[i - 1] < close[i - 2]
            and close[i - 2] < close[i - 3]
            and open_[i] < close[i - 1]
            and close[i] > open_[i - 3]
        ):
            out[i] = side * 100
    return out


@nb.njit(cache=True)
def cdl_conceal_babys_wall_i32(bars: np.ndarray, start: int) -> np.ndarray:
    high = bars[HIGH]
    low = bars[LOW]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            color(bars, i - 3) == -1
            and color(bars, i - 2) == -1
            and color(bars, i - 1) == -1
            and color(bars, i) == -1
            and lower_shadow(bars, i - 3) < average(bars, SHADOW_VERY_SHORT, i - 3)
            and upper_shadow(bars, i - 3) < average(bars, SHADOW_VERY_SHORT, i - 3)
            and lower_shadow(bars, i - 2) < average(bars, SHADOW_VERY_SHORT, i - 2)
            and upper_shadow(bars, i - 2) < average(bars, SHADOW_VERY_SHORT, i - 2)
            and body_gap_down(bars, i - 1, i - 2)
            and upper_shadow(bars, i - 1) > average(bars, SHADOW_VERY_SHORT, i - 1)
            and high[i - 1] > close[i - 2]
            and high[i] > high[i - 1]
            and low[i] < low[i - 1]
        ):
            out[i] = 100
    return out


@nb.njit(cache=True)
def cdl_breakaway_i32(bars: np.ndarray, start: int) -> np.ndarray:
    open_ = bars[OPEN]
    high = bars[HIGH]
    low = bars[LOW]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        side = color(bars, i - 4)
        if not (
            body(bars, i - 4) > average(bars, BODY_LONG, i - 4)
            and color(bars, i - 3) == side
            and color(bars, i - 1) == side
            and color(bars, i) == -side
        ):
            continue
        if (
            side == -1
            and body_gap_down(bars, i - 3, i - 4)
            and high[i - 2] < high[i - 3]
            and low[i - 2] < low[i - 3]
            and high[i - 1] < high[i - 2]
            and low[i - 1] < low[i - 2]
            and close[i] > open_[i - 3]
            and close[i] < close[i - 4]
        ) or (
            side == 1
            and body_gap_up(bars, i - 3, i - 4)
            and high[i - 2] > high[i - 3]
            and low[i - 2] > low[i - 3]
            and high[i - 1] > high[i - 2]
            and low[i - 1] > low[i - 2]
            and close[i] < open_[i - 3]
            and close[i] > close[i - 4]
        ):
            out[i] = -side * 100
    return out


@nb.njit(cache=True)
def cdl_ladder_bottom_i32(bars: np.ndarray, start: int) -> np.ndarray:
    open_ = bars[OPEN]
    high = bars[HIGH]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        if (
            color(bars, i - 4) == -1
            and color(bars, i - 3) == -1
            and color(bars, i - 2) == -1
            and open_[i - 4] > open_[i - 3]
            and open_[i - 3] > open_[i - 2]
            and close[i - 4] > close[i - 3]
            and close[i - 3] > close[i - 2]
            and color(bars, i - 1) == -1
            and upper_shadow(bars, i - 1) > average(bars, SHADOW_VERY_SHORT, i - 1)
            and color(bars, i) == 1
            and open_[i] > open_[i - 1]
            and close[i] > high[i - 1]
        ):
            out[i] = 100
    return out


@nb.njit(cache=True)
def cdl_mat_hold_i32(bars: np.ndarray, start: int, penetration: float) -> np.ndarray:
    open_ = bars[OPEN]
    high = bars[HIGH]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        first_body = body(bars, i - 4)
        floor = close[i - 4] - first_body * penetration
        if (
            first_body > average(bars, BODY_LONG, i - 4)
            and body(bars, i - 3) < average(bars, BODY_SHORT, i - 3)
            and body(bars, i - 2) < average(bars, BODY_SHORT, i - 2)
            and body(bars, i - 1) < average(bars, BODY_SHORT, i - 1)
            and color(bars, i - 4) == 1
            and color(bars, i - 3) == -1
            and color(bars, i) == 1
            and body_gap_up(bars, i - 3, i - 4)
            and body_bottom(bars, i - 2) < close[i - 4]
            and body_bottom(bars, i - 1) < close[i - 4]
            and body_bottom(bars, i - 2) > floor
            and body_bottom(bars, i - 1) > floor
            and body_top(bars, i - 2) < open_[i - 3]
            and body_top(bars, i - 1) < body_top(bars, i - 2)
            and open_[i] > close[i - 1]
            and close[i] > max(high[i - 3], high[i - 2], high[i - 1])
        ):
            out[i] = 100
    return out


@nb.njit(cache=True)
def cdl_rise_fall_3methods_i32(bars: np.ndarray, start: int) -> np.ndarray:
    """
    Flag a long candle, three small counter-trend candles held inside its range, and a
    long continuation candle.

    Args:
        bars: `(4, N)` OHLC matrix.
        start: First index to evaluate.
    Returns:
        np.ndarray: int32 series with +100 rising and -100 falling three methods.
    Assumptions:
        None.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    open_ = bars[OPEN]
    high = bars[HIGH]
    low = bars[LOW]
    close = bars[CLOSE]
    out = signal_series(bars.shape[1])
    for i in range(start, bars.shape[1]):
        side = color(bars, i - 4)
        if not (
            body(bars, i - 4) > average(bars, BODY_LONG, i - 4)
            and body(bars, i - 3) < average(bars, BODY_SHORT, i - 3)
            and body(bars, i - 2) < average(bars, BODY_SHORT, i - 2)
            and body(bars, i - 1) < average(bars, BODY_SHORT, i - 1)
            and body(bars, i) > average(bars, BODY_LONG, i)
            and color(bars, i - 3) == -side
            and color(bars, i - 2) == -side
            and color(bars, i - 1) == -side
            and color(bars, i) == side
        ):
            continue
        contained = True
        for inner in range(i - 3, i):
            if body_bottom(bars, inner) >= high[i - 4] or body_top(bars, inner) <= low[i - 4]:
                contained = False
        if (
            contained
            and close[i - 2] * side < close[i - 3] * side
            and close[i - 1] * side < close[i - 2] * side
            and open_[i] * side > close[i - 1] * side
            and close[i] * side > close[i - 4] * side
        ):
            out[i] = side * 100
    return out


# hikkake family


@nb.njit(cache=True)
def _inside_bar(bars: np.ndarray, index: int) -> bool:
    return bars[HIGH, index] < bars[HIGH, index - 1] and bars[LOW, index] > bars[LOW, index - 1]


@nb.njit(cache=True)
def _hikkake_signal(bars: np.ndarray, i: int, modified: bool) -> int:
    high = bars[HIGH]
    low = bars[LOW]
    close = bars[CLOSE]
    if not _inside_bar(bars, i - 1):
        return 0
    if modified and not _inside_bar(bars, i - 2):
        return 0
    if high[i] < high[i - 1] and low[i] < low[i - 1]:
        if not modified or close[i - 2] <= low[i - 2] + average(bars, NEAR, i - 2):
            return 100
    elif high[i] > high[i - 1] and low[i] > low[i - 1]:
        if not modified or close[i - 2] >= high[i - 2] - average(bars, NEAR, i - 2):
            return -100
    return 0


@nb.njit(cache=True)
def _hikkake(bars: np.ndarray, start: int, modified: bool) -> np.ndarray:
    high = bars[HIGH]
    low = bars[LOW]
    close = bars[CLOSE]
    size = bars.shape[1]
    out = signal_series(size)
    pattern_index = 0
    pattern_signal = 0
    for i in range(max(start - 3, 0), size):
        signal = _hikkake_signal(bars, i, modified)
        if signal != 0:
            pattern_index = i
            pattern_signal = signal
            if i >= start:
                out[i] = signal
        elif (
            pattern_index > 0
            and i <= pattern_index + 3
            and (
                (pattern_signal > 0 and close[i] > high[pattern_index - 1])
                or (pattern_signal < 0 and close[i] < low[pattern_index - 1])
            )
        ):
            if i >= start:
                out[i] = pattern_signal * 2
            pattern_index = 0
    return out


@nb.njit(cache=True)
def cdl_hikkake_i32(bars: np.ndarray, start: int) -> np.ndarray:
    """
    Flag inside-bar false breakouts and their confirmations.

    Args:
        bars: `(4, N)` OHLC matrix.
        start: First index reported; scanning begins three bars earlier so a pattern
            completing just before `start` can still be confirmed.
    Returns:
        np.ndarray: int32 series with +/-100 on the breakout bar and +/-200 on a
            confirming close within three bars.
    Assumptions:
        None.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    return _hikkake(bars, start, False)


@nb.njit(cache=True)
def cdl_hikkake_mod_i32(bars: np.ndarray, start: int) -> np.ndarray:
    return _hikkake(bars, start, True)

"""
Kernel table binding every catalog indicator id to its CPU/Numba routine.

Related: tabatch.application.ports.compute.indicator_kernel,
  tabatch.adapters.outbound.compute_numba.kernels,
  tabatch.adapters.outbound.registry.static_indicator_catalog
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

import numpy as np

from tabatch.application.dto import KernelReport, ParameterSet
from tabatch.domain.entities import RetCode

from .kernels import cycle, momentum, overlap, pattern, price, statistic, volatility, volume
from .kernels.math_ops import (
    BINARY_UFUNCS,
    UNARY_UFUNCS,
    binary_f64,
    min_max_f64,
    min_max_index_i32,
    rolling_extreme_f64,
    rolling_extreme_index_i32,
    rolling_sum_f64,
    unary_f64,
)
from .kernels.overlap import ma_lookback

Arrays = tuple[np.ndarray, ...]
ComputeFn = Callable[[Arrays, ParameterSet], "np.ndarray | Arrays"]
LookbackFn = Callable[[ParameterSet], int]
CheckFn = Callable[[ParameterSet], bool]

_ROC_MODES = (("roc", 0), ("roc_p", 1), ("roc_r", 2), ("roc_r100", 3))
_LINREG_MODES = (
    ("linear_reg", statistic.LINREG_VALUE),
    ("linear_reg_slope", statistic.LINREG_SLOPE),
    ("linear_reg_intercept", statistic.LINREG_INTERCEPT),
    ("linear_reg_angle", statistic.LINREG_ANGLE),
    ("tsf", statistic.LINREG_FORECAST),
)
_PENETRATION_PATTERNS = frozenset(
    {
        "cdl_abandoned_baby",
        "cdl_dark_cloud_cover",
        "cdl_evening_doji_star",
        "cdl_evening_star",
        "cdl_mat_hold",
        "cdl_morning_doji_star",
        "cdl_morning_star",
    }
)


@dataclass(frozen=True, slots=True)
class NumbaKernel:
    """
    `IndicatorKernel` implementation over one full-length array routine.

    Related: tabatch.application.ports.compute.indicator_kernel,
      tabatch.application.services.invocation_harness
    """

    name: str
    lookback_fn: LookbackFn
    compute_fn: ComputeFn
    check_fn: CheckFn | None = None

    def lookback(self, params: ParameterSet) -> int:
        return int(self.lookback_fn(params))

    def compute(
        self,
        inputs: Arrays,
        params: ParameterSet,
        outputs: Arrays,
    ) -> KernelReport:
        """
        Run the routine and copy its valid tail into the output buffers.

        Args:
            inputs: Equal-length contiguous float64 input series.
            params: Bound parameter set.
            outputs: Preallocated full-length output buffers.
        Returns:
            KernelReport: `size - lookback` valid samples, or a failure code.
        Assumptions:
            Routines return full-length arrays aligned with the inputs.
        Raises:
            ArithmeticError: If the routine fails numerically.
        Side Effects:
            Writes `outputs[k][lookback:]`.
        """
        if self.check_fn is not None and not self.check_fn(params):
            return KernelReport(valid_count=0, ret_code=RetCode.BAD_PARAM)

        size = int(inputs[0].shape[0])
        lookback = self.lookback(params)
        valid_count = size - lookback
        if valid_count <= 0:
            return KernelReport(valid_count=valid_count)

        produced = self.compute_fn(inputs, params)
        if isinstance(produced, np.ndarray):
            produced = (produced,)
        if len(produced) != len(outputs):
            return KernelReport(valid_count=0, ret_code=RetCode.INTERNAL_ERROR)
        for target, values in zip(outputs, produced):
            target[lookback:] = values[lookback:]
        return KernelReport(valid_count=valid_count)


def numba_kernels() -> Mapping[str, NumbaKernel]:
    """
    Build the read-only kernel table keyed by indicator id.

    Args:
        None.
    Returns:
        Mapping[str, NumbaKernel]: One kernel per catalog indicator.
    Assumptions:
        Keys match `tabatch.domain.definitions.all_defs()` ids one to one.
    Raises:
        ValueError: If a kernel id is registered twice.
    Side Effects:
        None.
    """
    table: dict[str, NumbaKernel] = {}
    for register in (
        _math_kernels,
        _overlap_kernels,
        _momentum_kernels,
        _volume_volatility_kernels,
        _price_cycle_kernels,
        _statistic_kernels,
        _pattern_kernels,
    ):
        for kernel in register():
            if kernel.name in table:
                raise ValueError(f"duplicate kernel id: {kernel.name}")
            table[kernel.name] = kernel
    return MappingProxyType(table)


def _fixed(lookback: int) -> LookbackFn:
    return lambda params: lookback


def _period(name: str = "time_period", *, minus: int = 0) -> LookbackFn:
    return lambda params: params.get_int(name) - minus


def _ma_code(params: ParameterSet, name: str = "ma_type") -> int:
    return params.get_ma_type(name).code


def _math_kernels() -> list[NumbaKernel]:
    kernels = [
        NumbaKernel(
            name=name,
            lookback_fn=_fixed(0),
            compute_fn=lambda inputs, params, name=name: unary_f64(name, inputs[0]),
        )
        for name in UNARY_UFUNCS
    ]
    kernels.extend(
        NumbaKernel(
            name=name,
            lookback_fn=_fixed(0),
            compute_fn=lambda inputs, params, name=name: binary_f64(name, inputs[0], inputs[1]),
        )
        for name in BINARY_UFUNCS
    )
    window = _period(minus=1)
    kernels.extend(
        (
            NumbaKernel(
                "max",
                window,
                lambda inputs, params: rolling_extreme_f64(
                    inputs[0], params.get_int("time_period"), True
                ),
            ),
            NumbaKernel(
                "min",
                window,
                lambda inputs, params: rolling_extreme_f64(
                    inputs[0], params.get_int("time_period"), False
                ),
            ),
            NumbaKernel(
                "sum",
                window,
                lambda inputs, params: rolling_sum_f64(inputs[0], params.get_int("time_period")),
            ),
            NumbaKernel(
                "max_index",
                window,
                lambda inputs, params: rolling_extreme_index_i32(
                    inputs[0], params.get_int("time_period"), True
                ),
            ),
            NumbaKernel(
                "min_index",
                window,
                lambda inputs, params: rolling_extreme_index_i32(
                    inputs[0], params.get_int("time_period"), False
                ),
            ),
            NumbaKernel(
                "min_max",
                window,
                lambda inputs, params: min_max_f64(inputs[0], params.get_int("time_period")),
            ),
            NumbaKernel(
                "min_max_index",
                window,
                lambda inputs, params: min_max_index_i32(
                    inputs[0], params.get_int("time_period")
                ),
            ),
        )
    )
    return kernels


def _ma_family_lookback(code: int) -> LookbackFn:
    return lambda params: int(ma_lookback(params.get_int("time_period"), code))


def _moving_average_lookback(params: ParameterSet) -> int:
    return int(ma_lookback(params.get_int("time_period"), _ma_code(params)))


def _bbands_lookback(params: ParameterSet) -> int:
    period = params.get_int("time_period")
    return max(int(ma_lookback(period, _ma_code(params))), period - 1)


def _mavp_lookback(params: ParameterSet) -> int:
    return int(ma_lookback(params.get_int("max_period"), _ma_code(params)))


def _mavp_check(params: ParameterSet) -> bool:
    return params.get_int("min_period") <= params.get_int("max_period")


def _overlap_kernels() -> list[NumbaKernel]:
    alpha = lambda period: 2.0 / (period + 1.0)  # noqa: E731
    return [
        NumbaKernel(
            "sma",
            _ma_family_lookback(overlap.MA_SMA),
            lambda inputs, params: overlap.sma_f64(inputs[0], params.get_int("time_period"), 0),
        ),
        NumbaKernel(
            "ema",
            _ma_family_lookback(overlap.MA_EMA),
            lambda inputs, params: overlap.ema_f64(
                inputs[0],
                params.get_int("time_period"),
                0,
                alpha(params.get_int("time_period")),
            ),
        ),
        NumbaKernel(
            "wma",
            _ma_family_lookback(overlap.MA_WMA),
            lambda inputs, params: overlap.wma_f64(inputs[0], params.get_int("time_period"), 0),
        ),
        NumbaKernel(
            "dema",
            _ma_family_lookback(overlap.MA_DEMA),
            lambda inputs, params: overlap.dema_f64(inputs[0], params.get_int("time_period"), 0),
        ),
        NumbaKernel(
            "tema",
            _ma_family_lookback(overlap.MA_TEMA),
            lambda inputs, params: overlap.tema_f64(inputs[0], params.get_int("time_period"), 0),
        ),
        NumbaKernel(
            "trima",
            _ma_family_lookback(overlap.MA_TRIMA),
            lambda inputs, params: overlap.trima_f64(inputs[0], params.get_int("time_period"), 0),
        ),
        NumbaKernel(
            "kama",
            _ma_family_lookback(overlap.MA_KAMA),
            lambda inputs, params: overlap.kama_f64(inputs[0], params.get_int("time_period"), 0),
        ),
        NumbaKernel(
            "t3",
            _ma_family_lookback(overlap.MA_T3),
            lambda inputs, params: overlap.t3_f64(
                inputs[0], params.get_int("time_period"), params.get_float("volume_factor"), 0
            ),
        ),
        NumbaKernel(
            "mama",
            _fixed(cycle.MAMA_LOOKBACK),
            lambda inputs, params: cycle.mama_f64(
                inputs[0], params.get_float("fast_limit"), params.get_float("slow_limit"), 0
            ),
        ),
        NumbaKernel(
            "moving_average",
            _moving_average_lookback,
            lambda inputs, params: overlap.ma_f64(
                inputs[0], params.get_int("time_period"), _ma_code(params), 0
            ),
        ),
        NumbaKernel(
            "mavp",
            _mavp_lookback,
            lambda inputs, params: overlap.mavp_f64(
                inputs[0],
                inputs[1],
                params.get_int("min_period"),
                params.get_int("max_period"),
                _ma_code(params),
            ),
            check_fn=_mavp_check,
        ),
        NumbaKernel(
            "bbands",
            _bbands_lookback,
            lambda inputs, params: overlap.bbands_f64(
                inputs[0],
                params.get_int("time_period"),
                params.get_float("deviations_up"),
                params.get_float("deviations_down"),
                _ma_code(params),
            ),
        ),
        NumbaKernel(
            "mid_point",
            _period(minus=1),
            lambda inputs, params: overlap.mid_point_f64(inputs[0], params.get_int("time_period")),
        ),
        NumbaKernel(
            "mid_price",
            _period(minus=1),
            lambda inputs, params: overlap.mid_price_f64(
                inputs[0], inputs[1], params.get_int("time_period")
            ),
        ),
        NumbaKernel(
            "sar",
            _fixed(1),
            lambda inputs, params: overlap.sar_f64(
                inputs[0],
                inputs[1],
                params.get_float("acceleration"),
                params.get_float("maximum"),
            ),
        ),
        NumbaKernel(
            "sar_ext",
            _fixed(1),
            lambda inputs, params: overlap.sar_ext_f64(
                inputs[0],
                inputs[1],
                params.get_float("start_value"),
                params.get_float("offset_on_reverse"),
                params.get_float("af_init_long"),
                params.get_float("af_long"),
                params.get_float("af_max_long"),
                params.get_float("af_init_short"),
                params.get_float("af_short"),
                params.get_float("af_max_short"),
            ),
        ),
        NumbaKernel(
            "ht_trendline",
            _fixed(cycle.HT_PHASE_LOOKBACK),
            lambda inputs, params: cycle.ht_trendline_f64(inputs[0]),
        ),
    ]


def _oscillator_lookback(params: ParameterSet) -> int:
    code = _ma_code(params)
    return max(
        int(ma_lookback(params.get_int("fast_period"), code)),
        int(ma_lookback(params.get_int("slow_period"), code)),
    )


def _macd_lookback(params: ParameterSet) -> int:
    slowest = max(params.get_int("fast_period"), params.get_int("slow_period"))
    return slowest - 1 + params.get_int("signal_period") - 1


def _macd_fix_lookback(params: ParameterSet) -> int:
    return 25 + params.get_int("signal_period") - 1


def _macd_ext_lookback(params: ParameterSet) -> int:
    fast = int(ma_lookback(params.get_int("fast_period"), _ma_code(params, "fast_ma")))
    slow = int(ma_lookback(params.get_int("slow_period"), _ma_code(params, "slow_ma")))
    signal = int(ma_lookback(params.get_int("signal_period"), _ma_code(params, "signal_ma")))
    return max(fast, slow) + signal


def _stoch_lookback(params: ParameterSet) -> int:
    return (
        params.get_int("fast_k_period")
        - 1
        + int(ma_lookback(params.get_int("slow_k_period"), _ma_code(params, "slow_k_ma")))
        + int(ma_lookback(params.get_int("slow_d_period"), _ma_code(params, "slow_d_ma")))
    )


def _stoch_f_lookback(params: ParameterSet) -> int:
    return params.get_int("fast_k_period") - 1 + int(
        ma_lookback(params.get_int("fast_d_period"), _ma_code(params, "fast_d_ma"))
    )


def _stoch_rsi_lookback(params: ParameterSet) -> int:
    return params.get_int("time_period") + _stoch_f_lookback(params)


def _ult_osc_lookback(params: ParameterSet) -> int:
    return max(
        params.get_int("first_period"),
        params.get_int("second_period"),
        params.get_int("third_period"),
    )


def _momentum_kernels() -> list[NumbaKernel]:
    kernels = [
        NumbaKernel(
            "adx",
            lambda params: 2 * params.get_int("time_period") - 1,
            lambda inputs, params: momentum.adx_f64(*inputs, params.get_int("time_period")),
        ),
        NumbaKernel(
            "adxr",
            lambda params: 3 * params.get_int("time_period") - 2,
            lambda inputs, params: momentum.adxr_f64(*inputs, params.get_int("time_period")),
        ),
        NumbaKernel(
            "dx",
            _period(),
            lambda inputs, params: momentum.dx_f64(*inputs, params.get_int("time_period")),
        ),
        NumbaKernel(
            "plus_di",
            _period(),
            lambda inputs, params: momentum.directional_indicators_f64(
                *inputs, params.get_int("time_period")
            )[0],
        ),
        NumbaKernel(
            "minus_di",
            _period(),
            lambda inputs, params: momentum.directional_indicators_f64(
                *inputs, params.get_int("time_period")
            )[1],
        ),
        NumbaKernel(
            "plus_dm",
            _period(minus=1),
            lambda inputs, params: momentum.plus_dm_f64(*inputs, params.get_int("time_period")),
        ),
        NumbaKernel(
            "minus_dm",
            _period(minus=1),
            lambda inputs, params: momentum.minus_dm_f64(*inputs, params.get_int("time_period")),
        ),
        NumbaKernel(
            "apo",
            _oscillator_lookback,
            lambda inputs, params: momentum.price_oscillator_f64(
                inputs[0],
                params.get_int("fast_period"),
                params.get_int("slow_period"),
                _ma_code(params),
                False,
            ),
        ),
        NumbaKernel(
            "ppo",
            _oscillator_lookback,
            lambda inputs, params: momentum.price_oscillator_f64(
                inputs[0],
                params.get_int("fast_period"),
                params.get_int("slow_period"),
                _ma_code(params),
                True,
            ),
        ),
        NumbaKernel(
            "aroon",
            _period(),
            lambda inputs, params: momentum.aroon_f64(*inputs, params.get_int("time_period")),
        ),
        NumbaKernel(
            "aroon_osc",
            _period(),
            lambda inputs, params: momentum.aroon_osc_f64(*inputs, params.get_int("time_period")),
        ),
        NumbaKernel("bop", _fixed(0), lambda inputs, params: momentum.bop_f64(*inputs)),
        NumbaKernel(
            "cci",
            _period(minus=1),
            lambda inputs, params: momentum.cci_f64(*inputs, params.get_int("time_period")),
        ),
        NumbaKernel(
            "cmo",
            _period(),
            lambda inputs, params: momentum.cmo_f64(inputs[0], params.get_int("time_period")),
        ),
        NumbaKernel(
            "rsi",
            _period(),
            lambda inputs, params: momentum.rsi_f64(inputs[0], params.get_int("time_period")),
        ),
        NumbaKernel(
            "mom",
            _period(),
            lambda inputs, params: momentum.mom_f64(inputs[0], params.get_int("time_period")),
        ),
        NumbaKernel(
            "macd",
            _macd_lookback,
            lambda inputs, params: momentum.macd_f64(
                inputs[0],
                params.get_int("fast_period"),
                params.get_int("slow_period"),
                params.get_int("signal_period"),
            ),
        ),
        NumbaKernel(
            "macd_fix",
            _macd_fix_lookback,
            lambda inputs, params: momentum.macd_fix_f64(
                inputs[0], params.get_int("signal_period")
            ),
        ),
        NumbaKernel(
            "macd_ext",
            _macd_ext_lookback,
            lambda inputs, params: momentum.macd_ext_f64(
                inputs[0],
                params.get_int("fast_period"),
                _ma_code(params, "fast_ma"),
                params.get_int("slow_period"),
                _ma_code(params, "slow_ma"),
                params.get_int("signal_period"),
                _ma_code(params, "signal_ma"),
            ),
        ),
        NumbaKernel(
            "mfi",
            _period(),
            lambda inputs, params: momentum.mfi_f64(*inputs, params.get_int("time_period")),
        ),
        NumbaKernel(
            "stoch",
            _stoch_lookback,
            lambda inputs, params: momentum.stoch_f64(
                *inputs,
                params.get_int("fast_k_period"),
                params.get_int("slow_k_period"),
                _ma_code(params, "slow_k_ma"),
                params.get_int("slow_d_period"),
                _ma_code(params, "slow_d_ma"),
            ),
        ),
        NumbaKernel(
            "stoch_f",
            _stoch_f_lookback,
            lambda inputs, params: momentum.stoch_f_f64(
                *inputs,
                params.get_int("fast_k_period"),
                params.get_int("fast_d_period"),
                _ma_code(params, "fast_d_ma"),
                0,
            ),
        ),
        NumbaKernel(
            "stoch_rsi",
            _stoch_rsi_lookback,
            lambda inputs, params: momentum.stoch_rsi_f64(
                inputs[0],
                params.get_int("time_period"),
                params.get_int("fast_k_period"),
                params.get_int("fast_d_period"),
                _ma_code(params, "fast_d_ma"),
            ),
        ),
        NumbaKernel(
            "trix",
            lambda params: 3 * (params.get_int("time_period") - 1) + 1,
            lambda inputs, params: momentum.trix_f64(inputs[0], params.get_int("time_period")),
        ),
        NumbaKernel(
            "ult_osc",
            _ult_osc_lookback,
            lambda inputs, params: momentum.ult_osc_f64(
                *inputs,
                params.get_int("first_period"),
                params.get_int("second_period"),
                params.get_int("third_period"),
            ),
        ),
        NumbaKernel(
            "will_r",
            _period(minus=1),
            lambda inputs, params: momentum.will_r_f64(*inputs, params.get_int("time_period")),
        ),
    ]
    kernels.extend(
        NumbaKernel(
            name,
            _period(),
            lambda inputs, params, mode=mode: momentum.roc_family_f64(
                inputs[0], params.get_int("time_period"), mode
            ),
        )
        for name, mode in _ROC_MODES
    )
    return kernels


def _volume_volatility_kernels() -> list[NumbaKernel]:
    return [
        NumbaKernel("ad", _fixed(0), lambda inputs, params: volume.ad_f64(*inputs)),
        NumbaKernel(
            "ad_osc",
            lambda params: max(params.get_int("fast_period"), params.get_int("slow_period")) - 1,
            lambda inputs, params: volume.ad_osc_f64(
                *inputs, params.get_int("fast_period"), params.get_int("slow_period")
            ),
        ),
        NumbaKernel("obv", _fixed(0), lambda inputs, params: volume.obv_f64(*inputs)),
        NumbaKernel(
            "atr",
            _period(),
            lambda inputs, params: volatility.atr_f64(*inputs, params.get_int("time_period")),
        ),
        NumbaKernel(
            "natr",
            _period(),
            lambda inputs, params: volatility.natr_f64(*inputs, params.get_int("time_period")),
        ),
        NumbaKernel(
            "true_range",
            _fixed(1),
            lambda inputs, params: volatility.true_range_f64(*inputs),
        ),
    ]


def _price_cycle_kernels() -> list[NumbaKernel]:
    return [
        NumbaKernel("avg_price", _fixed(0), lambda inputs, params: price.avg_price_f64(*inputs)),
        NumbaKernel("med_price", _fixed(0), lambda inputs, params: price.med_price_f64(*inputs)),
        NumbaKernel("typ_price", _fixed(0), lambda inputs, params: price.typ_price_f64(*inputs)),
        NumbaKernel("wcl_price", _fixed(0), lambda inputs, params: price.wcl_price_f64(*inputs)),
        NumbaKernel(
            "ht_dc_period",
            _fixed(cycle.HT_PERIOD_LOOKBACK),
            lambda inputs, params: cycle.ht_dc_period_f64(inputs[0]),
        ),
        NumbaKernel(
            "ht_phasor",
            _fixed(cycle.HT_PERIOD_LOOKBACK),
            lambda inputs, params: cycle.ht_phasor_f64(inputs[0]),
        ),
        NumbaKernel(
            "ht_dc_phase",
            _fixed(cycle.HT_PHASE_LOOKBACK),
            lambda inputs, params: cycle.ht_dc_phase_f64(inputs[0]),
        ),
        NumbaKernel(
            "ht_sine",
            _fixed(cycle.HT_PHASE_LOOKBACK),
            lambda inputs, params: cycle.ht_sine_f64(inputs[0]),
        ),
        NumbaKernel(
            "ht_trend_mode",
            _fixed(cycle.HT_PHASE_LOOKBACK),
            lambda inputs, params: cycle.ht_trend_mode_i32(inputs[0]),
        ),
    ]


def _statistic_kernels() -> list[NumbaKernel]:
    kernels = [
        NumbaKernel(
            "beta",
            _period(),
            lambda inputs, params: statistic.beta_f64(*inputs, params.get_int("time_period")),
        ),
        NumbaKernel(
            "correl",
            _period(minus=1),
            lambda inputs, params: statistic.correl_f64(*inputs, params.get_int("time_period")),
        ),
        NumbaKernel(
            "std_dev",
            _period(minus=1),
            lambda inputs, params: statistic.std_dev_f64(
                inputs[0], params.get_int("time_period"), params.get_float("deviations")
            ),
        ),
        NumbaKernel(
            "variance",
            _period(minus=1),
            lambda inputs, params: statistic.variance_f64(
                inputs[0], params.get_int("time_period")
            ),
        ),
    ]
    kernels.extend(
        NumbaKernel(
            name,
            _period(minus=1),
            lambda inputs, params, mode=mode: statistic.linear_reg_f64(
                inputs[0], params.get_int("time_period"), mode
            ),
        )
        for name, mode in _LINREG_MODES
    )
    return kernels


def _pattern_kernels() -> list[NumbaKernel]:
    kernels: list[NumbaKernel] = []
    for name, lookback in pattern.PATTERN_LOOKBACKS.items():
        detector = getattr(pattern, f"{name}_i32")
        if name in _PENETRATION_PATTERNS:
            compute_fn = (
                lambda inputs, params, detector=detector, lookback=lookback: detector(
                    np.vstack(inputs), lookback, params.get_float("penetration")
                )
            )
        else:
            compute_fn = (
                lambda inputs, params, detector=detector, lookback=lookback: detector(
                    np.vstack(inputs), lookback
                )
            )
        kernels.append(NumbaKernel(name, _fixed(lookback), compute_fn))
    return kernels

"""
Numba runtime configuration and warmup runner for the indicator kernels.

Related: tabatch.adapters.outbound.compute_numba.kernel_table,
  tabatch.platform.config.runtime_config
"""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any, cast

import numba
import numpy as np

from tabatch.application.dto import PriceBars
from tabatch.application.ports.registry import IndicatorCatalog
from tabatch.application.services.parameter_binder import bind_parameters
from tabatch.domain.entities import InputSeries, OutputDType
from tabatch.platform.config import TaBatchRuntimeConfig

log = logging.getLogger(__name__)

_WARMUP_SIZE = 256


def apply_numba_runtime_config(*, config: TaBatchRuntimeConfig) -> Path | None:
    """
    Apply numba cache settings and validate cache directory writability.

    Args:
        config: Validated runtime config.
    Returns:
        Path | None: Effective cache directory, or `None` when numba keeps its default.
    Assumptions:
        Numba runtime is available in current interpreter.
    Raises:
        ValueError: If cache directory is not writable.
    Side Effects:
        Mutates process env (`NUMBA_CACHE_DIR`) and numba runtime state.
    """
    if config.numba_cache_dir is None:
        return None

    os.environ["NUMBA_CACHE_DIR"] = str(config.numba_cache_dir)
    cache_dir = ensure_numba_cache_dir_writable(path=config.numba_cache_dir)
    numba_config = cast(Any, numba.config)
    setattr(numba_config, "CACHE_DIR", str(cache_dir))
    return cache_dir


def ensure_numba_cache_dir_writable(*, path: Path) -> Path:
    """
    Ensure provided cache directory exists and supports write operations.

    Args:
        path: Candidate Numba cache directory.
    Returns:
        Path: Normalized cache directory path.
    Assumptions:
        Caller passes path resolved from runtime config.
    Raises:
        ValueError: If path cannot be created or written.
    Side Effects:
        Creates directory tree when missing and touches a short-lived probe file.
    """
    normalized = Path(path)
    try:
        normalized.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="w",
            prefix=".numba_write_probe_",
            dir=normalized,
            delete=True,
            encoding="utf-8",
        ) as probe:
            probe.write("ok")
            probe.flush()
    except OSError as error:
        raise ValueError(f"NUMBA_CACHE_DIR is not writable: {normalized}") from error
    return normalized


class ComputeNumbaWarmupRunner:
    """
    Idempotent runner that compiles every catalog kernel once on synthetic bars.

    Related: tabatch.adapters.outbound.compute_numba.kernel_table,
      tabatch.wiring
    """

    def __init__(self, *, config: TaBatchRuntimeConfig, catalog: IndicatorCatalog) -> None:
        self._config = config
        self._catalog = catalog
        self._is_warm = False

    @property
    def is_warm(self) -> bool:
        return self._is_warm

    def warmup(self) -> None:
        """
        Apply runtime config and eagerly compile all catalog kernels.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Warmup inputs are deterministic and never reach callers.
        Raises:
            ValueError: If runtime config cannot be applied.
        Side Effects:
            JIT-compiles Numba kernels and emits one structured log message.
        """
        if self._is_warm:
            return

        warmup_started = time.perf_counter()
        cache_dir = apply_numba_runtime_config(config=self._config)
        kernel_count = self._run_kernel_warmup()
        elapsed_seconds = time.perf_counter() - warmup_started
        log.info(
            "compute_numba warmup complete",
            extra={
                "warmup_done": True,
                "warmup_seconds": round(elapsed_seconds, 6),
                "kernels": kernel_count,
                "numba_cache_dir": str(cache_dir) if cache_dir is not None else None,
            },
        )
        self._is_warm = True

    def _run_kernel_warmup(self) -> int:
        """
        Run every catalog kernel with default parameters on synthetic bars.

        Args:
            None.
        Returns:
            int: Number of kernels executed.
        Assumptions:
            Default lookbacks are shorter than the synthetic series.
        Raises:
            None.
        Side Effects:
            Compiles Numba kernels and allocates temporary arrays.
        """
        bars = _synthetic_bars(_WARMUP_SIZE)
        periods = np.full(_WARMUP_SIZE, 10.0, dtype=np.float64)
        count = 0
        for definition in self._catalog.list_defs():
            descriptor = self._catalog.get(definition.indicator_id)
            inputs = tuple(
                _warmup_series(kind, bars=bars, periods=periods) for kind in definition.inputs
            )
            if definition.output.dtype is OutputDType.INT32:
                outputs = tuple(
                    np.zeros(_WARMUP_SIZE, dtype=np.int32)
                    for _ in range(definition.output.arity)
                )
            else:
                outputs = tuple(
                    np.full(_WARMUP_SIZE, np.nan, dtype=np.float64)
                    for _ in range(definition.output.arity)
                )
            _ = descriptor.kernel.compute(inputs, bind_parameters(definition), outputs)
            count += 1
        return count


def _synthetic_bars(size: int) -> PriceBars:
    phase = np.linspace(0.0, 12.0 * np.pi, size, dtype=np.float64)
    close = 100.0 + 5.0 * np.sin(phase) + np.linspace(0.0, 3.0, size)
    open_ = close + 0.4 * np.cos(3.0 * phase)
    high = np.maximum(open_, close) + 0.8
    low = np.minimum(open_, close) - 0.8
    volume = 1_000.0 + 100.0 * np.cos(phase)
    return PriceBars(open=open_, high=high, low=low, close=close, volume=volume)


def _warmup_series(kind: InputSeries, *, bars: PriceBars, periods: np.ndarray) -> np.ndarray:
    if kind is InputSeries.PERIODS:
        return periods
    if kind is InputSeries.REAL0:
        return bars.close
    if kind is InputSeries.REAL1:
        return bars.open
    return bars.series(kind)


__all__ = [
    "ComputeNumbaWarmupRunner",
    "apply_numba_runtime_config",
    "ensure_numba_cache_dir_writable",
]

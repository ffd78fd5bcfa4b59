"""
Uniform batch invocation of catalog indicators.

Related: tabatch.application.ports.registry.indicator_catalog,
  tabatch.application.services.window_resolver,
  tabatch.application.services.result_packager
"""

from __future__ import annotations

import logging
import time
from typing import Any, Mapping, Sequence

import numpy as np
import numpy.typing as npt

from tabatch.application.dto import (
    IndicatorResult,
    KernelDescriptor,
    KernelReport,
    ParameterSet,
    PriceBars,
    ResultMeta,
)
from tabatch.application.ports.registry import IndicatorCatalog
from tabatch.domain.entities import IndicatorDef, IndicatorId, OutputDType, RetCode
from tabatch.domain.errors import (
    ComputationError,
    ComputeBudgetExceeded,
    IndicatorArgumentError,
    UnknownIndicatorError,
)

from .parameter_binder import bind_parameters
from .result_packager import package_result
from .window_resolver import resolve_output_window

log = logging.getLogger(__name__)

MAX_COMPUTE_BYTES_TOTAL_DEFAULT = 2 * 1024**3
_ELEMENT_BYTES = 8


class InvocationHarness:
    """
    Validate, bind, allocate, compute, window and package one indicator call.

    The harness keeps no per-call state, so one instance can serve concurrent callers.

    Related: tabatch.api.batch, tabatch.wiring
    """

    def __init__(
        self,
        *,
        catalog: IndicatorCatalog,
        max_compute_bytes_total: int = MAX_COMPUTE_BYTES_TOTAL_DEFAULT,
    ) -> None:
        """
        Store catalog and compute budget.

        Args:
            catalog: Immutable indicator catalog.
            max_compute_bytes_total: Upper bound for input plus output buffer bytes.
        Returns:
            None.
        Assumptions:
            Catalog contents never change after construction.
        Raises:
            ValueError: If catalog is missing or budget is non-positive.
        Side Effects:
            None.
        """
        if catalog is None:  # type: ignore[truthy-bool]
            raise ValueError("InvocationHarness requires catalog")
        if max_compute_bytes_total <= 0:
            raise ValueError("InvocationHarness requires max_compute_bytes_total > 0")
        self._catalog = catalog
        self._max_compute_bytes_total = int(max_compute_bytes_total)

    def definitions(self) -> tuple[IndicatorDef, ...]:
        return self._catalog.list_defs()

    def definition(self, indicator_id: IndicatorId | str) -> IndicatorDef:
        return self._descriptor(indicator_id).definition

    def lookback(
        self,
        indicator_id: IndicatorId | str,
        params: Mapping[str, Any] | None = None,
    ) -> int:
        """
        Return the lookback of an indicator for the given parameters.

        Args:
            indicator_id: Catalog identifier.
            params: Parameter overrides; omitted names use defaults.
        Returns:
            int: Leading samples consumed before the first valid output.
        Assumptions:
            None.
        Raises:
            UnknownIndicatorError: If the id is not in the catalog.
            IndicatorArgumentError: If parameters fail binding.
        Side Effects:
            None.
        """
        descriptor = self._descriptor(indicator_id)
        bound = bind_parameters(descriptor.definition, params)
        return int(descriptor.kernel.lookback(bound))

    def invoke(
        self,
        indicator_id: IndicatorId | str,
        inputs: Sequence[npt.ArrayLike],
        params: Mapping[str, Any] | None = None,
    ) -> IndicatorResult:
        """
        Run one indicator over equal-length input series.

        Args:
            indicator_id: Catalog identifier.
            inputs: Input series in the definition's declared order.
            params: Parameter overrides; omitted names use defaults.
        Returns:
            IndicatorResult: Trimmed copies of every output, all of length
                `N - lookback`.
        Assumptions:
            Caller arrays are never mutated.
        Raises:
            UnknownIndicatorError: If the id is not in the catalog.
            IndicatorArgumentError: If inputs or parameters are malformed, including
                mismatched lengths and an exceeded compute budget.
            InsufficientData: If the input is too short for any valid output.
            ComputationError: If the kernel reports a failure.
        Side Effects:
            Emits one debug log record.
        """
        started = time.perf_counter()
        descriptor = self._descriptor(indicator_id)
        definition = descriptor.definition
        arrays = _prepare_inputs(definition=definition, inputs=inputs)
        bound = bind_parameters(definition, params)
        size = arrays[0].shape[0]
        self._check_budget(definition=definition, size=size)

        outputs = _allocate_outputs(definition=definition, size=size)
        lookback = int(descriptor.kernel.lookback(bound))
        report = _run_kernel(descriptor=descriptor, arrays=arrays, params=bound, outputs=outputs)
        if not report.ok:
            raise ComputationError(
                indicator_id=definition.indicator_id.value,
                ret_code=report.ret_code,
            )

        window = resolve_output_window(
            indicator_id=definition.indicator_id.value,
            input_size=size,
            valid_count=report.valid_count,
            lookback=lookback,
        )
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        result = package_result(
            definition,
            outputs,
            window,
            ResultMeta(size=size, lookback=lookback, compute_ms=elapsed_ms),
        )
        log.debug(
            "indicator invoked",
            extra={
                "indicator_id": definition.indicator_id.value,
                "size": size,
                "window_start": window.start,
                "window_end": window.end,
                "compute_ms": round(elapsed_ms, 3),
            },
        )
        return result

    def invoke_bars(
        self,
        indicator_id: IndicatorId | str,
        bars: PriceBars,
        params: Mapping[str, Any] | None = None,
    ) -> IndicatorResult:
        """
        Run one indicator with inputs taken from a price-bar bundle.

        Args:
            indicator_id: Catalog identifier.
            bars: Aligned OHLCV arrays.
            params: Parameter overrides; omitted names use defaults.
        Returns:
            IndicatorResult: Same contract as `invoke`.
        Assumptions:
            Generic `real` inputs read the close series.
        Raises:
            MissingInputSeriesError: If a declared input has no bar counterpart.
            UnknownIndicatorError: If the id is not in the catalog.
            InsufficientData: If the bars are too few for any valid output.
            ComputationError: If the kernel reports a failure.
        Side Effects:
            Emits one debug log record.
        """
        definition = self._descriptor(indicator_id).definition
        inputs = [bars.series(kind) for kind in definition.inputs]
        return self.invoke(definition.indicator_id, inputs, params)

    def _descriptor(self, indicator_id: IndicatorId | str) -> KernelDescriptor:
        try:
            normalized = IndicatorId.of(indicator_id)
        except ValueError as error:
            raise UnknownIndicatorError(f"unknown indicator: {indicator_id!r}") from error
        return self._catalog.get(normalized)

    def _check_budget(self, *, definition: IndicatorDef, size: int) -> None:
        buffers = len(definition.inputs) + definition.output.arity
        bytes_total_est = size * _ELEMENT_BYTES * buffers
        if bytes_total_est > self._max_compute_bytes_total:
            raise ComputeBudgetExceeded(
                indicator_id=definition.indicator_id.value,
                size=size,
                buffers=buffers,
                bytes_total_est=bytes_total_est,
                max_compute_bytes_total=self._max_compute_bytes_total,
            )


def _prepare_inputs(
    *,
    definition: IndicatorDef,
    inputs: Sequence[npt.ArrayLike],
) -> tuple[np.ndarray, ...]:
    """
    Convert caller inputs to contiguous float64 vectors and validate their shape.

    Args:
        definition: Definition declaring the expected input series.
        inputs: Caller-supplied series.
    Returns:
        tuple[np.ndarray, ...]: Contiguous float64 arrays in declared order.
    Assumptions:
        `np.ascontiguousarray` may return the caller array itself; kernels only read it.
    Raises:
        IndicatorArgumentError: If count, dimensionality, numeric type or lengths
            are invalid.
    Side Effects:
        None.
    """
    expected = definition.inputs
    if isinstance(inputs, (str, bytes)) or len(inputs) != len(expected):
        raise IndicatorArgumentError(
            f"{definition.indicator_id} expects {len(expected)} input series "
            f"({', '.join(item.value for item in expected)})"
        )

    arrays: list[np.ndarray] = []
    for kind, values in zip(expected, inputs):
        try:
            array = np.asarray(values, dtype=np.float64)
        except (TypeError, ValueError) as error:
            raise IndicatorArgumentError(
                f"{definition.indicator_id} input {kind.value} must be numeric"
            ) from error
        if array.ndim != 1:
            raise IndicatorArgumentError(
                f"{definition.indicator_id} input {kind.value} must be 1D, got ndim={array.ndim}"
            )
        arrays.append(np.ascontiguousarray(array))

    size = arrays[0].shape[0]
    for kind, array in zip(expected, arrays):
        if array.shape[0] != size:
            raise IndicatorArgumentError(
                f"{definition.indicator_id} input lengths differ: "
                f"{expected[0].value}={size}, {kind.value}={array.shape[0]}"
            )
    return tuple(arrays)


def _allocate_outputs(*, definition: IndicatorDef, size: int) -> tuple[np.ndarray, ...]:
    if definition.output.dtype is OutputDType.INT32:
        return tuple(
            np.zeros(size, dtype=np.int32) for _ in range(definition.output.arity)
        )
    return tuple(
        np.full(size, np.nan, dtype=np.float64) for _ in range(definition.output.arity)
    )


def _run_kernel(
    *,
    descriptor: KernelDescriptor,
    arrays: tuple[np.ndarray, ...],
    params: ParameterSet,
    outputs: tuple[np.ndarray, ...],
) -> KernelReport:
    indicator_id = descriptor.indicator_id.value
    try:
        return descriptor.kernel.compute(arrays, params, outputs)
    except ArithmeticError as error:
        raise ComputationError(
            indicator_id=indicator_id,
            ret_code=RetCode.INTERNAL_ERROR,
            reason=str(error) or type(error).__name__,
        ) from error

"""
Math transforms, vector operators and rolling extremes.

Element-wise transforms and operators delegate to NumPy ufuncs; rolling windows run
as Numba loops.

Related: tabatch.domain.definitions.math_transform,
  tabatch.domain.definitions.math_operators
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

import numba as nb
import numpy as np

from ._common import nan_series

UNARY_UFUNCS: Mapping[str, Callable[[np.ndarray], np.ndarray]] = MappingProxyType(
    {
        "acos": np.arccos,
        "asin": np.arcsin,
        "atan": np.arctan,
        "ceil": np.ceil,
        "cos": np.cos,
        "cosh": np.cosh,
        "exp": np.exp,
        "floor": np.floor,
        "ln": np.log,
        "log10": np.log10,
        "sin": np.sin,
        "sinh": np.sinh,
        "sqrt": np.sqrt,
        "tan": np.tan,
        "tanh": np.tanh,
    }
)

BINARY_UFUNCS: Mapping[str, Callable[[np.ndarray, np.ndarray], np.ndarray]] = MappingProxyType(
    {
        "add": np.add,
        "div": np.divide,
        "mult": np.multiply,
        "sub": np.subtract,
    }
)


def unary_f64(name: str, source: np.ndarray) -> np.ndarray:
    """
    Apply one element-wise math transform.

    Args:
        name: Transform name, a key of `UNARY_UFUNCS`.
        source: One-dimensional float64 series.
    Returns:
        np.ndarray: Transformed series; out-of-domain samples become NaN or inf.
    Assumptions:
        Floating-point warnings are not errors for element-wise transforms.
    Raises:
        KeyError: If `name` is not a known transform.
    Side Effects:
        Allocates one output array.
    """
    ufunc = UNARY_UFUNCS[name]
    with np.errstate(all="ignore"):
        return ufunc(source)


def binary_f64(name: str, left: np.ndarray, right: np.ndarray) -> np.ndarray:
    ufunc = BINARY_UFUNCS[name]
    with np.errstate(all="ignore"):
        return ufunc(left, right)


@nb.njit(cache=True)
def rolling_sum_f64(source: np.ndarray, period: int) -> np.ndarray:
    size = source.shape[0]
    out = nan_series(size)
    if period > size:
        return out

    total = 0.0
    for index in range(period - 1):
        total += source[index]
    for index in range(period - 1, size):
        total += source[index]
        out[index] = total
        total -= source[index - period + 1]
    return out


@nb.njit(cache=True)
def rolling_extreme_index_i32(source: np.ndarray, period: int, highest: bool) -> np.ndarray:
    """
    Return absolute index of the window maximum or minimum at each sample.

    Args:
        source: One-dimensional float64 series.
        period: Window length.
        highest: True for the maximum, False for the minimum.
    Returns:
        np.ndarray: int32 indices, 0 before `period - 1`.
    Assumptions:
        Ties resolve to the most recent sample.
    Raises:
        None.
    Side Effects:
        Allocates one output array.
    """
    size = source.shape[0]
    out = np.zeros(size, dtype=np.int32)
    best = -1
    for index in range(period - 1, size):
        start = index - period + 1
        if best < start:
            best = start
            for offset in range(start + 1, index + 1):
                if highest and source[offset] >= source[best]:
                    best = offset
                elif not highest and source[offset] <= source[best]:
                    best = offset
        elif highest and source[index] >= source[best]:
            best = index
        elif not highest and source[index] <= source[best]:
            best = index
        out[index] = best
    return out


@nb.njit(cache=True)
def rolling_extreme_f64(source: np.ndarray, period: int, highest: bool) -> np.ndarray:
    size = source.shape[0]
    out = nan_series(size)
    positions = rolling_extreme_index_i32(source, period, highest)
    for index in range(period - 1, size):
        out[index] = source[positions[index]]
    return out


@nb.njit(cache=True)
def min_max_f64(source: np.ndarray, period: int):
    return rolling_extreme_f64(source, period, False), rolling_extreme_f64(source, period, True)


@nb.njit(cache=True)
def min_max_index_i32(source: np.ndarray, period: int):
    lowest = rolling_extreme_index_i32(source, period, False)
    highest = rolling_extreme_index_i32(source, period, True)
    return lowest, highest

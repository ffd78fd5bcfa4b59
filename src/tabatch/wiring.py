"""
Composition helpers building the catalog and invocation harness.

Related: tabatch.application.services.invocation_harness,
  tabatch.adapters.outbound.registry.static_indicator_catalog,
  tabatch.platform.config.runtime_config
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Mapping

from tabatch.adapters.outbound.compute_numba import (
    ComputeNumbaWarmupRunner,
    apply_numba_runtime_config,
    numba_kernels,
)
from tabatch.adapters.outbound.registry import StaticIndicatorCatalog
from tabatch.application.services import InvocationHarness
from tabatch.domain.definitions import all_defs
from tabatch.platform.config import TaBatchRuntimeConfig, load_runtime_config


def build_catalog() -> StaticIndicatorCatalog:
    """
    Build fail-fast indicator catalog from hard definitions and the kernel table.

    Args:
        None.
    Returns:
        StaticIndicatorCatalog: Immutable catalog adapter.
    Assumptions:
        Every hard definition has exactly one numba kernel.
    Raises:
        ValueError: If definitions and kernels disagree.
    Side Effects:
        None.
    """
    return StaticIndicatorCatalog(defs=all_defs(), kernels=numba_kernels())


def build_invocation_harness(
    *,
    environ: Mapping[str, str],
    config: TaBatchRuntimeConfig | None = None,
) -> InvocationHarness:
    """
    Build the invocation harness and optionally warm up kernels.

    Args:
        environ: Process environment mapping.
        config: Optional preloaded runtime config to avoid duplicate disk/env reads.
    Returns:
        InvocationHarness: Ready-to-use harness.
    Assumptions:
        Runtime settings are loaded from env + optional `tabatch.yaml`.
    Raises:
        FileNotFoundError: If an explicit config path does not exist.
        ValueError: If runtime config is invalid or cache dir is not writable.
    Side Effects:
        Applies numba runtime config; JIT-compiles kernels when warmup is enabled.
    """
    runtime_config = config or load_runtime_config(environ=environ)
    catalog = build_catalog()
    if runtime_config.warmup_on_start:
        ComputeNumbaWarmupRunner(config=runtime_config, catalog=catalog).warmup()
    else:
        apply_numba_runtime_config(config=runtime_config)
    return InvocationHarness(
        catalog=catalog,
        max_compute_bytes_total=runtime_config.max_compute_bytes_total,
    )


@lru_cache(maxsize=1)
def default_harness() -> InvocationHarness:
    return build_invocation_harness(environ=os.environ)


__all__ = ["build_catalog", "build_invocation_harness", "default_harness"]

from __future__ import annotations

import logging
import os
from pathlib import Path

import numba
import pytest

from tabatch.adapters.outbound.compute_numba import (
    ComputeNumbaWarmupRunner,
    apply_numba_runtime_config,
    ensure_numba_cache_dir_writable,
    numba_kernels,
)
from tabatch.adapters.outbound.registry import StaticIndicatorCatalog
from tabatch.domain.definitions import all_defs
from tabatch.platform.config import TaBatchRuntimeConfig
from tabatch.wiring import build_invocation_harness


def _small_catalog() -> StaticIndicatorCatalog:
    wanted = ("sma", "cdl_doji", "mavp")
    defs = tuple(d for d in all_defs() if d.indicator_id.value in wanted)
    kernels = numba_kernels()
    return StaticIndicatorCatalog(defs=defs, kernels={key: kernels[key] for key in wanted})


def test_apply_numba_runtime_config_exports_cache_dir(tmp_path: Path) -> None:
    """
    Verify runtime wiring exports the cache directory to env and numba config.

    Args:
        tmp_path: pytest temporary path fixture.
    Returns:
        None.
    Assumptions:
        `numba.config.CACHE_DIR` is a writable module attribute.
    Raises:
        AssertionError: If env or numba config mismatch the configured path.
    Side Effects:
        Temporarily mutates process env and numba cache setting.
    """
    old_env_cache_dir = os.environ.get("NUMBA_CACHE_DIR")
    old_numba_cache_dir = numba.config.CACHE_DIR
    cache_dir = tmp_path / "numba-cache"
    try:
        effective = apply_numba_runtime_config(
            config=TaBatchRuntimeConfig(numba_cache_dir=cache_dir)
        )
        assert effective == cache_dir
        assert cache_dir.is_dir()
        assert os.environ["NUMBA_CACHE_DIR"] == str(cache_dir)
        assert numba.config.CACHE_DIR == str(cache_dir)
    finally:
        numba.config.CACHE_DIR = old_numba_cache_dir
        _restore_env("NUMBA_CACHE_DIR", old_env_cache_dir)


def test_apply_numba_runtime_config_without_cache_dir_is_a_no_op() -> None:
    old_env_cache_dir = os.environ.get("NUMBA_CACHE_DIR")
    assert apply_numba_runtime_config(config=TaBatchRuntimeConfig()) is None
    assert os.environ.get("NUMBA_CACHE_DIR") == old_env_cache_dir


def test_ensure_numba_cache_dir_writable_fails_when_path_is_file(tmp_path: Path) -> None:
    """
    Verify fail-fast behavior when the cache path points to a regular file.

    Args:
        tmp_path: pytest temporary path fixture.
    Returns:
        None.
    Assumptions:
        Creating a directory over an existing file raises `OSError`.
    Raises:
        AssertionError: If expected ValueError is not raised.
    Side Effects:
        Creates one temporary file.
    """
    invalid_path = tmp_path / "numba-cache-file"
    invalid_path.write_text("not-a-directory", encoding="utf-8")

    with pytest.raises(ValueError):
        ensure_numba_cache_dir_writable(path=invalid_path)


def test_warmup_runner_is_idempotent(caplog: pytest.LogCaptureFixture) -> None:
    """
    Verify warmup compiles catalog kernels once and logs a single completion record.

    Args:
        caplog: pytest log capture fixture.
    Returns:
        None.
    Assumptions:
        Config without cache dir leaves numba runtime state untouched.
    Raises:
        AssertionError: If warmup state or log records mismatch.
    Side Effects:
        JIT-compiles a few kernels.
    """
    runner = ComputeNumbaWarmupRunner(config=TaBatchRuntimeConfig(), catalog=_small_catalog())
    assert not runner.is_warm

    with caplog.at_level(logging.INFO, logger="tabatch.adapters.outbound.compute_numba.warmup"):
        runner.warmup()
        runner.warmup()

    records = [r for r in caplog.records if r.getMessage() == "compute_numba warmup complete"]
    assert runner.is_warm
    assert len(records) == 1
    assert records[0].kernels == 3
    assert records[0].numba_cache_dir is None


def test_build_invocation_harness_uses_configured_budget() -> None:
    harness = build_invocation_harness(
        environ={},
        config=TaBatchRuntimeConfig(max_compute_bytes_total=4096),
    )
    assert len(harness.definitions()) == 158
    assert harness.lookback("sma", {"time_period": 5}) == 4


def _restore_env(key: str, value: str | None) -> None:
    """
    Restore one environment variable to previous state.

    Args:
        key: Environment variable name.
        value: Previous value or None if missing.
    Returns:
        None.
    Assumptions:
        None.
    Raises:
        None.
    Side Effects:
        Mutates process environment.
    """
    if value is None:
        os.environ.pop(key, None)
        return
    os.environ[key] = value

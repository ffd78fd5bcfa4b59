"""
Runtime config loader for the tabatch compute runtime.

Related: tabatch.adapters.outbound.compute_numba.warmup,
  tabatch.wiring
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

_ENV_NAME_KEY = "TABATCH_ENV"
_CONFIG_PATH_KEY = "TABATCH_CONFIG"
_ALLOWED_ENVS = ("dev", "prod", "test")

_CACHE_DIR_ENV_KEYS = ("TABATCH_NUMBA_CACHE_DIR", "NUMBA_CACHE_DIR")
_MAX_TOTAL_ENV_KEYS = ("TABATCH_MAX_COMPUTE_BYTES_TOTAL",)
_WARMUP_ENV_KEYS = ("TABATCH_WARMUP",)

_DEFAULT_MAX_COMPUTE_BYTES_TOTAL = 2 * 1024**3
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class TaBatchRuntimeConfig:
    """
    Immutable runtime settings for kernel compilation and invocation limits.

    Related: tabatch.adapters.outbound.compute_numba.warmup,
      tabatch.application.services.invocation_harness
    """

    numba_cache_dir: Path | None = None
    max_compute_bytes_total: int = _DEFAULT_MAX_COMPUTE_BYTES_TOTAL
    warmup_on_start: bool = False

    def __post_init__(self) -> None:
        """
        Validate runtime config invariants.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            `None` cache dir keeps numba's own default location.
        Raises:
            ValueError: If the budget is non-positive or the cache dir is blank.
        Side Effects:
            Normalizes cache directory path to `Path`.
        """
        if self.max_compute_bytes_total <= 0:
            raise ValueError(
                "max_compute_bytes_total must be > 0, "
                f"got {self.max_compute_bytes_total}"
            )
        if self.numba_cache_dir is not None:
            if not str(self.numba_cache_dir).strip():
                raise ValueError("numba_cache_dir must be a non-empty path")
            object.__setattr__(self, "numba_cache_dir", Path(self.numba_cache_dir))


def load_runtime_config(*, environ: Mapping[str, str]) -> TaBatchRuntimeConfig:
    """
    Load runtime config from optional YAML and env overrides.

    Args:
        environ: Environment mapping used to resolve env and override values.
    Returns:
        TaBatchRuntimeConfig: Validated runtime settings.
    Assumptions:
        Optional `compute.numba` section lives in `tabatch.yaml`.
    Raises:
        FileNotFoundError: If an explicit `TABATCH_CONFIG` path does not exist.
        ValueError: If YAML or environment values are invalid.
    Side Effects:
        Reads at most one YAML file from disk.
    """
    config_path, required = _resolve_config_path(environ=environ)
    file_payload = _load_optional_numba_payload(path=config_path, required=required)

    numba_cache_dir = _resolve_path_setting(
        environ=environ,
        env_keys=_CACHE_DIR_ENV_KEYS,
        payload=file_payload,
        payload_key="numba_cache_dir",
    )
    max_compute_bytes_total = _resolve_int_setting(
        environ=environ,
        env_keys=_MAX_TOTAL_ENV_KEYS,
        payload=file_payload,
        payload_key="max_compute_bytes_total",
        default=_DEFAULT_MAX_COMPUTE_BYTES_TOTAL,
    )
    warmup_on_start = _resolve_bool_setting(
        environ=environ,
        env_keys=_WARMUP_ENV_KEYS,
        payload=file_payload,
        payload_key="warmup_on_start",
        default=False,
    )

    return TaBatchRuntimeConfig(
        numba_cache_dir=numba_cache_dir,
        max_compute_bytes_total=max_compute_bytes_total,
        warmup_on_start=warmup_on_start,
    )


def _resolve_config_path(*, environ: Mapping[str, str]) -> tuple[Path, bool]:
    """
    Resolve YAML path using explicit override or `TABATCH_ENV`.

    Args:
        environ: Environment mapping.
    Returns:
        tuple[Path, bool]: Config path and whether the file must exist.
    Assumptions:
        `TABATCH_CONFIG` has priority over env-derived path.
    Raises:
        ValueError: If env value is invalid.
    Side Effects:
        None.
    """
    override = environ.get(_CONFIG_PATH_KEY, "").strip()
    if override:
        return Path(override), True

    raw_env = environ.get(_ENV_NAME_KEY, "dev").strip().lower()
    if raw_env not in _ALLOWED_ENVS:
        raise ValueError(
            f"{_ENV_NAME_KEY} must be one of {_ALLOWED_ENVS}, got {raw_env!r}"
        )
    return Path("configs") / raw_env / "tabatch.yaml", False


def _load_optional_numba_payload(*, path: Path, required: bool) -> Mapping[str, Any]:
    """
    Load optional `compute.numba` mapping from YAML.

    Args:
        path: Config path.
        required: Raise when the file is missing instead of returning an empty mapping.
    Returns:
        Mapping[str, Any]: `compute.numba` mapping, or empty mapping.
    Assumptions:
        Unknown keys are ignored by this loader.
    Raises:
        FileNotFoundError: If a required YAML path does not exist.
        ValueError: If YAML structure is invalid.
    Side Effects:
        Reads one UTF-8 file from disk.
    """
    if not path.exists():
        if required:
            raise FileNotFoundError(f"tabatch config not found: {path}")
        return {}
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError("tabatch config must be a mapping at top-level")

    compute_map = raw.get("compute")
    if compute_map is None:
        return {}
    if not isinstance(compute_map, dict):
        raise ValueError("compute section must be a mapping")

    numba_map = compute_map.get("numba")
    if numba_map is None:
        return {}
    if not isinstance(numba_map, dict):
        raise ValueError("compute.numba section must be a mapping")
    return numba_map


def _resolve_int_setting(
    *,
    environ: Mapping[str, str],
    env_keys: tuple[str, ...],
    payload: Mapping[str, Any],
    payload_key: str,
    default: int,
) -> int:
    for env_key in env_keys:
        raw = environ.get(env_key, "").strip()
        if raw:
            return _parse_positive_int(raw, key=env_key)

    payload_value = payload.get(payload_key)
    if payload_value is None:
        return default

    if isinstance(payload_value, bool) or not isinstance(payload_value, int):
        raise ValueError(
            f"expected int for compute.numba.{payload_key}, "
            f"got {type(payload_value).__name__}"
        )
    if payload_value <= 0:
        raise ValueError(
            f"compute.numba.{payload_key} must be > 0, got {payload_value}"
        )
    return payload_value


def _resolve_path_setting(
    *,
    environ: Mapping[str, str],
    env_keys: tuple[str, ...],
    payload: Mapping[str, Any],
    payload_key: str,
) -> Path | None:
    for env_key in env_keys:
        raw = environ.get(env_key, "").strip()
        if raw:
            return Path(raw)

    payload_value = payload.get(payload_key)
    if payload_value is None:
        return None
    if not isinstance(payload_value, str):
        raise ValueError(
            f"expected string for compute.numba.{payload_key}, "
            f"got {type(payload_value).__name__}"
        )
    normalized = payload_value.strip()
    if not normalized:
        raise ValueError(f"compute.numba.{payload_key} must be non-empty")
    return Path(normalized)


def _resolve_bool_setting(
    *,
    environ: Mapping[str, str],
    env_keys: tuple[str, ...],
    payload: Mapping[str, Any],
    payload_key: str,
    default: bool,
) -> bool:
    """
    Resolve boolean setting from env -> payload -> default precedence.

    Args:
        environ: Environment mapping.
        env_keys: Candidate env variable names by priority.
        payload: Parsed YAML subsection.
        payload_key: YAML key name.
        default: Fallback default value.
    Returns:
        bool: Resolved flag.
    Assumptions:
        Env flags accept 1/0, true/false, yes/no, on/off in any case.
    Raises:
        ValueError: If a value is not a recognizable boolean.
    Side Effects:
        None.
    """
    for env_key in env_keys:
        raw = environ.get(env_key, "").strip().lower()
        if not raw:
            continue
        if raw in _TRUE_VALUES:
            return True
        if raw in _FALSE_VALUES:
            return False
        raise ValueError(f"{env_key} must be a boolean flag, got {raw!r}")

    payload_value = payload.get(payload_key)
    if payload_value is None:
        return default
    if not isinstance(payload_value, bool):
        raise ValueError(
            f"expected bool for compute.numba.{payload_key}, "
            f"got {type(payload_value).__name__}"
        )
    return payload_value


def _parse_positive_int(raw: str, *, key: str) -> int:
    try:
        parsed = int(raw, 10)
    except ValueError as error:
        raise ValueError(f"{key} must be int, got {raw!r}") from error
    if parsed <= 0:
        raise ValueError(f"{key} must be > 0, got {parsed}")
    return parsed


__all__ = [
    "TaBatchRuntimeConfig",
    "load_runtime_config",
]

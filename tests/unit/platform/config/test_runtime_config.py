from __future__ import annotations

from pathlib import Path

import pytest

from tabatch.platform.config import TaBatchRuntimeConfig, load_runtime_config

_REPO_ROOT = Path(__file__).resolve().parents[4]


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "tabatch.yaml"
    path.write_text(body, encoding="utf-8")
    return path


def test_load_runtime_config_reads_shipped_env_files() -> None:
    """
    Verify the shipped per-environment YAML files load into valid configs.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Repository ships `configs/{dev,test,prod}/tabatch.yaml`.
    Raises:
        AssertionError: If parsed values differ from the shipped files.
    Side Effects:
        Reads YAML files from disk.
    """
    test_config = load_runtime_config(
        environ={"TABATCH_CONFIG": str(_REPO_ROOT / "configs" / "test" / "tabatch.yaml")}
    )
    prod_config = load_runtime_config(
        environ={"TABATCH_CONFIG": str(_REPO_ROOT / "configs" / "prod" / "tabatch.yaml")}
    )

    assert test_config == TaBatchRuntimeConfig(max_compute_bytes_total=256 * 1024**2)
    assert prod_config.numba_cache_dir == Path("/var/cache/tabatch/numba")
    assert prod_config.max_compute_bytes_total == 4 * 1024**3
    assert prod_config.warmup_on_start is True


def test_env_overrides_take_precedence_over_yaml(tmp_path: Path) -> None:
    """
    Verify env > YAML > default precedence for every setting.

    Args:
        tmp_path: pytest temporary path fixture.
    Returns:
        None.
    Assumptions:
        `TABATCH_NUMBA_CACHE_DIR` outranks plain `NUMBA_CACHE_DIR`.
    Raises:
        AssertionError: If resolved values ignore the precedence order.
    Side Effects:
        Writes one temporary YAML file.
    """
    path = _write_config(
        tmp_path,
        "compute:\n"
        "  numba:\n"
        "    numba_cache_dir: yaml-cache\n"
        "    max_compute_bytes_total: 1024\n"
        "    warmup_on_start: true\n",
    )

    config = load_runtime_config(
        environ={
            "TABATCH_CONFIG": str(path),
            "TABATCH_NUMBA_CACHE_DIR": "/tmp/preferred",
            "NUMBA_CACHE_DIR": "/tmp/fallback",
            "TABATCH_MAX_COMPUTE_BYTES_TOTAL": "2048",
            "TABATCH_WARMUP": "off",
        }
    )

    assert config.numba_cache_dir == Path("/tmp/preferred")
    assert config.max_compute_bytes_total == 2048
    assert config.warmup_on_start is False

    from_yaml = load_runtime_config(environ={"TABATCH_CONFIG": str(path)})
    assert from_yaml.numba_cache_dir == Path("yaml-cache")
    assert from_yaml.max_compute_bytes_total == 1024
    assert from_yaml.warmup_on_start is True


def test_missing_default_file_falls_back_to_defaults(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.chdir(tmp_path)
    assert load_runtime_config(environ={}) == TaBatchRuntimeConfig()
    assert load_runtime_config(environ={"TABATCH_ENV": "PROD"}) == TaBatchRuntimeConfig()


def test_explicit_missing_config_path_fails(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_runtime_config(environ={"TABATCH_CONFIG": str(tmp_path / "absent.yaml")})


@pytest.mark.parametrize(
    ("environ", "body"),
    [
        ({"TABATCH_ENV": "staging"}, None),
        ({"TABATCH_MAX_COMPUTE_BYTES_TOTAL": "0"}, None),
        ({"TABATCH_MAX_COMPUTE_BYTES_TOTAL": "lots"}, None),
        ({"TABATCH_WARMUP": "maybe"}, None),
        ({}, "- just\n- a list\n"),
        ({}, "compute: 3\n"),
        ({}, "compute:\n  numba:\n    max_compute_bytes_total: true\n"),
        ({}, "compute:\n  numba:\n    max_compute_bytes_total: -5\n"),
        ({}, "compute:\n  numba:\n    numba_cache_dir: 12\n"),
        ({}, "compute:\n  numba:\n    warmup_on_start: 'yes'\n"),
    ],
)
def test_invalid_values_are_rejected(
    tmp_path: Path,
    environ: dict[str, str],
    body: str | None,
) -> None:
    """
    Verify malformed env values and YAML payloads fail fast with ValueError.

    Args:
        tmp_path: pytest temporary path fixture.
        environ: Environment overrides under test.
        body: Optional YAML body written to an explicit config path.
    Returns:
        None.
    Assumptions:
        None.
    Raises:
        AssertionError: If loading unexpectedly succeeds.
    Side Effects:
        Writes one temporary YAML file when `body` is given.
    """
    effective = dict(environ)
    if body is not None:
        effective["TABATCH_CONFIG"] = str(_write_config(tmp_path, body))
    else:
        effective["TABATCH_CONFIG"] = str(_write_config(tmp_path, ""))
    if "TABATCH_ENV" in environ:
        effective.pop("TABATCH_CONFIG")

    with pytest.raises(ValueError):
        load_runtime_config(environ=effective)


def test_runtime_config_validates_and_normalizes() -> None:
    config = TaBatchRuntimeConfig(numba_cache_dir="relative/cache")  # type: ignore[arg-type]
    assert config.numba_cache_dir == Path("relative/cache")
    with pytest.raises(ValueError):
        TaBatchRuntimeConfig(max_compute_bytes_total=0)
    with pytest.raises(ValueError):
        TaBatchRuntimeConfig(numba_cache_dir=Path(" "))

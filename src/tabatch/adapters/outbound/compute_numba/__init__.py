from .kernel_table import NumbaKernel, numba_kernels
from .warmup import (
    ComputeNumbaWarmupRunner,
    apply_numba_runtime_config,
    ensure_numba_cache_dir_writable,
)

__all__ = [
    "ComputeNumbaWarmupRunner",
    "NumbaKernel",
    "apply_numba_runtime_config",
    "ensure_numba_cache_dir_writable",
    "numba_kernels",
]

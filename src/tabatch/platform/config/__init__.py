from .runtime_config import TaBatchRuntimeConfig, load_runtime_config

__all__ = [
    "TaBatchRuntimeConfig",
    "load_runtime_config",
]

"""
Outbound adapters: numba kernels, numpy oracles and the static catalog.
"""

"""
Caller-facing batch indicator functions.
"""

from . import batch

__all__ = ["batch"]

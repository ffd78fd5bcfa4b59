from .invocation_harness import MAX_COMPUTE_BYTES_TOTAL_DEFAULT, InvocationHarness
from .parameter_binder import bind_parameters
from .result_packager import package_result
from .window_resolver import resolve_output_window

__all__ = [
    "InvocationHarness",
    "MAX_COMPUTE_BYTES_TOTAL_DEFAULT",
    "bind_parameters",
    "package_result",
    "resolve_output_window",
]

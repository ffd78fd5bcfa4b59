from __future__ import annotations


class IndicatorArgumentError(ValueError):
    """
    Raised when caller-supplied series or parameters are malformed.

    Covers mismatched input lengths, wrong input counts, non-numeric or non-1-D
    series, unknown or ill-typed parameters and out-of-domain parameter values.

    Related: ...application.services.invocation_harness,
      ...application.services.parameter_binder
    """

from __future__ import annotations


class UnknownIndicatorError(LookupError):
    """
    Raised when an indicator id is not available in the catalog.

    Related: ..entities.indicator_id, ...application.ports.registry.indicator_catalog
    """

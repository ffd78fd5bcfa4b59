from .static_indicator_catalog import StaticIndicatorCatalog

__all__ = ["StaticIndicatorCatalog"]

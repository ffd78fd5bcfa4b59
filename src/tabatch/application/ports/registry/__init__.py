from .indicator_catalog import IndicatorCatalog

__all__ = ["IndicatorCatalog"]

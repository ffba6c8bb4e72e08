"""Static reference data."""

from .regions import Region, LocationCatalog, BRAZILIAN_STATES

__all__ = ['Region', 'LocationCatalog', 'BRAZILIAN_STATES']

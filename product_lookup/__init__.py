"""
==============================================================================
Product Lookup
==============================================================================

Maps product-selection criteria to product ids and back, and resolves an
addon's option tree into display-ready selections.

==============================================================================
"""

from .catalog import CatalogIndex, EnrichedCriteria, ProductEntry, canonical_key
from .core import CatalogException
from .services import ProductLookupService, get_lookup_service, init_lookup_service

__version__ = "1.0.0"

__all__ = [
    "CatalogException",
    "CatalogIndex",
    "EnrichedCriteria",
    "ProductEntry",
    "ProductLookupService",
    "canonical_key",
    "get_lookup_service",
    "init_lookup_service",
]

"""
==============================================================================
Services Package
==============================================================================

Lookup façade over the catalog indexes.

Usage:
------
    from product_lookup.services import init_lookup_service

    service = init_lookup_service("data/catalog.json")
    product_id = service.get_product_id_by_criteria({"vendor": "fortigate", "cpu": "4-cpu"})

==============================================================================
"""

from .lookup_service import (
    ProductLookupService,
    get_lookup_service,
    init_lookup_service,
)

__all__ = [
    "ProductLookupService",
    "get_lookup_service",
    "init_lookup_service",
]

"""
==============================================================================
Product Lookup Service Module
==============================================================================

Public façade answering criteria/product queries over a catalog document.

This module implements:
- ProductLookupService: exact lookups in both directions, partial search,
  listing and tree-based enrichment
- init_lookup_service / get_lookup_service: process-wide instance

Result Shapes:
-------------
- get_criteria / search_by_partial_criteria / get_all_products return the
  stored criteria (plain)
- get_enriched_criteria / search_enriched additionally resolve the addon
  and its option tree (enriched)

Misses are returned as None or an empty list; only loading raises.

==============================================================================
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from product_lookup.catalog import (
    Addon,
    CatalogDocument,
    CatalogIndex,
    DuplicatePolicy,
    EnrichedCriteria,
    MatchCriteria,
    ProductEntry,
    load_document,
    parse_document,
    resolve_tree,
)
from product_lookup.config import get_settings
from product_lookup.core import exceptions


# Module logger
logger = logging.getLogger(__name__)


class ProductLookupService:
    """
    Bidirectional product lookup with option tree enrichment.

    Attributes:
        _index: Indexes over the current document
        _document: Current catalog document (None until initialized)
        _source: File the document was loaded from, if any

    Example:
        >>> service = ProductLookupService(document)
        >>> service.get_product_id_by_criteria({"cpu": "4-cpu", "vendor": "fortigate"})
        '8800190627841'
        >>> enriched = service.get_enriched_criteria("8800190627841")
        >>> enriched.selected_options["vendor"].label
        'Fortigate'
    """

    def __init__(
        self,
        document: Optional[Union[CatalogDocument, Mapping[str, Any]]] = None,
        duplicate_policy: Optional[Union[DuplicatePolicy, str]] = None
    ) -> None:
        """
        Initialize the lookup service.

        Args:
            document: Catalog document to index (queries miss until one is given)
            duplicate_policy: Collision handling (uses settings if None)
        """
        if duplicate_policy is None:
            duplicate_policy = get_settings().duplicate_policy

        self._policy = DuplicatePolicy.parse(duplicate_policy)
        self._index = CatalogIndex(self._policy)
        self._document: Optional[CatalogDocument] = None
        self._source: Optional[Path] = None

        if document is not None:
            self.initialize(document)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        duplicate_policy: Optional[Union[DuplicatePolicy, str]] = None
    ) -> ProductLookupService:
        """Create a service from a catalog JSON file."""
        service = cls(duplicate_policy=duplicate_policy)
        service.initialize(load_document(path))
        service._source = Path(path)
        return service

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def initialize(self, document: Union[CatalogDocument, Mapping[str, Any]]) -> None:
        """
        Index a new document, replacing any previous one.

        The previous index stays in place if the new document fails to load.

        Raises:
            CatalogException: MALFORMED_DOCUMENT or DUPLICATE_ENTRY
        """
        parsed = parse_document(document)
        index = CatalogIndex.build(parsed, self._policy)

        self._document = parsed
        self._index = index
        self._source = None

    def reload(self) -> None:
        """
        Re-read the catalog file this service was created from.

        Raises:
            CatalogException: CATALOG_NOT_LOADED if the service is not file-backed
        """
        if self._source is None:
            raise exceptions.catalog_not_loaded()

        source = self._source
        logger.info(f"Reloading product catalog from {source}...")
        self.initialize(load_document(source))
        self._source = source

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def is_initialized(self) -> bool:
        return self._document is not None

    @property
    def control_type(self) -> str:
        return self._document.attributes.control_type if self._document else ""

    @property
    def config_group_name(self) -> str:
        return self._document.attributes.config_group_name if self._document else ""

    # =========================================================================
    # EXACT LOOKUPS
    # =========================================================================

    def get_product_id_by_criteria(self, criteria: Mapping[str, str]) -> Optional[str]:
        """
        Get the product id for a full criteria set.

        Key order in ``criteria`` does not matter.

        Returns:
            Product id or None if no product has exactly these criteria
        """
        product_id = self._index.id_for_criteria(criteria)
        if product_id is None:
            logger.debug(f"No product for criteria {dict(criteria)}")
        return product_id

    def get_criteria(self, product_id: str) -> Optional[MatchCriteria]:
        """Get the stored criteria for a product id, or None."""
        return self._index.criteria_for_id(product_id)

    def get_enriched_criteria(self, product_id: str) -> Optional[EnrichedCriteria]:
        """
        Get criteria with the owning addon and the option chosen at each
        level of its tree.

        Returns:
            EnrichedCriteria, or None if the product or its addon is unknown
        """
        criteria = self._index.criteria_for_id(product_id)
        if criteria is None:
            return None

        product = self._index.product_for_id(product_id)
        if product is None or product.addon_type is None:
            return None

        addon = self._index.addon_for_id(product.addon_type)
        if addon is None:
            logger.debug(f"Product {product_id} references unknown addon '{product.addon_type}'")
            return None

        return self._enrich(product_id, product.addon_type, criteria, addon)

    def get_criteria_by_product_id(self, product_id: str) -> Optional[EnrichedCriteria]:
        """Alias of ``get_enriched_criteria``."""
        return self.get_enriched_criteria(product_id)

    def get_addon(self, addon_id: str) -> Optional[Addon]:
        """Get an addon definition by id, or None."""
        return self._index.addon_for_id(addon_id)

    # =========================================================================
    # SEARCH & LISTING
    # =========================================================================

    def search_by_partial_criteria(self, partial: Mapping[str, str]) -> List[ProductEntry]:
        """
        Get products whose criteria include every pair in ``partial``.

        An empty mapping returns every product.
        """
        return self._index.find_by_partial_criteria(partial)

    def search_enriched(self, partial: Mapping[str, str]) -> List[EnrichedCriteria]:
        """
        Enriched variant of ``search_by_partial_criteria``.

        Products whose addon cannot be resolved are left out.
        """
        results = []
        for entry in self._index.find_by_partial_criteria(partial):
            enriched = self.get_enriched_criteria(entry.id)
            if enriched is not None:
                results.append(enriched)
        return results

    def get_all_products(self) -> List[ProductEntry]:
        """Get every product id with its stored criteria."""
        return self._index.all_products()

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get_stats(self) -> Dict[str, Any]:
        """Get catalog statistics."""
        stats = self._index.get_stats()
        stats["control_type"] = self.control_type
        stats["config_group_name"] = self.config_group_name
        return stats

    @staticmethod
    def _enrich(
        product_id: str,
        addon_type: str,
        criteria: MatchCriteria,
        addon: Addon
    ) -> EnrichedCriteria:
        return EnrichedCriteria(
            product_id=product_id,
            addon_type=addon_type,
            match_criteria=criteria,
            selected_options=resolve_tree(addon.tree, criteria),
            addon=addon,
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

_service_instance: Optional[ProductLookupService] = None


def get_lookup_service() -> Optional[ProductLookupService]:
    """Get the global lookup service instance."""
    return _service_instance


def init_lookup_service(
    catalog_file: Optional[Union[str, Path]] = None
) -> ProductLookupService:
    """
    Initialize the global lookup service from a catalog file.

    Args:
        catalog_file: Path to the catalog JSON (uses settings if None)

    Returns:
        ProductLookupService instance
    """
    global _service_instance

    settings = get_settings()
    path = Path(catalog_file) if catalog_file is not None else settings.catalog_path

    _service_instance = ProductLookupService.from_file(
        path, duplicate_policy=settings.duplicate_policy
    )
    return _service_instance

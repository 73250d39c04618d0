"""
==============================================================================
Catalog Index Module
==============================================================================

Lookup indexes built once from a catalog document.

Indexes:
--------
- canonical criteria key -> product id
- product id -> match criteria
- product id -> product
- addon id -> addon

Duplicate ids or criteria keys are resolved by a DuplicatePolicy; the default
keeps the last entry without reporting it.

==============================================================================
"""

from __future__ import annotations

import enum
import logging
from collections import Counter
from typing import Any, Dict, List, Mapping, Optional, Union

from product_lookup.core import exceptions

from .keys import canonical_key
from .loader import parse_document
from .models import Addon, CatalogDocument, MatchCriteria, Product, ProductEntry


# Module logger
logger = logging.getLogger(__name__)


class DuplicatePolicy(str, enum.Enum):
    """How the index reacts to a repeated id or criteria key."""

    OVERWRITE = "overwrite"
    WARN = "warn"
    REJECT = "reject"

    @classmethod
    def parse(cls, value: Union[DuplicatePolicy, str]) -> DuplicatePolicy:
        """
        Resolve a policy from a member or a case-insensitive name.

        Raises:
            ValueError: If the name is not a known policy
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).lower().strip())


class CatalogIndex:
    """
    Immutable lookup indexes over one catalog document.

    Addons are registered before products. All reads are O(1) except
    ``all_products`` and ``find_by_partial_criteria``, which scan.

    Example:
        >>> index = CatalogIndex.build(document)
        >>> index.id_for_criteria({"vendor": "fortigate", "cpu": "4-cpu"})
        '8800190627841'
        >>> index.criteria_for_id("unknown") is None
        True
    """

    def __init__(
        self,
        duplicate_policy: Union[DuplicatePolicy, str] = DuplicatePolicy.OVERWRITE
    ) -> None:
        self._policy = DuplicatePolicy.parse(duplicate_policy)
        self._id_by_key: Dict[str, str] = {}
        self._criteria_by_id: Dict[str, MatchCriteria] = {}
        self._products_by_id: Dict[str, Product] = {}
        self._addons_by_id: Dict[str, Addon] = {}

    @classmethod
    def build(
        cls,
        document: Union[CatalogDocument, Mapping[str, Any]],
        duplicate_policy: Union[DuplicatePolicy, str] = DuplicatePolicy.OVERWRITE
    ) -> CatalogIndex:
        """
        Build an index from a catalog document.

        Args:
            document: Parsed document or raw mapping
            duplicate_policy: Collision handling

        Returns:
            Populated CatalogIndex

        Raises:
            CatalogException: MALFORMED_DOCUMENT, or DUPLICATE_ENTRY under
                the reject policy
        """
        index = cls(duplicate_policy)
        index._load(parse_document(document))
        return index

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def duplicate_policy(self) -> DuplicatePolicy:
        return self._policy

    @property
    def product_count(self) -> int:
        """Number of distinct product ids."""
        return len(self._criteria_by_id)

    @property
    def addon_count(self) -> int:
        """Number of distinct addon ids."""
        return len(self._addons_by_id)

    # =========================================================================
    # LOADING
    # =========================================================================

    def _load(self, document: CatalogDocument) -> None:
        """Register addons, then products."""
        attributes = document.attributes

        for addon in attributes.addons:
            self._register(self._addons_by_id, addon.id, addon, "addon id")

        for product in attributes.products:
            self._register(self._products_by_id, product.id, product, "product id")
            self._criteria_by_id[product.id] = dict(product.match_criteria)
            self._register(
                self._id_by_key,
                canonical_key(product.match_criteria),
                product.id,
                "criteria key"
            )

        logger.info(
            f"✅ Indexed {self.product_count} products across {self.addon_count} addons"
        )

    def _register(self, table: Dict[str, Any], key: str, value: Any, kind: str) -> None:
        """Insert into ``table`` applying the duplicate policy."""
        if key in table:
            if self._policy is DuplicatePolicy.REJECT:
                raise exceptions.duplicate_entry(kind, key)
            if self._policy is DuplicatePolicy.WARN:
                logger.warning(f"Duplicate {kind} '{key}', keeping the last entry")
            else:
                logger.debug(f"Duplicate {kind} '{key}' overwritten")

        table[key] = value

    # =========================================================================
    # LOOKUPS
    # =========================================================================

    def id_for_criteria(self, criteria: Mapping[str, str]) -> Optional[str]:
        """Get the product id whose criteria exactly match ``criteria``."""
        return self._id_by_key.get(canonical_key(criteria))

    def criteria_for_id(self, product_id: str) -> Optional[MatchCriteria]:
        """Get a copy of the stored criteria for a product id."""
        criteria = self._criteria_by_id.get(product_id)
        return dict(criteria) if criteria is not None else None

    def product_for_id(self, product_id: str) -> Optional[Product]:
        """Get the product record; its criteria are not the indexed copy."""
        return self._products_by_id.get(product_id)

    def addon_for_id(self, addon_id: str) -> Optional[Addon]:
        return self._addons_by_id.get(addon_id)

    def all_products(self) -> List[ProductEntry]:
        """Get every product id with its criteria, once each."""
        return [
            ProductEntry(id=product_id, criteria=dict(criteria))
            for product_id, criteria in self._criteria_by_id.items()
        ]

    def find_by_partial_criteria(self, partial: Mapping[str, str]) -> List[ProductEntry]:
        """
        Get products whose criteria contain every pair in ``partial``.

        Products may carry keys that ``partial`` does not mention; an empty
        ``partial`` matches every product.
        """
        return [
            ProductEntry(id=product_id, criteria=dict(criteria))
            for product_id, criteria in self._criteria_by_id.items()
            if all(
                key in criteria and criteria[key] == value
                for key, value in partial.items()
            )
        ]

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get_stats(self) -> Dict[str, Any]:
        """Get index statistics."""
        per_addon = Counter(
            product.addon_type for product in self._products_by_id.values()
            if product.addon_type is not None
        )

        return {
            "total_products": self.product_count,
            "total_addons": self.addon_count,
            "products_per_addon": dict(per_addon),
        }

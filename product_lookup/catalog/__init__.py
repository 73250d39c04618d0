"""
==============================================================================
Catalog Package - Product Criteria Indexes
==============================================================================

Catalog document models, canonical criteria keys, lookup indexes and option
tree resolution.

Classes:
--------
- CatalogDocument, Addon, Product, TreeNode, TreeOption: document models
- ProductEntry, EnrichedCriteria: lookup results
- CatalogIndex: indexes built from a document

==============================================================================
"""

from .models import (
    Addon,
    CatalogAttributes,
    CatalogDocument,
    EnrichedCriteria,
    MatchCriteria,
    Product,
    ProductEntry,
    TreeNode,
    TreeOption,
)
from .keys import canonical_key
from .loader import load_document, parse_document
from .index import CatalogIndex, DuplicatePolicy
from .tree import find_option, resolve_tree

__all__ = [
    "Addon",
    "CatalogAttributes",
    "CatalogDocument",
    "EnrichedCriteria",
    "MatchCriteria",
    "Product",
    "ProductEntry",
    "TreeNode",
    "TreeOption",
    "canonical_key",
    "load_document",
    "parse_document",
    "CatalogIndex",
    "DuplicatePolicy",
    "find_option",
    "resolve_tree",
]

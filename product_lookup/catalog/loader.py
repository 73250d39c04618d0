"""
==============================================================================
Catalog Document Loader
==============================================================================

Reads the catalog document from a mapping or a JSON file.

JSON Structure:
--------------
{
  "attributes": {
    "controlType": "...",
    "configGroupName": "...",
    "addons": [{"id": "firewall", "tree": {...}}, ...],
    "products": [{"id": "...", "addonType": "firewall", "matchCriteria": {...}}, ...]
  }
}

==============================================================================
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Union

from pydantic import ValidationError

from product_lookup.core import exceptions

from .models import CatalogDocument


# Module logger
logger = logging.getLogger(__name__)


def parse_document(data: Union[CatalogDocument, Mapping[str, Any]]) -> CatalogDocument:
    """
    Convert a raw mapping into a CatalogDocument.

    Args:
        data: Deserialized catalog document (or an already parsed one)

    Returns:
        Parsed CatalogDocument

    Raises:
        CatalogException: MALFORMED_DOCUMENT if the top-level structure or a
            required field is missing
    """
    if isinstance(data, CatalogDocument):
        return data

    if not isinstance(data, Mapping):
        raise exceptions.malformed_document(
            f"expected a mapping, got {type(data).__name__}"
        )

    attributes = data.get("attributes")
    if not isinstance(attributes, Mapping):
        raise exceptions.malformed_document("missing 'attributes' section")

    try:
        return CatalogDocument.model_validate(data)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False)
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ()))
        logger.error(f"Catalog document failed to parse at '{location}': {first.get('msg')}")
        raise exceptions.malformed_document(
            f"{first.get('msg', 'invalid structure')} at '{location}'",
            {"errors": errors}
        ) from e


def load_document(path: Union[str, Path]) -> CatalogDocument:
    """
    Load and parse a catalog document from a UTF-8 JSON file.

    Raises:
        CatalogException: CATALOG_FILE_NOT_FOUND or MALFORMED_DOCUMENT
    """
    path = Path(path)

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        logger.error(f"Catalog file not found: {path}")
        raise exceptions.catalog_file_not_found(str(path)) from e
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
        raise exceptions.malformed_document(
            f"invalid JSON ({e.msg})",
            {"path": str(path), "line": e.lineno, "column": e.colno}
        ) from e

    return parse_document(data)

"""
Catalog Exception Handling

Single CatalogException class for every fatal lookup condition. Lookup
misses are never raised; they come back as None or an empty list.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class CatalogException(Exception):
    """
    Unified exception for catalog load and lifecycle failures.

    Usage:
        raise CatalogException("Document has no attributes", "MALFORMED_DOCUMENT")
        raise CatalogException("Duplicate product", "DUPLICATE_ENTRY", {"key": "vendor:x"})

    Error Codes:
        Loading:
            - MALFORMED_DOCUMENT
            - CATALOG_FILE_NOT_FOUND
            - DUPLICATE_ENTRY (only under the "reject" policy)

        Lifecycle:
            - CATALOG_NOT_LOADED
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize catalog exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "MALFORMED_DOCUMENT")
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for logging or transport."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def malformed_document(reason: str, details: Optional[Dict[str, Any]] = None) -> CatalogException:
    """Create malformed document exception."""
    return CatalogException(
        f"Malformed catalog document: {reason}",
        "MALFORMED_DOCUMENT",
        details
    )


def catalog_file_not_found(path: str) -> CatalogException:
    """Create catalog file not found exception."""
    return CatalogException(
        f"Catalog file not found: {path}",
        "CATALOG_FILE_NOT_FOUND",
        {"path": path}
    )


def duplicate_entry(kind: str, key: str) -> CatalogException:
    """Create duplicate entry exception."""
    return CatalogException(
        f"Duplicate {kind} '{key}' in catalog document",
        "DUPLICATE_ENTRY",
        {"kind": kind, "key": key}
    )


def catalog_not_loaded() -> CatalogException:
    """Create catalog not loaded exception."""
    return CatalogException(
        "Product catalog not loaded",
        "CATALOG_NOT_LOADED"
    )

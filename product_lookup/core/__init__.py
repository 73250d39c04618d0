"""
==============================================================================
Core Package
==============================================================================

Exceptions and logging setup shared across the library.

==============================================================================
"""

from .exceptions import CatalogException
from .logging_config import configure_logging

__all__ = [
    "CatalogException",
    "configure_logging",
]

"""
==============================================================================
Configuration Package
==============================================================================

Centralized configuration management using Pydantic Settings.

Usage:
------
    from product_lookup.config import get_settings

    settings = get_settings()
    print(settings.catalog_file)

==============================================================================
"""

from .settings import DUPLICATE_POLICIES, Settings, get_settings

__all__ = [
    "DUPLICATE_POLICIES",
    "Settings",
    "get_settings",
]
